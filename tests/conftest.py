"""Shared fixtures for colalign tests."""

import pytest


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Run every test in an empty directory with an empty home directory."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("USERPROFILE", str(home))
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def declarations():
    """Lines whose columns differ in width."""
    return [
        "int a = 111; // a",
        "int aa = 11; // aa",
        "int aaa = 1; // aaa",
    ]
