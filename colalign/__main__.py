import sys

from colalign.cli import main

sys.exit(main())
