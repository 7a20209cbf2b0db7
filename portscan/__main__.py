import sys

from .scan_cli import main

sys.exit(main())
