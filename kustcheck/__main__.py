import sys

from kustcheck.app_shell.cli import main

sys.exit(main())
