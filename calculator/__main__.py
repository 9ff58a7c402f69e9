import sys

from calculator.app_shell.cli import main

sys.exit(main())
