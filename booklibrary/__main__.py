"""Run the book library CLI with ``python -m booklibrary``."""

import sys

from booklibrary.cli import main

if __name__ == "__main__":
    sys.exit(main())
