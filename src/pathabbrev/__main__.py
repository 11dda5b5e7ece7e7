"""Allow ``python -m pathabbrev``."""

import sys

from pathabbrev.ui.cli import main

if __name__ == "__main__":
    sys.exit(main())
