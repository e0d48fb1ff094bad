"""Allow ``python -m tagsort``."""

import sys

from tagsort.ui.cli import main

if __name__ == "__main__":
    sys.exit(main())
