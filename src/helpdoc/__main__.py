"""Entry point for `python -m helpdoc`.

Error reporting lives in cli.main(), shared with the installed console script.
"""

from __future__ import annotations

import sys

from .cli import main


if __name__ == "__main__":
    sys.exit(main())
