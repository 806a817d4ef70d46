"""Allow ``python -m manifestsync``."""

from __future__ import annotations

import sys

from manifestsync.cli import main

if __name__ == "__main__":
    sys.exit(main())
