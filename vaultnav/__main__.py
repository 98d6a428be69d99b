"""Entry point for ``python -m vaultnav``."""

import sys

from vaultnav.cli import main

if __name__ == "__main__":
    sys.exit(main())
