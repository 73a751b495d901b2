# --------------------------------------------------------------
# File: __main__.py
# Description: Punto de entrada `python -m passpot_bridge` sobre stdin/stdout.
# --------------------------------------------------------------

import sys

from passpot_bridge.services import serve
from passpot_core.config import configure_logging


def main() -> int:
    configure_logging()
    serve(sys.stdin, sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())
