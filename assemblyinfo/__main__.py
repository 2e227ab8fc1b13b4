"""Entry point for ``python -m assemblyinfo``."""

import sys

from .codegen.cli_integration import main

if __name__ == "__main__":
    sys.exit(main())
