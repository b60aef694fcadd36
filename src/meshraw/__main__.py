"""Main entry point for running meshraw as a module."""

import sys

if __name__ == "__main__":
    from meshraw.cli.app import main
    sys.exit(main())
