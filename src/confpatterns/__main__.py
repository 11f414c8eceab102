"""Allow ``python -m confpatterns``."""
import sys

from confpatterns.cli.main import main

if __name__ == "__main__":
    sys.exit(main())
