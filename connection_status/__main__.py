import sys

from connection_status.cli import main

if __name__ == "__main__":
    sys.exit(main())
