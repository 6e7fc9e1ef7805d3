import sys

from multi_interceptors.cli import main

if __name__ == "__main__":
    sys.exit(main())
