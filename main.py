import sys

from kodama.cli import main


if __name__ == "__main__":
    sys.exit(main())
