import sys

from src.demo.cli import main


if __name__ == "__main__":
    sys.exit(main())
