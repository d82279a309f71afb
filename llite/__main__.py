"""Allow ``python -m llite``."""

from llite.cli import main

if __name__ == '__main__':
    main()
