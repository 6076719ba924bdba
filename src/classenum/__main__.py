"""Allow ``python -m classenum``."""

from classenum.cli import main

if __name__ == "__main__":
    main()
