"""Allow running convy as `python -m convy`."""

from .cli import main

if __name__ == "__main__":
    main()
