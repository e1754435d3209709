"""Allow running release-copier with ``python -m release_copier``."""

from .cli import main

if __name__ == "__main__":
    main()
