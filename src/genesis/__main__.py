"""Allow ``python -m genesis``."""

from .cli import main

if __name__ == "__main__":
    main()
