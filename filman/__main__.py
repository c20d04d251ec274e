"""Module entrypoint for ``python -m filman``."""

from .cli import main


if __name__ == "__main__":
    main()
