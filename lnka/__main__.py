"""Module entrypoint for ``python -m lnka``."""

from .cli import main


if __name__ == "__main__":
    main()
