"""Module entrypoint for ``python -m knot``."""

from .cli import main


if __name__ == "__main__":
    main()
