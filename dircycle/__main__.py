"""Module entrypoint for ``python -m dircycle``.

All argument parsing happens in ``dircycle.cli``.
"""

from .cli import main


if __name__ == "__main__":
    raise SystemExit(main())
