"""Module entrypoint for ``python -m lazypick``.

All argument parsing and runtime setup happen in ``lazypick.cli``.
"""

from .cli import main


if __name__ == "__main__":
    main()
