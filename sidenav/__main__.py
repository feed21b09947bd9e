"""Module entrypoint for ``python -m sidenav``.

All argument parsing and engine setup happen in ``sidenav.cli``.
"""

from .cli import main


if __name__ == "__main__":
    main()
