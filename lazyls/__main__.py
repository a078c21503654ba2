"""Module entrypoint for ``python -m lazyls``.

All argument parsing and output happen in ``lazyls.cli``.
"""

from .cli import main


if __name__ == "__main__":
    main()
