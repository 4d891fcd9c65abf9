"""Module entrypoint for ``python -m repotree``.

All argument parsing and output happen in ``repotree.cli``.
"""

from .cli import main


if __name__ == "__main__":
    main()
