"""Module entrypoint for ``python -m dirsbytime``.

This keeps module-mode execution behavior identical to the console script.
All argument parsing happens in ``dirsbytime.cli``.
"""

from .cli import run


if __name__ == "__main__":
    run()
