"""Support ``python -m capkit``.

Usage::

    python -m capkit doctor
    python -m capkit doctor ios
"""

from __future__ import annotations


def main() -> None:
    from capkit.cli import main as cli_main
    cli_main()


if __name__ == "__main__":
    main()
