"""
Command-line entry for the framegif package.

Usage
-----
$ python -m framegif build path/to/frames -o out.gif --fps 25
"""

from .cli.framegif_cli import main


if __name__ == "__main__":
    raise SystemExit(main())
