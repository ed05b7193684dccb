"""
Entry point for running the command line via `python main.py`.
"""

from docreader.interfaces.cli import main as cli_main


if __name__ == "__main__":
    raise SystemExit(cli_main())
