"""
Package entry point.

Allows running the application via:

    python -m courseplanner

This simply forwards execution to courseplanner.cli.main().
"""

from courseplanner.cli import main

if __name__ == "__main__":
    main()
