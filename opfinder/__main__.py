"""Allow running opfinder as a module: ``python -m opfinder``."""

from opfinder.cli import main

if __name__ == "__main__":
    main()
