"""Allow running tasklist with ``python -m tasklist``."""

from tasklist.cli import main

if __name__ == "__main__":
    main()
