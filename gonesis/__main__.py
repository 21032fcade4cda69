"""Allow ``python -m gonesis``."""

from gonesis.pipeline import main

if __name__ == "__main__":
    main()
