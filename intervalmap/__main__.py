"""Entry point for ``python -m intervalmap``."""

from .main import main

if __name__ == "__main__":
    raise SystemExit(main())
