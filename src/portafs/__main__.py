"""Entry point for ``python -m portafs``."""

from portafs.ui.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
