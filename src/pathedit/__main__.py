"""Allow ``python -m pathedit``."""

from pathedit.ui.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
