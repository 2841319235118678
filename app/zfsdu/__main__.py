"""Allow running zfsdu with ``python -m zfsdu``."""

from zfsdu.cli.main import app

if __name__ == "__main__":
    app()
