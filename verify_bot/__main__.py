"""Allow ``python -m verify_bot``."""

from .cli.main import app

app()
