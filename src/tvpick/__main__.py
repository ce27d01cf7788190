"""Allow running as python -m tvpick."""

from tvpick.cli import app

app()
