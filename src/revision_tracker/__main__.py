"""Allow ``python -m revision_tracker``."""

from revision_tracker.cli.main import app

app()
