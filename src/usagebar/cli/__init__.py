"""CLI for usagebar."""

# Import commands to register them with the app
# These imports have side effects (registering commands with @app.command())
from usagebar.cli.commands import status as _status_module  # noqa: F401
from usagebar.cli.commands import themes as _themes_module  # noqa: F401
from usagebar.cli.main import app, main


__all__ = ["app", "main"]
