"""Allow ``python -m orderflow``."""

from orderflow.cli import cli

cli()
