"""Output mode selection.

A ServiceResult is shown as Rich text for humans, as a single status
line with ``--quiet``, or as the JSON dump of the model with ``--json``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel

from orderflow.output.renderers import render_quiet, render_result

if TYPE_CHECKING:
    from orderflow.services.result import ServiceResult


class OutputSettings(BaseModel):
    """Presentation flags resolved from the CLI."""

    model_config = {"frozen": True}

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    currency: str = "UAH"

    @property
    def streams_messages(self) -> bool:
        """Whether processing messages are echoed live to stdout."""
        return not (self.json_output or self.quiet)


def format_result(result: ServiceResult, *, settings: OutputSettings | None = None) -> str:
    """Format a ServiceResult for display according to *settings*."""
    settings = settings or OutputSettings()
    if settings.json_output:
        return result.model_dump_json(indent=2)
    if settings.quiet:
        return render_quiet(result)
    return render_result(result, verbose=settings.verbose, currency=settings.currency)
