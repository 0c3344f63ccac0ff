"""``syntax-tour config`` output through lib_layered_config's Rich renderer."""

from __future__ import annotations

import lib_log_rich.runtime
from lib_layered_config import Config
from lib_layered_config import OutputFormat as RenderFormat
from lib_layered_config import display_config as render_config
from rich.console import Console

from syntax_tour.domain.enums import OutputFormat


def display_config(
    config: Config,
    *,
    output_format: OutputFormat = OutputFormat.HUMAN,
    section: str | None = None,
    console: Console | None = None,
    profile: str | None = None,
) -> None:
    """Print ``config``, or only its ``section`` table, with provenance.

    Buffered log records are flushed first so they cannot land in the
    middle of the listing. ``profile`` is named in the provenance comments.

    Raises:
        ValueError: When ``section`` is not a top-level table of ``config``.
    """
    if lib_log_rich.runtime.is_initialised():
        lib_log_rich.runtime.flush()
    render_config(
        config,
        output_format=RenderFormat(output_format.value),
        section=section,
        profile=profile,
        console=console,
    )


__all__ = ["display_config"]
