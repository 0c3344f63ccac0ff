"""Exit codes of the ``syntax-tour`` command.

Commands end failed runs with ``SystemExit`` carrying one of these values.
Usage errors (bad option, malformed ``--set``, unsafe ``--profile``) exit
with Click's own ``2``. Signal codes are produced by lib_cli_exit_tools and
listed for reference.
"""

from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    """Process exit status.

    * 0: the line(s) were printed
    * 1: unexpected crash
    * 22: ``config --section`` named a section that does not exist (EINVAL)
    * 78: ``[menu]`` or ``[player]`` unusable (EX_CONFIG from sysexits.h)
    * 130/141/143: interrupted, broken pipe, terminated

    Example:
        >>> int(ExitCode.UNKNOWN_SECTION)
        22
        >>> ExitCode(78).name
        'CONFIG_ERROR'
    """

    SUCCESS = 0
    GENERAL_ERROR = 1
    UNKNOWN_SECTION = 22
    CONFIG_ERROR = 78
    SIGNAL_INT = 130
    BROKEN_PIPE = 141
    SIGNAL_TERM = 143


__all__ = ["ExitCode"]
