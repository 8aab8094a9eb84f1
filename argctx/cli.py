import os
import sys
import logging

from typing import Mapping, Optional
from . import const

_logger = logging.getLogger(__name__)


def argv(
    args: Optional[list[str]] = None, environ: Optional[Mapping[str, str]] = None
) -> list[str]:
    """
    Builds the token list of the current process.

    Args:
        args: The arguments after the program name, defaults to `sys.argv[1:]`.
        environ: The environment to read extra arguments from, defaults to `os.environ`.

    Returns:
        `ARGV0`, followed by the extra arguments from `ARGCTX_EXTRA_ARGS`,
        followed by `args`.
    """
    if args is None:
        args = sys.argv[1:]
    if environ is None:
        environ = os.environ

    extra = environ.get(const.EXTRA_ARGS_ENV, None)
    extraArgs = extra.split() if extra else []
    if extraArgs:
        _logger.debug(f"Extra arguments from {const.EXTRA_ARGS_ENV}: {extraArgs}")

    return [const.ARGV0] + extraArgs + list(args)
