import json
import logging

from typing import Optional

from . import cli, const, vt100
from .context import Context, resolve
from .flag import Flag, FlagType, FlagValue, loadFlags
from .result import Err, ErrorKind, FlagError, Ok, Result

_logger = logging.getLogger(__name__)

__all__ = [
    "Context",
    "Err",
    "ErrorKind",
    "Flag",
    "FlagError",
    "FlagType",
    "FlagValue",
    "Ok",
    "Result",
    "loadFlags",
    "main",
    "resolve",
]


class logger:
    @staticmethod
    def setup(verbose: bool):
        if verbose:
            logging.basicConfig(
                level=logging.DEBUG,
                format=f"{vt100.CYAN}%(asctime)s{vt100.RESET} {vt100.YELLOW}%(levelname)s{vt100.RESET} %(name)s: %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        else:
            logging.basicConfig(
                level=logging.WARNING,
                format="%(asctime)s %(levelname)s %(name)s: %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )


VERBOSE = Flag("verbose", "Enable verbose logging", FlagType.BOOL, ["v"])

FLAGS = [
    Flag("flags", "Path to a JSON or TOML flag manifest", FlagType.STRING, ["f"]),
    VERBOSE,
    Flag("help", "Show usage information", FlagType.BOOL, ["h"]),
    Flag("version", "Show current version", FlagType.BOOL),
]


def usage():
    print(f"Usage: {const.ARGV0} --flags <manifest> [-v] -- [tokens...]")


def printHelp():
    vt100.title(const.ARGV0)
    print(vt100.indent(const.DESCRIPTION))
    print()
    usage()
    print()
    for flag in FLAGS:
        print(vt100.indent(f"{vt100.GREEN}{', '.join(flag.triggers())}{vt100.RESET} {flag.usage}"))


def main(args: Optional[list[str]] = None) -> int:
    try:
        tokens = cli.argv(args)
        if "--" in tokens:
            split = tokens.index("--")
            own, rest = tokens[:split], tokens[split + 1 :]
        else:
            own, rest = tokens, None

        logger.setup(any(t in own for t in VERBOSE.triggers()))
        ctx = Context(own, FLAGS)

        if ctx.boolFlag("help"):
            printHelp()
            return 0

        if ctx.boolFlag("version"):
            print(f"argctx v{const.VERSION_STR}")
            return 0

        manifest = ctx.stringFlag("flags")
        if isinstance(manifest, Err) and manifest.kind == ErrorKind.NOT_FOUND:
            raise RuntimeError("No flag manifest given, use --flags <manifest>")

        flags = loadFlags(manifest.unwrap())
        if rest is None:
            rest = ctx.args[1:]

        print(json.dumps(Context(rest, flags).toDict(), indent=2, allow_nan=False))
        return 0

    except RuntimeError as e:
        _logger.debug("Command failed", exc_info=True)
        vt100.error(str(e))
        usage()
        return 1

    except KeyboardInterrupt:
        print()
        return 1
