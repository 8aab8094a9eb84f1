import math
import logging

from typing import Any, Optional

from .flag import Flag, FlagType, FlagValue
from .result import Err, ErrorKind, Ok, Result

_logger = logging.getLogger(__name__)

Outcomes = dict[str, Result[FlagValue]]


def resolve(
    tokens: list[str], flags: Optional[list[Flag]]
) -> tuple[list[str], Optional[Outcomes]]:
    """
    Extracts declared flags and their values from a list of tokens.

    Flags are processed in declaration order against the same shrinking
    list, so each lookup sees the tokens left by the previous ones.

    Args:
        tokens: The raw command-line tokens. Left untouched.
        flags: The declared flags, or None if the command declares none.

    Returns:
        The remaining positional arguments, and the outcome of each flag
        found in the tokens keyed by flag name (None when no flags were declared).
    """
    args = tokens[:]
    if flags is None:
        return args, None

    outcomes: Outcomes = {}
    for flag in flags:
        index = flag.optionIndex(args)
        if index is None:
            _logger.debug(f"Flag '{flag.name}' not present")
            continue

        args.pop(index)

        raw: Optional[str] = None
        if not flag.isBool() and index < len(args):
            raw = args.pop(index)

        outcome = flag.value(raw)
        if isinstance(outcome, Err):
            _logger.debug(f"Flag '{flag.name}' failed: {outcome.message}")
        else:
            _logger.debug(f"Flag '{flag.name}' resolved to {outcome.value.value!r}")

        # Later declarations with the same name win
        outcomes[flag.name] = outcome

    return args, outcomes


class Context:
    """
    The positional arguments and typed flag values of a command invocation.
    """

    args: list[str]
    """Tokens left once flags and their values have been removed."""
    _flags: Optional[Outcomes]

    def __init__(self, args: list[str], flags: Optional[list[Flag]] = None):
        self.args, self._flags = resolve(args, flags)

    def _lookup(self, name: str) -> Optional[Result[FlagValue]]:
        if self._flags is None:
            return None
        return self._flags.get(name)

    def _typed(self, name: str, typ: FlagType) -> Result[Any]:
        match self._lookup(name):
            case Ok(FlagValue(t, value)) if t == typ:
                return Ok(value)
            case Err() as err:
                return err
            case None:
                return Err(f"Flag '{name}' not found", ErrorKind.NOT_FOUND)
            case _:
                return Err(
                    f"Flag '{name}' is not of type {typ.value}", ErrorKind.TYPE_MISMATCH
                )

    def hasFlag(self, name: str) -> bool:
        return self._lookup(name) is not None

    def boolFlag(self, name: str) -> bool:
        """
        Returns True only if the flag is a boolean flag that was given.
        """
        return self._typed(name, FlagType.BOOL).unwrapOr(False) is True

    def stringFlag(self, name: str) -> Result[str]:
        """
        Returns the value of a string flag.

        Returns:
            Ok with the value, the conversion error recorded for the flag,
            or an Err of kind NOT_FOUND or TYPE_MISMATCH.
        """
        return self._typed(name, FlagType.STRING)

    def intFlag(self, name: str) -> Result[int]:
        """Returns the value of an int flag, see `stringFlag`."""
        return self._typed(name, FlagType.INT)

    def floatFlag(self, name: str) -> Result[float]:
        """Returns the value of a float flag, see `stringFlag`."""
        return self._typed(name, FlagType.FLOAT)

    def toDict(self) -> dict[str, Any]:
        flags: Optional[dict[str, Any]] = None
        if self._flags is not None:
            flags = {}
            for name, outcome in self._flags.items():
                match outcome:
                    case Ok(FlagValue(FlagType.FLOAT, value)) if not math.isfinite(value):
                        # JSON has no inf or nan
                        flags[name] = {"value": str(value)}
                    case Ok(FlagValue(_, value)):
                        flags[name] = {"value": value}
                    case Err(message, kind):
                        flags[name] = {"error": message, "kind": kind.value}

        return {"args": self.args[:], "flags": flags}
