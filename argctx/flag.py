import json
import logging
import dataclasses as dt

from enum import Enum
from pathlib import Path
from typing import Any, Optional
from dataclasses_json import DataClassJsonMixin

from . import const
from .result import Err, ErrorKind, Ok, Result

_logger = logging.getLogger(__name__)


class FlagType(Enum):
    """
    Enum representing the declared type of a flag.
    """

    BOOL = "bool"
    STRING = "string"
    INT = "int"
    FLOAT = "float"


@dt.dataclass(frozen=True)
class FlagValue:
    """
    A typed flag value, tagged with the type it was converted to.
    """

    type: FlagType
    value: bool | str | int | float


@dt.dataclass
class Flag(DataClassJsonMixin):
    """
    Declaration of an expected command-line flag.
    """

    name: str
    """Name used for lookups, triggered by `--<name>`."""
    usage: str = ""
    """Usage text, not used for parsing."""
    flagType: FlagType = dt.field(default=FlagType.BOOL)
    """Type the value token is converted to."""
    alias: list[str] = dt.field(default_factory=list)
    """Short aliases, each triggered by `-<alias>`."""

    def isBool(self) -> bool:
        return self.flagType == FlagType.BOOL

    def triggers(self) -> list[str]:
        return [f"--{self.name}"] + [f"-{a}" for a in self.alias]

    def optionIndex(self, tokens: list[str]) -> Optional[int]:
        """
        Locates the first token triggering this flag.

        Args:
            tokens: The tokens to search, in their current state.

        Returns:
            The index of the trigger token, or None if the flag is absent.
        """
        triggers = self.triggers()
        for i, tok in enumerate(tokens):
            if tok in triggers:
                return i
        return None

    def value(self, raw: Optional[str]) -> Result[FlagValue]:
        """
        Converts a raw value token into a typed value.

        Args:
            raw: The token following the trigger, or None if there was none.
                 Ignored for boolean flags.

        Returns:
            Ok with the typed value, or Err describing why the conversion failed.
        """
        if self.flagType == FlagType.BOOL:
            return Ok(FlagValue(FlagType.BOOL, True))

        if raw is None:
            return Err(f"Flag '--{self.name}' requires a value", ErrorKind.MISSING_VALUE)

        if self.flagType == FlagType.STRING:
            return Ok(FlagValue(FlagType.STRING, raw))

        # Numbers are taken as typed, without padding or digit separators
        if raw.strip() == raw and "_" not in raw:
            match self.flagType:
                case FlagType.INT:
                    try:
                        return Ok(FlagValue(FlagType.INT, int(raw)))
                    except ValueError:
                        pass
                case FlagType.FLOAT:
                    try:
                        return Ok(FlagValue(FlagType.FLOAT, float(raw)))
                    except ValueError:
                        pass

        return Err(f"Invalid {self.flagType.value} value '{raw}' for flag '--{self.name}'")


def _read(path: Path) -> Any:
    try:
        with open(path, "r", encoding="utf8") as f:
            if path.suffix == ".toml":
                try:
                    import tomllib
                except ImportError:
                    raise RuntimeError(
                        "In order to read TOML files, you need to upgrade to Python3.11 or higher."
                    )
                return tomllib.loads(f.read())
            else:
                return json.loads(f.read())
    except RuntimeError:
        raise
    except Exception as e:
        raise RuntimeError(f"Failed to read {path}: {e}")


def _isDeclaration(entry: Any) -> bool:
    if not isinstance(entry, dict) or not isinstance(entry.get("name"), str):
        return False
    alias = entry.get("alias", [])
    return isinstance(alias, list) and all(isinstance(a, str) for a in alias)


def loadFlags(path: Path | str) -> list[Flag]:
    """
    Loads flag declarations from a JSON or TOML manifest.

    Args:
        path: Path to the manifest file.

    Returns:
        The declared flags, in manifest order.

    Raises:
        RuntimeError: If the manifest cannot be read or is malformed.
    """
    path = Path(path)
    if path.suffix not in const.MANIFEST_SUFFIXES:
        raise RuntimeError(f"Unsupported manifest format '{path.suffix}' for {path}")

    _logger.debug(f"Loading flags from '{path}'")
    data = _read(path)

    if not isinstance(data, dict) or not isinstance(data.get("flags"), list):
        raise RuntimeError(f"Manifest '{path}' should contain a 'flags' list")

    flags: list[Flag] = []
    for entry in data["flags"]:
        if not _isDeclaration(entry):
            raise RuntimeError(f"Invalid flag declaration in {path}: {entry}")
        try:
            flags.append(Flag.from_dict(entry))
        except (ValueError, KeyError, TypeError) as e:
            raise RuntimeError(f"Invalid flag '{entry['name']}' in {path}: {e}")

    return flags
