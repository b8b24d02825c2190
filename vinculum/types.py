import enum
import logging
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, ClassVar, Dict, Optional, Tuple

import tomli

logger = logging.getLogger(__name__)


class VinculumError(Exception):
    pass


class OutOfRangeError(VinculumError, ValueError):
    pass


class UnknownSymbolError(VinculumError, ValueError):
    def __init__(self, symbol: str) -> None:
        super().__init__(f"'{symbol}' is not a known roman numeral symbol")
        self.symbol = symbol


class ConfigError(VinculumError):
    pass


class Role(enum.IntEnum):
    """The part a symbol plays within one magnitude tier. The value of each
    member is the index of the symbol it stands for."""

    LOW = 0
    MID = 1
    HIGH = 2


@dataclass(frozen=True)
class Tier:
    """The three symbols usable at one positional magnitude."""

    unit: str
    mid: str
    upper: str

    def symbols(self) -> Tuple[str, str, str]:
        return (self.unit, self.mid, self.upper)

    def symbol(self, role: Role) -> str:
        return self.symbols()[role]

    def role_of(self, symbol: str) -> Optional[Role]:
        try:
            return Role(self.symbols().index(symbol))
        except ValueError:
            return None


@dataclass
class CliConfig:
    OUTPUT_FORMATS: ClassVar[Tuple[str, ...]] = ("text", "JSON")
    PARSERS: ClassVar[Tuple[str, ...]] = ("map", "basic")

    separate_parts: bool = field(default=False)
    parser: str = field(default="map")
    output_format: str = field(default="text")

    @classmethod
    def open(cls, path: Optional[Path]) -> "CliConfig":
        """Load a configuration file. The settings may either live in a
        [vinculum] table or at the top level of the document."""
        if path is None:
            return cls()

        try:
            with path.open("rb") as f:
                data: Dict[str, Any] = tomli.load(f)
        except OSError as err:
            raise ConfigError(f"Cannot open {path}: {err.strerror}") from err
        except tomli.TOMLDecodeError as err:
            raise ConfigError(f"Invalid TOML in {path}: {err}") from err

        table = data.get("vinculum", data)
        if not isinstance(table, dict):
            raise ConfigError(f"{path}: 'vinculum' must be a table")

        return cls.load(table)

    @classmethod
    def load(cls, table: Dict[str, Any]) -> "CliConfig":
        known = {f.name: f for f in fields(cls)}
        kwargs: Dict[str, Any] = {}
        for key, value in table.items():
            if key not in known:
                logger.warning("Ignoring unknown configuration key: %s", key)
                continue

            expected = bool if key == "separate_parts" else str
            if not isinstance(value, expected):
                raise ConfigError(
                    f"Configuration key '{key}' must be of type {expected.__name__}"
                )
            kwargs[key] = value

        config = cls(**kwargs)
        if config.parser not in cls.PARSERS:
            raise ConfigError(
                f"parser must be one of {', '.join(cls.PARSERS)}; got '{config.parser}'"
            )
        if config.output_format not in cls.OUTPUT_FORMATS:
            raise ConfigError(
                f"output_format must be one of {', '.join(cls.OUTPUT_FORMATS)}; got '{config.output_format}'"
            )

        return config
