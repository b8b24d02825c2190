from pathlib import Path

import pytest

from .types import (
    CliConfig,
    ConfigError,
    OutOfRangeError,
    UnknownSymbolError,
    VinculumError,
)


def test_errors() -> None:
    error = UnknownSymbolError("Q")
    assert error.symbol == "Q"
    assert "'Q'" in str(error)
    assert isinstance(error, VinculumError)
    assert isinstance(error, ValueError)
    assert issubclass(OutOfRangeError, VinculumError)
    assert issubclass(OutOfRangeError, ValueError)
    assert not issubclass(ConfigError, ValueError)


def test_config_defaults() -> None:
    config = CliConfig.open(None)
    assert config == CliConfig()
    assert config.separate_parts is False
    assert config.parser == "map"
    assert config.output_format == "text"


def test_config_open(tmp_path: Path) -> None:
    path = tmp_path / "vinculum.toml"
    path.write_text(
        '[vinculum]\nseparate_parts = true\nparser = "basic"\noutput_format = "JSON"\n'
    )
    assert CliConfig.open(path) == CliConfig(True, "basic", "JSON")

    # Settings may also live at the top level
    path.write_text('parser = "basic"\nunknown = 1\n')
    assert CliConfig.open(path) == CliConfig(parser="basic")


def test_config_errors(tmp_path: Path) -> None:
    path = tmp_path / "vinculum.toml"

    with pytest.raises(ConfigError):
        CliConfig.open(path)

    path.write_text("separate_parts = \n")
    with pytest.raises(ConfigError):
        CliConfig.open(path)

    path.write_text('separate_parts = "yes"\n')
    with pytest.raises(ConfigError):
        CliConfig.open(path)

    path.write_text('parser = "regex"\n')
    with pytest.raises(ConfigError):
        CliConfig.open(path)

    path.write_text('output_format = "xml"\n')
    with pytest.raises(ConfigError):
        CliConfig.open(path)

    path.write_text('vinculum = "map"\n')
    with pytest.raises(ConfigError):
        CliConfig.open(path)
