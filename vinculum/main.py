"""Vinculum.

Usage:
  vinculum to-roman [--separate] [--config=<path>] <number>...
  vinculum to-arabic [--basic] [--config=<path>] <numeral>...
  vinculum check [--config=<path>] <numeral>...

Options:
  -h --help                 Show this screen.
  --separate                Write one space-separated part per decimal digit.
  --basic                   Always parse with the subtractive rule, ignoring part separators.
  --config=<path>           Path to a TOML configuration file.

Environment variables:
  VINCULUM_OUTPUT_FORMAT    JSON, text where text is default

"""

import json
import logging
import os
import sys
from pathlib import Path
from typing import Callable, Iterable, Optional, Sequence, Union

from docopt import docopt

from . import __version__
from .converter import to_arabic_basic, to_arabic_by_map, to_roman
from .types import CliConfig, ConfigError, VinculumError
from .validator import is_correct_roman_number

logger = logging.getLogger(__name__)

EXIT_STATUS_ERROR = 2

Result = Union[str, int, bool]


class Reporter:
    def __init__(self, output_format: str = "text") -> None:
        self.output_format = output_format
        self.total_results = 0
        self.total_errors = 0

    def on_result(self, value: str, result: Result) -> None:
        self.total_results += 1
        if self.output_format == "JSON":
            print(json.dumps({"input": value, "output": result}))
        else:
            print(f"{value} -> {result}")

    def on_error(self, value: str, error: Exception) -> None:
        self.total_errors += 1
        if self.output_format == "JSON":
            print(json.dumps({"input": value, "error": str(error)}))
        else:
            print(f"ERROR({value}): {error}")

    def process(self, values: Iterable[str], handler: Callable[[str], Result]) -> None:
        """Apply a handler to each value, reporting failures without stopping."""
        for value in values:
            try:
                result = handler(value)
            except (ValueError, VinculumError) as err:
                self.on_error(value, err)
                continue

            self.on_result(value, result)


def main(argv: Optional[Sequence[str]] = None) -> None:
    # docopt will terminate here and display usage instructions if vinculum is run improperly
    args = docopt(__doc__, argv=argv)

    logging.basicConfig(level=logging.INFO)
    logger.info(f"Vinculum {__version__} starting")

    config_path = Path(args["--config"]) if args["--config"] else None
    try:
        config = CliConfig.open(config_path)
    except ConfigError as err:
        logger.error(str(err))
        sys.exit(1)

    output_format = os.environ.get("VINCULUM_OUTPUT_FORMAT", config.output_format)
    reporter = Reporter(output_format)

    if args["to-roman"]:
        separate = bool(args["--separate"]) or config.separate_parts
        reporter.process(
            args["<number>"], lambda value: to_roman(int(value), separate)
        )
    elif args["to-arabic"]:
        if args["--basic"] or config.parser == "basic":
            reporter.process(args["<numeral>"], to_arabic_basic)
        else:
            reporter.process(args["<numeral>"], to_arabic_by_map)
    elif args["check"]:
        reporter.process(args["<numeral>"], is_correct_roman_number)

    sys.exit(EXIT_STATUS_ERROR if reporter.total_errors > 0 else 0)
