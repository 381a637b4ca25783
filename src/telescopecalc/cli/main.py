"""CLI main module with subcommands for calc and validate.

Usage:
    python -m telescopecalc.cli calc -d 200 -f 1000 -e 10 [--barlow 2] [--reducer 0.63]
    python -m telescopecalc.cli calc --config scope.yaml -e 25 --lang es
    python -m telescopecalc.cli validate --config scope.yaml
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

import yaml

from ..core.config import load_config, parse_setup
from ..core.errors import ConfigError, InputParseError, OutOfRangeError
from ..core.logging import get_logger, setup_logging
from ..messages import DEFAULT_LANG, MESSAGES, error_message
from ..report import TelescopeReport

logger = get_logger(__name__)

# CLI option dest -> TelescopeSetup field
_SETUP_ARGS = {
    "diameter": "aperture_mm",
    "focal_length": "focal_length_mm",
    "eyepiece": "eyepiece_focal_length_mm",
    "barlow": "barlow",
    "reducer": "focal_reducer",
}


def _report_error(error: InputParseError | ConfigError, lang: str) -> int:
    data = {"error": type(error).__name__, "detail": str(error)}
    if isinstance(error, ConfigError):
        data["field"] = error.field
    if isinstance(error, OutOfRangeError):
        data["value"] = error.value
    logger.warning("Calculation rejected", data)
    print(error_message(error, lang), file=sys.stderr)
    return 1


def _report_load_failure(error: Exception, path: Path) -> int:
    logger.error(
        "Config file could not be read",
        {"error": type(error).__name__, "detail": str(error), "path": path},
    )
    print(f"Error loading config: {error}", file=sys.stderr)
    return 2


def cmd_calc(args: argparse.Namespace) -> int:
    """Compute and print the derived quantities of a telescope setup.

    Values given on the command line override those read from --config.
    Empty text such as ``-d ""`` is malformed input and gets the input-type
    message, not the range message.
    """
    raw: dict[str, object] = {}
    try:
        if args.config:
            raw.update(load_config(args.config).model_dump(exclude_none=True))
        for dest, field in _SETUP_ARGS.items():
            value = getattr(args, dest)
            if value is not None:
                raw[field] = value
        logger.debug("Parsed calculator input", raw)

        cfg = parse_setup(raw).to_configuration()
    # InputParseError and OutOfRangeError are ValueErrors; match them first.
    except (InputParseError, ConfigError) as e:
        return _report_error(e, args.lang)
    except (OSError, yaml.YAMLError, ValueError) as e:
        return _report_load_failure(e, args.config)

    report = TelescopeReport.from_configuration(cfg)
    logger.info("Computed telescope report", report.to_dict())

    if args.json:
        print(json.dumps({"inputs": cfg.as_dict(), "results": report.to_dict()}, indent=2))
        return 0

    width = max(len(label) for label, _ in report.render())
    for label, text in report.render():
        print(f"{label + ':':{width + 1}} {text}")
    return 0


def cmd_validate(args: argparse.Namespace) -> int:
    """Check that a config file describes a valid optical configuration."""
    try:
        setup = load_config(args.config)
        cfg = setup.to_configuration()
    except (InputParseError, ConfigError) as e:
        return _report_error(e, args.lang)
    except (OSError, yaml.YAMLError, ValueError) as e:
        return _report_load_failure(e, args.config)

    print("OK:", args.config)
    for name, value in cfg.as_dict().items():
        print(f"  {name:22} {value}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "--lang",
        choices=sorted(MESSAGES),
        default=DEFAULT_LANG,
        help=f"Language of error messages (default: {DEFAULT_LANG})",
    )
    common.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Write JSON lines log to this file",
    )
    common.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable debug logging",
    )

    parser = argparse.ArgumentParser(
        prog="telescopecalc",
        description="Telescope magnification, focal ratio and resolving power calculator",
    )

    subparsers = parser.add_subparsers(
        dest="command",
        help="Available commands",
        required=True,
    )

    # Calc subcommand
    parser_calc = subparsers.add_parser(
        "calc",
        parents=[common],
        help="Compute derived quantities of a telescope/eyepiece setup",
    )
    parser_calc.add_argument("--diameter", "-d", help="Aperture diameter in mm")
    parser_calc.add_argument("--focal-length", "-f", help="Telescope focal length in mm")
    parser_calc.add_argument("--eyepiece", "-e", help="Eyepiece focal length in mm")
    parser_calc.add_argument("--barlow", help="Barlow lens factor (omit when not used)")
    parser_calc.add_argument("--reducer", help="Focal reducer factor (omit when not used)")
    parser_calc.add_argument(
        "--config",
        "-c",
        type=Path,
        default=None,
        help="Path to YAML/JSON setup file",
    )
    parser_calc.add_argument("--json", action="store_true", help="Print raw values as JSON")
    parser_calc.set_defaults(func=cmd_calc)

    # Validate subcommand
    parser_validate = subparsers.add_parser(
        "validate",
        parents=[common],
        help="Check a YAML/JSON setup file",
    )
    parser_validate.add_argument(
        "--config",
        "-c",
        type=Path,
        required=True,
        help="Path to YAML/JSON setup file",
    )
    parser_validate.set_defaults(func=cmd_validate)

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.log_file, logging.DEBUG if args.verbose else logging.WARNING)
    return int(args.func(args) or 0)


if __name__ == "__main__":
    sys.exit(main())
