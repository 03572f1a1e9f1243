"""CLI entrypoints for iconbuild commands."""

from __future__ import annotations

import argparse
import asyncio
import sys
from dataclasses import replace
from pathlib import Path

from .config import CONFIG_FILENAME, NAMING_STYLES, ConfigError, load_config
from .errors import IconBuildError
from .logging import configure_logging
from .orchestrator import Orchestrator


def _add_logging_options(
    parser: argparse.ArgumentParser, *, suppress_default: bool = False
) -> None:
    # Subcommands suppress their defaults so a flag given before the command survives.
    default: object = argparse.SUPPRESS if suppress_default else False
    group = parser.add_mutually_exclusive_group()
    group.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=default,
        help="Log every pipeline step, tagged with the stage that emitted it.",
    )
    group.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        default=default,
        help="Only log warnings and errors.",
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="iconbuild",
        description="Generate React icon components from a directory of SVG files.",
    )
    _add_logging_options(parser)
    subparsers = parser.add_subparsers(dest="command", required=True)

    build_parser = subparsers.add_parser(
        "build",
        help="Regenerate the output directory from SVG sources.",
    )
    _add_logging_options(build_parser, suppress_default=True)
    build_parser.add_argument(
        "input_dir",
        nargs="?",
        help="Directory containing SVG icons (defaults to input_dir in the config file).",
    )
    build_parser.add_argument(
        "output_dir",
        nargs="?",
        help="Directory that receives the generated components (cleared first).",
    )
    build_parser.add_argument(
        "--typescript",
        action="store_true",
        default=None,
        help="Emit .tsx components and an index.ts module.",
    )
    build_parser.add_argument(
        "--config",
        default=".",
        help=f"Path to {CONFIG_FILENAME} or the directory containing it.",
    )
    build_parser.add_argument(
        "--pattern",
        help="Glob used to discover icons below the input directory (default: **/*.svg).",
    )
    build_parser.add_argument(
        "--naming",
        choices=NAMING_STYLES,
        help="How file names become component names.",
    )
    build_parser.add_argument(
        "--no-format",
        action="store_true",
        help="Skip running prettier over generated components.",
    )
    build_parser.add_argument(
        "--log-file",
        type=Path,
        help="Also write logs to this file.",
    )

    serve_parser = subparsers.add_parser(
        "serve",
        help="Run the HTTP build service (requires the service extra).",
    )
    _add_logging_options(serve_parser, suppress_default=True)
    serve_parser.add_argument("--host", default="127.0.0.1", help="Interface to bind.")
    serve_parser.add_argument("--port", type=int, default=8000, help="Port to listen on.")
    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for iconbuild commands."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(
        verbose=bool(args.verbose),
        quiet=bool(args.quiet),
        log_file=getattr(args, "log_file", None),
    )

    if args.command == "build":
        try:
            config = load_config(
                Path(args.config),
                input_dir=args.input_dir,
                output_dir=args.output_dir,
            )
            config = config.with_overrides(
                typescript=args.typescript,
                pattern=args.pattern,
                naming=args.naming,
            )
            if args.no_format:
                config = replace(config, formatter=replace(config.formatter, enabled=False))
            result = asyncio.run(Orchestrator().build(config))
        except ConfigError as exc:
            parser.exit(1, f"Invalid configuration: {exc}\n")
        except IconBuildError as exc:
            parser.exit(1, f"iconbuild build failed: {exc}\nRun with --verbose for more details.\n")
        print(f"Generated {result.icon_count} icons in {_relativize(config.output_dir)}")
    elif args.command == "serve":  # pragma: no cover - integration path
        from .service.app import run_service

        run_service(host=args.host, port=args.port)
    else:  # pragma: no cover - argparse enforces choices
        parser.exit(1, "Unknown command\n")


def _relativize(path: Path) -> str:
    try:
        return str(path.resolve().relative_to(Path.cwd()))
    except ValueError:
        return str(path)


if __name__ == "__main__":
    main(sys.argv[1:])
