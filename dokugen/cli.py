"""CLI entrypoints for dokugen commands."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from . import __version__
from .client import GenerationClient
from .config import load_config
from .errors import ConfigError, GenerationError, NoFilesFoundError, PromptInterrupted
from .logging import configure_logging, get_logger
from .orchestrator import Orchestrator
from .report import render_summary

INTERRUPTED_MESSAGE = "Process interrupted. Any partial changes will be discarded"


def _add_verbose_option(
    parser: argparse.ArgumentParser, *, suppress_default: bool = False
) -> None:
    kwargs: dict[str, object] = {
        "action": "store_true",
        "help": "Increase log verbosity for troubleshooting.",
    }
    if suppress_default:
        kwargs["default"] = argparse.SUPPRESS
    else:
        kwargs["default"] = False
    parser.add_argument(
        "-v",
        "--verbose",
        **kwargs,
    )


def _add_path_argument(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "path",
        nargs="?",
        default=".",
        help="Path to the project root (defaults to current directory).",
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dokugen",
        description="Automatically generate high-quality README for your application",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    _add_verbose_option(parser)
    subparsers = parser.add_subparsers(dest="command", required=True)

    generate_parser = subparsers.add_parser(
        "generate",
        help="Scan project and generate a high-quality README.md",
    )
    _add_verbose_option(generate_parser, suppress_default=True)
    _add_path_argument(generate_parser)
    generate_parser.add_argument(
        "-y",
        "--yes",
        action="store_true",
        help="Answer yes to every question (overwrite README, include contribution guidelines).",
    )
    generate_parser.add_argument(
        "--endpoint",
        default=None,
        help="README generation service URL (overrides .dokugen.yml and DOKUGEN_API_URL).",
    )

    inspect_parser = subparsers.add_parser(
        "inspect",
        help="Show what dokugen detects about a project without generating anything.",
    )
    _add_verbose_option(inspect_parser, suppress_default=True)
    _add_path_argument(inspect_parser)
    inspect_parser.add_argument(
        "--json",
        action="store_true",
        help="Print the introspection result as JSON.",
    )
    inspect_parser.add_argument(
        "--snippets",
        action="store_true",
        help="Include the extracted code snippets in the output.",
    )

    serve_parser = subparsers.add_parser(
        "serve",
        help="Run the introspection HTTP service.",
    )
    _add_verbose_option(serve_parser, suppress_default=True)
    serve_parser.add_argument("--host", default="127.0.0.1", help="Interface to bind.")
    serve_parser.add_argument("--port", type=int, default=8000, help="Port to listen on.")

    return parser


def _build_orchestrator(args: argparse.Namespace) -> Orchestrator:
    endpoint = getattr(args, "endpoint", None)
    if not endpoint:
        return Orchestrator()
    config = load_config(Path(args.path))
    client = GenerationClient(endpoint, request_timeout=config.api.request_timeout)
    return Orchestrator(client=client)


def _run_generate(parser: argparse.ArgumentParser, args: argparse.Namespace) -> None:
    orchestrator = _build_orchestrator(args)
    try:
        outcome = orchestrator.run_generate(args.path, assume_yes=bool(args.yes))
    except NoFilesFoundError as exc:
        parser.exit(0, f"{exc}\n")
    except (FileNotFoundError, NotADirectoryError, PermissionError, ConfigError) as exc:
        parser.exit(1, f"{exc}\n")
    except PromptInterrupted:
        parser.exit(0, "User interrupted the process. README Generation Interrupted.\n")
    except GenerationError as exc:
        parser.exit(1, f"Error Generating README: {exc}\nRun with --verbose for more details.\n")
    if outcome is None:
        print("README was not modified.")
        return
    print(f"README written to {_relativize(outcome.path)}")


def _run_inspect(parser: argparse.ArgumentParser, args: argparse.Namespace) -> None:
    orchestrator = Orchestrator()
    try:
        result = orchestrator.run_inspect(args.path)
    except NoFilesFoundError as exc:
        parser.exit(0, f"{exc}\n")
    except (FileNotFoundError, NotADirectoryError, PermissionError, ConfigError) as exc:
        parser.exit(1, f"{exc}\n")
    if args.json:
        payload = result.to_payload(include_snippets=bool(args.snippets))
        print(json.dumps(payload, indent=2))
    else:
        print(render_summary(result, include_snippets=bool(args.snippets)), end="")


def _run_serve(args: argparse.Namespace) -> None:
    from .service import run_service

    run_service(host=args.host, port=args.port)


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for dokugen commands."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=bool(args.verbose))
    logger = get_logger("cli")

    try:
        if args.command == "generate":
            _run_generate(parser, args)
        elif args.command == "inspect":
            _run_inspect(parser, args)
        elif args.command == "serve":
            _run_serve(args)
        else:  # pragma: no cover - argparse enforces choices
            parser.exit(1, "Unknown command\n")
    except KeyboardInterrupt:
        parser.exit(0, f"\n{INTERRUPTED_MESSAGE}\n")
    except Exception as exc:  # pragma: no cover - last-resort reporting
        logger.debug("Unhandled error", exc_info=True)
        parser.exit(1, f"dokugen {args.command} failed: {exc}\nRun with --verbose for more details.\n")


def _relativize(path: Path) -> str:
    try:
        return str(path.relative_to(Path.cwd()))
    except ValueError:
        return str(path)


if __name__ == "__main__":
    main(sys.argv[1:])
