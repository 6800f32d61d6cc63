"""CLI entrypoints for repodoc commands."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from .config import ConfigError, load_config
from .github import GitHubAPIError, InvalidRepositoryURL
from .logging import configure_logging, level_name
from .orchestrator import Orchestrator
from .rendering import STYLE_LABELS


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


def _add_config_option(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--config",
        default=None,
        help="Path to a .repodoc.yml file or the directory containing it.",
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="repodoc",
        description="Profile public GitHub repositories and generate README files.",
    )
    _add_verbose_option(parser)
    parser.add_argument(
        "--log-file",
        default=None,
        help="Also write DEBUG-level logs to this file.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    generate_parser = subparsers.add_parser(
        "generate",
        help="Generate a README for a GitHub repository.",
    )
    _add_verbose_option(generate_parser, suppress_default=True)
    _add_config_option(generate_parser)
    generate_parser.add_argument("url", help="GitHub repository URL (https://github.com/owner/repo).")
    generate_parser.add_argument(
        "--style",
        choices=sorted(STYLE_LABELS),
        default=None,
        help="Header style label (defaults to the configured style).",
    )
    generate_parser.add_argument(
        "-o",
        "--output",
        default=None,
        help="Write the README to this path instead of stdout.",
    )

    profile_parser = subparsers.add_parser(
        "profile",
        help="Print the repository profile as JSON.",
    )
    _add_verbose_option(profile_parser, suppress_default=True)
    _add_config_option(profile_parser)
    profile_parser.add_argument("url", help="GitHub repository URL (https://github.com/owner/repo).")

    serve_parser = subparsers.add_parser(
        "serve",
        help="Run the HTTP service.",
    )
    _add_verbose_option(serve_parser, suppress_default=True)
    serve_parser.add_argument("--host", default="127.0.0.1", help="Interface to bind.")
    serve_parser.add_argument("--port", type=int, default=8000, help="Port to listen on.")

    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for repodoc commands."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    verbose = bool(args.verbose)
    log_file = Path(args.log_file) if args.log_file else None
    configure_logging(verbose=verbose, log_file=log_file)

    if args.command == "serve":
        from .service import run_service

        run_service(host=args.host, port=args.port, log_level=level_name(verbose))
        return

    try:
        config_path = Path(args.config) if args.config else None
        orchestrator = Orchestrator(config=load_config(config_path))
    except ConfigError as exc:
        parser.exit(1, f"{exc}\n")

    if args.command == "generate":
        try:
            result = orchestrator.generate(args.url, style=args.style)
        except InvalidRepositoryURL as exc:
            parser.exit(1, f"{exc}\n")
        except GitHubAPIError as exc:
            parser.exit(1, f"repodoc generate failed: {exc}\nRun with --verbose for more details.\n")
        if args.output:
            output = Path(args.output)
            output.write_text(result.document.content, encoding="utf-8")
            print(f"README ({result.document.style_label}) written to {_relativize(output)}")
        else:
            sys.stdout.write(result.document.content)
    elif args.command == "profile":
        try:
            profile = orchestrator.analyze(args.url)
        except InvalidRepositoryURL as exc:
            parser.exit(1, f"{exc}\n")
        except GitHubAPIError as exc:
            parser.exit(1, f"repodoc profile failed: {exc}\nRun with --verbose for more details.\n")
        print(json.dumps(profile.to_dict(), indent=2))
    else:  # pragma: no cover - argparse enforces choices
        parser.exit(1, "Unknown command\n")


def _relativize(path: Path) -> str:
    try:
        return str(path.resolve().relative_to(Path.cwd()))
    except ValueError:
        return str(path)


if __name__ == "__main__":
    main(sys.argv[1:])
