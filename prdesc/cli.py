"""CLI entrypoints for prdesc commands."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .config import ConfigError, load_config
from .git.github import FetchError, PullRequestNotFoundError, RateLimitError
from .logging import configure_logging, get_logger
from .models import Scale
from .pipeline import Pipeline
from .templating import TemplateNotFoundError

logger = get_logger("cli")

RULE_WIDTH = 80


def _add_logging_options(
    parser: argparse.ArgumentParser, *, suppress_default: bool = False
) -> None:
    # Subcommand copies must not overwrite a value given before the subcommand.
    verbose_default: object = argparse.SUPPRESS if suppress_default else False
    log_file_default: object = argparse.SUPPRESS if suppress_default else None
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=verbose_default,
        help="Increase log verbosity for troubleshooting.",
    )
    parser.add_argument(
        "--log-file",
        default=log_file_default,
        help="Also write a DEBUG-level log to this file.",
    )


def _add_common_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("number", help="Pull request number.")
    parser.add_argument(
        "--config",
        default=".",
        help="Path to .prdesc.yml or its directory (defaults to current directory).",
    )
    parser.add_argument(
        "-o",
        "--output",
        default=None,
        help="Write the result to this file instead of printing it.",
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="prdesc",
        description="Generate pull request descriptions scaled to the size and kind of change.",
    )
    _add_logging_options(parser)
    subparsers = parser.add_subparsers(dest="command", required=True)

    describe_parser = subparsers.add_parser(
        "describe",
        help="Generate a description for a pull request.",
    )
    _add_logging_options(describe_parser, suppress_default=True)
    _add_common_options(describe_parser)
    scale_group = describe_parser.add_mutually_exclusive_group()
    scale_group.add_argument(
        "--minimal",
        dest="scale",
        action="store_const",
        const=Scale.MINIMAL.value,
        help="Force the minimal template.",
    )
    scale_group.add_argument(
        "--standard",
        dest="scale",
        action="store_const",
        const=Scale.STANDARD.value,
        help="Force the standard template.",
    )

    review_parser = subparsers.add_parser(
        "review",
        help="Generate a reviewer checklist listing the changed files.",
    )
    _add_logging_options(review_parser, suppress_default=True)
    _add_common_options(review_parser)

    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for prdesc commands."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    log_file = Path(args.log_file) if args.log_file else None
    configure_logging(verbose=bool(args.verbose), log_file=log_file)

    try:
        config = load_config(Path(args.config))
    except ConfigError as exc:
        parser.exit(1, f"{exc}\n")

    logger.debug("Configuration root: %s (locale=%s)", config.root, config.locale)
    pipeline = Pipeline.from_config(config)

    try:
        if args.command == "describe":
            outcome = pipeline.describe(args.number, getattr(args, "scale", None))
            _emit(outcome.text, args.output, title="📝 Generated PR description")
        elif args.command == "review":
            review = pipeline.review(args.number)
            _emit(review, args.output, title="🔍 Generated review checklist")
        else:  # pragma: no cover - argparse enforces choices
            parser.exit(1, "Unknown command\n")
    except PullRequestNotFoundError:
        parser.exit(
            1,
            f"PR #{args.number} was not found.\n"
            "Check that:\n"
            "- the PR number is correct\n"
            "- you have access to the target repository\n"
            "- the GitHub CLI (gh) is installed and authenticated\n",
        )
    except RateLimitError as exc:
        parser.exit(
            1,
            f"{exc}\nWait a while and run the command again.\n",
        )
    except FetchError as exc:
        parser.exit(
            1,
            f"prdesc {args.command} failed: {exc}\nRun with --verbose for more details.\n",
        )
    except TemplateNotFoundError as exc:
        parser.exit(1, f"{exc}\n")


def _emit(text: str, output: str | None, *, title: str) -> None:
    if output:
        target = Path(output)
        target.write_text(text, encoding="utf-8")
        print(f"Written to {_relativize(target)}")
        return
    rule = "=" * RULE_WIDTH
    print()
    print(rule)
    print(title)
    print(rule)
    print(text.rstrip("\n"))
    print(rule)


def _relativize(path: Path) -> str:
    try:
        return str(path.resolve().relative_to(Path.cwd()))
    except ValueError:
        return str(path)


if __name__ == "__main__":
    main(sys.argv[1:])
