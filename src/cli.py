"""Command line entry point for the Next.js + Prisma project setup."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from src.setup.pipeline import SetupError, SetupOptions, run_setup
from src.setup.prompts import ConsolePrompter
from src.setup.report import SetupReport
from src.setup.runner import SubprocessRunner

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="next-prisma-setup",
        description="Create a Next.js + Prisma project, commit it and start the dev services.",
    )
    parser.add_argument("--folder", help="Project folder (prompted when omitted, './' for cwd).")
    parser.add_argument("--db-name", help="Database name (defaults to the folder name or 'mydb').")
    parser.add_argument(
        "--prompt-db-name",
        action="store_true",
        help="Ask for the database name instead of deriving it.",
    )
    parser.add_argument(
        "--no-autoprefixer",
        dest="autoprefixer",
        action="store_const",
        const=False,
        default=None,
        help="Do not install autoprefixer or write postcss.config.js.",
    )
    parser.add_argument(
        "--no-custom-model",
        dest="custom_model",
        action="store_const",
        const=False,
        default=None,
        help="Skip the custom Prisma model question and write the default User model.",
    )
    parser.add_argument("--no-ide", action="store_true", help="Do not open the project in the IDE.")
    parser.add_argument(
        "--no-launch",
        action="store_true",
        help="Do not start Prisma Studio and the dev server.",
    )
    parser.add_argument("--skip-git", action="store_true", help="Skip git init and the initial commit.")
    parser.add_argument("--commit-message", help="Message for the initial commit.")
    parser.add_argument("--report", metavar="PATH", help="Write a JSON report of every step to PATH.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log every command that is run.")
    return parser


def _options_from_args(args: argparse.Namespace) -> SetupOptions:
    return SetupOptions(
        folder=args.folder,
        db_name=args.db_name,
        prompt_db_name=bool(args.prompt_db_name),
        autoprefixer=args.autoprefixer,
        custom_model=args.custom_model,
        open_ide=not args.no_ide,
        launch=not args.no_launch,
        git=not args.skip_git,
        commit_message=args.commit_message,
    )


def _write_report(path: str | None, report: SetupReport | None) -> None:
    if not path or report is None:
        return
    Path(path).write_text(report.model_dump_json(indent=2) + "\n", encoding="utf-8")


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(message)s",
    )

    report = SetupReport()
    try:
        run_setup(
            _options_from_args(args),
            runner=SubprocessRunner(),
            prompter=ConsolePrompter(),
            report=report,
        )
    except SetupError as exc:
        logger.error("Error: %s. Exiting...", exc)
        _write_report(args.report, exc.report)
        return 1
    except KeyboardInterrupt:
        logger.error("Interrupted.")
        report.aborted = True
        report.abort_reason = "interrupted"
        _write_report(args.report, report)
        return 130

    _write_report(args.report, report)
    return 0


if __name__ == "__main__":
    sys.exit(main())
