"""CLI entrypoint for srcdoc."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import List

from .config import ConfigError, load_config
from .discovery import find_files_to_document
from .llm.providers import build_provider
from .logging import configure_logging, get_logger
from .orchestrator import Orchestrator
from .report import render_report

_EXAMPLES = """\
examples:
  srcdoc src/components/TodoCard.tsx          document one file interactively
  srcdoc --api src/components/TodoCard.tsx    document one file through the API
  srcdoc --all                                document every file under src/
  srcdoc --dir src/components                 document one directory
  srcdoc --all --force                        regenerate everything

Interactive mode (default) prints the prompt and waits for the pasted reply,
terminated by a line containing END. API mode (--api) needs ANTHROPIC_API_KEY.

exit status:
  0  success; with --all or --dir, also when some files failed (they are listed)
  1  the single path argument failed, the start directory is missing,
     or the configuration is invalid
"""


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="srcdoc",
        description="Generate categorized markdown documentation for source files.",
        epilog=_EXAMPLES,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    target = parser.add_mutually_exclusive_group()
    target.add_argument(
        "path",
        nargs="?",
        help="Source file to document.",
    )
    target.add_argument(
        "--all",
        action="store_true",
        help="Document every recognized file under the configured source directory.",
    )
    target.add_argument(
        "--dir",
        metavar="PATH",
        help="Document every recognized file under PATH.",
    )
    parser.add_argument(
        "--force",
        action="store_true",
        help="Regenerate documentation even when it already exists.",
    )
    parser.add_argument(
        "--api",
        action="store_true",
        help="Call the API directly instead of capturing the reply interactively.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=False,
        help="Increase log verbosity for troubleshooting.",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        help="Also write log records to this file.",
    )
    return parser


def main(argv: List[str] | None = None) -> None:
    """CLI entrypoint for srcdoc."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    if not (args.path or args.all or args.dir):
        parser.print_help()
        parser.exit(0)

    configure_logging(verbose=bool(args.verbose), log_file=args.log_file)
    logger = get_logger("cli")

    try:
        config = load_config(Path.cwd(), use_api=bool(args.api))
    except ConfigError as exc:
        parser.exit(1, f"srcdoc: {exc}\n")

    logger.info("API mode enabled" if config.use_api else "Interactive mode enabled")
    if args.force:
        logger.info("Force mode enabled: existing documentation will be regenerated")

    orchestrator = Orchestrator(config, build_provider(config))

    try:
        if args.path:
            paths = [args.path]
        else:
            directory = Path(args.dir) if args.dir else config.source_root
            paths = find_files_to_document(directory, config.extensions, config.excluded_dirs)
            print(f"{len(paths)} files found in {args.dir or config.source_dir}")
        report = orchestrator.run(paths, force=bool(args.force))
    except (FileNotFoundError, NotADirectoryError) as exc:
        parser.exit(1, f"srcdoc: {exc}\n")
    except Exception as exc:  # pragma: no cover
        parser.exit(1, f"srcdoc failed: {exc}\nRun with --verbose for more details.\n")

    for line in render_report(report, force=bool(args.force), docs_dir=config.docs_dir):
        print(line)

    if args.path and report.failed:
        parser.exit(1)


if __name__ == "__main__":
    main(sys.argv[1:])
