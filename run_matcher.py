"""This module provides the command-line entry point for the keyword
matcher.
"""

import argparse
import sys
import time
from datetime import datetime
from pathlib import Path
from typing import Optional

from src.matcher.config import (
    ConfigBoolParsingError,
    ConfigNotFoundError,
    load_config_file,
)
from src.matcher.keyword_loader import (
    FileReadError,
    build_matcher,
    extract_from_file,
)
from src.matcher.keyword_matcher import KeywordMatcher
from src.matcher.logger import log, setup_logging

CONFIG_PATH = Path(__file__).parent / "config.txt"


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    """Parse the command-line arguments.

    Args:
        argv (Optional[list[str]]): The arguments, defaults to sys.argv.

    Returns:
        argparse.Namespace: The parsed arguments.

    """
    parser = argparse.ArgumentParser(
        description="Report which keywords occur as whole words in documents.",
    )
    parser.add_argument(
        "documents",
        nargs="*",
        type=Path,
        help="Paths of the documents to scan.",
    )
    parser.add_argument(
        "--text",
        type=str,
        default=None,
        help="Scan this literal text instead of (or as well as) files.",
    )
    parser.add_argument(
        "--config_path",
        type=str,
        default=str(CONFIG_PATH),
        help="Optional path to the config file.",
        required=False,
    )
    parser.add_argument(
        "--keywords",
        action="append",
        default=None,
        help="Keyword to match; repeat to add more. Overrides the keywords "
        "file of the configuration.",
    )
    parser.add_argument(
        "--case_sensitive",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Match keywords with their exact case. Overrides the "
        "case_sensitive setting of the configuration; with --keywords, "
        "case is ignored unless this flag is given.",
    )
    parser.add_argument(
        "--log_details",
        action="store_true",
        help="Log every extraction with its execution time.",
    )
    return parser.parse_args(argv)


def _report(
    matcher: KeywordMatcher,
    source: str,
    document: Optional[Path],
    text: str,
    log_details: bool,
) -> None:
    """Scan a single document and print the keywords found in it."""
    start_time = time.perf_counter()
    if document is not None:
        keywords = extract_from_file(matcher, document)
    else:
        keywords = matcher.extract_keywords(text)
    execution_time_ms = (time.perf_counter() - start_time) * 1000

    if log_details:
        log(
            datetime.now().isoformat(),
            source,
            len(keywords),
            execution_time_ms,
        )

    if keywords:
        print(f"{source}: {', '.join(sorted(keywords))}")
    else:
        print(f"{source}: no keywords found")


def main(argv: Optional[list[str]] = None) -> int:
    """Run the keyword matcher.

    A document that can't be read is reported on stderr and skipped; the
    remaining documents are still scanned and the exit code is 1.

    Args:
        argv (Optional[list[str]]): The arguments, defaults to sys.argv.

    Returns:
        int: The process exit code.

    """
    args = parse_args(argv)

    if not args.documents and args.text is None:
        print(
            "[MATCHER ERROR] Nothing to scan: pass document paths or --text.",
            file=sys.stderr,
        )
        return 1

    log_details = args.log_details
    try:
        if args.keywords:
            matcher = KeywordMatcher(bool(args.case_sensitive))
            matcher.add_keywords(args.keywords)
        else:
            config = load_config_file(Path(args.config_path))
            if args.case_sensitive is not None:
                config.case_sensitive = args.case_sensitive
            matcher = build_matcher(config)
            log_details = log_details or config.log_details

    except (
        ConfigBoolParsingError,
        ConfigNotFoundError,
        FileNotFoundError,
        FileReadError,
    ) as e:
        print(f"[MATCHER ERROR] {e}", file=sys.stderr)
        return 1

    if log_details:
        setup_logging()

    exit_code = 0
    if args.text is not None:
        _report(matcher, "<text>", None, args.text, log_details)
    for document in args.documents:
        try:
            _report(matcher, str(document), document, "", log_details)
        except (FileNotFoundError, FileReadError) as e:
            print(f"[MATCHER ERROR] {document}: {e}", file=sys.stderr)
            exit_code = 1

    return exit_code


if __name__ == "__main__":
    sys.exit(main())
