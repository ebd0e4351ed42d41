import argparse
import json
import logging
import sys
from pathlib import Path

from src.components import abbreviate, search
from src.rules.adapter import RulesAdapter
from src.rules.loader import RulesValidationError, load_rules, resolve_rules_path

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger("cli")


def get_rules(rules_path: str | None) -> RulesAdapter | None:
    """Load rules from an explicit path, or the default location if present."""
    path = resolve_rules_path(rules_path)

    if rules_path is None and not path.exists():
        logger.debug(f"No rules file at {path}, using defaults.")
        return None

    try:
        rules = load_rules(path)
    except (FileNotFoundError, RulesValidationError) as e:
        logger.error(str(e))
        sys.exit(1)

    return RulesAdapter(rules)


def handle_abbreviate(rules: RulesAdapter | None, args: argparse.Namespace) -> int:
    failures = 0
    for value in args.values:
        result = abbreviate.run(abbreviate.AbbreviateInput(value=value), rules=rules)
        if not result.success:
            for error in result.errors:
                logger.error(error.message)
            failures += 1
            continue
        print(result.text)

    return 1 if failures else 0


def handle_search(rules: RulesAdapter | None, args: argparse.Namespace) -> int:
    try:
        if args.file:
            path = Path(args.file)
            if not path.exists():
                logger.error(f"File {path} not found.")
                return 1
            json_text = path.read_text(encoding="utf-8")
        else:
            json_text = sys.stdin.read()
    except (OSError, UnicodeDecodeError) as e:
        logger.error(f"Cannot read JSON from {args.file or 'stdin'}: {e}")
        return 1

    result = search.run(search.SearchInput(json_text=json_text, term=args.term), rules=rules)
    if not result.success:
        for error in result.errors:
            logger.error(error.message)
        return 1

    logger.debug(f"{result.total} matching records.")
    print(json.dumps(result.records, indent=2, ensure_ascii=False))
    return 0


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="formatkit CLI")
    parser.add_argument("--rules", help="Path to rules.yaml (default: project rules.yaml)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    # abbreviate
    abbreviate_parser = subparsers.add_parser("abbreviate", help="Abbreviate numbers (1.5M)")
    abbreviate_parser.add_argument(
        "values",
        nargs="+",
        help="Numbers or numeric strings (put -- before negative exponents, e.g. -- -1e5)",
    )

    # search
    search_parser = subparsers.add_parser("search", help="Search a JSON array of records")
    search_parser.add_argument("term", help="Case-insensitive search term")
    search_parser.add_argument("--file", help="Path to JSON file (default: stdin)")

    args = parser.parse_args(argv)

    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    rules = get_rules(args.rules)

    if args.command == "abbreviate":
        status = handle_abbreviate(rules, args)
    elif args.command == "search":
        status = handle_search(rules, args)
    else:
        parser.error(f"Unknown command: {args.command}")

    if status:
        sys.exit(status)


if __name__ == "__main__":
    main()
