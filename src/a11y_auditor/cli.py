import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

import pandas as pd
from tqdm.auto import tqdm

from a11y_auditor.dom.builder import ensure_document
from a11y_auditor.dom.core import Category
from a11y_auditor.dom.qngine import RuleEngine
from a11y_auditor.dom.registry import RuleRegistry
from a11y_auditor.errors import ParseError, RuleDefinitionError
from a11y_auditor.managers.config_manager import config_manager
from a11y_auditor.model import RuleResult
from a11y_auditor.reporter import ViolationReporter
from a11y_auditor.utils.configure_logging import configure_logger

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_VIOLATIONS = 1
EXIT_INPUT_ERROR = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="a11y-audit",
        description="Check HTML files for accessibility and markup-quality violations.",
    )
    parser.add_argument("paths", nargs="*", type=Path, help="HTML files to audit.")
    parser.add_argument(
        "--category", action="append", choices=[c.value for c in Category], default=None,
        help="Only run this category (repeatable). Defaults to all categories.",
    )
    parser.add_argument("--rule", action="append", default=None, help="Only run this rule id (repeatable).")
    parser.add_argument("--fail-fast", action="store_true", help="Stop each file at the first failing rule.")
    parser.add_argument("--export", type=str, default=None, help="Write all violations to a .csv or .json file.")
    parser.add_argument("--list-rules", action="store_true", help="List the rule catalog and exit.")
    parser.add_argument("--log-level", type=str, default=None, help="Logging level (default from settings.json).")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    configure_logger(args.log_level or config_manager.get_nested("debug.level", "WARNING"))

    if args.list_rules:
        _print_catalog()
        return EXIT_OK

    if not args.paths:
        parser.print_help()
        return EXIT_OK

    try:
        rules = [RuleRegistry.get_rule(rule_id) for rule_id in args.rule] if args.rule else None
    except RuleDefinitionError as e:
        print(f"❌ {e}", file=sys.stderr)
        return EXIT_INPUT_ERROR

    engine = RuleEngine()
    reporter = ViolationReporter()
    categories = [Category(c) for c in args.category] if args.category else list(Category)

    exit_code = EXIT_OK
    records = []

    for path in tqdm(args.paths, desc="Auditing", unit="file", disable=len(args.paths) < 2):
        try:
            document = ensure_document(path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, ParseError) as e:
            logger.error("Could not read %s: %s", path, e)
            print(f"❌ {path}: {e}", file=sys.stderr)
            exit_code = EXIT_INPUT_ERROR
            continue

        if rules is not None:
            results = _run_rules(engine, document, rules, args.fail_fast)
        else:
            results = engine.run_categories(document, categories, fail_fast=args.fail_fast)

        report = reporter.format(results, title=str(path))
        if report:
            tqdm.write(report + "\n")
            exit_code = max(exit_code, EXIT_VIOLATIONS)
        else:
            tqdm.write(f"✅ {path}: no violations")

        records.extend(
            {"file": str(path), **violation.to_record()}
            for result in results for violation in result.violations
        )

    if args.export:
        _export(args.export, records)

    return exit_code


def _run_rules(engine: RuleEngine, document, rules, fail_fast: bool) -> List[RuleResult]:
    results = []
    for rule in rules:
        result = engine.run_rule(document, rule)
        results.append(result)
        if fail_fast and result.failed:
            break
    return results


def _print_catalog() -> None:
    for category in Category:
        rules = RuleRegistry.get_rules(category)
        print(f"\n{category.value} ({len(rules)})")
        print("-" * 60)
        for rule in rules:
            print(f"  {rule.id:<45} {rule.header}")


def _export(filename: str, records: List[dict]) -> None:
    df = pd.DataFrame(records, columns=["file", "rule_id", "category", "tag", "identifier", "message"])
    if filename.endswith(".json"):
        df.to_json(filename, orient="records", indent=2)
    else:
        if not filename.endswith(".csv"):
            filename += ".csv"
        df.to_csv(filename, index=False)
    print(f"💾 {len(df)} violations exported to {filename}")


if __name__ == "__main__":
    sys.exit(main())
