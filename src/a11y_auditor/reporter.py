import logging
from typing import List, Optional

from a11y_auditor.errors import AccessibilityViolationError
from a11y_auditor.managers.config_manager import config_manager
from a11y_auditor.model import RuleResult

logger = logging.getLogger(__name__)


def _plural(count: int, word: str) -> str:
    return f"{count} {word}" if count == 1 else f"{count} {word}s"


class ViolationReporter:
    """
    Turns rule results into the failure message of an assertion.

    Each failing rule gets a header line, an optional reference line and
    one "- " line per violation.
    """

    def __init__(self, max_per_rule: Optional[int] = None, show_references: Optional[bool] = None):
        self.max_per_rule = max_per_rule
        self.show_references = show_references

    def _limit(self) -> int:
        if self.max_per_rule is not None:
            return self.max_per_rule
        return int(config_manager.get_nested("report.max_violations_per_rule", 0))

    def _references_enabled(self) -> bool:
        if self.show_references is not None:
            return self.show_references
        return bool(config_manager.get_nested("report.show_references", False))

    def format(self, results: List[RuleResult], title: Optional[str] = None) -> str:
        """The report text for `results`; empty when nothing failed."""
        failed = [result for result in results if result.failed]
        if not failed:
            return ""

        total = sum(len(result.violations) for result in failed)
        lines: List[str] = []
        if title:
            lines.append(f"{title}: {_plural(total, 'violation')} in {_plural(len(failed), 'rule')}")
            lines.append("")

        limit = self._limit()
        for result in failed:
            rule = result.rule
            count = len(result.violations)
            lines.append(f"[{rule.category.value}] {rule.id}: {rule.header} ({_plural(count, 'violation')})")
            if self._references_enabled() and rule.references:
                lines.append(f"  See: {', '.join(rule.references)}")

            shown = result.violations if limit <= 0 else result.violations[:limit]
            lines.extend(f"- {violation.message}" for violation in shown)
            if len(shown) < count:
                lines.append(f"... and {count - len(shown)} more")
            lines.append("")

        return "\n".join(lines).rstrip("\n")

    def report(self, results: List[RuleResult], title: Optional[str] = None) -> None:
        """Raises AccessibilityViolationError when any result carries violations."""
        message = self.format(results, title)
        if not message:
            return
        failed = [result for result in results if result.failed]
        logger.debug("Reporting %d failing rule(s).", len(failed))
        raise AccessibilityViolationError(message, failed)
