import logging
from typing import Iterable, List, Optional

from a11y_auditor.managers.config_manager import config_manager
from a11y_auditor.model import RuleResult, Violation
from .core import Category, Element, MatchContext, Rule, compile_selector
from .models import HTMLDocument
from .registry import RuleRegistry

logger = logging.getLogger(__name__)


class RuleEngine:
    """
    Applies catalog rules to a parsed document.

    A rule's selector picks the candidates, its predicate judges each of them
    in document order. The document is never modified.
    """

    def __init__(self):
        RuleRegistry.discover()

    def evaluate(self, document: HTMLDocument, rule: Rule) -> List[Violation]:
        """
        Returns the violations of `rule` in `document`.

        A document-level finding, if any, comes first. Element findings follow
        in the order their elements appear in the document.
        """
        violations: List[Violation] = []

        if rule.document_check is not None:
            problem = rule.document_check(document)
            if problem:
                violations.append(Violation(rule_id=rule.id, category=rule.category, message=problem))

        if rule.selector is None:
            return violations

        compiled = compile_selector(rule.selector, rule.id)
        matches = [Element(tag) for tag in compiled.select(document.soup)]

        for index, element in enumerate(matches):
            ctx = MatchContext(document=document, index=index, matches=matches)
            outcome = rule.predicate(element, ctx) if rule.predicate is not None else True
            for message in self._messages(rule, element, outcome):
                violations.append(Violation(
                    rule_id=rule.id,
                    category=rule.category,
                    tag=element.tag_name,
                    identifier=element.identifier.strip(),
                    message=message,
                ))

        return violations

    def _messages(self, rule: Rule, element: Element, outcome) -> List[str]:
        if outcome is None or outcome is False:
            return []
        if outcome is True:
            if rule.message is not None:
                return [rule.message(element)]
            return [f"<{element.tag_name}{element.identifier}> violates {rule.id}"]
        if isinstance(outcome, str):
            return [outcome] if outcome else []
        return [message for message in outcome if message]

    def run_rule(self, document: HTMLDocument, rule: Rule) -> RuleResult:
        violations = self.evaluate(document, rule)
        if violations:
            logger.debug("%s: %d violation(s)", rule.id, len(violations))
        return RuleResult(rule=rule, violations=violations)

    def run_category(
            self,
            document: HTMLDocument,
            category: Category,
            fail_fast: bool = False,
    ) -> List[RuleResult]:
        """
        Evaluates the category's rules in catalog order.

        With `fail_fast` the run stops after the first rule that reports
        violations. Rules listed in `audit.disabled_rules` are skipped.
        """
        disabled = set(config_manager.get_nested("audit.disabled_rules", []))
        results: List[RuleResult] = []

        for rule in RuleRegistry.get_rules(category):
            if rule.id in disabled:
                logger.debug("Skipping disabled rule %s", rule.id)
                continue
            result = self.run_rule(document, rule)
            results.append(result)
            if fail_fast and result.failed:
                break

        return results

    def run_categories(
            self,
            document: HTMLDocument,
            categories: Optional[Iterable[Category]] = None,
            fail_fast: bool = False,
    ) -> List[RuleResult]:
        results: List[RuleResult] = []
        for category in (list(Category) if categories is None else categories):
            category_results = self.run_category(document, Category(category), fail_fast)
            results.extend(category_results)
            if fail_fast and any(result.failed for result in category_results):
                break
        return results
