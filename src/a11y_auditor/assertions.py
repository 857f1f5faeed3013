"""
Test assertions for HTML accessibility.

Every assertion accepts markup (a fragment or a full document) or an
already parsed HTMLDocument, evaluates catalog rules against it and raises
AccessibilityViolationError, an AssertionError, when anything is found.
"""
import logging
from typing import Iterable, List, Optional, Union

from a11y_auditor.dom.builder import DocumentInput, ensure_document
from a11y_auditor.dom.core import Category
from a11y_auditor.dom.qngine import RuleEngine
from a11y_auditor.dom.registry import RuleRegistry
from a11y_auditor.managers.config_manager import config_manager
from a11y_auditor.model import RuleResult, Violation
from a11y_auditor.reporter import ViolationReporter

logger = logging.getLogger(__name__)

CategoryLike = Union[Category, str]

_TITLES = {
    Category.ERRORS: "Accessibility errors",
    Category.WARNINGS: "Accessibility warnings",
    Category.ADVICE: "Accessibility advice",
    Category.OBSOLETES: "Obsolete HTML",
}

_engine: Optional[RuleEngine] = None


def get_engine() -> RuleEngine:
    global _engine
    if _engine is None:
        _engine = RuleEngine()
    return _engine


def _resolve_fail_fast(fail_fast: Optional[bool]) -> bool:
    if fail_fast is None:
        return bool(config_manager.get_nested("audit.fail_fast", False))
    return fail_fast


def _categories(categories: Optional[Iterable[CategoryLike]]) -> List[Category]:
    if categories is None:
        return list(Category)
    selected = [Category(category) for category in categories]
    if not selected:
        raise ValueError("No categories selected; pass None to run all of them")
    return selected


def audit(html: DocumentInput, categories: Optional[Iterable[CategoryLike]] = None) -> List[RuleResult]:
    """Runs every rule of `categories` (all by default) and returns the results."""
    document = ensure_document(html)
    return get_engine().run_categories(document, _categories(categories), fail_fast=False)


def check_rule(html: DocumentInput, rule_id: str) -> List[Violation]:
    """Violations of a single catalog rule, without raising."""
    rule = RuleRegistry.get_rule(rule_id)
    return get_engine().evaluate(ensure_document(html), rule)


def assert_rule(html: DocumentInput, rule_id: str) -> None:
    rule = RuleRegistry.get_rule(rule_id)
    result = get_engine().run_rule(ensure_document(html), rule)
    ViolationReporter().report([result])


def assert_accessible(
        html: DocumentInput,
        categories: Optional[Iterable[CategoryLike]] = None,
        fail_fast: Optional[bool] = None,
) -> None:
    """
    Asserts that none of `categories` (all four by default) reports violations.

    The markup is parsed once. With `fail_fast` the run stops at the first
    failing rule, otherwise all failures are reported together.
    """
    document = ensure_document(html)
    selected = _categories(categories)
    results = get_engine().run_categories(document, selected, fail_fast=_resolve_fail_fast(fail_fast))
    title = _TITLES[selected[0]] if len(selected) == 1 else "Accessibility violations"
    ViolationReporter().report(results, title=title)


def assert_no_accessibility_errors(html: DocumentInput, fail_fast: Optional[bool] = None) -> None:
    assert_accessible(html, [Category.ERRORS], fail_fast)


def assert_no_accessibility_warnings(html: DocumentInput, fail_fast: Optional[bool] = None) -> None:
    assert_accessible(html, [Category.WARNINGS], fail_fast)


def assert_no_accessibility_advice(html: DocumentInput, fail_fast: Optional[bool] = None) -> None:
    assert_accessible(html, [Category.ADVICE], fail_fast)


def assert_no_accessibility_obsoletes(html: DocumentInput, fail_fast: Optional[bool] = None) -> None:
    assert_accessible(html, [Category.OBSOLETES], fail_fast)
