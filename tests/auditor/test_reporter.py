import pytest

from a11y_auditor.dom.core import Category, Rule
from a11y_auditor.errors import AccessibilityViolationError
from a11y_auditor.managers.config_manager import config_manager
from a11y_auditor.model import RuleResult, Violation
from a11y_auditor.reporter import ViolationReporter

ALT_RULE = Rule(
    id="images-have-alt",
    category=Category.ERRORS,
    header="Found images without proper alt attributes",
    selector="img",
    references=("https://example.org/alt",),
)
MAIN_RULE = Rule(id="only-one-visible-main", category=Category.ADVICE, header="Found multiple <main>", selector="main")


def _violations(rule, *messages):
    return [Violation(rule_id=rule.id, category=rule.category, tag="img", message=m) for m in messages]


@pytest.fixture
def results():
    return [
        RuleResult(rule=ALT_RULE, violations=_violations(ALT_RULE, "first", "second", "third")),
        RuleResult(rule=MAIN_RULE, violations=[]),
    ]


def test_format_lists_every_violation(results):
    text = ViolationReporter(max_per_rule=0, show_references=False).format(results)
    assert text.splitlines() == [
        "[errors] images-have-alt: Found images without proper alt attributes (3 violations)",
        "- first",
        "- second",
        "- third",
    ]


def test_format_adds_title_and_references(results):
    text = ViolationReporter(max_per_rule=0, show_references=True).format(results, title="Accessibility errors")
    lines = text.splitlines()
    assert lines[0] == "Accessibility errors: 3 violations in 1 rule"
    assert lines[1] == ""
    assert "  See: https://example.org/alt" in lines


def test_format_truncates_per_rule(results):
    text = ViolationReporter(max_per_rule=1, show_references=False).format(results)
    assert text.splitlines()[-2:] == ["- first", "... and 2 more"]


def test_limit_comes_from_config(results):
    config_manager.set_nested("report.max_violations_per_rule", "2")
    text = ViolationReporter(show_references=False).format(results)
    assert text.endswith("... and 1 more")


def test_singular_wording():
    result = RuleResult(rule=MAIN_RULE, violations=_violations(MAIN_RULE, "second main"))
    text = ViolationReporter(show_references=False).format([result], title="Advice")
    assert text.splitlines()[0] == "Advice: 1 violation in 1 rule"
    assert "(1 violation)" in text


def test_format_is_empty_without_violations():
    assert ViolationReporter().format([RuleResult(rule=MAIN_RULE)]) == ""


def test_report_is_silent_without_violations():
    assert ViolationReporter().report([RuleResult(rule=MAIN_RULE)]) is None
    assert ViolationReporter().report([]) is None


def test_report_raises_assertion_error(results):
    with pytest.raises(AssertionError, match="images-have-alt") as excinfo:
        ViolationReporter().report(results)

    error = excinfo.value
    assert isinstance(error, AccessibilityViolationError)
    assert [r.rule.id for r in error.results] == ["images-have-alt"]
    assert [v.message for v in error.violations] == ["first", "second", "third"]
