from typing import TYPE_CHECKING, List

if TYPE_CHECKING:
    from a11y_auditor.model import RuleResult


class A11yAuditError(Exception):
    """Base class for auditor failures that are not accessibility findings."""


class ParseError(A11yAuditError):
    """The supplied markup could not be turned into a document tree."""


class RuleDefinitionError(A11yAuditError):
    """A rule is unknown, duplicated, or carries an unusable selector."""


class AccessibilityViolationError(AssertionError):
    """
    Raised when an assertion finds violations.

    Subclasses AssertionError so test runners report it as a failure rather
    than an error. The failing results stay available on `.results`.
    """

    def __init__(self, message: str, results: "List[RuleResult]"):
        super().__init__(message)
        self.results = results

    @property
    def violations(self):
        return [v for result in self.results for v in result.violations]
