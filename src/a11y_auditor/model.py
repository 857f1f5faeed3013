from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from a11y_auditor.dom.core import Category, Rule


class Violation(BaseModel):
    """One finding: which rule, on which element, and what is wrong."""
    model_config = ConfigDict(frozen=True)

    rule_id: str
    category: Category
    tag: Optional[str] = None
    identifier: str = ""
    message: str

    def to_record(self) -> Dict[str, Any]:
        return {
            "rule_id": self.rule_id,
            "category": self.category.value,
            "tag": self.tag or "",
            "identifier": self.identifier,
            "message": self.message,
        }


class RuleResult(BaseModel):
    """The outcome of evaluating a single rule against a document."""
    rule: Rule
    violations: List[Violation] = Field(default_factory=list)

    @property
    def failed(self) -> bool:
        return bool(self.violations)
