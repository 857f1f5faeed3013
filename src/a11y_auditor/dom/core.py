from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Dict, Iterable, Iterator, List, Optional, Tuple, Union

import soupsieve
from bs4 import BeautifulSoup, Tag
from bs4.dammit import EntitySubstitution
from bs4.formatter import HTMLFormatter
from pydantic import BaseModel, ConfigDict, model_validator

from a11y_auditor.errors import RuleDefinitionError


class Category(str, Enum):
    ERRORS = "errors"
    WARNINGS = "warnings"
    ADVICE = "advice"
    OBSOLETES = "obsoletes"


class Element:
    """
    Read-only view over one parsed element.

    Attribute names are lower case, values are the raw strings from the
    markup. A missing attribute is None, never the empty string.
    """

    __slots__ = ("_tag",)

    def __init__(self, tag: Tag):
        self._tag = tag

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Element) and other._tag is self._tag

    def __hash__(self) -> int:
        return id(self._tag)

    def __repr__(self) -> str:
        return f"<Element {self.tag_name}{self.identifier}>"

    @property
    def tag(self) -> Tag:
        return self._tag

    @property
    def tag_name(self) -> str:
        return self._tag.name.lower()

    @property
    def attrs(self) -> Dict[str, str]:
        return {name.lower(): _as_text(value) for name, value in self._tag.attrs.items()}

    def has_attribute(self, name: str) -> bool:
        return name.lower() in self.attrs

    def get_attribute(self, name: str) -> Optional[str]:
        return self.attrs.get(name.lower())

    @property
    def identifier(self) -> str:
        """` id="…"` when the element has an id, else ` name="…"`, else empty."""
        for name in ("id", "name"):
            value = self.get_attribute(name)
            if value is not None:
                return f' {name}="{value}"'
        return ""

    def attr_fragment(self, name: str) -> str:
        """` name="value"` when the attribute exists, otherwise empty."""
        value = self.get_attribute(name)
        return f' {name}="{value}"' if value is not None else ""

    # --- Tree navigation ---

    @property
    def parent(self) -> Optional["Element"]:
        parent = self._tag.parent
        if parent is None or isinstance(parent, BeautifulSoup):
            return None
        return Element(parent)

    def ancestors(self) -> Iterator["Element"]:
        parent = self.parent
        while parent is not None:
            yield parent
            parent = parent.parent

    @property
    def children(self) -> List["Element"]:
        return [Element(child) for child in self._tag.children if isinstance(child, Tag)]

    @property
    def next_element_sibling(self) -> Optional["Element"]:
        sibling = self._tag.find_next_sibling()
        return Element(sibling) if sibling is not None else None

    @property
    def previous_element_sibling(self) -> Optional["Element"]:
        sibling = self._tag.find_previous_sibling()
        return Element(sibling) if sibling is not None else None

    def closest(self, selector: str) -> Optional["Element"]:
        """Nearest element, starting with this one, that matches `selector`."""
        found = soupsieve.closest(selector, self._tag)
        return Element(found) if found is not None else None

    def matches(self, selector: str) -> bool:
        return soupsieve.match(selector, self._tag)

    def select(self, selector: str) -> List["Element"]:
        return [Element(tag) for tag in soupsieve.select(selector, self._tag)]

    # --- Content ---

    @property
    def text_content(self) -> str:
        return self._tag.get_text()

    @property
    def is_empty(self) -> bool:
        """CSS :empty as browsers apply it: whitespace text counts as content, comments do not."""
        return not self.children and self.text_content == ""

    def outer_html(self) -> str:
        """The element's markup, attributes in source order."""
        return self._tag.decode(formatter=SOURCE_ORDER)


class SourceOrderFormatter(HTMLFormatter):
    """bs4's minimal formatter without the alphabetical attribute sort."""

    def __init__(self):
        super().__init__(entity_substitution=EntitySubstitution.substitute_xml)

    def attributes(self, tag):
        return list(tag.attrs.items())


SOURCE_ORDER = SourceOrderFormatter()


def _as_text(value: Any) -> str:
    if isinstance(value, (list, tuple)):
        return " ".join(value)
    return "" if value is None else str(value)


@dataclass
class MatchContext:
    """What a predicate may look at besides the element itself."""
    document: Any
    index: int
    matches: List[Element] = field(default_factory=list)

    @property
    def previous_matches(self) -> List[Element]:
        return self.matches[:self.index]


PredicateOutcome = Union[bool, str, Iterable[str], None]
Predicate = Callable[[Element, MatchContext], PredicateOutcome]


class Rule(BaseModel):
    """
    A named check: which elements to look at and how to judge each of them.

    `predicate` may return True (violation rendered by `message`), a string or
    an iterable of strings (one violation each), or a falsy value. Without a
    predicate every selector match is a violation.
    """
    model_config = ConfigDict(frozen=True)

    id: str
    category: Category
    header: str
    selector: Optional[str] = None
    predicate: Optional[Callable[..., Any]] = None
    message: Optional[Callable[..., str]] = None
    document_check: Optional[Callable[..., Optional[str]]] = None
    references: Tuple[str, ...] = ()

    @model_validator(mode='after')
    def _needs_a_target(self) -> 'Rule':
        if self.selector is None and self.document_check is None:
            raise ValueError(f"rule '{self.id}' needs a selector or a document_check")
        return self


def rule_spec(
        rule_id: str,
        header: str,
        selector: Optional[str] = None,
        references: Iterable[str] = (),
        message: Optional[Callable[[Element], str]] = None,
        document_check: Optional[Callable[[Any], Optional[str]]] = None,
):
    """
    Decorator that declares a predicate function as a catalog rule.
    The category is filled in by the CategoryDefinition listing the function.
    """
    def decorator(func):
        func.rule_spec = {
            "id": rule_id,
            "header": header,
            "selector": selector,
            "references": tuple(references),
            "message": message,
            "document_check": document_check,
        }
        return func
    return decorator


class CategoryDefinition:
    """
    Ordered rule catalog for one category, exported by each module in
    `a11y_auditor.rules` as `DEFINITION`.
    """

    def __init__(self, category: Category, rules: List[Union[Rule, Callable]]):
        self.category = category
        self.rules: List[Rule] = [self._to_rule(entry) for entry in rules]

        for rule in self.rules:
            if rule.selector is not None:
                compile_selector(rule.selector, rule.id)

        self.rule_ids = [rule.id for rule in self.rules]

    def _to_rule(self, entry: Union[Rule, Callable]) -> Rule:
        if isinstance(entry, Rule):
            if entry.category != self.category:
                raise RuleDefinitionError(
                    f"rule '{entry.id}' is a {entry.category.value} rule, "
                    f"listed under {self.category.value}"
                )
            return entry
        spec = getattr(entry, "rule_spec", None)
        if spec is None:
            raise RuleDefinitionError(f"{entry!r} is not decorated with @rule_spec")
        return Rule(category=self.category, predicate=entry, **spec)


def compile_selector(selector: str, rule_id: str):
    try:
        return soupsieve.compile(selector)
    except soupsieve.SelectorSyntaxError as e:
        raise RuleDefinitionError(f"rule '{rule_id}' has an invalid selector {selector!r}: {e}") from e
