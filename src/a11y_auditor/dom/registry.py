import importlib
import logging
import pkgutil
from typing import Dict, List

from a11y_auditor.errors import RuleDefinitionError
from .core import Category, CategoryDefinition, Rule

logger = logging.getLogger(__name__)


class RuleRegistry:
    """
    Central registry of catalog rules.

    Discovers the modules of the `a11y_auditor.rules` package, registers the
    `DEFINITION` each one exports and keeps every category in catalog order.
    """

    _categories: Dict[Category, List[Rule]] = {}
    _rules: Dict[str, Rule] = {}
    _loaded: bool = False

    @classmethod
    def discover(cls) -> None:
        """Imports every catalog module once and registers its rules."""
        if cls._loaded:
            return

        import a11y_auditor.rules as rules_pkg

        for _, name, _ in pkgutil.iter_modules(rules_pkg.__path__):
            full_name = f"a11y_auditor.rules.{name}"
            try:
                module = importlib.import_module(full_name)
            except Exception as e:
                logger.error(f"Error loading rule module {name}: {e}")
                cls.clear()
                raise

            definition = getattr(module, "DEFINITION", None)
            if isinstance(definition, CategoryDefinition):
                cls.register(definition)
                logger.debug(f"Rules loaded: {definition.category.value} ({len(definition.rules)})")

        cls._loaded = True

    @classmethod
    def register(cls, definition: CategoryDefinition) -> None:
        for rule in definition.rules:
            if rule.id in cls._rules:
                raise RuleDefinitionError(f"Duplicate rule id '{rule.id}'")
            cls._rules[rule.id] = rule
        cls._categories.setdefault(definition.category, []).extend(definition.rules)

    @classmethod
    def clear(cls) -> None:
        cls._categories = {}
        cls._rules = {}
        cls._loaded = False

    @classmethod
    def get_rules(cls, category: Category) -> List[Rule]:
        cls.discover()
        return list(cls._categories.get(Category(category), []))

    @classmethod
    def get_rule(cls, rule_id: str) -> Rule:
        cls.discover()
        try:
            return cls._rules[rule_id]
        except KeyError:
            raise RuleDefinitionError(f"Unknown rule id '{rule_id}'") from None

    @classmethod
    def get_all_rule_ids(cls) -> List[str]:
        """Every registered rule id, categories in enum order, rules in catalog order."""
        cls.discover()
        return [rule.id for category in Category for rule in cls._categories.get(category, [])]
