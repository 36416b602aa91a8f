"""Rule-based selection of a retrieval function for a free-text question."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, Iterable, Mapping, Optional, Tuple

from core.selector.rules import DEFAULT_RULES, SelectionRule

# Simulated selection latency, in seconds.
SELECTION_DELAY_S = 0.3

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FunctionSelection:
    """Chosen function, its parameters and the justification for the choice."""

    selected_function: str
    parameters: Mapping[str, Optional[str]] = field(default_factory=dict)
    reasoning: str = ""

    def __post_init__(self) -> None:
        object.__setattr__(self, "parameters", MappingProxyType(dict(self.parameters)))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "selectedFunction": self.selected_function,
            "parameters": dict(self.parameters),
            "reasoning": self.reasoning,
        }


class IntentSelector:
    """First-match-wins evaluation of an ordered rule set."""

    def __init__(self, rules: Iterable[SelectionRule] = DEFAULT_RULES):
        ordered = tuple(sorted(rules, key=lambda rule: rule.priority))
        self._validate(ordered)
        self.rules: Tuple[SelectionRule, ...] = ordered[:-1]
        self.fallback_rule: SelectionRule = ordered[-1]

    @staticmethod
    def _validate(rules: Tuple[SelectionRule, ...]) -> None:
        if not rules:
            raise ValueError("At least one selection rule is required")
        priorities = [rule.priority for rule in rules]
        if len(set(priorities)) != len(priorities):
            raise ValueError("Selection rule priorities must be unique")
        fallbacks = [rule for rule in rules if rule.fallback]
        if len(fallbacks) != 1:
            raise ValueError("Exactly one fallback rule is required")
        if rules[-1] is not fallbacks[0]:
            raise ValueError("The fallback rule must have the highest priority number")

    @staticmethod
    def _apply(rule: SelectionRule, question: str) -> FunctionSelection:
        return FunctionSelection(
            selected_function=rule.function,
            parameters=rule.extract(question),
            reasoning=rule.reasoning,
        )

    def match(self, question: str) -> Optional[FunctionSelection]:
        """Return the first matching non-fallback selection, or None when nothing matches."""
        q = question.lower()
        for rule in self.rules:
            if rule.matches(q):
                logger.debug("Question matched rule %s (priority %d)", rule.name, rule.priority)
                return self._apply(rule, q)
        return None

    def select(self, question: str) -> FunctionSelection:
        """Always returns a selection; unmatched questions get the fallback rule."""
        time.sleep(SELECTION_DELAY_S)
        selection = self.match(question)
        if selection is None:
            logger.debug("No rule matched; using fallback rule %s", self.fallback_rule.name)
            selection = self._apply(self.fallback_rule, question.lower())
        return selection

    @property
    def functions(self) -> Tuple[str, ...]:
        """Every function name any rule can select."""
        return tuple(dict.fromkeys(rule.function for rule in (*self.rules, self.fallback_rule)))
