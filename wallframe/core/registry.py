"""Rule registry — holds the wall framing rules and decides their run order."""

from __future__ import annotations
import heapq
import logging

from wallframe.models.context import WallContext
from wallframe.rules.base import FramingRule

logger = logging.getLogger(__name__)


class RuleRegistry:
    """
    Keyed collection of framing rules.

    For each wall the registry picks the rules that are switched on and
    apply, then orders them so every rule runs after the rules it
    depends on. Among rules that are free to run, lower priority goes
    first.
    """

    def __init__(self) -> None:
        self._rules: dict[str, FramingRule] = {}

    def register(self, rule: FramingRule) -> None:
        """Add a rule. A rule with the same id is replaced."""
        if rule.get_id() in self._rules:
            logger.debug("Replacing rule %s", rule.get_id())
        self._rules[rule.get_id()] = rule

    def list_rules(self) -> list[FramingRule]:
        """All registered rules in run order for a wall that needs every one."""
        return self._order(list(self._rules.values()))

    def get_applicable_rules(self, context: WallContext) -> list[FramingRule]:
        """Rules to run for one wall, honouring the enable/disable lists."""
        enabled = set(context.config.enabled_rules)
        disabled = set(context.config.disabled_rules)

        selected = [
            rule for rule_id, rule in self._rules.items()
            if (not enabled or rule_id in enabled)
            and rule_id not in disabled
            and rule.applies(context)
        ]
        ordered = self._order(selected)
        logger.debug(
            "Wall %s: rules %s", context.wall.id, [r.get_id() for r in ordered],
        )
        return ordered

    @staticmethod
    def _order(rules: list[FramingRule]) -> list[FramingRule]:
        """Dependency order, ties broken by priority then id.

        Dependencies on rules outside `rules` (disabled or not applicable
        to this wall) are ignored.
        """
        by_id = {r.get_id(): r for r in rules}
        waiting_on: dict[str, set[str]] = {
            rule_id: {d for d in rule.dependencies if d in by_id}
            for rule_id, rule in by_id.items()
        }
        dependants: dict[str, list[str]] = {rule_id: [] for rule_id in by_id}
        for rule_id, deps in waiting_on.items():
            for dep in deps:
                dependants[dep].append(rule_id)

        ready = [(by_id[i].priority, i) for i, deps in waiting_on.items() if not deps]
        heapq.heapify(ready)

        ordered: list[FramingRule] = []
        while ready:
            _, rule_id = heapq.heappop(ready)
            ordered.append(by_id[rule_id])
            for child in dependants[rule_id]:
                waiting_on[child].discard(rule_id)
                if not waiting_on[child]:
                    heapq.heappush(ready, (by_id[child].priority, child))

        if len(ordered) != len(by_id):
            stuck = sorted(i for i, deps in waiting_on.items() if deps)
            raise ValueError(f"Circular rule dependencies: {', '.join(stuck)}")
        return ordered


def create_default_registry() -> RuleRegistry:
    """Registry holding the six stud wall rules."""
    from wallframe.rules.wall.plates import PlateRule
    from wallframe.rules.wall.studs import StudRule
    from wallframe.rules.wall.openings import OpeningRule
    from wallframe.rules.wall.corners import CornerRule
    from wallframe.rules.wall.noggins import NogginRule
    from wallframe.rules.wall.bracing import BracingRule

    registry = RuleRegistry()
    for rule in (PlateRule(), StudRule(), OpeningRule(),
                 CornerRule(), NogginRule(), BracingRule()):
        registry.register(rule)
    return registry
