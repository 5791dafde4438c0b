"""
Dependency edges between subtasks of one batch.

Every subtask after the first depends on its predecessor. On top of that
linear chain, DEPENDENCY_RULES adds extra edges back to setup steps:

    system   position        target   condition
    api      index >= 2      0        (setup before integration work)
    excel    index >= 3      1        (data preparation)
    crm      index >= 4      1        (contact preparation)
    -        index == 5      2        batch larger than 6
    -        index == 6      3        batch larger than 6

Rules only ever point to a lower index, so the batch graph is acyclic.
"""

from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple


@dataclass(frozen=True)
class DependencyRule:
    """
    One extra dependency edge.

    Attributes:
        target: Index of the subtask depended on
        system: System id that must be detected (None = any)
        min_index: Rule applies from this position on
        only_index: Rule applies at exactly this position
        min_batch_size: Batch must have more than this many subtasks
    """

    target: int
    system: Optional[str] = None
    min_index: Optional[int] = None
    only_index: Optional[int] = None
    min_batch_size: Optional[int] = None

    def applies(self, index: int, batch_size: int, systems: Sequence[str]) -> bool:
        if self.system is not None and self.system not in systems:
            return False
        if self.min_index is not None and index < self.min_index:
            return False
        if self.only_index is not None and index != self.only_index:
            return False
        if self.min_batch_size is not None and batch_size <= self.min_batch_size:
            return False
        return self.target < index


DEPENDENCY_RULES: Tuple[DependencyRule, ...] = (
    DependencyRule(target=0, system="api", min_index=2),
    DependencyRule(target=1, system="excel", min_index=3),
    DependencyRule(target=1, system="crm", min_index=4),
    DependencyRule(target=2, only_index=5, min_batch_size=6),
    DependencyRule(target=3, only_index=6, min_batch_size=6),
)


def dependency_targets(
    index: int,
    batch_size: int,
    systems: Sequence[str],
    rules: Sequence[DependencyRule] = DEPENDENCY_RULES,
) -> List[int]:
    """
    Indices the subtask at `index` depends on.

    Args:
        index: Position of the subtask in its batch
        batch_size: Number of subtasks in the batch
        systems: Detected system ids
        rules: Extra-edge rules (defaults to DEPENDENCY_RULES)

    Returns:
        Deduplicated target indices in first-seen order, predecessor first

    Examples:
        >>> dependency_targets(0, 5, ["api"])
        []
        >>> dependency_targets(3, 5, ["api", "excel"])
        [2, 0, 1]
    """
    targets: List[int] = []
    if index > 0:
        targets.append(index - 1)

    for rule in rules:
        if rule.applies(index, batch_size, systems) and rule.target not in targets:
            targets.append(rule.target)

    return targets
