"""
Keyword-coverage pattern matching for task texts.

Scores every catalog pattern by the share of its keywords that occur in the
text and picks the best one:

    coverage = matched keywords / total keywords
    score    = base automation score x coverage

Matching is plain substring containment on the lowercased text. Multi-word
keywords must appear contiguously; there is no tokenizing or stemming.

Before the full scan, domain-priority families (finance, marketing) get a
weighted first look when their trigger terms are present. The full catalog is
only scanned when no family produced a match. Note that this can choose a
different pattern than an unweighted full scan of the same text would.
"""

from typing import Iterable, List, Mapping, Optional, Tuple

from autoscope.contexts.analysis.data_structures import PatternMatch, TaskPattern
from autoscope.contexts.analysis.logger import _log_debug
from autoscope.contexts.analysis.scoring_config import DEFAULT_SCORING_CONFIG, ScoringConfig
from autoscope.contexts.analysis.task_patterns import (
    DOMAIN_PRIORITY_FAMILIES,
    GENERAL_PATTERN_ID,
    TASK_PATTERNS,
    DomainFamily,
)
from autoscope.utils.scoring import clamp


def keyword_coverage(lower_text: str, keywords: Iterable[str]) -> float:
    """
    Fraction of keywords found as substrings of lower_text.

    Args:
        lower_text: Already lowercased text
        keywords: Lowercase keywords

    Returns:
        Coverage in [0, 1] (0 for an empty keyword list)
    """
    keywords = tuple(keywords)
    if not keywords:
        return 0.0
    matches = sum(1 for keyword in keywords if keyword in lower_text)
    return matches / len(keywords)


class PatternMatcher:
    """
    Classifies task texts against the static pattern catalog.

    Stateless after construction; one instance can be shared by any number of
    callers.

    Attributes:
        patterns: Pattern id -> TaskPattern, in tie-break order
        families: Domain-priority families scanned before the full catalog
        config: Scoring weights
    """

    def __init__(
        self,
        patterns: Mapping[str, TaskPattern] = TASK_PATTERNS,
        families: Tuple[DomainFamily, ...] = DOMAIN_PRIORITY_FAMILIES,
        config: ScoringConfig = None,
    ):
        self.patterns = patterns
        self.families = families
        self.config = config or DEFAULT_SCORING_CONFIG

    def match(self, text: str) -> PatternMatch:
        """
        Classify text and return the best-scoring pattern.

        Args:
            text: Raw task text (any string, including empty)

        Returns:
            PatternMatch for the winner, or the synthetic "general" match when
            no pattern has a single keyword in the text
        """
        lower_text = text.lower()
        weights = self.config.patterns

        best: Optional[TaskPattern] = None
        best_score = 0.0

        for family in self.families:
            if family.is_triggered(lower_text):
                best, best_score = self._scan(
                    lower_text,
                    family.pattern_ids,
                    weights.domain_priority_multiplier,
                    best,
                    best_score,
                )

        if best is None:
            best, best_score = self._scan(lower_text, self.patterns.keys(), 1.0, best, best_score)

        if best is None:
            _log_debug("No pattern keywords found, using general pattern")
            return PatternMatch(
                pattern=GENERAL_PATTERN_ID,
                score=weights.fallback_score,
                confidence=weights.fallback_confidence,
                category=GENERAL_PATTERN_ID,
                complexity="medium",
            )

        _log_debug(f"Matched pattern '{best.id}' (score {best_score:.2f})")
        return PatternMatch(
            pattern=best.id,
            score=clamp(best_score),
            confidence=best.confidence,
            category=best.category,
            complexity=best.complexity,
        )

    def get_pattern_details(self, pattern_id: str) -> Optional[TaskPattern]:
        """Catalog entry for pattern_id, or None (e.g. for "general")."""
        return self.patterns.get(pattern_id)

    def get_all_patterns(self) -> List[TaskPattern]:
        return list(self.patterns.values())

    def _scan(
        self,
        lower_text: str,
        pattern_ids: Iterable[str],
        multiplier: float,
        best: Optional[TaskPattern],
        best_score: float,
    ) -> Tuple[Optional[TaskPattern], float]:
        """
        Score pattern_ids and return the updated (best, best_score).

        Only a strictly higher score replaces the running best, so ties keep
        the pattern seen first.
        """
        for pattern_id in pattern_ids:
            pattern = self.patterns.get(pattern_id)
            if pattern is None:
                continue

            coverage = keyword_coverage(lower_text, pattern.keywords)
            if coverage == 0:
                continue

            score = pattern.automation_score * coverage * multiplier
            if score > best_score:
                best, best_score = pattern, score

        return best, best_score
