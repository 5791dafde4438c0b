"""
Context analysis for task texts.

Extracts the secondary signals the engine combines with the pattern match:
detected software systems, a complexity tier, an automation trend, six
automation-orientation signals and a context score.

The optional job context (e.g. the posting title) only feeds system
detection. Complexity, trend and signals look at the task text alone.
"""

from typing import Optional, Tuple

from autoscope.contexts.analysis.context_keywords import (
    AUTOMATION_SYSTEMS,
    GENERAL_INDUSTRY,
    INDUSTRY_KEYWORDS,
    SYSTEM_KEYWORDS,
    ComplexityKeywords,
    DomainTerms,
    SignalKeywords,
    TrendKeywords,
    contains_any,
    find_keywords,
)
from autoscope.contexts.analysis.data_structures import AutomationSignals, ContextAnalysis
from autoscope.contexts.analysis.logger import _log_debug
from autoscope.contexts.analysis.scoring_config import DEFAULT_SCORING_CONFIG, ScoringConfig
from autoscope.utils.scoring import clamp, round_half_up


class ContextAnalyzer:
    """
    Keyword-driven context analysis.

    Holds no state besides its configuration, so a single instance can serve
    concurrent callers.
    """

    def __init__(self, config: ScoringConfig = None):
        self.config = config or DEFAULT_SCORING_CONFIG

    def analyze_context(self, text: str, job_context: Optional[str] = None) -> ContextAnalysis:
        """
        Analyze a task text.

        Args:
            text: Task text
            job_context: Optional broader context, prepended for system detection only

        Returns:
            ContextAnalysis
        """
        lower_text = text.lower()
        full_context = f"{job_context} {text}".lower() if job_context else lower_text

        systems = self.detect_systems(full_context)
        signals = self.calculate_signals(lower_text)
        complexity = self.assess_complexity(lower_text, systems)
        trend = self.assess_trend(lower_text, systems)
        final_score = self.calculate_final_score(signals, complexity)

        _log_debug(
            f"Context: complexity={complexity}, trend={trend}, "
            f"systems={list(systems)}, score={final_score}"
        )

        return ContextAnalysis(
            complexity=complexity,
            trend=trend,
            systems=systems,
            signals=signals,
            final_score=final_score,
            industry=detect_industry(text),
        )

    def detect_systems(self, lower_text: str) -> Tuple[str, ...]:
        """Return system ids with at least one keyword in lower_text, in table order."""
        return tuple(
            system for system, keywords in SYSTEM_KEYWORDS.items() if contains_any(lower_text, keywords)
        )

    def calculate_signals(self, lower_text: str) -> AutomationSignals:
        return AutomationSignals(
            repetitive=self._signal(lower_text, SignalKeywords.REPETITIVE),
            structured=self._signal(lower_text, SignalKeywords.STRUCTURED),
            digital=self._signal(lower_text, SignalKeywords.DIGITAL),
            routine=self._signal(lower_text, SignalKeywords.ROUTINE),
            creative=self._signal(lower_text, SignalKeywords.CREATIVE),
            human=self._signal(lower_text, SignalKeywords.HUMAN),
        )

    def _signal(self, lower_text: str, keywords: tuple) -> int:
        weights = self.config.signals
        matches = len(find_keywords(lower_text, keywords))
        return min(weights.max_signal, matches * weights.points_per_match)

    def assess_complexity(self, lower_text: str, systems: Tuple[str, ...]) -> str:
        """
        Score complexity from keywords, system count, text length and domain.

        Returns:
            "high", "medium" or "low"
        """
        weights = self.config.complexity
        score = 0

        score += len(find_keywords(lower_text, ComplexityKeywords.HIGH)) * weights.high_keyword
        score += len(find_keywords(lower_text, ComplexityKeywords.MEDIUM)) * weights.medium_keyword
        score -= len(find_keywords(lower_text, ComplexityKeywords.LOW)) * weights.low_keyword_penalty

        score += len(systems) * weights.per_system

        if len(lower_text) > weights.long_text_length:
            score += weights.long_text_bonus
        elif len(lower_text) > weights.medium_text_length:
            score += weights.medium_text_bonus

        if contains_any(lower_text, DomainTerms.FINANCE):
            score += weights.finance_bonus
        if contains_any(lower_text, DomainTerms.MARKETING):
            score += weights.marketing_bonus

        if score >= weights.high_threshold:
            return "high"
        if score >= weights.medium_threshold:
            return "medium"
        return "low"

    def assess_trend(self, lower_text: str, systems: Tuple[str, ...]) -> str:
        """
        Score whether the work described is trending towards automation.

        Returns:
            "increasing", "decreasing" or "stable"
        """
        weights = self.config.trend
        score = 0

        score += len(find_keywords(lower_text, TrendKeywords.INCREASING)) * weights.increasing_keyword
        score -= len(find_keywords(lower_text, TrendKeywords.DECREASING)) * weights.decreasing_keyword_penalty

        automation_systems = [system for system in systems if system in AUTOMATION_SYSTEMS]
        score += len(automation_systems) * weights.automation_system

        if contains_any(lower_text, DomainTerms.FINANCE):
            score += weights.finance_bonus
        if contains_any(lower_text, DomainTerms.MARKETING):
            score += weights.marketing_bonus
        if contains_any(lower_text, DomainTerms.HR):
            score += weights.hr_bonus

        if score >= weights.increasing_threshold:
            return "increasing"
        if score <= weights.decreasing_threshold:
            return "decreasing"
        return "stable"

    def calculate_final_score(self, signals: AutomationSignals, complexity: str) -> int:
        """Combine signals and complexity into the 0-100 context score."""
        weights = self.config.signals
        score = weights.base_score

        score += signals.repetitive * weights.repetitive
        score += signals.structured * weights.structured
        score += signals.digital * weights.digital
        score += signals.routine * weights.routine

        score -= signals.creative * weights.creative
        score -= signals.human * weights.human

        if complexity == "low":
            score += weights.low_complexity_bonus
        elif complexity == "high":
            score -= weights.high_complexity_penalty

        return round_half_up(clamp(score))


def detect_industry(text: str) -> str:
    """
    Classify text into a coarse industry.

    Args:
        text: Any text (case-insensitive)

    Returns:
        First industry in INDUSTRY_KEYWORDS with a keyword hit, else "general"
    """
    lower_text = text.lower()
    for industry, keywords in INDUSTRY_KEYWORDS.items():
        if contains_any(lower_text, keywords):
            return industry
    return GENERAL_INDUSTRY
