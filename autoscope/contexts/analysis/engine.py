"""
Analysis engine: the public entry point of the analysis context.

Runs the three stages in order and combines their output:

    PatternMatcher.match(text)                      -> PatternMatch
    ContextAnalyzer.analyze_context(text, context)  -> ContextAnalysis
    SubtaskSynthesizer.generate_subtasks(...)       -> list[GeneratedSubtask]

    potential  = clamp(pattern score x 0.6 + context score x 0.4)
    confidence = pattern confidence x 0.7 + context confidence x 0.3

The engine does no I/O and keeps no per-call state, so the module-level
default engine behind analyze_task()/analyze_tasks() is safe to share.

Examples:
    >>> result = analyze_task("Belege erfassen und Buchungen in DATEV vornehmen")
    >>> result.pattern
    'accounting'
"""

import time
from collections import Counter
from typing import Iterable, List, Optional

from autoscope.contexts.analysis.context_analyzer import ContextAnalyzer
from autoscope.contexts.analysis.data_structures import (
    AnalysisResult,
    AnalysisStats,
    AutomationLabel,
    ContextAnalysis,
    PatternMatch,
)
from autoscope.contexts.analysis.logger import _log_debug, _log_warning, log_analysis_result
from autoscope.contexts.analysis.pattern_matcher import PatternMatcher
from autoscope.contexts.analysis.scoring_config import DEFAULT_SCORING_CONFIG, ScoringConfig
from autoscope.contexts.analysis.subtask_synthesizer import SubtaskSynthesizer
from autoscope.contexts.intake import derive_posting_title, extract_task_lines
from autoscope.utils.scoring import clamp, round_half_up


class AnalysisEngine:
    """
    Composes pattern matching, context analysis and subtask synthesis.

    All components share one ScoringConfig. Pass components explicitly to
    swap in custom catalogs or template registries.
    """

    def __init__(
        self,
        config: ScoringConfig = None,
        matcher: PatternMatcher = None,
        analyzer: ContextAnalyzer = None,
        synthesizer: SubtaskSynthesizer = None,
    ):
        self.config = config or DEFAULT_SCORING_CONFIG
        self.matcher = matcher or PatternMatcher(config=self.config)
        self.analyzer = analyzer or ContextAnalyzer(config=self.config)
        self.synthesizer = synthesizer or SubtaskSynthesizer(config=self.config)

    def analyze_task(self, text: str, context: Optional[str] = None) -> AnalysisResult:
        """
        Analyze one task text.

        Args:
            text: Task text (any string, including empty)
            context: Optional job context (e.g. posting title), used for system detection

        Returns:
            AnalysisResult with subtasks
        """
        start = time.perf_counter()

        pattern_match = self.matcher.match(text)
        context_analysis = self.analyzer.analyze_context(text, context)
        subtasks = self.synthesizer.generate_subtasks(text, pattern_match, context_analysis)

        potential = self.combine_scores(pattern_match, context_analysis)
        confidence = self.calculate_confidence(pattern_match, context_analysis)

        result = AnalysisResult(
            text=text,
            automation_potential=round_half_up(potential),
            confidence=round_half_up(confidence * 100),
            pattern=pattern_match.pattern,
            category=pattern_match.category,
            complexity=context_analysis.complexity,
            trend=context_analysis.trend,
            systems=list(context_analysis.systems),
            label=self.determine_label(potential),
            reasoning=self.generate_reasoning(pattern_match, context_analysis),
            analysis_time_ms=(time.perf_counter() - start) * 1000,
            subtasks=subtasks,
            industry=context_analysis.industry,
        )

        log_analysis_result(result)
        return result

    def analyze_tasks(self, texts: Iterable[str], context: Optional[str] = None) -> List[AnalysisResult]:
        """Analyze each text independently, preserving input order."""
        return [self.analyze_task(text, context) for text in texts]

    def analyze_posting(self, posting_text: str) -> List[AnalysisResult]:
        """
        Extract task lines from a whole posting and analyze each.

        The posting title serves as job context for every task.

        Args:
            posting_text: Raw posting (markdown or plain text)

        Returns:
            One AnalysisResult per extracted task line
        """
        title = derive_posting_title(posting_text)
        tasks = extract_task_lines(posting_text)
        if not tasks:
            _log_warning(f"No task lines found in posting '{title}'")
        _log_debug(f"Posting '{title}': {len(tasks)} task lines")
        return self.analyze_tasks([task.text for task in tasks], context=title or None)

    def combine_scores(self, pattern_match: PatternMatch, context_analysis: ContextAnalysis) -> float:
        weights = self.config.combination
        score = pattern_match.score * weights.pattern_weight + context_analysis.final_score * weights.context_weight
        return clamp(score)

    def calculate_confidence(self, pattern_match: PatternMatch, context_analysis: ContextAnalysis) -> float:
        """Blend pattern and context confidence (0-1)."""
        weights = self.config.combination
        return (
            pattern_match.confidence * weights.pattern_confidence_weight
            + self.calculate_context_confidence(context_analysis) * weights.context_confidence_weight
        )

    def calculate_context_confidence(self, context_analysis: ContextAnalysis) -> float:
        weights = self.config.combination
        signal_strength = context_analysis.signals.average()
        system_confidence = (
            weights.systems_detected_confidence if context_analysis.systems else weights.no_systems_confidence
        )
        return min(
            1.0,
            (signal_strength / 100) * weights.signal_strength_weight
            + system_confidence * weights.system_confidence_weight,
        )

    def determine_label(self, potential: float) -> AutomationLabel:
        weights = self.config.combination
        if potential >= weights.automatable_threshold:
            return AutomationLabel.AUTOMATABLE
        if potential >= weights.partially_automatable_threshold:
            return AutomationLabel.PARTIALLY_AUTOMATABLE
        return AutomationLabel.HUMAN

    def generate_reasoning(self, pattern_match: PatternMatch, context_analysis: ContextAnalysis) -> str:
        """
        Build the one-line explanation shown next to a result.

        Format: "Pattern: Name (75%) | Strong signals: digital: 60% | Systems: excel, api"
        """
        threshold = self.config.combination.strong_signal_threshold
        details = self.matcher.get_pattern_details(pattern_match.pattern)
        name = details.name if details else pattern_match.pattern

        reasoning = f"Pattern: {name} ({round_half_up(pattern_match.score)}%)"

        strong_signals = [
            f"{signal}: {value}%" for signal, value in context_analysis.signals.as_dict().items() if value > threshold
        ]
        if strong_signals:
            reasoning += f" | Strong signals: {', '.join(strong_signals)}"

        if context_analysis.systems:
            reasoning += f" | Systems: {', '.join(context_analysis.systems)}"

        return reasoning

    def get_analysis_stats(self, results: List[AnalysisResult]) -> AnalysisStats:
        """
        Aggregate a batch of results.

        Args:
            results: Completed AnalysisResults (may be empty)

        Returns:
            AnalysisStats with label shares in percent, rounded averages and
            per-category counts. An empty batch yields zeros throughout.
        """
        total = len(results)
        label_counts = Counter(result.label for result in results)

        if total == 0:
            distribution = {label.value: 0 for label in AutomationLabel}
            averages = {"automation_potential": 0, "confidence": 0, "analysis_time_ms": 0}
        else:
            distribution = {
                label.value: round_half_up(label_counts[label] / total * 100) for label in AutomationLabel
            }
            averages = {
                "automation_potential": round_half_up(sum(r.automation_potential for r in results) / total),
                "confidence": round_half_up(sum(r.confidence for r in results) / total),
                "analysis_time_ms": round_half_up(sum(r.analysis_time_ms for r in results) / total),
            }

        return AnalysisStats(
            total_tasks=total,
            distribution=distribution,
            averages=averages,
            category_counts=dict(Counter(result.category for result in results)),
        )


_default_engine = AnalysisEngine()


def analyze_task(text: str, context: Optional[str] = None) -> AnalysisResult:
    """Analyze one task with the default engine."""
    return _default_engine.analyze_task(text, context)


def analyze_tasks(texts: Iterable[str], context: Optional[str] = None) -> List[AnalysisResult]:
    """Analyze several tasks with the default engine."""
    return _default_engine.analyze_tasks(texts, context)


def get_analysis_stats(results: List[AnalysisResult]) -> AnalysisStats:
    """Aggregate results with the default engine."""
    return _default_engine.get_analysis_stats(results)
