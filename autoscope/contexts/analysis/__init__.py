"""
Analysis Context

Responsibilities:
- Classifies task texts against the static task pattern catalog
- Extracts context signals (systems, complexity, trend, automation signals)
- Synthesizes templated subtasks with timing, priority and dependencies
- Combines everything into an automation potential, confidence and label

Owns: Pattern catalog, keyword tables, subtask templates, scoring weights
Never: Reads postings from disk, caches results or persists anything
"""

from autoscope.contexts.analysis.context_analyzer import ContextAnalyzer, detect_industry
from autoscope.contexts.analysis.data_structures import (
    AnalysisResult,
    AnalysisStats,
    AutomationLabel,
    AutomationSignals,
    ContextAnalysis,
    GeneratedSubtask,
    PatternMatch,
    TaskPattern,
)
from autoscope.contexts.analysis.engine import (
    AnalysisEngine,
    analyze_task,
    analyze_tasks,
    get_analysis_stats,
)
from autoscope.contexts.analysis.exceptions import ScoringConfigError, TemplateConfigurationError
from autoscope.contexts.analysis.pattern_matcher import PatternMatcher
from autoscope.contexts.analysis.scoring_config import ScoringConfig, load_scoring_config
from autoscope.contexts.analysis.subtask_synthesizer import SubtaskSynthesizer
from autoscope.contexts.analysis.subtask_templates import TemplateRegistry
from autoscope.contexts.analysis.task_patterns import get_all_patterns, get_pattern_details

__all__ = [
    # Entry points
    "analyze_task",
    "analyze_tasks",
    "get_analysis_stats",
    "AnalysisEngine",
    # Pipeline components
    "PatternMatcher",
    "ContextAnalyzer",
    "SubtaskSynthesizer",
    "TemplateRegistry",
    "detect_industry",
    "get_pattern_details",
    "get_all_patterns",
    # Configuration
    "ScoringConfig",
    "load_scoring_config",
    # Data structures
    "AnalysisResult",
    "AnalysisStats",
    "AutomationLabel",
    "AutomationSignals",
    "ContextAnalysis",
    "GeneratedSubtask",
    "PatternMatch",
    "TaskPattern",
    # Exceptions
    "ScoringConfigError",
    "TemplateConfigurationError",
]
