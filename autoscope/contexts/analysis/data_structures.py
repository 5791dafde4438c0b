"""
Data structures for the Analysis context.

Every stage of the pipeline returns one of these plain dataclasses:
PatternMatcher -> PatternMatch, ContextAnalyzer -> ContextAnalysis,
SubtaskSynthesizer -> list[GeneratedSubtask], AnalysisEngine -> AnalysisResult.

Scores are on the 0-100 scale unless noted. Complexity values are
"low" | "medium" | "high"; trends are "increasing" | "stable" | "decreasing";
priorities are "low" | "medium" | "high" | "critical".
"""

from dataclasses import asdict, dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Tuple


class AutomationLabel(Enum):
    """Overall verdict derived from the final automation potential."""

    AUTOMATABLE = "Automatable"
    PARTIALLY_AUTOMATABLE = "Partially Automatable"
    HUMAN = "Human"


@dataclass(frozen=True)
class TaskPattern:
    """
    Named task category from the static pattern catalog.

    Attributes:
        id: Catalog key (e.g., "bookkeeping")
        name: Display name used in reasoning text
        keywords: Lowercase substrings that indicate this pattern
        automation_score: Base automation score at full keyword coverage
        complexity: Typical complexity of tasks of this kind
        confidence: Confidence (0-1) attached to a match of this pattern
        category: Broad category (e.g., "finance", "hr")
    """

    id: str
    name: str
    keywords: Tuple[str, ...]
    automation_score: float
    complexity: str
    confidence: float
    category: str


@dataclass(frozen=True)
class PatternMatch:
    """Winning pattern for one text. Score is unrounded (base x coverage, with domain multiplier)."""

    pattern: str
    score: float
    confidence: float
    category: str
    complexity: str


@dataclass(frozen=True)
class AutomationSignals:
    """Six keyword-driven signal scores, each 0-100."""

    repetitive: int = 0
    structured: int = 0
    digital: int = 0
    routine: int = 0
    creative: int = 0
    human: int = 0

    def as_dict(self) -> Dict[str, int]:
        return asdict(self)

    def average(self) -> float:
        values = self.as_dict().values()
        return sum(values) / len(values)


@dataclass(frozen=True)
class ContextAnalysis:
    """Secondary signals extracted from a task text (and optional job context)."""

    complexity: str
    trend: str
    systems: Tuple[str, ...]
    signals: AutomationSignals
    final_score: int
    industry: str = "general"


@dataclass
class GeneratedSubtask:
    """
    One synthesized sub-step of a task.

    Attributes:
        id: Unique id, "subtask-<batch timestamp ms>-<index>"
        index: Position within the batch (0-based)
        title: Stage-prefixed title
        description: Title plus domain term and systems
        automation_potential: 10-95
        estimated_time: Minutes
        priority: "critical" for the first subtask, then "high" or "medium"
        complexity: "low" | "medium" | "high"
        systems: Up to two detected systems relevant to the subtask
        dependencies: Ids of earlier subtasks in the same batch
        risks: Up to three risk phrases
        opportunities: Up to three opportunity phrases
    """

    id: str
    index: int
    title: str
    description: str
    automation_potential: int
    estimated_time: int
    priority: str
    complexity: str
    systems: List[str] = field(default_factory=list)
    dependencies: List[str] = field(default_factory=list)
    risks: List[str] = field(default_factory=list)
    opportunities: List[str] = field(default_factory=list)


@dataclass
class AnalysisResult:
    """Aggregate assessment of one task text."""

    text: str
    automation_potential: int
    confidence: int
    pattern: str
    category: str
    complexity: str
    trend: str
    systems: List[str]
    label: AutomationLabel
    reasoning: str
    analysis_time_ms: float
    subtasks: List[GeneratedSubtask] = field(default_factory=list)
    industry: str = "general"

    def to_dict(self) -> dict:
        """JSON-ready representation (label as its display string)."""
        data = asdict(self)
        data["label"] = self.label.value
        return data


@dataclass
class AnalysisStats:
    """
    Aggregates over a batch of AnalysisResults.

    Attributes:
        total_tasks: Number of results aggregated
        distribution: Label display string -> rounded percentage of results
        averages: Rounded means of automation_potential, confidence, analysis_time_ms
        category_counts: Pattern category -> number of results
    """

    total_tasks: int
    distribution: Dict[str, int]
    averages: Dict[str, int]
    category_counts: Optional[Dict[str, int]] = None
