"""
Scoring weights and thresholds for the analysis pipeline.

Every number the pipeline uses to score, classify or size its output lives in
ScoringConfig. The defaults are the production heuristics; a YAML file can
override any subset of them:

    # scoring_overrides.yaml
    complexity:
      high_threshold: 50
    combination:
      automatable_threshold: 75

Overrides are merged onto the defaults with OmegaConf, so unknown keys and
wrongly typed values are rejected instead of being silently ignored.

Examples:
    >>> config = load_scoring_config()                      # defaults (or $AUTOSCOPE_SCORING_CONFIG)
    >>> config = load_scoring_config(Path("overrides.yaml"))
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional

import yaml
from dotenv import load_dotenv
from omegaconf import OmegaConf
from omegaconf.errors import OmegaConfBaseException

from autoscope.contexts.analysis.exceptions import ScoringConfigError
from autoscope.contexts.analysis.logger import _log_info

load_dotenv()
SCORING_CONFIG_ENV_VAR = "AUTOSCOPE_SCORING_CONFIG"


@dataclass
class PatternWeights:
    domain_priority_multiplier: float = 1.5
    fallback_score: float = 50.0
    fallback_confidence: float = 0.5


@dataclass
class SignalWeights:
    points_per_match: int = 20
    max_signal: int = 100
    base_score: float = 50.0
    # Positive (automation-favoring) signal weights
    repetitive: float = 0.3
    structured: float = 0.4
    digital: float = 0.3
    routine: float = 0.2
    # Negative (manual-favoring) signal weights
    creative: float = 0.4
    human: float = 0.3
    low_complexity_bonus: float = 10.0
    high_complexity_penalty: float = 10.0


@dataclass
class ComplexityWeights:
    high_keyword: int = 25
    medium_keyword: int = 15
    low_keyword_penalty: int = 10
    per_system: int = 8
    long_text_length: int = 150
    long_text_bonus: int = 15
    medium_text_length: int = 80
    medium_text_bonus: int = 8
    finance_bonus: int = 10
    marketing_bonus: int = 5
    high_threshold: int = 40
    medium_threshold: int = 20


@dataclass
class TrendWeights:
    increasing_keyword: int = 15
    decreasing_keyword_penalty: int = 15
    automation_system: int = 10
    finance_bonus: int = 20
    marketing_bonus: int = 15
    hr_bonus: int = 10
    increasing_threshold: int = 25
    decreasing_threshold: int = -25


@dataclass
class LengthTier:
    """Texts longer than min_length start with base_count subtasks."""

    min_length: int
    base_count: int


def _default_length_tiers() -> List[LengthTier]:
    # Checked in order; first tier whose min_length is exceeded wins
    return [
        LengthTier(min_length=300, base_count=8),
        LengthTier(min_length=200, base_count=7),
        LengthTier(min_length=150, base_count=6),
        LengthTier(min_length=100, base_count=5),
    ]


@dataclass
class SubtaskWeights:
    # Subtask count
    default_count: int = 4
    length_tiers: List[LengthTier] = field(default_factory=_default_length_tiers)
    high_score_threshold: float = 90.0
    high_score_bonus: int = 1
    very_low_score_threshold: float = 20.0
    very_low_score_bonus: int = 2
    low_score_threshold: float = 30.0
    low_score_bonus: int = 1
    keyword_group_bonus: int = 1
    min_count: int = 3
    max_count: int = 10

    # Automation potential
    min_potential: float = 10.0
    max_potential: float = 95.0
    first_position_bonus: int = 10
    second_position_bonus: int = 5
    late_position_start: int = 4
    late_position_penalty: int = 15
    high_automation_verb_bonus: int = 15
    low_automation_verb_penalty: int = 20
    spreadsheet_api_bonus: int = 10
    email_calendar_bonus: int = 5

    # Estimated time (minutes)
    base_minutes: float = 60.0
    complexity_time_multipliers: Dict[str, float] = field(
        default_factory=lambda: {"low": 0.5, "medium": 1.0, "high": 2.0}
    )
    middle_positions: List[int] = field(default_factory=lambda: [1, 2])
    middle_position_multiplier: float = 1.5
    very_high_potential: float = 80.0
    very_high_potential_multiplier: float = 0.3
    high_potential: float = 60.0
    high_potential_multiplier: float = 0.6
    low_potential: float = 30.0
    low_potential_multiplier: float = 1.5

    # Priority
    high_priority_threshold: float = 80.0

    # Subtask complexity points
    context_complexity_points: Dict[str, int] = field(
        default_factory=lambda: {"low": 0, "medium": 1, "high": 2}
    )
    many_systems_threshold: int = 2
    many_systems_points: int = 2
    any_system_points: int = 1
    late_complexity_index: int = 3
    late_complexity_points: int = 1
    complexity_high_threshold: int = 4
    complexity_medium_threshold: int = 2

    # Risk and opportunity bands
    over_automation_threshold: float = 80.0
    manual_error_threshold: float = 30.0
    full_automation_threshold: float = 70.0
    partial_automation_threshold: float = 50.0

    max_risks: int = 3
    max_opportunities: int = 3
    max_systems: int = 2


@dataclass
class CombinationWeights:
    pattern_weight: float = 0.6
    context_weight: float = 0.4
    pattern_confidence_weight: float = 0.7
    context_confidence_weight: float = 0.3
    signal_strength_weight: float = 0.6
    system_confidence_weight: float = 0.4
    systems_detected_confidence: float = 0.8
    no_systems_confidence: float = 0.5
    automatable_threshold: float = 70.0
    partially_automatable_threshold: float = 30.0
    strong_signal_threshold: float = 50.0


@dataclass
class ScoringConfig:
    """Complete weight and threshold table for the analysis pipeline."""

    patterns: PatternWeights = field(default_factory=PatternWeights)
    signals: SignalWeights = field(default_factory=SignalWeights)
    complexity: ComplexityWeights = field(default_factory=ComplexityWeights)
    trend: TrendWeights = field(default_factory=TrendWeights)
    subtasks: SubtaskWeights = field(default_factory=SubtaskWeights)
    combination: CombinationWeights = field(default_factory=CombinationWeights)


DEFAULT_SCORING_CONFIG = ScoringConfig()


def load_scoring_config(config_path: Optional[Path] = None) -> ScoringConfig:
    """
    Load the scoring configuration, merging an optional YAML override onto the defaults.

    Args:
        config_path: Optional override file. Defaults to the path in the
                     AUTOSCOPE_SCORING_CONFIG environment variable; when that
                     is unset too, the built-in defaults are returned.

    Returns:
        ScoringConfig instance

    Raises:
        FileNotFoundError: If the override file doesn't exist
        ScoringConfigError: If the override is not valid YAML, or has unknown keys
                            or wrong value types
    """
    if config_path is None:
        env_path = os.getenv(SCORING_CONFIG_ENV_VAR)
        if not env_path:
            return ScoringConfig()
        config_path = Path(env_path)

    config_path = Path(config_path)
    if not config_path.exists():
        raise FileNotFoundError(f"Scoring config not found at {config_path}")

    schema = OmegaConf.structured(ScoringConfig)
    try:
        overrides = OmegaConf.load(config_path)
    except yaml.YAMLError as e:
        raise ScoringConfigError(
            "Scoring override is not valid YAML",
            config_path=config_path,
            original_error=e,
        ) from e

    try:
        merged = OmegaConf.merge(schema, overrides)
        config = OmegaConf.to_object(merged)
    except OmegaConfBaseException as e:
        raise ScoringConfigError(
            "Scoring override does not match the ScoringConfig schema",
            config_path=config_path,
            original_error=e,
        ) from e

    _log_info(f"Loaded scoring overrides from {config_path}")
    return config
