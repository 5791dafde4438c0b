"""
Subtask synthesis.

Turns one analyzed task into an ordered batch of 3-10 templated subtasks.
Everything except the id timestamp is a pure function of the task text, the
PatternMatch and the ContextAnalysis.

Per position i of a batch of N:
    title       stage label + verb + object (+ domain term, system modifier)
    potential   pattern score + position/verb/system variation, in [10, 95]
    time        60 min x complexity x position x automation multipliers
    priority    critical for i = 0, high above 80% potential, else medium
    complexity  from context complexity, system count and position
    deps        predecessor plus dependency_rules.DEPENDENCY_RULES
"""

from typing import List, Optional, Sequence

from autoscope.contexts.analysis.data_structures import ContextAnalysis, GeneratedSubtask, PatternMatch
from autoscope.contexts.analysis.dependency_rules import DEPENDENCY_RULES, DependencyRule, dependency_targets
from autoscope.contexts.analysis.logger import _log_debug
from autoscope.contexts.analysis.scoring_config import DEFAULT_SCORING_CONFIG, ScoringConfig
from autoscope.contexts.analysis.subtask_templates import (
    OpportunityPhrases,
    RiskPhrases,
    TemplateFamily,
    TemplateRegistry,
    VerbClasses,
    extract_specific_terms,
    system_modifier,
    verb_in_class,
)
from autoscope.utils.scoring import clamp, round_half_up
from autoscope.utils.timestamp import now_ms

# Keyword groups that each add one subtask (integration, workflow, automation setup)
COUNT_KEYWORD_GROUPS = (
    ("integration", "api"),
    ("workflow", "prozess"),
    ("automatisierung", "automatisch", "automation"),
)


def make_subtask_id(timestamp_ms: int, index: int) -> str:
    return f"subtask-{timestamp_ms}-{index}"


class SubtaskSynthesizer:
    """
    Generates subtask batches from template families.

    Attributes:
        registry: Validated TemplateRegistry
        rules: Extra dependency rules
        config: Scoring weights (subtask section)
    """

    def __init__(
        self,
        registry: TemplateRegistry = None,
        rules: Sequence[DependencyRule] = DEPENDENCY_RULES,
        config: ScoringConfig = None,
    ):
        self.registry = registry or TemplateRegistry()
        self.rules = rules
        self.config = config or DEFAULT_SCORING_CONFIG

    def generate_subtasks(
        self,
        text: str,
        pattern_match: PatternMatch,
        context_analysis: ContextAnalysis,
        timestamp: Optional[int] = None,
    ) -> List[GeneratedSubtask]:
        """
        Generate the subtask batch for one task.

        Args:
            text: Original task text
            pattern_match: Result of PatternMatcher.match()
            context_analysis: Result of ContextAnalyzer.analyze_context()
            timestamp: Batch timestamp in ms for the ids (defaults to now)

        Returns:
            Subtasks in position order
        """
        if timestamp is None:
            timestamp = now_ms()

        family = self.registry.resolve(pattern_match.pattern)
        count = self.calculate_subtask_count(text, pattern_match.score)
        terms = extract_specific_terms(text)
        ids = [make_subtask_id(timestamp, i) for i in range(count)]

        _log_debug(
            f"Generating {count} subtasks for pattern '{pattern_match.pattern}' "
            f"(template family '{family.id}', stages '{family.stages.name}')"
        )

        return [
            self._build_subtask(i, ids, family, terms, pattern_match, context_analysis)
            for i in range(count)
        ]

    def calculate_subtask_count(self, text: str, automation_score: float) -> int:
        """
        Number of subtasks for a text, clamped to [min_count, max_count].

        Longer texts and very high or very low scores get more steps, as do
        texts that mention integration, workflow or automation.
        """
        weights = self.config.subtasks

        count = weights.default_count
        for tier in weights.length_tiers:
            if len(text) > tier.min_length:
                count = tier.base_count
                break

        if automation_score > weights.high_score_threshold:
            count += weights.high_score_bonus
        elif automation_score < weights.very_low_score_threshold:
            count += weights.very_low_score_bonus
        elif automation_score < weights.low_score_threshold:
            count += weights.low_score_bonus

        lower_text = text.lower()
        for group in COUNT_KEYWORD_GROUPS:
            if any(keyword in lower_text for keyword in group):
                count += weights.keyword_group_bonus

        return int(clamp(count, weights.min_count, weights.max_count))

    def _build_subtask(
        self,
        index: int,
        ids: List[str],
        family: TemplateFamily,
        terms: List[str],
        pattern_match: PatternMatch,
        context_analysis: ContextAnalysis,
    ) -> GeneratedSubtask:
        weights = self.config.subtasks
        systems = context_analysis.systems

        verb = family.verb_at(index)
        obj = family.object_at(index)
        term = terms[index % len(terms)] if terms else ""
        modifier = system_modifier(systems, index)

        title = self.registry.render_title(
            stage=family.stages.stage_label(index),
            verb=verb,
            obj=obj,
            term=term,
            modifier=modifier,
        )
        title = family.stages.refine(title, index)

        variation = self.calculate_automation_variation(index, verb, systems)
        potential = int(
            clamp(
                round_half_up(pattern_match.score + variation),
                weights.min_potential,
                weights.max_potential,
            )
        )

        return GeneratedSubtask(
            id=ids[index],
            index=index,
            title=title,
            description=self.registry.render_description(title, term, systems),
            automation_potential=potential,
            estimated_time=self.calculate_estimated_time(index, pattern_match.complexity, potential),
            priority=self.calculate_priority(index, potential),
            complexity=self.calculate_complexity(index, len(systems), context_analysis.complexity),
            systems=list(systems[: weights.max_systems]),
            dependencies=[ids[t] for t in dependency_targets(index, len(ids), systems, self.rules)],
            risks=self.generate_risks(verb, systems, potential),
            opportunities=self.generate_opportunities(verb, potential, systems),
        )

    def calculate_automation_variation(self, index: int, verb: str, systems: Sequence[str]) -> int:
        weights = self.config.subtasks
        variation = 0

        if index == 0:
            variation += weights.first_position_bonus
        if index == 1:
            variation += weights.second_position_bonus
        if index >= weights.late_position_start:
            variation -= weights.late_position_penalty

        if verb_in_class(verb, VerbClasses.HIGH_AUTOMATION):
            variation += weights.high_automation_verb_bonus
        if verb_in_class(verb, VerbClasses.LOW_AUTOMATION):
            variation -= weights.low_automation_verb_penalty

        if "excel" in systems or "api" in systems:
            variation += weights.spreadsheet_api_bonus
        if "email" in systems or "calendar" in systems:
            variation += weights.email_calendar_bonus

        return variation

    def calculate_estimated_time(self, index: int, complexity: str, potential: float) -> int:
        """Estimated minutes for one subtask."""
        weights = self.config.subtasks
        minutes = weights.base_minutes * weights.complexity_time_multipliers.get(complexity, 1.0)

        if index in weights.middle_positions:
            minutes *= weights.middle_position_multiplier

        if potential > weights.very_high_potential:
            minutes *= weights.very_high_potential_multiplier
        elif potential > weights.high_potential:
            minutes *= weights.high_potential_multiplier
        elif potential < weights.low_potential:
            minutes *= weights.low_potential_multiplier

        return round_half_up(minutes)

    def calculate_priority(self, index: int, potential: float) -> str:
        if index == 0:
            return "critical"
        if potential > self.config.subtasks.high_priority_threshold:
            return "high"
        return "medium"

    def calculate_complexity(self, index: int, system_count: int, context_complexity: str) -> str:
        weights = self.config.subtasks
        score = weights.context_complexity_points.get(context_complexity, 0)

        if system_count > weights.many_systems_threshold:
            score += weights.many_systems_points
        if system_count > 0:
            score += weights.any_system_points

        if index > weights.late_complexity_index:
            score += weights.late_complexity_points

        if score >= weights.complexity_high_threshold:
            return "high"
        if score >= weights.complexity_medium_threshold:
            return "medium"
        return "low"

    def generate_risks(self, verb: str, systems: Sequence[str], potential: float) -> List[str]:
        weights = self.config.subtasks
        risks: List[str] = []

        if verb_in_class(verb, VerbClasses.ENTRY):
            risks.extend(RiskPhrases.ENTRY)
        if verb_in_class(verb, VerbClasses.EVALUATION):
            risks.extend(RiskPhrases.EVALUATION)

        if "api" in systems:
            risks.extend(RiskPhrases.API)
        if "excel" in systems:
            risks.extend(RiskPhrases.SPREADSHEET)

        if potential > weights.over_automation_threshold:
            risks.extend(RiskPhrases.OVER_AUTOMATION)
        elif potential < weights.manual_error_threshold:
            risks.extend(RiskPhrases.MANUAL)

        return risks[: weights.max_risks]

    def generate_opportunities(self, verb: str, potential: float, systems: Sequence[str]) -> List[str]:
        weights = self.config.subtasks
        opportunities: List[str] = []

        if potential > weights.full_automation_threshold:
            opportunities.extend(OpportunityPhrases.FULL_AUTOMATION)
        if potential > weights.partial_automation_threshold:
            opportunities.extend(OpportunityPhrases.PARTIAL_AUTOMATION)

        if "api" in systems:
            opportunities.extend(OpportunityPhrases.API)
        if "excel" in systems:
            opportunities.extend(OpportunityPhrases.SPREADSHEET)

        if verb_in_class(verb, VerbClasses.COLLECTION):
            opportunities.extend(OpportunityPhrases.COLLECTION)

        return opportunities[: weights.max_opportunities]
