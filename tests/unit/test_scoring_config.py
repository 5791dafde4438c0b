"""Unit tests for scoring configuration loading."""

import pytest

from autoscope.contexts.analysis.exceptions import ScoringConfigError
from autoscope.contexts.analysis.scoring_config import (
    SCORING_CONFIG_ENV_VAR,
    ScoringConfig,
    load_scoring_config,
)


@pytest.fixture(autouse=True)
def _no_env_override(monkeypatch):
    monkeypatch.delenv(SCORING_CONFIG_ENV_VAR, raising=False)


@pytest.mark.unit
def test_defaults():
    config = load_scoring_config()

    assert isinstance(config, ScoringConfig)
    assert config.patterns.domain_priority_multiplier == 1.5
    assert config.combination.automatable_threshold == 70
    assert config.subtasks.max_count == 10
    assert config.subtasks.length_tiers[0].min_length == 300


@pytest.mark.unit
def test_yaml_override_merges_onto_defaults(tmp_path):
    config_path = tmp_path / "overrides.yaml"
    config_path.write_text("combination:\n  automatable_threshold: 75\nsubtasks:\n  max_count: 8\n")

    config = load_scoring_config(config_path)

    assert config.combination.automatable_threshold == 75
    assert config.subtasks.max_count == 8
    # Untouched values keep their defaults
    assert config.combination.pattern_weight == 0.6
    assert config.complexity.high_threshold == 40


@pytest.mark.unit
def test_env_var_override(tmp_path, monkeypatch):
    config_path = tmp_path / "overrides.yaml"
    config_path.write_text("complexity:\n  high_threshold: 50\n")
    monkeypatch.setenv(SCORING_CONFIG_ENV_VAR, str(config_path))

    assert load_scoring_config().complexity.high_threshold == 50


@pytest.mark.unit
def test_unknown_key_raises(tmp_path):
    config_path = tmp_path / "overrides.yaml"
    config_path.write_text("combination:\n  no_such_weight: 1\n")

    with pytest.raises(ScoringConfigError) as exc_info:
        load_scoring_config(config_path)

    assert exc_info.value.config_path == config_path
    assert "overrides.yaml" in str(exc_info.value)


@pytest.mark.unit
def test_malformed_yaml_raises(tmp_path):
    """Test that an unparseable override file is reported as a ScoringConfigError."""
    config_path = tmp_path / "overrides.yaml"
    config_path.write_text("complexity: [unclosed\n")

    with pytest.raises(ScoringConfigError) as exc_info:
        load_scoring_config(config_path)

    assert exc_info.value.config_path == config_path
    assert "not valid YAML" in str(exc_info.value)


@pytest.mark.unit
def test_wrong_type_raises(tmp_path):
    config_path = tmp_path / "overrides.yaml"
    config_path.write_text("subtasks:\n  max_count: many\n")

    with pytest.raises(ScoringConfigError):
        load_scoring_config(config_path)


@pytest.mark.unit
def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_scoring_config(tmp_path / "missing.yaml")
