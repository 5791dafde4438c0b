"""Unit tests for subtask dependency rules."""

import pytest

from autoscope.contexts.analysis.dependency_rules import DEPENDENCY_RULES, DependencyRule, dependency_targets


@pytest.mark.unit
def test_first_subtask_has_no_dependencies():
    assert dependency_targets(0, 10, ("api", "excel", "crm")) == []


@pytest.mark.unit
def test_linear_chain_without_systems():
    for index in range(1, 5):
        assert dependency_targets(index, 5, ()) == [index - 1]


@pytest.mark.unit
def test_api_links_back_to_setup():
    assert dependency_targets(1, 5, ("api",)) == [0]
    assert dependency_targets(2, 5, ("api",)) == [1, 0]
    assert dependency_targets(4, 5, ("api",)) == [3, 0]


@pytest.mark.unit
def test_excel_and_crm_link_to_preparation():
    assert dependency_targets(3, 5, ("excel",)) == [2, 1]
    assert dependency_targets(3, 5, ("crm",)) == [2]
    assert dependency_targets(4, 5, ("crm",)) == [3, 1]


@pytest.mark.unit
def test_duplicate_targets_are_removed():
    """Test excel and crm both pointing at index 1 yield one edge."""
    assert dependency_targets(4, 5, ("api", "excel", "crm")) == [3, 0, 1]


@pytest.mark.unit
def test_predecessor_target_is_not_duplicated():
    rules = (DependencyRule(target=0),)
    assert dependency_targets(1, 5, (), rules) == [0]


@pytest.mark.unit
def test_large_batch_edges():
    """Test positions 5 and 6 of batches larger than 6 get extra edges."""
    assert dependency_targets(5, 7, ()) == [4, 2]
    assert dependency_targets(6, 7, ()) == [5, 3]
    assert dependency_targets(5, 6, ()) == [4]


@pytest.mark.unit
def test_rules_never_point_forward():
    """Test all edges point to lower indices, so every batch is acyclic."""
    systems = ("api", "excel", "crm")
    for batch_size in range(3, 11):
        for index in range(batch_size):
            assert all(target < index for target in dependency_targets(index, batch_size, systems))


@pytest.mark.unit
def test_rule_with_forward_target_never_applies():
    rule = DependencyRule(target=5)
    assert not rule.applies(3, 10, ())
    assert rule.applies(6, 10, ())


@pytest.mark.unit
def test_custom_rule_table():
    rules = (DependencyRule(target=0, system="email"),)
    assert dependency_targets(3, 5, ("email",), rules) == [2, 0]
    assert dependency_targets(3, 5, ("email",), DEPENDENCY_RULES) == [2]
