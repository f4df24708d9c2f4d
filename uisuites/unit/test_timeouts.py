from unittest.mock import MagicMock

import pytest

from uisuites.ui_testing.framework import timeouts
from uisuites.ui_testing.framework.timeouts import TimeoutBudget, apply_budget, budget_for_node


class FakeNode:
    def __init__(self, *marks):
        self._marks = {mark.name: mark for mark in marks}

    def get_closest_marker(self, name):
        return self._marks.get(name)


BASE = TimeoutBudget(action=1000, navigation=2000, expect=500)


def test_budget_from_repository_config():
    budget = TimeoutBudget.from_config()
    assert budget == TimeoutBudget(action=10000, navigation=30000, expect=5000)


def test_unmarked_node_keeps_base_budget():
    assert budget_for_node(FakeNode(), BASE) == BASE


def test_slow_marker_triples_every_timeout():
    budget = budget_for_node(FakeNode(pytest.mark.slow.mark), BASE)
    assert budget == TimeoutBudget(action=3000, navigation=6000, expect=1500)


def test_extend_timeout_marker_adds_milliseconds():
    budget = budget_for_node(FakeNode(pytest.mark.extend_timeout(20000).mark), BASE)
    assert budget == TimeoutBudget(action=21000, navigation=22000, expect=20500)


def test_extension_is_applied_before_slow_scaling():
    node = FakeNode(pytest.mark.slow.mark, pytest.mark.extend_timeout(ms=100).mark)
    budget = budget_for_node(node, BASE)
    assert budget.action == (1000 + 100) * 3


def test_apply_budget_sets_page_and_expect_defaults(monkeypatch):
    fake_expect = MagicMock()
    monkeypatch.setattr(timeouts, "expect", fake_expect)
    page = MagicMock()

    apply_budget(page, BASE)

    page.set_default_timeout.assert_called_once_with(1000)
    page.set_default_navigation_timeout.assert_called_once_with(2000)
    fake_expect.set_options.assert_called_once_with(timeout=500)
