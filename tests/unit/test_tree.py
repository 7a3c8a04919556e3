"""Unit tests for the rule tree model."""

import pytest

from htkdocs.core import Group, Root, Rule, count_items, find_item, is_mock_rule, visit


class TestVisit:
    """Tests for visit() pre-order traversal."""

    def test_root_is_unwrapped(self, tree):
        """The root itself is never yielded."""
        nodes = list(visit(tree))
        assert all(not isinstance(node, Root) for node in nodes)

    def test_pre_order(self, tree):
        """Groups come before their children, siblings in list order."""
        assert [node.id for node in visit(tree)] == ["g1", "r1", "r2"]

    def test_nested_groups(self):
        """Arbitrarily nested groups are flattened in document order."""
        root = Root(items=[
            Group(id="a", title="A", items=[
                Group(id="b", title="B", items=[Rule(id="r1")]),
                Rule(id="r2"),
            ]),
            Group(id="c", title="C"),
        ])
        assert [node.id for node in visit(root)] == ["a", "b", "r1", "r2", "c"]

    def test_empty_root(self):
        """An empty tree yields nothing."""
        assert list(visit(Root())) == []

    def test_visit_single_rule(self):
        """A rule on its own yields just itself."""
        rule = Rule(id="r")
        assert list(visit(rule)) == [rule]

    def test_unknown_node_raises(self):
        """Anything that is not a tree node is rejected."""
        with pytest.raises(TypeError):
            list(visit(Root(items=[{"id": "not-a-node"}])))

    def test_items_added_to_visited_group_are_not_seen(self):
        """Each group's items are read when that group is reached."""
        group = Group(id="g", title="G", items=[Rule(id="r1")])
        root = Root(items=[group])
        seen = []
        for node in visit(root):
            seen.append(node.id)
            if node.id == "r1":
                group.items.append(Rule(id="late"))
        assert seen == ["g", "r1"]


class TestFindItem:
    """Tests for find_item() and count_items()."""

    def test_finds_nested_rule(self, tree):
        assert find_item(tree, "r1").title == "Login mock"

    def test_finds_group(self, tree):
        assert isinstance(find_item(tree, "g1"), Group)

    def test_missing_returns_none(self, tree):
        assert find_item(tree, "nope") is None

    def test_root_id_is_not_an_item(self, tree):
        assert find_item(tree, "root") is None

    def test_count_items(self, tree):
        assert count_items(tree) == 3


class TestIsMockRule:
    """Tests for is_mock_rule() classification."""

    def test_http_with_single_simple_step(self):
        rule = Rule(id="r", type="http", steps=[{"type": "simple", "status": 200}])
        assert is_mock_rule(rule)

    def test_two_steps_is_not_mock(self):
        rule = Rule(id="r", type="http", steps=[
            {"type": "simple", "status": 200},
            {"type": "simple", "status": 404},
        ])
        assert not is_mock_rule(rule)

    def test_other_step_kind_is_not_mock(self):
        rule = Rule(id="r", type="http", steps=[{"type": "passthrough"}])
        assert not is_mock_rule(rule)

    def test_non_http_rule_is_not_mock(self):
        rule = Rule(id="r", type="websocket", steps=[{"type": "simple"}])
        assert not is_mock_rule(rule)

    def test_no_steps_is_not_mock(self):
        assert not is_mock_rule(Rule(id="r"))

    def test_ui_type_takes_precedence(self):
        """The step's UI type is its kind key when present."""
        rule = Rule(id="r", steps=[{"type": "callback", "uiType": "simple"}])
        assert is_mock_rule(rule)
