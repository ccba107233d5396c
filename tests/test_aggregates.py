"""Tests for terminal aggregate operations."""

from nodeit import (
    ALL,
    NONE,
    Node,
    NodeIterator,
    NodeKind,
    all_match,
    any_match,
    count,
    first,
    from_node,
    from_nodes,
    to_list,
    with_value,
)
from nodeit.testing import PredicateSpy, scalar


DOC = Node(NodeKind.DOCUMENT)


def counting_source(*values):
    """Iterator over scalars that records how many were pulled."""
    pulled = []

    def generate():
        for value in values:
            pulled.append(value)
            yield scalar(value)

    return NodeIterator(generate()), pulled


class TestAnyMatch:

    def test_returns_true_if_any_element_matches(self):
        assert from_node(DOC).any_match(ALL)

    def test_returns_false_if_no_element_matches(self):
        assert not from_node(DOC).any_match(NONE)

    def test_empty_iterator_never_matches(self):
        assert not NodeIterator(()).any_match(ALL)

    def test_stops_pulling_after_a_match(self):
        it, pulled = counting_source("a", "b", "c")

        assert it.any_match(with_value("a"))
        assert pulled == ["a"]
        assert next(it).value == "b"

    def test_accepts_plain_iterables(self):
        assert any_match([scalar("x"), scalar("y")], with_value("y"))


class TestAllMatch:

    def test_returns_true_if_all_elements_match(self):
        assert from_nodes(scalar("a"), scalar("a")).all_match(with_value("a"))

    def test_returns_false_if_any_element_does_not_match(self):
        assert not from_nodes(scalar("a"), scalar("b")).all_match(with_value("a"))

    def test_vacuously_true_when_empty(self):
        spy = PredicateSpy(NONE)

        assert NodeIterator(()).all_match(spy)
        assert spy.calls == 0

    def test_stops_pulling_after_a_failure(self):
        it, pulled = counting_source("a", "b", "c")

        assert not it.all_match(with_value("a"))
        assert pulled == ["a", "b"]
        assert next(it).value == "c"

    def test_accepts_plain_iterables(self):
        assert all_match([], NONE)


class TestToList:

    def test_adds_all_the_iterated_elements_to_a_list(self):
        nodes = [scalar("a"), scalar("b"), scalar("c")]

        result = from_nodes(*nodes).to_list()

        assert [node.value for node in result] == ["a", "b", "c"]
        assert all(got is want for got, want in zip(result, nodes))

    def test_module_function(self):
        it = from_nodes(scalar("a"))

        assert len(to_list(it)) == 1
        assert to_list(it) == []


class TestCountAndFirst:

    def test_count_drains(self):
        it = from_nodes(scalar("a"), scalar("b"))

        assert it.count() == 2
        assert count(it) == 0

    def test_first_pulls_a_single_item(self):
        it, pulled = counting_source("a", "b")

        assert it.first().value == "a"
        assert pulled == ["a"]

    def test_first_default_when_empty(self):
        marker = scalar("default")

        assert NodeIterator(()).first() is None
        assert first(NodeIterator(()), marker) is marker
