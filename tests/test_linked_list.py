import os
import sys

import pytest

REPO_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
if REPO_ROOT not in sys.path:
	sys.path.insert(0, REPO_ROOT)

from linked_list import Node, SimpleLinkedList


def _nodes(lst):
	out = []
	current = lst.head
	while current is not None:
		out.append(current)
		current = current.next
	return out


def test_add_appends_to_tail():
	lst = SimpleLinkedList()
	lst.add("A")
	lst.append("B")
	lst.add("C")
	assert list(lst) == ["A", "B", "C"]
	assert len(lst) == 3
	assert str(lst) == "ABC"


def test_find_middle_empty_list():
	assert SimpleLinkedList().find_middle() is None


@pytest.mark.parametrize("values, expected", [
	("A", "A"),
	("AB", "A"),
	("ABC", "B"),
	("ABCD", "B"),
	("ABCDE", "C"),
	("ABCDEF", "C"),
])
def test_find_middle(values, expected):
	middle = SimpleLinkedList(values).find_middle()
	assert isinstance(middle, Node)
	assert str(middle) == expected


def test_invert_reverses_chain():
	lst = SimpleLinkedList("ABC")
	before = _nodes(lst)
	inverted = lst.invert()

	after = _nodes(inverted)
	assert [node.data for node in after] == ["C", "B", "A"]
	# same node objects, relinked, values untouched
	assert after == list(reversed(before))
	assert str(inverted) == "CBA"
	assert after[-1].next is None


def test_invert_moves_nodes_out_of_source():
	lst = SimpleLinkedList("AB")
	inverted = lst.reverse()
	assert lst.head is None
	assert str(lst) == ""
	assert list(inverted) == ["B", "A"]


def test_invert_empty_and_single():
	assert SimpleLinkedList().invert().head is None
	single = SimpleLinkedList(["only"]).invert()
	assert list(single) == ["only"]


def test_str_of_mixed_values():
	assert str(SimpleLinkedList([1, "x", 2])) == "1x2"
