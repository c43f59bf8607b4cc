import pytest

from seqprob.context_tree import ContextTreeNode
from seqprob.discrete_iid import create_fair_coin_iid_model


def test_new_node_is_empty_leaf():
    node = ContextTreeNode(3)
    assert node.is_leaf() is True
    assert node.counter == [0.0, 0.0, 0.0]
    assert node.children() == [None, None, None]
    assert node.alphabet_size == 3


def test_set_child_makes_node_internal():
    root = ContextTreeNode(2)
    child = ContextTreeNode(2)
    root.set_child(child, 1)
    assert root.is_leaf() is False
    assert root.child(1) is child
    assert root.child(0) is None
    assert root.children() == [None, child]


def test_delete_children_restores_leaf():
    root = ContextTreeNode(2)
    root.set_child(ContextTreeNode(2), 0)
    root.delete_children()
    assert root.is_leaf() is True
    assert root.children() == [None, None]


def test_add_count_default_weight():
    node = ContextTreeNode(2)
    node.add_count(0)
    node.add_count(0)
    node.add_count(1)
    assert node.counter == [2.0, 1.0]


def test_add_count_with_weight():
    node = ContextTreeNode(2)
    node.add_count(1, 2.5)
    node.add_count(1, 0.5)
    assert node.counter == [0.0, 3.0]


def test_set_count_overrides():
    node = ContextTreeNode(3)
    node.add_count(2, 4.0)
    node.set_count(2, 1.5)
    assert node.counter == [0.0, 0.0, 1.5]


@pytest.mark.parametrize("symbol", [-1, 2, 10])
def test_out_of_alphabet_symbol_raises(symbol):
    node = ContextTreeNode(2)
    with pytest.raises(IndexError):
        node.add_count(symbol)
    with pytest.raises(IndexError):
        node.child(symbol)
    with pytest.raises(IndexError):
        node.set_child(ContextTreeNode(2), symbol)


def test_children_returns_copy():
    node = ContextTreeNode(2)
    slots = node.children()
    slots[0] = ContextTreeNode(2)
    assert node.child(0) is None


def test_distribution_and_identity_attributes():
    node = ContextTreeNode(2)
    distribution = create_fair_coin_iid_model()
    node.distribution = distribution
    node.id = 4
    node.parent = 1
    node.symbol = 0
    assert node.distribution is distribution
    assert (node.id, node.parent, node.symbol) == (4, 1, 0)