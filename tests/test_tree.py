import pytest

from engine import TreeSession
from models import BinaryTree


VALUES = [50, 30, 70, 20, 40, 60, 80]


@pytest.fixture
def session(make_session):
    session = make_session(TreeSession)
    session.generate_data(values=VALUES)
    return session


def test_inorder_is_ascending(session, run_live):
    run_live(session, "inorder")

    assert session.state.traversal_result == sorted(VALUES)
    assert session.state.call_stack == []


def test_preorder_starts_with_root(session, run_live):
    run_live(session, "preorder")

    assert session.state.traversal_result == [50, 30, 20, 40, 70, 60, 80]


def test_postorder_ends_with_root(session, run_live):
    run_live(session, "postorder")

    assert session.state.traversal_result == [20, 40, 30, 60, 80, 70, 50]


@pytest.mark.parametrize("seed", range(10))
def test_traversal_order_properties_on_random_trees(make_session, run_live, seed):
    session = make_session(TreeSession, seed=seed)
    root = session.state.tree.root.value

    run_live(session, "inorder")
    assert session.state.traversal_result == sorted(session.state.traversal_result)
    assert len(session.state.traversal_result) == len(session.state.tree)

    run_live(session, "preorder")
    assert session.state.traversal_result[0] == root

    run_live(session, "postorder")
    assert session.state.traversal_result[-1] == root


def test_call_stack_tracks_recursion_depth(session):
    steps = session.registry.get("inorder").generate_steps()

    assert max(len(step.call_stack) for step in steps) == 3
    assert steps[-1].call_stack == []
    assert steps[-1].edge_explored_count == len(VALUES) - 1
    assert steps[-1].visited_count == len(VALUES)


def test_bst_depth_and_size_are_capped():
    tree = BinaryTree.from_values(list(range(1, 20)))

    assert len(tree) == 5
    assert max(tree.depth(node.id) for node in tree.nodes) == 4


def test_random_tree_respects_ordering():
    tree = BinaryTree.generate_random()

    for node in tree.nodes:
        if node.left is not None:
            assert tree.get(node.left).value < node.value
        if node.right is not None:
            assert tree.get(node.right).value >= node.value
    assert len(tree) <= 15


def test_empty_tree_is_a_no_op(make_session, run_live):
    session = make_session(TreeSession)
    session.generate_data(values=[])

    assert run_live(session, "preorder") is None
    assert session.state.traversal_result == []
