import pytest

from alphatrie.util import logger


@pytest.fixture(autouse=True)
def reset_log_level():
    yield
    logger.setLevel('INFO')


def walk(node):
    stack = [node]
    while stack:
        n = stack.pop()
        yield n
        stack.extend(c for _, c in n.children_items())


def assert_structure(trie):
    """Every non-root node is useful and sits in the slot its parent expects."""
    root = trie.root
    assert root.parent is None
    assert root.key is None
    for node in walk(root):
        if node is root:
            continue
        assert node.has_value() or node.has_children()
        parent = node.parent
        assert parent is not None
        assert parent.children[trie.alphabet.ord(node.key)] is node
