import pytest
import tree_sitter as ts
import tree_sitter_java as tsjava


def _walk(node: ts.Node):
    yield node
    for child in node.children:
        yield from _walk(child)


@pytest.fixture(scope="session")
def java_parser() -> ts.Parser:
    return ts.Parser(ts.Language(tsjava.language()))


@pytest.fixture
def parse_java(java_parser):
    """Parse Java text and return the root node."""

    def _parse(text: str) -> ts.Node:
        return java_parser.parse(text.encode("utf-8")).root_node

    return _parse


@pytest.fixture
def find_node():
    """Return the first node of *node_type* whose text starts with *prefix*."""

    def _find(root: ts.Node, node_type: str, prefix: str = "") -> ts.Node:
        for node in _walk(root):
            if node.type == node_type and node.text.decode("utf-8").startswith(prefix):
                return node
        raise AssertionError(f"no {node_type} node starting with {prefix!r}")

    return _find
