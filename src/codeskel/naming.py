"""
Qualified-name resolution for type declarations.

Nested types are joined with ``$`` (binary-name style), so
``com.example.Outer$Inner$Deepest``. Both the chunker (which resolves names
top-down while descending) and :func:`resolve_qualified_name` (which starts
from an arbitrary node and walks upward) produce the same strings.
"""

from typing import List, Optional

import tree_sitter as ts

from codeskel.consts import (
    JAVA_IDENTIFIER,
    JAVA_PACKAGE,
    JAVA_SCOPED_IDENTIFIER,
    JAVA_TYPE_DECLARATIONS,
)
from codeskel.parsers import get_node_text

NESTED_TYPE_SEPARATOR = "$"


def find_first_of_type(node: ts.Node, node_type: str) -> Optional[ts.Node]:
    """Pre-order depth-first search; the first match wins."""
    if node.type == node_type:
        return node
    for child in node.children:
        found = find_first_of_type(child, node_type)
        if found is not None:
            return found
    return None


def _iter_identifiers(node: ts.Node):
    if node.type == JAVA_IDENTIFIER:
        yield node
        return
    for child in node.children:
        yield from _iter_identifiers(child)


def get_root(node: ts.Node) -> ts.Node:
    current = node
    while current.parent is not None:
        current = current.parent
    return current


def resolve_package_name(node: ts.Node) -> Optional[str]:
    """
    Return the dotted package of the file *node* belongs to.

    Only direct children of the root are considered, so declarations in
    nested scopes never match.
    """
    root = get_root(node)
    package_node = next((c for c in root.children if c.type == JAVA_PACKAGE), None)
    if package_node is None:
        return None

    name_node = next(
        (
            c
            for c in package_node.children
            if c.type in (JAVA_IDENTIFIER, JAVA_SCOPED_IDENTIFIER)
        ),
        None,
    )
    if name_node is None:
        return None
    parts = [get_node_text(ident) for ident in _iter_identifiers(name_node)]
    return ".".join(parts) or None


def resolve_simple_name(node: ts.Node) -> Optional[str]:
    name_node = node.child_by_field_name("name")
    if name_node is None:
        name_node = find_first_of_type(node, JAVA_IDENTIFIER)
    if name_node is None:
        return None
    return get_node_text(name_node) or None


def resolve_full_name(
    node: ts.Node, parent_qualified_name: Optional[str] = None
) -> Optional[str]:
    """
    Build the qualified name of type declaration *node*.

    When *parent_qualified_name* is given, *node* is nested directly under a
    type whose name was already resolved and the result is
    ``parent$Simple``. Otherwise the package (if any) is prepended.
    """
    simple_name = resolve_simple_name(node)
    if simple_name is None:
        return None
    if parent_qualified_name:
        return f"{parent_qualified_name}{NESTED_TYPE_SEPARATOR}{simple_name}"

    package_name = resolve_package_name(node)
    return f"{package_name}.{simple_name}" if package_name else simple_name


def enclosing_type_chain(node: ts.Node) -> List[ts.Node]:
    """
    Type declarations enclosing *node* (itself included), outermost first.
    """
    chain: List[ts.Node] = []
    current: Optional[ts.Node] = node
    while current is not None:
        if current.type in JAVA_TYPE_DECLARATIONS:
            chain.append(current)
        current = current.parent
    chain.reverse()
    return chain


def resolve_qualified_name(node: ts.Node) -> Optional[str]:
    """
    Resolve the qualified name of the type that owns *node*, which may be of
    any kind: a type declaration, a method, an expression inside a method...

    Returns None when there is no enclosing type or a name in the chain is
    missing.
    """
    chain = enclosing_type_chain(node)
    if not chain:
        return None

    qualified: Optional[str] = None
    for type_node in chain:
        qualified = resolve_full_name(type_node, qualified)
        if qualified is None:
            return None
    return qualified
