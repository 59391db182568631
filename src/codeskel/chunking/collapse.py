from typing import Iterable, Optional, Tuple

import tree_sitter as ts

from codeskel.consts import (
    COLLAPSED_BODY_TEMPLATE,
    JAVA_DECOMPOSABLE_TYPES,
    JAVA_IDENTIFIER,
    JAVA_METHOD_BODIES,
    JAVA_METHODS,
    JAVA_TYPE_BODIES,
)
from codeskel.parsers import get_node_text
from codeskel.logger import logger
from .models import MethodCollapseSpec


def is_method(node: ts.Node) -> bool:
    return node.type in JAVA_METHODS


def find_type_body(node: ts.Node) -> Optional[ts.Node]:
    """
    Return *node* itself if it is a class/interface body, otherwise its first
    direct child that is one.
    """
    if node.type in JAVA_TYPE_BODIES:
        return node
    return next((c for c in node.children if c.type in JAVA_TYPE_BODIES), None)


def iter_members(node: ts.Node):
    """
    Members of *node*'s type body that are methods or nested decomposable
    types, in document order.
    """
    body = find_type_body(node)
    if body is None:
        return
    for child in body.children:
        if is_method(child) or child.type in JAVA_DECOMPOSABLE_TYPES:
            yield child


def find_method_body(method_node: ts.Node) -> Optional[ts.Node]:
    body = method_node.child_by_field_name("body")
    if body is not None and body.type in JAVA_METHOD_BODIES:
        return body
    return next((c for c in method_node.children if c.type in JAVA_METHOD_BODIES), None)


def get_method_identifier(method_node: ts.Node) -> str:
    """
    Return ``name[startRow-endRow]`` for a method or constructor, or an empty
    string when the node has no name.
    """
    name_node = method_node.child_by_field_name("name")
    if name_node is None:
        name_node = next(
            (c for c in method_node.children if c.type == JAVA_IDENTIFIER), None
        )
    if name_node is None:
        return ""
    return (
        f"{get_node_text(name_node)}"
        f"[{method_node.start_point[0]}-{method_node.end_point[0]}]"
    )


def _method_collapse_spec(
    method_node: ts.Node, base_offset: int
) -> Optional[MethodCollapseSpec]:
    body = find_method_body(method_node)
    if body is None:
        # abstract and interface methods have no body
        logger.debug(
            "Method has no body; nothing to collapse",
            node_type=method_node.type,
            line=method_node.start_point[0] + 1,
        )
        return None

    return MethodCollapseSpec(
        start=body.start_byte - base_offset,
        end=body.end_byte - base_offset,
        replacement=COLLAPSED_BODY_TEMPLATE.format(
            identifier=get_method_identifier(method_node)
        ),
    )


def collect_collapse_specs(
    node: ts.Node, base_offset: int
) -> Tuple[MethodCollapseSpec, ...]:
    """
    Collect splices for every method body under *node*, nested types
    included. Offsets are relative to *base_offset*.
    """
    if is_method(node):
        spec = _method_collapse_spec(node, base_offset)
        return (spec,) if spec is not None else ()

    specs: Tuple[MethodCollapseSpec, ...] = ()
    for member in iter_members(node):
        specs += collect_collapse_specs(member, base_offset)
    return specs


def apply_collapse_specs(text: bytes, specs: Iterable[MethodCollapseSpec]) -> bytes:
    """
    Replace every spec's span in *text* with its replacement.

    Spans are applied in a single forward pass over a fresh buffer, so they
    must not overlap. All specs are validated before output is assembled.
    """
    ordered = sorted(specs, key=lambda s: (s.start, s.end))

    cursor = 0
    for spec in ordered:
        if spec.start < cursor or spec.end < spec.start or spec.end > len(text):
            raise ValueError(f"Invalid or overlapping collapse span: {spec!r}")
        cursor = spec.end

    parts: list[bytes] = []
    cursor = 0
    for spec in ordered:
        parts.append(text[cursor : spec.start])
        parts.append(spec.replacement.encode("utf-8"))
        cursor = spec.end
    parts.append(text[cursor:])
    return b"".join(parts)


def collapse_type(node: ts.Node, source: bytes) -> str:
    """
    Return the text of type declaration *node* with all method bodies,
    including those of nested types, replaced by placeholders.
    """
    type_text = source[node.start_byte : node.end_byte]
    specs = collect_collapse_specs(node, node.start_byte)
    return apply_collapse_specs(type_text, specs).decode("utf-8")
