"""Render tree primitives consumed by the layout layer."""

from __future__ import annotations

import html
from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Protocol, Union

_VOID_TAGS = frozenset({"img", "br", "hr"})


class Renderable(Protocol):
    """A component that expands into an element when serialized."""

    def render(self) -> Element:
        """Return the element tree for this component."""


Node = Union["Element", Renderable]


@dataclass(frozen=True)
class Element:
    """Named display region or leaf in the render tree."""

    tag: str
    id: str | None = None
    class_name: str | None = None
    attrs: tuple[tuple[str, str], ...] = ()
    text: str = ""
    children: tuple[Node, ...] = field(default_factory=tuple)

    def attr(self, name: str) -> str | None:
        """Return an attribute value, if set."""
        for key, value in self.attrs:
            if key == name:
                return value
        return None


@dataclass
class ClickEvent:
    """Activation event whose default navigation can be suppressed."""

    default_prevented: bool = False

    def prevent_default(self) -> None:
        """Suppress the control's default navigation."""
        self.default_prevented = True


def iter_nodes(node: Node) -> Iterator[Node]:
    """Walk the tree depth-first without expanding components."""
    yield node
    if isinstance(node, Element):
        for child in node.children:
            yield from iter_nodes(child)


def find_by_id(node: Node, element_id: str) -> Element | None:
    """Return the first element with the given id."""
    for candidate in iter_nodes(node):
        if isinstance(candidate, Element) and candidate.id == element_id:
            return candidate
    return None


def find_by_class(node: Node, class_name: str) -> list[Element]:
    """Return all elements carrying the given class name."""
    return [
        candidate
        for candidate in iter_nodes(node)
        if isinstance(candidate, Element) and candidate.class_name == class_name
    ]


def to_html(node: Node) -> str:
    """Serialize a render tree to an HTML fragment."""
    if not isinstance(node, Element):
        return to_html(node.render())
    attrs: list[tuple[str, str]] = []
    if node.id is not None:
        attrs.append(("id", node.id))
    if node.class_name is not None:
        attrs.append(("class", node.class_name))
    attrs.extend(node.attrs)
    rendered_attrs = "".join(
        f' {key}="{html.escape(value, quote=True)}"' for key, value in attrs
    )
    if node.tag in _VOID_TAGS:
        return f"<{node.tag}{rendered_attrs} />"
    inner = html.escape(node.text, quote=False) + "".join(
        to_html(child) for child in node.children
    )
    return f"<{node.tag}{rendered_attrs}>{inner}</{node.tag}>"
