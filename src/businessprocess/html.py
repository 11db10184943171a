"""Minimal HTML element builder.

Renderers assemble fragments from ``Element`` trees instead of string
concatenation. Everything renders to kida ``Markup`` so a fragment can
be dropped into an autoescaped template without double escaping.
"""

from __future__ import annotations

import html
from collections.abc import Iterable, Mapping
from typing import Any

from kida.template import Markup

# Elements that never carry content or a closing tag
VOID_ELEMENTS = frozenset({"br", "hr", "img", "input", "link", "meta"})

type AttributeValue = str | int | Iterable[str] | bool | None


def escape(value: Any) -> Markup:
    """Escape *value* unless it already knows how to render itself."""
    if hasattr(value, "__html__"):
        return Markup(value.__html__())
    return Markup(html.escape(str(value), quote=True))


def render_attributes(attributes: Mapping[str, AttributeValue]) -> str:
    """Render an attribute mapping as `` name="value"`` pairs.

    ``None``, ``False`` and empty lists are skipped. ``True`` renders a
    bare attribute. Lists (e.g. CSS classes) are joined with spaces.
    """
    parts: list[str] = []
    for name, value in attributes.items():
        if value is None or value is False:
            continue
        if value is True:
            parts.append(f" {name}")
            continue
        if not isinstance(value, (str, int)):
            value = " ".join(str(v) for v in value if v)
            if not value:
                continue
        parts.append(f' {name}="{html.escape(str(value), quote=True)}"')
    return "".join(parts)


class HtmlString:
    """Trusted markup, rendered as is."""

    __slots__ = ("_html",)

    def __init__(self, content: str = "") -> None:
        self._html = content

    @classmethod
    def create(cls, content: str = "") -> HtmlString:
        return cls(content)

    def is_empty(self) -> bool:
        return not self._html

    def render(self) -> Markup:
        return Markup(self._html)

    def __html__(self) -> str:
        return self._html

    def __str__(self) -> str:
        return self._html

    def __repr__(self) -> str:
        return f"HtmlString({self._html!r})"


class Element:
    """An HTML element with attributes and child content.

    Mutating methods return ``self`` so elements can be built in one
    expression::

        Element.create("span", {"class": ["badge", "badge-critical"]}).set_content(3)
    """

    def __init__(self, tag: str, attributes: Mapping[str, AttributeValue] | None = None) -> None:
        self.tag = tag
        self.attributes: dict[str, AttributeValue] = dict(attributes or {})
        self.content: list[Any] = []
        self._render_if_empty = True

    @classmethod
    def create(cls, tag: str, attributes: Mapping[str, AttributeValue] | None = None) -> Element:
        return cls(tag, attributes)

    def set_content(self, content: Any) -> Element:
        """Replace all content. Lists and tuples add one child per item."""
        self.content = []
        return self.add_content(content)

    def add_content(self, content: Any) -> Element:
        if content is None:
            return self
        if isinstance(content, (list, tuple)):
            self.content.extend(c for c in content if c is not None)
        else:
            self.content.append(content)
        return self

    def add_attributes(self, attributes: Mapping[str, AttributeValue]) -> Element:
        """Merge *attributes*; class lists are extended rather than replaced."""
        for name, value in attributes.items():
            current = self.attributes.get(name)
            if name == "class" and current and value:
                self.attributes[name] = [*_as_list(current), *_as_list(value)]
            else:
                self.attributes[name] = value
        return self

    def render_if_empty(self, render: bool = True) -> Element:
        """Render nothing at all when there is no content and *render* is False."""
        self._render_if_empty = render
        return self

    def has_content(self) -> bool:
        return bool(self.content)

    def render_content(self) -> Markup:
        return Markup("".join(escape(c) for c in self.content))

    def render(self) -> Markup:
        if not self.content and not self._render_if_empty:
            return Markup("")
        attrs = render_attributes(self.attributes)
        if self.tag in VOID_ELEMENTS:
            return Markup(f"<{self.tag}{attrs}>")
        return Markup(f"<{self.tag}{attrs}>{self.render_content()}</{self.tag}>")

    def __html__(self) -> str:
        return str(self.render())

    def __str__(self) -> str:
        return str(self.render())

    def __repr__(self) -> str:
        return f"Element({self.tag!r}, {self.attributes!r})"


class Container(Element):
    """A ``div`` used to group rendered parts."""

    def __init__(self, attributes: Mapping[str, AttributeValue] | None = None) -> None:
        super().__init__("div", attributes)

    @classmethod
    def create(cls, attributes: Mapping[str, AttributeValue] | None = None) -> Container:  # type: ignore[override]
        return cls(attributes)


def _as_list(value: AttributeValue) -> list[str]:
    if isinstance(value, str):
        return value.split()
    if isinstance(value, (int, bool)) or value is None:
        return [str(value)]
    return list(value)
