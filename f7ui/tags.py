"""Markup node model.

A Tag is the core abstraction, like a React element:
- a name
- ordered attributes
- children (tags, text, pre-escaped markup)

Builders compose tags into trees; render() turns a tree into HTML text.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from copy import deepcopy
from typing import Any, Callable, Iterable, Iterator

from markupsafe import Markup, escape

# Elements without a closing tag
VOID_ELEMENTS = frozenset(
    {
        "area",
        "base",
        "br",
        "col",
        "embed",
        "hr",
        "img",
        "input",
        "link",
        "meta",
        "source",
        "track",
        "wbr",
    }
)

# Elements whose text content is emitted verbatim
RAW_TEXT_ELEMENTS = frozenset({"script", "style"})


def HTML(text: str) -> Markup:
    """Mark text as already-escaped HTML."""
    return Markup(text)


def _attr_name(name: str) -> str:
    """Normalize a keyword name: class_ -> class, data_panel -> data-panel."""
    if name.endswith("_"):
        name = name[:-1]
    return name.replace("_", "-")


def _join_classes(*values: Any) -> str:
    classes: list[str] = []
    for value in values:
        if not value:
            continue
        if isinstance(value, (list, tuple)):
            value = _join_classes(*value)
        for part in str(value).split():
            if part not in classes:
                classes.append(part)
    return " ".join(classes)


def flatten(children: Iterable[Any]) -> list[Any]:
    out: list[Any] = []
    for child in children:
        if child is None:
            continue
        if isinstance(child, (list, tuple)):
            out.extend(flatten(child))
        else:
            out.append(child)
    return out


@dataclass
class Tag:
    """A single markup element."""

    name: str
    attrs: dict[str, Any] = field(default_factory=dict)
    children: list[Any] = field(default_factory=list)

    def set_attr(self, name: str, value: Any) -> "Tag":
        """Set (or drop, for None/False) an attribute. Returns self."""
        if value is None or value is False:
            self.attrs.pop(name, None)
        elif value is True:
            self.attrs[name] = True
        elif name == "class":
            joined = _join_classes(value)
            if joined:
                self.attrs["class"] = joined
        else:
            self.attrs[name] = str(value)
        return self

    def get_attr(self, name: str, default: Any = None) -> Any:
        return self.attrs.get(name, default)

    def add_class(self, *classes: str | None) -> "Tag":
        """Append classes, skipping duplicates. Returns self."""
        joined = _join_classes(self.attrs.get("class"), *classes)
        if joined:
            self.attrs["class"] = joined
        return self

    def has_class(self, cls: str) -> bool:
        return cls in str(self.attrs.get("class", "")).split()

    @property
    def classes(self) -> list[str]:
        return str(self.attrs.get("class", "")).split()

    def append(self, *children: Any) -> "Tag":
        self.children.extend(flatten(children))
        return self

    def insert(self, index: int, *children: Any) -> "Tag":
        self.children[index:index] = flatten(children)
        return self

    def copy(self) -> "Tag":
        """Deep copy, so callers' trees are never mutated."""
        return deepcopy(self)

    def walk(self) -> Iterator["Tag"]:
        """Yield descendant tags depth-first (self excluded)."""
        yield from _walk(self.children)

    def find_all(self, predicate: Callable[["Tag"], bool]) -> list["Tag"]:
        return [t for t in self.walk() if predicate(t)]

    def find(self, predicate: Callable[["Tag"], bool]) -> "Tag | None":
        for t in self.walk():
            if predicate(t):
                return t
        return None

    def render(self) -> str:
        return render(self)

    def __html__(self) -> Markup:
        return Markup(render(self))

    def __str__(self) -> str:
        return render(self)


class TagList(list):
    """A flat sequence of nodes rendered without a wrapper element."""

    def __init__(self, *children: Any):
        super().__init__(flatten(children))

    def walk(self) -> Iterator[Tag]:
        yield from _walk(self)

    def find_all(self, predicate: Callable[[Tag], bool]) -> list[Tag]:
        return [t for t in self.walk() if predicate(t)]

    def find(self, predicate: Callable[[Tag], bool]) -> Tag | None:
        for t in self.walk():
            if predicate(t):
                return t
        return None

    def render(self) -> str:
        return render(self)

    def __html__(self) -> Markup:
        return Markup(render(self))

    def __str__(self) -> str:
        return render(self)


@dataclass
class Singleton:
    """A node emitted at most once per render pass.

    Two singletons with the same rendered text are considered the same.
    """

    node: Any

    @property
    def key(self) -> str:
        return _Renderer().render(self.node)

    def __html__(self) -> Markup:
        return Markup(render(self))


def singleton(node: Any) -> Singleton:
    return Singleton(node)


def _walk(children: Iterable[Any]) -> Iterator[Tag]:
    for child in children:
        if isinstance(child, Singleton):
            child = child.node
        if isinstance(child, Tag):
            yield child
            yield from _walk(child.children)
        elif isinstance(child, (list, tuple)):
            yield from _walk(child)


def tag(name: str, /, *children: Any, **attrs: Any) -> Tag:
    """Create a tag.

    Positional dicts are merged into the attributes, everything else is a child.
    Keyword names drop one trailing underscore and map "_" to "-". The element
    name is positional-only, so name= is an attribute like any other.

    Examples:
        tag("div", "hello", class_="block")
        tag("a", {"data-panel": "left"}, href="#")
        tag("meta", name="viewport", content="width=device-width")
    """
    element = Tag(name)
    kids: list[Any] = []
    for child in children:
        if isinstance(child, dict):
            for key, value in child.items():
                _merge_attr(element, key, value)
        else:
            kids.append(child)
    for key, value in attrs.items():
        _merge_attr(element, _attr_name(key), value)
    element.append(*kids)
    return element


def _merge_attr(element: Tag, name: str, value: Any) -> None:
    if name == "class":
        element.add_class(value if value not in (None, False, True) else None)
    else:
        element.set_attr(name, value)


class _Tags:
    """Namespace of element factories: tags.div(...), tags.a(...)."""

    def __getattr__(self, name: str) -> Callable[..., Tag]:
        if name.startswith("__"):
            raise AttributeError(name)
        element = name.rstrip("_")

        def factory(*children: Any, **attrs: Any) -> Tag:
            return tag(element, *children, **attrs)

        factory.__name__ = element
        return factory


tags = _Tags()


def is_tag(node: Any, name: str | None = None, cls: str | None = None) -> bool:
    """Check node is a Tag, optionally of a given name and carrying a class."""
    if not isinstance(node, Tag):
        return False
    if name is not None and node.name != name:
        return False
    if cls is not None and not node.has_class(cls):
        return False
    return True


class _Renderer:
    """Serializes a node tree. Tracks singletons seen in this pass."""

    def __init__(self) -> None:
        self._seen: set[str] = set()

    def render(self, node: Any, raw: bool = False) -> str:
        if node is None:
            return ""
        if isinstance(node, Tag):
            return self._render_tag(node)
        if isinstance(node, Singleton):
            key = node.key
            if key in self._seen:
                return ""
            self._seen.add(key)
            return self.render(node.node, raw)
        if isinstance(node, (list, tuple)):
            return "".join(self.render(child, raw) for child in node)
        if isinstance(node, Markup):
            return str(node)
        if hasattr(node, "__html__"):
            return str(node.__html__())
        if raw:
            return str(node)
        return str(escape(str(node)))

    def _render_tag(self, node: Tag) -> str:
        parts = [f"<{node.name}"]
        for name, value in node.attrs.items():
            if value is True:
                parts.append(f" {name}")
            else:
                parts.append(f' {name}="{escape(str(value))}"')
        parts.append(">")
        if node.name in VOID_ELEMENTS:
            return "".join(parts)
        raw = node.name in RAW_TEXT_ELEMENTS
        for child in node.children:
            parts.append(self.render(child, raw))
        parts.append(f"</{node.name}>")
        return "".join(parts)


def render(node: Any) -> str:
    """Render a node tree to HTML text."""
    return _Renderer().render(node)
