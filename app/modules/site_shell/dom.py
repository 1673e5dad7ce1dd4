"""Minimal element tree for the headless shell.

Models just enough of a browser document for the shell to mount its
skeleton and update its slots: elements with attributes, classes, inline
style, text nodes, event listeners and optional layout geometry.
"""

import copy
import html
import inspect
from html.parser import HTMLParser
from typing import Any, Callable, Dict, Iterator, List, Optional, Union

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

FRAGMENT_TAG = "#document-fragment"


class TextNode:
    """A run of character data."""

    def __init__(self, data: str = ""):
        self.data = data

    def to_html(self) -> str:
        return html.escape(self.data, quote=False)

    def __repr__(self) -> str:
        return f"TextNode({self.data!r})"


Node = Union["Element", TextNode]


class Element:
    """An element with attributes, children and listeners.

    Layout geometry (``offset_left``, ``offset_width``) is ``None`` until
    something lays the element out.
    """

    def __init__(self, tag: str, attributes: Optional[Dict[str, str]] = None):
        self.tag = tag.lower()
        self.attributes: Dict[str, str] = dict(attributes or {})
        self.children: List[Node] = []
        self.style: Dict[str, str] = {}
        self.listeners: Dict[str, List[Callable[[], Any]]] = {}
        self.offset_left: Optional[float] = None
        self.offset_width: Optional[float] = None

    def __repr__(self) -> str:
        ident = f"#{self.id}" if self.id else ""
        return f"<Element {self.tag}{ident}>"

    # Attributes

    @property
    def id(self) -> Optional[str]:
        return self.attributes.get("id")

    def get_attribute(self, name: str) -> Optional[str]:
        return self.attributes.get(name)

    def set_attribute(self, name: str, value: str) -> None:
        self.attributes[name] = value

    @property
    def class_list(self) -> List[str]:
        return self.attributes.get("class", "").split()

    def has_class(self, name: str) -> bool:
        return name in self.class_list

    def toggle_class(self, name: str, force: Optional[bool] = None) -> bool:
        """Add or remove a class; returns whether the class is now present."""
        classes = self.class_list
        present = name in classes
        wanted = (not present) if force is None else force
        if wanted and not present:
            classes.append(name)
        elif not wanted and present:
            classes.remove(name)
        if classes:
            self.attributes["class"] = " ".join(classes)
        else:
            self.attributes.pop("class", None)
        return wanted

    # Tree

    def append(self, node: Union[Node, str]) -> Node:
        if isinstance(node, str):
            node = TextNode(node)
        self.children.append(node)
        return node

    def clear(self) -> None:
        self.children = []

    def iter_elements(self) -> Iterator["Element"]:
        """Depth-first iteration over descendant elements."""
        for child in self.children:
            if isinstance(child, Element):
                yield child
                yield from child.iter_elements()

    def get_element_by_id(self, element_id: str) -> Optional["Element"]:
        for element in self.iter_elements():
            if element.id == element_id:
                return element
        return None

    def find_all(
        self, tag: Optional[str] = None, class_name: Optional[str] = None
    ) -> List["Element"]:
        return [
            element
            for element in self.iter_elements()
            if (tag is None or element.tag == tag)
            and (class_name is None or element.has_class(class_name))
        ]

    def find(
        self, tag: Optional[str] = None, class_name: Optional[str] = None
    ) -> Optional["Element"]:
        found = self.find_all(tag=tag, class_name=class_name)
        return found[0] if found else None

    def clone(self) -> "Element":
        """Deep copy of the subtree, without event listeners."""
        cloned = Element(self.tag, self.attributes)
        cloned.style = dict(self.style)
        for child in self.children:
            if isinstance(child, Element):
                cloned.children.append(child.clone())
            else:
                cloned.children.append(copy.copy(child))
        return cloned

    # Content

    @property
    def text_content(self) -> str:
        parts = []
        for child in self.children:
            parts.append(child.data if isinstance(child, TextNode) else child.text_content)
        return "".join(parts)

    @text_content.setter
    def text_content(self, value: str) -> None:
        self.children = [TextNode(value)] if value else []

    @property
    def inner_html(self) -> str:
        return "".join(child.to_html() for child in self.children)

    @inner_html.setter
    def inner_html(self, markup: str) -> None:
        self.children = parse_html_fragment(markup).children if markup else []

    def to_html(self) -> str:
        attributes = dict(self.attributes)
        if self.style:
            attributes["style"] = "; ".join(f"{k}: {v}" for k, v in self.style.items())
        rendered = "".join(
            f' {name}="{html.escape(value, quote=True)}"'
            for name, value in attributes.items()
        )
        if self.tag in VOID_ELEMENTS:
            return f"<{self.tag}{rendered}>"
        return f"<{self.tag}{rendered}>{self.inner_html}</{self.tag}>"

    # Events

    def add_event_listener(self, event: str, handler: Callable[[], Any]) -> None:
        self.listeners.setdefault(event, []).append(handler)

    async def dispatch_event(self, event: str) -> None:
        """Run the listeners of an event in registration order, awaiting coroutines."""
        for handler in list(self.listeners.get(event, [])):
            result = handler()
            if inspect.isawaitable(result):
                await result


class Document:
    """A document: root ``<html>`` element, title and body."""

    def __init__(self, document_element: Element):
        self.document_element = document_element

    @classmethod
    def blank(cls, mount_point_id: str = "app") -> "Document":
        """Document with an empty head and a body holding the mount point."""
        root = Element("html")
        head = root.append(Element("head"))
        head.append(Element("title"))
        body = root.append(Element("body"))
        body.append(Element("div", {"id": mount_point_id}))
        return cls(root)

    @classmethod
    def from_html(cls, markup: str) -> "Document":
        fragment = parse_html_fragment(markup)
        root = fragment.find("html")
        if root is None:
            root = Element("html")
            root.append(Element("head"))
            body = root.append(Element("body"))
            body.children = fragment.children
        return cls(root)

    @property
    def lang(self) -> Optional[str]:
        return self.document_element.get_attribute("lang")

    @lang.setter
    def lang(self, value: str) -> None:
        self.document_element.set_attribute("lang", value)

    @property
    def dir(self) -> Optional[str]:
        return self.document_element.get_attribute("dir")

    @dir.setter
    def dir(self, value: str) -> None:
        self.document_element.set_attribute("dir", value)

    def _title_element(self) -> Element:
        title = self.document_element.find("title")
        if title is None:
            head = self.document_element.find("head")
            if head is None:
                head = Element("head")
                self.document_element.children.insert(0, head)
            title = head.append(Element("title"))
        return title

    @property
    def title(self) -> str:
        return self._title_element().text_content

    @title.setter
    def title(self, value: str) -> None:
        self._title_element().text_content = value

    @property
    def body(self) -> Optional[Element]:
        return self.document_element.find("body")

    def get_element_by_id(self, element_id: str) -> Optional[Element]:
        return self.document_element.get_element_by_id(element_id)

    def to_html(self) -> str:
        return "<!DOCTYPE html>" + self.document_element.to_html()


class _FragmentBuilder(HTMLParser):
    """Builds an element tree from markup, tolerating unclosed tags."""

    def __init__(self):
        super().__init__(convert_charrefs=True)
        self.root = Element(FRAGMENT_TAG)
        self._stack: List[Element] = [self.root]

    def handle_starttag(self, tag, attrs):
        element = Element(tag, {name: value or "" for name, value in attrs})
        self._stack[-1].append(element)
        if element.tag not in VOID_ELEMENTS:
            self._stack.append(element)

    def handle_startendtag(self, tag, attrs):
        element = Element(tag, {name: value or "" for name, value in attrs})
        self._stack[-1].append(element)

    def handle_endtag(self, tag):
        tag = tag.lower()
        for index in range(len(self._stack) - 1, 0, -1):
            if self._stack[index].tag == tag:
                del self._stack[index:]
                return

    def handle_data(self, data):
        self._stack[-1].append(TextNode(data))


def parse_html_fragment(markup: str) -> Element:
    """Parse markup into a document fragment element.

    Stray end tags are ignored and unclosed elements are closed at the end
    of input, the way a browser's parser recovers.
    """
    builder = _FragmentBuilder()
    builder.feed(markup)
    builder.close()
    return builder.root
