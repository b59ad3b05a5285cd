"""
Builder - Fluent construction of an HTML element tree.

``ElementBuilder`` starts from a root element and chains ``add_child`` calls
to attach any number of children before ``build()`` hands out the result.
"""

import copy
from enum import Enum


class Tag(Enum):
    BODY = "body"
    H1 = "h1"
    H2 = "h2"
    P = "p"


class Element:
    """A node of the markup tree."""

    def __init__(self, tag: Tag, content: str = ""):
        self.tag = tag
        self.content = content
        self.children: list["Element"] = []

    def render(self) -> str:
        """Render markup; elements without content open on their own line."""
        parts = [f"<{self.tag.value}>", self.content or "\n"]
        parts.extend(child.render() for child in self.children)
        parts.append(f"</{self.tag.value}>\n")
        return "".join(parts)

    def __str__(self) -> str:
        return self.render()


class ElementBuilder:
    """Fluent builder: every ``add_child`` returns the builder itself."""

    def __init__(self, tag: Tag, content: str = ""):
        self._root = Element(tag, content)

    def add_child(self, tag: Tag, content: str = "") -> "ElementBuilder":
        self._root.children.append(Element(tag, content))
        return self

    def build(self) -> Element:
        """Return a copy of the tree, so the builder can keep going."""
        return copy.deepcopy(self._root)


def build_page() -> Element:
    return (
        ElementBuilder(Tag.BODY)
        .add_child(Tag.H1, "Title of the Page")
        .add_child(Tag.H2, "Subtitle A")
        .add_child(Tag.P, "Lorem ipsum dolor sit amet, ...")
        .add_child(Tag.H2, "Subtitle B")
        .add_child(Tag.P, "... consectetur adipiscing elit.")
        .build()
    )


def main() -> None:
    print(build_page(), end="")
