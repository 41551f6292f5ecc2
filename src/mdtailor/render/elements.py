"""Plain element components: a serialisable stand-in for UI component classes"""

from dataclasses import dataclass, field
from typing import Any, Mapping, Optional, Union

from mdtailor.render.components import ComponentSet


@dataclass(frozen=True)
class Element:
    tag:      str
    key:      str
    props:    dict[str, Any] = field(default_factory=dict)
    children: Union[str, list["Element"]] = ""

    def to_dict(self) -> dict[str, Any]:
        """JSON-ready form; nested elements are converted recursively."""
        children = self.children if isinstance(self.children, str) else [c.to_dict() for c in self.children]
        return {"tag": self.tag, "key": self.key, "props": dict(self.props), "children": children}


def element_components(class_names: Optional[Mapping[str, str]] = None) -> ComponentSet:
    """Return a ComponentSet building Elements, with an optional CSS class per tag.

    class_names maps tag names ("h1", "ul", "li", "p", ...) to a class string.
    """
    classes = dict(class_names or {})

    def make(tag: str, key: str, children: Any) -> Element:
        props = {"className": classes[tag]} if tag in classes else {}
        return Element(tag=tag, key=key, props=props, children=children)

    return ComponentSet(
        heading=lambda level, key, children: make(f"h{level}", key, children),
        unordered_list=lambda key, children: make("ul", key, children),
        ordered_list=lambda key, children: make("ol", key, children),
        list_item=lambda key, children: make("li", key, children),
        paragraph=lambda key, children: make("p", key, children),
    )
