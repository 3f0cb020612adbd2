# src/vast_validator/dom/core.py
from typing import Iterator, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

# (local name, value) in document order
Attribute = Tuple[str, str]


class Node(BaseModel):
    """
    Generic, immutable element of a parsed VAST document.

    Only the local name is kept; namespace prefixes are dropped by the builder.
    Attributes keep document order. Duplicate attribute names never reach a
    Node: the builder rejects them as malformed markup.
    """
    model_config = ConfigDict(frozen=True)

    name: str
    attrs: List[Attribute] = Field(default_factory=list)
    text: str = ""
    children: List['Node'] = Field(default_factory=list)

    def attribute(self, name: str) -> Optional[str]:
        """Returns the value of the last attribute with this name, or None."""
        value = None
        for attr_name, attr_value in self.attrs:
            if attr_name == name:
                value = attr_value
        return value

    def has_attribute(self, name: str) -> bool:
        return any(attr_name == name for attr_name, _ in self.attrs)

    @property
    def is_empty(self) -> bool:
        """Returns True if the element contains no text and no children."""
        return not self.text and not self.children

    def iter(self) -> Iterator['Node']:
        """Pre-order walk over this node and its descendants."""
        yield self
        for child in self.children:
            yield from child.iter()
