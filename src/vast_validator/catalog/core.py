# src/vast_validator/catalog/core.py
from typing import Dict, FrozenSet, Iterable, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from vast_validator.version import ALL_SUPPORTED_VERSIONS

DEFAULT_ROOT = "VAST"


class AttributeSpec(BaseModel):
    """Describes an attribute allowed on a node."""
    model_config = ConfigDict(frozen=True)

    name: str
    versions: FrozenSet[str] = ALL_SUPPORTED_VERSIONS
    required: bool = False
    allow_empty: bool = False

    def supports_version(self, version: str) -> bool:
        return version in self.versions


class ChildSpec(BaseModel):
    """
    Describes a valid parent -> child relationship.

    'multiple' is informational; the engine checks validity and version only.
    """
    model_config = ConfigDict(frozen=True)

    name: str
    versions: FrozenSet[str] = ALL_SUPPORTED_VERSIONS
    optional: bool = False
    multiple: bool = False

    def supports_version(self, version: str) -> bool:
        return version in self.versions


class NodeSpec(BaseModel):
    """
    Validation metadata for one element name.

    When allow_unknown_children is set, every descendant (recognized or not)
    bypasses structural and attribute checks.
    """
    model_config = ConfigDict(frozen=True)

    name: str
    versions: FrozenSet[str] = ALL_SUPPORTED_VERSIONS
    attributes: Dict[str, AttributeSpec] = Field(default_factory=dict)
    children: Dict[str, ChildSpec] = Field(default_factory=dict)
    allow_unknown_children: bool = False

    @classmethod
    def build(
            cls,
            name: str,
            versions: FrozenSet[str] = ALL_SUPPORTED_VERSIONS,
            attributes: Iterable[AttributeSpec] = (),
            children: Iterable[ChildSpec] = (),
            allow_unknown_children: bool = False,
    ) -> 'NodeSpec':
        """Builds a spec from attribute and child lists, keyed by their names."""
        return cls(
            name=name,
            versions=versions,
            attributes={a.name: a for a in attributes},
            children={c.name: c for c in children},
            allow_unknown_children=allow_unknown_children,
        )

    def supports_version(self, version: str) -> bool:
        return version in self.versions

    def lookup_attribute(self, name: str) -> Optional[AttributeSpec]:
        return self.attributes.get(name)

    def lookup_child(self, name: str) -> Optional[ChildSpec]:
        return self.children.get(name)

    def required_attributes(self) -> List[AttributeSpec]:
        return [spec for spec in self.attributes.values() if spec.required]


class Catalog(BaseModel):
    """
    Immutable mapping of element name -> NodeSpec.

    Lookups are case-sensitive on the local name. The entry named by 'root'
    must exist for the catalog to be usable by the validator.
    """
    model_config = ConfigDict(frozen=True)

    nodes: Dict[str, NodeSpec] = Field(default_factory=dict)
    root: str = DEFAULT_ROOT

    @classmethod
    def from_specs(cls, specs: Iterable[NodeSpec], root: str = DEFAULT_ROOT) -> 'Catalog':
        return cls(nodes={spec.name: spec for spec in specs}, root=root)

    def lookup(self, name: str) -> Optional[NodeSpec]:
        return self.nodes.get(name)

    @property
    def root_spec(self) -> Optional[NodeSpec]:
        return self.nodes.get(self.root)

    @property
    def known_versions(self) -> FrozenSet[str]:
        """The versions the catalog's root element is declared for."""
        root_spec = self.root_spec
        return root_spec.versions if root_spec else frozenset()

    def __contains__(self, name: object) -> bool:
        return name in self.nodes

    def __len__(self) -> int:
        return len(self.nodes)

