# tests/core/test_catalog.py
import pytest
from pydantic import ValidationError

from vast_validator.catalog.core import AttributeSpec, Catalog, ChildSpec, NodeSpec
from vast_validator.catalog.registry import CatalogRegistry, default_catalog
from vast_validator.version import ALL_SUPPORTED_VERSIONS, VERSION_40_PLUS, Version


def test_default_catalog_has_root_and_known_versions():
    catalog = default_catalog()

    assert catalog.root == "VAST"
    assert catalog.root_spec is not None
    assert catalog.known_versions == ALL_SUPPORTED_VERSIONS
    assert "2.0" not in catalog.known_versions


def test_default_catalog_is_shared():
    assert default_catalog() is default_catalog()


@pytest.mark.parametrize("name", [
    "VAST", "Ad", "InLine", "Wrapper", "Creatives", "Creative", "Linear", "MediaFiles", "MediaFile",
    "NonLinearAds", "NonLinear", "CompanionAds", "Companion", "Icons", "IconClickFallbackImage",
    "AdVerifications", "Verification", "Extensions", "Extension", "CreativeExtension",
    "TrackingEvents", "Tracking", "StaticResource", "UniversalAdId", "ViewableImpression",
])
def test_default_catalog_contains_vast_elements(name):
    assert default_catalog().lookup(name) is not None


def test_lookup_is_case_sensitive():
    catalog = default_catalog()
    assert catalog.lookup("MediaFile") is not None
    assert catalog.lookup("mediafile") is None
    assert "mediafile" not in catalog


def test_extension_points_allow_unknown_children():
    catalog = default_catalog()
    assert catalog.lookup("Extension").allow_unknown_children
    assert catalog.lookup("CreativeExtension").allow_unknown_children
    assert not catalog.lookup("Extensions").allow_unknown_children


def test_version_gating_in_default_catalog():
    catalog = default_catalog()
    inline = catalog.lookup("InLine")

    assert inline.lookup_child("AdVerifications").versions == VERSION_40_PLUS
    assert not inline.lookup_child("AdVerifications").supports_version(Version.V30.value)
    assert catalog.lookup("AdVerifications").supports_version("4.1")
    assert not catalog.lookup("AdVerifications").supports_version("3.0")


def test_media_file_required_attributes():
    media_file = default_catalog().lookup("MediaFile")
    required = {spec.name for spec in media_file.required_attributes()}

    assert required == {"delivery", "type", "width", "height"}
    assert media_file.lookup_attribute("codec") is not None
    assert media_file.lookup_attribute("bogus") is None


def test_discover_collects_every_element_module():
    specs = CatalogRegistry.discover()
    names = [spec.name for spec in specs]

    assert len(names) == len(set(names))
    assert len(names) == len(default_catalog())


def test_custom_catalog_from_specs():
    catalog = Catalog.from_specs(
        [
            NodeSpec.build(
                "Root",
                versions=frozenset({"1.0"}),
                attributes=[AttributeSpec(name="version", versions=frozenset({"1.0"}), required=True)],
                children=[ChildSpec(name="Leaf", versions=frozenset({"1.0"}))],
            ),
            NodeSpec.build("Leaf", versions=frozenset({"1.0"})),
        ],
        root="Root",
    )

    assert len(catalog) == 2
    assert catalog.root_spec.name == "Root"
    assert catalog.known_versions == frozenset({"1.0"})
    assert catalog.lookup("Root").lookup_child("Leaf").supports_version("1.0")


def test_catalog_specs_are_frozen():
    spec = default_catalog().lookup("Ad")
    with pytest.raises(ValidationError):
        spec.allow_unknown_children = True
