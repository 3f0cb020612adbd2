# src/vast_validator/catalog/elements/creatives.py
from vast_validator.catalog.core import AttributeSpec as Attr, ChildSpec as Child, NodeSpec
from vast_validator.version import VERSION_40_PLUS as V4

DEFINITIONS = [
    NodeSpec.build("Creatives", children=[Child(name="Creative", multiple=True)]),
    NodeSpec.build(
        "Creative",
        attributes=[
            Attr(name="id"),
            Attr(name="sequence"),
            Attr(name="apiFramework"),
            Attr(name="adId"),
        ],
        children=[
            Child(name="Linear", optional=True),
            Child(name="NonLinearAds", optional=True),
            Child(name="CompanionAds", optional=True),
            Child(name="CreativeExtensions", optional=True),
            Child(name="UniversalAdId", versions=V4, optional=True, multiple=True),
        ],
    ),
    NodeSpec.build(
        "UniversalAdId",
        versions=V4,
        attributes=[Attr(name="idRegistry", versions=V4, required=True)],
    ),
]
