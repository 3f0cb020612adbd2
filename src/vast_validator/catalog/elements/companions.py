# src/vast_validator/catalog/elements/companions.py
from vast_validator.catalog.core import AttributeSpec as Attr, ChildSpec as Child, NodeSpec

DEFINITIONS = [
    NodeSpec.build(
        "CompanionAds",
        attributes=[Attr(name="required")],
        children=[Child(name="Companion", multiple=True)],
    ),
    NodeSpec.build(
        "Companion",
        attributes=[
            Attr(name="id"),
            Attr(name="width", required=True),
            Attr(name="height", required=True),
            Attr(name="assetWidth"),
            Attr(name="assetHeight"),
            Attr(name="expandedWidth"),
            Attr(name="expandedHeight"),
            Attr(name="apiFramework"),
            Attr(name="adSlotId"),
            Attr(name="pxratio"),
            Attr(name="renderingMode"),
        ],
        children=[
            Child(name="StaticResource", optional=True),
            Child(name="IFrameResource", optional=True),
            Child(name="HTMLResource", optional=True),
            Child(name="AdParameters", optional=True),
            Child(name="AltText", optional=True),
            Child(name="CompanionClickThrough", optional=True),
            Child(name="CompanionClickTracking", optional=True, multiple=True),
            Child(name="CreativeExtensions", optional=True),
            Child(name="TrackingEvents", optional=True),
        ],
    ),
    NodeSpec.build("CompanionClickThrough"),
    NodeSpec.build("CompanionClickTracking"),
    NodeSpec.build("AltText"),
]
