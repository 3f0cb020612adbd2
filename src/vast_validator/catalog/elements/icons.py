# src/vast_validator/catalog/elements/icons.py
from vast_validator.catalog.core import AttributeSpec as Attr, ChildSpec as Child, NodeSpec

DEFINITIONS = [
    NodeSpec.build("Icons", children=[Child(name="Icon", multiple=True)]),
    NodeSpec.build(
        "Icon",
        attributes=[
            Attr(name="program"),
            Attr(name="width"),
            Attr(name="height"),
            Attr(name="xPosition"),
            Attr(name="yPosition"),
            Attr(name="duration"),
            Attr(name="offset"),
            Attr(name="apiFramework"),
            Attr(name="pxratio"),
        ],
        children=[
            Child(name="StaticResource", optional=True),
            Child(name="IFrameResource", optional=True),
            Child(name="HTMLResource", optional=True),
            Child(name="IconClicks", optional=True),
            Child(name="IconViewTracking", optional=True, multiple=True),
        ],
    ),
    NodeSpec.build(
        "IconClicks",
        children=[
            Child(name="IconClickFallbackImages", optional=True),
            Child(name="IconClickThrough", optional=True),
            Child(name="IconClickTracking", optional=True, multiple=True),
        ],
    ),
    NodeSpec.build("IconClickThrough"),
    NodeSpec.build("IconClickTracking"),
    NodeSpec.build(
        "IconClickFallbackImages",
        children=[Child(name="IconClickFallbackImage", multiple=True)],
    ),
    NodeSpec.build(
        "IconClickFallbackImage",
        attributes=[Attr(name="width"), Attr(name="height")],
        children=[
            Child(name="AltText", optional=True),
            Child(name="StaticResource", optional=True),
        ],
    ),
    NodeSpec.build("IconViewTracking"),
]
