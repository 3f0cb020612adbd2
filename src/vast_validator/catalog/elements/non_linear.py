# src/vast_validator/catalog/elements/non_linear.py
from vast_validator.catalog.core import AttributeSpec as Attr, ChildSpec as Child, NodeSpec

DEFINITIONS = [
    NodeSpec.build(
        "NonLinearAds",
        children=[
            Child(name="NonLinear", multiple=True),
            Child(name="TrackingEvents", optional=True),
        ],
    ),
    NodeSpec.build(
        "NonLinear",
        attributes=[
            Attr(name="id"),
            Attr(name="width", required=True),
            Attr(name="height", required=True),
            Attr(name="expandedWidth"),
            Attr(name="expandedHeight"),
            Attr(name="scalable"),
            Attr(name="maintainAspectRatio"),
            Attr(name="minSuggestedDuration"),
            Attr(name="apiFramework"),
        ],
        children=[
            Child(name="StaticResource", optional=True),
            Child(name="IFrameResource", optional=True),
            Child(name="HTMLResource", optional=True),
            Child(name="AdParameters", optional=True),
            Child(name="NonLinearClickTracking", optional=True, multiple=True),
            Child(name="NonLinearClickThrough", optional=True),
        ],
    ),
    NodeSpec.build("NonLinearClickTracking"),
    NodeSpec.build("NonLinearClickThrough"),
]
