# src/vast_validator/catalog/elements/linear.py
from vast_validator.catalog.core import AttributeSpec as Attr, ChildSpec as Child, NodeSpec

DEFINITIONS = [
    NodeSpec.build(
        "Linear",
        attributes=[Attr(name="skipoffset")],
        children=[
            Child(name="Icons", optional=True),
            Child(name="AdParameters", optional=True),
            Child(name="Duration"),
            Child(name="MediaFiles"),
            Child(name="VideoClicks", optional=True),
            Child(name="TrackingEvents", optional=True),
        ],
    ),
    NodeSpec.build("AdParameters", attributes=[Attr(name="xmlEncoded")]),
    NodeSpec.build("Duration"),
    NodeSpec.build(
        "VideoClicks",
        children=[
            Child(name="ClickThrough", optional=True),
            Child(name="ClickTracking", optional=True, multiple=True),
            Child(name="CustomClick", optional=True, multiple=True),
        ],
    ),
    NodeSpec.build("ClickThrough", attributes=[Attr(name="id")]),
    NodeSpec.build("ClickTracking"),
    NodeSpec.build("CustomClick"),
    NodeSpec.build("TrackingEvents", children=[Child(name="Tracking", multiple=True)]),
    NodeSpec.build(
        "Tracking",
        attributes=[Attr(name="event", required=True), Attr(name="offset")],
    ),
]
