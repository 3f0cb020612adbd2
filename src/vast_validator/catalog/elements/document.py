# src/vast_validator/catalog/elements/document.py
"""Document skeleton: <VAST>, <Ad>, the InLine/Wrapper containers and their simple children."""
from vast_validator.catalog.core import AttributeSpec as Attr, ChildSpec as Child, NodeSpec
from vast_validator.version import VERSION_40_PLUS as V4

VAST = NodeSpec.build(
    "VAST",
    attributes=[Attr(name="version", required=True)],
    children=[
        Child(name="Ad", multiple=True),
        Child(name="Error", optional=True, multiple=True),
    ],
)

AD = NodeSpec.build(
    "Ad",
    attributes=[
        Attr(name="id"),
        Attr(name="sequence"),
        Attr(name="conditionalAd"),
        Attr(name="adType"),
    ],
    children=[
        Child(name="InLine", optional=True),
        Child(name="Wrapper", optional=True),
    ],
)

INLINE = NodeSpec.build(
    "InLine",
    children=[
        Child(name="AdSystem"),
        Child(name="Error", optional=True, multiple=True),
        Child(name="Impression", multiple=True),
        Child(name="AdTitle"),
        Child(name="AdServingId", optional=True),
        Child(name="Advertiser", optional=True),
        Child(name="Category", optional=True, multiple=True),
        Child(name="Description", optional=True),
        Child(name="Extensions", optional=True),
        Child(name="Pricing", optional=True),
        Child(name="ViewableImpression", versions=V4, optional=True),
        Child(name="Survey", optional=True),
        Child(name="Expires", optional=True),
        Child(name="Creatives"),
        Child(name="AdVerifications", versions=V4, optional=True),
    ],
)

WRAPPER = NodeSpec.build(
    "Wrapper",
    attributes=[
        Attr(name="followAdditionalWrappers"),
        Attr(name="allowMultipleAds"),
        Attr(name="fallbackOnNoAd"),
    ],
    children=[
        Child(name="AdSystem"),
        Child(name="Error", optional=True, multiple=True),
        Child(name="Impression", multiple=True),
        Child(name="VASTAdTagURI"),
        Child(name="Extensions", optional=True),
        Child(name="Pricing", optional=True),
        Child(name="ViewableImpression", versions=V4, optional=True),
        Child(name="Creatives", optional=True),
        Child(name="BlockedAdCategories", optional=True, multiple=True),
        Child(name="AdVerifications", versions=V4, optional=True),
    ],
)

VIEWABLE_IMPRESSION = NodeSpec.build(
    "ViewableImpression",
    versions=V4,
    children=[
        Child(name="Viewable", versions=V4, optional=True, multiple=True),
        Child(name="NotViewable", versions=V4, optional=True, multiple=True),
        Child(name="ViewUndetermined", versions=V4, optional=True, multiple=True),
    ],
)

DEFINITIONS = [
    VAST,
    AD,
    INLINE,
    WRAPPER,
    NodeSpec.build("AdSystem", attributes=[Attr(name="version")]),
    NodeSpec.build("Error"),
    NodeSpec.build("Impression", attributes=[Attr(name="id")]),
    NodeSpec.build("AdTitle"),
    NodeSpec.build("AdServingId"),
    NodeSpec.build("Advertiser"),
    NodeSpec.build("Category", attributes=[Attr(name="authority", required=True)]),
    NodeSpec.build("BlockedAdCategories", attributes=[Attr(name="authority")]),
    NodeSpec.build("Description"),
    NodeSpec.build("Survey", attributes=[Attr(name="type")]),
    NodeSpec.build(
        "Pricing",
        attributes=[Attr(name="model", required=True), Attr(name="currency", required=True)],
    ),
    NodeSpec.build("Expires"),
    NodeSpec.build("VASTAdTagURI"),
    VIEWABLE_IMPRESSION,
    NodeSpec.build("Viewable", versions=V4),
    NodeSpec.build("NotViewable", versions=V4),
    NodeSpec.build("ViewUndetermined", versions=V4),
]

