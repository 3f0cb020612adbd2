# src/vast_validator/catalog/elements/media_files.py
from vast_validator.catalog.core import AttributeSpec as Attr, ChildSpec as Child, NodeSpec

MEDIA_FILE = NodeSpec.build(
    "MediaFile",
    attributes=[
        Attr(name="id"),
        Attr(name="delivery", required=True),
        Attr(name="type", required=True),
        Attr(name="width", required=True),
        Attr(name="height", required=True),
        Attr(name="codec"),
        Attr(name="bitrate"),
        Attr(name="minBitrate"),
        Attr(name="maxBitrate"),
        Attr(name="scalable"),
        Attr(name="maintainAspectRatio"),
        Attr(name="fileSize"),
        Attr(name="mediaType"),
        Attr(name="apiFramework"),
    ],
)

MEZZANINE = NodeSpec.build(
    "Mezzanine",
    attributes=[
        Attr(name="delivery", required=True),
        Attr(name="type", required=True),
        Attr(name="width", required=True),
        Attr(name="height", required=True),
        Attr(name="codec"),
        Attr(name="fileSize"),
        Attr(name="mediaType"),
    ],
)

DEFINITIONS = [
    NodeSpec.build(
        "MediaFiles",
        children=[
            Child(name="MediaFile", multiple=True),
            Child(name="ClosedCaptionFiles", optional=True),
            Child(name="Mezzanine", optional=True, multiple=True),
            Child(name="InteractiveCreativeFile", optional=True, multiple=True),
        ],
    ),
    MEDIA_FILE,
    NodeSpec.build("ClosedCaptionFiles", children=[Child(name="ClosedCaptionFile", multiple=True)]),
    NodeSpec.build("ClosedCaptionFile", attributes=[Attr(name="type"), Attr(name="language")]),
    MEZZANINE,
    NodeSpec.build(
        "InteractiveCreativeFile",
        attributes=[Attr(name="type"), Attr(name="apiFramework"), Attr(name="variableDuration")],
    ),
]
