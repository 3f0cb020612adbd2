# src/vast_validator/catalog/elements/resources.py
# Creative resources shared by NonLinear, Companion, Icon and IconClickFallbackImage.
from vast_validator.catalog.core import AttributeSpec as Attr, NodeSpec

DEFINITIONS = [
    NodeSpec.build("StaticResource", attributes=[Attr(name="creativeType")]),
    NodeSpec.build("HTMLResource"),
    NodeSpec.build("IFrameResource"),
]
