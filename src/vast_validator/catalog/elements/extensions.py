# src/vast_validator/catalog/elements/extensions.py
# Vendor extension points: anything below <Extension> or <CreativeExtension> is free-form.
from vast_validator.catalog.core import AttributeSpec as Attr, ChildSpec as Child, NodeSpec

DEFINITIONS = [
    NodeSpec.build("Extensions", children=[Child(name="Extension", optional=True, multiple=True)]),
    NodeSpec.build("Extension", attributes=[Attr(name="type")], allow_unknown_children=True),
    NodeSpec.build("CreativeExtensions", children=[Child(name="CreativeExtension", multiple=True)]),
    NodeSpec.build("CreativeExtension", attributes=[Attr(name="type")], allow_unknown_children=True),
]
