# src/vast_validator/catalog/elements/verification.py
# Open Measurement verification, introduced with VAST 4.0.
from vast_validator.catalog.core import AttributeSpec as Attr, ChildSpec as Child, NodeSpec
from vast_validator.version import VERSION_40_PLUS as V4

DEFINITIONS = [
    NodeSpec.build(
        "AdVerifications",
        versions=V4,
        children=[Child(name="Verification", versions=V4, multiple=True)],
    ),
    NodeSpec.build(
        "Verification",
        versions=V4,
        attributes=[Attr(name="vendor")],
        children=[
            Child(name="JavaScriptResource", versions=V4, optional=True, multiple=True),
            Child(name="ExecutableResource", versions=V4, optional=True, multiple=True),
            Child(name="TrackingEvents", versions=V4, optional=True),
            Child(name="VerificationParameters", versions=V4, optional=True),
        ],
    ),
    NodeSpec.build(
        "JavaScriptResource",
        versions=V4,
        attributes=[Attr(name="apiFramework"), Attr(name="browserOptional")],
    ),
    NodeSpec.build(
        "ExecutableResource",
        versions=V4,
        attributes=[Attr(name="apiFramework"), Attr(name="type")],
    ),
    NodeSpec.build("VerificationParameters", versions=V4),
]
