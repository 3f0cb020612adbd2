# src/vast_validator/version.py
from enum import Enum
from typing import FrozenSet


class Version(str, Enum):
    """
    VAST specification versions known to the validator.

    Versions are opaque comparison keys. Catalog version sets hold the plain
    string values, so a version read from a document ("4.2") can be checked
    against them directly, and an unknown value ("5.0") simply never matches.
    """
    V20 = "2.0"
    V30 = "3.0"
    V40 = "4.0"
    V41 = "4.1"
    V42 = "4.2"
    # New macro only support
    V43 = "4.3"

    def __str__(self) -> str:
        return self.value


ALL_SUPPORTED_VERSIONS: FrozenSet[str] = frozenset(
    v.value for v in (Version.V30, Version.V40, Version.V41, Version.V42, Version.V43)
)

VERSION_40_PLUS: FrozenSet[str] = frozenset(
    v.value for v in (Version.V40, Version.V41, Version.V42, Version.V43)
)

