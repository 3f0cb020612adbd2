# src/vast_validator/catalog/registry.py
import importlib
import logging
import pkgutil
import threading
from typing import Dict, List, Optional

from .core import Catalog, DEFAULT_ROOT, NodeSpec

logger = logging.getLogger(__name__)

ELEMENTS_PACKAGE = "vast_validator.catalog.elements"


class CatalogRegistry:
    """
    Builds the default VAST catalog.

    Dynamically discovers the modules of the 'vast_validator.catalog.elements'
    package and collects the NodeSpec objects listed in their DEFINITIONS.
    The assembled catalog is built once and shared; it is never mutated.
    """

    _catalog: Optional[Catalog] = None
    _lock = threading.Lock()

    @classmethod
    def discover(cls, package: str = ELEMENTS_PACKAGE) -> List[NodeSpec]:
        """
        Imports every module of the elements package and returns their specs.

        Raises:
            ValueError: If two modules define a spec for the same element name.
        """
        elements_pkg = importlib.import_module(package)
        specs: Dict[str, NodeSpec] = {}

        for _, name, _ in pkgutil.iter_modules(elements_pkg.__path__):
            module = importlib.import_module(f"{package}.{name}")
            definitions = getattr(module, "DEFINITIONS", None)
            if not definitions:
                continue

            for spec in definitions:
                if not isinstance(spec, NodeSpec):
                    continue
                if spec.name in specs:
                    raise ValueError(f"Duplicate catalog definition for {spec.name} in {module.__name__}")
                specs[spec.name] = spec

            logger.debug("Catalog module loaded: %s (%d specs)", name, len(definitions))

        return list(specs.values())

    @classmethod
    def get_catalog(cls) -> Catalog:
        """Returns the shared default catalog, building it on first use."""
        if cls._catalog is None:
            with cls._lock:
                if cls._catalog is None:
                    cls._catalog = Catalog.from_specs(cls.discover(), root=DEFAULT_ROOT)
                    logger.debug("Default catalog built with %d node specs", len(cls._catalog))
        return cls._catalog


def default_catalog() -> Catalog:
    return CatalogRegistry.get_catalog()
