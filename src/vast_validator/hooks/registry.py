# src/vast_validator/hooks/registry.py
import logging
import threading
from typing import Callable, Dict, List, Optional, Tuple, TypeVar, Union

from .base import (
    FunctionNetworkHook,
    FunctionNodeHook,
    NetworkHook,
    NetworkHookFunc,
    NodeHook,
    NodeHookFunc,
)

logger = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable)


def _key(node_name: str) -> str:
    return node_name.lower()


class HookRegistry:
    """
    Caller-owned collection of node hooks, keyed by element name.

    Holds two independent tables: pure NodeHooks and NetworkHooks. Names are
    matched case-insensitively. Registration takes a writer lock and replaces
    the per-name tuple, so readers always iterate an immutable snapshot and
    get back their own list copy.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._node_hooks: Dict[str, Tuple[NodeHook, ...]] = {}
        self._network_hooks: Dict[str, Tuple[NetworkHook, ...]] = {}

    @classmethod
    def with_builtins(cls) -> 'HookRegistry':
        """A registry preloaded with the built-in MediaFile asset probe."""
        from .modules.media_file_hook import register_builtin_hooks

        registry = cls()
        register_builtin_hooks(registry)
        return registry

    # --- REGISTRATION ---

    def register(self, node_name: str, hook: Union[NodeHook, NodeHookFunc, None]) -> None:
        """Registers a pure hook for the element name. None is ignored."""
        if hook is None:
            return
        if not isinstance(hook, NodeHook):
            hook = FunctionNodeHook(hook)
        with self._lock:
            key = _key(node_name)
            self._node_hooks[key] = self._node_hooks.get(key, ()) + (hook,)
        logger.debug("Node hook registered for %s: %r", node_name, hook)

    def register_network(self, node_name: str, hook: Union[NetworkHook, NetworkHookFunc, None]) -> None:
        """Registers a network hook for the element name. None is ignored."""
        if hook is None:
            return
        if not isinstance(hook, NetworkHook):
            hook = FunctionNetworkHook(hook)
        with self._lock:
            key = _key(node_name)
            self._network_hooks[key] = self._network_hooks.get(key, ()) + (hook,)
        logger.debug("Network hook registered for %s: %r", node_name, hook)

    def node_hook(self, node_name: str) -> Callable[[F], F]:
        """Decorator form of register()."""
        def decorator(func: F) -> F:
            self.register(node_name, func)
            return func
        return decorator

    def network_hook(self, node_name: str) -> Callable[[F], F]:
        """Decorator form of register_network()."""
        def decorator(func: F) -> F:
            self.register_network(node_name, func)
            return func
        return decorator

    # --- LOOKUP ---

    def hooks_for(self, node_name: str) -> List[NodeHook]:
        """Returns an independent copy of the pure hooks for the element name."""
        return list(self._node_hooks.get(_key(node_name), ()))

    def network_hooks_for(self, node_name: str) -> List[NetworkHook]:
        """Returns an independent copy of the network hooks for the element name."""
        return list(self._network_hooks.get(_key(node_name), ()))

    # --- MAINTENANCE ---

    def clear(self) -> None:
        with self._lock:
            self._node_hooks = {}
            self._network_hooks = {}

    def copy(self) -> 'HookRegistry':
        """A new registry with the same registrations, independent from this one."""
        clone = HookRegistry()
        with self._lock:
            clone._node_hooks = dict(self._node_hooks)
            clone._network_hooks = dict(self._network_hooks)
        return clone

    def __len__(self) -> int:
        return sum(len(h) for h in self._node_hooks.values()) + sum(len(h) for h in self._network_hooks.values())
