# src/vast_validator/hooks/base.py
import abc
from typing import Awaitable, Callable, Optional

from vast_validator.dom.core import Node
from vast_validator.model import NodeAnalysisResult
from vast_validator.services.http_request_service import HttpRequestService


class NodeContext:
    """
    Read-only view of a node handed to hooks.

    Hooks see the trimmed text, attribute lookups and the declared document
    version; they never see the parent or the rest of the tree.
    """

    __slots__ = ("node", "version")

    def __init__(self, node: Node, version: str):
        self.node = node
        self.version = version

    @property
    def name(self) -> str:
        return self.node.name

    @property
    def text(self) -> str:
        return self.node.text.strip()

    def attribute(self, name: str) -> Optional[str]:
        return self.node.attribute(name)


class NodeHook(metaclass=abc.ABCMeta):
    """
    A pure inspector: derives an extra analysis from a node, without I/O.

    Returning None contributes nothing. A result without a category lands in
    the 'custom.analysis' bucket.
    """

    @abc.abstractmethod
    def inspect(self, ctx: NodeContext) -> Optional[NodeAnalysisResult]:
        raise NotImplementedError("Every node hook must implement an 'inspect' method.")


class NetworkHook(metaclass=abc.ABCMeta):
    """
    A network-capable inspector, awaited with a timeout by the validator.

    Any exception it raises (timeouts included) is turned into a failed
    'custom.analysis' bucket for the node; validation continues.
    """

    @abc.abstractmethod
    async def inspect(self, ctx: NodeContext, http: HttpRequestService) -> Optional[NodeAnalysisResult]:
        raise NotImplementedError("Every network hook must implement an 'inspect' method.")


NodeHookFunc = Callable[[NodeContext], Optional[NodeAnalysisResult]]
NetworkHookFunc = Callable[[NodeContext, HttpRequestService], Awaitable[Optional[NodeAnalysisResult]]]


class FunctionNodeHook(NodeHook):
    """Adapts a plain function to the NodeHook interface."""

    def __init__(self, func: NodeHookFunc):
        self.func = func

    def inspect(self, ctx: NodeContext) -> Optional[NodeAnalysisResult]:
        return self.func(ctx)

    def __repr__(self) -> str:
        return f"FunctionNodeHook({getattr(self.func, '__name__', self.func)!r})"


class FunctionNetworkHook(NetworkHook):
    """Adapts a coroutine function to the NetworkHook interface."""

    def __init__(self, func: NetworkHookFunc):
        self.func = func

    async def inspect(self, ctx: NodeContext, http: HttpRequestService) -> Optional[NodeAnalysisResult]:
        return await self.func(ctx, http)

    def __repr__(self) -> str:
        return f"FunctionNetworkHook({getattr(self.func, '__name__', self.func)!r})"
