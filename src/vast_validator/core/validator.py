# src/vast_validator/core/validator.py
import asyncio
import logging
from typing import NamedTuple, Optional, Union

from vast_validator.catalog.core import Catalog, NodeSpec
from vast_validator.catalog.registry import default_catalog
from vast_validator.core.options import ValidatorOptions
from vast_validator.core.summary import summarize_categories
from vast_validator.dom.builder import TreeBuilder
from vast_validator.dom.core import Node
from vast_validator.errors import CatalogError, EmptyDocumentError, InvalidRootError, MissingVersionError
from vast_validator.hooks.base import NodeContext
from vast_validator.hooks.registry import HookRegistry
from vast_validator.model import (
    AttributeResult,
    CUSTOM_ANALYSIS_CATEGORY,
    IAB_ANALYSIS_CATEGORY,
    NodeAnalysisResult,
    NodeResult,
    ResultStatus,
    ValidationResult,
)
from vast_validator.services.http_request_service import HttpRequestService

logger = logging.getLogger(__name__)

RawDocument = Union[bytes, str]


class TraversalContext(NamedTuple):
    """
    State handed from a node to its children during the walk.

    'exempt' is set once an ancestor allows unknown children and is inherited
    by the whole subtree from then on.
    """
    version: str
    parent_spec: Optional[NodeSpec] = None
    exempt: bool = False

    def descend(self, spec: Optional[NodeSpec]) -> 'TraversalContext':
        exempt = self.exempt or bool(spec and spec.allow_unknown_children)
        return TraversalContext(version=self.version, parent_spec=spec, exempt=exempt)


def _failed_custom_analysis(reason: str) -> NodeAnalysisResult:
    return NodeAnalysisResult(category=CUSTOM_ANALYSIS_CATEGORY, status=ResultStatus.FAIL, reasons=[reason])


def _checked_result(hook, analysis) -> Optional[NodeAnalysisResult]:
    """Replaces anything a hook returned other than None or a NodeAnalysisResult with a failed bucket."""
    if analysis is None or isinstance(analysis, NodeAnalysisResult):
        return analysis
    logger.warning("Hook %r returned %s instead of NodeAnalysisResult", hook, type(analysis).__name__)
    return _failed_custom_analysis(
        f"validator {hook!r} returned {type(analysis).__name__}, expected NodeAnalysisResult"
    )


class Validator:
    """
    Validates VAST documents against a catalog and a set of hooks.

    A Validator is long-lived: build it once with a catalog, a HookRegistry
    and options, then call validate() for as many documents as needed. The
    walk itself is single-threaded, depth-first and in document order; the
    only suspension points are network hooks.
    """

    def __init__(
            self,
            catalog: Optional[Catalog] = None,
            registry: Optional[HookRegistry] = None,
            options: Optional[ValidatorOptions] = None,
    ):
        """
        Args:
            catalog: Replaces the default VAST catalog.
            registry: Hooks to run. Defaults to a registry holding only the
                built-in MediaFile asset probe.
            options: Hook switches and network settings.
        """
        self.catalog = catalog if catalog is not None else default_catalog()
        self.registry = registry if registry is not None else HookRegistry.with_builtins()
        self.options = options or ValidatorOptions()
        self.builder = TreeBuilder()

    # =========================================================================
    #  ENTRY POINTS
    # =========================================================================
    def validate(self, raw: RawDocument) -> ValidationResult:
        """Synchronous wrapper around validate_async(); must not be called from a running loop."""
        return asyncio.run(self.validate_async(raw))

    async def validate_async(self, raw: RawDocument) -> ValidationResult:
        """
        Parses and validates one document.

        Raises:
            EmptyDocumentError: No input, or no element content.
            CatalogError: The catalog has no spec for its root element.
            MalformedDocumentError: The markup is not well-formed.
            InvalidRootError: The root element is not the catalog root.
            MissingVersionError: The root has no (or a blank) version attribute.
        """
        if not raw:
            raise EmptyDocumentError()

        root_spec = self.catalog.root_spec
        if root_spec is None:
            raise CatalogError(f"validator: catalog missing {self.catalog.root} spec")

        root = self.builder.parse(raw)

        if root.name != self.catalog.root:
            raise InvalidRootError(expected=self.catalog.root, found=root.name)

        version = (root.attribute("version") or "").strip()
        if not version:
            raise MissingVersionError()

        logger.debug("Validating VAST %s document", version)

        http = None
        if self.options.run_custom and self.options.run_network:
            http_options = self.options.http
            http = HttpRequestService(
                config={"timeout": http_options.timeout, "max_redirects": http_options.max_redirects},
                user_agent=http_options.user_agent,
                session=http_options.session,
            )

        try:
            root_result = await self._validate_node(root, root_spec, TraversalContext(version=version), http)
        finally:
            if http is not None:
                await http.close()

        if not root_spec.supports_version(version):
            # Not fatal: the rest of the tree was checked against the raw version string.
            root_result.add_analysis(IAB_ANALYSIS_CATEGORY).mark_failure(f"Unsupported VAST version: {version}")

        summaries = summarize_categories(root_result, self.options.max_summary_reasons)
        return ValidationResult(version=version, root=root_result, summaries=summaries)

    # =========================================================================
    #  TREE WALK
    # =========================================================================
    async def _validate_node(
            self,
            node: Node,
            spec: Optional[NodeSpec],
            ctx: TraversalContext,
            http: Optional[HttpRequestService],
    ) -> NodeResult:
        result = NodeResult(
            node=node.name,
            version_support=sorted(spec.versions) if spec is not None else None,
        )
        iab = result.add_analysis(IAB_ANALYSIS_CATEGORY)

        if not ctx.exempt:
            self._check_structure(node, spec, ctx, iab)
            self._check_attributes(node, spec, ctx.version, iab)

        node_ctx = NodeContext(node, ctx.version)
        if self.options.run_custom:
            self._apply_node_hooks(result, node_ctx)
        if http is not None:
            await self._apply_network_hooks(result, node_ctx, http)

        child_ctx = ctx.descend(spec)
        for child in node.children:
            child_result = await self._validate_node(child, self.catalog.lookup(child.name), child_ctx, http)
            result.children.append(child_result)

        return result

    @staticmethod
    def _check_structure(
            node: Node, spec: Optional[NodeSpec], ctx: TraversalContext, analysis: NodeAnalysisResult
    ) -> None:
        """Catalog presence, version support and parent -> child validity. Failures accumulate."""
        if spec is None:
            analysis.mark_failure(f"node {node.name} is not recognized in catalog")
            return

        if not spec.supports_version(ctx.version):
            analysis.mark_failure(f"node {node.name} is not supported in VAST {ctx.version}")

        parent = ctx.parent_spec
        if parent is None:
            return

        child_spec = parent.lookup_child(node.name)
        if child_spec is None:
            analysis.mark_failure(f"node {node.name} is not a valid child of {parent.name}")
        elif not child_spec.supports_version(ctx.version):
            analysis.mark_failure(f"node {node.name} is not allowed for parent {parent.name} in VAST {ctx.version}")

    @staticmethod
    def _check_attributes(
            node: Node, spec: Optional[NodeSpec], version: str, analysis: NodeAnalysisResult
    ) -> None:
        """
        Records one AttributeResult per attribute occurrence, plus a synthetic
        failing entry for each required attribute that is absent.
        """
        seen = set()

        for name, value in node.attrs:
            seen.add(name)
            attribute_result = AttributeResult(name=name)

            if spec is None:
                msg = "node is not recognized; attribute cannot be validated"
                attribute_result.status = ResultStatus.FAIL
                attribute_result.add_reason(msg)
                analysis.add_attribute(attribute_result)
                analysis.mark_failure(msg)
                continue

            attr_spec = spec.lookup_attribute(name)
            if attr_spec is None:
                msg = f"attribute {name} is not allowed on {spec.name}"
                attribute_result.status = ResultStatus.FAIL
                attribute_result.add_reason(msg)
                analysis.add_attribute(attribute_result)
                analysis.mark_failure(msg)
                continue

            attribute_result.version_support = sorted(attr_spec.versions)

            if not attr_spec.supports_version(version):
                msg = f"attribute {name} is not supported in VAST {version}"
                attribute_result.status = ResultStatus.FAIL
                attribute_result.add_reason(msg)
                analysis.mark_failure(msg)

            if not value.strip() and not attr_spec.allow_empty:
                msg = f"attribute {name} cannot be empty"
                attribute_result.status = ResultStatus.FAIL
                attribute_result.add_reason(msg)
                analysis.mark_failure(msg)

            analysis.add_attribute(attribute_result)

        if spec is None:
            return

        for attr_spec in spec.required_attributes():
            if attr_spec.name in seen:
                continue
            msg = f"missing required attribute {attr_spec.name}"
            analysis.add_attribute(AttributeResult(
                name=attr_spec.name,
                version_support=sorted(attr_spec.versions),
                status=ResultStatus.FAIL,
                reasons=[msg],
            ))
            analysis.mark_failure(msg)

    # =========================================================================
    #  HOOKS
    # =========================================================================
    def _apply_node_hooks(self, result: NodeResult, ctx: NodeContext) -> None:
        for hook in self.registry.hooks_for(result.node):
            try:
                analysis = hook.inspect(ctx)
            except Exception as e:
                logger.warning("Node hook %r failed on <%s>: %s", hook, result.node, e, exc_info=True)
                analysis = _failed_custom_analysis(f"validator {hook!r} failed: {e}")
            self._merge(result, _checked_result(hook, analysis))

    async def _apply_network_hooks(self, result: NodeResult, ctx: NodeContext, http: HttpRequestService) -> None:
        timeout = self.options.http.timeout
        for hook in self.registry.network_hooks_for(result.node):
            try:
                analysis = await asyncio.wait_for(hook.inspect(ctx, http), timeout=timeout)
            except asyncio.TimeoutError:
                logger.warning("Network hook %r timed out on <%s> after %ss", hook, result.node, timeout)
                analysis = _failed_custom_analysis(f"network validator timed out after {timeout}s")
            except Exception as e:
                logger.warning("Network hook %r failed on <%s>: %s", hook, result.node, e, exc_info=True)
                analysis = _failed_custom_analysis(str(e) or type(e).__name__)
            self._merge(result, _checked_result(hook, analysis))

    @staticmethod
    def _merge(result: NodeResult, analysis: Optional[NodeAnalysisResult]) -> None:
        if analysis is None:
            return
        # Hooks may hand out shared instances; the result tree owns its own copy.
        analysis = analysis.model_copy(deep=True)
        if not analysis.category:
            analysis.category = CUSTOM_ANALYSIS_CATEGORY
        result.merge(analysis)


def validate(
        raw: RawDocument,
        catalog: Optional[Catalog] = None,
        registry: Optional[HookRegistry] = None,
        options: Optional[ValidatorOptions] = None,
) -> ValidationResult:
    """Parses and validates a VAST document with a one-off Validator."""
    return Validator(catalog=catalog, registry=registry, options=options).validate(raw)


async def validate_async(
        raw: RawDocument,
        catalog: Optional[Catalog] = None,
        registry: Optional[HookRegistry] = None,
        options: Optional[ValidatorOptions] = None,
) -> ValidationResult:
    return await Validator(catalog=catalog, registry=registry, options=options).validate_async(raw)
