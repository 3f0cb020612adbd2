# tests/core/test_hook_registry.py
import asyncio
import threading

import pytest

from vast_validator.catalog.core import Catalog, ChildSpec, NodeSpec
from vast_validator.core.validator import Validator
from vast_validator.hooks.base import FunctionNodeHook, NodeHook
from vast_validator.hooks.modules.media_file_hook import MediaFileHook
from vast_validator.hooks.registry import HookRegistry
from vast_validator.model import CUSTOM_ANALYSIS_CATEGORY, NodeAnalysisResult, ResultStatus

DOCUMENT = b'<Root version="4.2"><Child>payload</Child></Root>'


@pytest.fixture
def catalog() -> Catalog:
    return Catalog.from_specs(
        [
            NodeSpec.build("Root", children=[ChildSpec(name="Child", multiple=True)]),
            NodeSpec.build("Child"),
        ],
        root="Root",
    )


def passing(ctx):
    return NodeAnalysisResult(category=CUSTOM_ANALYSIS_CATEGORY, status=ResultStatus.PASS)


def failing(reason):
    def hook(ctx):
        return NodeAnalysisResult(category=CUSTOM_ANALYSIS_CATEGORY, status=ResultStatus.FAIL, reasons=[reason])
    return hook


class TextLengthHook(NodeHook):
    """Fails nodes whose text is longer than the limit."""

    def __init__(self, limit: int):
        self.limit = limit

    def inspect(self, ctx):
        if len(ctx.text) > self.limit:
            return NodeAnalysisResult(category="length.analysis", status=ResultStatus.FAIL,
                                      reasons=[f"{ctx.name} text longer than {self.limit}"])
        return NodeAnalysisResult(category="length.analysis")


# --- Registry behaviour ---

def test_register_wraps_functions_and_ignores_none():
    registry = HookRegistry()
    registry.register("Child", None)
    registry.register_network("Child", None)
    assert len(registry) == 0

    registry.register("Child", passing)
    hooks = registry.hooks_for("Child")
    assert len(hooks) == 1
    assert isinstance(hooks[0], FunctionNodeHook)


def test_names_match_case_insensitively():
    registry = HookRegistry()
    registry.register("mediafile", passing)

    assert len(registry.hooks_for("MediaFile")) == 1
    assert len(registry.hooks_for("MEDIAFILE")) == 1
    assert registry.hooks_for("Other") == []


def test_lookup_returns_independent_copies():
    registry = HookRegistry()
    registry.register("Child", passing)

    snapshot = registry.hooks_for("Child")
    registry.register("Child", failing("later"))
    snapshot.clear()

    assert len(registry.hooks_for("Child")) == 2


def test_decorators_register_and_return_function():
    registry = HookRegistry()

    @registry.node_hook("Child")
    def check(ctx):
        return None

    @registry.network_hook("Child")
    async def probe(ctx, http):
        return None

    assert check.__name__ == "check"
    assert len(registry.hooks_for("Child")) == 1
    assert len(registry.network_hooks_for("Child")) == 1


def test_clear_and_copy():
    registry = HookRegistry()
    registry.register("Child", passing)

    clone = registry.copy()
    registry.clear()

    assert len(registry) == 0
    assert len(clone.hooks_for("Child")) == 1


def test_with_builtins_contains_media_file_probe():
    registry = HookRegistry.with_builtins()

    hooks = registry.network_hooks_for("MediaFile")
    assert len(hooks) == 1
    assert isinstance(hooks[0], MediaFileHook)
    assert registry.hooks_for("MediaFile") == []


def test_concurrent_registration_is_not_lost():
    registry = HookRegistry()

    def worker():
        for _ in range(100):
            registry.register("Child", passing)

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert len(registry.hooks_for("Child")) == 800


# --- Merging into results ---

def test_single_hook_contribution(catalog):
    registry = HookRegistry()
    registry.register("Child", failing("too short"))

    result = Validator(catalog=catalog, registry=registry).validate(DOCUMENT)

    custom = result.find("Child").analyses[CUSTOM_ANALYSIS_CATEGORY]
    assert custom.status == ResultStatus.FAIL
    assert custom.reasons == ["too short"]
    assert result.summaries[CUSTOM_ANALYSIS_CATEGORY].failing_nodes == 1


@pytest.mark.parametrize("hooks, expected_status, expected_reasons", [
    ([passing, passing], ResultStatus.PASS, []),
    ([failing("first"), passing], ResultStatus.FAIL, ["first"]),
    ([passing, failing("second")], ResultStatus.FAIL, ["second"]),
    ([failing("first"), failing("second")], ResultStatus.FAIL, ["first", "second"]),
])
def test_same_category_contributions_merge(catalog, hooks, expected_status, expected_reasons):
    registry = HookRegistry()
    for hook in hooks:
        registry.register("Child", hook)

    result = Validator(catalog=catalog, registry=registry).validate(DOCUMENT)

    custom = result.find("Child").analyses[CUSTOM_ANALYSIS_CATEGORY]
    assert custom.status == expected_status
    assert custom.reasons == expected_reasons


def test_result_without_category_lands_in_custom_bucket(catalog):
    registry = HookRegistry()
    registry.register("Child", lambda ctx: NodeAnalysisResult(status=ResultStatus.FAIL, reasons=["no category"]))

    result = Validator(catalog=catalog, registry=registry).validate(DOCUMENT)

    assert result.find("Child").analyses[CUSTOM_ANALYSIS_CATEGORY].reasons == ["no category"]


def test_class_based_hook_with_own_category(catalog):
    registry = HookRegistry()
    registry.register("Child", TextLengthHook(limit=3))

    result = Validator(catalog=catalog, registry=registry).validate(DOCUMENT)

    analysis = result.find("Child").analyses["length.analysis"]
    assert analysis.status == ResultStatus.FAIL
    assert analysis.reasons == ["Child text longer than 3"]
    assert result.summaries["length.analysis"].status == ResultStatus.FAIL


def test_shared_hook_result_is_not_mutated(catalog):
    shared = NodeAnalysisResult(status=ResultStatus.FAIL, reasons=["shared"])
    registry = HookRegistry()
    registry.register("Child", lambda ctx: shared)
    registry.register("Child", lambda ctx: shared)

    Validator(catalog=catalog, registry=registry).validate(b'<Root version="4.2"><Child/><Child/></Root>')

    assert shared.category == ""
    assert shared.reasons == ["shared"]


# --- Network hooks ---

def test_network_hook_exception_becomes_failed_custom_bucket(catalog):
    registry = HookRegistry()

    @registry.network_hook("Child")
    async def broken(ctx, http):
        raise RuntimeError("upstream exploded")

    result = Validator(catalog=catalog, registry=registry).validate(DOCUMENT)

    custom = result.find("Child").analyses[CUSTOM_ANALYSIS_CATEGORY]
    assert custom.status == ResultStatus.FAIL
    assert custom.reasons == ["upstream exploded"]


def test_network_hook_timeout(catalog):
    registry = HookRegistry()

    @registry.network_hook("Child")
    async def slow(ctx, http):
        await asyncio.sleep(5)

    validator = Validator(catalog=catalog, registry=registry)
    validator.options = validator.options.with_http(timeout=0.05)
    result = validator.validate(DOCUMENT)

    custom = result.find("Child").analyses[CUSTOM_ANALYSIS_CATEGORY]
    assert custom.status == ResultStatus.FAIL
    assert "timed out" in custom.reasons[0]


def test_network_hook_receives_node_context(catalog):
    seen = []
    registry = HookRegistry()

    @registry.network_hook("child")
    async def record(ctx, http):
        seen.append((ctx.name, ctx.text, ctx.version, http is not None))
        return None

    Validator(catalog=catalog, registry=registry).validate(DOCUMENT)

    assert seen == [("Child", "payload", "4.2", True)]


def test_hook_returning_wrong_type_fails_only_its_node(catalog):
    registry = HookRegistry()
    registry.register("Child", lambda ctx: {"status": "fail"})

    @registry.network_hook("Child")
    async def wrong(ctx, http):
        return "fail"

    result = Validator(catalog=catalog, registry=registry).validate(DOCUMENT)

    custom = result.find("Child").analyses[CUSTOM_ANALYSIS_CATEGORY]
    assert custom.status == ResultStatus.FAIL
    assert len(custom.reasons) == 2
    assert "returned dict" in custom.reasons[0]
    assert "returned str" in custom.reasons[1]
    assert CUSTOM_ANALYSIS_CATEGORY not in result.root.analyses
