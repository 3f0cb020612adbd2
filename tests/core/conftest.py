# tests/core/conftest.py
import asyncio
from typing import Awaitable, Callable, List

import pytest
from aiohttp import web
from aiohttp.test_utils import TestServer

from vast_validator.core.options import ValidatorOptions
from vast_validator.hooks.registry import HookRegistry

MEDIA_FILE_DOCUMENT = (
    '<VAST version="4.2"><Ad><InLine><Creatives><Creative><Linear><MediaFiles>'
    '<MediaFile delivery="progressive" type="{type}" width="1" height="1">{url}</MediaFile>'
    '</MediaFiles></Linear></Creative></Creatives></InLine></Ad></VAST>'
)


def media_file_document(url: str, media_type: str = "video/mp4") -> bytes:
    return MEDIA_FILE_DOCUMENT.format(url=url, type=media_type).encode("utf-8")


def run_with_server(handler: Callable, scenario: Callable[[TestServer], Awaitable]):
    """
    Starts a local aiohttp server routing every method and path to `handler`,
    runs `scenario(server)` against it and returns the scenario's result.
    """
    async def runner():
        app = web.Application()
        app.router.add_route("*", "/{tail:.*}", handler)
        server = TestServer(app)
        await server.start_server()
        try:
            return await scenario(server)
        finally:
            await server.close()

    return asyncio.run(runner())


@pytest.fixture
def offline_options() -> ValidatorOptions:
    """Options that keep pure hooks but never touch the network."""
    return ValidatorOptions().disable_network_validators()


@pytest.fixture
def empty_registry() -> HookRegistry:
    return HookRegistry()


@pytest.fixture
def request_log() -> List[str]:
    return []


@pytest.fixture
def serve():
    return run_with_server


@pytest.fixture
def media_document():
    return media_file_document
