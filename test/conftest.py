"""Pytest configuration and fixtures

Provides shared fixtures for all tests, including stubbed chart service
transports.
"""

import sys
from pathlib import Path

# Add project root to sys.path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

import json
from typing import Callable, List

import httpx
import pytest
from qchart import QuickchartClient
from qchart.config import ClientSettings, Config

BAR_CHART = '{"type":"bar","data":{"labels":["A","B"],"datasets":[{"data":[1,2]}]}}'
PNG_BYTES = bytes([0x89, 0x50, 0x4E, 0x47, 0x0D, 0x0A, 0x1A, 0x0A, 0x00, 0x00, 0x00, 0x0D])


@pytest.fixture(scope="function", autouse=True)
def test_settings():
    """
    Pin client settings for every test

    QCHART_* variables in the developer's environment must not change test
    outcomes, so each test runs in Config test mode with default settings.
    """
    settings = ClientSettings()
    Config.set_test_mode(settings)
    yield settings
    Config.clear_test_mode()


@pytest.fixture
def bar_chart() -> str:
    return BAR_CHART


@pytest.fixture
def png_bytes() -> bytes:
    return PNG_BYTES


class StubService:
    """Records requests and answers them with a canned response"""

    def __init__(self, handler: Callable[[httpx.Request], httpx.Response]):
        self.requests: List[httpx.Request] = []
        self._handler = handler
        self.transport = httpx.MockTransport(self._handle)

    def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self._handler(request)

    @property
    def last_body(self) -> dict:
        return json.loads(self.requests[-1].content)


@pytest.fixture
def stub_service():
    """
    Factory for stubbed chart services

    Returns:
        Callable taking an httpx request handler and returning a StubService
    """
    return StubService


@pytest.fixture
def client_for(bar_chart):
    """
    Build a configured client wired to a stub service

    Returns:
        Callable taking a StubService and returning a QuickchartClient with
        the bar chart set
    """

    def _make(service: StubService) -> QuickchartClient:
        return QuickchartClient(transport=service.transport).set_chart(bar_chart)

    return _make
