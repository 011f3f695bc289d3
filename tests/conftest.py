"""Shared fixtures for the openwrtstatus test suite."""

from __future__ import annotations

import json
from unittest.mock import AsyncMock, MagicMock

import pytest

from openwrtstatus.ifstatus.models import InterfaceStatus

# ── ubus payloads ─────────────────────────────────────────────────────


@pytest.fixture()
def sample_status_payload():
    """Factory fixture returning a wire-shaped ubus status dict."""

    def _make(**overrides):
        payload = {
            "up": True,
            "pending": False,
            "available": True,
            "autostart": True,
            "dynamic": False,
            "uptime": 90061,
            "l3_device": "eth1",
            "proto": "dhcp",
            "device": "eth1",
            "updated": ["addresses", "routes", "data"],
            "metric": 0,
            "dns_metric": 0,
            "delegation": True,
            "ipv4-address": [{"address": "203.0.113.17", "mask": 24}],
            "ipv6-address": [],
            "ipv6-prefix": [],
            "ipv6-prefix-assignment": [],
            "route": [
                {"target": "0.0.0.0", "mask": 0, "nexthop": "203.0.113.1", "source": "203.0.113.17/32"},
            ],
            "dns-server": ["203.0.113.1", "198.51.100.53"],
            "dns-search": ["lan"],
            "neighbors": [],
            "inactive": {
                "ipv4-address": [],
                "ipv6-address": [],
                "route": [],
                "dns-server": [],
                "dns-search": [],
                "neighbors": [],
            },
            "data": {"leasetime": 86400},
        }
        payload.update(overrides)
        return payload

    return _make


@pytest.fixture()
def minimal_status_payload():
    """Only the fields ubus must always report."""
    return {
        "up": False,
        "pending": False,
        "available": True,
        "autostart": True,
        "dynamic": False,
        "uptime": 0,
        "metric": 0,
        "dns_metric": 0,
        "delegation": False,
        "data": {},
    }


@pytest.fixture()
def sample_status(sample_status_payload):
    """Factory fixture returning a parsed InterfaceStatus."""

    def _make(**overrides):
        return InterfaceStatus.from_json(json.dumps(sample_status_payload(**overrides)))

    return _make


# ── subprocess mocks ──────────────────────────────────────────────────


@pytest.fixture()
def mock_ssh_process():
    """Factory fixture returning a fake asyncio subprocess."""

    def _make(stdout: bytes = b"", stderr: bytes = b"", returncode: int | None = 0):
        proc = MagicMock()
        proc.communicate = AsyncMock(return_value=(stdout, stderr))
        proc.wait = AsyncMock(return_value=returncode)
        proc.returncode = returncode
        return proc

    return _make
