"""Interface status: query an OpenWrt interface via ``ubus`` over SSH."""

from openwrtstatus.ifstatus.config import OpenWrtConfig
from openwrtstatus.ifstatus.exceptions import (
    CommandFailedError,
    EncodingError,
    InterfaceStatusError,
    ParseError,
    ProcessSpawnError,
)
from openwrtstatus.ifstatus.fetcher import (
    InterfaceStatusFetcher,
    build_remote_command,
    build_ssh_args,
    fetch_interface_status,
)
from openwrtstatus.ifstatus.formatters import TerminalFormatter
from openwrtstatus.ifstatus.models import InterfaceStatus, Ipv4Address, Route

__all__ = [
    "OpenWrtConfig",
    "InterfaceStatus",
    "Ipv4Address",
    "Route",
    "InterfaceStatusFetcher",
    "build_remote_command",
    "build_ssh_args",
    "fetch_interface_status",
    "TerminalFormatter",
    "InterfaceStatusError",
    "ProcessSpawnError",
    "CommandFailedError",
    "EncodingError",
    "ParseError",
]
