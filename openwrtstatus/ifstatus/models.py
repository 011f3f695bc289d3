"""Pydantic models for ``ubus call network.interface.<name> status`` output."""

from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from openwrtstatus.ifstatus.exceptions import ParseError

SECONDS_PER_DAY = 86400
SECONDS_PER_HOUR = 3600
SECONDS_PER_MINUTE = 60


class Ipv4Address(BaseModel):
    """One IPv4 address assigned to the interface."""

    model_config = ConfigDict(frozen=True, strict=True)

    address: str
    mask: int = Field(ge=0, le=32)


class Route(BaseModel):
    """One routing table entry associated with the interface."""

    model_config = ConfigDict(frozen=True, strict=True)

    target: str
    mask: int = Field(ge=0, le=32)
    nexthop: str
    source: Optional[str] = None


class InterfaceStatus(BaseModel):
    """Reported state of a single network interface.

    Multi-word list fields use hyphenated names on the wire
    (``ipv4-address``, ``dns-server``, ...); both spellings are accepted on
    input and :meth:`to_json` emits the wire names. Keys that are not
    modelled at all (``device``, ``l2_device``, ...) are kept as extra
    fields.
    """

    model_config = ConfigDict(frozen=True, strict=True, populate_by_name=True, extra="allow")

    up: bool
    pending: bool
    available: bool
    autostart: bool
    dynamic: bool
    uptime: int = Field(ge=0)
    l3_device: Optional[str] = None
    proto: Optional[str] = None
    updated: list[str] = Field(default_factory=list)
    metric: int
    dns_metric: int
    delegation: bool
    ipv4_address: list[Ipv4Address] = Field(default_factory=list, alias="ipv4-address")
    ipv6_address: list[str] = Field(default_factory=list, alias="ipv6-address")
    ipv6_prefix: list[str] = Field(default_factory=list, alias="ipv6-prefix")
    ipv6_prefix_assignment: list[str] = Field(default_factory=list, alias="ipv6-prefix-assignment")
    route: list[Route] = Field(default_factory=list)
    dns_server: list[str] = Field(default_factory=list, alias="dns-server")
    dns_search: list[str] = Field(default_factory=list, alias="dns-search")
    neighbors: list[str] = Field(default_factory=list)
    inactive: Optional[Any] = None
    data: Any

    @classmethod
    def from_json(cls, text: str) -> InterfaceStatus:
        """Parse ubus JSON output.

        Raises:
            ParseError: Malformed JSON, a missing required field or a value of the wrong type.
        """
        try:
            return cls.model_validate_json(text)
        except ValidationError as e:
            raise ParseError(str(e)) from e

    def to_json(self, indent: int | None = None) -> str:
        """Serialize back to the wire shape."""
        return self.model_dump_json(by_alias=True, indent=indent)

    @property
    def is_connected(self) -> bool:
        """True when the interface is up and available."""
        return self.up and self.available

    def format_uptime(self) -> str:
        """Return uptime as e.g. ``"1d 1h 1m 1s"``, starting at the largest non-zero unit."""
        days, rest = divmod(self.uptime, SECONDS_PER_DAY)
        hours, rest = divmod(rest, SECONDS_PER_HOUR)
        minutes, seconds = divmod(rest, SECONDS_PER_MINUTE)

        if days > 0:
            return f"{days}d {hours}h {minutes}m {seconds}s"
        if hours > 0:
            return f"{hours}h {minutes}m {seconds}s"
        if minutes > 0:
            return f"{minutes}m {seconds}s"
        return f"{seconds}s"
