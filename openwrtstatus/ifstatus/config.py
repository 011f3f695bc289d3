"""Connection settings for querying an OpenWrt router."""

from __future__ import annotations

import os
from typing import Mapping, Optional

from pydantic import BaseModel, ConfigDict

# Environment variable -> config field
ENV_VARS = {
    "OPENWRT_HOST": "host",
    "OPENWRT_PORT": "port",
    "OPENWRT_USERNAME": "username",
    "OPENWRT_INTERFACE": "interface",
    "OPENWRT_PRIVATE_KEY": "private_key_path",
}


class OpenWrtConfig(BaseModel):
    """SSH connection parameters and the interface to query.

    Values are passed through to the ssh command line as-is.
    ``strict_host_key_checking`` is off by default, which accepts unknown
    host keys and never writes to ``known_hosts``.
    """

    model_config = ConfigDict(frozen=True)

    host: str = "192.168.1.1"
    port: int = 22
    username: str = "root"
    interface: str = "wan"
    private_key_path: Optional[str] = None
    strict_host_key_checking: bool = False
    connect_timeout: Optional[int] = None
    ssh_binary: str = "ssh"

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> OpenWrtConfig:
        """Build a config from ``OPENWRT_*`` environment variables, defaults for the rest."""
        env = os.environ if environ is None else environ
        values = {field: env[var] for var, field in ENV_VARS.items() if env.get(var)}
        return cls(**values)
