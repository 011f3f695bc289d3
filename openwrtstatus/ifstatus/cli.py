"""CLI entry point for interface status, standalone-capable.

Examples:
  openwrtstatus --host 192.168.1.1 --interface wan

  openwrtstatus --host router.lan -i ~/.ssh/router --format json
"""

from __future__ import annotations

import argparse
import sys

from loguru import logger
from pydantic import ValidationError

from openwrtstatus.ifstatus.config import OpenWrtConfig
from openwrtstatus.ifstatus.exceptions import InterfaceStatusError
from openwrtstatus.ifstatus.fetcher import InterfaceStatusFetcher
from openwrtstatus.ifstatus.formatters import TerminalFormatter


def parse_args(args: list[str] | None = None) -> argparse.Namespace:
    """Build argparse parser for interface status."""
    parser = argparse.ArgumentParser(
        prog="openwrtstatus",
        description="Show the status of an OpenWrt network interface (ubus over SSH). "
        "Unset options fall back to OPENWRT_* environment variables, then defaults.",
    )
    parser.add_argument("--host", help="Router IP address or hostname (default: 192.168.1.1)")
    parser.add_argument("--port", type=int, help="SSH port (default: 22)")
    parser.add_argument("--username", help="SSH username (default: root)")
    parser.add_argument("--interface", help="Logical interface name (default: wan)")
    parser.add_argument(
        "-i",
        "--identity-file",
        help="SSH private key (default: ssh's own key selection)",
    )
    parser.add_argument(
        "--strict-host-key-checking",
        action="store_true",
        help="Verify the router's host key against known_hosts",
    )
    parser.add_argument("--connect-timeout", type=int, help="SSH ConnectTimeout in seconds")
    parser.add_argument(
        "--format",
        choices=["text", "json"],
        default="text",
        help="Output format (default: text)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Verbose logging",
    )
    return parser.parse_args(args)


def build_config(parsed: argparse.Namespace, base: OpenWrtConfig | None = None) -> OpenWrtConfig:
    """Overlay command-line options on top of the environment config."""
    base = base or OpenWrtConfig.from_env()
    overrides: dict = {}
    if parsed.host is not None:
        overrides["host"] = parsed.host
    if parsed.port is not None:
        overrides["port"] = parsed.port
    if parsed.username is not None:
        overrides["username"] = parsed.username
    if parsed.interface is not None:
        overrides["interface"] = parsed.interface
    if parsed.identity_file is not None:
        overrides["private_key_path"] = parsed.identity_file
    if parsed.strict_host_key_checking:
        overrides["strict_host_key_checking"] = True
    if parsed.connect_timeout is not None:
        overrides["connect_timeout"] = parsed.connect_timeout
    return base.model_copy(update=overrides)


def main(args: list[str] | None = None) -> None:
    """Main entry point for interface status CLI."""
    parsed = parse_args(args)

    if not parsed.verbose:
        logger.remove()
        logger.add(sys.stderr, level="INFO")

    try:
        config = build_config(parsed)
    except ValidationError as e:
        print(f"Error: invalid configuration: {e}", file=sys.stderr)
        sys.exit(1)

    try:
        status = InterfaceStatusFetcher(config).fetch()
    except InterfaceStatusError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    except KeyboardInterrupt:
        print("\nAborted.", file=sys.stderr)
        sys.exit(130)

    if parsed.format == "json":
        print(status.to_json(indent=2))
    else:
        print(TerminalFormatter(status, interface=config.interface).format())
