"""Fetch interface status from an OpenWrt router via ``ssh`` + ``ubus``."""

from __future__ import annotations

import asyncio
import shlex

from loguru import logger

from openwrtstatus.ifstatus.config import OpenWrtConfig
from openwrtstatus.ifstatus.exceptions import (
    CommandFailedError,
    EncodingError,
    ProcessSpawnError,
)
from openwrtstatus.ifstatus.models import InterfaceStatus


def build_remote_command(interface: str) -> str:
    """Return the ubus call that prints the interface status as JSON."""
    return f"ubus call {shlex.quote(f'network.interface.{interface}')} status"


def build_ssh_args(config: OpenWrtConfig, command: str) -> list[str]:
    """Build the ssh argument list (without the program name).

    The destination is always second to last and the remote command last.
    """
    args: list[str] = []
    if not config.strict_host_key_checking:
        args += ["-o", "StrictHostKeyChecking=no", "-o", "UserKnownHostsFile=/dev/null"]
    if config.connect_timeout is not None:
        args += ["-o", f"ConnectTimeout={config.connect_timeout}"]
    args += ["-p", str(config.port)]
    if config.private_key_path:
        args += ["-i", config.private_key_path]
    args.append(f"{config.username}@{config.host}")
    args.append(command)
    return args


class InterfaceStatusFetcher:
    """Run ``ubus call network.interface.<name> status`` over SSH and parse the result.

    One attempt per call: no retries and no timeout. Every failure raises a
    subclass of :class:`~openwrtstatus.ifstatus.exceptions.InterfaceStatusError`.
    """

    def __init__(self, config: OpenWrtConfig | None = None):
        self.config = config or OpenWrtConfig()

    def command_line(self) -> list[str]:
        """Full argv for the ssh invocation."""
        command = build_remote_command(self.config.interface)
        return [self.config.ssh_binary, *build_ssh_args(self.config, command)]

    async def fetch_async(self) -> InterfaceStatus:
        """Query the router and return the parsed interface status."""
        argv = self.command_line()
        logger.debug(f"Running: {shlex.join(argv)}")

        try:
            proc = await asyncio.create_subprocess_exec(
                *argv,
                stdin=asyncio.subprocess.DEVNULL,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
        except OSError as e:
            logger.warning(f"Cannot start {argv[0]}: {e}")
            raise ProcessSpawnError(argv[0], str(e)) from e

        try:
            stdout, stderr = await proc.communicate()
        finally:
            # Abandoned await (cancel, Ctrl-C): don't leave ssh behind
            if proc.returncode is None:
                proc.kill()
                await proc.wait()

        if proc.returncode != 0:
            err_text = stderr.decode("utf-8", errors="replace")
            logger.warning(f"{self.config.host}: ubus call exited with {proc.returncode}: {err_text.strip()}")
            raise CommandFailedError(err_text, returncode=proc.returncode)

        try:
            text = stdout.decode("utf-8")
        except UnicodeDecodeError as e:
            logger.warning(f"{self.config.host}: output is not valid UTF-8: {e}")
            raise EncodingError(str(e)) from e

        status = InterfaceStatus.from_json(text)
        logger.info(
            f"{self.config.host}: interface {self.config.interface} is "
            f"{'up' if status.up else 'down'} (uptime {status.format_uptime()})"
        )
        return status

    def fetch(self) -> InterfaceStatus:
        """Synchronous entry point."""
        return asyncio.run(self.fetch_async())


def fetch_interface_status(config: OpenWrtConfig | None = None) -> InterfaceStatus:
    """Fetch one interface status snapshot, using default settings when no config is given."""
    return InterfaceStatusFetcher(config).fetch()
