"""Terminal formatter for interface status snapshots."""

from __future__ import annotations

from tabulate import tabulate

from openwrtstatus.ifstatus.models import InterfaceStatus


def _yes_no(flag: bool) -> str:
    return "yes" if flag else "no"


class TerminalFormatter:
    """Format an InterfaceStatus as plain-text terminal output."""

    def __init__(self, status: InterfaceStatus, interface: str = "") -> None:
        self.status = status
        self.interface = interface

    def format(self) -> str:
        """Return the complete terminal output as a string."""
        s = self.status
        title = f"Interface {self.interface}" if self.interface else "Interface"
        lines: list[str] = [f"=== {title} ==="]

        summary = [
            ["State", "UP" if s.up else "DOWN"],
            ["Uptime", s.format_uptime()],
            ["Protocol", s.proto or "-"],
            ["Device", s.l3_device or "-"],
            ["Available", _yes_no(s.available)],
            ["Pending", _yes_no(s.pending)],
            ["Autostart", _yes_no(s.autostart)],
            ["Dynamic", _yes_no(s.dynamic)],
            ["Delegation", _yes_no(s.delegation)],
            ["Metric", s.metric],
            ["DNS metric", s.dns_metric],
        ]
        lines.append(tabulate(summary, tablefmt="plain"))

        # ── Addresses ─────────────────────────────────────────────────
        lines.append("\n=== Addresses ===")
        addr_rows = [["IPv4", f"{a.address}/{a.mask}"] for a in s.ipv4_address]
        addr_rows += [["IPv6", a] for a in s.ipv6_address]
        addr_rows += [["IPv6 prefix", p] for p in s.ipv6_prefix]
        lines.append(tabulate(addr_rows, tablefmt="plain") if addr_rows else "  none")

        # ── Routes ────────────────────────────────────────────────────
        lines.append("\n=== Routes ===")
        if s.route:
            route_rows = [[f"{r.target}/{r.mask}", r.nexthop, r.source or "-"] for r in s.route]
            lines.append(tabulate(route_rows, headers=["Target", "Next hop", "Source"], tablefmt="simple"))
        else:
            lines.append("  none")

        # ── DNS ───────────────────────────────────────────────────────
        lines.append("\n=== DNS ===")
        lines.append(f"  Servers: {', '.join(s.dns_server) or '-'}")
        lines.append(f"  Search:  {', '.join(s.dns_search) or '-'}")

        return "\n".join(lines)
