"""Console entry point: ``openwrtstatus [options]`` or ``python -m openwrtstatus``.

Examples:
  openwrtstatus --host 192.168.1.1 --interface wan

  OPENWRT_HOST=router.lan openwrtstatus --format json
"""

from __future__ import annotations

import sys

from openwrtstatus import configure_logging
from openwrtstatus.ifstatus import cli


def main() -> None:
    """Set up logging, then run the interface status CLI."""
    configure_logging()
    cli.main(sys.argv[1:])


if __name__ == "__main__":
    main()
