"""Software-only simulation / demo - no real systems will be contacted or modified."""
from __future__ import annotations

import sys
from typing import List, Optional

from .config import get_settings
from .logging_config import logger, setup_logging
from .utils.address_tools import remove_port


def main(argv: Optional[List[str]] = None) -> int:
    setup_logging()
    settings = get_settings()
    args = sys.argv[1:] if argv is None else argv
    addresses = args or settings.demo_addresses
    logger.info("demo.start", app=settings.app_name, count=len(addresses))
    for address in addresses:
        print(f"{address} -> {remove_port(address)}")
    logger.info("demo.complete")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
