from __future__ import annotations

import logging
import sys

from order_result import config
from order_result.adapters.inbound.cli import run_cli
from order_result.bootstrap import build_controller


def main(argv: list[str] | None = None) -> int:
    argv = argv or sys.argv[1:]
    if not argv:
        print("usage: order-result '<json>'")
        return 2

    logging.basicConfig(
        level=config.LOG_LEVEL,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    return run_cli(build_controller(), argv[0])


if __name__ == "__main__":
    raise SystemExit(main())
