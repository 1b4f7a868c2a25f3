from __future__ import annotations

import argparse
import logging
import sys

from .runtime.bootstrap import DEFAULT_SAMPLE_URL, BootstrapError, fetch_sample_users
from .runtime.server import serve

logger = logging.getLogger("roster")


def main(argv: list[str] | None = None) -> None:
    p = argparse.ArgumentParser(prog="roster", description="roster: minimal in-memory user registry")
    p.add_argument("--host", default="127.0.0.1")
    p.add_argument("--port", type=int, default=8080)
    p.add_argument("--sample-url", default=DEFAULT_SAMPLE_URL, help="sample data fetched once before serving")
    p.add_argument("--no-bootstrap", action="store_true", help="skip the startup sample fetch")
    p.add_argument("--log-level", default="info", choices=["critical", "error", "warning", "info", "debug"])
    args = p.parse_args(argv)

    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if not args.no_bootstrap:
        try:
            fetch_sample_users(args.sample_url)
        except BootstrapError as ex:
            logger.error("%s", ex)
            sys.exit(1)

    serve(host=args.host, port=args.port, log_level=args.log_level)


if __name__ == "__main__":
    main()
