"""Entry point for `python -m panekit` or the `panekit` console script."""

import argparse
import logging

from panekit.app import App
from panekit.config import DEFAULT_LOG_LEVEL, LOG_FORMAT

logger = logging.getLogger("panekit")


def main() -> None:
    parser = argparse.ArgumentParser(description="panekit: observable pygame views demo")
    parser.add_argument("--log-level", default=DEFAULT_LOG_LEVEL, help="Logging level (DEBUG, INFO, ...)")
    args = parser.parse_args()
    logging.basicConfig(level=args.log_level.upper(), format=LOG_FORMAT)

    app = App()
    app.root.bind(
        "mousebuttondown keydown",
        lambda payload: logger.info("%s on %r", payload.platform_event, payload.source),
    )
    app.run()


if __name__ == "__main__":
    main()
