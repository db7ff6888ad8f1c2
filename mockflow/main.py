from __future__ import annotations

import logging
import sys

from mockflow.core.config import load_settings
from mockflow.core.errors import FlowError
from mockflow.core.logging import setup_logging
from mockflow.services.flow import run_flow
from mockflow.services.transport import Session

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FLOW_FAILED = 1
EXIT_BAD_SETTINGS = 2


def main() -> int:
    try:
        settings = load_settings()
    except ValueError as exc:
        print(f"Invalid settings: {exc}", file=sys.stderr)
        return EXIT_BAD_SETTINGS

    setup_logging(settings.log_level, json_format=settings.log_json)
    logger.info("mockflow starting  target=%s", settings.target_url)

    with Session() as session:
        try:
            run_flow(session, settings.target_url)
        except FlowError as exc:
            logger.error("Flow failed: %s", exc)
            return EXIT_FLOW_FAILED

    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
