"""Command-line entrypoint for the vehicle risk assessor."""

from __future__ import annotations

import logging
import sys

from vehicle_risk.config import load_settings
from vehicle_risk.core.registry import RiskRegistry
from vehicle_risk.logging_config import configure_logging
from vehicle_risk.session import ConsoleSession

logger = logging.getLogger(__name__)


def main() -> int:
    """Run one interactive session.

    Returns:
        ``0`` when the user ends the session, ``1`` if any error escapes it.
        The error is reported on stderr as ``Error: <message>``.
    """
    try:
        settings = load_settings()
        configure_logging(settings.log_level, settings.log_format)
        ConsoleSession(RiskRegistry(), settings).run()
    except Exception as exc:
        logger.debug("Session terminated by unhandled error", exc_info=True)
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
