"""
CLI entrypoint for the expired-session cleanup job. Run from cron, e.g.:

  python -m app.session_cleanup

Or hourly: 0 * * * * cd /path/to/landing-api && .venv/bin/python -m app.session_cleanup
"""

import logging
import sys

from app.core.config import get_settings
from app.core.logging import configure_logging
from app.services.sessions import build_session_store

logger = logging.getLogger(__name__)


def main() -> int:
    """Delete sessions whose expiry has passed."""
    settings = get_settings()
    configure_logging(settings.LOG_LEVEL)
    if settings.SESSION_BACKEND != "database":
        logger.info("SESSION_BACKEND=%s keeps no durable sessions; skipping.", settings.SESSION_BACKEND)
        return 0
    try:
        deleted = build_session_store(settings).purge_expired()
        logger.info("Session cleanup completed: sessions_deleted=%s", deleted)
        return 0
    except Exception as e:
        logger.exception("Session cleanup failed: %s", e)
        return 1


if __name__ == "__main__":
    sys.exit(main())
