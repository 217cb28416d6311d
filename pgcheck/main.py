import logging
import os

from pgcheck.checker import check_all
from pgcheck.config_loader import load_targets
from pgcheck.db.postgres import PostgresConnector

logger = logging.getLogger(__name__)


def resolve_log_level(name):
    """Maps a level name to its number, falling back to WARNING for unknown names."""
    level = logging.getLevelName((name or "").upper())
    if isinstance(level, int):
        return level
    return logging.WARNING


def main():
    logging.basicConfig(
        level=resolve_log_level(os.getenv("PGCHECK_LOG_LEVEL", "WARNING")),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    targets = load_targets()

    print("Testing PostgreSQL connections...\n")
    results = check_all(targets, PostgresConnector())

    failed = sum(1 for r in results if not r.ok)
    logger.info(f"{len(results) - failed}/{len(results)} connections succeeded")


if __name__ == "__main__":
    main()
