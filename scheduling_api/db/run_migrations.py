"""
Apply the Alembic migrations shipped inside this package.

There is no alembic.ini: the script location is resolved from this module and the
database URL is read by migrations/env.py from scheduling_api.db.config.

    python -m scheduling_api.db.run_migrations             # latest revision
    python -m scheduling_api.db.run_migrations 3c7d2a91e4b0
"""

import logging
import sys
from pathlib import Path

from alembic import command
from alembic.config import Config

logger = logging.getLogger(__name__)

MIGRATIONS_DIR = Path(__file__).resolve().parent / "migrations"


def _alembic_config() -> Config:
    cfg = Config()
    cfg.set_main_option("script_location", str(MIGRATIONS_DIR))
    return cfg


# PUBLIC_INTERFACE
def upgrade(revision: str = "head") -> None:
    """Bring the configured database schema up to `revision`."""
    logger.info("Upgrading database schema to %s", revision)
    command.upgrade(_alembic_config(), revision)


if __name__ == "__main__":
    upgrade(*sys.argv[1:2])
