#!/usr/bin/env python3
"""Apply Alembic migrations to the Stories database.

Usage:
    python scripts/run_migrations.py            # upgrade to head
    python scripts/run_migrations.py <rev>      # upgrade (or downgrade) to <rev>
"""

import sys
import logfire
from alembic import command
from alembic.config import Config

from stories.config import Settings
from stories.util.logging import setup_logging
from stories.util.observability import configure_logfire


def main(argv: list[str]) -> int:
    """Migrate the schema to the requested revision."""
    settings = Settings()

    setup_logging(settings)
    configure_logfire(settings)

    target = argv[1] if len(argv) > 1 else "head"
    alembic_cfg = Config("alembic.ini")

    with logfire.span("migrations.run", target=target):
        try:
            current = command.current(alembic_cfg)
            logfire.info("Migrating database", target=target, current=current)

            if target.startswith("-") or target == "base":
                command.downgrade(alembic_cfg, target)
            else:
                command.upgrade(alembic_cfg, target)

            logfire.info("Database migrations completed", target=target)
            return 0

        except Exception as e:
            logfire.error(
                "Database migration failed",
                target=target,
                error=str(e),
                error_type=type(e).__name__,
                _exc_info=sys.exc_info(),
            )
            # Re-raise so the container fails and doesn't start with broken schema
            raise


if __name__ == "__main__":
    sys.exit(main(sys.argv))
