"""Alembic environment for the circulation schema.

Migrations always run through `circulation.config.build_alembic_config`, so
there is no alembic.ini and logging is left to the caller (the CLI or the
test session). Engines come from `make_engine`, which means a migrated SQLite
file gets the same PRAGMAs as the running service.

URL lookup order: ``-x url=...``, then the config's ``sqlalchemy.url``, then
``CIRCULATION_DB_URL``.
"""

import logging

from alembic import context

from circulation import config as app_config
from circulation.adapters.db.engine import is_sqlite, make_engine
from circulation.adapters.db.schema import metadata

# pylint: disable=no-member

logger = logging.getLogger("circulation.migrations")

alembic_config = context.config


def resolve_url() -> str:
    """Return the database URL to migrate.

    Raises:
        DatabaseUrlNotSetError: If no URL is given anywhere.
    """
    if url := context.get_x_argument(as_dictionary=True).get("url"):
        return url
    if url := alembic_config.get_main_option(app_config.ALEMBIC_URL_KEY):
        return url
    return app_config.get_db_url()


def migrate_offline(url: str) -> None:
    """Emit the migration SQL instead of running it (``db upgrade --sql``)."""
    context.configure(
        url=url,
        target_metadata=metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
        compare_type=True,
        compare_server_default=True,
    )
    with context.begin_transaction():
        context.run_migrations()


def migrate_online(url: str) -> None:
    """Run the migrations on a live connection, then drop the engine."""
    engine = make_engine(url)
    try:
        with engine.connect() as connection:
            context.configure(
                connection=connection,
                target_metadata=metadata,
                compare_type=True,
                compare_server_default=True,
                # SQLite has no ALTER COLUMN; Alembic copies the table instead
                render_as_batch=is_sqlite(url),
            )
            with context.begin_transaction():
                context.run_migrations()
    finally:
        engine.dispose()


db_url = resolve_url()
if context.is_offline_mode():
    logger.debug("Rendering migration SQL")
    migrate_offline(db_url)
else:
    logger.debug("Running migrations online")
    migrate_online(db_url)
