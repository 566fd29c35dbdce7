"""Alembic environment for the personal finance schema.

Reads the database URL from the application settings so migrations and the
API always point at the same database. Offline mode renders SQL, online
mode applies it through a synchronous SQLAlchemy engine.
"""

import sys
from logging.config import fileConfig
from pathlib import Path

from alembic import context
from sqlalchemy import create_engine, pool

# Application settings live in src/
sys.path.insert(0, str(Path(__file__).resolve().parent.parent / "src"))

from config import settings  # noqa: E402

config = context.config

if config.config_file_name is not None:
    fileConfig(config.config_file_name)


def sync_database_url(url: str) -> str:
    """asyncpg-style URLs -> plain postgresql:// for SQLAlchemy"""
    return (
        url.replace("postgresql+asyncpg://", "postgresql://")
        .replace("asyncpg://", "postgresql://")
    )


DATABASE_URL = sync_database_url(settings.DATABASE_URL)
config.set_main_option("sqlalchemy.url", DATABASE_URL)

# Migrations are written by hand, no autogenerate metadata
target_metadata = None


def run_migrations_offline() -> None:
    """Emit migration SQL without connecting."""
    context.configure(
        url=config.get_main_option("sqlalchemy.url"),
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
        compare_type=True,
    )

    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    """Apply migrations over a live connection."""
    engine = create_engine(DATABASE_URL, poolclass=pool.NullPool)

    try:
        with engine.connect() as connection:
            context.configure(
                connection=connection,
                target_metadata=target_metadata,
                compare_type=True,
            )
            with context.begin_transaction():
                context.run_migrations()
    finally:
        engine.dispose()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
