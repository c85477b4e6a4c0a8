import os
import sys
from logging.config import fileConfig

from sqlalchemy import create_engine
from sqlalchemy import pool


# --- add backend/ to sys.path (so "ledger_api.*" imports work)
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from alembic import context

# this is the Alembic Config object, which provides
# access to the values within the .ini file in use.
config = context.config

# Interpret the config file for Python logging.
if config.config_file_name is not None:
    fileConfig(config.config_file_name)

from ledger_api.db_base import Base
target_metadata = Base.metadata

# Ensure all models are registered on Base.metadata for autogenerate
from ledger_api.repositories.sql_account_repository import AccountRow  # noqa: F401
from ledger_api.repositories.sql_ledger_entry_repository import LedgerEntryRow  # noqa: F401


def run_migrations_offline() -> None:
    """Run migrations in 'offline' mode.

    Configures the context with just a URL, so no DBAPI is needed.
    Calls to context.execute() emit the given string to the script output.
    """
    url = config.get_main_option("sqlalchemy.url") or os.getenv("LEDGER_DATABASE_URL", "").strip()
    context.configure(
        url=url,
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
    )

    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    url = os.getenv("LEDGER_DATABASE_URL", "").strip()
    if not url:
        raise RuntimeError("LEDGER_DATABASE_URL is required to run migrations.")

    connectable = create_engine(url, poolclass=pool.NullPool)

    with connectable.connect() as connection:
        context.configure(
            connection=connection,
            target_metadata=target_metadata,
            compare_type=True,
        )

        with context.begin_transaction():
            context.run_migrations()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
