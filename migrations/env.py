import sys
import os
from logging.config import fileConfig

from sqlalchemy import pool
from alembic import context

# so Alembic can import shareledger/* without an install
sys.path.append(os.path.dirname(os.path.dirname(__file__)))

from shareledger.core.config import settings
from shareledger.db.session import Base
import shareledger.models.user  # import ALL models here
import shareledger.models.group
import shareledger.models.group_member
import shareledger.models.expense
import shareledger.models.expense_split
import shareledger.models.settlement

from sqlalchemy.ext.asyncio import create_async_engine


config = context.config

if config.config_file_name is not None:
    fileConfig(config.config_file_name, disable_existing_loggers=False)

target_metadata = Base.metadata


def get_url():
    return config.get_main_option("sqlalchemy.url") or settings.DATABASE_URL


def run_migrations_offline():
    context.configure(
        url=get_url(),
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
    )

    with context.begin_transaction():
        context.run_migrations()


def do_run_migrations(connection):
    context.configure(
        connection=connection,
        target_metadata=target_metadata,
    )

    with context.begin_transaction():
        context.run_migrations()


async def run_migrations_online():
    connectable = create_async_engine(
        get_url(),
        poolclass=pool.NullPool,
    )

    async with connectable.connect() as connection:
        await connection.run_sync(do_run_migrations)

    await connectable.dispose()


if context.is_offline_mode():
    run_migrations_offline()
else:
    import asyncio
    asyncio.run(run_migrations_online())
