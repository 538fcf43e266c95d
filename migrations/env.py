import os, sys
from logging.config import fileConfig
from alembic import context
from sqlalchemy import engine_from_config, pool

# Run from the repo root without installing the package
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

# Base + the league_documents model only; podium_league.core.config is not imported
# so migrations never need the OpenF1 / league settings
from podium_league.db.base import Base
import podium_league.models.league  # registers league_documents on Base.metadata

config = context.config

# DATABASE_URL wins over alembic.ini, same variable the API reads
db_url = os.getenv("DATABASE_URL") or config.get_main_option("sqlalchemy.url")
if not db_url:
    raise RuntimeError("Set DATABASE_URL (e.g. postgresql://.../podium_league) before migrating")
config.set_main_option("sqlalchemy.url", db_url)

if config.config_file_name:
    fileConfig(config.config_file_name)

# Autogenerate compares against the league_documents table (name, payload JSON, updated_at)
target_metadata = Base.metadata

# SQLite cannot ALTER most columns in place; batch mode rebuilds the table instead
render_as_batch = db_url.startswith("sqlite")


def run_migrations_offline():
    context.configure(
        url=db_url,
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
        render_as_batch=render_as_batch,
    )
    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online():
    connectable = engine_from_config(
        config.get_section(config.config_ini_section, {}),
        prefix="sqlalchemy.",
        poolclass=pool.NullPool,
    )
    with connectable.connect() as connection:
        context.configure(
            connection=connection,
            target_metadata=target_metadata,
            compare_type=True,
            render_as_batch=render_as_batch,
        )
        with context.begin_transaction():
            context.run_migrations()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
