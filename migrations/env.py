import logging
from logging.config import fileConfig

from alembic import context

# Run through `flask db ...`, so Flask-Migrate has pushed an app context
from flask import current_app

config = context.config

# Interpret the config file for Python logging.
if config.config_file_name is not None:
    fileConfig(config.config_file_name)
logger = logging.getLogger('alembic.env')

# Point Alembic at the tracker database configured for the app
config.set_main_option('sqlalchemy.url',
                       current_app.config['SQLALCHEMY_DATABASE_URI'].replace('%', '%%'))

# Flask-SQLAlchemy registers itself under the 'sqlalchemy' key
db_instance = current_app.extensions['sqlalchemy']

# users, countries, visited_countries (for 'autogenerate' support)
target_metadata = db_instance.metadata


def run_migrations_offline() -> None:
    """Emit the migration as SQL without connecting to the database."""
    url = config.get_main_option("sqlalchemy.url")
    context.configure(
        url=url,
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
        # SQLite cannot ALTER constraints in place
        render_as_batch=True
    )

    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    """Run the migration against the app's engine."""
    connectable = db_instance.engine

    with connectable.connect() as connection:
        context.configure(
            connection=connection,
            target_metadata=target_metadata,
            render_as_batch=True,
            compare_type=True
        )

        with context.begin_transaction():
            context.run_migrations()


if context.is_offline_mode():
    logger.info("Generating SQL for the tracker schema")
    run_migrations_offline()
else:
    run_migrations_online()
