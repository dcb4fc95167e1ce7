import os, re, sys
from datetime import date
from logging.config import fileConfig
from alembic import context

# Ensure project root is importable (so "import fittrack" works)
PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

# Load .env before Settings reads DATABASE_URL
from dotenv import load_dotenv
load_dotenv(os.path.join(PROJECT_ROOT, ".env"))

# users, workouts, workout_exercises, meals, meal_foods
from sqlmodel import SQLModel
import fittrack.models  # noqa: F401
from fittrack.core.config import Settings
from fittrack.core.db import make_engine

# Alembic config
config = context.config
if config.config_file_name is not None:
    fileConfig(config.config_file_name)

# Same URL and backend rules as the app (Postgres, or SQLite for development)
db_url = Settings().DATABASE_URL
config.set_main_option("sqlalchemy.url", db_url)

target_metadata = SQLModel.metadata


def include_object(obj, name, type_, reflected, compare_to):
    # Leave tables the app does not own alone when autogenerating
    if type_ == "table" and reflected and name not in target_metadata.tables:
        return False
    return True


def process_revision_directives(context, revision, directives):
    # Revision ids are "<yyyymmdd>_<message slug>", e.g. 20261019_initial_schema
    script = directives[0] if directives else None
    if script is None or not script.message:
        return
    slug = re.sub(r"[^a-z0-9]+", "_", script.message.lower()).strip("_")
    script.rev_id = f"{date.today():%Y%m%d}_{slug}"


def run_migrations_offline():
    context.configure(
        url=db_url,
        target_metadata=target_metadata,
        literal_binds=True,
        compare_type=True,
        include_object=include_object,
        process_revision_directives=process_revision_directives,
    )
    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online():
    connectable = make_engine(db_url)
    with connectable.connect() as connection:
        context.configure(
            connection=connection,
            target_metadata=target_metadata,
            compare_type=True,
            include_object=include_object,
            process_revision_directives=process_revision_directives,
            # SQLite cannot ALTER most constraints in place
            render_as_batch=connection.dialect.name == "sqlite",
        )
        with context.begin_transaction():
            context.run_migrations()
    connectable.dispose()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
