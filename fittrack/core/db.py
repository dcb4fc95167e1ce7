from typing import Iterator

from fastapi import Request
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel, Session, create_engine


def make_engine(database_url: str) -> Engine:
    """
    Build the engine for DATABASE_URL. Postgres in deployment; SQLite is
    accepted for local runs and tests (in-memory SQLite shares one connection).
    """
    url = make_url(database_url)
    backend = url.get_backend_name()
    if backend == "sqlite":
        kwargs = {"connect_args": {"check_same_thread": False}}
        if url.database in (None, "", ":memory:"):
            kwargs["poolclass"] = StaticPool
        return create_engine(database_url, echo=False, **kwargs)
    if not backend.startswith("postgres"):
        raise RuntimeError(
            f"Unsupported database backend '{backend}'. Use Postgres (or SQLite for development)."
        )
    return create_engine(database_url, echo=False, pool_pre_ping=True)


def init_db(engine: Engine) -> None:
    """Ensure models are registered and tables exist. Safe to call multiple times."""
    import fittrack.models  # noqa: F401
    SQLModel.metadata.create_all(engine)


def get_session(request: Request) -> Iterator[Session]:
    with Session(request.app.state.engine) as session:
        yield session
