from typing import Any

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker

from productivepro.config import settings


def _normalize_database_url(raw_url: str) -> str:
    url = (raw_url or "").strip()
    if url.startswith("postgres://"):
        url = "postgresql://" + url[len("postgres://") :]
    if url.startswith("postgresql://") and "+psycopg" not in url:
        url = url.replace("postgresql://", "postgresql+psycopg://", 1)
    return url


def make_engine(url: str, **kwargs: Any) -> Engine:
    """Engine for ``url`` with the project's defaults; ``kwargs`` override them.

    SQLite connections are shared across request threads, so the same-thread
    check is disabled for them.
    """
    url = _normalize_database_url(url)
    options: dict[str, Any] = {"future": True, "echo": settings.SQL_ECHO}
    if url.startswith("sqlite"):
        options["connect_args"] = {"check_same_thread": False}
    else:
        options["pool_pre_ping"] = True
    options.update(kwargs)
    return create_engine(url, **options)


def make_session_factory(bind: Engine) -> sessionmaker:
    return sessionmaker(autocommit=False, autoflush=False, bind=bind, future=True)


DATABASE_URL = _normalize_database_url(settings.DATABASE_URL)
engine = make_engine(DATABASE_URL)
SessionLocal = make_session_factory(engine)
