from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool


@dataclass(frozen=True)
class DBConfig:
    url: str
    echo: bool = False
    pool_size: int = 5


class DatabaseConnection:
    """Owns the SQLAlchemy engine and hands out short-lived sessions.

    One instance is built per process by ``build_container`` and passed to
    every repository; nothing here is module-global.
    """

    def __init__(self, config: DBConfig):
        self._config = config
        self._engine = self._create_engine(config)
        self._session_factory = sessionmaker(bind=self._engine, expire_on_commit=False)

    @staticmethod
    def _create_engine(config: DBConfig) -> Engine:
        if config.url.startswith("sqlite"):
            kwargs = {"connect_args": {"check_same_thread": False}}
            if config.url in ("sqlite://", "sqlite:///:memory:"):
                # A single shared connection keeps the in-memory database alive.
                kwargs["poolclass"] = StaticPool
            engine = create_engine(config.url, echo=config.echo, **kwargs)

            @event.listens_for(engine, "connect")
            def _enable_foreign_keys(dbapi_conn, _record):
                cur = dbapi_conn.cursor()
                cur.execute("PRAGMA foreign_keys=ON")
                cur.close()

            return engine

        return create_engine(
            config.url,
            echo=config.echo,
            pool_size=config.pool_size,
            pool_pre_ping=True,
        )

    @property
    def engine(self) -> Engine:
        return self._engine

    @property
    def url(self) -> str:
        return self._engine.url.render_as_string(hide_password=True)

    @contextmanager
    def session_scope(self) -> Iterator[Session]:
        session = self._session_factory()
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    def dispose(self) -> None:
        self._engine.dispose()
