"""SQLAlchemy database manager for persistent key-value storage."""

from __future__ import annotations

import logging
from collections.abc import Generator
from contextlib import contextmanager

from sqlalchemy import Engine, MetaData, create_engine, pool
from sqlalchemy.orm import Session, sessionmaker

logger = logging.getLogger(__name__)


class SQLAlchemyManager:
    """Manages a SQLAlchemy engine and its sessions."""

    def __init__(self, metadata: MetaData):
        self._metadata = metadata
        self._engine: Engine | None = None
        self._sessionmaker: sessionmaker | None = None

    def initialize(self, database_url: str) -> None:
        """Create the engine and session factory."""
        if database_url.startswith("postgres://"):
            database_url = database_url.replace("postgres://", "postgresql://")

        if database_url in ("sqlite://", "sqlite:///:memory:"):
            # One shared connection, otherwise every session sees an empty database
            self._engine = create_engine(
                database_url,
                connect_args={"check_same_thread": False},
                poolclass=pool.StaticPool,
            )
        else:
            self._engine = create_engine(
                database_url,
                echo=False,  # Set to True for SQL debugging
                pool_pre_ping=True,  # Verify connections before use
            )

        self._sessionmaker = sessionmaker(
            self._engine,
            expire_on_commit=False,
            autoflush=False,
        )
        logger.info(f"Storage engine initialized for {self._engine.url.render_as_string()}")

    def close(self) -> None:
        """Dispose of the engine."""
        if self._engine:
            self._engine.dispose()
            self._engine = None
            self._sessionmaker = None

    @contextmanager
    def session_scope(self) -> Generator[Session, None, None]:
        """Yield a session that commits on success and rolls back on error."""
        if not self._sessionmaker:
            raise RuntimeError("Database not initialized. Call initialize() first.")

        session = self._sessionmaker()
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    def create_all_tables(self) -> None:
        """Create all tables defined by models."""
        if not self._engine:
            raise RuntimeError("Database not initialized. Call initialize() first.")

        self._metadata.create_all(self._engine)

    def drop_all_tables(self) -> None:
        """Drop all tables. Use with caution!"""
        if not self._engine:
            raise RuntimeError("Database not initialized. Call initialize() first.")

        self._metadata.drop_all(self._engine)
