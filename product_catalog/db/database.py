"""
==============================================================================
Database Connection Management Module
==============================================================================

Database connection management for the local record store using SQLAlchemy.

This module implements:
- DatabaseManager: owns the engine and session factory for one database
- Session factory with proper lifecycle management

Ownership:
---------
A DatabaseManager is constructed explicitly by the application and passed
to whichever component needs it. The application opens it at startup and
disposes it at shutdown.

    ┌─────────────────┐
    │   Application   │ (owner)
    └────────┬────────┘
             │
    ┌────────▼────────┐
    │ DatabaseManager │
    └────────┬────────┘
             │
    ┌────────▼────────┐
    │     Engine      │
    └────────┬────────┘
             │
    ┌────────▼────────┐
    │    Session      │ (held by ProductStore)
    └─────────────────┘

SQLite Note:
-----------
In-memory databases ("sqlite://") use a StaticPool so every session sees
the same database.

==============================================================================
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Generator, Optional

from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool


# Module logger
logger = logging.getLogger(__name__)

# SQLAlchemy declarative base for all models
Base = declarative_base()

IN_MEMORY_URLS = ("sqlite://", "sqlite:///:memory:")


class DatabaseManager:
    """
    Database connection manager for a single database URL.

    The engine is created lazily on first access.

    Attributes:
        _database_url: SQLAlchemy connection string
        _echo: Log emitted SQL
        _engine: SQLAlchemy engine instance (lazy loaded)
        _session_factory: Session factory for creating sessions

    Example:
        >>> db_manager = DatabaseManager("sqlite:///products.db")
        >>> db_manager.create_tables()
        >>> with db_manager.session_scope() as session:
        ...     products = session.query(Product).all()
        >>> db_manager.dispose()
    """

    def __init__(self, database_url: str, echo: bool = False) -> None:
        """
        Initialize the database manager.

        Args:
            database_url: SQLAlchemy connection string
            echo: Log SQL statements
        """
        self._database_url = database_url
        self._echo = echo
        self._engine: Optional[Engine] = None
        self._session_factory: Optional[sessionmaker] = None

        logger.debug(f"DatabaseManager initialized for {database_url}")

    @property
    def database_url(self) -> str:
        """Connection string this manager was built with."""
        return self._database_url

    # =========================================================================
    # ENGINE MANAGEMENT
    # =========================================================================

    @property
    def engine(self) -> Engine:
        """Get the SQLAlchemy engine (lazy initialization)."""
        if self._engine is None:
            self._engine = self._create_engine()
        return self._engine

    def _create_engine(self) -> Engine:
        """
        Create the SQLAlchemy engine with appropriate configuration.

        - SQLite file: disables check_same_thread
        - SQLite in-memory: additionally shares one connection (StaticPool)
        - Other databases: default pooling with pre-ping
        """
        database_url = self._database_url

        if database_url in IN_MEMORY_URLS:
            engine = create_engine(
                database_url,
                connect_args={"check_same_thread": False},
                poolclass=StaticPool,
                echo=self._echo,
            )
            logger.info("Created in-memory SQLite engine")

        elif database_url.startswith("sqlite"):
            engine = create_engine(
                database_url,
                connect_args={"check_same_thread": False},
                echo=self._echo,
            )
            logger.info(f"Created SQLite engine: {database_url}")

        else:
            engine = create_engine(
                database_url,
                pool_pre_ping=True,
                echo=self._echo,
            )
            logger.info(f"Created database engine: {database_url}")

        return engine

    # =========================================================================
    # SESSION MANAGEMENT
    # =========================================================================

    @property
    def session_factory(self) -> sessionmaker:
        """Get the session factory (lazy initialization)."""
        if self._session_factory is None:
            self._session_factory = sessionmaker(
                bind=self.engine,
                autocommit=False,
                autoflush=False,
                expire_on_commit=False,  # Keep objects readable after commit
            )
        return self._session_factory

    def get_session(self) -> Session:
        """
        Get a new database session.

        The caller is responsible for closing the session.
        """
        return self.session_factory()

    @contextmanager
    def session_scope(self) -> Generator[Session, None, None]:
        """
        Provide a transactional scope around a series of operations.

        Commits on success, rolls back on exception, always closes.
        """
        session = self.get_session()
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    # =========================================================================
    # TABLE MANAGEMENT
    # =========================================================================

    def create_tables(self) -> None:
        """Create all tables that don't already exist."""
        Base.metadata.create_all(bind=self.engine)
        logger.info("Database tables created/verified")

    def drop_tables(self) -> None:
        """
        Drop all tables defined in the models.

        WARNING: This will delete all data! Use only for testing.
        """
        Base.metadata.drop_all(bind=self.engine)
        logger.warning("All database tables dropped")

    # =========================================================================
    # CONNECTION MANAGEMENT
    # =========================================================================

    def verify_connection(self) -> None:
        """
        Verify the database answers a trivial query.

        Raises:
            sqlalchemy.exc.SQLAlchemyError: If the database cannot be reached
        """
        with self.engine.connect() as conn:
            conn.execute(text("SELECT 1"))
        logger.debug("Database connection verified")

    def dispose(self) -> None:
        """Dispose of the connection pool. Call on application shutdown."""
        if self._engine is not None:
            self._engine.dispose()
            self._engine = None
            self._session_factory = None
            logger.info("Database connection pool disposed")

    def __repr__(self) -> str:
        """String representation for debugging."""
        return f"DatabaseManager(url={self._database_url!r})"
