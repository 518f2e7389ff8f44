"""Database engine, session and metadata configuration."""

import logging
from typing import Generator

from fastapi import Request
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, declarative_base, sessionmaker

logger = logging.getLogger(__name__)

Base = declarative_base()


def build_engine(database_url: str) -> Engine:
    """Create the engine for the configured record store."""

    connect_args = {}
    if database_url.startswith("sqlite"):
        # sessions are opened and closed on different pool threads
        connect_args["check_same_thread"] = False
    return create_engine(database_url, future=True, pool_pre_ping=True, connect_args=connect_args)


def build_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(bind=engine, autoflush=False, autocommit=False, future=True)


def init_db(engine: Engine) -> None:
    """Create tables and constraints that do not exist yet."""

    # models must be imported so their tables are registered on Base.metadata
    from .. import models  # noqa: F401

    Base.metadata.create_all(bind=engine)
    logger.info("record store ready (%s backend)", engine.dialect.name)


def get_db(request: Request) -> Generator[Session, None, None]:
    """Yield a database session for request lifetime."""

    db = request.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()
