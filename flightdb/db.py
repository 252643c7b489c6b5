from __future__ import annotations
import logging
import os
from contextlib import contextmanager
from typing import Iterator, List, Optional
from sqlalchemy import create_engine, event, inspect
from sqlalchemy.orm import Session, sessionmaker
from .models import Base

log = logging.getLogger(__name__)

DEFAULT_DB = "sqlite:///flight_delays.db"
DATABASE_URL_ENV = "FLIGHTDB_DATABASE_URL"

def resolve_database_url(database_url: Optional[str] = None) -> str:
    return database_url or os.environ.get(DATABASE_URL_ENV) or DEFAULT_DB

def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    # SQLite ships with foreign key enforcement switched off per connection
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()

def make_engine(database_url: str):
    engine = create_engine(database_url, future=True)
    if engine.dialect.name == "sqlite":
        event.listen(engine, "connect", _enable_sqlite_foreign_keys)
    return engine

def make_session_factory(engine):
    return sessionmaker(bind=engine, autoflush=False, autocommit=False, future=True)

def table_creation_order() -> List[str]:
    """Table names ordered so that every referenced table comes before its dependents."""
    return [table.name for table in Base.metadata.sorted_tables]

def init_db(engine):
    """Create every table and index that does not exist yet, parents first."""
    with engine.begin() as conn:
        existing = set(inspect(conn).get_table_names())
        Base.metadata.create_all(conn)
    for name in table_creation_order():
        if name in existing:
            log.debug("Table %s already present", name)
        else:
            log.info("Created table %s", name)

def drop_db(engine):
    with engine.begin() as conn:
        Base.metadata.drop_all(conn)
    log.info("Dropped tables: %s", ", ".join(reversed(table_creation_order())))

@contextmanager
def session_scope(session_factory) -> Iterator[Session]:
    session = session_factory()
    try:
        yield session
        session.commit()
    except Exception as e:
        log.error("Rolling back transaction: %s", e)
        session.rollback()
        raise
    finally:
        session.close()
