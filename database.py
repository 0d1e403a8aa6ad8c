import os
import json
from pathlib import Path
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker, declarative_base
from sqlalchemy.pool import QueuePool
from dotenv import load_dotenv
import logging

logger = logging.getLogger(__name__)

BASE_DIR = Path(__file__).resolve().parent
load_dotenv(dotenv_path=BASE_DIR / ".env")

DATABASE_URL = os.getenv("DATABASE_URL", "").strip()

# Some hosting environments accidentally prepend "DATABASE_URL=" to the value
PREFIX = "DATABASE_URL="
if DATABASE_URL.startswith(PREFIX):
    DATABASE_URL = DATABASE_URL[len(PREFIX):].strip()

# Local development default
if not DATABASE_URL:
    default_sqlite_path = BASE_DIR / "parish.db"
    DATABASE_URL = f"sqlite:///{default_sqlite_path.as_posix()}"
    logger.warning(
        "DATABASE_URL not found in environment. Falling back to SQLite at %s",
        default_sqlite_path
    )

POOL_SIZE = int(os.getenv("DB_POOL_SIZE", 10))
MAX_OVERFLOW = int(os.getenv("DB_MAX_OVERFLOW", 20))
POOL_TIMEOUT = int(os.getenv("DB_POOL_TIMEOUT", 30))
POOL_RECYCLE = int(os.getenv("DB_POOL_RECYCLE", 3600))


def configure_sqlite_transactions(target_engine) -> None:
    """
    Let SQLAlchemy own BEGIN on pysqlite connections.
    Without this the driver issues its own transaction statements and
    SAVEPOINT (used by the action log) does not behave. BEGIN IMMEDIATE takes
    the write lock up front, which serialises register numbering the way row
    locks do on PostgreSQL.
    """
    @event.listens_for(target_engine, "connect")
    def _on_connect(dbapi_connection, connection_record):
        dbapi_connection.isolation_level = None

    @event.listens_for(target_engine, "begin")
    def _on_begin(conn):
        conn.exec_driver_sql("BEGIN IMMEDIATE")


def json_serializer(value) -> str:
    """JSON column serializer; non-ASCII text is stored unescaped."""
    return json.dumps(value, ensure_ascii=False)


engine_kwargs = {
    "echo": False,
    "future": True,
    "pool_pre_ping": True,
    "json_serializer": json_serializer,
}

if DATABASE_URL.startswith("sqlite"):
    engine_kwargs["connect_args"] = {"check_same_thread": False}
else:
    engine_kwargs.update(
        {
            "poolclass": QueuePool,
            "pool_size": POOL_SIZE,
            "max_overflow": MAX_OVERFLOW,
            "pool_timeout": POOL_TIMEOUT,
            "pool_recycle": POOL_RECYCLE,
        }
    )

engine = create_engine(DATABASE_URL, **engine_kwargs)

if DATABASE_URL.startswith("sqlite"):
    configure_sqlite_transactions(engine)

SessionLocal = sessionmaker(bind=engine, autocommit=False, autoflush=False, future=True)

Base = declarative_base()

if DATABASE_URL.startswith("sqlite"):
    logger.info("Database configured with SQLite at %s", DATABASE_URL)
else:
    logger.info("Database connection pool configured: size=%s, max_overflow=%s", POOL_SIZE, MAX_OVERFLOW)
