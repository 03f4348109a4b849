import importlib

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, declarative_base
from sqlalchemy.pool import StaticPool

from teeshop.config import settings
from teeshop.utils.log import get_logger

log = get_logger("startup")


def _make_engine(url: str):
    """
    Build the engine for `url`.

    An in-memory SQLite database only lives as long as its connection, so it
    gets a single shared connection (StaticPool) usable from the request
    threadpool. Access to that connection is serialized by
    `teeshop.utils.transactions.locked_transaction`.
    """
    if url.startswith("sqlite") and (url in ("sqlite://", "sqlite:///:memory:") or "mode=memory" in url):
        return create_engine(
            url,
            future=True,
            echo=False,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    return create_engine(url, future=True, echo=False)


DATABASE_URL = settings.DATABASE_URL
engine = _make_engine(DATABASE_URL)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
Base = declarative_base()

# model modules that must be imported so Base.metadata is populated
MODEL_MODULES = [
    "teeshop.models.item",
    "teeshop.models.cart_line",
]


def init_db(reset: bool = False):
    """
    Initialize DB schema.

    With reset=True every table is dropped first, which empties both the
    catalog and the cart. Tests use this to start from a clean store.
    """
    for mod in MODEL_MODULES:
        importlib.import_module(mod)

    if reset:
        log.debug("init_db: dropping all tables")
        Base.metadata.drop_all(bind=engine)

    Base.metadata.create_all(bind=engine)
    log.debug("init_db: tables ready (%s)", ", ".join(sorted(Base.metadata.tables)))


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
