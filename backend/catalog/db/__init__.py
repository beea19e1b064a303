import logging
from typing import Optional

from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker

from catalog.config import settings

log = logging.getLogger("catalog.db")

DATABASE_URL = settings.DATABASE_URL
connect_args = {"check_same_thread": False} if DATABASE_URL.startswith("sqlite") else {}
engine = create_engine(DATABASE_URL, future=True, echo=False, connect_args=connect_args)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
Base = declarative_base()


def init_db(reset: Optional[bool] = None, seed: Optional[bool] = None):
    """
    Initialize DB schema.

    Behavior:
      - reset (defaults to settings.RESET_DB) drops and recreates the tables.
      - seed (defaults to settings.SEED_DEMO_DATA) inserts the demo products
        when the products table is empty.
    """
    # register models on Base.metadata
    from catalog.models.product import Product  # noqa: F401
    from catalog.db.seed import seed_demo_products

    if reset is None:
        reset = settings.RESET_DB
    if seed is None:
        seed = settings.SEED_DEMO_DATA

    if reset:
        log.info("Resetting database schema")
        Base.metadata.drop_all(bind=engine)

    Base.metadata.create_all(bind=engine)
    log.info("Database initialized")

    if seed:
        with SessionLocal() as s:
            created = seed_demo_products(s)
            if created:
                log.info("Seeded %d demo products", created)


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
