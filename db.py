import os
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, DeclarativeBase
from dotenv import load_dotenv

load_dotenv()

DATABASE_URL = os.getenv("DATABASE_URL")
if not DATABASE_URL:
    raise RuntimeError("DATABASE_URL env var not set")

class Base(DeclarativeBase):
    pass

engine = create_engine(DATABASE_URL, future=True, pool_pre_ping=True)
SessionLocal = sessionmaker(bind=engine, autoflush=False, autocommit=False, future=True)


def init_db():
    """Create the mapped host tables if they do not exist (local/dev databases only)."""
    # models must be imported so their tables are registered on Base.metadata
    import models.models  # noqa: F401
    import models.models_user  # noqa: F401
    Base.metadata.create_all(bind=engine)


def get_db():
    # read-only usage: nothing is committed on this path
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
