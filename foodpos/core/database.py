# foodpos/core/database.py
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, declarative_base
from foodpos.core.config import settings

SQLALCHEMY_DATABASE_URL = settings.DATABASE_URL

# Heroku-style URLs use the old scheme name
if SQLALCHEMY_DATABASE_URL and SQLALCHEMY_DATABASE_URL.startswith("postgres://"):
    SQLALCHEMY_DATABASE_URL = SQLALCHEMY_DATABASE_URL.replace("postgres://", "postgresql://", 1)

connect_args = {}
if SQLALCHEMY_DATABASE_URL.startswith("sqlite"):
    connect_args = {"check_same_thread": False}

engine = create_engine(SQLALCHEMY_DATABASE_URL, connect_args=connect_args)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()

def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()

def init_db():
    """Create any missing tables. Production schemas are managed by Alembic."""
    # Models must be imported so they register on Base.metadata
    from foodpos.models import sql_models  # noqa: F401
    Base.metadata.create_all(bind=engine)
