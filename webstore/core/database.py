# webstore/core/database.py
"""Database configuration for the WebStore data store."""

import os
from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker
from dotenv import load_dotenv

load_dotenv()

# ===== CONFIGURATION =====

DATABASE_URL = os.getenv("WEBSTORE_DATABASE_URL", "sqlite:///./webstore.db")
LOG_LEVEL = os.getenv("WEBSTORE_LOG_LEVEL", "INFO").upper()

engine = create_engine(
    DATABASE_URL,
    connect_args={"check_same_thread": False} if DATABASE_URL.startswith("sqlite") else {},
)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
Base = declarative_base()


# ===== SESSION GENERATORS =====


def get_db():
    """Get a WebStore database session."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


# ===== TABLE CREATION =====


def create_all_tables(bind=None):
    """Create all WebStore tables."""
    # Import models to ensure they're registered with Base
    from webstore.store import models  # noqa: F401

    Base.metadata.create_all(bind=bind or engine)


def init_db():
    """Initialize the database schema."""
    create_all_tables()
