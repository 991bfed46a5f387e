from sqlalchemy import create_engine, text
from sqlalchemy.orm import declarative_base, sessionmaker
from supabase import create_client, Client
import os
from dotenv import load_dotenv
from contextlib import contextmanager
from typing import Optional
import logging

load_dotenv()

logger = logging.getLogger(__name__)

# Database URLs
DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./gallery_admin.db")
SUPABASE_URL = os.getenv("SUPABASE_URL")
SUPABASE_ANON_KEY = os.getenv("SUPABASE_ANON_KEY")

# Forces every service onto the local demo store
DEMO_MODE = os.getenv("DEMO_MODE", "").strip().lower() in ("1", "true", "yes")

# SQLAlchemy setup (local demo storage)
engine = create_engine(
    DATABASE_URL,
    connect_args={"check_same_thread": False} if "sqlite" in DATABASE_URL else {},
    pool_pre_ping=True,
)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
Base = declarative_base()

# Supabase client setup (remote backend)
supabase: Optional[Client] = None

if SUPABASE_URL and SUPABASE_ANON_KEY:
    supabase = create_client(SUPABASE_URL, SUPABASE_ANON_KEY)


@contextmanager
def session_scope(session_factory: Optional[sessionmaker] = None):
    db = (session_factory or SessionLocal)()
    try:
        yield db
        db.commit()
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()


def is_supabase_configured() -> bool:
    """Whether the remote backend can be used"""
    return supabase is not None


def get_supabase() -> Client:
    """Get Supabase client for regular operations"""
    if not supabase:
        raise RuntimeError(
            "Supabase client not initialized. Check your environment variables."
        )
    return supabase


def init_db():
    """Initialize local database tables"""
    # Registers the models on Base.metadata
    from . import models  # noqa: F401

    Base.metadata.create_all(bind=engine)


def check_db_connection() -> dict:
    """Check database connectivity"""
    status = {"sqlalchemy": False, "supabase": False}

    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
        status["sqlalchemy"] = True
    except Exception as e:
        logger.warning(f"Local database check failed: {e}")

    try:
        if supabase:
            supabase.table("rsvp_config").select("wedding_id").limit(1).execute()
            status["supabase"] = True
    except Exception as e:
        logger.warning(f"Supabase check failed: {e}")

    return status
