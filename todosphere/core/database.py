from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, declarative_base
from todosphere.core.config import settings


def _create_engine(url: str):
    # SQLite refuse par défaut le partage de connexion entre threads
    if url.startswith("sqlite"):
        return create_engine(url, echo=False, connect_args={"check_same_thread": False})
    return create_engine(url, echo=False, pool_pre_ping=True)


engine = _create_engine(settings.DATABASE_URL)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
Base = declarative_base()


def get_db():
    """Dépendance sessionDB"""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
