from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, declarative_base
from dotenv import load_dotenv

from src.core.settings import get_app_settings

load_dotenv()
SQLALCHEMY_DATABASE_URL = get_app_settings().database_url

connect_args = {"check_same_thread": False} if SQLALCHEMY_DATABASE_URL.startswith("sqlite") else {}

engine = create_engine(SQLALCHEMY_DATABASE_URL, connect_args=connect_args)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# Base per le tabelle del DB
Base = declarative_base()


def get_db():
    """
        Generatore di sessione database.

        Crea una sessione database e la chiude automaticamente una volta completate le operazioni.
        Usato come dipendenza FastAPI per gestire la sessione al database.

        Yields:
            SessionLocal: Una sessione di SQLAlchemy aperta.
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
