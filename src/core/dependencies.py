"""
Dependency injection per FastAPI seguendo DIP
"""
from typing import Annotated
from fastapi import Depends
from sqlalchemy.orm import Session
from src.database import get_db
from src.core.settings import AppSettings, get_app_settings

# Type aliases per le dipendenze
db_dependency = Annotated[Session, Depends(get_db)]
settings_dependency = Annotated[AppSettings, Depends(get_app_settings)]
