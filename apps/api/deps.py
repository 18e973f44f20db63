"""FastAPI dependencies shared by the routers."""

from typing import Generator

from fastapi import Depends
from sqlalchemy.orm import Session

from core.config import settings
from db.session import get_session
from services import ServiceContainer, build_services


def get_db() -> Generator[Session, None, None]:
    """One session, and therefore one transaction, per request."""
    yield from get_session()


def get_services(db: Session = Depends(get_db)) -> ServiceContainer:
    """Services bound to the request's session."""
    return build_services(db, settings)
