"""Health check routes"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
import logging

from app.config import settings
from domain.models import get_db_session
from repositories import MenuItemRepository
from api.responses import HealthResponse

router = APIRouter(tags=["Health"])
logger = logging.getLogger("quickbite.api.health")


@router.get("/health-check", response_model=HealthResponse)
def health_check(db: Session = Depends(get_db_session)):
    """Basic health check endpoint, including the catalog size"""
    count = MenuItemRepository(db).count()
    return HealthResponse(
        status="ok",
        service=settings.app_name,
        version=settings.app_version,
        menu_items=count,
    )
