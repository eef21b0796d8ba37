"""
Health check route
"""
import logging
from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from resort.database import get_db, ping_database
from resort.models.schemas import HealthResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/health", tags=["Health"])


@router.get("", response_model=HealthResponse)
def health_check(db: Session = Depends(get_db)):
    try:
        ping_database(db)
    except SQLAlchemyError as e:
        logger.error(f"Health check failed: {e}")
        body = HealthResponse(
            status="error",
            services={"api": "running", "database": "disconnected"},
            error=str(e)
        )
        return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                            content=body.model_dump(exclude_none=True))
    return HealthResponse(status="ok", services={"api": "running", "database": "connected"})
