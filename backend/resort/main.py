"""
Lighthouse Resort API entry point
Marketing site booking form, admin back-office, staff portal and guest portal
"""
import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.exc import SQLAlchemyError
from resort import __version__
from resort.config import settings
from resort.database import init_db
from resort.exceptions import setup_exception_handlers
from resort.routers import auth, bookings, rooms, content, staff, attendance, health

logger = logging.getLogger(__name__)


def setup_logging(level: str = "INFO"):
    """Setup logging configuration"""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifecycle"""
    setup_logging(settings.LOG_LEVEL)

    try:
        init_db()
        database_status = "connected"
    except SQLAlchemyError as e:
        # Public pages keep working from built-in demo data
        database_status = "disconnected"
        logger.warning(f"Database initialisation failed: {e}")

    logger.info("=" * 50)
    logger.info(f"{settings.APP_NAME} API v{__version__}")
    logger.info("  API:      ready")
    logger.info(f"  Database: {database_status}")
    logger.info(f"  Email:    {'demo (logged only)' if settings.DEMO_MODE else 'smtp'}")
    logger.info("=" * 50)

    yield


app = FastAPI(
    title=f"{settings.APP_NAME} API",
    description="Bookings, rooms, site content, staff and attendance for the resort",
    version=__version__,
    lifespan=lifespan
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

setup_exception_handlers(app)

app.include_router(health.router)
app.include_router(auth.admin_router)
app.include_router(auth.staff_router)
app.include_router(auth.guest_router)
app.include_router(bookings.public_router)
app.include_router(bookings.admin_router)
app.include_router(bookings.guest_router)
app.include_router(rooms.router)
app.include_router(rooms.guest_router)
app.include_router(content.testimonials_router)
app.include_router(content.gallery_router)
app.include_router(staff.router)
app.include_router(attendance.staff_router)
app.include_router(attendance.admin_router)


@app.get("/")
def root():
    return {
        "name": f"{settings.APP_NAME} API",
        "version": __version__,
    }
