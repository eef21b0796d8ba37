"""
Site content routes
Testimonials and gallery images shown on the marketing site
"""
import logging
from typing import Optional
from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from resort.database import get_db
from resort.exceptions import ResortError
from resort.models.schemas import (
    TestimonialCreate, TestimonialUpdate, TestimonialResponse, TestimonialListResponse,
    GalleryImageCreate, GalleryImageUpdate, GalleryImageResponse, GalleryListResponse,
    MutationResponse
)
from resort.security.auth import require_admin
from resort.services.content_service import TestimonialService, GalleryService
from resort.services.demo_data import DEMO_TESTIMONIALS, DEMO_GALLERY

logger = logging.getLogger(__name__)

testimonials_router = APIRouter(prefix="/api/admin/testimonials", tags=["Testimonials"])
gallery_router = APIRouter(prefix="/api/admin/gallery", tags=["Gallery"])


def _delete(service, item_id: Optional[int], label: str) -> MutationResponse:
    if item_id is None:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=f"{label} ID is required")
    try:
        service.delete(item_id)
    except ResortError as e:
        raise HTTPException(status_code=e.status_code, detail=str(e))
    return MutationResponse(message=f"{label} deleted successfully", id=item_id)


# ============== Testimonials ==============

@testimonials_router.get("", response_model=TestimonialListResponse)
def list_testimonials(db: Session = Depends(get_db)):
    try:
        testimonials = TestimonialService(db).list()
    except SQLAlchemyError as e:
        logger.warning(f"Database not available, serving demo testimonials: {e}")
        return TestimonialListResponse(testimonials=DEMO_TESTIMONIALS, connected=False)
    return TestimonialListResponse(testimonials=testimonials)


@testimonials_router.post("", response_model=MutationResponse, status_code=status.HTTP_201_CREATED)
def create_testimonial(
    data: TestimonialCreate,
    db: Session = Depends(get_db),
    admin=Depends(require_admin)
):
    item = TestimonialService(db).create(data)
    return MutationResponse(message="Testimonial created successfully", id=item.id)


@testimonials_router.put("", response_model=TestimonialResponse)
def update_testimonial(
    data: TestimonialUpdate,
    db: Session = Depends(get_db),
    admin=Depends(require_admin)
):
    try:
        return TestimonialService(db).update(data)
    except ResortError as e:
        raise HTTPException(status_code=e.status_code, detail=str(e))


@testimonials_router.delete("", response_model=MutationResponse)
def delete_testimonial(
    item_id: Optional[int] = Query(None, alias="id"),
    db: Session = Depends(get_db),
    admin=Depends(require_admin)
):
    return _delete(TestimonialService(db), item_id, "Testimonial")


# ============== Gallery ==============

@gallery_router.get("", response_model=GalleryListResponse)
def list_gallery(db: Session = Depends(get_db)):
    try:
        images = GalleryService(db).list()
    except SQLAlchemyError as e:
        logger.warning(f"Database not available, serving demo gallery: {e}")
        return GalleryListResponse(gallery=DEMO_GALLERY, connected=False)
    return GalleryListResponse(gallery=images)


@gallery_router.post("", response_model=MutationResponse, status_code=status.HTTP_201_CREATED)
def create_gallery_image(
    data: GalleryImageCreate,
    db: Session = Depends(get_db),
    admin=Depends(require_admin)
):
    item = GalleryService(db).create(data)
    return MutationResponse(message="Image added successfully", id=item.id)


@gallery_router.put("", response_model=GalleryImageResponse)
def update_gallery_image(
    data: GalleryImageUpdate,
    db: Session = Depends(get_db),
    admin=Depends(require_admin)
):
    try:
        return GalleryService(db).update(data)
    except ResortError as e:
        raise HTTPException(status_code=e.status_code, detail=str(e))


@gallery_router.delete("", response_model=MutationResponse)
def delete_gallery_image(
    item_id: Optional[int] = Query(None, alias="id"),
    db: Session = Depends(get_db),
    admin=Depends(require_admin)
):
    return _delete(GalleryService(db), item_id, "Image")
