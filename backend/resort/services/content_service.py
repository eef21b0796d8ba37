"""
Site content service
Testimonials and gallery images: ordered lists edited from the back-office
"""
import logging
from typing import Generic, List, Optional, Type, TypeVar
from pydantic import BaseModel
from sqlalchemy.orm import Session
from resort.exceptions import NotFoundError
from resort.models.entities import Testimonial, GalleryImage, utcnow

logger = logging.getLogger(__name__)

ContentT = TypeVar("ContentT", Testimonial, GalleryImage)


class OrderedContentService(Generic[ContentT]):
    """CRUD over a content table sorted by its `order` column"""

    model: Type[ContentT]
    label: str

    def __init__(self, db: Session):
        self.db = db

    def list(self) -> List[ContentT]:
        return self.db.query(self.model).order_by(self.model.order.asc(), self.model.id.asc()).all()

    def get(self, item_id: int) -> Optional[ContentT]:
        return self.db.query(self.model).filter(self.model.id == item_id).first()

    def create(self, data: BaseModel) -> ContentT:
        item = self.model(**data.model_dump())
        self.db.add(item)
        self.db.commit()
        self.db.refresh(item)
        logger.info(f"{self.label} created: {item.id}")
        return item

    def update(self, data: BaseModel) -> ContentT:
        item = self.get(data.id)
        if not item:
            raise NotFoundError(f"{self.label} not found")

        for key, value in data.model_dump(exclude_unset=True, exclude={"id"}).items():
            if value is not None:
                setattr(item, key, value)
        item.updated_at = utcnow()
        self.db.commit()
        self.db.refresh(item)
        return item

    def delete(self, item_id: int) -> None:
        item = self.get(item_id)
        if not item:
            raise NotFoundError(f"{self.label} not found")
        self.db.delete(item)
        self.db.commit()
        logger.info(f"{self.label} deleted: {item_id}")


class TestimonialService(OrderedContentService[Testimonial]):
    model = Testimonial
    label = "Testimonial"


class GalleryService(OrderedContentService[GalleryImage]):
    model = GalleryImage
    label = "Image"
