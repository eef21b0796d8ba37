"""
Site content API tests
Covers /api/admin/testimonials and /api/admin/gallery
"""
from unittest.mock import patch
from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError


class TestTestimonials:

    def test_list_is_public(self, client: TestClient, sample_testimonial):
        response = client.get("/api/admin/testimonials")

        assert response.status_code == 200
        data = response.json()
        assert data["testimonials"][0]["stayDate"] == "December 2025"

    def test_create(self, admin_client: TestClient):
        response = admin_client.post("/api/admin/testimonials", json={
            "name": "Mark Rivera", "role": "Barkada Trip", "rating": 4,
            "text": "Great value for money!", "stayDate": "October 2025", "order": 2
        })

        assert response.status_code == 201
        assert response.json()["success"] is True

    def test_rating_out_of_range(self, admin_client: TestClient):
        response = admin_client.post("/api/admin/testimonials", json={
            "name": "Mark", "text": "Nice", "rating": 6
        })
        assert response.status_code == 400

    def test_update(self, admin_client: TestClient, sample_testimonial):
        response = admin_client.put("/api/admin/testimonials", json={
            "id": sample_testimonial.id, "text": "Even better the second time"
        })

        assert response.status_code == 200
        assert response.json()["text"] == "Even better the second time"
        assert response.json()["name"] == "Sarah Martinez"

    def test_update_ignores_null_fields(self, admin_client: TestClient, sample_testimonial):
        response = admin_client.put("/api/admin/testimonials", json={
            "id": sample_testimonial.id, "name": None, "text": None, "rating": 4
        })

        assert response.status_code == 200
        data = response.json()
        assert data["name"] == "Sarah Martinez"
        assert data["text"] == "Amazing stay!"
        assert data["rating"] == 4

    def test_update_unknown(self, admin_client: TestClient):
        response = admin_client.put("/api/admin/testimonials", json={"id": 999, "text": "x"})
        assert response.status_code == 404

    def test_delete(self, admin_client: TestClient, sample_testimonial):
        response = admin_client.delete("/api/admin/testimonials", params={"id": sample_testimonial.id})

        assert response.status_code == 200
        assert admin_client.get("/api/admin/testimonials").json()["testimonials"] == []

    def test_delete_without_id(self, admin_client: TestClient):
        assert admin_client.delete("/api/admin/testimonials").status_code == 400

    def test_create_requires_admin(self, client: TestClient):
        response = client.post("/api/admin/testimonials", json={"name": "x", "text": "y"})
        assert response.status_code == 401

    def test_demo_testimonials_when_database_unavailable(self, client: TestClient):
        with patch("resort.routers.content.TestimonialService.list",
                   side_effect=OperationalError("SELECT", {}, Exception("down"))):
            data = client.get("/api/admin/testimonials").json()

        assert data["connected"] is False
        assert len(data["testimonials"]) == 6


class TestGallery:

    def test_list_ordered(self, admin_client: TestClient):
        admin_client.post("/api/admin/gallery", json={"url": "/b.jpg", "title": "B", "order": 2})
        admin_client.post("/api/admin/gallery", json={"url": "/a.jpg", "title": "A", "order": 1})

        response = admin_client.get("/api/admin/gallery")

        assert response.status_code == 200
        assert [g["title"] for g in response.json()["gallery"]] == ["A", "B"]

    def test_create_defaults(self, admin_client: TestClient):
        response = admin_client.post("/api/admin/gallery", json={"url": "/images/piel2.jpg"})

        assert response.status_code == 201
        image = admin_client.get("/api/admin/gallery").json()["gallery"][0]
        assert image["colSpan"] == "col-span-1"

    def test_create_without_url(self, admin_client: TestClient):
        assert admin_client.post("/api/admin/gallery", json={"title": "No url"}).status_code == 400

    def test_update(self, admin_client: TestClient, sample_image):
        response = admin_client.put("/api/admin/gallery", json={
            "id": sample_image.id, "category": "Beach"
        })

        assert response.status_code == 200
        assert response.json()["category"] == "Beach"

    def test_update_keeps_url_on_null(self, admin_client: TestClient, sample_image):
        response = admin_client.put("/api/admin/gallery", json={"id": sample_image.id, "url": None})

        assert response.status_code == 200
        assert response.json()["url"] == "/images/piel1.jpg"

    def test_delete_unknown(self, admin_client: TestClient):
        assert admin_client.delete("/api/admin/gallery", params={"id": 999}).status_code == 404

    def test_demo_gallery_when_database_unavailable(self, client: TestClient):
        with patch("resort.routers.content.GalleryService.list",
                   side_effect=OperationalError("SELECT", {}, Exception("down"))):
            data = client.get("/api/admin/gallery").json()

        assert data["connected"] is False
        assert data["gallery"]
