"""Tests for CatalogService and the catalog schemas"""

import base64

import pytest
from pydantic import ValidationError as PydanticValidationError

from salon_booking.domain.catalog.schemas import ServiceCreate, ServiceUpdate
from salon_booking.domain.catalog.service import CatalogService
from salon_booking.errors import NotFoundError
from salon_booking.shared.validators import MAX_INLINE_IMAGE_BYTES, PLACEHOLDER_IMAGE_URL
from salon_booking.store import SERVICES


def data_url(size: int) -> str:
    return "data:image/png;base64," + base64.b64encode(b"\x00" * size).decode()


@pytest.fixture
def catalog_service(catalog):
    return CatalogService(catalog)


class TestCreateService:
    def test_create_assigns_new_id(self, catalog_service):
        created = catalog_service.create_service(
            ServiceCreate(name="Hidratação", price=35, durationMinutes=20, imageUrl="https://img.example/h.png")
        )

        assert created.id not in {"1", "2", "3", "4"}
        assert catalog_service.get_service(created.id) == created
        assert len(catalog_service.get_services()) == 5

    def test_missing_image_uses_placeholder(self, catalog_service):
        created = catalog_service.create_service(ServiceCreate(name="Sobrancelha", price=15, durationMinutes=10))

        assert created.imageUrl == PLACEHOLDER_IMAGE_URL

    def test_text_fields_are_escaped(self, catalog_service):
        created = catalog_service.create_service(
            ServiceCreate(name="  <b>Corte</b> ", price=10, durationMinutes=10, description="a & b")
        )

        assert created.name == "&lt;b&gt;Corte&lt;/b&gt;"
        assert created.description == "a &amp; b"

    def test_small_inline_image_is_accepted(self):
        url = data_url(1024)

        assert ServiceCreate(name="x", price=1, durationMinutes=5, imageUrl=url).imageUrl == url

    def test_inline_image_over_2mb_is_rejected(self):
        with pytest.raises(PydanticValidationError):
            ServiceCreate(name="x", price=1, durationMinutes=5, imageUrl=data_url(MAX_INLINE_IMAGE_BYTES + 1))

    def test_unsupported_image_scheme_is_rejected(self):
        with pytest.raises(PydanticValidationError):
            ServiceCreate(name="x", price=1, durationMinutes=5, imageUrl="ftp://example.com/a.png")

    @pytest.mark.parametrize("field,value", [("price", -1), ("durationMinutes", 0), ("name", "")])
    def test_invalid_fields_are_rejected(self, field, value):
        payload = {"name": "x", "price": 1, "durationMinutes": 5, field: value}

        with pytest.raises(PydanticValidationError):
            ServiceCreate(**payload)


class TestUpdateService:
    def test_partial_update_keeps_other_fields(self, catalog_service):
        updated = catalog_service.update_service("1", ServiceUpdate(price=55))

        assert updated.price == 55
        assert updated.name == "Corte Clássico"
        assert updated.durationMinutes == 30
        assert catalog_service.get_service("1").price == 55

    def test_explicit_null_clears_description(self, catalog_service):
        updated = catalog_service.update_service("2", ServiceUpdate(description=None))

        assert updated.description is None

    def test_null_required_field_is_ignored(self, catalog_service):
        updated = catalog_service.update_service("2", ServiceUpdate(name=None, price=45))

        assert updated.name == "Barba Terapia"
        assert updated.price == 45

    def test_id_cannot_change(self, catalog_service):
        updated = catalog_service.update_service("3", ServiceUpdate(name="Combo"))

        assert updated.id == "3"

    def test_unknown_service_raises_not_found(self, catalog_service):
        with pytest.raises(NotFoundError):
            catalog_service.update_service("missing", ServiceUpdate(price=1))

    def test_get_unknown_service_raises_not_found(self, catalog_service):
        with pytest.raises(NotFoundError) as exc_info:
            catalog_service.get_service("missing")

        assert exc_info.value.message == "service not found"


class TestDeleteService:
    def test_delete_service(self, catalog_service):
        catalog_service.delete_service("4")

        assert [s.id for s in catalog_service.get_services()] == ["1", "2", "3"]

    def test_delete_unknown_service_is_a_no_op(self, catalog_service):
        result = catalog_service.delete_service("missing")

        assert result == {"message": "Service deleted"}
        assert len(catalog_service.get_services()) == 4

    def test_delete_all_reports_count(self, catalog_service, catalog):
        result = catalog_service.delete_all_services()

        assert result["deletedCount"] == 4
        assert catalog.list(SERVICES) == []

    def test_delete_all_on_empty_catalog(self, store):
        assert CatalogService(store).delete_all_services()["deletedCount"] == 0
