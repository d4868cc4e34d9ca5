"""
Tests for LinkService orchestration.
"""
import pytest
from sqlalchemy import func, select

from shortlink_app.exceptions import DuplicateCode, StorageError, ValidationError
from shortlink_app.models.link import Link
from shortlink_app.services.link_service import LinkService
from shortlink_app.services.short_code_strategies import ShortCodeStrategy


class FixedCodeStrategy(ShortCodeStrategy):
    """Always hands out the same code without checking the store,
    like the unchecked 8-character fallback"""

    def __init__(self, code):
        self.code = code

    def generate(self, store):
        return self.code


class TestCreateLink:

    def test_generated_code_collision_is_duplicate(self, store, db_session):
        store.create("Taken123", "https://first.example")
        service = LinkService(store, code_strategy=FixedCodeStrategy("Taken123"))

        with pytest.raises(DuplicateCode):
            service.create_link("https://second.example")

        count = db_session.execute(
            select(func.count(Link.id)).where(Link.code == "Taken123")
        ).scalar_one()
        assert count == 1
        assert store.get("Taken123").url == "https://first.example"

    def test_service_recovers_after_collision(self, store):
        store.create("Taken123", "https://first.example")
        with pytest.raises(DuplicateCode):
            LinkService(store, FixedCodeStrategy("Taken123")).create_link("second.example")

        link = LinkService(store, FixedCodeStrategy("Fresh123")).create_link("second.example")
        assert link.code == "Fresh123"
        assert link.url == "https://second.example"

    def test_custom_code_precheck(self, store):
        service = LinkService(store)
        service.create_link("https://first.example", code="custom1")

        with pytest.raises(DuplicateCode):
            service.create_link("https://second.example", code="custom1")

    def test_validation_happens_before_storage(self, store):
        class ExplodingStrategy(ShortCodeStrategy):
            def generate(self, store):
                raise AssertionError("generator must not run for invalid input")

        service = LinkService(store, code_strategy=ExplodingStrategy())

        with pytest.raises(ValidationError):
            service.create_link("https://")
        with pytest.raises(ValidationError):
            service.create_link("https://example.com", code="bad_code")
        assert store.list() == []


class TestErrorMessages:

    def test_default_messages(self):
        assert DuplicateCode().message == "Code already exists"
        assert ValidationError().message == "Invalid request"

    def test_storage_error_hides_detail(self):
        error = StorageError()
        assert error.message == "Internal server error"
        assert error.detail is None
        assert StorageError("list: boom").detail == "list: boom"
