"""
Tests for domain entities and exceptions.
"""

import pytest

from kv_user_service.domain.entities import User
from kv_user_service.domain.exceptions import (
    DecodingError,
    ParseError,
    StoreError,
    UserNotFoundError,
    UserServiceException,
    ValidationException,
)


class TestUser:
    """Test the User entity."""

    def test_defaults_are_unpersisted(self):
        assert User().is_persisted is False

    def test_negative_id_is_unpersisted(self):
        assert User(id=-1).is_persisted is False

    def test_positive_id_is_persisted(self):
        assert User(id=1).is_persisted is True

    def test_to_hash_stringifies(self):
        user = User(id=1, name="John", age=31, city="New York")

        assert user.to_hash() == {"id": "1", "name": "John", "age": "31", "city": "New York"}

    def test_from_hash(self):
        values = {"id": "2", "name": "Doe", "age": "22", "city": "Vancouver"}

        assert User.from_hash("user:2", values) == User(
            id=2, name="Doe", age=22, city="Vancouver"
        )

    def test_from_hash_missing_fields(self):
        with pytest.raises(DecodingError) as exc_info:
            User.from_hash("user:2", {"id": "2", "name": "Doe"})

        assert "age" in str(exc_info.value)
        assert "city" in str(exc_info.value)

    def test_from_hash_malformed_age(self):
        values = {"id": "2", "name": "Doe", "age": "twenty", "city": "Vancouver"}

        with pytest.raises(DecodingError) as exc_info:
            User.from_hash("user:2", values)

        assert exc_info.value.details["key"] == "user:2"


class TestExceptions:
    """Test custom exceptions."""

    def test_hierarchy(self):
        for exc in (
            ValidationException("id", "x", "invalid userID"),
            UserNotFoundError(1),
            StoreError("get"),
            DecodingError("user:1", "bad"),
            ParseError("user:x"),
        ):
            assert isinstance(exc, UserServiceException)

    def test_user_not_found_message(self):
        exc = UserNotFoundError(124)
        assert str(exc) == "no user found"
        assert exc.details == {"user_id": 124}

    def test_validation_message(self):
        exc = ValidationException("id", "abc", "invalid userID")
        assert exc.message == "invalid userID"
        assert exc.details["value"] == "abc"

    def test_store_error_message(self):
        exc = StoreError("hgetall", "user:1", "WRONGTYPE")
        assert "hgetall" in str(exc)
        assert "user:1" in str(exc)
        assert "WRONGTYPE" in str(exc)
