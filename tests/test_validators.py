"""
Unit tests for input validators
"""

import pytest

from kv_user_service.domain.exceptions import ValidationException
from kv_user_service.validators import parse_user_id


class TestParseUserID:
    """Test query-string id parsing"""

    @pytest.mark.parametrize("raw,expected", [("1", 1), ("124", 124), ("+3", 3), ("-2", -2)])
    def test_valid_ids(self, raw, expected):
        assert parse_user_id(raw) == expected

    @pytest.mark.parametrize(
        "raw", ["", "abc", "1.5", "12a", "sadfasf", " 5", "5 ", "\t5\n", "\u0665", "+", "--1"]
    )
    def test_invalid_ids(self, raw):
        with pytest.raises(ValidationException) as exc_info:
            parse_user_id(raw)
        assert exc_info.value.message == "invalid userID"
