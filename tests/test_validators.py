"""Tests for shared validators"""

import pytest

from salon_booking.shared.validators import (
    PLACEHOLDER_IMAGE_URL,
    validate_email,
    validate_image_url,
    validate_phone,
)


class TestValidators:
    def test_email_is_lowercased(self):
        assert validate_email("  Ana@Example.COM ") == "ana@example.com"

    @pytest.mark.parametrize("email", ["ana", "ana@", "@example.com", "ana@example"])
    def test_invalid_email(self, email):
        with pytest.raises(ValueError):
            validate_email(email)

    def test_phone_formatting_is_stripped(self):
        assert validate_phone("+55 (11) 98765-4321") == "+5511987654321"

    def test_short_phone_is_rejected(self):
        with pytest.raises(ValueError):
            validate_phone("1234")

    @pytest.mark.parametrize("value", [None, "", "   "])
    def test_blank_image_becomes_placeholder(self, value):
        assert validate_image_url(value) == PLACEHOLDER_IMAGE_URL

    def test_broken_base64_is_rejected(self):
        with pytest.raises(ValueError):
            validate_image_url("data:image/png;base64,@@@not-base64@@@")
