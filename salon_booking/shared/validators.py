"""Shared validation utilities"""

import base64
import binascii
import re
from typing import Optional

# Inline images uploaded from the admin form are capped at 2 MB
MAX_INLINE_IMAGE_BYTES = 2 * 1024 * 1024

PLACEHOLDER_IMAGE_URL = "https://via.placeholder.com/400x300?text=Sem+Imagem"

_DATA_URL_PATTERN = re.compile(r"^data:image/[a-zA-Z0-9.+-]+;base64,(?P<payload>.*)$", re.DOTALL)


def validate_email(email: Optional[str]) -> Optional[str]:
    """
    Validate email format.

    Args:
        email: Email address string

    Returns:
        Lowercase email address

    Raises:
        ValueError: If email format is invalid
    """
    if not email:
        return email

    email = email.strip().lower()

    # Basic email validation pattern
    email_pattern = r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$"

    if not re.match(email_pattern, email):
        raise ValueError("Invalid email format")

    return email


def validate_phone(phone: Optional[str]) -> Optional[str]:
    """
    Validate a phone number and strip formatting characters.

    Accepts 8 to 15 digits with an optional leading "+".

    Raises:
        ValueError: If phone number is invalid
    """
    if not phone:
        return phone

    cleaned = re.sub(r"[\s\-\(\)\.]+", "", phone.strip())

    if not re.match(r"^\+?\d{8,15}$", cleaned):
        raise ValueError("Phone number must contain 8 to 15 digits")

    return cleaned


def validate_image_url(image_url: Optional[str]) -> str:
    """
    Validate a service image reference.

    Blank values become the placeholder image. Inline data URLs are decoded to
    enforce the size cap.

    Raises:
        ValueError: If the URL scheme is unsupported or the inline image is too large
    """
    if not image_url or not image_url.strip():
        return PLACEHOLDER_IMAGE_URL

    image_url = image_url.strip()

    if image_url.startswith(("http://", "https://")):
        return image_url

    match = _DATA_URL_PATTERN.match(image_url)
    if not match:
        raise ValueError("Image must be an http(s) URL or a base64 data:image URL")

    try:
        decoded = base64.b64decode(match.group("payload"), validate=True)
    except (binascii.Error, ValueError) as e:
        raise ValueError("Image data is not valid base64") from e

    if len(decoded) > MAX_INLINE_IMAGE_BYTES:
        raise ValueError("Image is too large. Please choose an image smaller than 2MB")

    return image_url
