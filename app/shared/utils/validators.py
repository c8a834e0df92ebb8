# 📄 File: app/shared/utils/validators.py

# 🧭 Purpose (Layman Explanation):
# Small checkers that make sure what people type makes sense: a real-looking email,
# a long-enough password, a Portuguese mobile number, a picture that is really a picture.

# 🧪 Purpose (Technical Summary):
# Reusable validation functions returning ValidationResult objects, used by domain services
# and request schemas. Email syntax is checked with email-validator (no DNS lookups).

# 🔗 Dependencies:
# - email-validator: email syntax validation
# - re, pathlib: pattern and filename checks

# 🔄 Connected Modules / Calls From:
# Used by: user_management services and schemas, shared image storage

import re
from pathlib import Path
from typing import Iterable, List, Optional

from email_validator import EmailNotValidError, validate_email

PASSWORD_MIN_LENGTH = 6
USERNAME_MAX_LENGTH = 64
LOCATION_MAX_LENGTH = 64

# Portuguese mobile numbers: 9 digits starting with 91, 92, 93 or 96
CONTACT_PATTERN = re.compile(r'^9[1236]\d{7}$')

DEFAULT_IMAGE_EXTENSIONS = ('.jpg', '.jpeg', '.png', '.gif', '.bmp')


class ValidationResult:
    """Result object for validation operations"""

    def __init__(self, is_valid: bool = True, errors: Optional[List[str]] = None):
        self.is_valid = is_valid
        self.errors = errors or []

    def add_error(self, error: str):
        """Add validation error"""
        self.errors.append(error)
        self.is_valid = False

    @property
    def first_error(self) -> Optional[str]:
        return self.errors[0] if self.errors else None


# ==============================================================================
# EMAIL AND CONTACT VALIDATION
# ==============================================================================

def normalize_email(email: str) -> str:
    return email.strip().lower()


def validate_email_address(email: str) -> ValidationResult:
    """
    Validate email address format.

    Args:
        email: Email address to validate

    Returns:
        ValidationResult with validation status and errors
    """
    result = ValidationResult(True)

    if not email or not isinstance(email, str):
        result.add_error("Email address is required")
        return result

    email = normalize_email(email)
    if len(email) > 254:
        result.add_error("Email address is too long (max 254 characters)")

    try:
        validate_email(email, check_deliverability=False)
    except EmailNotValidError as e:
        result.add_error(f"Invalid email format: {str(e)}")

    return result


def validate_contact(contact: str) -> ValidationResult:
    """Validate a Portuguese mobile phone number (e.g. 912345678)."""
    result = ValidationResult(True)
    if not contact or not contact.strip():
        result.add_error("Contact is required")
    elif not CONTACT_PATTERN.match(contact.strip()):
        result.add_error("Contact must be a valid mobile number (9 digits starting with 91, 92, 93 or 96)")
    return result


# ==============================================================================
# PASSWORD AND TEXT VALIDATION
# ==============================================================================

def validate_password(password: str) -> ValidationResult:
    result = ValidationResult(True)
    if not password or len(password) < PASSWORD_MIN_LENGTH:
        result.add_error(f"Password must be at least {PASSWORD_MIN_LENGTH} characters long")
    return result


def validate_text_content(content: Optional[str], field: str, min_length: int = 1,
                          max_length: int = 5000) -> ValidationResult:
    """
    Validate a free-text field after trimming whitespace.

    Args:
        content: Text to validate
        field: Field name used in the error message
        min_length: Minimum length once stripped
        max_length: Maximum length once stripped

    Returns:
        ValidationResult with validation status and errors
    """
    result = ValidationResult(True)
    text = (content or '').strip()
    if len(text) < min_length:
        result.add_error(f"{field} cannot be empty" if min_length == 1 else
                         f"{field} must be at least {min_length} characters")
    elif len(text) > max_length:
        result.add_error(f"{field} must be at most {max_length} characters")
    return result


# ==============================================================================
# FILE VALIDATION
# ==============================================================================

def validate_image_file(filename: Optional[str], file_size: int, content_type: Optional[str],
                        allowed_extensions: Iterable[str] = DEFAULT_IMAGE_EXTENSIONS,
                        max_size: Optional[int] = None) -> ValidationResult:
    """
    Validate an uploaded image by extension, declared content type and size.
    """
    result = ValidationResult(True)

    if not filename:
        result.add_error("File name is required")
        return result

    extension = Path(filename).suffix.lower()
    if extension not in {ext.lower() for ext in allowed_extensions}:
        result.add_error(f"Invalid file extension: {extension or '(none)'}")

    if not content_type or not content_type.lower().startswith('image/'):
        result.add_error("The uploaded file is not an image")

    if file_size <= 0:
        result.add_error("The uploaded file is empty")
    elif max_size is not None and file_size > max_size:
        result.add_error(f"File exceeds the maximum size of {max_size // (1024 * 1024)}MB")

    return result
