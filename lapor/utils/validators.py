"""
Input validation for complaint submissions
Pure functions, called before anything is written
"""

import os
import re

from lapor.errors import (
    InvalidAttachment,
    InvalidIdNumber,
    InvalidPhone,
    MissingField,
)

ID_NUMBER_PATTERN = re.compile(r'[0-9]{16}')
PHONE_PATTERN = re.compile(r'[0-9]+')
PHONE_SEPARATORS = re.compile(r'[\s-]+')

DEFAULT_MAX_ATTACHMENT_BYTES = 5 * 1024 * 1024

# Checked in this order; the first missing one is reported
REQUIRED_SUBMISSION_FIELDS = ('name', 'description', 'id_number', 'location')


def _is_blank(value):
    return value is None or (isinstance(value, str) and not value.strip())


def validate_id_number(value):
    """Accept exactly 16 ASCII digits"""
    if not isinstance(value, str) or not ID_NUMBER_PATTERN.fullmatch(value):
        raise InvalidIdNumber()
    return value


def validate_phone(value, allow_separators=False):
    """
    Validate an optional phone number

    Returns the normalized number, or None when no number was given.
    With allow_separators, spaces and hyphens are accepted and stripped.
    """
    if _is_blank(value):
        return None

    phone = str(value).strip()
    if allow_separators:
        phone = PHONE_SEPARATORS.sub('', phone)

    if not PHONE_PATTERN.fullmatch(phone):
        raise InvalidPhone()
    return phone


def validate_required(fields, required=REQUIRED_SUBMISSION_FIELDS):
    """Raise MissingField for the first required field that is empty or absent"""
    for name in required:
        if _is_blank(fields.get(name)):
            raise MissingField(name)


def attachment_size(file):
    """Size in bytes of an uploaded file, leaving the stream at its start"""
    stream = file.stream
    stream.seek(0, os.SEEK_END)
    size = stream.tell()
    stream.seek(0)
    return size


def validate_image(file, max_bytes=DEFAULT_MAX_ATTACHMENT_BYTES):
    """Accept image/* uploads no larger than max_bytes"""
    mimetype = (file.mimetype or '').lower()
    if not mimetype.startswith('image/'):
        raise InvalidAttachment('Only image files are allowed')

    if attachment_size(file) > max_bytes:
        raise InvalidAttachment(
            f'Image must not exceed {max_bytes // (1024 * 1024)} MB'
        )
    return file
