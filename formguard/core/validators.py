"""
Field validators (pure)
-----------------------
Each validator maps a raw field value to a ValidationResult. Conditions are
checked in a fixed order and the first failing one wins, so exactly one message
is ever produced. Empty input is a normal case and yields the "required" error.
Nothing here raises or keeps state.
"""

from __future__ import annotations

import re

from formguard.core import messages as msg
from formguard.store.models import FieldKey, MessageType, ValidationResult

# Lengths count code points, so an emoji is one character
NAME_MIN_LENGTH = 3
PASSWORD_MIN_LENGTH = 8

_NAME_RE = re.compile(r"[a-zA-Z\s]+")
_EMAIL_RE = re.compile(r"[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}")

_UPPER_RE = re.compile(r"[A-Z]")
_LOWER_RE = re.compile(r"[a-z]")
_DIGIT_RE = re.compile(r"[0-9]")
_SPECIAL_RE = re.compile(r"""[!@#$%^&*()_+\-=\[\]{};':"\\|,.<>/?]""")


def _error(message: str) -> ValidationResult:
    return ValidationResult(isValid=False, message=message, messageType=MessageType.ERROR)


def _success(message: str) -> ValidationResult:
    return ValidationResult(isValid=True, message=message, messageType=MessageType.SUCCESS)


def password_checks(value: str) -> dict:
    """Individual password rules, shared with the strength scorer."""
    return {
        "length": len(value) >= PASSWORD_MIN_LENGTH,
        "uppercase": bool(_UPPER_RE.search(value)),
        "lowercase": bool(_LOWER_RE.search(value)),
        "number": bool(_DIGIT_RE.search(value)),
        "special": bool(_SPECIAL_RE.search(value)),
    }


def validate_name(value: str) -> ValidationResult:
    v = (value or "").strip()
    if not v:
        return _error(msg.NAME_REQUIRED)
    if len(v) < NAME_MIN_LENGTH:
        return _error(msg.NAME_TOO_SHORT)
    if not _NAME_RE.fullmatch(v):
        return _error(msg.NAME_NO_NUMBERS)
    return _success(msg.NAME_VALID)


def validate_email(value: str) -> ValidationResult:
    v = (value or "").strip()
    if not v:
        return _error(msg.EMAIL_REQUIRED)
    if not _EMAIL_RE.fullmatch(v):
        return _error(msg.EMAIL_INVALID)
    return _success(msg.EMAIL_VALID)


def validate_password(value: str) -> ValidationResult:
    """
    All five rules must hold. The failing rule is deliberately not named:
    the strength meter carries the finer-grained signal.
    """
    v = value or ""
    if not v:
        return _error(msg.PASSWORD_REQUIRED)
    if not all(password_checks(v).values()):
        return _error(msg.PASSWORD_WEAK)
    return _success(msg.PASSWORD_VALID)


def validate_confirm_password(value: str, password_value: str) -> ValidationResult:
    v = value or ""
    if not v:
        return _error(msg.CONFIRM_REQUIRED)
    if v != (password_value or ""):
        return _error(msg.CONFIRM_NO_MATCH)
    return _success(msg.CONFIRM_VALID)


def validate_field(key: FieldKey, value: str, password_value: str = "") -> ValidationResult:
    """Dispatch to the validator for `key`. `password_value` only matters for confirmPassword."""
    key = FieldKey(key)
    if key is FieldKey.FULL_NAME:
        return validate_name(value)
    if key is FieldKey.EMAIL:
        return validate_email(value)
    if key is FieldKey.PASSWORD:
        return validate_password(value)
    return validate_confirm_password(value, password_value)
