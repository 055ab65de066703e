import pytest
from formguard.core import messages as msg
from formguard.core.validators import (
    validate_confirm_password,
    validate_email,
    validate_field,
    validate_name,
    validate_password,
)
from formguard.store.models import FieldKey, MessageType


@pytest.mark.parametrize("fn, required", [
    (validate_name, msg.NAME_REQUIRED),
    (validate_email, msg.EMAIL_REQUIRED),
    (validate_password, msg.PASSWORD_REQUIRED),
    (lambda v: validate_confirm_password(v, "Secret1!"), msg.CONFIRM_REQUIRED),
])
def test_empty_value_is_required_error(fn, required):
    res = fn("")
    assert res.isValid is False
    assert res.message == required
    assert res.messageType is MessageType.ERROR


def test_name_rules_in_order():
    assert validate_name("Jo").message == msg.NAME_TOO_SHORT
    assert validate_name("John3").message == msg.NAME_NO_NUMBERS
    ok = validate_name("John Doe")
    assert ok.isValid is True
    assert ok.message == msg.NAME_VALID
    assert ok.messageType is MessageType.SUCCESS


def test_name_is_trimmed_before_checks():
    # whitespace-only counts as empty; padding does not count towards length
    assert validate_name("    ").message == msg.NAME_REQUIRED
    assert validate_name("  Jo  ").message == msg.NAME_TOO_SHORT
    assert validate_name("  Ann  ").isValid is True


def test_name_short_with_digit_reports_length_first():
    assert validate_name("J1").message == msg.NAME_TOO_SHORT


def test_email_shapes():
    assert validate_email("a@b").isValid is False
    assert validate_email("a@b").message == msg.EMAIL_INVALID
    assert validate_email("a@b.co").isValid is True
    assert validate_email("  first.last+tag@mail.example.org ").isValid is True
    assert validate_email("a@b.c").isValid is False
    assert validate_email("no-at-sign.com").isValid is False
    assert validate_email("a@b.co\n").isValid is True  # trimmed
    assert validate_email("a b@c.co").isValid is False


def test_password_rules():
    assert validate_password("short1!").message == msg.PASSWORD_WEAK
    assert validate_password("LongEnough1").message == msg.PASSWORD_WEAK
    assert validate_password("longenough1!").message == msg.PASSWORD_WEAK
    assert validate_password("LONGENOUGH1!").message == msg.PASSWORD_WEAK
    assert validate_password("LongEnough!").message == msg.PASSWORD_WEAK
    ok = validate_password("LongEnough1!")
    assert ok.isValid is True
    assert ok.message == msg.PASSWORD_VALID


@pytest.mark.parametrize("special", list("!@#$%^&*()_+-=[]{};':\"\\|,.<>/?"))
def test_password_accepts_each_special_character(special):
    assert validate_password(f"Abcdefg1{special}").isValid is True


def test_password_rejects_characters_outside_special_set():
    assert validate_password("Abcdefg1~").isValid is False
    assert validate_password("Abcdefg1 ").isValid is False


def test_confirm_password_exact_match():
    res = validate_confirm_password("x", "y")
    assert res.isValid is False
    assert res.message == msg.CONFIRM_NO_MATCH
    assert validate_confirm_password("x", "x").isValid is True
    assert validate_confirm_password("Secret1!", "Secret1! ").isValid is False


def test_validators_are_idempotent():
    for value in ("", "Jo", "John Doe", "a@b.co", "LongEnough1!"):
        assert validate_name(value) == validate_name(value)
        assert validate_email(value) == validate_email(value)
        assert validate_password(value) == validate_password(value)
        assert validate_confirm_password(value, "x") == validate_confirm_password(value, "x")


def test_validate_field_dispatch():
    assert validate_field(FieldKey.FULL_NAME, "John Doe").message == msg.NAME_VALID
    assert validate_field("email", "a@b.co").message == msg.EMAIL_VALID
    assert validate_field(FieldKey.PASSWORD, "LongEnough1!").message == msg.PASSWORD_VALID
    assert validate_field(FieldKey.CONFIRM_PASSWORD, "abc", "abc").message == msg.CONFIRM_VALID
    assert validate_field(FieldKey.CONFIRM_PASSWORD, "abc").message == msg.CONFIRM_NO_MATCH


def test_validate_field_unknown_key_raises():
    with pytest.raises(ValueError):
        validate_field("username", "x")


def test_result_to_dict():
    assert validate_email("a@b").to_dict() == {
        "isValid": False,
        "message": msg.EMAIL_INVALID,
        "messageType": "error",
    }


def test_lengths_count_code_points():
    assert validate_password("Aa1!\U0001F600\U0001F600").message == msg.PASSWORD_WEAK
    assert validate_password("Aa1!\U0001F600\U0001F600xy").isValid is True
