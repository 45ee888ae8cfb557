"""Tests for domain exceptions (error_code, message, details)."""

from fieldcodec.domain.exceptions import (
    FieldValueException,
    StoreNotConfiguredException,
    TopLevelOnlyFieldException,
    UnsupportedFieldTransformException,
)


def test_field_value_exception_default_error_code() -> None:
    """Base FieldValueException uses class name as error_code when not provided."""
    exc = FieldValueException("Something failed")
    assert exc.message == "Something failed"
    assert exc.error_code == "FieldValueException"
    assert exc.details == {}
    assert str(exc) == "Something failed"


def test_field_value_exception_custom_error_code_and_details() -> None:
    exc = FieldValueException("Oops", error_code="CUSTOM", details={"key": "value"})
    assert exc.error_code == "CUSTOM"
    assert exc.details == {"key": "value"}


def test_top_level_only_field_exception() -> None:
    exc = TopLevelOnlyFieldException("ModelLocalizedValue", "names")
    assert isinstance(exc, FieldValueException)
    assert exc.error_code == "TOP_LEVEL_ONLY_FIELD"
    assert exc.details == {"type": "ModelLocalizedValue", "key": "names"}
    assert "ModelLocalizedValue" in exc.message
    assert "names" in exc.message


def test_unsupported_field_transform_exception() -> None:
    exc = UnsupportedFieldTransformException("counts")
    assert exc.error_code == "UNSUPPORTED_FIELD_TRANSFORM"
    assert exc.details == {"field_path": "counts"}


def test_store_not_configured_exception() -> None:
    exc = StoreNotConfiguredException()
    assert exc.error_code == "SERVICE_UNAVAILABLE"
    assert "Firestore" in exc.message
