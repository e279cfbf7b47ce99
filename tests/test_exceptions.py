"""Tests for exception classes."""

import pytest

from event_presets.exceptions import (
    AuthorizationDeniedError,
    AuthorizationRestrictedError,
    BackendError,
    CalendarFileError,
    CoordinatorError,
    EmptyTitleError,
    EventNotFoundError,
    EventNotInStoreError,
    ForeignEventError,
    MalformedIdentifierError,
    MissingIdentifierError,
    PresetArchiveError,
    PresetError,
    StaleEventError,
    UnexpectedError,
    UnknownAuthorizationStatusError,
)


def test_preset_error():
    """Test PresetError base exception."""
    error = PresetError("Test error")
    assert str(error) == "Test error"
    assert isinstance(error, Exception)


@pytest.mark.parametrize(
    "error_class",
    [EmptyTitleError, PresetArchiveError, CoordinatorError, BackendError],
)
def test_direct_preset_errors(error_class):
    """Test the top-level error families derive from PresetError."""
    error = error_class("Something failed")
    assert str(error) == "Something failed"
    assert isinstance(error, PresetError)


@pytest.mark.parametrize(
    "error_class",
    [AuthorizationDeniedError, AuthorizationRestrictedError, MissingIdentifierError],
)
def test_coordinator_errors(error_class):
    """Test coordinator failures share a base class."""
    assert isinstance(error_class("failed"), CoordinatorError)


@pytest.mark.parametrize(
    "error_class",
    [ForeignEventError, StaleEventError, EventNotInStoreError, CalendarFileError],
)
def test_backend_errors(error_class):
    """Test backend failures share a base class."""
    error = error_class("failed")
    assert isinstance(error, BackendError)
    assert not isinstance(error, CoordinatorError)


def test_malformed_identifier_error():
    """Test MalformedIdentifierError keeps the rejected string."""
    error = MalformedIdentifierError("abc:def")
    assert error.candidate == "abc:def"
    assert "abc:def" in str(error)


def test_event_not_found_error():
    """Test EventNotFoundError keeps the identifier."""
    error = EventNotFoundError("A:B")
    assert error.identifier == "A:B"
    assert str(error) == "No event found with identifier: A:B"
    assert isinstance(error, CoordinatorError)


def test_unexpected_error_wraps_cause():
    """Test UnexpectedError keeps the backend failure."""
    cause = CalendarFileError("disk full")
    error = UnexpectedError(cause)
    assert error.cause is cause
    assert "disk full" in str(error)
    assert str(UnexpectedError()) == "Unexpected event store error"


def test_unknown_authorization_status_is_not_a_preset_error():
    """Test unknown statuses are programming errors, not expected failures."""
    error = UnknownAuthorizationStatusError("bogus")
    assert isinstance(error, RuntimeError)
    assert not isinstance(error, PresetError)
