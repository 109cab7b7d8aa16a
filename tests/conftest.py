"""Pytest configuration and fixtures for neo-files tests."""

from typing import Dict, List, Optional

import pytest

from neo_files.core.shared import EventEmitter
from neo_files.files.core.events import EVENT_DATA_CHANGED, CannotGetUrlEvent, DataChangedEvent
from neo_files.files.core.value_objects import CannotGetUrlCase


class FakeRecord:
    """Active-record stand-in tracking partial updates."""

    def __init__(self, is_new_record: bool = False, fail_on_update: Optional[Exception] = None):
        self.is_new_record = is_new_record
        self.fail_on_update = fail_on_update
        self.updates: List[dict] = []
        self.image_data = None

    def update(self, validate: bool = True, attributes: Optional[List[str]] = None) -> None:
        if self.fail_on_update is not None:
            raise self.fail_on_update
        self.updates.append({"validate": validate, "attributes": attributes})


class FakeBehavior:
    """Model behavior stand-in linking files to a record."""

    def __init__(self, owner: Optional[FakeRecord] = None):
        self.owner = owner


class FakeFile(EventEmitter):
    """File entity stand-in with configurable storage responses."""

    def __init__(
        self,
        name: str = "photo.jpg",
        urls: Optional[Dict[Optional[str], str]] = None,
        default_url: Optional[str] = None,
        data_attribute: Optional[str] = None,
        owner: Optional[FakeBehavior] = None,
        generate_error: Optional[Exception] = None,
        url_error: Optional[Exception] = None,
        new_data: Optional[str] = None,
    ):
        super().__init__()
        self.name = name
        self.urls = urls if urls is not None else {}
        self.default_url = default_url
        self.data_attribute = data_attribute
        self.owner = owner
        self.generate_error = generate_error
        self.url_error = url_error
        self.new_data = new_data
        self.generated_formats: List[str] = []
        self.url_requests: List[tuple] = []
        self.default_url_requests: List[tuple] = []

    def generate_format(self, format: str) -> None:
        if self.generate_error is not None:
            raise self.generate_error
        self.generated_formats.append(format)
        self.urls.setdefault(format, f"/files/{format}/{self.name}")
        if self.new_data is not None:
            self.trigger(EVENT_DATA_CHANGED, DataChangedEvent(old_file_data=None, new_file_data=self.new_data))

    def get_url(self, format: Optional[str] = None, scheme=None) -> Optional[str]:
        self.url_requests.append((format, scheme))
        if self.url_error is not None:
            raise self.url_error
        url = self.urls.get(format)
        if url is not None and scheme is True:
            return f"https://cdn.example.com{url}"
        return url

    def get_default_url(self, format: Optional[str] = None, scheme=None) -> Optional[str]:
        self.default_url_requests.append((format, scheme))
        return self.default_url


class StorageError(Exception):
    """Storage failure raised by fake files."""

    def __init__(self, message: str, error_code: Optional[str] = None):
        super().__init__(message)
        self.error_code = error_code


@pytest.fixture
def file():
    """File without a persisted record."""
    return FakeFile()


@pytest.fixture
def record():
    """Existing persisted record."""
    return FakeRecord()


@pytest.fixture
def persisted_file(record):
    """File attached to an existing record through a model behavior."""
    return FakeFile(
        data_attribute="image_data",
        owner=FakeBehavior(record),
        new_data="photo.jpg?formats=thumb"
    )


@pytest.fixture
def make_event():
    """Factory for cannot-get-url events."""
    def _make_event(sender, case=CannotGetUrlCase.FORMAT_NOT_FOUND, format="thumb", scheme=None, exception=None):
        return CannotGetUrlEvent(
            sender=sender,
            case=case,
            format=format,
            scheme=scheme,
            exception=exception
        )
    return _make_event


@pytest.fixture
def make_file():
    """Factory for fake file entities."""
    return FakeFile


@pytest.fixture
def make_record():
    """Factory for fake records."""
    return FakeRecord


@pytest.fixture
def make_behavior():
    """Factory for fake model behaviors."""
    return FakeBehavior


@pytest.fixture
def storage_error():
    """Storage error class raised by fake files."""
    return StorageError
