from datetime import datetime, timedelta, timezone

import pytest
from fake_firestore import FakeFirestore
from utils.firestore_utils import reset_db


@pytest.fixture
def db():
    return FakeFirestore()


@pytest.fixture
def now():
    return datetime(2026, 10, 18, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def past(now):
    return now - timedelta(hours=1)


@pytest.fixture
def future(now):
    return now + timedelta(days=7)


@pytest.fixture(autouse=True)
def _reset_cached_client():
    reset_db()
    yield
    reset_db()
