import pytest

from nss_portal.core.clock import FixedClock
from nss_portal.schemas import AdminEvent, User
from nss_portal.services.portal import PortalService
from nss_portal.storage import MemoryStore, SQLAlchemyStore

NOW_MS = 1760000000000
TODAY = "2025-10-09"


@pytest.fixture
def clock():
    return FixedClock(now_ms=NOW_MS, today=TODAY)


@pytest.fixture
def store():
    return MemoryStore()


@pytest.fixture
def sql_store():
    return SQLAlchemyStore("sqlite://")


@pytest.fixture
def portal(store, clock):
    return PortalService(store, clock=clock, key_prefix="nss-", generate_qr_codes=False)


def make_user(user_id="u1", roll_number="CS101", full_name="Asha", **kwargs):
    data = dict(id=user_id, full_name=full_name, roll_number=roll_number, branch="CSE", password="secret123")
    data.update(kwargs)
    return User(**data)


def make_event(event_id="e1", title="Blood Drive", date="2025-11-01", **kwargs):
    return AdminEvent(id=event_id, title=title, date=date, **kwargs)
