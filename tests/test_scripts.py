from create_tables import create_tables
from list_users import list_users
from nss_portal.services.portal import PortalService
from nss_portal.storage import SQLAlchemyStore
from tests.conftest import make_user


def test_create_tables_then_list_users(tmp_path, clock, capsys):
    url = f"sqlite:///{tmp_path / 'portal.db'}"
    assert create_tables(url) is True

    portal = PortalService(SQLAlchemyStore(url), clock=clock, generate_qr_codes=False)
    portal.register_user(make_user())
    portal.approve_user("u1")

    users = list_users(url)

    assert [u.roll_number for u in users] == ["CS101"]
    out = capsys.readouterr().out
    assert "Total Users: 1" in out
    assert "approved" in out
