import pytest

from nss_portal import crud
from nss_portal.core.exceptions import AuthenticationError, ConflictError, NotFoundError
from nss_portal.core.security import is_password_hash, verify_password
from nss_portal.schemas import Achievement, AchievementLevel, ApprovalState, Page
from nss_portal.services.portal import PortalService
from tests.conftest import NOW_MS, TODAY, make_user


def test_register_users_start_pending(portal):
    for i in range(5):
        portal.register_user(make_user(f"u{i}", f"CS10{i}", f"Volunteer {i}"))

    assert len(portal.state.users) == 5
    assert all(u.approval_state == ApprovalState.PENDING for u in portal.state.users)
    assert portal.existing_roll_numbers() == [f"CS10{i}" for i in range(5)]


def test_register_user_applies_defaults_and_opens_portfolio(portal):
    created = portal.register_user(make_user(is_approved=True, is_rejected=True))

    assert created.is_approved is False
    assert created.is_rejected is False
    assert created.join_date == TODAY
    assert created.timestamp == NOW_MS
    assert created.achievements == ()
    assert created.event_history == ()
    assert portal.current_user == created
    assert portal.current_page == Page.PORTFOLIO
    assert portal.state.navigation.history == (Page.LANDING, Page.LANDING)


def test_register_user_keeps_given_join_date(portal):
    created = portal.register_user(make_user(join_date="2024-07-01"))
    assert created.join_date == "2024-07-01"


def test_register_user_hashes_password(portal):
    created = portal.register_user(make_user(password="secret123"))

    assert created.password != "secret123"
    assert is_password_hash(created.password)
    assert verify_password("secret123", created.password)


def test_register_duplicate_roll_number_conflicts(portal, store):
    portal.register_user(make_user("u1", "CS101"))
    writes = store.write_count

    with pytest.raises(ConflictError) as exc:
        portal.register_user(make_user("u2", "CS101", "Someone Else"))

    assert exc.value.field == "rollNumber"
    assert len(portal.state.users) == 1
    assert store.write_count == writes


def test_register_user_generates_qr_code(store, clock):
    portal = PortalService(store, clock=clock, portfolio_base_url="https://nss.example.org/p")
    created = portal.register_user(make_user())
    assert created.qr_code.startswith("data:image/png;base64,")


def test_each_mutation_persists_users_once(portal, store):
    portal.register_user(make_user())
    assert store.write_count == 1
    portal.approve_user("u1")
    assert store.write_count == 2
    assert crud.user.load(store, "nss-") == portal.state.users


def test_approve_then_reject(portal, clock):
    portal.register_user(make_user())
    portal.approve_user("u1")
    clock.advance(1000)
    rejected = portal.reject_user("u1")

    assert rejected.is_approved is False
    assert rejected.is_rejected is True
    assert rejected.rejection_reason == "No reason provided"
    assert rejected.rejected_by == "admin"
    assert rejected.rejected_at == NOW_MS + 1000
    assert rejected.approval_state == ApprovalState.REJECTED


def test_reject_then_approve(portal):
    portal.register_user(make_user())
    portal.reject_user("u1", reason="Incomplete documents")
    approved = portal.approve_user("u1")

    assert approved.is_approved is True
    assert approved.is_rejected is False
    assert approved.approved_by == "admin"
    assert approved.approved_at == NOW_MS
    assert approved.approval_state == ApprovalState.APPROVED


def test_reject_with_reason(portal):
    portal.register_user(make_user())
    rejected = portal.reject_user("u1", reason="Roll number mismatch", rejected_by="coordinator")
    assert rejected.rejection_reason == "Roll number mismatch"
    assert rejected.rejected_by == "coordinator"


def test_approve_is_last_write_wins(portal, clock):
    portal.register_user(make_user())
    portal.approve_user("u1")
    clock.advance(5000)
    again = portal.approve_user("u1", approved_by="principal")
    assert again.approved_by == "principal"
    assert again.approved_at == NOW_MS + 5000


@pytest.mark.parametrize("operation", ["approve_user", "reject_user"])
def test_decisions_on_unknown_user_raise(portal, operation):
    with pytest.raises(NotFoundError):
        getattr(portal, operation)("ghost")


def test_approval_refreshes_session_user(portal):
    portal.register_user(make_user())
    portal.approve_user("u1")
    assert portal.current_user.is_approved is True


def test_update_user_replaces_record_and_session_user(portal):
    created = portal.register_user(make_user())
    changed = created.model_copy(update={"branch": "ECE", "end_date": "2026-05-31"})

    updated = portal.update_user(changed)

    assert portal.state.users == (updated,)
    assert portal.current_user.branch == "ECE"
    assert updated.password == created.password


def test_update_user_rehashes_new_plain_password(portal):
    created = portal.register_user(make_user())
    updated = portal.update_user(created.model_copy(update={"password": "n3w-pass"}))
    assert verify_password("n3w-pass", updated.password)


def test_update_unknown_user_raises(portal):
    with pytest.raises(NotFoundError):
        portal.update_user(make_user("ghost", "XX000"))


def _achievement(achievement_id="a1", title="Cleanliness Drive Lead"):
    return Achievement(
        id=achievement_id, title=title, level=AchievementLevel.DISTRICT, date="2025-03-10", photo="a.png"
    )


def test_add_and_update_achievement(portal):
    portal.register_user(make_user())
    portal.add_achievement("u1", _achievement())
    verified = _achievement().model_copy(update={"is_verified": True, "verified_by": "admin", "verified_at": NOW_MS})

    owner = portal.update_achievement("u1", "a1", verified)

    assert len(owner.achievements) == 1
    assert owner.achievements[0].is_verified is True
    assert owner.achievements[0].verified_by == "admin"


def test_update_unknown_achievement_raises(portal):
    portal.register_user(make_user())
    with pytest.raises(NotFoundError):
        portal.update_achievement("u1", "missing", _achievement("missing"))


def test_add_achievement_to_unknown_user_raises(portal):
    with pytest.raises(NotFoundError):
        portal.add_achievement("ghost", _achievement())


def test_login_with_roll_number_and_password(portal):
    portal.register_user(make_user())
    portal.logout()

    member = portal.login("CS101", "secret123")

    assert member.id == "u1"
    assert portal.state.is_logged_in is True
    assert portal.current_page == Page.PORTFOLIO


@pytest.mark.parametrize("roll_number,password", [("CS101", "wrong"), ("CS999", "secret123")])
def test_login_rejects_bad_credentials(portal, roll_number, password):
    portal.register_user(make_user())
    with pytest.raises(AuthenticationError):
        portal.login(roll_number, password)
    assert portal.state.is_logged_in is False


def test_crud_register_is_pure():
    users = ()
    new_users, created = crud.user.register(users, obj_in=make_user(), today=TODAY)
    assert users == ()
    assert new_users == (created,)


def test_login_with_damaged_stored_hash_fails_cleanly(store, clock):
    damaged = make_user(password="$pbkdf2-sha256$garbage")
    store.save("nss-users", crud.user.dump((damaged,)))
    portal = PortalService(store, clock=clock, key_prefix="nss-", generate_qr_codes=False)

    with pytest.raises(AuthenticationError):
        portal.login("CS101", "secret123")
    assert portal.state.is_logged_in is False
    assert not verify_password("secret123", "$pbkdf2-sha256$garbage")
