import base64

from nss_portal.core.config import Settings
from nss_portal.core.security import get_password_hash, is_password_hash, verify_password
from nss_portal.services.qr_code import generate_qr_code, portfolio_url
from tests.conftest import make_user

PNG_SIGNATURE = b"\x89PNG\r\n\x1a\n"


def test_generate_qr_code_returns_png_data_url():
    data_url = generate_qr_code("https://nss.example.org/portfolio/CS101")
    prefix = "data:image/png;base64,"
    assert data_url.startswith(prefix)
    assert base64.b64decode(data_url[len(prefix):]).startswith(PNG_SIGNATURE)


def test_portfolio_url_uses_roll_number():
    assert portfolio_url(make_user(), "https://nss.example.org/portfolio/") == "https://nss.example.org/portfolio/CS101"


def test_settings_storage_keys(monkeypatch):
    monkeypatch.setenv("STORAGE_KEY_PREFIX", "test-")
    settings = Settings()
    assert settings.storage_key("users") == "test-users"
    assert settings.DEFAULT_APPROVER == "admin"


def test_password_hash_helpers():
    hashed = get_password_hash("secret123")
    assert is_password_hash(hashed)
    assert not is_password_hash("secret123")
    assert verify_password("secret123", hashed)
    assert not verify_password("secret123", "secret123")
