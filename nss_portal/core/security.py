# File: nss_portal/core/security.py
from passlib.context import CryptContext

# pbkdf2 keeps hashing in pure python, no bcrypt backend needed
pwd_context = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")


def get_password_hash(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    if not hashed_password or not is_password_hash(hashed_password):
        return False
    try:
        return pwd_context.verify(plain_password, hashed_password)
    except ValueError:
        # identify() only checks the prefix; a damaged stored hash never verifies
        return False


def is_password_hash(value: str) -> bool:
    return pwd_context.identify(value) is not None
