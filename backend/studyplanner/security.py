"""
StudyPlanner Backend: Password Hashing
=======================================

What:  bcrypt hashing and verification through passlib's CryptContext.
Who:   StudentRepository hashes on insert; AuthService verifies on login.

Cost factor comes from settings.bcrypt_rounds (12 in production).
"""

from passlib.context import CryptContext

from studyplanner.config import settings

pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__rounds=settings.bcrypt_rounds,
)


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """False for a mismatch and for a stored value that is not a bcrypt hash."""
    try:
        return pwd_context.verify(plain_password, hashed_password)
    except ValueError:
        return False
