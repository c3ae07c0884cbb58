"""Salted scrypt password hashing via werkzeug.

Stored form is werkzeug's ``"scrypt:n:r:p$salt$hash"``.
"""

from werkzeug.security import check_password_hash, generate_password_hash

PASSWORD_METHOD = "scrypt"


def hash_password(password: str) -> str:
    return generate_password_hash(password, method=PASSWORD_METHOD)


def verify_password(password: str, stored: str) -> bool:
    if not stored:
        return False
    return check_password_hash(stored, password)
