"""Password hashing with bcrypt. Cost factor comes from Settings."""

import bcrypt

from shopping_mall.config import get_settings


def hash_password(plain: str) -> str:
    rounds = get_settings().password_hash_rounds
    return bcrypt.hashpw(plain.encode("utf-8"), bcrypt.gensalt(rounds)).decode("utf-8")


def verify_password(plain: str, hashed: str) -> bool:
    try:
        return bcrypt.checkpw(plain.encode("utf-8"), hashed.encode("utf-8"))
    except ValueError:
        # Malformed stored hash
        return False
