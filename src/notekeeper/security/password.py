"""Password hashing utilities."""

from passlib.context import CryptContext

from ..core.logging import get_logger

logger = get_logger("security.password")

# Records written before hashing was introduced still hold plaintext
# passwords; "plaintext" must stay last since it matches any string.
pwd_context = CryptContext(
    schemes=["pbkdf2_sha256", "plaintext"],
    deprecated=["plaintext"],
)


def hash_password(password: str) -> str:
    """Hash a password."""
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password against its stored form."""
    if not hashed_password:
        return False
    try:
        return pwd_context.verify(plain_password, hashed_password)
    except ValueError as e:
        # Unrecognised or damaged hash in the users store
        logger.warning(f"Stored password could not be checked: {e}")
        return False


def needs_update(hashed_password: str) -> bool:
    """Check if a stored password should be re-hashed."""
    return pwd_context.needs_update(hashed_password)
