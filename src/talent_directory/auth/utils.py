"""Authentication utilities."""

from datetime import datetime, timedelta
from typing import Optional
import hashlib
import os
import uuid

from jose import JWTError, jwt
from passlib.context import CryptContext
from pydantic import BaseModel
import structlog

from talent_directory.core.config import settings

logger = structlog.get_logger(__name__)


class TokenData(BaseModel):
    """Token data schema for JWT payload."""
    tenant_id: str
    email: Optional[str] = None


def get_pwd_context():
    """Get password context based on environment."""
    if os.getenv("TESTING", "false").lower() == "true":
        return CryptContext(schemes=["plaintext"], deprecated="auto")
    else:
        return CryptContext(schemes=["bcrypt"], deprecated="auto")


def _prehash(password: str) -> str:
    # bcrypt only reads the first 72 bytes
    if len(password.encode("utf-8")) > 72:
        return hashlib.sha256(password.encode("utf-8")).hexdigest()
    return password


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password against its hash.
    
    Args:
        plain_password: Plain text password
        hashed_password: Stored hash
        
    Returns:
        True if password matches, False otherwise
    """
    pwd_context = get_pwd_context()
    try:
        return pwd_context.verify(_prehash(plain_password), hashed_password)
    except ValueError:
        # Hash produced by a different scheme than the active context
        logger.warning("Password hash could not be identified")
        return False


def get_password_hash(password: str) -> str:
    """Hash a password, pre-hashing with SHA-256 beyond bcrypt's 72-byte limit."""
    return get_pwd_context().hash(_prehash(password))


def create_access_token(data: dict, expires_delta: Optional[timedelta] = None) -> str:
    """Create a signed JWT access token.
    
    Args:
        data: Claims to encode in the token
        expires_delta: Token lifetime; defaults to the configured expiry
        
    Returns:
        Encoded JWT token
    """
    to_encode = data.copy()
    
    if expires_delta:
        expire = datetime.utcnow() + expires_delta
    else:
        expire = datetime.utcnow() + timedelta(minutes=settings.access_token_expire_minutes)
    
    to_encode.update({
        "exp": expire,
        "jti": str(uuid.uuid4()),
        "iat": datetime.utcnow()
    })
    
    encoded_jwt = jwt.encode(to_encode, settings.secret_key, algorithm=settings.algorithm)
    logger.debug("Access token created", expires_at=expire.isoformat())
    return encoded_jwt


def verify_token(token: str) -> Optional[TokenData]:
    """Verify and decode a JWT token.
    
    Args:
        token: JWT token to verify
        
    Returns:
        TokenData if valid, None otherwise
    """
    try:
        payload = jwt.decode(token, settings.secret_key, algorithms=[settings.algorithm])
    except JWTError as e:
        logger.warning("Token verification failed", error=str(e))
        return None
    
    tenant_id = payload.get("sub")
    if tenant_id is None:
        logger.warning("Token missing tenant ID")
        return None
    
    return TokenData(tenant_id=tenant_id, email=payload.get("email"))
