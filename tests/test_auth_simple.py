"""Simple tests for authentication components without database."""

from datetime import timedelta

from talent_directory.auth.utils import (
    get_password_hash,
    verify_password,
    create_access_token,
    verify_token
)


def test_password_hashing():
    """Test password hashing and verification."""
    password = "testpassword123"
    hashed = get_password_hash(password)
    
    # Verification should work
    assert verify_password(password, hashed) == True
    
    # Wrong password should fail
    assert verify_password("wrongpassword", hashed) == False


def test_long_password_is_prehashed():
    """Passwords beyond 72 bytes still verify exactly."""
    password = "x" * 100
    hashed = get_password_hash(password)
    
    assert verify_password(password, hashed) == True
    assert verify_password("x" * 99, hashed) == False


def test_token_creation_and_verification():
    """Test JWT token creation and verification."""
    token = create_access_token({"sub": "user-123", "email": "owner@acme.io"})
    assert isinstance(token, str)
    assert len(token) > 0
    
    decoded = verify_token(token)
    assert decoded is not None
    assert decoded.tenant_id == "user-123"
    assert decoded.email == "owner@acme.io"


def test_expired_token():
    """Test expired token verification."""
    expired_token = create_access_token(
        {"sub": "user-123"},
        expires_delta=timedelta(seconds=-1)  # Already expired
    )
    
    assert verify_token(expired_token) is None


def test_invalid_token():
    """Test invalid token verification."""
    assert verify_token("invalid.token.here") is None


def test_token_without_subject():
    """Tokens lacking a tenant id are rejected."""
    token = create_access_token({"email": "owner@acme.io"})
    assert verify_token(token) is None
