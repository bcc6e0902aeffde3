"""Authentication utilities and FastAPI dependencies."""
