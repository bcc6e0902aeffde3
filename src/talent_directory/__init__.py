"""Multi-tenant talent pipeline directory."""

__version__ = "0.1.0"
