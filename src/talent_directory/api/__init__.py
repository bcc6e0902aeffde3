"""HTTP routers for the directory API."""
