"""User API: CRUD backend for a single user resource."""

__version__ = "1.0.0"
