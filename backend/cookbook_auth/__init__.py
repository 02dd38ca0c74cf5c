"""Email/password registration and login over a single users table."""

from __future__ import annotations

from .application import create_app

__all__ = ["create_app"]
