"""API routers for Aimee."""

from aimee.routers import auth, logs, query, voice, wines

__all__ = ["auth", "logs", "query", "voice", "wines"]
