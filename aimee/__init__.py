"""Aimee - voice-powered wine sales assistant backend."""

__version__ = "0.4.0"
