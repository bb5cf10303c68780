"""Configuration package for the Market Pulse service."""

from .settings import AppSettings, get_settings

__all__ = ["AppSettings", "get_settings"]
