"""Configuration adapters."""

from timezone_finder.adapters.config.app_config import AppConfig

__all__ = ["AppConfig"]
