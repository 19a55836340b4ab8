"""Configuration loading for index builds."""

from .config_loader import load_content_config

__all__ = ["load_content_config"]
