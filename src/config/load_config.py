"""
Configuration loading utilities
"""

import logging
from typing import Optional
from .settings import Settings

logger = logging.getLogger(__name__)

# Cached settings instance for the current run
_settings: Optional[Settings] = None


def _describe_source(settings: Settings) -> str:
    if settings.generator.keys_file:
        return f"file {settings.generator.keys_file}"
    return f"Lokalise project(s) {', '.join(settings.lokalise.project_names)}"


def load_settings() -> Settings:
    """Load settings from the environment once and cache them"""
    global _settings

    if _settings is None:
        try:
            _settings = Settings.from_env()
        except ValueError as e:
            logger.error(f"Invalid configuration: {e}")
            raise
        logger.info(f"Configuration loaded; keys from {_describe_source(_settings)}, "
                    f"output to {_settings.generator.output_path or 'stdout'}")

    return _settings


def get_settings() -> Settings:
    """Get current settings instance"""
    return _settings if _settings is not None else load_settings()


def reload_settings() -> Settings:
    """Drop the cached settings and read the environment again"""
    global _settings
    _settings = None
    return load_settings()
