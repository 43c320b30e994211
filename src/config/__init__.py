"""
Configuration module for the i18n code generator
"""

from .settings import Settings, LokaliseSettings, GeneratorSettings
from .load_config import load_settings, get_settings, reload_settings

__all__ = ['Settings', 'LokaliseSettings', 'GeneratorSettings', 'load_settings', 'get_settings', 'reload_settings']
