"""
Data models for the i18n code generator
"""

from .key import Key, KeyName, Translation, Project

__all__ = ['Key', 'KeyName', 'Translation', 'Project']
