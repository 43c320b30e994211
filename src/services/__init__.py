"""
Services for the i18n code generator
"""

from .lokalise_service import LokaliseService, LokaliseError
from .key_file_service import KeyFileService

__all__ = ['LokaliseService', 'LokaliseError', 'KeyFileService']
