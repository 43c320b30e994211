"""
Configuration settings with validation
"""

import os
import re
from dataclasses import dataclass
from typing import List, Optional
from dotenv import load_dotenv

# Load environment variables
load_dotenv()


@dataclass
class LokaliseSettings:
    """Translation service configuration"""
    api_token: str
    project_names: List[str] = None
    base_url: str = 'https://api.lokalise.com/api2'
    page_size: int = 5000
    max_requests_per_second: int = 6

    def __post_init__(self):
        if self.project_names is None:
            self.project_names = ['Undo']

        # Validate API token
        if not self.api_token:
            raise ValueError("Lokalise API token is required")

        if not self.project_names:
            raise ValueError("At least one Lokalise project name is required")

        # Ensure URL doesn't end with slash
        self.base_url = self.base_url.rstrip('/')
        if not self.base_url.startswith(('http://', 'https://')):
            raise ValueError("Lokalise base URL must start with http:// or https://")

        if self.page_size <= 0:
            raise ValueError("Page size must be positive")

        if self.max_requests_per_second <= 0:
            raise ValueError("Request rate must be positive")


@dataclass
class GeneratorSettings:
    """Generated code configuration"""
    package: str = 'dk.undo.i18n'
    container: str = 'I18n'
    output_path: Optional[str] = None
    keys_file: Optional[str] = None

    def __post_init__(self):
        # Validate package
        segments = self.package.split('.')
        if not all(re.match(r'^[A-Za-z_][A-Za-z0-9_]*$', s) for s in segments):
            raise ValueError(f"Invalid package name: {self.package!r}")

        # Validate container object name
        if not re.match(r'^[A-Z][A-Za-z0-9_]*$', self.container):
            raise ValueError(f"Container name must be a capitalized identifier: {self.container!r}")

        self.output_path = self.output_path or None
        self.keys_file = self.keys_file or None


@dataclass
class Settings:
    """Main configuration settings"""
    generator: GeneratorSettings
    lokalise: Optional[LokaliseSettings] = None
    log_level: str = 'INFO'

    def __post_init__(self):
        if self.lokalise is None and self.generator.keys_file is None:
            raise ValueError("Either LOKALISE_API_TOKEN or KEYS_FILE must be set")

        # Validate log level
        valid_levels = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']
        if self.log_level.upper() not in valid_levels:
            raise ValueError(f"Log level must be one of: {', '.join(valid_levels)}")

        self.log_level = self.log_level.upper()

    @classmethod
    def from_env(cls) -> 'Settings':
        """Create settings from environment variables"""
        project_names = [
            x.strip() for x in os.getenv('LOKALISE_PROJECTS', 'Undo').split(',') if x.strip()
        ]

        try:
            page_size = int(os.getenv('LOKALISE_PAGE_SIZE', '5000'))
        except ValueError:
            raise ValueError("Invalid LOKALISE_PAGE_SIZE format. Use an integer.")

        lokalise = None
        api_token = os.getenv('LOKALISE_API_TOKEN', '')
        if api_token:
            lokalise = LokaliseSettings(
                api_token=api_token,
                project_names=project_names,
                base_url=os.getenv('LOKALISE_BASE_URL', 'https://api.lokalise.com/api2'),
                page_size=page_size
            )

        return cls(
            generator=GeneratorSettings(
                package=os.getenv('I18N_PACKAGE', 'dk.undo.i18n'),
                container=os.getenv('I18N_CONTAINER', 'I18n'),
                output_path=os.getenv('I18N_OUTPUT'),
                keys_file=os.getenv('KEYS_FILE')
            ),
            lokalise=lokalise,
            log_level=os.getenv('LOG_LEVEL', 'INFO')
        )
