"""
Translation key data models
"""

from dataclasses import dataclass, field
from typing import Optional, Dict, Any, List


@dataclass
class KeyName:
    """Per-platform key names"""
    ios: str
    android: str
    web: str
    other: str
    
    def all_same(self) -> bool:
        """Check that every platform uses the same name"""
        return self.ios == self.android == self.web == self.other
    
    def to_dict(self) -> Dict[str, str]:
        return {
            'ios': self.ios,
            'android': self.android,
            'web': self.web,
            'other': self.other
        }
    
    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'KeyName':
        """Create from dictionary"""
        return cls(
            ios=data['ios'],
            android=data['android'],
            web=data['web'],
            other=data['other']
        )


@dataclass
class Translation:
    """Locale specific text of a key"""
    language_iso: str
    translation: str
    
    def __post_init__(self):
        self.language_iso = str(self.language_iso).strip()
        if not self.language_iso:
            raise ValueError("Translation language cannot be empty")
        
        if self.translation is None:
            self.translation = ''
    
    def to_dict(self) -> Dict[str, str]:
        return {
            'language_iso': self.language_iso,
            'translation': self.translation
        }
    
    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Translation':
        """Create from dictionary"""
        return cls(
            language_iso=data['language_iso'],
            translation=data.get('translation') or ''
        )


@dataclass
class Key:
    """Translation key with all of its translations"""
    key_id: int
    key_name: KeyName
    is_plural: bool = False
    translations: List[Translation] = field(default_factory=list)
    
    @property
    def display_name(self) -> str:
        """Name used in logs and error messages"""
        if self.key_name.all_same():
            return self.key_name.other
        return f"#{self.key_id} ({self.key_name.other})"
    
    def locales(self) -> List[str]:
        """Locales this key has translations for, sorted"""
        return sorted({t.language_iso for t in self.translations})
    
    def to_dict(self) -> Dict[str, Any]:
        """Convert to the translation service format"""
        return {
            'key_id': self.key_id,
            'key_name': self.key_name.to_dict(),
            'is_plural': self.is_plural,
            'translations': [t.to_dict() for t in self.translations]
        }
    
    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Key':
        """Create from the translation service format"""
        key_name = data['key_name']
        if isinstance(key_name, str):
            # Projects without per-platform names send one plain string
            key_name = {'ios': key_name, 'android': key_name, 'web': key_name, 'other': key_name}
        
        return cls(
            key_id=int(data['key_id']),
            key_name=KeyName.from_dict(key_name),
            is_plural=bool(data.get('is_plural', False)),
            translations=[Translation.from_dict(t) for t in data.get('translations', [])]
        )


@dataclass
class Project:
    """Translation service project"""
    project_id: str
    name: str
    description: Optional[str] = None
    
    def __post_init__(self):
        self.project_id = str(self.project_id).strip()
        self.name = self.name.strip()
        
        if not self.project_id:
            raise ValueError("Project ID cannot be empty")
        
        if not self.name:
            raise ValueError("Project name cannot be empty")
    
    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Project':
        """Create from dictionary"""
        return cls(
            project_id=data['project_id'],
            name=data['name'],
            description=data.get('description')
        )
