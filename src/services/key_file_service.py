"""
Loading keys from a JSON export on disk
"""

import json
import logging
from pathlib import Path
from typing import Dict, List, Union

from models.key import Key

logger = logging.getLogger(__name__)


class KeyFileService:
    """Reads keys from a file instead of the Lokalise API

    Two layouts are accepted::

        {"name": "Undo", "keys": [...]}
        {"projects": [{"name": "Undo", "keys": [...]}, ...]}

    Keys use the same shape as the Lokalise keys endpoint. A single-project file
    without a name is named after the file.
    """

    def load(self, path: Union[str, Path]) -> Dict[str, List[Key]]:
        """Load keys grouped by project name"""
        path = Path(path)
        logger.info(f"Loading keys from {path}")

        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)

        if not isinstance(data, dict):
            raise ValueError(f"{path}: expected a JSON object")

        if 'projects' in data:
            projects: Dict[str, List[Key]] = {}
            for entry in data['projects']:
                name = entry['name']
                if name in projects:
                    raise ValueError(f"{path}: project {name!r} listed twice")
                projects[name] = self._parse_keys(entry.get('keys', []), path)
        elif 'keys' in data:
            projects = {data.get('name') or path.stem: self._parse_keys(data['keys'], path)}
        else:
            raise ValueError(f"{path}: expected 'keys' or 'projects'")

        logger.info(f"Loaded {sum(len(k) for k in projects.values())} keys from {len(projects)} project(s)")
        return projects

    def _parse_keys(self, raw_keys: List[dict], path: Path) -> List[Key]:
        try:
            return [Key.from_dict(k) for k in raw_keys]
        except (KeyError, TypeError) as e:
            raise ValueError(f"{path}: malformed key entry: {e}")
