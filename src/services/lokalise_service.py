"""
Lokalise API service
"""

import aiohttp
import asyncio
import logging
from typing import List, Dict, Optional, Any
from config.settings import LokaliseSettings
from models.key import Key, Project
from utils.rate_limiter import RateLimiter
from utils.retry import retry_async

logger = logging.getLogger(__name__)


class LokaliseError(Exception):
    """Lokalise request failed or returned unexpected data"""


class LokaliseService:
    """Service for reading projects and keys from Lokalise"""

    def __init__(self, settings: LokaliseSettings):
        self.settings = settings
        self.base_url = settings.base_url
        self.last_error: Optional[str] = None
        self._session: Optional[aiohttp.ClientSession] = None
        self._session_lock = asyncio.Lock()
        # Lokalise rejects concurrent requests made with the same token
        self._request_lock = asyncio.Lock()
        self._rate_limiter = RateLimiter(settings.max_requests_per_second, 1.0)
        self.headers = {
            'Accept': 'application/json',
            'x-api-token': settings.api_token
        }

    async def initialize(self):
        """Initialize the service"""
        await self._get_session()

    async def _get_session(self) -> aiohttp.ClientSession:
        """Get or create HTTP session"""
        async with self._session_lock:
            if self._session is None or self._session.closed:
                timeout = aiohttp.ClientTimeout(total=120, connect=10)
                self._session = aiohttp.ClientSession(timeout=timeout)
            return self._session

    async def close(self):
        """Close HTTP session"""
        async with self._session_lock:
            if self._session and not self._session.closed:
                await self._session.close()
            self._session = None

    async def __aenter__(self) -> 'LokaliseService':
        await self.initialize()
        return self

    async def __aexit__(self, exc_type, exc, tb):
        await self.close()

    def _fail(self, message: str) -> LokaliseError:
        self.last_error = message
        logger.error(message)
        return LokaliseError(message)

    @retry_async(max_attempts=3, delay=2.0, exceptions=(aiohttp.ClientError, asyncio.TimeoutError))
    async def _get(self, path: str, params: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """GET a Lokalise endpoint and return the decoded JSON object"""
        session = await self._get_session()
        url = f'{self.base_url}/{path}'

        async with self._request_lock:
            await self._rate_limiter.acquire()
            logger.debug(f"GET {url} {params or ''}")

            async with session.get(url, headers=self.headers, params=params) as response:
                if response.status != 200:
                    try:
                        body = await response.text()
                    except Exception:
                        body = ''
                    raise self._fail(f'GET {path} failed HTTP {response.status}; body: {body[:500]}')

                try:
                    data = await response.json()
                except (aiohttp.ContentTypeError, ValueError) as e:
                    raise self._fail(f'GET {path} response not JSON: {e}')

        if not isinstance(data, dict):
            raise self._fail(f'GET {path} response is not a JSON object')
        return data

    async def get_projects(self) -> List[Project]:
        """Fetch all projects visible to the token"""
        logger.info("Fetching projects from Lokalise")
        data = await self._get('projects')
        try:
            projects = [Project.from_dict(p) for p in data['projects']]
        except (KeyError, TypeError, ValueError) as e:
            raise self._fail(f'Failed to parse projects: {e}')
        logger.info(f"Successfully fetched {len(projects)} projects")
        return projects

    async def find_project(self, name: str) -> Project:
        """Find a project by its exact name"""
        for project in await self.get_projects():
            if project.name == name:
                return project
        raise self._fail(f"Couldn't find Lokalise project {name!r}")

    async def get_keys(self, project: Project) -> List[Key]:
        """
        Fetch every key of a project including translations

        Pages are requested one after another until a short page is returned.
        """
        per_page = self.settings.page_size
        keys: List[Key] = []
        page = 1

        while True:
            data = await self._get(
                f'projects/{project.project_id}/keys',
                params={'include_translations': '1', 'page': str(page), 'limit': str(per_page)}
            )
            try:
                page_keys = [Key.from_dict(k) for k in data['keys']]
            except (KeyError, TypeError, ValueError) as e:
                raise self._fail(f'Failed to parse keys of project {project.name} page {page}: {e}')

            keys.extend(page_keys)
            logger.debug(f"Fetched page {page} of {project.name}: {len(page_keys)} keys")

            if len(page_keys) < per_page:
                break
            page += 1

        logger.info(f"Successfully fetched {len(keys)} keys from project {project.name}")
        return keys

    async def get_project_keys(self, names: List[str]) -> Dict[str, List[Key]]:
        """Fetch keys of several projects, sequentially, keyed by project name"""
        result: Dict[str, List[Key]] = {}
        for name in names:
            project = await self.find_project(name)
            result[project.name] = await self.get_keys(project)
        return result
