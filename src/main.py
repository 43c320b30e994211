"""
Main application entry point
"""

import asyncio
import logging
import sys
from pathlib import Path
from typing import Dict, List

# Add current directory to path for imports
sys.path.insert(0, str(Path(__file__).parent))

from config import load_settings
from config.settings import Settings
from codegen import generate_code
from models.key import Key
from services.key_file_service import KeyFileService
from services.lokalise_service import LokaliseService

logger = logging.getLogger(__name__)


class I18nGenerator:
    """One generation run: fetch keys, render Scala, write it out"""

    def __init__(self, settings: Settings):
        self.settings = settings

    async def collect_keys(self) -> Dict[str, List[Key]]:
        """Keys grouped by project, from the export file or from Lokalise"""
        if self.settings.generator.keys_file:
            return KeyFileService().load(self.settings.generator.keys_file)

        async with LokaliseService(self.settings.lokalise) as lokalise:
            return await lokalise.get_project_keys(self.settings.lokalise.project_names)

    def write(self, code: str):
        """Write the rendered unit to the configured file or to stdout"""
        output_path = self.settings.generator.output_path
        if output_path is None:
            sys.stdout.write(code)
            sys.stdout.flush()
            return

        path = Path(output_path)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(code, encoding='utf-8')
        logger.info(f"Wrote {len(code)} characters to {path}")

    async def run(self) -> str:
        projects = await self.collect_keys()
        # Rendered completely before anything is written
        code = generate_code(
            projects,
            package=self.settings.generator.package,
            container=self.settings.generator.container
        )
        self.write(code)
        return code


async def main():
    """Main entry point"""
    settings = load_settings()
    logging.getLogger().setLevel(settings.log_level)
    try:
        await I18nGenerator(settings).run()
    except Exception as e:
        logger.error(f"Generation failed: {e}")
        raise


def run():
    # Logs go to stderr; stdout may carry the generated code
    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[logging.StreamHandler(sys.stderr)]
    )
    asyncio.run(main())


if __name__ == '__main__':
    run()
