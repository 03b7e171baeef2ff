import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from checkout_scraper.core import constants

# Load environment variables
load_dotenv()

OUTPUT_FORMATS = ('json', 'jsonl')


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None or value.strip() == '':
        return default
    return value.strip().lower() in ('1', 'true', 'yes', 'on')


def _env_int(name: str, default: Optional[int]) -> Optional[int]:
    value = os.getenv(name)
    if value is None or value.strip() == '':
        return default
    try:
        return int(value)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {value!r}")


@dataclass
class ScraperConfig:
    """
    Central configuration for a scrape run.
    Values come from CLI flags, then SCRAPER_* environment variables (.env supported),
    then built-in defaults.
    """
    url: str = constants.DEFAULT_URL
    count: int = constants.DEFAULT_COUNT
    headless: bool = False
    output_path: Path = Path(constants.DEFAULT_OUTPUT)
    output_format: str = 'json'
    seed: Optional[int] = None
    log_level: str = 'INFO'

    def __post_init__(self):
        self.output_path = Path(self.output_path)
        if self.count < 0:
            raise ValueError(f"count must be >= 0, got {self.count}")
        if self.output_format not in OUTPUT_FORMATS:
            raise ValueError(f"output_format must be one of {OUTPUT_FORMATS}, got {self.output_format!r}")

    @classmethod
    def from_env(cls, **overrides) -> 'ScraperConfig':
        """Build a config from the environment, letting non-None overrides win"""
        values = {
            'url': os.getenv('SCRAPER_URL') or constants.DEFAULT_URL,
            'count': _env_int('SCRAPER_COUNT', constants.DEFAULT_COUNT),
            'headless': _env_bool('SCRAPER_HEADLESS', False),
            'output_path': Path(os.getenv('SCRAPER_OUTPUT') or constants.DEFAULT_OUTPUT),
            'output_format': (os.getenv('SCRAPER_OUTPUT_FORMAT') or 'json').lower(),
            'seed': _env_int('SCRAPER_SEED', None),
            'log_level': os.getenv('SCRAPER_LOG_LEVEL') or 'INFO',
        }
        values.update({key: value for key, value in overrides.items() if value is not None})
        return cls(**values)
