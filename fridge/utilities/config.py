"""Configuration management for the What's In My Fridge service."""
import os
from typing import Final
from pathlib import Path

from dotenv import load_dotenv

from fridge.utilities.constants import (
    DEFAULT_HTTP_TIMEOUT_SECONDS,
    DEFAULT_RANDOM_RECIPES_NUMBER,
    DEFAULT_RECIPE_SEARCH_NUMBER,
    SPOONACULAR_DEFAULT_BASE_URL,
)

# Load environment variables from .env file if it exists
env_path = Path(__file__).parent.parent / '.env'
if env_path.exists():
    load_dotenv(env_path)

# Recipe provider. An empty key is reported as a configuration error on first use.
SPOONACULAR_API_KEY: Final[str] = os.getenv('SPOONACULAR_API_KEY', '').strip()
SPOONACULAR_BASE_URL: Final[str] = os.getenv('SPOONACULAR_BASE_URL', SPOONACULAR_DEFAULT_BASE_URL).rstrip('/')
HTTP_TIMEOUT_SECONDS: Final[float] = float(os.getenv('HTTP_TIMEOUT_SECONDS', str(DEFAULT_HTTP_TIMEOUT_SECONDS)))
RECIPE_SEARCH_NUMBER: Final[int] = int(os.getenv('RECIPE_SEARCH_NUMBER', str(DEFAULT_RECIPE_SEARCH_NUMBER)))
RANDOM_RECIPES_NUMBER: Final[int] = int(os.getenv('RANDOM_RECIPES_NUMBER', str(DEFAULT_RANDOM_RECIPES_NUMBER)))

# Application Settings
APP_HOST: Final[str] = os.getenv('APP_HOST', '0.0.0.0')
APP_PORT: Final[int] = int(os.getenv('APP_PORT', '8000'))
DEBUG: Final[bool] = os.getenv('DEBUG', 'False').lower() == 'true'

# File Paths
BASE_DIR: Final[Path] = Path(__file__).parent.parent
DATA_DIR: Final[Path] = Path(os.getenv('FRIDGE_DATA_DIR', str(BASE_DIR / 'data'))).resolve()
