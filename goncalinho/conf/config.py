"""Configuration module for the backend."""

import logging
import os
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv

load_dotenv()

logger = logging.getLogger(__name__)


def resolve_data_dir(system_dir: Path, local_dir: Path) -> Path:
    """Pick the directory holding the JSON document and the uploads.

    The system directory wins when ``/var/www`` exists and the directory can be
    created or is writable. Anything else falls back to the local directory.

    Args:
        system_dir: Preferred deployment directory
        local_dir: Directory next to the sources, used in development

    Returns:
        Path: The data directory to use
    """
    if not system_dir.parent.exists():
        return local_dir

    if not system_dir.exists():
        try:
            system_dir.mkdir(parents=True, exist_ok=True)
            return system_dir
        except OSError as e:
            logger.warning(
                f"Could not create system data dir, falling back to local: {e}"
            )
            return local_dir

    if os.access(system_dir, os.W_OK):
        return system_dir

    logger.warning("System data dir not accessible, using local.")
    return local_dir


class ConfigMeta(type):
    """Metaclass to prevent direct instantiation and enforce singleton attributes."""

    def __call__(cls, *args: object, **kwargs: object) -> None:
        """Prevent direct instantiation."""
        raise TypeError("Config cannot be instantiated directly. Use class attributes.")


class Config(metaclass=ConfigMeta):
    """Singleton configuration class. Access attributes directly via the class."""

    # =========================================================================
    # Path Configuration
    # =========================================================================
    BASE_DIR: Path = Path(__file__).parent.parent.parent
    SYSTEM_DATA_DIR: Path = Path("/var/www/goncalinho_data")
    LOCAL_DATA_DIR: Path = BASE_DIR / "data"
    DATA_DIR: Path = (
        Path(os.environ["DATA_DIR"])
        if os.getenv("DATA_DIR")
        else resolve_data_dir(SYSTEM_DATA_DIR, LOCAL_DATA_DIR)
    )
    UPLOAD_DIR: Path = DATA_DIR / "uploads"
    DB_FILE: Path = DATA_DIR / "db.json"
    FRONTEND_DIST_DIR: Path = BASE_DIR / "dist"

    # =========================================================================
    # Server Configuration
    # =========================================================================
    FLASK_HOST: str = os.getenv("HOST", "0.0.0.0")
    FLASK_PORT: int = int(os.getenv("PORT", "3001"))

    # =========================================================================
    # Context Assembly Configuration
    # =========================================================================
    MAX_CONTEXT_CHARS: int = 250_000  # ~60k tokens, fits the Flash free tier
    PER_FILE_CHAR_LIMIT: int = 30_000  # Characters of content sent per file
    MIN_KEYWORD_LENGTH: int = 4  # Shorter query tokens are ignored
    KEYWORD_SCORE: int = 10  # Points per keyword found in file metadata

    # =========================================================================
    # Answer Cache Configuration
    # =========================================================================
    ANSWER_CACHE_TTL_SECONDS: int = 3600

    # =========================================================================
    # Upload Configuration
    # =========================================================================
    DEFAULT_CATEGORY: str = "Geral"

    # =========================================================================
    # Locality Configuration
    # =========================================================================
    DEFAULT_LOCALITY: str = os.getenv("DEFAULT_LOCALITY", "São Gonçalo dos Campos")
    LOCALITY_ALIASES: List[str] = ["SGC", "Songa"]

    # =========================================================================
    # LLM Configuration
    # =========================================================================
    GEMINI_API_KEY: Optional[str] = os.getenv("GEMINI_API_KEY") or os.getenv(
        "API_KEY"
    )
    GEMINI_MODEL_NAME: str = os.getenv("GEMINI_MODEL_NAME", "gemini-2.5-flash")
    GEMINI_TEMPERATURE: float = 0.2
    GEMINI_MAX_TOKENS: Optional[int] = None  # Let the model decide
