"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass
import os
from pathlib import Path

import dotenv

from src.domain.constants import DEFAULT_STORAGE_KEY
from src.infrastructure.logging.logger import get_app_logger
from src.utils.utils import get_project_root


DEFAULT_GEMINI_MODEL = "gemini-3-flash-preview"


@dataclass(frozen=True)
class DashboardSettings:
    """Settings for persistence and the extraction service.

    Attributes:
        db_url: SQLAlchemy URL of the local key-value database.
        storage_key: Key under which the log history is stored.
        gemini_api_key: API key for the Gemini extraction service.
        gemini_model: Gemini model used for extraction.
    """

    db_url: str
    storage_key: str = DEFAULT_STORAGE_KEY
    gemini_api_key: str | None = None
    gemini_model: str = DEFAULT_GEMINI_MODEL

    @classmethod
    def from_env(cls) -> "DashboardSettings":
        """Build settings from environment variables (and ``.env``).

        Returns:
            DashboardSettings: Settings sourced from the environment.
        """
        dotenv.load_dotenv()
        db_url = os.getenv("AGROPULSE_DB_URL", "").strip()
        if not db_url:
            db_url = cls._default_db_url()
        storage_key = (
            os.getenv("AGROPULSE_STORAGE_KEY", "").strip()
            or DEFAULT_STORAGE_KEY
        )
        api_key = (
            os.getenv("GEMINI_API_KEY", "").strip()
            or os.getenv("API_KEY", "").strip()
            or None
        )
        if api_key is None:
            get_app_logger().warning(
                "GEMINI_API_KEY is not set; log extraction is unavailable"
            )
        model = os.getenv("GEMINI_MODEL", "").strip() or DEFAULT_GEMINI_MODEL
        return cls(
            db_url=db_url,
            storage_key=storage_key,
            gemini_api_key=api_key,
            gemini_model=model,
        )

    @staticmethod
    def _default_db_url() -> str:
        """Return a SQLite URL under the project ``data/`` directory."""
        data_dir: Path = get_project_root() / "data"
        data_dir.mkdir(parents=True, exist_ok=True)
        return f"sqlite:///{data_dir / 'agropulse.db'}"


__all__ = ["DashboardSettings", "DEFAULT_GEMINI_MODEL"]
