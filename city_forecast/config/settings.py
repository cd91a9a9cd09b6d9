"""Configuration settings for the forecast service."""

from dataclasses import dataclass, field
from pathlib import Path
import os

from dotenv import load_dotenv


load_dotenv()


@dataclass
class Settings:
    """Application settings."""

    cache_dir: Path = field(
        default_factory=lambda: Path(
            os.getenv(
                "CITY_FORECAST_CACHE_DIR",
                Path(__file__).parent.parent.parent / "cache",
            )
        )
    )
    request_timeout: float = field(
        default_factory=lambda: float(os.getenv("CITY_FORECAST_REQUEST_TIMEOUT", "10"))
    )
    query_timeout: float = field(
        default_factory=lambda: float(os.getenv("CITY_FORECAST_QUERY_TIMEOUT", "20"))
    )
    db_path: Path = field(init=False)

    def __post_init__(self) -> None:
        self.cache_dir = Path(self.cache_dir)
        self.cache_dir.mkdir(parents=True, exist_ok=True)
        self.db_path = self.cache_dir / "cities.db"

    def validate(self) -> None:
        """Validate required settings."""
        if self.request_timeout <= 0:
            raise ValueError(
                f"CITY_FORECAST_REQUEST_TIMEOUT must be positive, got {self.request_timeout}"
            )
        if self.query_timeout <= 0:
            raise ValueError(
                f"CITY_FORECAST_QUERY_TIMEOUT must be positive, got {self.query_timeout}"
            )
