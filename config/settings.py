"""Application settings and configuration."""

from pathlib import Path
from dataclasses import dataclass, field
import os
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

# Project root directory
PROJECT_ROOT = Path(__file__).parent.parent


@dataclass
class CatalogAPIConfig:
    """Catalog API connection settings."""

    base_url: str = field(
        default_factory=lambda: os.getenv("CATALOG_API_BASE_URL", "http://localhost:3000/api")
    )
    timeout: float = field(
        default_factory=lambda: float(os.getenv("CATALOG_API_TIMEOUT_SECONDS", "10"))
    )


@dataclass
class BrowserConfig:
    """Catalog browser display settings."""

    grid_columns: int = field(
        default_factory=lambda: int(os.getenv("CATALOG_GRID_COLUMNS", "4"))
    )
    item_name: str = "products"


@dataclass
class AppConfig:
    """Application configuration settings."""

    name: str = field(default_factory=lambda: os.getenv("APP_NAME", "StackShop"))
    version: str = field(default_factory=lambda: os.getenv("APP_VERSION", "1.0.0"))
    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO"))


@dataclass
class Config:
    """Main configuration container."""

    api: CatalogAPIConfig = field(default_factory=CatalogAPIConfig)
    browser: BrowserConfig = field(default_factory=BrowserConfig)
    app: AppConfig = field(default_factory=AppConfig)


# Global config instance
config = Config()
