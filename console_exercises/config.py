"""Configuration, constants, and the shared console for the exercises."""

import logging
from typing import List, Optional

import dotenv
from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from rich.console import Console

dotenv.load_dotenv()

# Color scheme
COLORS = {
    "primary": "#10b981",
    "dim": "#6b7280",
    "success": "#34d399",
    "error": "#f87171",
    "warning": "#fbbf24",
}

DEFAULT_STOCK_PRICES = [100.5, 102.3, 101.7, 105.0, 103.2, 107.8, 106.4, 108.9, 104.1, 109.5]
DEFAULT_TARGET_PRICE = 105.0
MAX_STUDENTS = 100

# Rich console instance
console = Console(highlight=False, soft_wrap=True)


class LibraryConfig(BaseModel):
    """Configuration for the library inventory program."""

    welcome: str = Field(
        default="********************Welcome to the UoP Library!********************",
        description="Banner printed when the library program starts",
    )


class StudentConfig(BaseModel):
    """Configuration for the student record manager."""

    max_students: int = Field(default=MAX_STUDENTS, ge=1, description="Fixed capacity of the registry")


class StockConfig(BaseModel):
    """Configuration for the stock statistics report."""

    prices: List[float] = Field(
        default_factory=lambda: list(DEFAULT_STOCK_PRICES),
        description="Price samples to analyze",
    )
    target: float = Field(default=DEFAULT_TARGET_PRICE, description="Price whose occurrences are counted")


class ExercisesConfig(BaseModel):
    """Configuration for all programs."""

    library: LibraryConfig = Field(default_factory=LibraryConfig)
    students: StudentConfig = Field(default_factory=StudentConfig)
    stocks: StockConfig = Field(default_factory=StockConfig)
    verbose: bool = Field(default=False, description="Enable verbose logging")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="EXERCISES_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    library_welcome: Optional[str] = Field(default=None)
    max_students: int = Field(default=MAX_STUDENTS, ge=1)
    stock_prices: List[float] = Field(default_factory=lambda: list(DEFAULT_STOCK_PRICES))
    stock_target: float = Field(default=DEFAULT_TARGET_PRICE)
    verbose: bool = Field(default=False)

    def to_exercises_config(self) -> ExercisesConfig:
        """Convert settings to the program configuration."""
        library = LibraryConfig(welcome=self.library_welcome) if self.library_welcome else LibraryConfig()
        return ExercisesConfig(
            library=library,
            students=StudentConfig(max_students=self.max_students),
            stocks=StockConfig(prices=self.stock_prices, target=self.stock_target),
            verbose=self.verbose,
        )


def load_config_from_yaml(path: str) -> ExercisesConfig:
    """Load program configuration from a YAML file."""
    import yaml

    with open(path, "r") as f:
        data = yaml.safe_load(f)
    return ExercisesConfig(**(data or {}))


def load_config_from_env() -> ExercisesConfig:
    """Load program configuration from environment variables."""
    settings = Settings()

    logger = logging.getLogger(__name__)
    logger.debug(f"Loaded student capacity: {settings.max_students}")
    logger.debug(f"Loaded {len(settings.stock_prices)} stock price samples")

    return settings.to_exercises_config()
