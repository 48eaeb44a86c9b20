"""Configuration management for the DevSketch code generator."""

from dotenv import load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Load environment variables
load_dotenv()


class Config(BaseSettings):
    """Configuration class for the DevSketch pipeline."""

    model_config = SettingsConfigDict(
        env_prefix="DEVSKETCH_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",  # Ignore unexpected env vars rather than raising errors
    )

    # Reference canvas (iPhone logical points)
    reference_width: int = Field(default=375, description="Canvas width used to size widgets")
    reference_height: int = Field(default=812, description="Canvas height used to size widgets")

    # Layout heuristics
    row_threshold: float = Field(default=0.08, description="Normalized Y distance that keeps detections in one row")
    row_strategy: str = Field(default="drifting", description="Row grouping strategy: drifting | anchored")
    column_gap: int = Field(default=16, description="Vertical spacer emitted after every column child")

    # Generation
    default_page_name: str = Field(default="GeneratedPage")
    preview_limit: int = Field(default=5, description="Detections rendered by the quick preview")
    min_confidence: float = Field(default=0.3, description="Detections below this are dropped on import")

    # Framework Configuration
    log_level: str = Field(default="INFO")
    log_to_file: bool = Field(default=False)
    logs_dir: str = Field(default="logs")

    def validate_config(self) -> bool:
        """Validate configuration values."""
        if self.reference_width <= 0 or self.reference_height <= 0:
            raise ValueError("Reference canvas dimensions must be positive")

        if self.row_threshold < 0 or self.row_threshold > 1:
            raise ValueError("Row threshold must be between 0 and 1")

        if self.row_strategy.lower() not in ("drifting", "anchored"):
            raise ValueError(f"Unknown row strategy: {self.row_strategy}")

        if self.min_confidence < 0 or self.min_confidence > 1:
            raise ValueError("Minimum confidence must be between 0 and 1")

        if self.preview_limit < 0 or self.column_gap < 0:
            raise ValueError("Preview limit and column gap cannot be negative")

        return True


# Global configuration instance
config = Config()
