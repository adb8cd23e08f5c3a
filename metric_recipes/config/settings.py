"""
Configuration Management
"""
import json
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ConversionOptions(BaseModel):
    """Options controlling how recipe text is converted."""
    # Annotate teaspoons/tablespoons with a metric amount: '1 teaspoon (4g)'
    convert_spoons: bool = True

    # Follow converted oven temperatures with the gas mark
    gas_mark: bool = False

    # Keep the imperial text after the conversion: '120g (1 cup)'
    print_original: bool = False

    # Abort the whole conversion on the first measure that fails
    fail_fast: bool = False

    # Words after a measure used to identify the ingredient
    context_words: int = Field(default=5, ge=0, le=20)

    @classmethod
    def from_flags(cls, flags: Mapping[str, bool]) -> 'ConversionOptions':
        """Build options from host-style names such as 'convert-spoons'."""
        return cls(**{name.replace('-', '_'): value for name, value in flags.items()})

    def to_flags(self) -> Dict[str, Any]:
        return {name.replace('_', '-'): value for name, value in self.model_dump().items()}


class Settings(BaseSettings):
    """Main application settings."""

    model_config = SettingsConfigDict(
        env_prefix="METRIC_RECIPES_",
        env_nested_delimiter="__",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Core settings
    app_name: str = "Metric Recipes"
    version: str = "1.0.0"
    debug: bool = False
    log_level: str = "INFO"

    # Component settings
    conversion: ConversionOptions = Field(default_factory=ConversionOptions)

    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v):
        """Validate log level."""
        valid_levels = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']
        if v.upper() not in valid_levels:
            raise ValueError(f"Log level must be one of {valid_levels}")
        return v.upper()

    @classmethod
    def load(cls, config_file: Optional[Path] = None) -> 'Settings':
        """Load settings from file and environment."""
        # Load environment variables
        load_dotenv()

        # Load from config file if provided
        if config_file and config_file.exists():
            with open(config_file, 'r') as f:
                config_data = json.load(f)
            return cls(**config_data)

        # Load from default locations
        default_config_paths = [
            Path("config/settings.json"),
            Path("settings.json")
        ]

        for config_path in default_config_paths:
            if config_path.exists():
                with open(config_path, 'r') as f:
                    config_data = json.load(f)
                return cls(**config_data)

        # Return with environment variables and defaults
        return cls()

    def save(self, config_file: Path):
        """Save settings to file."""
        config_file.parent.mkdir(parents=True, exist_ok=True)
        with open(config_file, 'w') as f:
            json.dump(self.model_dump(), f, indent=2, default=str)

