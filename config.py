"""
Configuration settings for the Textract debug overlay tool
"""
from pydantic_settings import BaseSettings
from pathlib import Path
from typing import List, Optional

from textract_debug.textract import TextractAnalyzer


class Settings(BaseSettings):
    """Application settings loaded from environment variables"""

    # AWS
    aws_region: str = "us-east-1"
    aws_profile: Optional[str] = None

    # Textract
    feature_types: List[str] = ["FORMS"]

    # Rendering
    debug_line_width: int = 4
    image_fetch_timeout: float = 30.0

    # Output Settings
    output_dir: Path = Path("./output")

    class Config:
        env_file = ".env"
        case_sensitive = False

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        self.output_dir.mkdir(exist_ok=True, parents=True)


def build_analyzer(config: Settings) -> TextractAnalyzer:
    """Construct a TextractAnalyzer from settings"""
    return TextractAnalyzer(
        region_name=config.aws_region,
        profile_name=config.aws_profile or None,
        feature_types=config.feature_types
    )


# Global settings instance
settings = Settings()
