"""
Parser configuration.
"""

import os
from dataclasses import dataclass

# Repository root (parent of src/)
ROOT_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))

DEFAULT_ACT_INDEX_PATH = os.path.join(ROOT_DIR, "data", "act_index.yaml")


@dataclass
class Config:
    """Global configuration for the legislation parser."""

    # Content limits (per provision)
    max_content_length: int = 8000  # Hard cap on normalized content
    min_content_length: int = 10    # Content at or below this is a false positive

    # Act index (identity records for source-backed acts)
    act_index_path: str = DEFAULT_ACT_INDEX_PATH

    @classmethod
    def from_env(cls) -> "Config":
        """Loads configuration from environment variables."""
        return cls(
            max_content_length=int(os.getenv("MAX_CONTENT_LENGTH", "8000")),
            min_content_length=int(os.getenv("MIN_CONTENT_LENGTH", "10")),
            act_index_path=os.getenv("ACT_INDEX_PATH", DEFAULT_ACT_INDEX_PATH),
        )


# Singleton
config = Config.from_env()
