"""Configuration management"""
import os
import yaml
from pathlib import Path
from typing import Dict, Any
from dotenv import load_dotenv

load_dotenv()

DEFAULT_CONFIG_PATH = "config/config.yaml"


class Config:
    """Engine configuration manager

    Values here are defaults only. Every engine function takes its limits as
    explicit arguments, so callers can bypass the file entirely.
    """

    def __init__(self, config_path: str = None):
        self.config_path = Path(config_path or os.getenv("MATCH_ENGINE_CONFIG", DEFAULT_CONFIG_PATH))
        self._config = self._load_config()

    def _load_config(self) -> Dict[str, Any]:
        """Load configuration from YAML file"""
        if self.config_path.exists():
            with open(self.config_path, 'r') as f:
                return yaml.safe_load(f) or {}
        return {}

    @property
    def log_level(self) -> str:
        return os.getenv("LOG_LEVEL", self.get("logging.level", "INFO"))

    @property
    def recommendation_limit(self) -> int:
        return self.get("recommendation.limit", 20)

    @property
    def recommendation_min_score(self) -> int:
        return self.get("recommendation.min_score", 30)

    @property
    def candidate_job_cap(self) -> int:
        return self.get("recommendation.candidate_job_cap", 200)

    @property
    def history_limit(self) -> int:
        return self.get("behavior.history_limit", 50)

    @property
    def top_skills(self) -> int:
        return self.get("behavior.top_skills", 10)

    @property
    def similar_candidates_limit(self) -> int:
        return self.get("collaborative.similar_limit", 10)

    @property
    def collaborative_job_limit(self) -> int:
        return self.get("collaborative.job_limit", 50)

    @property
    def ranking_min_score(self) -> int:
        return self.get("ranking.min_score", 40)

    @property
    def page_size(self) -> int:
        return self.get("ranking.page_size", 20)

    @property
    def skill_synonyms(self) -> Dict[str, str]:
        return self.get("skills.synonyms", {})

    @property
    def max_workers(self) -> int:
        return self.get("performance.max_workers", 10)

    def get(self, key: str, default: Any = None) -> Any:
        """Get configuration value by dot notation"""
        keys = key.split('.')
        value = self._config
        for k in keys:
            if isinstance(value, dict):
                value = value.get(k)
            else:
                return default
        return value if value is not None else default

# Global config instance
config = Config()
