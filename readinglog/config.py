"""
Environment-driven settings for scripts and the integrated pipeline.

Environment variables:
    READING_GOAL_BOOKS   yearly book target (default 24)
    READING_GOAL_PAGES   yearly page target (default 7500)
    LOG_LEVEL            logging level name (default INFO)
    IMPORT_DEDUPE        skip re-imported books by title/author/date (default false)
    DATA_BUCKET          S3 bucket for collections; local JSON files when unset
    STORE_PATH           directory for local JSON collections
    RECENT_BOOKS_COUNT   size of the recent books list (default 5)
    TOP_RATED_COUNT      size of the top rated list (default 4)
"""

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from .errors import ConfigError
from .goals import DEFAULT_BOOKS_TARGET, DEFAULT_PAGES_TARGET, make_goal_config
from .models.views import GoalConfig
from .stores import CollectionStore, JSONFileCollectionStore, S3CollectionStore

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _int_setting(env: Mapping[str, str], name: str, default: int) -> int:
    raw = env.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ConfigError(f"{name} must be an integer, got {raw!r}")


def _bool_setting(env: Mapping[str, str], name: str, default: bool) -> bool:
    raw = env.get(name)
    if raw is None or raw.strip() == "":
        return default
    return raw.lower().strip() in ["true", "yes", "1", "y"]


@dataclass(frozen=True)
class Settings:
    books_target: int = DEFAULT_BOOKS_TARGET
    pages_target: int = DEFAULT_PAGES_TARGET
    log_level: str = "INFO"
    import_dedupe: bool = False
    data_bucket: Optional[str] = None
    store_path: str = "data/collections"
    recent_books_count: int = 5
    top_rated_count: int = 4

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "Settings":
        env = os.environ if env is None else env
        settings = cls(
            books_target=_int_setting(env, 'READING_GOAL_BOOKS', DEFAULT_BOOKS_TARGET),
            pages_target=_int_setting(env, 'READING_GOAL_PAGES', DEFAULT_PAGES_TARGET),
            log_level=env.get('LOG_LEVEL', 'INFO').upper(),
            import_dedupe=_bool_setting(env, 'IMPORT_DEDUPE', False),
            data_bucket=env.get('DATA_BUCKET') or None,
            store_path=env.get('STORE_PATH', 'data/collections'),
            recent_books_count=_int_setting(env, 'RECENT_BOOKS_COUNT', 5),
            top_rated_count=_int_setting(env, 'TOP_RATED_COUNT', 4),
        )
        # Fail early on bad thresholds
        settings.goal_config()
        return settings

    def goal_config(self) -> GoalConfig:
        return make_goal_config(self.books_target, self.pages_target)

    def build_store(self) -> CollectionStore:
        if self.data_bucket:
            return S3CollectionStore(self.data_bucket)
        return JSONFileCollectionStore(self.store_path)
