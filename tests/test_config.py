"""Tests for environment settings."""
import pytest

from readinglog.config import Settings
from readinglog.errors import ConfigError
from readinglog.stores import JSONFileCollectionStore, S3CollectionStore


def test_defaults():
    """Test an empty environment gives the standard goals."""
    settings = Settings.from_env({})

    assert settings.goal_config().books_target == 24
    assert settings.goal_config().pages_target == 7500
    assert settings.import_dedupe is False
    assert isinstance(settings.build_store(), JSONFileCollectionStore)


def test_reads_environment():
    """Test variables override the defaults."""
    settings = Settings.from_env({
        "READING_GOAL_BOOKS": "12",
        "READING_GOAL_PAGES": "4000",
        "IMPORT_DEDUPE": "yes",
        "LOG_LEVEL": "debug",
        "RECENT_BOOKS_COUNT": "3",
    })

    assert settings.books_target == 12
    assert settings.pages_target == 4000
    assert settings.import_dedupe is True
    assert settings.log_level == "DEBUG"
    assert settings.recent_books_count == 3


def test_bucket_selects_s3_store(monkeypatch):
    """Test DATA_BUCKET switches storage to S3."""
    monkeypatch.setenv("AWS_DEFAULT_REGION", "us-east-1")

    store = Settings.from_env({"DATA_BUCKET": "reading-log"}).build_store()

    assert isinstance(store, S3CollectionStore)
    assert store.bucket == "reading-log"


@pytest.mark.parametrize("env", [
    {"READING_GOAL_BOOKS": "many"},
    {"READING_GOAL_PAGES": "0"},
])
def test_invalid_values_raise(env):
    """Test bad settings fail early."""
    with pytest.raises(ConfigError):
        Settings.from_env(env)
