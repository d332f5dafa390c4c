"""
Settings Tests

Unit tests for environment-derived configuration.
"""

import pytest
from pydantic import ValidationError

from docshelf.config.settings import INSECURE_SECRET_KEY, Settings


def _settings(**values) -> Settings:
    return Settings(_env_file=None, **values)


class TestSettings:
    """Tests for Settings validation and derived flags."""

    def test_production_requires_secret_key(self) -> None:
        """The placeholder secret is refused in production."""
        with pytest.raises(ValidationError, match="SECRET_KEY"):
            _settings(APP_ENV="production", SECRET_KEY=INSECURE_SECRET_KEY)

    def test_production_with_secret_key(self) -> None:
        """A real secret makes production settings valid."""
        config = _settings(APP_ENV="production", SECRET_KEY="s3cret-value")

        assert config.is_production
        assert not config.is_development

    def test_placeholder_allowed_in_development(self) -> None:
        """Local development runs with the placeholder secret."""
        config = _settings(APP_ENV="local", SECRET_KEY=INSECURE_SECRET_KEY)

        assert config.is_development

    def test_is_postgres(self) -> None:
        """Advisory-lock migrations only apply to PostgreSQL URLs."""
        assert _settings(DATABASE_URL="postgresql+asyncpg://u:p@db/docshelf").is_postgres
        assert not _settings(DATABASE_URL="sqlite+aiosqlite:///:memory:").is_postgres

    def test_search_limit_bounds(self) -> None:
        """Search result limits above 100 are rejected."""
        with pytest.raises(ValidationError):
            _settings(SEARCH_RESULT_LIMIT=500)
