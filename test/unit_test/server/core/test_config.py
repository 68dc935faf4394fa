"""Unit tests for server configuration settings model.

Tests verify that the Settings model correctly binds environment variables
from the .env.example file and that the grouped configuration views work as expected.
"""

from pathlib import Path

import pytest
from pydantic import ValidationError

from promogame.server.core.config import (
    AdminConfig,
    CORSConfig,
    Settings,
    SupabaseConfig,
    get_settings,
    settings,
)


@pytest.fixture
def env_example_path() -> Path:
    """Get path to .env.example file."""
    return Path(__file__).resolve().parent.parent.parent.parent.parent / ".env.example"


@pytest.fixture
def env_example_vars(env_example_path: Path) -> dict[str, str]:
    """Parse .env.example file and return environment variables."""
    env_vars = {}
    with open(env_example_path) as f:
        for line in f:
            line = line.strip()
            # Skip comments and empty lines
            if not line or line.startswith("#"):
                continue
            if "=" in line:
                key, value = line.split("=", 1)
                env_vars[key.strip()] = value.strip()
    return env_vars


class TestSettingsBinding:
    """Test Settings model environment variable binding."""

    def test_env_example_values_bind(self, env_example_vars: dict[str, str], monkeypatch):
        for key, value in env_example_vars.items():
            monkeypatch.setenv(key, value)

        bound = Settings(_env_file=None)

        assert bound.server_host == env_example_vars["PROMOGAME_SERVER_HOST"]
        assert bound.server_port == int(env_example_vars["PROMOGAME_SERVER_PORT"])
        assert bound.log_level.upper() == env_example_vars["PROMOGAME_LOG_LEVEL"].upper()
        assert bound.store_backend == env_example_vars["STORE_BACKEND"]
        assert bound.database_url == env_example_vars["DATABASE_URL"]
        assert bound.supabase_url == env_example_vars["SUPABASE_URL"]
        assert bound.admin_email == env_example_vars["ADMIN_EMAIL"]
        assert bound.approval_game_chances == int(env_example_vars["APPROVAL_GAME_CHANCES"])

    def test_defaults(self, monkeypatch):
        for key in ("STORE_BACKEND", "ADMIN_EMAIL", "ADMIN_PASSWORD", "ADMIN_API_KEY", "APPROVAL_GAME_CHANCES", "STATIC_DIR"):
            monkeypatch.delenv(key, raising=False)

        bound = Settings(_env_file=None)

        assert bound.store_backend == "sql"
        assert bound.admin_email is None
        assert bound.admin_password is None
        assert bound.admin_api_key is None
        assert bound.approval_game_chances == 3
        assert bound.static_dir is None
        assert bound.cors_origins == ["*"]
        assert bound.cors_allow_credentials is False

    def test_list_values_parse_from_json(self, monkeypatch):
        monkeypatch.setenv("CORS_ORIGINS", '["https://game.example.com"]')

        assert Settings(_env_file=None).cors_origins == ["https://game.example.com"]

    def test_invalid_store_backend_rejected(self, monkeypatch):
        monkeypatch.setenv("STORE_BACKEND", "mongo")

        with pytest.raises(ValidationError):
            Settings(_env_file=None)

    def test_negative_approval_chances_rejected(self, monkeypatch):
        monkeypatch.setenv("APPROVAL_GAME_CHANCES", "-1")

        with pytest.raises(ValidationError):
            Settings(_env_file=None)

    def test_field_names_accepted_as_init_arguments(self):
        bound = Settings(_env_file=None, store_backend="rest", password_salt="pepper")

        assert bound.store_backend == "rest"
        assert bound.password_salt == "pepper"


class TestGroupedConfigs:
    def test_supabase_view(self):
        bound = Settings(_env_file=None, supabase_url="http://mock.supabase.test", supabase_key="k", supabase_timeout=3)

        supabase = bound.supabase

        assert isinstance(supabase, SupabaseConfig)
        assert supabase.url == "http://mock.supabase.test"
        assert supabase.key == "k"
        assert supabase.timeout == 3.0

    def test_admin_view(self):
        bound = Settings(_env_file=None, admin_email="a@b.c", admin_password="pw", admin_api_key="key")

        admin = bound.admin

        assert isinstance(admin, AdminConfig)
        assert (admin.email, admin.password, admin.api_key) == ("a@b.c", "pw", "key")

    def test_admin_view_follows_mutation(self):
        bound = Settings(_env_file=None, admin_api_key=None)
        bound.admin_api_key = "rotated"

        assert bound.admin.api_key == "rotated"

    def test_cors_view(self):
        bound = Settings(_env_file=None, cors_origins=["http://localhost:3000"], cors_allow_credentials=True)

        cors = bound.cors

        assert isinstance(cors, CORSConfig)
        assert cors.origins == ["http://localhost:3000"]
        assert cors.allow_credentials is True
        assert "X-Admin-Key" in cors.allow_headers

    def test_grouped_model_binds_by_alias(self):
        config = AdminConfig.model_validate({"ADMIN_EMAIL": "x@y.z"})

        assert config.email == "x@y.z"
        assert config.password is None


def test_get_settings_returns_module_singleton():
    assert get_settings() is settings
