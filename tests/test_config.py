import pytest

from employee_service.config import Settings, get_settings


def test_defaults(monkeypatch):
    monkeypatch.delenv('STORAGE_BACKEND', raising=False)
    monkeypatch.delenv('API_PREFIX', raising=False)

    settings = Settings(_env_file=None)

    assert settings.MONGODB_URI == 'mongodb://localhost:27017'
    assert settings.MONGODB_DB_NAME == 'employee_service'
    assert settings.STORAGE_BACKEND == 'mongo'
    assert settings.API_PREFIX == '/api'
    assert settings.SEED_SAMPLE_DATA is False


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv('MONGODB_URI', 'mongodb://db:27017')
    monkeypatch.setenv('STORAGE_BACKEND', 'memory')
    monkeypatch.setenv('PORT', '9000')

    settings = Settings(_env_file=None)

    assert settings.MONGODB_URI == 'mongodb://db:27017'
    assert settings.STORAGE_BACKEND == 'memory'
    assert settings.PORT == 9000


def test_unknown_backend_rejected(monkeypatch):
    monkeypatch.setenv('STORAGE_BACKEND', 'redis')

    with pytest.raises(ValueError):
        Settings(_env_file=None)


def test_get_settings_is_cached():
    assert get_settings() is get_settings()
