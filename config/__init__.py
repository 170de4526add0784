import os

# APP_ENV value -> settings module; anything unlisted falls back to development
_SETTINGS_BY_ENV = {
    "dev": "config.development",
    "development": "config.development",
    "test": "config.testing",
    "testing": "config.testing",
    "prod": "config.production",
    "production": "config.production",
}


def get_settings_module() -> str:
    env = os.getenv("APP_ENV", "development").strip().lower()
    return _SETTINGS_BY_ENV.get(env, "config.development")
