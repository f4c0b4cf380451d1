import os


def get_settings_module() -> str:
    # Pick the settings module from APP_ENV, defaulting to development
    env = os.getenv("APP_ENV", "development").lower()

    if env in {"prod", "production"}:
        return "classroom_attendance.config.production"

    if env in {"test", "testing"}:
        return "classroom_attendance.config.testing"

    return "classroom_attendance.config.development"
