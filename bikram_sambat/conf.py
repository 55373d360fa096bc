"""
App settings, read from the BIKRAM_SAMBAT dict in Django settings

    BIKRAM_SAMBAT = {
        'TIME_ZONE': 'Asia/Kathmandu',
        'CACHE_TIMEOUT': 3600,
        'DEFAULT_FORMAT': 'YYYY-MM-DD',
    }
"""
import os

from django.conf import ENVIRONMENT_VARIABLE, settings


DEFAULTS = {
    # None means the host's local wall clock decides the day boundary
    'TIME_ZONE': None,
    # Seconds; None disables caching in bikram_sambat.utils
    'CACHE_TIMEOUT': 3600,
    'DEFAULT_FORMAT': 'YYYY-MM-DD',
}


def settings_available() -> bool:
    """True inside a Django project, False when the engine is used standalone"""
    return settings.configured or bool(os.environ.get(ENVIRONMENT_VARIABLE))


def get_setting(name: str):
    """Return a BIKRAM_SAMBAT setting, falling back to DEFAULTS"""
    if name not in DEFAULTS:
        raise KeyError(f"Unknown bikram_sambat setting: {name}")
    if not settings_available():
        return DEFAULTS[name]
    overrides = getattr(settings, 'BIKRAM_SAMBAT', None) or {}
    return overrides.get(name, DEFAULTS[name])
