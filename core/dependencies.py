from core.settings import PayPalSettings

# Settings singleton
_settings = None


def get_settings() -> PayPalSettings:
    """Return the process-wide PayPal settings."""
    assert (
        _settings is not None
    ), "Settings not initialized. Make sure init_settings() was called."
    return _settings


def init_settings(**overrides) -> PayPalSettings:
    """Initialize settings singleton."""
    global _settings
    _settings = PayPalSettings(**overrides)
    return _settings


def clear_settings():
    """Clear settings singleton."""
    global _settings
    _settings = None
