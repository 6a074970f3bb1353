from vectorizer.config.exceptions import ConfigurationError
from vectorizer.config.settings import Settings


def require_credentials(settings: Settings) -> None:
    """Fail fast when external service endpoints or credentials are absent.

    Raises:
        ConfigurationError: naming every missing environment variable.
    """
    required = {
        "SUPABASE_URL": settings.supabase_url,
        "SUPABASE_KEY": settings.supabase_key,
        "VECTORIZE_API_URL": settings.vectorize_api_url,
    }
    missing = [name for name, value in required.items() if not value.strip()]
    if missing:
        raise ConfigurationError(
            f"Missing required configuration: {', '.join(missing)}"
        )
