from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    model_config = SettingsConfigDict(env_file=".env")

    app_name: str = "Cardsmith"
    debug: bool = False

    # Mock/live switch: True serves every call from the in-memory store,
    # False sends it to the backend at api_base_url
    use_mock_api: bool = True

    api_base_url: str = "http://localhost:8000/api"
    api_timeout: float = 10.0

    # Multiplier for the simulated network delay of the mock API (0 disables it)
    mock_latency_scale: float = 1.0

    # Owner assigned to games and decks created without authentication
    default_creator_id: str = "user_001"


settings = Settings()


# =============================================================================
# LIST DEFAULTS
# =============================================================================

DEFAULT_PAGE = 1

DEFAULT_CARD_PAGE_SIZE = 20

DEFAULT_DECK_PAGE_SIZE = 10
