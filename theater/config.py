from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    model_config = SettingsConfigDict(env_file=".env", env_prefix="THEATER_")

    app_name: str = "Theater Statements"
    debug: bool = False

    log_level: str = "INFO"

    # Prefix used when rendering amounts on statements
    currency_symbol: str = "$"


settings = Settings()


# =============================================================================
# PRICING POLICY (amounts in cents)
# =============================================================================

TRAGEDY_BASE_AMOUNT = 40000
TRAGEDY_AUDIENCE_THRESHOLD = 30
TRAGEDY_OVER_BASE_CAPACITY_PER_PERSON = 1000

COMEDY_BASE_AMOUNT = 30000
COMEDY_AUDIENCE_THRESHOLD = 20
COMEDY_OVER_BASE_CAPACITY_AMOUNT = 10000
COMEDY_OVER_BASE_CAPACITY_PER_PERSON = 500
COMEDY_AMOUNT_PER_AUDIENCE = 300


# =============================================================================
# VOLUME CREDITS
# =============================================================================

# Seats above this count earn one credit each
BASE_VOLUME_CREDIT_THRESHOLD = 30

# Comedies earn one extra credit for every this many attendees
COMEDY_EXTRA_VOLUME_FACTOR = 5


# Cents per currency unit
PERCENT_FACTOR = 100
