from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


_PROJECT_ROOT = Path(__file__).resolve().parents[3]
_ENV_PATH = _PROJECT_ROOT / '.env'
_ENV_FILE = _ENV_PATH if _ENV_PATH.exists() else (_PROJECT_ROOT / '.env.example')


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=str(_ENV_FILE),
        env_ignore_empty=True,
        extra='ignore',
    )

    PROJECT_NAME: str = 'Cinema Booking System'
    VERSION: str = '0.1.0'
    DEBUG: bool = True  # Set to False in production
    SERVICE_NAME: str = 'cinema'

    # Add-on surcharges (per ticket)
    POPCORN_PRICE: float = 8.0
    SODA_PRICE: float = 4.0

    # Payment
    CREDIT_CARD_MIN_TOKEN_LENGTH: int = 4

    # Reviews (closed range)
    REVIEW_MIN_RATING: float = 1
    REVIEW_MAX_RATING: float = 5

    # Bootstrap
    SEED_DEMO_DATA: bool = True

    @field_validator('POPCORN_PRICE', 'SODA_PRICE')
    @classmethod
    def validate_surcharge(cls, v: float) -> float:
        if v < 0:
            raise ValueError('Add-on surcharge cannot be negative')
        return v


settings = Settings()  # type: ignore
