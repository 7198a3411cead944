from pydantic import Field
from pydantic_settings import BaseSettings

DEV_JWT_SECRET = "devsecret"

# PyJWT warns about HMAC keys shorter than this
MIN_SECRET_BYTES = 32


class AuthSettings(BaseSettings):
    """
    Bearer token settings.
    Loaded from .env file with exact variable name matching.
    """

    jwt_secret: str = Field(DEV_JWT_SECRET, alias="JWT_SECRET")
    jwt_algorithm: str = Field("HS256", alias="JWT_ALGORITHM")
    access_token_expire_minutes: int = Field(60 * 24 * 7, alias="ACCESS_TOKEN_EXPIRE_MINUTES")

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }

    @property
    def has_weak_secret(self) -> bool:
        """True for the built-in dev secret or a key too short for HMAC."""
        return (
            self.jwt_secret == DEV_JWT_SECRET
            or len(self.jwt_secret.encode("utf-8")) < MIN_SECRET_BYTES
        )
