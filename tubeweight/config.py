from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    APP_NAME: str = "Steel Tube Weight Calculator"
    LOG_LEVEL: str = "INFO"

    # Presentation only: the engine always works in full precision
    DISPLAY_DECIMALS: int = 2

    # Defaults applied when a request omits its unit selectors
    DEFAULT_UNIT: str = "mm"
    DEFAULT_LENGTH_UNIT: str = "m"

    CORS_ORIGINS: list[str] = ["*"]

    # Steel density is a constant in weights.py, not a setting

    class Config:
        env_file = ".env"


settings = Settings()
