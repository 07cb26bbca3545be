from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {"env_prefix": "AIRELAY_"}

    default_api_url: str = ""
    cors_origins: list[str] = ["*"]
    debug: bool = False


settings = Settings()
