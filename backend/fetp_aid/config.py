from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    COEFFICIENTS_FILE: str = ""
    CORS_ORIGINS: list[str] = ["http://localhost:3000"]
    LOG_LEVEL: str = "INFO"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
