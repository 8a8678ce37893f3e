from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    app_name: str = "Phangan Board"
    app_version: str = "0.1.0"
    api_url: str = "http://localhost:8080/api"
    site_url: str = "http://localhost:5173"
    request_timeout: float = 10.0
    default_page_size: int = 20
    log_level: str = "INFO"
    log_json: bool = False

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")


settings = Settings()
