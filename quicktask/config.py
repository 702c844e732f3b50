from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    app_env: str = "dev"
    timezone: str = "UTC"
    log_level: str = "INFO"

    default_title: str = "New Task"
    max_input_length: int = 1000
    max_title_length: int = 200
    max_description_length: int = 1000

    model_config = SettingsConfigDict(env_file=".env", env_prefix="", case_sensitive=False)


settings = Settings()
