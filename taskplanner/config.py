# taskplanner/config.py
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore", populate_by_name=True)

    # app
    app_env: str = Field("dev", alias="APP_ENV")
    app_version: str = Field("0.1.0", alias="APP_VERSION")
    cors_allow_origins: str = Field(
        "http://localhost:3000,http://localhost:5173", alias="CORS_ALLOW_ORIGINS"
    )

    # DB
    database_url: str = Field("", alias="DATABASE_URL")

    # auth (token issuing lives elsewhere; we only verify)
    jwt_secret_key: str = Field("taskplanner-secret-key", alias="JWT_SECRET_KEY")
    jwt_algorithm: str = Field("HS256", alias="JWT_ALGORITHM")

    # LLM / OpenAI
    openai_api_key: str = Field("", alias="OPENAI_API_KEY")
    openai_base_url: str = Field("", alias="OPENAI_BASE_URL")
    llm_model: str = Field("gpt-4o-mini", alias="LLM_MODEL")
    llm_temperature: float = Field(0.7, alias="LLM_TEMPERATURE")
    llm_max_tokens: int = Field(800, alias="LLM_MAX_TOKENS")

    # status rules are checked against stored fields overlaid with the patch
    validate_effective_record: bool = Field(False, alias="TASK_VALIDATE_EFFECTIVE_RECORD")

    @property
    def origins(self) -> list[str]:
        return [o.strip() for o in self.cors_allow_origins.split(",") if o.strip()]


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
