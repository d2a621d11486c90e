from fastapi import Request
from pydantic import field_validator
from pydantic_settings import BaseSettings

DEFAULT_ADMIN_PASS = "satvik123"


class Settings(BaseSettings):
    PROJECT_NAME: str = "LabDesk Intake"

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 3000
    ENVIRONMENT: str = "development"

    # Security
    ADMIN_PASS: str = DEFAULT_ADMIN_PASS

    # Storage
    DATA_DIR: str = "data"
    STATIC_DIR: str = "public"

    # Logging
    LOG_LEVEL: str = "INFO"
    ERROR_LOG_PATH: str = "logs/errors.log"

    class Config:
        env_file = ".env"
        case_sensitive = True

    @field_validator("ADMIN_PASS", mode="before")
    @classmethod
    def blank_admin_pass_uses_default(cls, value):
        # ADMIN_PASS= (empty) behaves like an unset variable
        if value is None or (isinstance(value, str) and not value.strip()):
            return DEFAULT_ADMIN_PASS
        return value

    @property
    def uses_default_admin_pass(self) -> bool:
        return self.ADMIN_PASS == DEFAULT_ADMIN_PASS


def get_settings(request: Request) -> Settings:
    return request.app.state.settings
