# entityforms/core/config.py
import logging
from functools import lru_cache
from zoneinfo import ZoneInfo
from pydantic_settings import BaseSettings, SettingsConfigDict

LOGGER_NAMES = ("forms", "persistence")
DEFAULT_DATE_FORMAT = "%d/%m/%Y"

class Settings(BaseSettings):
    APP_NAME: str = "Seller Desk"
    APP_VERSION: str = "0.1.0"

    # MySQL
    MYSQL_HOST: str = "localhost"
    MYSQL_PORT: int = 3306
    MYSQL_DB: str = "coursejdbc"
    MYSQL_USER: str = "root"
    MYSQL_PASSWORD: str = "2023"
    MYSQL_CHARSET: str = "utf8mb4"
    # si viene, pisa la URL de MySQL (sqlite:// en tests)
    DATABASE_URL: str | None = None

    # formato explícito, nunca el locale global
    DECIMAL_PLACES: int = 2
    DATE_FORMAT: str = DEFAULT_DATE_FORMAT
    TIME_ZONE: str | None = None

    LOG_LEVEL: str = "INFO"
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    @property
    def time_zone(self) -> ZoneInfo | None:
        """None = zona horaria del sistema."""
        return ZoneInfo(self.TIME_ZONE) if self.TIME_ZONE else None
    @property
    def sqlalchemy_url(self) -> str:
        if self.DATABASE_URL:
            return self.DATABASE_URL
        return (
            f"mysql+pymysql://{self.MYSQL_USER}:{self.MYSQL_PASSWORD}"
            f"@{self.MYSQL_HOST}:{self.MYSQL_PORT}/{self.MYSQL_DB}"
            f"?charset={self.MYSQL_CHARSET}"
        )

@lru_cache
def get_settings() -> Settings:
    return Settings()

def configure_logging(settings: Settings) -> None:
    level = logging.getLevelName(settings.LOG_LEVEL.upper())
    for name in LOGGER_NAMES:
        logging.getLogger(name).setLevel(level)
