import os
import sys
from functools import lru_cache
from typing import Optional

from dotenv import load_dotenv
from loguru import logger
from pydantic import BaseModel, ConfigDict

load_dotenv()  # load environment variables from .env


class Settings(BaseModel):
    model_config = ConfigDict(frozen=True)

    server_name: str = "BMI Server"
    log_level: str = "INFO"
    server_command: str = sys.executable


@lru_cache
def get_settings() -> Settings:
    return Settings(
        server_name=os.getenv("BMI_SERVER_NAME", "BMI Server"),
        log_level=os.getenv("BMI_LOG_LEVEL", "INFO").upper(),
        server_command=os.getenv("BMI_SERVER_COMMAND", sys.executable),
    )


def configure_logging(level: Optional[str] = None):
    # stdout belongs to the stdio transport, so everything goes to stderr
    logger.remove()
    logger.add(sys.stderr, level=level or get_settings().log_level)
