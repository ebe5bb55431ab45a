"""Runtime settings; loads .env locally via python-dotenv."""

from __future__ import annotations

import logging
import os

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

from binpack.geometry import OverlapRule

# does not override variables already set in the environment
load_dotenv()

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class Settings(BaseModel):
    """Settings read from BINPACK_* environment variables."""

    overlap_rule: OverlapRule = Field(
        default=OverlapRule.SYMMETRIC,
        description="Overlap test used by the packing engine",
    )
    log_level: str = Field(default="INFO", description="Logging level name")

    @field_validator("overlap_rule", mode="before")
    @classmethod
    def normalize_rule(cls, value):
        if isinstance(value, str):
            return value.strip().lower()
        return value

    @field_validator("log_level")
    @classmethod
    def check_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level '{value}'")
        return level


def get_settings() -> Settings:
    values = {}
    if os.getenv("BINPACK_OVERLAP_RULE"):
        values["overlap_rule"] = os.environ["BINPACK_OVERLAP_RULE"]
    if os.getenv("BINPACK_LOG_LEVEL"):
        values["log_level"] = os.environ["BINPACK_LOG_LEVEL"]
    return Settings(**values)


def configure_logging(level: str | None = None) -> None:
    """Attach a stream handler to the ``binpack`` logger at the configured level."""
    level = (level or get_settings().log_level).upper()
    logger = logging.getLogger("binpack")
    logger.setLevel(level)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
