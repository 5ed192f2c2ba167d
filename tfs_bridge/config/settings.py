from datetime import tzinfo
from functools import lru_cache
from typing import Optional
from zoneinfo import ZoneInfo

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    The bridge runs next to the IDE, which passes its configuration through
    the process environment.
    """

    # IANA zone used to render timestamps; empty means the system local zone
    DISPLAY_TIMEZONE: str = ""

    # Development and debugging
    DEBUG: bool = False

    def display_tzinfo(self) -> Optional[tzinfo]:
        """Resolve DISPLAY_TIMEZONE. Raises ZoneInfoNotFoundError for unknown names."""
        if not self.DISPLAY_TIMEZONE:
            return None
        return ZoneInfo(self.DISPLAY_TIMEZONE)


@lru_cache
def get_settings() -> Settings:
    return Settings()
