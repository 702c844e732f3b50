from datetime import datetime
from zoneinfo import ZoneInfo

from ..config import settings


def now() -> datetime:
    """Current wall-clock time in the configured zone, as a naive datetime."""
    return datetime.now(ZoneInfo(settings.timezone)).replace(tzinfo=None)
