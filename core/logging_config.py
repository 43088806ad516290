import logging
from datetime import datetime, timezone, timedelta

from core.config import settings

class OffsetFormatter(logging.Formatter):
    """Formats record times at a fixed UTC offset and shortens logger names."""

    def __init__(self, fmt: str, offset_hours: int, label: str) -> None:
        super().__init__(fmt=fmt)
        self.tz = timezone(timedelta(hours=offset_hours))
        self.label = label

    def formatTime(self, record: logging.LogRecord, datefmt: str | None = None) -> str:
        dt = datetime.fromtimestamp(record.created, tz=timezone.utc).astimezone(self.tz)
        return f"{dt.strftime('%Y-%m-%d %H:%M:%S')} {self.label}"

    def format(self, record: logging.LogRecord) -> str:
        # Module name only, e.g. "tide_service"
        record.name = record.name.split('.')[-1]
        return super().format(record)

def setup_logging(level: int = logging.INFO) -> None:
    formatter = OffsetFormatter(
        fmt="[%(levelname)s] %(asctime)s | %(name)s | %(message)s",
        offset_hours=settings.log_utc_offset_hours,
        label=settings.log_timezone_label
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)

    # Remove existing handlers and add our custom handler
    root_logger.handlers.clear()
    root_logger.addHandler(console_handler)

    # Set specific log levels for noisy libraries
    logging.getLogger("aiohttp").setLevel(logging.WARNING)
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
