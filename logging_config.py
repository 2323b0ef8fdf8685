import logging
import sys

from config import settings

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

_configured = False


def setup_logging(level: str | None = None) -> None:
    global _configured
    if _configured:
        return

    logging.basicConfig(
        level=(level or settings.LOG_LEVEL).upper(),
        format=LOG_FORMAT,
        stream=sys.stdout,
    )
    # uvicorn installs its own handlers; keep its access log out of ours
    logging.getLogger("uvicorn.access").propagate = False
    _configured = True


class LoggerService:
    """Thin logging collaborator handed to the resource controllers."""

    def __init__(self, name: str = "bookstore"):
        self.logger = logging.getLogger(name)

    def log_debug(self, message: str) -> None:
        self.logger.debug(message)

    def log_info(self, message: str) -> None:
        self.logger.info(message)

    def log_warn(self, message: str) -> None:
        self.logger.warning(message)

    def log_error(self, message: str) -> None:
        self.logger.error(message)


def get_logger_service() -> LoggerService:
    return LoggerService("bookstore.api")
