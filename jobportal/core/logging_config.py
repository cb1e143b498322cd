"""
Logging setup for the job portal.

JSON lines (python-json-logger) when JSON_LOGS is on, a plain console format
otherwise. Aggregation failures and executor timings are logged through the
standard ``logging`` module under ``jobportal.aggregation.*``.
"""

import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict, Iterable, Optional
from pythonjsonlogger import jsonlogger

JSON_FORMAT = '%(timestamp)s %(level)s %(logger)s %(funcName)s %(message)s'
CONSOLE_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

# Third-party loggers that are too chatty at INFO
NOISY_LOGGERS = ("sqlalchemy.engine", "uvicorn.access")


class PortalJsonFormatter(jsonlogger.JsonFormatter):
    """
    Adds service, level and source location to every JSON record.
    """

    def __init__(self, *args, service: Optional[str] = None, **kwargs):
        super().__init__(*args, **kwargs)
        self.service = service

    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]) -> None:
        super().add_fields(log_record, record, message_dict)

        log_record['timestamp'] = datetime.fromtimestamp(record.created, timezone.utc).isoformat().replace('+00:00', 'Z')
        log_record['level'] = record.levelname
        log_record['logger'] = record.name
        if self.service:
            log_record['service'] = self.service

        if record.levelno >= logging.ERROR:
            log_record['location'] = f"{record.pathname}:{record.lineno}"


def setup_logging(
    log_level: str = "INFO",
    json_logs: bool = False,
    service: Optional[str] = None,
    quiet: Iterable[str] = NOISY_LOGGERS,
) -> None:
    """
    Configure the root logger.

    Args:
        log_level: Logging level name; unknown names fall back to INFO
        json_logs: Emit JSON lines instead of the console format
        service: Value for the ``service`` field of JSON records
        quiet: Logger names capped at WARNING
    """
    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stdout)
    if json_logs:
        handler.setFormatter(PortalJsonFormatter(JSON_FORMAT, service=service))
    else:
        handler.setFormatter(logging.Formatter(CONSOLE_FORMAT, datefmt='%Y-%m-%d %H:%M:%S'))

    root_logger.setLevel(getattr(logging, log_level.upper(), logging.INFO))
    root_logger.addHandler(handler)

    for name in quiet:
        logging.getLogger(name).setLevel(logging.WARNING)
