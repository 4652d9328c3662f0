"""
Logging Configuration
Custom JSON Logger implementation for Lambda (one JSON object per line).

Provides:
- CustomJsonFormatter: JSON formatter carrying the Lambda request ID
- setup_logging: YAML dictConfig loader with ${VAR} substitution
"""

import json
import logging
import logging.config
import os
import string
from datetime import datetime, timezone
from typing import Optional

import yaml

from .config import LatticeConfig
from .config import config as default_config
from .request_context import get_request_id

STANDARD_ATTRS = {
    "args",
    "asctime",
    "created",
    "exc_info",
    "exc_text",
    "filename",
    "funcName",
    "levelname",
    "levelno",
    "lineno",
    "module",
    "msecs",
    "message",
    "msg",
    "name",
    "pathname",
    "process",
    "processName",
    "relativeCreated",
    "stack_info",
    "taskName",
    "thread",
    "threadName",
}


class CustomJsonFormatter(logging.Formatter):
    """
    JSON Formatter.

    Fields:
      - _time: ISO8601 timestamp (millisecond precision)
      - level: Log level
      - logger: Logger name (e.g. lattice_events.handler)
      - message: Log message
      - service: Service name, when configured
      - aws_request_id: Lambda request ID of the current invocation
    """

    def __init__(self, *args, service_name: Optional[str] = None, **kwargs):
        super().__init__(*args, **kwargs)
        self.service_name = service_name

    def format(self, record: logging.LogRecord) -> str:
        request_id = getattr(record, "aws_request_id", None) or get_request_id()

        log_data = {
            "_time": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(
                timespec="milliseconds"
            ),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        if self.service_name:
            log_data["service"] = self.service_name
        if request_id:
            log_data["aws_request_id"] = request_id

        # Include extra fields
        for key, value in record.__dict__.items():
            if key not in STANDARD_ATTRS and not key.startswith("_"):
                log_data[key] = value

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data, ensure_ascii=False, default=str)


def setup_logging(config_path: Optional[str] = None, config: Optional[LatticeConfig] = None):
    """
    Load the YAML config, substitute environment variables, and initialize logging.
    """
    config = config or default_config
    config_path = config_path or config.LOG_CONFIG_PATH

    if not os.path.exists(config_path):
        logging.basicConfig(level=config.LOG_LEVEL)
        return

    with open(config_path, "r", encoding="utf-8") as f:
        # Supports ${LOG_LEVEL} format.
        template = string.Template(f.read())

    mapping = os.environ.copy()
    mapping.setdefault("LOG_LEVEL", config.LOG_LEVEL)
    mapping.setdefault("SERVICE_NAME", config.SERVICE_NAME)

    content = template.safe_substitute(mapping)
    logging.config.dictConfig(yaml.safe_load(content))
