# io/grid_logging.py
import json
import logging
import sys

from pointgrid.config.models import LogModel

ROOT_LOGGER = "pointgrid"
_HANDLER_NAME = "pointgrid-stdout"


class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "level": record.levelname,
            "msg": record.getMessage(),
            "logger": record.name,
        }
        extra = getattr(record, "extra", None)
        if isinstance(extra, dict):
            payload.update(extra)
        if record.exc_info:
            payload["exc"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str)


def configure_logging(model: LogModel | None = None) -> logging.Logger:
    """
    Install one stdout handler on the package logger. Calling it again only
    swaps the formatter and level, it never stacks handlers.
    """
    model = model or LogModel()
    logger = logging.getLogger(ROOT_LOGGER)
    handler = next((h for h in logger.handlers if h.get_name() == _HANDLER_NAME), None)
    if handler is None:
        handler = logging.StreamHandler(sys.stdout)
        handler.set_name(_HANDLER_NAME)
        logger.addHandler(handler)
    if model.structured:
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(logging.Formatter("%(levelname)s %(name)s %(message)s"))
    logger.setLevel(model.level)
    return logger


def log_event(logger: logging.Logger, level: int, msg: str, **fields) -> None:
    """Emit `msg` with structured fields in the shape JsonFormatter expects."""
    if logger.isEnabledFor(level):
        logger.log(level, msg, extra={"extra": fields})
