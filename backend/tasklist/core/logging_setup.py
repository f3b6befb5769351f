import logging
import sys

FORMAT = "%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s"
DATEFMT = "%Y-%m-%d %H:%M:%S"


class _AppOnlyFilter(logging.Filter):
    """Keep our own records; let third-party loggers through only at WARNING+."""

    def filter(self, record: logging.LogRecord) -> bool:
        if record.name.startswith("tasklist"):
            return True
        return record.levelno >= logging.WARNING


def setup_logging(level: str | int = "INFO") -> None:
    """
    Configure the root logger with a single stderr handler.

    Safe to call more than once (Streamlit reruns the script on every
    interaction); existing handlers are replaced, not stacked.
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    root = logging.getLogger()
    root.setLevel(level)
    for h in list(root.handlers):
        root.removeHandler(h)

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt=FORMAT, datefmt=DATEFMT))
    handler.addFilter(_AppOnlyFilter())
    root.addHandler(handler)

    logging.captureWarnings(True)
