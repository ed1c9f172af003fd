from typing import Dict, Literal
import logging


class LogColors:
    OKBLUE = '\033[94m'
    OKCYAN = '\033[96m'
    OKGREEN = '\033[92m'
    WARNING = '\033[93m'
    FAIL = '\033[91m'
    ENDC = '\033[0m'  # Reset color
    BOLD = '\033[1m'


FormatterName = Literal["system", "pipeline", "module"]

# INFO color is the only thing that differs between the formatter flavours
_INFO_COLORS: Dict[str, str] = {
    "system": LogColors.OKCYAN,
    "pipeline": LogColors.OKGREEN,
    "module": LogColors.OKBLUE,
}


class ColorFormatter(logging.Formatter):
    """ Logging formatter that colors each record based on its level """
    log_format = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    def __init__(self, flavour: FormatterName = "system") -> None:
        if flavour not in _INFO_COLORS:
            raise ValueError(f"Invalid formatter: {flavour}")
        super().__init__(self.log_format)
        self.flavour = flavour
        self.level_colors = {
            logging.DEBUG: LogColors.OKCYAN,
            logging.INFO: _INFO_COLORS[flavour],
            logging.WARNING: LogColors.WARNING,
            logging.ERROR: LogColors.FAIL,
            logging.CRITICAL: LogColors.BOLD + LogColors.FAIL,
        }

    def format(self, record: logging.LogRecord) -> str:
        color = self.level_colors.get(record.levelno, LogColors.ENDC)
        message = super().format(record)
        return f"{color}{message}{LogColors.ENDC}"


def setup_logging(
    name: str = "jointspy",
    verbose: str = "INFO",
    formatter: FormatterName = "system"
) -> logging.Logger:
    """Attach a single colored stream handler to the ``name`` logger.

    Library modules only log through ``logging.getLogger(__name__)``; an
    application calls this once (usually with the default ``"jointspy"``
    name) to see those records.
    """
    logger = logging.getLogger(name)
    logger.setLevel(verbose)

    if logger.hasHandlers():
        logger.handlers.clear()

    handler = logging.StreamHandler()
    handler.setLevel(verbose)
    handler.setFormatter(ColorFormatter(formatter))

    logger.addHandler(handler)
    return logger
