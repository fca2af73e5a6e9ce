import logging
import sys

from colorama import Fore, Style, init

init()

LOGGER_NAME = "oneview_check"

LEVEL_COLORS = {
    logging.DEBUG: Fore.CYAN,
    logging.INFO: Fore.GREEN,
    logging.WARNING: Fore.YELLOW,
    logging.ERROR: Fore.RED,
    logging.CRITICAL: Fore.RED + Style.BRIGHT,
}

class ColorFormatter(logging.Formatter):
    """Prefixes each record with a coloured [LEVEL] tag."""

    def format(self, record):
        color = LEVEL_COLORS.get(record.levelno, "")
        tag = f"{color}[{record.levelname}]{Style.RESET_ALL}"
        return f"{tag} {record.name}: {super().format(record)}"

def setup_logging(verbose: bool = False) -> logging.Logger:
    """
    Sends package logs to stderr. stdout belongs to the Nagios status line,
    so nothing here may ever write to it.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)

    # idempotent: main() may run more than once in one interpreter (tests)
    for handler in list(logger.handlers):
        if getattr(handler, "_oneview_check", False):
            logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(ColorFormatter("%(message)s"))
    handler._oneview_check = True
    logger.addHandler(handler)
    logger.propagate = False
    return logger
