"""
Logging Configuration
Sets up the package logger for the command line tool.
"""
import logging
import sys
from typing import Optional


def setup_logging(verbose: bool = False, log_file: Optional[str] = None) -> None:
    """
    Configures the logger for the 'gearmesh' namespace.

    Console output shows warnings only, or everything down to DEBUG when
    ``verbose`` is set. The optional log file always records INFO and above,
    so a batch run leaves a record of every gear written.

    Args:
        verbose: Show debug messages on the console.
        log_file: Optional path to save logs to a file.
    """
    logger = logging.getLogger("gearmesh")
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)

    # main() may run several times in one process
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(logging.DEBUG if verbose else logging.WARNING)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode='a', encoding='utf-8')
        file_handler.setLevel(logging.INFO)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)
