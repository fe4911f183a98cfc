"""
PyScholar Logging Configuration

Centralized logging for the PyScholar package. Library use logs warnings
only; the CLI can switch to debug output, which then also includes the
httpx transport log (connections, redirects, response status lines).
CLI logging never writes to stdout, which is reserved for command results.
"""
import logging
import sys
from typing import Optional

# Package-level logger
logger = logging.getLogger('pyscholar')

# Third-party loggers attached in CLI debug mode
TRANSPORT_LOGGERS = ('httpx',)

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
SIMPLE_FORMAT = '%(levelname)s: %(message)s'
DEBUG_FORMAT = '%(asctime)s - %(name)s:%(lineno)d - %(levelname)s - %(message)s'


def _make_handler(level: int, format_type: str, stream) -> logging.Handler:
    format_map = {
        'simple': SIMPLE_FORMAT,
        'detailed': LOG_FORMAT,
        'debug': DEBUG_FORMAT
    }
    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(format_map.get(format_type, SIMPLE_FORMAT)))
    return handler


def _reset(target: logging.Logger) -> None:
    for handler in target.handlers[:]:
        target.removeHandler(handler)


def setup_logger(
    level: str = 'INFO',
    format_type: str = 'simple',
    stream: Optional[object] = None
) -> logging.Logger:
    """
    Set up the PyScholar logger with specified configuration.

    Parameters
    ----------
    level : str, default 'INFO'
        Logging level ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')
    format_type : str, default 'simple'
        Format type ('simple', 'detailed', 'debug')
    stream : object, optional
        Output stream (default: stderr)

    Returns
    -------
    logging.Logger
        Configured logger instance
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)

    _reset(logger)
    logger.setLevel(numeric_level)
    logger.addHandler(_make_handler(numeric_level, format_type, stream))
    logger.propagate = False

    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    Get the PyScholar logger, or one of its children.

    Parameters
    ----------
    name : str, optional
        Child name such as ``'cli'``; records propagate to the package
        logger's handler.
    """
    return logger.getChild(name) if name else logger


def setup_cli_logging(debug: bool = False) -> logging.Logger:
    """
    Set up logging for a CLI invocation.

    Everything goes to stderr so that JSON written to stdout stays
    parseable. With ``debug`` the package logger switches to DEBUG and the
    transport loggers in ``TRANSPORT_LOGGERS`` share its handler; without
    it they are detached again.

    Parameters
    ----------
    debug : bool, default False
        Whether to enable debug mode with verbose output

    Returns
    -------
    logging.Logger
        Configured logger for CLI usage
    """
    if not debug:
        for name in TRANSPORT_LOGGERS:
            _reset(logging.getLogger(name))
            logging.getLogger(name).setLevel(logging.NOTSET)
            logging.getLogger(name).propagate = True
        return setup_logger(level='WARNING', format_type='simple', stream=sys.stderr)

    cli_logger = setup_logger(level='DEBUG', format_type='debug', stream=sys.stderr)
    for name in TRANSPORT_LOGGERS:
        transport = logging.getLogger(name)
        _reset(transport)
        transport.setLevel(logging.DEBUG)
        transport.addHandler(cli_logger.handlers[0])
        transport.propagate = False
    return cli_logger


def log_request(url: str, params: Optional[dict] = None) -> None:
    """Log an outbound page request at debug level."""
    if params:
        query = "&".join(f"{k}={v}" for k, v in params.items())
        logger.debug(f"GET {url}?{query}")
    else:
        logger.debug(f"GET {url}")


# Initialize default logger configuration for library usage
setup_logger(level='WARNING', format_type='simple')
