"""Logging configuration
"""

import copy
import logging
from functools import wraps
from logging.config import dictConfig

from chainset import config
from chainset.config import configure_environment

__all__ = [
    'configure_logging',
    'log_exception',
    'set_level',
    ]


DEF_JOB_FMT = '%(levelname)-4s %(asctime)s %(name)s %(lineno)d %(message)s'

LOG_CONF = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'job_fmt': {'format': DEF_JOB_FMT},
    },
    'handlers': {
        'cmd': {
            'level': 'DEBUG',
            'formatter': 'job_fmt',
            'class': 'logging.StreamHandler',
            'stream': 'ext://sys.stderr',
            },
        },
    'loggers': {
        'chainset': {
            'handlers': ['cmd'],
            'level': 'WARNING',
            'propagate': True,
        },
    },
}


def set_level(levelname, name='chainset'):
    """Set the level of the package logger and of its handlers

    >>> set_level('warn')
    >>> logging.getLogger('chainset').level == logging.WARNING
    True
    """
    level_names = logging.getLevelNamesMapping()
    level_names['WARN'] = level_names['WARNING']
    level = level_names[levelname.upper()]
    this_logger = logging.getLogger(name)
    for handler in this_logger.handlers:
        handler.setLevel(level)
    this_logger.setLevel(level)


def configure_logging(level=None):
    """Configure console logging for the package logger

    An explicit level is stored as `config.log.level`, otherwise the
    configured level is used.
    """
    if level:
        configure_environment(config, log_level=level.upper())
    dictConfig(copy.deepcopy(LOG_CONF))
    set_level(config.log.level)


def log_exception(logger):
    """Return wrapped function fn in try except and log exception with logger"""
    def wrapper(fn):
        @wraps(fn)
        def wrapped_fn(*args, **kwargs):
            try:
                return fn(*args, **kwargs)
            except Exception as exc:
                logger.exception(exc)
                raise
        return wrapped_fn
    return wrapper


if __name__ == '__main__':
    configure_logging('debug')
    logger = logging.getLogger('chainset')
    logger.debug('Debug')
    logger.info('Info')
    logger.warning('Warning')
