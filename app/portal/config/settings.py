"""Logging configuration"""
import logging.config

from decouple import config as env

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "standard": {
            "format": "[%(asctime)s] %(levelname)s [%(name)s] %(message)s",
            "datefmt": "%Y-%m-%d %H:%M:%S",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "standard",
        },
    },
    "loggers": {
        # Controller logging
        "portal": {
            "handlers": ["console"],
            "level": env("APP_LOG_LEVEL", default="INFO"),
            "propagate": False,
        },
        # Authentication events
        "audit": {
            "handlers": ["console"],
            "level": env("AUDIT_LOG_LEVEL", default="INFO"),
            "propagate": False,
        },
        # Third party libraries
        "urllib3": {
            "handlers": ["console"],
            "level": "WARNING",
            "propagate": False,
        },
    },
}


def configure_logging() -> None:
    """Apply the LOGGING dict to the logging module"""
    logging.config.dictConfig(LOGGING)
