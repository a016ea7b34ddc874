import logging.config
import structlog
from pythonjsonlogger import jsonlogger
import coloredlogs

from core.config import get_settings


def setup_logging():
    settings = get_settings()

    FIELD_STYLES = {
        'asctime': {'color': 'green'},
        'levelname': {'bold': True, 'color': 'cyan'},
        'name': {'color': 'white'},
        'message': {'color': 'white'}
    }

    LEVEL_STYLES = {
        'DEBUG': {'color': 'blue'},
        'INFO': {'color': 'green'},
        'WARNING': {'color': 'yellow'},
        'ERROR': {'color': 'red'},
        'CRITICAL': {'bold': True, 'color': 'red'}
    }

    logging_config = {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "json": {
                "()": jsonlogger.JsonFormatter,
                "fmt": "%(asctime)s %(levelname)s %(name)s %(message)s"
            },
            "colored": {
                "()": coloredlogs.ColoredFormatter,
                "fmt": "%(asctime)s %(levelname)s %(name)s %(message)s",
                "field_styles": FIELD_STYLES,
                "level_styles": LEVEL_STYLES
            }
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "json" if settings.LOG_JSON else "colored"
            }
        },
        "loggers": {
            "": {
                "handlers": ["console"],
                "level": settings.LOG_LEVEL
            },
            "sqlalchemy.engine": {
                "level": "INFO" if settings.DB_ECHO else "WARNING"
            }
        }
    }

    logging.config.dictConfig(logging_config)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.stdlib.render_to_log_kwargs,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
