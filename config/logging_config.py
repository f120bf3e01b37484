import copy
import logging.config
from pathlib import Path
from typing import Optional

from config.settings import settings

LOGGING_CONFIG = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'standard': {
            'format': '%(asctime)s [%(levelname)s] %(name)s: %(message)s'
        },
    },
    'handlers': {
        'default': {
            'level': 'DEBUG',
            'formatter': 'standard',
            'class': 'logging.StreamHandler',
            'stream': 'ext://sys.stdout',
        },
    },
    'loggers': {
        '': {  # root logger
            'handlers': ['default'],
            'level': 'INFO',
            'propagate': True
        },
        'pdfminer': {
            'level': 'WARNING',
            'propagate': False
        },
        'pdfplumber': {
            'level': 'WARNING',
            'propagate': False
        },
        'PyPDF2': {
            'level': 'WARNING',
            'propagate': False
        },
        'src': {
            'handlers': ['default'],
            'level': 'INFO',
            'propagate': False
        }
    }
}

def setup_logging(level: Optional[str] = None, log_file: Optional[Path] = None):
    """Configure logging for the application, optionally mirroring it to log_file"""
    level = (level or settings.LOG_LEVEL).upper()
    config = copy.deepcopy(LOGGING_CONFIG)
    config['loggers']['']['level'] = level
    config['loggers']['src']['level'] = level

    if log_file is not None:
        log_file = Path(log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)
        config['handlers']['file'] = {
            'level': 'DEBUG',
            'formatter': 'standard',
            'class': 'logging.FileHandler',
            'filename': str(log_file),
            'encoding': 'utf-8',
        }
        config['loggers']['']['handlers'].append('file')
        config['loggers']['src']['handlers'].append('file')

    logging.config.dictConfig(config)
