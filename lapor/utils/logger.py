"""Logging setup for the Flask app logger"""
import logging
import os
from logging.handlers import RotatingFileHandler


def init_logging(app):
    level_name = (app.config.get('LOG_LEVEL') or 'INFO').upper()
    level = getattr(logging, level_name, logging.INFO)

    formatter = logging.Formatter(
        fmt='%(asctime)s | %(levelname)s | %(name)s | %(module)s:%(lineno)d | %(message)s',
        datefmt='%Y-%m-%dT%H:%M:%S%z',
    )

    handlers = []

    stream_handler = logging.StreamHandler()
    stream_handler.setLevel(level)
    stream_handler.setFormatter(formatter)
    handlers.append(stream_handler)

    log_dir = app.config.get('LOG_DIR')
    if log_dir:
        os.makedirs(log_dir, exist_ok=True)
        file_handler = RotatingFileHandler(
            os.path.join(log_dir, 'lapor.log'),
            maxBytes=5_000_000,
            backupCount=5,
            encoding='utf-8',
        )
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        handlers.append(file_handler)

    app.logger.handlers = handlers
    app.logger.setLevel(level)

    app.logger.debug('Logging initialized')
    return app.logger
