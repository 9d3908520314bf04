"""Logging configuration for the travel tracker."""

import os
import logging
from logging.handlers import RotatingFileHandler, TimedRotatingFileHandler


class LogConfig:
    LOG_DIR = 'logs'

    APP_LOG_FILE = 'app.log'
    ERROR_LOG_FILE = 'error.log'
    ACTIVITY_LOG_FILE = 'activity.log'

    LOG_LEVELS = {
        'development': logging.DEBUG,
        'testing': logging.INFO,
        'production': logging.INFO,
    }

    MAX_BYTES = 10 * 1024 * 1024
    BACKUP_COUNT = 10

    DETAILED_FORMAT = (
        '%(asctime)s - %(name)s - %(levelname)s - '
        '[%(filename)s:%(lineno)d] - %(funcName)s() - %(message)s'
    )
    SIMPLE_FORMAT = '%(asctime)s - %(levelname)s - %(message)s'
    ACTIVITY_FORMAT = '%(asctime)s - %(levelname)s - %(message)s'

    @classmethod
    def get_log_level(cls, env='development'):
        return cls.LOG_LEVELS.get(env, logging.INFO)


def setup_logging(app):
    env = app.config.get('ENV', 'development')
    log_level = LogConfig.get_log_level(env)

    app.logger.handlers.clear()
    app.logger.setLevel(log_level)

    activity_logger = get_activity_logger()
    activity_logger.setLevel(logging.INFO)
    activity_logger.handlers.clear()
    activity_logger.propagate = False

    if env == 'development':
        console_handler = logging.StreamHandler()
        console_handler.setLevel(logging.DEBUG)
        console_handler.setFormatter(logging.Formatter(LogConfig.SIMPLE_FORMAT))
        app.logger.addHandler(console_handler)

    if not app.config.get('LOG_TO_FILE', True):
        # Keep the activity logger quiet but attached to something
        activity_logger.addHandler(logging.NullHandler())
        if env != 'development':
            app.logger.addHandler(logging.StreamHandler())
        return

    log_dir = os.path.join(app.root_path, '..', LogConfig.LOG_DIR)
    os.makedirs(log_dir, exist_ok=True)

    app_handler = RotatingFileHandler(
        os.path.join(log_dir, LogConfig.APP_LOG_FILE),
        maxBytes=LogConfig.MAX_BYTES,
        backupCount=LogConfig.BACKUP_COUNT
    )
    app_handler.setLevel(log_level)
    app_handler.setFormatter(logging.Formatter(LogConfig.DETAILED_FORMAT))
    app.logger.addHandler(app_handler)

    error_handler = RotatingFileHandler(
        os.path.join(log_dir, LogConfig.ERROR_LOG_FILE),
        maxBytes=LogConfig.MAX_BYTES,
        backupCount=LogConfig.BACKUP_COUNT
    )
    error_handler.setLevel(logging.ERROR)
    error_handler.setFormatter(logging.Formatter(LogConfig.DETAILED_FORMAT))
    app.logger.addHandler(error_handler)

    activity_handler = TimedRotatingFileHandler(
        os.path.join(log_dir, LogConfig.ACTIVITY_LOG_FILE),
        when='midnight',
        interval=1,
        backupCount=90
    )
    activity_handler.setLevel(logging.INFO)
    activity_handler.setFormatter(logging.Formatter(LogConfig.ACTIVITY_FORMAT))
    activity_logger.addHandler(activity_handler)

    app.logger.info(f'=' * 80)
    app.logger.info(f'Travel Tracker Starting')
    app.logger.info(f'Environment: {env}')
    app.logger.info(f'Log Level: {logging.getLevelName(log_level)}')
    app.logger.info(f'Log Directory: {log_dir}')
    app.logger.info(f'=' * 80)


def get_activity_logger():
    return logging.getLogger('activity')


def log_activity(user_id, action, **kwargs):
    """Write one line per successful change, e.g. `USER:3 | ACTION:ADD_COUNTRY | code=FR`."""
    logger = get_activity_logger()

    log_message = f"USER:{user_id} | ACTION:{action}"
    metadata = ' | '.join([f'{k}={v}' for k, v in kwargs.items()])
    if metadata:
        log_message += f" | {metadata}"

    logger.info(log_message)
