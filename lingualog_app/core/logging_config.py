"""
File logging for LinguaLog.

``app.logger`` is named after the package (``lingualog_app``), so every module
logger created with ``logging.getLogger(__name__)`` is one of its children and
ends up in the same rotating file.
"""

import os
import logging
import logging.handlers
from typing import Optional

LOG_FILE_NAME = 'lingualog.log'
LOG_FORMAT = '%(asctime)s [%(levelname)s] %(name)s: %(message)s'


def setup_logging(app, log_level: str = 'INFO', log_dir: Optional[str] = None) -> logging.Handler:
    """
    Attach a rotating file handler (10 MB, 5 backups) to ``app.logger``.

    Calling it again replaces the previous file handler instead of stacking a second one.
    """
    if log_dir is None:
        log_dir = os.path.join(os.path.dirname(app.root_path), 'logs')
    os.makedirs(log_dir, exist_ok=True)

    for handler in list(app.logger.handlers):
        if isinstance(handler, logging.handlers.RotatingFileHandler):
            app.logger.removeHandler(handler)
            handler.close()

    file_handler = logging.handlers.RotatingFileHandler(
        os.path.join(log_dir, LOG_FILE_NAME),
        maxBytes=10 * 1024 * 1024,  # 10 MB
        backupCount=5,
        encoding='utf-8'
    )
    file_handler.setLevel(getattr(logging, log_level.upper(), logging.INFO))
    file_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt='%Y-%m-%d %H:%M:%S'))
    app.logger.addHandler(file_handler)

    # Request lines from the dev server stay on the console only.
    logging.getLogger('werkzeug').setLevel(logging.WARNING)
    return file_handler
