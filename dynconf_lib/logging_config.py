from __future__ import annotations
import logging
from typing import Optional

from dynconf_lib.settings import Settings


def configure_logging(settings: Optional[Settings] = None) -> logging.Logger:
    """Configure root logging for the application.

    Uses `settings.log_level` when it names a known level and falls back to
    WARNING otherwise. Returns a module logger for the caller.
    """
    DEFAULT_LOG_LEVEL = logging.WARNING

    _lvl = settings.log_level if settings is not None else None
    if isinstance(_lvl, str):
        _numeric = getattr(logging, _lvl.upper(), None)
        if isinstance(_numeric, int):
            DEFAULT_LOG_LEVEL = _numeric

    # Reconfigure root handlers to use the selected level and format
    for handler in logging.root.handlers[:]:
        logging.root.removeHandler(handler)
    logging.basicConfig(level=DEFAULT_LOG_LEVEL, format='%(asctime)s %(levelname)s [%(name)s]: %(message)s')

    return logging.getLogger(__name__)
