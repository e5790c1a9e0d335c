"""Bootstrap helpers composing a `Configuration` from `Settings`.

Keeps storage selection out of the core: `Configuration` only ever receives
an already-constructed backend.
"""
import logging
from typing import Optional

from dynconf_lib.configuration import Configuration
from dynconf_lib.settings import Settings
from dynconf_lib.storage import create_storage

logger = logging.getLogger(__name__)


def create_configuration(settings: Optional[Settings] = None) -> Configuration:
    settings = settings or Settings()
    storage = create_storage(
        data_dir=settings.data_dir,
        storage=settings.storage,
        **settings.storage_options,
    )
    logger.debug("Configuration composed with %s", type(storage).__name__)
    return Configuration(storage)
