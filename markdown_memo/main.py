from pathlib import Path
from typing import Optional

from markdown_memo.core.config import settings
from markdown_memo.core.logging import configure_logging
from markdown_memo.db.session import Storage, set_storage, setup_storage


def startup(path: Optional[Path] = None, in_memory: Optional[bool] = None) -> Storage:
    """Configure logging and open the process-wide storage.

    Arguments take precedence over ``DB_PATH`` / ``DB_IN_MEMORY`` for this
    storage only; ``settings`` is left untouched.
    """
    configure_logging(settings.LOG_LEVEL)
    storage = setup_storage(
        Path(path) if path is not None else settings.DB_PATH,
        in_memory if in_memory is not None else settings.DB_IN_MEMORY,
    )
    set_storage(storage)
    return storage
