from __future__ import annotations

import threading
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import Optional

from loguru import logger
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, create_engine

from markdown_memo.core.config import settings
from markdown_memo.core.errors import LockFailure, MemoError, StorageFailure
from markdown_memo.core.paths import default_db_path
from markdown_memo.db.init_db import init_db


class Storage:
    """Single shared database handle guarded by a mutex.

    Every logical operation runs inside one ``session()`` block: the lock is
    held for the whole block and the block is one transaction. An unexpected
    exception raised while the lock is held poisons the handle; later callers
    get ``LockFailure`` until ``clear_poison()`` is called.
    """

    def __init__(self, engine: Engine) -> None:
        self.engine = engine
        self._lock = threading.Lock()
        self._poisoned: Optional[str] = None

    @property
    def poisoned(self) -> bool:
        return self._poisoned is not None

    def clear_poison(self) -> None:
        with self._lock:
            self._poisoned = None

    def acquire(self) -> None:
        self._lock.acquire()
        if self._poisoned is not None:
            self._lock.release()
            raise LockFailure(f'storage handle poisoned: {self._poisoned}')

    def release(self) -> None:
        self._lock.release()

    @contextmanager
    def session(self) -> Iterator[Session]:
        self.acquire()
        try:
            with Session(self.engine) as session:
                try:
                    yield session
                    session.commit()
                except SQLAlchemyError as exc:
                    session.rollback()
                    raise StorageFailure(str(exc)) from exc
                except MemoError:
                    session.rollback()
                    raise
                except Exception as exc:
                    session.rollback()
                    self._poisoned = f'{type(exc).__name__}: {exc}'
                    logger.error('storage.poisoned', error=self._poisoned)
                    raise
        finally:
            self.release()

    def dispose(self) -> None:
        self.engine.dispose()


def _create_engine(url: str, *, in_memory: bool) -> Engine:
    if in_memory:
        return create_engine(
            url,
            echo=settings.DB_ECHO,
            connect_args={'check_same_thread': False},
            poolclass=StaticPool,
        )
    return create_engine(url, echo=settings.DB_ECHO, connect_args={'check_same_thread': False})


def setup_storage(path: Optional[Path] = None, in_memory: bool = False) -> Storage:
    if in_memory:
        url = 'sqlite://'
    else:
        if path is None:
            path = default_db_path(settings.APP_DIR_NAME, settings.DB_FILE_NAME)
        else:
            path = Path(path)
            path.parent.mkdir(parents=True, exist_ok=True)
        url = f'sqlite:///{path}'
    try:
        engine = _create_engine(url, in_memory=in_memory)
        init_db(engine)
    except SQLAlchemyError as exc:
        raise StorageFailure(str(exc)) from exc
    logger.info('storage.opened', url=url)
    return Storage(engine)


_storage: Optional[Storage] = None


def get_storage() -> Storage:
    global _storage
    if _storage is None:
        _storage = setup_storage(settings.DB_PATH, settings.DB_IN_MEMORY)
    return _storage


def set_storage(storage: Storage) -> None:
    global _storage
    reset_storage()
    _storage = storage


def reset_storage() -> None:
    global _storage
    if _storage is not None:
        _storage.dispose()
    _storage = None
