class MemoError(Exception):
    """Base class for every failure raised by the memo storage core."""


class StorageFailure(MemoError):
    """A read, write or schema statement failed in the underlying database."""


class LockFailure(MemoError):
    """The storage handle is unusable because a previous holder failed while holding it."""


class NotFound(MemoError):
    def __init__(self, identifier: str) -> None:
        super().__init__(f'not found: {identifier}')
        self.identifier = identifier
