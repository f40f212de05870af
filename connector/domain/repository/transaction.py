"""Transaction port."""

from abc import ABC, abstractmethod
from contextlib import AbstractAsyncContextManager


class TransactionManager(ABC):
    """Groups repository writes so they persist together or not at all."""

    @abstractmethod
    def atomic(self) -> AbstractAsyncContextManager[None]:
        """Open an atomic block.

        Writes made inside the block are undone when it exits with an
        exception, and the exception propagates.
        """
        pass
