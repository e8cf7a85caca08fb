"""
Progress Observer Interface (Port).

Any callable taking an OperationStatus satisfies it. Observers are purely
observational: exceptions they raise are logged and ignored.
"""
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from application.sync.status import OperationStatus


class ProgressObserver(Protocol):
    """Receives an immutable status copy after every chunk and at completion."""

    def __call__(self, status: "OperationStatus") -> None:
        ...
