"""Deletion use cases."""

from .undo_delete import UndoDeleteRequest, UndoDeleteResponse, UndoDeleteUseCase

__all__ = [
    "UndoDeleteRequest",
    "UndoDeleteResponse",
    "UndoDeleteUseCase",
]
