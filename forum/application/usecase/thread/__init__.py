"""Thread use cases."""

from .create_thread import (
    CreateThreadRequest,
    CreateThreadResponse,
    CreateThreadUseCase,
)
from .delete_thread import (
    DeleteThreadRequest,
    DeleteThreadResponse,
    DeleteThreadUseCase,
)
from .draft import (
    RestoreDraftRequest,
    RestoreDraftResponse,
    RestoreDraftUseCase,
    SaveDraftRequest,
    SaveDraftResponse,
    SaveDraftUseCase,
)
from .list_threads import ListThreadsRequest, ListThreadsResponse, ListThreadsUseCase
from .toggle_thread_like import (
    ToggleThreadLikeRequest,
    ToggleThreadLikeResponse,
    ToggleThreadLikeUseCase,
)
from .view_thread import ViewThreadRequest, ViewThreadResponse, ViewThreadUseCase

__all__ = [
    "CreateThreadRequest",
    "CreateThreadResponse",
    "CreateThreadUseCase",
    "DeleteThreadRequest",
    "DeleteThreadResponse",
    "DeleteThreadUseCase",
    "ListThreadsRequest",
    "ListThreadsResponse",
    "ListThreadsUseCase",
    "RestoreDraftRequest",
    "RestoreDraftResponse",
    "RestoreDraftUseCase",
    "SaveDraftRequest",
    "SaveDraftResponse",
    "SaveDraftUseCase",
    "ToggleThreadLikeRequest",
    "ToggleThreadLikeResponse",
    "ToggleThreadLikeUseCase",
    "ViewThreadRequest",
    "ViewThreadResponse",
    "ViewThreadUseCase",
]
