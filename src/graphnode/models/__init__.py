from .conversations import (
    Attachment,
    Conversation,
    ConversationBulkCreate,
    ConversationCreate,
    ConversationList,
    ConversationUpdate,
    DeleteResult,
    Message,
    MessageCreate,
    MessageUpdate,
)
from .errors import GraphNodeHttpError, InvalidBaseUrlError
from .files import FileAttachment, FileUploadResponse
from .health import HealthResponse
from .me import ApiKeyModel, ApiKeysResponse, MeResponse, UserProfile
from .notes import Folder, FolderCreate, FolderUpdate, Note, NoteCreate, NoteUpdate
from .problem import ProblemDetails
from .sync import SyncMessage, SyncPullResponse, SyncPushRequest, SyncPushResponse

__all__ = [
    "ApiKeyModel",
    "ApiKeysResponse",
    "Attachment",
    "Conversation",
    "ConversationBulkCreate",
    "ConversationCreate",
    "ConversationList",
    "ConversationUpdate",
    "DeleteResult",
    "FileAttachment",
    "FileUploadResponse",
    "Folder",
    "FolderCreate",
    "FolderUpdate",
    "GraphNodeHttpError",
    "HealthResponse",
    "InvalidBaseUrlError",
    "MeResponse",
    "Message",
    "MessageCreate",
    "MessageUpdate",
    "Note",
    "NoteCreate",
    "NoteUpdate",
    "ProblemDetails",
    "SyncMessage",
    "SyncPullResponse",
    "SyncPushRequest",
    "SyncPushResponse",
    "UserProfile",
]
