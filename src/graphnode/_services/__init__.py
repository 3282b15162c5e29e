from .auth_service import AuthService
from .conversations_service import ConversationsService
from .files_service import FilesService
from .health_service import HealthService
from .me_service import MeService
from .notes_service import NotesService
from .notifications_service import NotificationsService
from .sync_service import SyncService

__all__ = [
    "AuthService",
    "ConversationsService",
    "FilesService",
    "HealthService",
    "MeService",
    "NotesService",
    "NotificationsService",
    "SyncService",
]
