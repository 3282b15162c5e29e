from typing import List, Optional

from pydantic import Field

from ._base import ApiModel
from .conversations import Conversation, Message
from .notes import Folder, Note


class SyncMessage(Message):
    conversation_id: str


class SyncPushRequest(ApiModel):
    conversations: Optional[List[Conversation]] = None
    messages: Optional[List[SyncMessage]] = None
    notes: Optional[List[Note]] = None
    folders: Optional[List[Folder]] = None


class SyncPullResponse(ApiModel):
    conversations: List[Conversation] = Field(default_factory=list)
    messages: List[Message] = Field(default_factory=list)
    notes: List[Note] = Field(default_factory=list)
    folders: List[Folder] = Field(default_factory=list)
    server_time: str


class SyncPushResponse(ApiModel):
    success: bool
