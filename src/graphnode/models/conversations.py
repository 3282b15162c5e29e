from typing import List, Literal, Optional

from pydantic import Field

from ._base import ApiModel

MessageRole = Literal["user", "assistant", "system"]


class Attachment(ApiModel):
    id: str
    type: Literal["image", "file"]
    url: str
    name: str
    mime_type: str
    size: int


class Message(ApiModel):
    id: str
    role: MessageRole
    content: str
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
    deleted_at: Optional[str] = None
    attachments: Optional[List[Attachment]] = None


class MessageCreate(ApiModel):
    id: Optional[str] = None
    role: MessageRole
    content: str


class MessageUpdate(ApiModel):
    content: Optional[str] = None


class Conversation(ApiModel):
    id: str
    title: str
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
    deleted_at: Optional[str] = None
    messages: List[Message] = Field(default_factory=list)


class ConversationCreate(ApiModel):
    id: Optional[str] = None
    title: str
    messages: Optional[List[Message]] = None


class ConversationUpdate(ApiModel):
    title: Optional[str] = None


class ConversationBulkCreate(ApiModel):
    conversations: List[ConversationCreate]


class ConversationList(ApiModel):
    conversations: List[Conversation]


class DeleteResult(ApiModel):
    ok: bool
