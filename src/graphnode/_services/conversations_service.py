from typing import List, Optional

from .._http import Outcome
from ..models import (
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
from ._base_service import BaseService


class ConversationsService(BaseService):
    """Service for AI conversations and their messages.

    Deletes are soft unless ``permanent`` is set; soft-deleted records can be
    brought back with the matching ``restore`` call.
    """

    _base_path = "/v1/ai/conversations"

    async def create(self, dto: ConversationCreate) -> Outcome[Conversation]:
        return await self._request.post(self._json(dto), model=Conversation)

    async def bulk_create(self, dto: ConversationBulkCreate) -> Outcome[ConversationList]:
        return await self._request.path("/bulk").post(
            self._json(dto), model=ConversationList
        )

    async def list(self) -> Outcome[List[Conversation]]:
        return await self._request.get(model=List[Conversation])

    async def get(self, conversation_id: str) -> Outcome[Conversation]:
        return await self._request.path(conversation_id).get(model=Conversation)

    async def update(
        self, conversation_id: str, patch: ConversationUpdate
    ) -> Outcome[Conversation]:
        return await self._request.path(conversation_id).patch(
            self._json(patch), model=Conversation
        )

    async def delete(
        self, conversation_id: str, permanent: Optional[bool] = None
    ) -> Outcome[DeleteResult]:
        return await (
            self._request.path(conversation_id)
            .query({"permanent": permanent})
            .delete(model=DeleteResult)
        )

    async def restore(self, conversation_id: str) -> Outcome[Conversation]:
        return await self._request.path(f"{conversation_id}/restore").post(
            {}, model=Conversation
        )

    async def create_message(
        self, conversation_id: str, dto: MessageCreate
    ) -> Outcome[Message]:
        return await self._request.path(f"{conversation_id}/messages").post(
            self._json(dto), model=Message
        )

    async def update_message(
        self, conversation_id: str, message_id: str, patch: MessageUpdate
    ) -> Outcome[Message]:
        return await self._request.path(
            f"{conversation_id}/messages/{message_id}"
        ).patch(self._json(patch), model=Message)

    async def delete_message(
        self,
        conversation_id: str,
        message_id: str,
        permanent: Optional[bool] = None,
    ) -> Outcome[DeleteResult]:
        return await (
            self._request.path(f"{conversation_id}/messages/{message_id}")
            .query({"permanent": permanent})
            .delete(model=DeleteResult)
        )

    async def restore_message(
        self, conversation_id: str, message_id: str
    ) -> Outcome[Message]:
        return await self._request.path(
            f"{conversation_id}/messages/{message_id}/restore"
        ).post({}, model=Message)
