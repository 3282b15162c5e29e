from typing import List, Optional

from .._http import Outcome
from ..models import Folder, FolderCreate, FolderUpdate, Note, NoteCreate, NoteUpdate
from ._base_service import BaseService


class NotesService(BaseService):
    """Notes and the folders that organize them."""

    _base_path = "/v1"

    async def create_note(self, dto: NoteCreate) -> Outcome[Note]:
        return await self._request.path("/notes").post(self._json(dto), model=Note)

    async def list_notes(self) -> Outcome[List[Note]]:
        return await self._request.path("/notes").get(model=List[Note])

    async def get_note(self, note_id: str) -> Outcome[Note]:
        return await self._request.path(f"/notes/{note_id}").get(model=Note)

    async def update_note(self, note_id: str, dto: NoteUpdate) -> Outcome[Note]:
        return await self._request.path(f"/notes/{note_id}").patch(
            self._json(dto), model=Note
        )

    async def delete_note(
        self, note_id: str, permanent: Optional[bool] = None
    ) -> Outcome[None]:
        return await (
            self._request.path(f"/notes/{note_id}")
            .query({"permanent": permanent})
            .delete()
        )

    async def restore_note(self, note_id: str) -> Outcome[Note]:
        return await self._request.path(f"/notes/{note_id}/restore").post(
            {}, model=Note
        )

    async def create_folder(self, dto: FolderCreate) -> Outcome[Folder]:
        return await self._request.path("/folders").post(self._json(dto), model=Folder)

    async def list_folders(self) -> Outcome[List[Folder]]:
        return await self._request.path("/folders").get(model=List[Folder])

    async def get_folder(self, folder_id: str) -> Outcome[Folder]:
        return await self._request.path(f"/folders/{folder_id}").get(model=Folder)

    async def update_folder(self, folder_id: str, dto: FolderUpdate) -> Outcome[Folder]:
        return await self._request.path(f"/folders/{folder_id}").patch(
            self._json(dto), model=Folder
        )

    async def delete_folder(
        self, folder_id: str, permanent: Optional[bool] = None
    ) -> Outcome[None]:
        return await (
            self._request.path(f"/folders/{folder_id}")
            .query({"permanent": permanent})
            .delete()
        )

    async def restore_folder(self, folder_id: str) -> Outcome[Folder]:
        return await self._request.path(f"/folders/{folder_id}/restore").post(
            {}, model=Folder
        )
