from typing import Optional

from ._base import ApiModel


class Note(ApiModel):
    id: str
    title: str
    content: str
    folder_id: Optional[str] = None
    created_at: str
    updated_at: str
    deleted_at: Optional[str] = None


class NoteCreate(ApiModel):
    id: str
    title: Optional[str] = None
    content: str
    folder_id: Optional[str] = None


class NoteUpdate(ApiModel):
    title: Optional[str] = None
    content: Optional[str] = None
    folder_id: Optional[str] = None


class Folder(ApiModel):
    id: str
    name: str
    parent_id: Optional[str] = None
    created_at: str
    updated_at: str
    deleted_at: Optional[str] = None


class FolderCreate(ApiModel):
    name: str
    parent_id: Optional[str] = None


class FolderUpdate(ApiModel):
    name: Optional[str] = None
    parent_id: Optional[str] = None
