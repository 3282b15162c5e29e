from typing import List, Literal

from ._base import ApiModel


class FileAttachment(ApiModel):
    """Metadata of an uploaded file.

    ``url`` is the storage key to pass to ``FilesService.get_file``, e.g.
    ``sdk-files/<uuid>-report.pdf``.
    """

    id: str
    type: Literal["image", "file"]
    url: str
    name: str
    mime_type: str
    size: int


class FileUploadResponse(ApiModel):
    attachments: List[FileAttachment]
