from typing import Sequence

from .._http import Failure, HttpError, Outcome, Success
from .._utils._request_body import FileTypes, MultipartBody
from ..models import FileUploadResponse
from ._base_service import BaseService


class FilesService(BaseService):
    """Upload files to object storage and download them back by key.

    Keys look like ``{prefix}/{uuid}-{original filename}`` where the prefix is
    ``sdk-files`` for uploads made through this service and ``chat-files``
    for files attached during AI chats.
    """

    _base_path = "/api/v1/ai/files"

    async def upload_files(self, files: Sequence[FileTypes]) -> Outcome[FileUploadResponse]:
        """Upload files as ``multipart/form-data``.

        Args:
            files: File objects, bytes, or ``(filename, content[, content_type])``
                tuples, each sent under the ``files`` field.

        Returns:
            Outcome[FileUploadResponse]: Metadata of each stored file. The
            ``url`` of an attachment is the key accepted by :meth:`get_file`.

        Examples:
            ```python
            with open("report.pdf", "rb") as f:
                outcome = await client.files.upload_files([("report.pdf", f, "application/pdf")])

            if outcome.ok:
                key = outcome.data.attachments[0].url
            ```
        """
        body = MultipartBody(files=[("files", file) for file in files])
        return await self._request.post(body, model=FileUploadResponse)

    async def get_file(self, key: str) -> Outcome[bytes]:
        """Download a file by key.

        The payload is returned as raw bytes whatever its content type.

        Args:
            key: Storage key returned by :meth:`upload_files`, e.g.
                ``sdk-files/abc123-image.png``.
        """
        try:
            response = await self._request.path(key).send_raw("GET")

            if not 200 <= response.status_code < 300:
                try:
                    error_body = response.json()
                except ValueError:
                    error_body = response.text
                return Failure(
                    HttpError(
                        status_code=response.status_code,
                        message=f"HTTP {response.status_code}: {response.reason_phrase}",
                        body=error_body,
                    )
                )

            return Success(data=response.content, status_code=response.status_code)
        except Exception as e:
            self._logger.debug(f"Download of '{key}' failed: {e!r}")
            return Failure(HttpError(status_code=0, message=str(e) or type(e).__name__))
