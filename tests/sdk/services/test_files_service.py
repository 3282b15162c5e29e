import httpx
import pytest
from pytest_httpx import HTTPXMock

from graphnode import GraphNodeClient


class TestFilesService:
    @pytest.mark.anyio
    async def test_upload_files_as_multipart(
        self, httpx_mock: HTTPXMock, client: GraphNodeClient, base_url: str
    ):
        httpx_mock.add_response(
            url=f"{base_url}/api/v1/ai/files",
            method="POST",
            json={
                "attachments": [
                    {
                        "id": "a-1",
                        "type": "file",
                        "url": "sdk-files/uuid-report.pdf",
                        "name": "report.pdf",
                        "mimeType": "application/pdf",
                        "size": 8,
                    }
                ]
            },
        )

        outcome = await client.files.upload_files(
            [("report.pdf", b"%PDF-1.7", "application/pdf")]
        )

        assert outcome.ok
        assert outcome.data.attachments[0].url == "sdk-files/uuid-report.pdf"
        sent_request = httpx_mock.get_request()
        assert sent_request is not None
        assert sent_request.headers["Content-Type"].startswith("multipart/form-data; boundary=")
        assert b'name="files"; filename="report.pdf"' in sent_request.content

    @pytest.mark.anyio
    async def test_get_file_returns_bytes(
        self, httpx_mock: HTTPXMock, client: GraphNodeClient, base_url: str
    ):
        httpx_mock.add_response(
            url=f"{base_url}/api/v1/ai/files/sdk-files/uuid-image.png",
            content=b"\x89PNG",
            headers={"Content-Type": "image/png"},
        )

        outcome = await client.files.get_file("sdk-files/uuid-image.png")

        assert outcome.ok
        assert outcome.data == b"\x89PNG"

    @pytest.mark.anyio
    async def test_get_file_not_found(
        self, httpx_mock: HTTPXMock, client: GraphNodeClient, base_url: str
    ):
        httpx_mock.add_response(
            url=f"{base_url}/api/v1/ai/files/sdk-files/missing.png",
            status_code=404,
            text="not found",
        )

        outcome = await client.files.get_file("sdk-files/missing.png")

        assert not outcome.ok
        assert outcome.error.status_code == 404
        assert outcome.error.body == "not found"

    @pytest.mark.anyio
    async def test_get_file_network_error(
        self, httpx_mock: HTTPXMock, client: GraphNodeClient, base_url: str
    ):
        httpx_mock.add_exception(
            httpx.ConnectError("connection refused"),
            url=f"{base_url}/api/v1/ai/files/sdk-files/a.png",
        )

        outcome = await client.files.get_file("sdk-files/a.png")

        assert not outcome.ok
        assert outcome.error.status_code == 0
        assert outcome.error.message == "connection refused"
