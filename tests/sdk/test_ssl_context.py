import ssl

import pytest

from graphnode._utils._ssl_context import create_ssl_context, get_httpx_client_kwargs


@pytest.fixture(autouse=True)
def no_ca_overrides(monkeypatch: pytest.MonkeyPatch):
    for name in ("SSL_CERT_FILE", "REQUESTS_CA_BUNDLE", "SSL_CERT_DIR"):
        monkeypatch.delenv(name, raising=False)


class TestSslContext:
    def test_verifies_certificates(self):
        context = create_ssl_context()

        assert isinstance(context, ssl.SSLContext)
        assert context.verify_mode == ssl.CERT_REQUIRED

    def test_cert_dir_from_environment(self, monkeypatch: pytest.MonkeyPatch, tmp_path):
        monkeypatch.setenv("SSL_CERT_DIR", str(tmp_path))

        assert isinstance(create_ssl_context(), ssl.SSLContext)

    def test_missing_ca_bundle_is_an_error(self, monkeypatch: pytest.MonkeyPatch, tmp_path):
        monkeypatch.setenv("SSL_CERT_FILE", str(tmp_path / "missing.pem"))

        with pytest.raises(OSError):
            create_ssl_context()

    def test_client_kwargs(self):
        kwargs = get_httpx_client_kwargs(12.5)

        assert kwargs["timeout"] == 12.5
        assert kwargs["follow_redirects"] is False
        assert isinstance(kwargs["verify"], ssl.SSLContext)
