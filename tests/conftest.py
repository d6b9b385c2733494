"""
Fixtures for end-to-end tests with FastAPI + pytest-asyncio.
The app is built per test with its own static directory and a fake sender,
so nothing reaches a real push service.
"""
import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from app.core.config import Settings, VapidConfig
from app.main import create_app
from app.services.notify_push import SendResult

PUBLIC_KEY = "BNcRdreALRFXTkOOUHK1EtK2wtaz5Ry4YfYCA_0QTpQtUbVlUls0VJXg7A8u-Ts1XbjhazAkj7I99e8QcYP7DkM"
PRIVATE_KEY = "tUxbf-Mvu-3dcW5BpA1YW5cPeZ7ISwIOkf2aTQgeuFM"


class FakeSender:
    def __init__(self, result: SendResult | None = None):
        self.result = result or SendResult(ok=True)
        self.calls = []

    async def send(self, subscription, payload, options):
        self.calls.append((subscription, payload, options))
        return self.result


@pytest.fixture
def static_dir(tmp_path):
    (tmp_path / "index.html").write_text("<h1>push</h1>")
    (tmp_path / "service-worker.js").write_text("self.addEventListener('push', () => {});")
    (tmp_path / "app.js").write_text("console.log('app');")
    js = tmp_path / "js"
    js.mkdir()
    (js / "worker.js").write_text("// worker")
    return tmp_path


@pytest.fixture
def vapid():
    return VapidConfig(subject="mailto:admin@example.com", public_key=PUBLIC_KEY, private_key=PRIVATE_KEY)


@pytest.fixture
def app(static_dir, vapid):
    settings = Settings(
        vapid_public_key=vapid.public_key,
        vapid_private_key=vapid.private_key,
        vapid_subject=vapid.subject,
        static_dir=str(static_dir),
    )
    return create_app(settings, vapid)


@pytest.fixture
def fake_sender(app):
    sender = FakeSender()
    app.state.push_sender = sender
    return sender


@pytest_asyncio.fixture
async def async_client(app):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://localhost:3003") as client:
        yield client


@pytest_asyncio.fixture
async def remote_client(app):
    """Client whose Host header is a public name, as seen behind a proxy."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://example.com") as client:
        yield client
