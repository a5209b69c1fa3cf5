from types import SimpleNamespace

import pytest

from app import create_app
from estimator.config import Settings


class FakeCompletions:
    def __init__(self, content=None, exc=None):
        self.content = content
        self.exc = exc
        self.calls = []

    async def create(self, **kwargs):
        self.calls.append(kwargs)
        if self.exc is not None:
            raise self.exc
        message = SimpleNamespace(content=self.content)
        return SimpleNamespace(choices=[SimpleNamespace(message=message)])


class FakeOpenAI:
    """
    Stands in for the AsyncOpenAI constructor: calling it returns itself,
    and it is used as `async with` the same way the real client is.
    """

    def __init__(self, content=None, exc=None):
        self.chat = SimpleNamespace(completions=FakeCompletions(content=content, exc=exc))
        self.closed = 0

    def __call__(self):
        return self

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc_info):
        self.closed += 1


def fake_openai(content=None, exc=None):
    return FakeOpenAI(content=content, exc=exc)


class FakeEstimator:
    def __init__(self, result=None, exc=None):
        self.result = result
        self.exc = exc
        self.calls = []

    async def estimate(self, details):
        self.calls.append(details)
        if self.exc is not None:
            raise self.exc
        return self.result


KYIV_PAYLOAD = (
    '{"estimated_price_uah": 1500000, '
    '"price_range_uah": "1450000 - 1550000", '
    '"justification": "Середня ціна за м² у Києві."}'
)


@pytest.fixture
def settings(tmp_path):
    return Settings(
        api_key="test-key",
        secret_key="test-secret",
        model="gpt-4o-mini",
        session_file_dir=str(tmp_path / "sessions"),
    )


@pytest.fixture
def make_client(settings):
    def _make(estimator):
        app = create_app(settings=settings, estimator=estimator)
        app.config["TESTING"] = True
        return app.test_client()

    return _make
