from types import SimpleNamespace

import pytest

from exasearch.agent import ExaSearchAgent, set_agent
from exasearch.config import reset_settings_cache
from exasearch.workspace import InMemoryWorkspaceStore


class FakeExa:
    """Stands in for exa_py.AsyncExa and records every call."""

    def __init__(self, api_key, search_results=None, contents_results=None, error=None):
        self.api_key = api_key
        self.search_results = search_results or []
        self.contents_results = contents_results
        self.error = error
        self.calls = []

    def _respond(self, name, results, *args, **kwargs):
        self.calls.append((name, args, kwargs))
        if self.error is not None:
            raise self.error
        return SimpleNamespace(results=results)

    async def search(self, query, **kwargs):
        return self._respond("search", self.search_results, query, **kwargs)

    async def find_similar(self, url, **kwargs):
        return self._respond("find_similar", self.search_results, url, **kwargs)

    async def get_contents(self, urls, **kwargs):
        if self.contents_results is not None:
            results = self.contents_results
        else:
            results = [{"url": url, "title": f"Page {url}", "text": f"Body of {url}"} for url in urls]
        return self._respond("get_contents", results, urls, **kwargs)


class FakeExaFactory:
    """Client factory handing out FakeExa instances configured per test."""

    def __init__(self):
        self.search_results = []
        self.contents_results = None
        self.error = None
        self.clients = []

    def __call__(self, api_key):
        client = FakeExa(
            api_key,
            search_results=self.search_results,
            contents_results=self.contents_results,
            error=self.error,
        )
        self.clients.append(client)
        return client

    @property
    def last(self):
        return self.clients[-1]


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """Isolate tests from the developer's environment."""
    for key in (
        "EXA_API_KEY", "EXA_WORKSPACE_ID", "EXA_USE_AUTOPROMPT",
        "WORKSPACE_STORE", "WORKSPACE_STORE_DIR", "HOST", "PORT", "LOG_LEVEL",
    ):
        monkeypatch.delenv(key, raising=False)
    reset_settings_cache()
    yield
    reset_settings_cache()
    set_agent(None)


@pytest.fixture
def store():
    return InMemoryWorkspaceStore()


@pytest.fixture
def exa():
    return FakeExaFactory()


@pytest.fixture
def agent(store, exa):
    agent = ExaSearchAgent.create(store, default_api_key="", client_factory=exa)
    set_agent(agent)
    return agent


@pytest.fixture
def sample_results():
    return [
        {
            "title": "Exa launches",
            "url": "https://exa.ai/blog",
            "publishedDate": "2024-05-01",
            "author": "Exa Team",
            "highlights": ["  neural search  "],
        },
        {"url": "https://example.com/untitled"},
    ]
