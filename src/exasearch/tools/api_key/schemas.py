"""
Pydantic schemas for API key tool requests.
"""
from pydantic import Field

from exasearch.tools.search.schemas import RequestModel


class SetApiKeyRequest(RequestModel):
    api_key: str = Field(alias="apiKey", description="Your Exa API key from dashboard.exa.ai")


class CheckApiKeyRequest(RequestModel):
    pass
