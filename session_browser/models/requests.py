"""Request bodies for the browser endpoints."""

from pydantic import BaseModel


class SearchRequest(BaseModel):
    query: str = ""


class SimulateFailureRequest(BaseModel):
    enabled: bool
