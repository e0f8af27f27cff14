"""Persistence of saved requests and environment variables."""

from __future__ import annotations

import json
import os
import sys
import uuid
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any, Mapping

APP_FOLDER_NAME = "Gostman"
STORE_FILE_NAME = "gostman.json"

# (attribute name, key in the stored JSON document)
_REQUEST_FIELDS = (
    ("id", "id"),
    ("name", "name"),
    ("url", "url"),
    ("method", "method"),
    ("headers", "headers"),
    ("body", "body"),
    ("query_params", "queryParams"),
    ("response", "response"),
)


def _text(value: Any) -> str:
    return value if isinstance(value, str) else ""


@dataclass
class Request:
    """A single saved HTTP request together with its last response."""

    id: str = ""
    name: str = ""
    url: str = ""
    method: str = ""
    headers: str = ""
    body: str = ""
    query_params: str = ""
    response: str = ""

    def to_dict(self) -> dict[str, str]:
        return {key: getattr(self, attr) for attr, key in _REQUEST_FIELDS}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Request":
        return cls(**{attr: _text(data.get(key)) for attr, key in _REQUEST_FIELDS})


@dataclass
class SavedData:
    """The whole stored document: variables plus the list of requests."""

    variables: str = ""
    requests: list[Request] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "variables": self.variables,
            "requests": [request.to_dict() for request in self.requests],
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "SavedData":
        raw_requests = data.get("requests")
        if not isinstance(raw_requests, list):
            raw_requests = []
        return cls(
            variables=_text(data.get("variables")),
            requests=[Request.from_dict(item) for item in raw_requests if isinstance(item, Mapping)],
        )


class RequestNotFoundError(LookupError):
    """Raised when no saved request carries the given id."""

    def __init__(self, request_id: str) -> None:
        super().__init__(f"id not found: {request_id}")
        self.request_id = request_id


def app_data_path(platform: str, environ: Mapping[str, str]) -> Path:
    """Return the application data folder for the given platform."""
    if platform.startswith("win"):
        return Path(environ.get("APPDATA", "")) / APP_FOLDER_NAME
    return Path(environ.get("HOME", "")) / ".local" / "share" / APP_FOLDER_NAME


def default_store_path() -> Path:
    """Return the location of the store file for the current user."""
    return app_data_path(sys.platform, os.environ) / STORE_FILE_NAME


class RequestStore:
    """Reads and writes the JSON file holding saved requests."""

    def __init__(self, path: str | os.PathLike[str] | None = None) -> None:
        self.path = Path(path) if path is not None else default_store_path()

    def load(self) -> SavedData:
        """Return the stored data; a missing or unreadable document yields empty data."""
        try:
            raw = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return SavedData()
        try:
            parsed = json.loads(raw)
        except ValueError:
            return SavedData()
        if not isinstance(parsed, Mapping):
            return SavedData()
        return SavedData.from_dict(parsed)

    def requests(self) -> list[Request]:
        return self.load().requests

    def variables(self) -> str:
        return self.load().variables

    def save_request(self, request: Request) -> Request:
        """Store a request, giving it a fresh id when it has none.

        A request whose id matches a stored one replaces it; a request with an
        id that is not stored leaves the file unchanged. Returns the request as stored.
        """
        self.path.parent.mkdir(parents=True, exist_ok=True)
        data = self.load()
        if not request.id:
            request = replace(request, id=str(uuid.uuid4()))
            data.requests.append(request)
        else:
            data.requests = [
                request if existing.id == request.id else existing
                for existing in data.requests
            ]
        self._write(data, indent=1)
        return request

    def delete(self, request_id: str) -> None:
        """Remove the request with the given id from the store."""
        raw = self.path.read_text(encoding="utf-8")
        data = SavedData()
        if raw:
            try:
                parsed = json.loads(raw)
            except ValueError as exc:
                raise ValueError(f"failed to parse JSON: {exc}") from exc
            if not isinstance(parsed, Mapping):
                raise ValueError("failed to parse JSON: expected an object")
            data = SavedData.from_dict(parsed)

        position = next(
            (index for index, request in enumerate(data.requests) if request.id == request_id),
            None,
        )
        if position is None:
            raise RequestNotFoundError(request_id)
        del data.requests[position]
        self._write(data, indent=2)

    def _write(self, data: SavedData, indent: int) -> None:
        text = json.dumps(data.to_dict(), indent=indent, ensure_ascii=False)
        self.path.write_text(text, encoding="utf-8")