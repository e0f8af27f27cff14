"""Sending HTTP requests described by the editor's text fields."""

from __future__ import annotations

import http.client
import json
import urllib.error
import urllib.request
from typing import Any, Mapping, NamedTuple
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

HEADERS_ERROR = " \n Error parsing Headers \n\n Correct the Headers format"
HEADERS_STATUS = " Incorrect Headers "
PARAMS_ERROR = " \n Error parsing Params \n\n Correct the Params format"
PARAMS_STATUS = " Incorrect Params "
METHOD_ERROR = "Request Method or Url is set incorrectly"
METHOD_STATUS = " Incorrect Request "

_SUPPORTED_METHODS = frozenset({"GET", "POST", "PUT", "DELETE", "HEAD", "PATCH"})
# Only these methods carry the body and the custom headers on the wire.
_BODY_METHODS = frozenset({"POST", "PUT", "PATCH"})


class Reply(NamedTuple):
    """Text to show in the response pane and the status line."""

    text: str
    status: str


def _reject_constant(name: str) -> Any:
    raise ValueError(f"invalid JSON literal: {name}")


def parse_string_map(text: str) -> dict[str, str]:
    """Parse a JSON object whose values are all strings."""
    try:
        data = json.loads(text, parse_constant=_reject_constant)
    except (ValueError, RecursionError) as exc:
        raise ValueError(f"invalid JSON: {exc}") from exc
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError("expected a JSON object")
    result: dict[str, str] = {}
    for key, value in data.items():
        if value is None:
            result[key] = ""
        elif isinstance(value, str):
            result[key] = value
        else:
            raise ValueError(f"value for {key!r} is not a string")
    return result


def apply_query_params(url: str, params: Mapping[str, str]) -> str:
    """Set the given query parameters on a URL, re-encoding the query with sorted keys."""
    parts = urlsplit(url)
    query: dict[str, list[str]] = {}
    for key, value in parse_qsl(parts.query, keep_blank_values=True):
        query.setdefault(key, []).append(value)
    for key, value in params.items():
        query[key] = [value]
    encoded = urlencode([(key, value) for key in sorted(query) for value in query[key]])
    return urlunsplit(parts._replace(query=encoded))


def _failed(exc: BaseException) -> Reply:
    return Reply(f"Failed to make request\n\n{exc}", "")


def _read(response: Any, code: int, reason: str) -> Reply:
    try:
        payload = response.read()
    except (OSError, http.client.HTTPException) as exc:
        return Reply(f"Failed to read response body\n\n{exc}", "")
    return Reply(payload.decode("utf-8", errors="replace"), f"{code} {reason}")


def send(
    method: str,
    url: str,
    headers_json: str,
    params_json: str = "",
    body: str = "",
    timeout: float | None = None,
) -> Reply:
    """Perform the request and return what should be shown to the user."""
    method = method.strip().upper()
    url = url.strip()

    try:
        headers = parse_string_map(headers_json.strip())
    except ValueError:
        return Reply(HEADERS_ERROR, HEADERS_STATUS)

    params_json = params_json.strip()
    if params_json:
        try:
            url = apply_query_params(url, parse_string_map(params_json))
        except ValueError:
            return Reply(PARAMS_ERROR, PARAMS_STATUS)

    if method not in _SUPPORTED_METHODS:
        return Reply(METHOD_ERROR, METHOD_STATUS)

    carries_body = method in _BODY_METHODS
    try:
        request = urllib.request.Request(
            url,
            data=body.encode("utf-8") if carries_body else None,
            headers=headers if carries_body else {},
            method=method,
        )
    except ValueError as exc:
        return _failed(exc)

    try:
        response = urllib.request.urlopen(request, timeout=timeout)
    except urllib.error.HTTPError as exc:
        with exc:
            return _read(exc, exc.code, exc.reason)
    except urllib.error.URLError as exc:
        return _failed(exc.reason)
    except (OSError, ValueError, http.client.HTTPException) as exc:
        return _failed(exc)

    with response:
        return _read(response, response.status, response.reason)