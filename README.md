# gostman

A terminal client for composing, sending and saving HTTP requests.

## Installation

```
pip install .
```

## Running

```
gostman
gostman --store path/to/requests.json
```

`--store` chooses the JSON file that holds saved requests. Without it
the default location below is used.

The screen has a name field (up to 22 characters), a method field (up
to 6 characters), a URL field, and a panel with three tabs: Body,
Params and Headers. A new request starts with the name `New Request`
and a set of default headers. The response and its status show up in
the panel on the right.

## Keys

| Key | Action |
| --- | --- |
| `tab` | Move between the name, method, URL and tab fields |
| `enter` | Send the request (inside the tab panel it starts a new line) |
| `ctrl s` | Save the request |
| `ctrl left` / `ctrl right` | Switch between the Body, Params and Headers tabs |
| `ctrl d` | Open the dashboard of saved requests |
| `f2` | Show the help page |
| `f4` | Show the environment variables |
| `esc` | Go back from the help page, dashboard or environment screen |
| `ctrl c` | Quit |

When the tab panel does not have focus, `up`, `down`, `page up`,
`page down` and the mouse wheel scroll the response.

On the dashboard, `enter` opens the selected request, `n` starts a new
one, and `d` asks to delete the selected request (`y` confirms, `n`
cancels). If the delete fails, the editor is shown again.

## Requests

The method can be `GET`, `POST`, `PUT`, `PATCH`, `DELETE` or `HEAD`,
in any case. Any other method gives the status ` Incorrect Request `.

Headers and query parameters are given as JSON objects with string
values, for example:

```json
{
  "Content-Type": "application/json",
  "Authorization": "Bearer token"
}
```

Query parameters are added to the URL, replacing any parameter of the
same name already in it; the query is then re-encoded with its keys in
sorted order. The body and the headers are sent only with `POST`,
`PUT` and `PATCH`; `GET`, `DELETE` and `HEAD` go out without them. A
response that is valid JSON is shown indented by two spaces.

The same sending logic can be used from Python:

```python
from gostman.http_client import send

reply = send("GET", "http://localhost:8080/status", "{}", '{"page": "1"}')
print(reply.status)
print(reply.text)
```

## Saved data

Saved requests and variables are kept in one JSON file:

- Windows: `%APPDATA%\Gostman\gostman.json`
- Linux and macOS: `~/.local/share/Gostman/gostman.json`

The file can also be read and written from Python:

```python
from gostman.store import Request, RequestStore, default_store_path

store = RequestStore(default_store_path())
saved = store.save_request(Request(name="Status", url="http://localhost:8080/status", method="GET"))
print([request.name for request in store.requests()])
store.delete(saved.id)
```

`save_request` gives a request without an id a new one and appends it;
a request whose id is already stored replaces the stored one. `delete`
raises `RequestNotFoundError` for an unknown id.

## What it does not do

- The environment screen shows the stored variables and lets you edit
  them, but edits are not written back to the file.
- Variables are not substituted into URLs, headers or bodies.

## Development

```
pip install -e ".[test]"
pytest
```