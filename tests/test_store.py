import json
import uuid
from pathlib import Path

import pytest

from gostman.store import (
    Request,
    RequestNotFoundError,
    RequestStore,
    SavedData,
    app_data_path,
)


def _sample(**overrides):
    values = dict(
        name="List users",
        url="http://localhost/users",
        method="GET",
        headers='{"Accept":"*/*"}',
        body="",
        query_params='{"page":"1"}',
        response="[]",
    )
    values.update(overrides)
    return Request(**values)


def test_request_dict_round_trip_uses_stored_keys():
    request = _sample(id="abc")
    data = request.to_dict()
    assert data["queryParams"] == request.query_params
    assert set(data) == {"id", "name", "url", "method", "headers", "body", "queryParams", "response"}
    assert Request.from_dict(data) == request


def test_request_from_partial_dict_defaults_to_empty():
    request = Request.from_dict({"name": "only"})
    assert request.name == "only"
    assert request.url == ""
    assert request.query_params == ""


def test_saved_data_round_trip():
    saved = SavedData(variables='{"k":"v"}', requests=[_sample(id="1"), _sample(id="2")])
    assert SavedData.from_dict(saved.to_dict()) == saved


def test_saved_data_from_null_requests():
    saved = SavedData.from_dict({"variables": "", "requests": None})
    assert saved.requests == []


def test_app_data_path_windows():
    result = app_data_path("win32", {"APPDATA": "C:/Users/someone/AppData"})
    assert result == Path("C:/Users/someone/AppData") / "Gostman"


def test_app_data_path_unix():
    result = app_data_path("linux", {"HOME": "/home/someone"})
    assert result == Path("/home/someone") / ".local" / "share" / "Gostman"


def test_load_missing_file_is_empty(tmp_path):
    store = RequestStore(tmp_path / "absent.json")
    assert store.load() == SavedData()
    assert store.requests() == []


def test_load_corrupt_file_is_empty(tmp_path):
    path = tmp_path / "store.json"
    path.write_text("{not json", encoding="utf-8")
    assert RequestStore(path).load() == SavedData()


def test_save_new_request_creates_file_and_assigns_id(tmp_path):
    path = tmp_path / "nested" / "dir" / "store.json"
    store = RequestStore(path)
    saved = store.save_request(_sample())
    assert path.exists()
    uuid.UUID(saved.id)
    assert store.requests() == [saved]


def test_save_writes_one_space_indent(tmp_path):
    path = tmp_path / "store.json"
    RequestStore(path).save_request(_sample())
    lines = path.read_text(encoding="utf-8").splitlines()
    assert ' "requests": [' in lines


def test_save_existing_id_replaces(tmp_path):
    store = RequestStore(tmp_path / "store.json")
    first = store.save_request(_sample())
    second = store.save_request(_sample(name="Other"))
    store.save_request(_sample(id=first.id, name="Renamed"))
    requests = store.requests()
    assert [r.id for r in requests] == [first.id, second.id]
    assert requests[0].name == "Renamed"


def test_save_unknown_id_changes_nothing(tmp_path):
    store = RequestStore(tmp_path / "store.json")
    first = store.save_request(_sample())
    store.save_request(_sample(id="missing-id", name="Ghost"))
    assert store.requests() == [first]


def test_variables_are_read(tmp_path):
    path = tmp_path / "store.json"
    path.write_text(json.dumps({"variables": '{"host":"localhost"}', "requests": []}), encoding="utf-8")
    assert RequestStore(path).variables() == '{"host":"localhost"}'


def test_delete_removes_request(tmp_path):
    store = RequestStore(tmp_path / "store.json")
    first = store.save_request(_sample())
    second = store.save_request(_sample(name="Second"))
    store.delete(first.id)
    assert store.requests() == [second]


def test_delete_last_request_leaves_empty_list(tmp_path):
    path = tmp_path / "store.json"
    store = RequestStore(path)
    only = store.save_request(_sample())
    store.delete(only.id)
    assert json.loads(path.read_text(encoding="utf-8"))["requests"] == []


def test_delete_unknown_id_raises(tmp_path):
    store = RequestStore(tmp_path / "store.json")
    store.save_request(_sample())
    with pytest.raises(RequestNotFoundError) as info:
        store.delete("nope")
    assert info.value.request_id == "nope"
    assert "id not found: nope" in str(info.value)


def test_delete_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        RequestStore(tmp_path / "absent.json").delete("x")


def test_delete_corrupt_file_raises(tmp_path):
    path = tmp_path / "store.json"
    path.write_text("{broken", encoding="utf-8")
    with pytest.raises(ValueError):
        RequestStore(path).delete("x")


def test_delete_empty_file_reports_not_found(tmp_path):
    path = tmp_path / "store.json"
    path.write_text("", encoding="utf-8")
    with pytest.raises(RequestNotFoundError):
        RequestStore(path).delete("x")