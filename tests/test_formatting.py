import json

import pytest

from gostman.formatting import BACK, CREATE, DELETE, KeyBinding, default_headers, format_json


@pytest.mark.parametrize("text", ["", "not json", "{broken", "NaN", '{"a": 1} trailing'])
def test_format_json_returns_invalid_input_unchanged(text):
    assert format_json(text) == text


def test_format_json_pins_indentation():
    assert format_json('{"a":1}') == '{\n  "a": 1\n}'


def test_format_json_preserves_content():
    text = '{"name":"x","items":[1,2,{"deep":true}],"none":null}'
    result = format_json(text)
    assert json.loads(result) == json.loads(text)
    assert '\n    {\n      "deep": true' in result


def test_format_json_keeps_non_ascii():
    result = format_json('{"city":"Zürich"}')
    assert "Zürich" in result


def test_default_headers_content():
    headers = json.loads(default_headers())
    assert headers == {
        "Content-Type": "application/json",
        "Accept": "*/*",
        "Accept-Encoding": "gzip, deflate, br",
        "Connection": "keep-alive",
    }


def test_default_headers_sorted_and_indented():
    text = default_headers()
    keys = list(json.loads(text))
    assert keys == sorted(keys)
    assert text.splitlines()[1].startswith('  "Accept"')


def test_key_binding_matches():
    assert CREATE.matches("n")
    assert not CREATE.matches("d")
    assert DELETE.matches("d")
    assert BACK.matches("esc")


def test_disabled_key_binding_never_matches():
    binding = KeyBinding(("x",), "x", "thing", enabled=False)
    assert binding.matches("x") is False


def test_help_text():
    assert CREATE.help_text() == "n create"
    assert DELETE.help_text().endswith("delete")