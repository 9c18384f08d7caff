"""
What: Validate default LamaConfig values and env parsing.
"""

from lama.config import DEFAULT_LOG_CONFIG_PATH, LamaConfig


def test_defaults(monkeypatch):
    monkeypatch.delenv("BINARY_MIME_TYPES", raising=False)
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    monkeypatch.delenv("LOG_CONFIG_PATH", raising=False)

    config = LamaConfig(_env_file=None)

    assert config.BINARY_MIME_TYPES == []
    assert config.LOG_LEVEL == "INFO"
    assert config.LOG_CONFIG_PATH == DEFAULT_LOG_CONFIG_PATH


def test_binary_mime_types_comma_separated(monkeypatch):
    monkeypatch.setenv("BINARY_MIME_TYPES", "image/*, application/pdf")

    config = LamaConfig(_env_file=None)

    assert config.BINARY_MIME_TYPES == ["image/*", "application/pdf"]


def test_binary_mime_types_json_list(monkeypatch):
    monkeypatch.setenv("BINARY_MIME_TYPES", '["image/*", "+octet"]')

    config = LamaConfig(_env_file=None)

    assert config.BINARY_MIME_TYPES == ["image/*", "+octet"]


def test_binary_mime_types_empty_string(monkeypatch):
    monkeypatch.setenv("BINARY_MIME_TYPES", "")

    assert LamaConfig(_env_file=None).BINARY_MIME_TYPES == []
