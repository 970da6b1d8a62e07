from pathlib import Path

from wordsearch.settings import Settings, EDITABLE_FIELDS, update_settings, get_editable_settings


def _fresh_settings() -> Settings:
    """Create a fresh Settings instance for testing."""
    return Settings()


def test_defaults(monkeypatch):
    for name in Settings.__dataclass_fields__:
        monkeypatch.delenv("WORDSEARCH_" + name, raising=False)
    cfg = _fresh_settings()
    assert cfg.DICTIONARY_PATH is None
    assert cfg.MIN_WORD_LENGTH == 1
    assert cfg.MAX_RESULTS == 0
    assert cfg.NOTIFY is False


def test_environment_overrides(monkeypatch, tmp_path):
    monkeypatch.setenv("WORDSEARCH_DICTIONARY_PATH", str(tmp_path / "words.txt"))
    monkeypatch.setenv("WORDSEARCH_MIN_WORD_LENGTH", "3")
    monkeypatch.setenv("WORDSEARCH_UNIQUE_WORDS", "yes")
    monkeypatch.setenv("WORDSEARCH_NTFY_TOPIC", "grid")
    cfg = _fresh_settings()
    assert cfg.DICTIONARY_PATH == Path(tmp_path / "words.txt")
    assert cfg.MIN_WORD_LENGTH == 3
    assert cfg.UNIQUE_WORDS is True
    assert cfg.NTFY_TOPIC == "grid"


def test_editable_fields_exist_on_settings():
    """All editable fields must be actual attributes on Settings."""
    cfg = _fresh_settings()
    for field_name in EDITABLE_FIELDS:
        assert hasattr(cfg, field_name), f"{field_name} not found on Settings"


def test_get_editable_settings():
    cfg = _fresh_settings()
    result = get_editable_settings(cfg)
    assert set(result.keys()) == set(EDITABLE_FIELDS.keys())
    assert result["UNIQUE_WORDS"] == cfg.UNIQUE_WORDS
    assert result["MAX_RESULTS"] == cfg.MAX_RESULTS


def test_update_int_field():
    cfg = _fresh_settings()
    errors = update_settings(cfg, MIN_WORD_LENGTH=4)
    assert errors == {}
    assert cfg.MIN_WORD_LENGTH == 4


def test_update_int_from_string():
    cfg = _fresh_settings()
    errors = update_settings(cfg, MAX_RESULTS="12")
    assert errors == {}
    assert cfg.MAX_RESULTS == 12


def test_update_negative_int_rejected():
    cfg = _fresh_settings()
    before = cfg.MAX_RESULTS
    errors = update_settings(cfg, MAX_RESULTS=-1)
    assert "MAX_RESULTS" in errors
    assert cfg.MAX_RESULTS == before


def test_update_bool_field():
    cfg = _fresh_settings()
    original = cfg.DEBUG
    errors = update_settings(cfg, DEBUG=not original)
    assert errors == {}
    assert cfg.DEBUG is (not original)


def test_update_bool_from_string():
    cfg = _fresh_settings()
    errors = update_settings(cfg, NOTIFY="true")
    assert errors == {}
    assert cfg.NOTIFY is True

    errors = update_settings(cfg, NOTIFY="false")
    assert errors == {}
    assert cfg.NOTIFY is False


def test_update_bool_garbage_rejected():
    cfg = _fresh_settings()
    errors = update_settings(cfg, NOTIFY="maybe")
    assert "NOTIFY" in errors


def test_update_string_field():
    cfg = _fresh_settings()
    errors = update_settings(cfg, NTFY_TOPIC="test-topic")
    assert errors == {}
    assert cfg.NTFY_TOPIC == "test-topic"


def test_update_multiple_fields():
    cfg = _fresh_settings()
    errors = update_settings(cfg, MAX_RESULTS=10, MIN_WORD_LENGTH=4, NTFY_TOPIC="multi")
    assert errors == {}
    assert cfg.MAX_RESULTS == 10
    assert cfg.MIN_WORD_LENGTH == 4
    assert cfg.NTFY_TOPIC == "multi"


def test_update_non_editable_field_returns_error():
    cfg = _fresh_settings()
    errors = update_settings(cfg, MAX_BOARD_CELLS=800)
    assert "MAX_BOARD_CELLS" in errors


def test_update_unknown_field_returns_error():
    cfg = _fresh_settings()
    errors = update_settings(cfg, NONEXISTENT_FIELD=42)
    assert "NONEXISTENT_FIELD" in errors


def test_update_partial_error():
    """Valid fields update even when invalid fields are present."""
    cfg = _fresh_settings()
    errors = update_settings(cfg, MAX_RESULTS=25, BAD_FIELD="nope")
    assert "BAD_FIELD" in errors
    assert cfg.MAX_RESULTS == 25
