import json
import logging
import sys
from pathlib import Path

sys.path.append(str(Path(__file__).resolve().parents[1]))

from stylist_app.config import StylistConfig
from stylist_app.logging_config import (
    CORRELATION_ID,
    JsonFormatter,
    correlation_context,
    log_event,
    operation_context,
    redact_for_log,
)


def test_config_reads_environment_file_and_overrides(tmp_path, monkeypatch):
    config_file = tmp_path / "staging.yaml"
    config_file.write_text(
        "# staging settings\n"
        "wardrobe_db_path: \"/srv/wardrobe.db\"\n"
        "suggestion_count: 5\n"
        "recent_window_days: not-a-number\n"
    )
    monkeypatch.setenv("APP_ENV", "staging")
    monkeypatch.setenv("STYLIST_CONFIG_DIR", str(tmp_path))
    monkeypatch.setenv("OPENWEATHER_API_KEY", "from-env")
    monkeypatch.delenv("APP_CONFIG_PATH", raising=False)
    monkeypatch.delenv("SUGGESTION_COUNT", raising=False)
    monkeypatch.delenv("WARDROBE_DB_PATH", raising=False)
    monkeypatch.delenv("RECENT_WINDOW_DAYS", raising=False)

    config = StylistConfig.from_env()
    assert config.database_path == "/srv/wardrobe.db"
    assert config.suggestion_count == 5
    assert config.recent_window_days == 7
    assert config.weather_api_key == "from-env"
    assert config.environment == "staging"


def test_config_defaults_without_environment(monkeypatch):
    for key in ("APP_ENV", "APP_CONFIG_PATH", "WARDROBE_DB_PATH", "RATED_HISTORY_LIMIT", "SUGGESTION_COUNT"):
        monkeypatch.delenv(key, raising=False)
    config = StylistConfig.from_env()
    assert config.database_path == "data/wardrobe.db"
    assert config.rated_history_limit == 50
    assert config.suggestion_count == 10


def test_redaction_masks_personal_fields():
    scrubbed = redact_for_log(
        {"user_id": "u1", "zip_code": "10001", "note": "mail me at a@b.com", "link": "https://x.test/p.png", "count": 3}
    )
    assert scrubbed["user_id"] == "[redacted]"
    assert scrubbed["zip_code"] == "[redacted]"
    assert scrubbed["note"] == "mail me at [redacted-email]"
    assert scrubbed["link"] == "[redacted-url]"
    assert scrubbed["count"] == 3


def test_json_formatter_includes_correlation_id():
    record = logging.LogRecord("stylist", logging.INFO, __file__, 1, "outfit_generation_completed", None, None)
    record.kept = 4
    with correlation_context("abc123"):
        payload = json.loads(JsonFormatter().format(record))
    assert payload["correlation_id"] == "abc123"
    assert payload["event"] == "outfit_generation_completed"
    assert payload["kept"] == 4


def test_sequential_operations_get_distinct_ids_and_leave_no_id_behind():
    with operation_context("first") as first_id:
        assert CORRELATION_ID.get() == first_id
    with operation_context("second") as second_id:
        assert CORRELATION_ID.get() == second_id
    assert first_id != second_id
    assert CORRELATION_ID.get() is None


def test_nested_operation_inherits_enclosing_id():
    with correlation_context() as outer_id:
        with operation_context("inner") as inner_id:
            assert inner_id == outer_id
        assert CORRELATION_ID.get() == outer_id
    assert CORRELATION_ID.get() is None


def test_log_event_outside_operation_does_not_set_id(caplog):
    logger = logging.getLogger("stylist.tests")
    with caplog.at_level(logging.INFO, logger="stylist.tests"):
        log_event(logger, logging.INFO, "standalone_event", user_id="u1", kept=2)
        log_event(logger, logging.INFO, "standalone_event", kept=3)

    assert CORRELATION_ID.get() is None
    records = [record for record in caplog.records if record.event == "standalone_event"]
    assert [record.correlation_id for record in records] == [None, None]
    assert records[0].user_id == "[redacted]"
    assert records[1].kept == 3
