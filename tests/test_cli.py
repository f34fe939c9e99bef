import json
import logging

import pytest

from fars import cli
from fars.utils.logging import JsonFormatter, configure_logging


@pytest.fixture(autouse=True)
def _reset_fars_logger():
    yield
    logger = logging.getLogger("fars")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)


def test_years(capsys):
    cli.main(["years"])
    assert capsys.readouterr().out.split() == ["2013", "2014", "2015"]


def test_summarize_skips_missing_years(data_dir, capsys, tmp_path):
    out = tmp_path / "summary.csv"
    cli.main(["--data-dir", str(data_dir), "summarize",
              "--years", "2001", "1990", "--output", str(out)])
    captured = capsys.readouterr()
    assert "Skipped years: 1990" in captured.err
    assert "2001" in captured.out
    assert out.exists()


def test_summarize_all_missing_exits(data_dir):
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["--data-dir", str(data_dir), "summarize", "--years", "1990"])
    assert excinfo.value.code == 1


def test_map_invalid_region_exits(capsys):
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["map", "--region", "73", "--year", "2013", "--output", "unused.html"])
    assert excinfo.value.code == 1
    assert "invalid region number: 73" in capsys.readouterr().err


def test_map_writes_output(data_dir, tmp_path, capsys):
    out = tmp_path / "map.html"
    cli.main(["--data-dir", str(data_dir), "map",
              "--region", "1", "--year", "2001", "--output", str(out)])
    assert out.exists()
    assert "Saved" in capsys.readouterr().out


def test_json_formatter_merges_extra():
    record = logging.LogRecord("fars.x", logging.WARNING, __file__, 1,
                               "invalid year: %s", ("9999",), None)
    record.year = "9999"
    payload = json.loads(JsonFormatter().format(record))
    assert payload["msg"] == "invalid year: 9999"
    assert payload["level"] == "WARNING"
    assert payload["year"] == "9999"


def test_json_formatter_sorts_extras_and_drops_none():
    record = logging.LogRecord("fars.x", logging.INFO, __file__, 1,
                               "no accidents to plot", (), None)
    record.year = "2013"
    record.region = 28
    record.path = None
    payload = json.loads(JsonFormatter().format(record))
    assert list(payload) == ["ts", "level", "logger", "msg", "region", "year"]
    assert payload["ts"].endswith("+00:00")


def test_configure_logging_does_not_stack_handlers():
    configure_logging()
    configure_logging(json_format=True)
    handlers = [h for h in logging.getLogger("fars").handlers
                if getattr(h, "_fars_handler", False)]
    assert len(handlers) == 1
    assert isinstance(handlers[0].formatter, JsonFormatter)
