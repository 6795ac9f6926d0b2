# tests/test_utils.py - Log and Metrics helpers

from trie_dictionary.utils.logger_utils import Log
from trie_dictionary.utils.metrics_tracker import Metrics


def test_log_writes_file(tmp_path, capsys):
    path = tmp_path / "sub" / "app.log"
    log = Log(str(path), use_color=False, level="INFO")
    log.debug("hidden")
    log.info("loaded")
    log.error("broken")
    text = path.read_text(encoding="utf-8")
    assert "hidden" not in text
    assert "INFO    | loaded" in text
    assert "ERROR   | broken" in text
    assert "loaded" in capsys.readouterr().out


def test_log_no_echo(tmp_path, capsys):
    log = Log(str(tmp_path / "a.log"), echo=False)
    log.warning("quiet")
    assert capsys.readouterr().out == ""


def test_time_block_records_metric(tmp_path):
    path = tmp_path / "metrics.log"
    Log.configure(str(path), echo=False)
    with Log.time_block("load_dictionary") as t:
        sum(range(100))
    assert t.elapsed >= 0.0
    assert "load_dictionary done:" in path.read_text(encoding="utf-8")


def test_metrics_avg_and_persist(tmp_path):
    p = tmp_path / "metrics.json"
    m = Metrics(str(p))
    m.record("search", 0.2)
    m.record("search", 0.4)
    assert m.count("search") == 2
    assert abs(m.avg("search") - 0.3) < 1e-9
    assert m.avg("missing") == 0.0
    m.save()
    again = Metrics(str(p))
    assert again.count("search") == 2


def test_metrics_in_memory():
    m = Metrics()
    m.record("insert", 1.0)
    m.save()
    assert m.snapshot() == {"insert": {"count": 1, "avg": 1.0}}
