import io
from pathlib import Path

from srm.logger import configure_logging
from srm.models import Flags
from srm.mover import TrashMover
from srm.policy import DeletionPolicy


def run_with_missing_trash(tmp_path: Path):
    src = tmp_path / "a.txt"
    src.write_text("x")
    trash = str(tmp_path / "missing")
    policy = DeletionPolicy(Flags(), trash, mover=TrashMover(trash), out=lambda line: None)
    return policy.run([str(src)])


def test_move_failure_logs_warning(tmp_path: Path):
    stream = io.StringIO()
    configure_logging(debug=False, stream=stream)

    result = run_with_missing_trash(tmp_path)

    assert result.exit_code == 1
    log = stream.getvalue()
    assert "WARNING srm.policy: move failed for" in log
    assert "DEBUG" not in log


def test_debug_logging(tmp_path: Path):
    stream = io.StringIO()
    configure_logging(debug=True, stream=stream)

    run_with_missing_trash(tmp_path)
    DeletionPolicy(Flags(), str(tmp_path), out=lambda line: None).run([str(tmp_path / "gone")])

    log = stream.getvalue()
    assert "WARNING srm.policy: move failed for" in log
    assert "DEBUG srm.policy: fatal-stat-error:" in log
