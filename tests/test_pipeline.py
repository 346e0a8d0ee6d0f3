from __future__ import annotations

from talon_setup.pipeline import run_pipeline


class RecordingStep:
    def __init__(self, step_id, log, *, explode=False):
        self.step_id = step_id
        self.title = step_id
        self._log = log
        self._explode = explode

    def run(self, ctx):
        self._log.append(self.step_id)
        if self._explode:
            raise RuntimeError("boom")


def _steps(log, explode=()):
    return [RecordingStep(s, log, explode=s in explode) for s in ("a", "b", "c", "d")]


def test_runs_in_order(make_ctx):
    log = []
    result = run_pipeline(ctx=make_ctx(), steps=_steps(log))
    assert log == ["a", "b", "c", "d"]
    assert result.ran_steps == log


def test_raising_step_does_not_stop_later_steps(make_ctx):
    log = []
    result = run_pipeline(ctx=make_ctx(), steps=_steps(log, explode={"b"}))
    assert log == ["a", "b", "c", "d"]
    assert result.crashed_steps == ["b"]
    assert result.ran_steps == ["a", "c", "d"]


def test_start_stop_and_skip(make_ctx):
    log = []
    result = run_pipeline(ctx=make_ctx(), steps=_steps(log), start_at="b", stop_after="d", skip={"c"})
    assert log == ["b", "d"]
    assert result.skipped_steps == ["c"]
