# topmark:header:start
#
#   project      : CodeStamp
#   file         : test_steps.py
#   file_relpath : tests/pipeline/test_steps.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the step lifecycle, the runner and the generation context."""

from __future__ import annotations

from pathlib import Path

import pytest
from helpers_codestamp import make_config, quiet_options

from codestamp.errors import CodeStampError, TemplateExecutionError
from codestamp.pipeline.context import GenerationContext
from codestamp.pipeline.pipelines import GENERATE_PIPELINE, RENDER_PIPELINE
from codestamp.pipeline.runner import run
from codestamp.pipeline.status import GenerationStage
from codestamp.pipeline.steps.base import BaseStep
from codestamp.syntax import OutputSyntax

pytestmark: pytest.MarkDecorator = pytest.mark.pipeline


class RecordingStep(BaseStep):
    """Step that records its invocation and optionally fails."""

    def __init__(self, name: str, *, fail: bool = False, enabled: bool = True) -> None:
        super().__init__(name=name)
        self.fail = fail
        self.enabled = enabled
        self.ran = False

    def may_proceed(self, ctx: GenerationContext) -> bool:
        return self.enabled

    def run(self, ctx: GenerationContext) -> None:
        self.ran = True
        if self.fail:
            raise CodeStampError(f"{self.name} failed", stage=self.name)


def _ctx(path: Path | None = None) -> GenerationContext:
    return GenerationContext.create(
        path=path or Path("out.go"),
        config=make_config(*quiet_options()),
        source="",
        data={},
    )


def test_create_resolves_syntax() -> None:
    assert _ctx(Path("a.go")).syntax is OutputSyntax.GENERAL
    assert _ctx(Path("a.s")).syntax is OutputSyntax.ASSEMBLY
    assert _ctx(Path("a.txt")).syntax is OutputSyntax.UNFORMATTED
    assert _ctx().stage is GenerationStage.CONFIGURING


def test_runner_completes_when_every_step_succeeds() -> None:
    steps = [RecordingStep("a"), RecordingStep("b", enabled=False), RecordingStep("c")]
    ctx = run(_ctx(), steps)

    assert ctx.stage is GenerationStage.DONE
    assert ctx.steps == ["a", "c"]
    assert [s.ran for s in steps] == [True, False, True]


def test_first_failure_halts_the_run() -> None:
    steps = [RecordingStep("a"), RecordingStep("b", fail=True), RecordingStep("c")]
    ctx = run(_ctx(), steps)

    assert ctx.halted
    assert ctx.stage is GenerationStage.FAILED
    assert ctx.failed_step == "b"
    assert ctx.error is not None and ctx.error.stage == "b"
    assert not steps[2].ran


def test_halted_context_skips_steps() -> None:
    ctx = _ctx()
    ctx.fail(CodeStampError("boom"), at_step=RecordingStep("x"))
    step = RecordingStep("late")

    assert step(ctx) is ctx
    assert not step.ran
    assert ctx.steps == []


def test_base_step_run_is_abstract() -> None:
    with pytest.raises(NotImplementedError):
        BaseStep(name="raw").run(_ctx())


def test_render_pipeline_stops_after_render(tmp_path: Path) -> None:
    ctx = _ctx(tmp_path / "x.go")
    ctx.source = "{{ n }}"
    ctx.data = {"n": 1}

    ctx = run(ctx, RENDER_PIPELINE)
    assert ctx.steps == ["HeaderStep", "RenderStep"]
    assert ctx.stage is GenerationStage.DONE
    assert len(GENERATE_PIPELINE) == len(RENDER_PIPELINE) + 2


def test_context_to_dict_reports_failure(tmp_path: Path) -> None:
    ctx = _ctx(tmp_path / "x.go")
    ctx.source = "{{ missing }}"

    ctx = run(ctx, RENDER_PIPELINE)
    summary = ctx.to_dict()

    assert isinstance(ctx.error, TemplateExecutionError)
    assert summary["stage"] == "failed"
    assert summary["failed_step"] == "RenderStep"
    assert summary["steps"] == ["HeaderStep", "RenderStep"]
    assert summary["syntax"] == "general"
    assert summary["error"].startswith("[render] ")


def test_stage_styled_without_color() -> None:
    assert GenerationStage.DONE.styled(enabled=False) == "done"
    assert GenerationStage.DONE == "done"
    assert "done" in GenerationStage.DONE.styled()


def test_encoding_failure_halts_the_render_pipeline(tmp_path: Path) -> None:
    ctx = _ctx(tmp_path / "x.go")
    ctx.source = "{{ s }}"
    ctx.data = {"s": "\ud800"}

    ctx = run(ctx, RENDER_PIPELINE)

    assert ctx.stage is GenerationStage.FAILED
    assert ctx.failed_step == "RenderStep"
    assert ctx.error is not None and ctx.error.exit_code == 74
