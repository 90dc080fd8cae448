"""Tests for StepPlayback: stepping forward, back, and reset over a trace."""

from jssim.playback import StepPlayback
from jssim.run import simulate
from jssim.trace_types import StepType

SOURCE = "var x = 1; console.log(x);"


class TestStepPlayback:
    def test_starts_with_nothing_revealed(self):
        playback = StepPlayback(simulate(SOURCE))
        assert playback.current == 0
        assert playback.executed_steps == ()
        assert not playback.at_end

    def test_advance_reveals_steps_in_order(self):
        trace = simulate(SOURCE)
        playback = StepPlayback(trace)
        first = playback.advance()
        assert first.type == StepType.CREATE_GLOBAL_CONTEXT
        assert playback.executed_steps == trace.steps[:1]

    def test_advance_past_end_is_a_no_op(self):
        trace = simulate(SOURCE)
        playback = StepPlayback(trace)
        for _ in range(len(trace)):
            playback.advance()
        assert playback.at_end
        assert playback.advance() is None
        assert playback.current == len(trace)

    def test_retreat_hides_last_step(self):
        playback = StepPlayback(simulate(SOURCE))
        playback.advance()
        playback.advance()
        playback.retreat()
        assert playback.current == 1

    def test_retreat_at_start_stays_at_zero(self):
        playback = StepPlayback(simulate(SOURCE))
        playback.retreat()
        assert playback.current == 0

    def test_reset_clears_loaded_trace(self):
        playback = StepPlayback(simulate(SOURCE))
        playback.advance()
        playback.reset()
        assert playback.steps == ()
        assert playback.current == 0
        assert playback.advance() is None

    def test_load_rewinds_cursor(self):
        playback = StepPlayback(simulate(SOURCE))
        playback.advance()
        playback.load(simulate("var y;"))
        assert playback.current == 0
        assert len(playback.steps) == 2

    def test_empty_playback(self):
        playback = StepPlayback()
        assert playback.at_end
        assert playback.advance() is None

    def test_walking_does_not_change_trace(self):
        trace = simulate(SOURCE)
        before = [s.to_dict() for s in trace.steps]
        playback = StepPlayback(trace)
        playback.advance()
        playback.retreat()
        playback.advance()
        assert [s.to_dict() for s in trace.steps] == before
