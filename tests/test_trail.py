"""
Tests for trail lookup.
"""
from conftest import make_stream
from trajectory.trail import resolve_trail


class TestResolveTrail:

    def test_nearest_first_and_bounded(self):
        stream = make_stream(n_ticks=30, n_insects=3)
        current = stream.sample_for(1, 20)

        trail = resolve_trail(current, stream, length=10, offset=1)

        assert len(trail) == 10
        assert all(s.trajectory_id == 1 for s in trail)
        ticks = [stream.tick_of(s.time) for s in trail]
        assert ticks == list(range(19, 9, -1))

    def test_offset_skips_recent_ticks(self):
        stream = make_stream(n_ticks=30)
        current = stream.sample_for(0, 20)

        trail = resolve_trail(current, stream, length=10, offset=3)

        ticks = [stream.tick_of(s.time) for s in trail]
        assert ticks[0] == 17
        assert max(ticks) <= 20 - 3
        assert len(trail) == 10

    def test_stops_at_start_of_timeline(self):
        stream = make_stream(n_ticks=30)
        current = stream.sample_for(0, 4)

        trail = resolve_trail(current, stream, length=10, offset=1)
        assert [stream.tick_of(s.time) for s in trail] == [3, 2, 1, 0]

    def test_no_history(self):
        stream = make_stream(n_ticks=5)
        assert resolve_trail(stream.sample_for(0, 0), stream) == []

    def test_gaps_are_skipped(self):
        stream = make_stream(n_ticks=30, skip={(0, 18), (0, 15)})
        current = stream.sample_for(0, 20)

        trail = resolve_trail(current, stream, length=5, offset=1)

        assert [stream.tick_of(s.time) for s in trail] == [19, 17, 16]
