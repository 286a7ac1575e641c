"""
Tests for one-record-per-second downsampling.
"""

from datetime import timedelta

from mirrorlog.services.downsampler import Downsampler, DownsamplerState, select_indices


class TestDownsampler:
    """Tests for the downsampler state machine."""

    def test_first_record_always_emitted(self):
        downsampler = Downsampler()
        assert downsampler.state is DownsamplerState.AWAITING_FIRST
        assert downsampler.offer(timedelta(0))
        assert downsampler.state is DownsamplerState.STEADY
        assert (downsampler.last_minute, downsampler.last_second) == (0, 0)

    def test_duplicates_within_second_dropped(self):
        """Records at 1, 1, 2, 2, 3 after the start give one per second."""
        assert select_indices([0, 1, 1, 2, 2, 3]) == [0, 1, 3, 5]

    def test_same_second_as_start_dropped(self):
        assert select_indices([0, 0, 0, 1]) == [0, 3]

    def test_minute_wraparound(self):
        """0:59 then 1:00 are both emitted."""
        assert select_indices([0, 59, 60]) == [0, 1, 2]

    def test_wraparound_counters_updated(self):
        downsampler = Downsampler()
        for seconds in (0, 59, 60):
            downsampler.offer(timedelta(seconds=seconds))
        assert (downsampler.last_minute, downsampler.last_second) == (1, 0)

    def test_dense_stream_across_minute(self):
        assert select_indices([0, 30, 59, 59, 60, 60, 61]) == [0, 1, 2, 4, 6]

    def test_sub_second_precision_ignored(self):
        downsampler = Downsampler()
        offered = [timedelta(0), timedelta(milliseconds=999), timedelta(milliseconds=1001)]
        assert [downsampler.offer(t) for t in offered] == [True, False, True]

    def test_clock_components_compared(self):
        """Only clock components are compared, so 0:10 -> 1:10 is not a new second."""
        assert select_indices([0, 10, 70, 71]) == [0, 1, 3]

    def test_stalls_after_first_hour(self):
        """Minutes wrap at the hour, so nothing after 59:59 is kept."""
        assert select_indices([0, 3599, 3600, 3601, 3660, 7199]) == [0, 1]

    def test_already_downsampled_is_unchanged(self):
        seconds = [0, 1, 2, 3, 59, 60, 61, 119, 120]
        assert select_indices(seconds) == list(range(len(seconds)))
