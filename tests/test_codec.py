from datetime import date, time

import pytest

from clocker import codec
from clocker.entry import DayState, Entry, Phase, SLOTS
from clocker.errors import RecordError


DAY = date(2025, 3, 14)
TIMES = [time(9, 2), time(12, 30), time(13, 15), time(17, 45)]


class TestEncode:
    def test_fresh_day_has_only_a_date(self):
        assert codec.encode(Entry(DAY)) == ['2025-03-14', '', '', '', '']

    def test_morning_started(self):
        assert codec.encode(Entry.new(DAY, time(9, 2))) == ['2025-03-14', '09:02:00', '', '', '']

    def test_finished_day(self, finished_day):
        assert codec.encode(finished_day) == ['2025-03-14', '09:02:00', '12:30:00', '13:15:00', '17:45:00']

    def test_populated_cells_form_a_prefix(self):
        for n in range(len(TIMES) + 1):
            cells = codec.encode(Entry(DAY, DayState(*TIMES[:n])))[1:]
            filled = [bool(c) for c in cells]
            assert filled == [True] * n + [False] * (len(SLOTS) - n)


class TestDecode:
    def test_inverts_encode(self):
        for n in range(len(TIMES) + 1):
            entry = Entry(DAY, DayState(*TIMES[:n]))
            assert codec.decode(codec.encode(entry)) == entry

    @pytest.mark.parametrize('record, phase', [
        (['2025-03-14'], Phase.FRESH_DAY),
        (['2025-03-14', '', '12:30:00', '13:15:00', '17:45:00'], Phase.FRESH_DAY),
        (['2025-03-14', '09:02:00'], Phase.MORNING_STARTED),
        (['2025-03-14', '09:02:00', '', '13:15:00'], Phase.MORNING_STARTED),
        (['2025-03-14', '09:02:00', '12:30:00', '', '17:45:00'], Phase.MORNING_FINISHED),
        (['2025-03-14', '09:02:00', '12:30:00', '13:15:00', ''], Phase.AFTERNOON_STARTED),
        (['2025-03-14', '09:02:00', '12:30:00', '13:15:00', '17:45:00'], Phase.DAY_FINISHED),
    ])
    def test_leftmost_gap_selects_phase(self, record, phase):
        assert codec.decode(record).phase == phase

    def test_values_after_gap_are_not_parsed(self):
        entry = codec.decode(['2025-03-14', '09:02:00', '', 'garbage', 'more garbage'])
        assert entry.state.times == (time(9, 2),)

    def test_cells_are_stripped(self):
        entry = codec.decode([' 2025-03-14 ', ' 09:02:00'])
        assert entry == Entry.new(DAY, time(9, 2))

    def test_seconds_are_kept(self):
        assert codec.decode(['2025-03-14', '09:02:37']).state.start_am == time(9, 2, 37)

    @pytest.mark.parametrize('record, reason', [
        (['banana', '09:02:00'], 'invalid date'),
        (['2025-02-30'], 'invalid date'),
        ([''], 'missing date'),
        (['2025-03-14', 'noon'], 'invalid time'),
        (['2025-03-14', '09:02:00', '12:30:00', '13:15:00', '17:45:00', 'extra'], 'at most'),
    ])
    def test_malformed_records(self, record, reason):
        with pytest.raises(RecordError) as info:
            codec.decode(record, line=7)
        assert info.value.line == 7
        assert reason in info.value.reason
        assert str(info.value).startswith('line 7: ')


def test_header():
    assert codec.HEADER == ['date', 'start_am', 'end_am', 'start_pm', 'end_pm']
    assert codec.is_header(['Date', ' start_am', 'end_am', 'start_pm', 'end_pm'])
    assert not codec.is_header(['2025-03-14', '09:02:00'])
