from datetime import date, time

import pytest

from clocker.entry import DayState, Entry


HEADER_LINE = 'date,start_am,end_am,start_pm,end_pm\n'


@pytest.fixture
def finished_day():
    return Entry(date(2025, 3, 14), DayState(time(9, 2), time(12, 30), time(13, 15), time(17, 45)))


@pytest.fixture
def log_file(tmp_path):
    def write(*rows):
        file_name = tmp_path / 'timelog.csv'
        file_name.write_text(HEADER_LINE + ''.join(r + '\n' for r in rows))
        return file_name

    return write
