import io
from datetime import date, time

from clocker import tablefmt, view
from clocker.entry import Entry
from clocker.tablefmt import Align, Column, Table
from clocker.timelog import TimeLog


def render(fn, log, style=tablefmt.ASCII_STYLE):
    out = io.StringIO()
    fn(log, style, out)
    return out.getvalue().splitlines()


def test_time_table(finished_day):
    lines = render(view.time_table, TimeLog([finished_day, Entry.new(date(2025, 3, 15), time(8, 55))]))
    assert lines == [
        '.----------------------------------------------------.',
        '| Date       | Start AM | End AM | Start PM | End PM |',
        '|------------+----------+--------+----------+--------|',
        '| 2025-03-14 |  09:02   | 12:30  |  13:15   | 17:45  |',
        '| 2025-03-15 |  08:55   |        |          |        |',
        "'----------------------------------------------------'",
    ]


def test_empty_table_has_header_only():
    assert len(render(view.time_table, TimeLog.empty())) == 4


def test_latest_row_has_no_frame(finished_day):
    assert render(view.latest_row, TimeLog([finished_day])) == [
        '2025-03-14 |  09:02   | 12:30  |  13:15   | 17:45',
    ]


def test_latest_row_of_empty_log():
    assert render(view.latest_row, TimeLog.empty()) == []


def test_unknown_style_falls_back_to_box():
    assert tablefmt.style_named('ascii') is tablefmt.ASCII_STYLE
    assert tablefmt.style_named('fancy') is tablefmt.BOX_STYLE


def test_column_alignment():
    assert Column(Align.LEFT, 5).pad('ab') == 'ab   '
    assert Column(Align.CENTER, 5).pad('ab') == ' ab  '
    assert Column(Align.RIGHT, 5).pad('ab') == '   ab'
    assert Column(Align.LEFT, 1).pad('abc') == 'abc'


def test_table_grows_columns_to_fit():
    table = Table([Column(Align.LEFT), Column(Align.RIGHT)])
    table.row(['a', 'b'])
    table.row(['long', '1'])
    out = io.StringIO()
    table.print(tablefmt.ASCII_STYLE, out)
    assert out.getvalue().splitlines()[1:3] == ['| a    | b |', '| long | 1 |']


def test_prints_to_current_stdout(capsys, finished_day):
    view.latest_row(TimeLog([finished_day]), tablefmt.ASCII_STYLE)
    assert capsys.readouterr().out == '2025-03-14 |  09:02   | 12:30  |  13:15   | 17:45\n'
