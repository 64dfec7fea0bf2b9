from clocker.tablefmt import Align, Column, Table
from clocker.timelog import TimeLog


LABELS = ['Date', 'Start AM', 'End AM', 'Start PM', 'End PM']


def _columns():
    return [Column(Align.LEFT, len(LABELS[0]))] + [Column(Align.CENTER, len(l)) for l in LABELS[1:]]


def cells(entry):
    times = [t.strftime('%H:%M') for t in entry.state.times]
    return [entry.date.isoformat()] + times + [''] * (4 - len(times))


def time_table(log: TimeLog, style: dict, file=None):
    table = Table(_columns())
    table.header(LABELS)
    for entry in log:
        table.row(cells(entry))
    table.print(style, file)


def latest_row(log: TimeLog, style: dict, file=None):
    entry = log.latest()
    if entry is None:
        return
    table = Table(_columns())
    table.row(cells(entry))
    table.print(style, file, frame=False)
