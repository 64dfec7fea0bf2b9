from datetime import date, time

from clocker.entry import Entry
from clocker.errors import ShiftComplete
from clocker.timelog import TimeLog


def update(log: TimeLog, today: date, now: time, strict: bool = False):
    """Record `now` in the log and return the result as a new TimeLog.

    A new day is started when the log is empty or its last entry is not for
    `today`; otherwise the next free slot of today's entry is filled. The
    input log is left untouched, including when ShiftComplete is raised.
    """
    last = log.latest()
    if last is None or last.date != today:
        return TimeLog(log.entries + [Entry.new(today, now)])

    if last.state.finished:
        raise ShiftComplete()

    current = last.copy()
    current.transition(now, strict)
    return TimeLog(log.entries[:-1] + [current])
