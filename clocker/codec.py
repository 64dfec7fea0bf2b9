"""Conversion between entries and flat CSV records.

A record has a date followed by up to four optional times. Only the
longest filled prefix of the times is meaningful: anything after the
first empty cell is ignored, so a hand-edited row with a stray value
at the end still decodes to a sensible day.
"""
from datetime import date, time

import arrow

from clocker.entry import SLOTS, DayState, Entry
from clocker.errors import RecordError


HEADER = ['date'] + SLOTS

DATE_FORMAT = 'YYYY-MM-DD'
TIME_FORMAT = 'HH:mm:ss'


def format_date(d: date):
    return d.isoformat()


def format_time(t: time):
    return t.isoformat(timespec='seconds')


def parse_date(cell: str, line: int = 0):
    try:
        return arrow.get(cell, DATE_FORMAT).date()
    except ValueError:
        raise RecordError(line, 'invalid date "{}"'.format(cell))


def parse_time(cell: str, slot: str, line: int = 0):
    try:
        return arrow.get(cell, TIME_FORMAT).time()
    except ValueError:
        raise RecordError(line, 'invalid time "{}" in {}'.format(cell, slot))


def encode(entry: Entry):
    times = [format_time(t) for t in entry.state.times]
    return [format_date(entry.date)] + times + [''] * (len(SLOTS) - len(times))


def decode(record: [str], line: int = 0):
    cells = [c.strip() for c in record]
    if len(cells) > len(HEADER):
        raise RecordError(line, 'expected at most {} fields, found {}'.format(len(HEADER), len(cells)))
    if not cells or not cells[0]:
        raise RecordError(line, 'missing date')

    day = parse_date(cells[0], line)

    times = []
    for slot, cell in zip(SLOTS, cells[1:]):
        if not cell:
            break
        times.append(parse_time(cell, slot, line))

    return Entry(day, DayState(*times))


def is_header(record: [str]):
    return [c.strip().lower() for c in record] == HEADER
