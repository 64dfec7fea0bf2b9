from datetime import date, time
from enum import Enum, unique

from clocker.errors import TimeOrderError


SLOTS = ['start_am', 'end_am', 'start_pm', 'end_pm']


@unique
class Phase(Enum):
    FRESH_DAY = 0
    MORNING_STARTED = 1
    MORNING_FINISHED = 2
    AFTERNOON_STARTED = 3
    DAY_FINISHED = 4

    def __str__(self):
        return self.name.lower().replace('_', '-')

    @classmethod
    def from_str(cls, s: str):
        return cls[s.replace('-', '_').upper()]

    def next_slot(self):
        if self == Phase.DAY_FINISHED:
            return None
        return SLOTS[self.value]


class DayState:
    """Which leading slots of a day have been filled, and with what.

    The recorded times always form a left-anchored prefix of
    (start_am, end_am, start_pm, end_pm), so a state like "end of morning
    without a start" cannot be built.
    """

    def __init__(self, *times: time):
        if len(times) > len(SLOTS):
            raise ValueError('A day has only {} slots'.format(len(SLOTS)))
        if any(t is None for t in times):
            raise ValueError('Slots must be filled left to right')
        self.times = tuple(times)

    @property
    def phase(self):
        return Phase(len(self.times))

    @property
    def finished(self):
        return self.phase == Phase.DAY_FINISHED

    def slot(self, name: str):
        index = SLOTS.index(name)
        return self.times[index] if index < len(self.times) else None

    @property
    def start_am(self):
        return self.slot('start_am')

    @property
    def end_am(self):
        return self.slot('end_am')

    @property
    def start_pm(self):
        return self.slot('start_pm')

    @property
    def end_pm(self):
        return self.slot('end_pm')

    def advance(self, t: time, strict: bool = False):
        if self.finished:
            return self
        if strict and self.times and t < self.times[-1]:
            raise TimeOrderError(self.times[-1], t)
        return DayState(*self.times, t)

    def __eq__(self, other):
        return isinstance(other, DayState) and self.times == other.times

    def __hash__(self):
        return hash(self.times)

    def __repr__(self):
        return 'DayState({})'.format(', '.join(repr(t) for t in self.times))


class Entry:
    def __init__(self, day: date, state: DayState = DayState()):
        self.date = day
        self.state = state

    @classmethod
    def new(cls, day: date, start_am: time):
        return cls(day, DayState(start_am))

    @property
    def phase(self):
        return self.state.phase

    def transition(self, t: time, strict: bool = False):
        self.state = self.state.advance(t, strict)

    def copy(self):
        return Entry(self.date, self.state)

    def __eq__(self, other):
        return isinstance(other, Entry) and (self.date, self.state) == (other.date, other.state)

    def __repr__(self):
        return 'Entry({}, {})'.format(repr(self.date), repr(self.state))
