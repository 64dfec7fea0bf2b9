class ClockerError(Exception):
    pass


class ShiftComplete(ClockerError):
    def __init__(self):
        super().__init__('Shift already complete for today.')


class TimeOrderError(ClockerError):
    def __init__(self, previous, time):
        super().__init__('Cannot record {} before the previous slot at {}.'.format(
            time.strftime('%H:%M'), previous.strftime('%H:%M')))
        self.previous = previous
        self.time = time


class RecordError(ClockerError):
    """A single line of the time log that could not be decoded."""

    def __init__(self, line: int, reason: str):
        super().__init__('line {}: {}'.format(line, reason))
        self.line = line
        self.reason = reason


class FileParseError(ClockerError):
    def __init__(self, errors: [RecordError]):
        super().__init__('Malformed lines in the input file:\n'
                         + '\n'.join(str(e) for e in errors))
        self.errors = list(errors)


class FileAccessError(ClockerError):
    def __init__(self, action: str, file_name: str, cause: Exception):
        super().__init__('Cannot {} {}: {}'.format(action, file_name, getattr(cause, 'strerror', None) or cause))
        self.action = action
        self.file_name = file_name
        self.cause = cause


class ConfigError(ClockerError):
    def __init__(self, file_name: str, reason):
        super().__init__('Invalid configuration {}: {}'.format(file_name, reason))
        self.file_name = file_name
