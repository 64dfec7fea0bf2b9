import csv
import logging
import os
import tempfile
from os import path

from clocker import codec
from clocker.entry import Entry
from clocker.errors import FileAccessError, FileParseError, RecordError


logger = logging.getLogger(__name__)


def backup_path(file_name: str):
    return path.splitext(file_name)[0] + '.bak'


class TimeLog:
    """The ordered list of day entries kept in a single CSV file."""

    def __init__(self, entries: [Entry] = None):
        self.entries = list(entries) if entries is not None else []

    @classmethod
    def empty(cls):
        return cls()

    @classmethod
    def load(cls, file_name: str):
        """Read a time log, or return an empty one if the file does not exist.

        Every malformed record is collected; if there is at least one, a
        FileParseError listing all of them is raised and nothing is returned.
        """
        if not path.exists(file_name):
            logger.info('Cannot find file %s, starting an empty log', file_name)
            return cls.empty()

        try:
            with open(file_name, 'r', newline='', encoding='utf-8') as file:
                return cls.read(file)
        except (OSError, UnicodeDecodeError, csv.Error) as e:
            raise FileAccessError('read', file_name, e)

    @classmethod
    def read(cls, file):
        entries = []
        errors = []
        first = True
        reader = csv.reader(file)
        for record in reader:
            if not record or not any(c.strip() for c in record):
                continue
            if first:
                first = False
                if codec.is_header(record):
                    continue
            try:
                entries.append(codec.decode(record, reader.line_num))
            except RecordError as e:
                errors.append(e)

        if errors:
            raise FileParseError(errors)
        return cls(entries)

    def write(self, file):
        writer = csv.writer(file, lineterminator='\n')
        writer.writerow(codec.HEADER)
        for entry in self.entries:
            writer.writerow(codec.encode(entry))

    def save(self, file_name: str, atomic: bool = True):
        try:
            if atomic:
                self._save_atomic(file_name)
            else:
                with open(file_name, 'w', newline='', encoding='utf-8') as file:
                    self.write(file)
        except OSError as e:
            raise FileAccessError('write', file_name, e)
        logger.info('Wrote %d entries to %s', len(self.entries), file_name)

    def _save_atomic(self, file_name: str):
        fd, tmp_name = tempfile.mkstemp(dir=path.dirname(path.abspath(file_name)),
                                        prefix='.' + path.basename(file_name), suffix='.tmp')
        try:
            with os.fdopen(fd, 'w', newline='', encoding='utf-8') as file:
                self.write(file)
                file.flush()
                os.fsync(file.fileno())
            os.replace(tmp_name, file_name)
        except BaseException:
            if path.exists(tmp_name):
                os.remove(tmp_name)
            raise

    def backup(self, file_name: str, atomic: bool = True):
        target = backup_path(file_name)
        self.save(target, atomic)
        logger.info('Backed up time log to %s', target)
        return target

    def latest(self):
        return self.entries[-1] if self.entries else None

    def __len__(self):
        return len(self.entries)

    def __iter__(self):
        return iter(self.entries)

    def __eq__(self, other):
        return isinstance(other, TimeLog) and self.entries == other.entries

    def __repr__(self):
        return 'TimeLog({})'.format(repr(self.entries))
