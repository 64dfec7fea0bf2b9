import argparse
import logging
import sys
from os import path

import arrow

from clocker import __version__, config, tablefmt, view
from clocker.errors import ClockerError
from clocker.timelog import TimeLog
from clocker.update import update


logger = logging.getLogger(__name__)


def log(input_file: str, output_file: str, today, now, strict=False, atomic=True):
    time_log = TimeLog.load(input_file)
    update(time_log, today, now, strict).save(output_file, atomic)


def archive(input_file: str, output_file: str, today, now, strict=False, atomic=True):
    time_log = TimeLog.load(input_file)
    update(time_log, today, now, strict).backup(input_file, atomic)
    TimeLog.empty().save(output_file, atomic)


def new_month(input_file: str, output_file: str, today, now, strict=False, atomic=True):
    TimeLog.load(input_file).backup(input_file, atomic)
    update(TimeLog.empty(), today, now, strict).save(output_file, atomic)


def snapshot(input_file: str, output_file: str, today, now, strict=False, atomic=True):
    TimeLog.load(input_file).backup(input_file, atomic)


COMMANDS = {
    'log': log,
    'archive': archive,
    'new-month': new_month,
    'snapshot': snapshot,
}


class ArgumentParser(argparse.ArgumentParser):
    def __init__(self):
        super().__init__(prog='clocker', description='A simple clock-in/clock-out utility for CSV files')
        self.add_argument('--version', action='version', version='%(prog)s ' + __version__)
        self._add_global_arguments(self, None)
        self.set_defaults(command='log', scope='all')

        common = argparse.ArgumentParser(add_help=False)
        self._add_global_arguments(common, argparse.SUPPRESS)

        commands = self.add_subparsers(metavar='command', title='commands',
                                       parser_class=argparse.ArgumentParser)
        commands.add_parser('log', aliases=['l'], parents=[common],
                            help='Fill the next slot of today (default)').set_defaults(command='log')
        commands.add_parser('archive', aliases=['a'], parents=[common],
                            help='Log, move the result to the backup file and start empty'
                            ).set_defaults(command='archive')
        commands.add_parser('new-month', aliases=['n'], parents=[common],
                            help='Back up the current file and start over with today'
                            ).set_defaults(command='new-month')
        commands.add_parser('snapshot', aliases=['s'], parents=[common],
                            help='Copy the current file to the backup file').set_defaults(command='snapshot')
        show = commands.add_parser('view', aliases=['v', 'show'], parents=[common],
                                   help='Print the time log')
        show.add_argument('scope', nargs='?', choices=['all', 'latest'], default='all')
        show.set_defaults(command='view')

    def _add_global_arguments(self, parser, default):
        parser.add_argument('-i', '--input-file', type=str, default=default,
                            help='Time log to read (default from config, ~/timelog.csv)')
        parser.add_argument('-o', '--output-file', type=str, default=default,
                            help='Time log to write (default same as input)')
        parser.add_argument('-c', '--config', type=str,
                            default=default if default is not None else config.DEFAULT_CONFIG_FILE)
        parser.add_argument('-t', '--at', type=self._parse_date, default=default,
                            help='Time to record (default now)')
        parser.add_argument('--strict', action='store_true',
                            default=default if default is not None else False,
                            help='Refuse times earlier than the previous slot')
        parser.add_argument('-v', '--verbose', action='store_true',
                            default=default if default is not None else False)

    def _parse_date(self, date: str):
        import dateparser
        dt = dateparser.parse(date, languages=['en'], settings={'RETURN_AS_TIMEZONE_AWARE': True})
        if dt is None:
            self.error('Invalid date format "{}". Try something like "11:40" or "2 hours ago"'
                       .format(date))
        return arrow.Arrow.fromdatetime(dt)


def main(argv=None):
    args = ArgumentParser().parse_args(argv)

    logging.basicConfig(level=logging.INFO if args.verbose else logging.WARNING,
                        format='%(levelname)s: %(message)s', stream=sys.stderr)

    moment = (args.at if args.at is not None else arrow.now()).to('local').floor('minute')

    try:
        cfg = config.load(args.config)
        input_file = path.expanduser(args.input_file or cfg['timelog']['file'])
        output_file = path.expanduser(args.output_file) if args.output_file else input_file
        strict = args.strict or cfg['timelog']['strict_order']

        if args.command == 'view':
            style = tablefmt.style_named(cfg['view']['style'])
            time_log = TimeLog.load(input_file)
            if args.scope == 'latest':
                view.latest_row(time_log, style)
            else:
                view.time_table(time_log, style)
        else:
            logger.info('Running %s at %s', args.command, moment.format('YYYY-MM-DD HH:mm'))
            COMMANDS[args.command](input_file, output_file, moment.date(), moment.time(),
                                   strict=strict, atomic=cfg['timelog']['atomic_save'])
    except ClockerError as e:
        print(e, file=sys.stderr)
        return 1

    return 0


if __name__ == '__main__':
    sys.exit(main())
