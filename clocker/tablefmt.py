import sys
from enum import IntEnum


ASCII_STYLE = {
    'corner-top-left': '.',
    'corner-top-right': '.',
    'corner-bottom-left': "'",
    'corner-bottom-right': "'",
    'join-mid': '+',
    'join-top': '-',
    'join-bottom': '-',
    'join-left': '|',
    'join-right': '|',
    'inner-horizontal': '-',
    'inner-vertical': '|',
    'outer-horizontal': '-',
    'outer-vertical': '|',
}


BOX_STYLE = {
    'corner-top-left': '┌',
    'corner-top-right': '┐',
    'corner-bottom-left': '└',
    'corner-bottom-right': '┘',
    'join-mid': '┼',
    'join-top': '┬',
    'join-bottom': '┴',
    'join-left': '├',
    'join-right': '┤',
    'inner-horizontal': '─',
    'inner-vertical': '│',
    'outer-horizontal': '─',
    'outer-vertical': '│',
}


STYLES = {
    'ascii': ASCII_STYLE,
    'box': BOX_STYLE,
}


def style_named(name: str):
    return STYLES.get(name, BOX_STYLE)


class Align(IntEnum):
    LEFT = 0
    CENTER = 1
    RIGHT = 2


class Column:
    def __init__(self, align: Align = Align.LEFT, width: int = 0):
        self.align = align
        self.width = width

    def pad(self, s: str):
        padding = self.width - len(s)
        if padding <= 0:
            return s
        if self.align == Align.LEFT:
            return s + ' ' * padding
        elif self.align == Align.CENTER:
            left_pad = padding // 2
            return ' ' * left_pad + s + ' ' * (padding - left_pad)
        else:
            return ' ' * padding + s


class Row:
    def lines(self, columns: [Column], style: dict, frame: bool):
        raise NotImplementedError()

    def widths(self):
        raise NotImplementedError()


class DataRow(Row):
    def __init__(self, cells: list):
        self.cells = [str(v) for v in cells]

    def lines(self, columns: [Column], style: dict, frame: bool):
        inner = ' ' + style['inner-vertical'] + ' '
        text = inner.join(c.pad(s) for s, c in zip(self.cells, columns))
        if frame:
            outer = style['outer-vertical']
            yield '{} {} {}'.format(outer, text, outer)
        else:
            yield text.rstrip()

    def widths(self):
        return [len(s) for s in self.cells]


def _make_rule(columns: [Column], left: str, dash: str, inner: str, right: str):
    return dash.join([left, (dash + inner + dash).join(c.width * dash for c in columns), right])


class RuleRow(Row):
    def lines(self, columns: [Column], style: dict, frame: bool):
        if frame:
            yield _make_rule(columns, style['join-left'], style['inner-horizontal'], style['join-mid'],
                             style['join-right'])

    def widths(self):
        return []


class Table:
    def __init__(self, columns: [Column]):
        self.columns = columns
        self.rows = []

    def row(self, cells: list):
        self.rows.append(DataRow(cells))

    def rule(self):
        self.rows.append(RuleRow())

    def header(self, cells: list):
        self.row(cells)
        self.rule()

    def lines(self, style: dict, frame: bool = True):
        widths = [c.width for c in self.columns]
        for row in self.rows:
            for i, w in enumerate(row.widths()):
                widths[i] = max(widths[i], w)
        final_columns = [Column(c.align, w) for c, w in zip(self.columns, widths)]

        if frame:
            yield _make_rule(final_columns, style['corner-top-left'], style['outer-horizontal'],
                             style['join-top'], style['corner-top-right'])
        for row in self.rows:
            yield from row.lines(final_columns, style, frame)
        if frame:
            yield _make_rule(final_columns, style['corner-bottom-left'], style['outer-horizontal'],
                             style['join-bottom'], style['corner-bottom-right'])

    def print(self, style: dict, file=None, frame: bool = True):
        file = file or sys.stdout
        for line in self.lines(style, frame):
            print(line, file=file)
