from collections import namedtuple


class HistoryEntry(namedtuple('HistoryEntry', ['expression', 'value'])):
    '''
    Successfully evaluated expression and its (formatted) result.
    '''
    __slots__ = ()

    def __str__(self):
        return '{} => {}'.format(self.expression, self.value)


class History:
    '''
    Append-only log of evaluations, oldest first. Lives as long as the machine.
    '''

    def __init__(self):
        self._entries = []

    def append(self, expression, value):
        entry = HistoryEntry(expression, value)
        self._entries.append(entry)
        return entry

    def __len__(self):
        return len(self._entries)

    def __iter__(self):
        return iter(self._entries)

    def __getitem__(self, index):
        return self._entries[index]
