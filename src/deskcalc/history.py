from collections import deque


class HistoryLog:
    '''
    Bounded log of completed computations, newest first.

    Entries are plain strings, never modified once appended. The oldest are
    silently dropped past the limit.
    '''

    DEFAULT_LIMIT = 50

    def __init__(self, limit=None):
        '''
        Create empty log.

        :param limit: Most entries kept, DEFAULT_LIMIT if None.
        '''
        if limit is None:
            limit = type(self).DEFAULT_LIMIT
        self.limit = limit
        self._entries = deque()

    def append(self, entry):
        '''
        Put entry at the front, evicting from the back past the limit.
        '''
        self._entries.appendleft(entry)
        while len(self._entries) > self.limit:
            self._entries.pop()

    def clear(self):
        self._entries.clear()

    def entries(self):
        '''
        Return all entries, newest first, as a read-only tuple.
        '''
        return tuple(self._entries)

    def __len__(self):
        return len(self._entries)

    def __iter__(self):
        return iter(self.entries())

    def __getitem__(self, index):
        return self._entries[index]
