import collections.abc

from shuffledsearch._shuffledset import shuffledset, SHUFFLED
from shuffledsearch._search import deshuffle, NOT_FOUND

__all__ = ['shuffleddict']

class shuffleddict(collections.abc.MutableMapping):
    """shuffleddict([key,] [mapping or iterable], **kw) -> new mapping

    Keys live in a shuffledset.  Values live in a separate list kept in
    sorted key order, so a lookup searches the keys and converts the
    shuffled position with deshuffle() instead of moving the values
    around whenever the keys are reshuffled.

    """

    def __init__(self, *args, **kw):
        key = None
        if len(args) > 0:
            if hasattr(args[0], '__call__'):
                key = args[0]
                args = args[1:]
            elif len(args) > 1:
                raise TypeError("'%s' object is not callable" %
                                args[0].__class__.__name__)
        if len(args) > 1:
            raise TypeError('shuffleddict expected at most 2 arguments, got %d'
                            % len(args))
        if len(args) == 1 and isinstance(args[0], shuffleddict) and key is None:
            key = args[0]._keys._key
        self._keys = shuffledset(key=key)
        self._values = []
        self.update(*args, **kw)

    def _rank(self, key):
        "Sorted position of key, or NOT_FOUND"
        try:
            i = self._keys._find(key)
        except TypeError:
            return NOT_FOUND
        if i != NOT_FOUND and self._keys.layout == SHUFFLED:
            i = deshuffle(i, len(self._keys))
        return i

    def __getitem__(self, key):
        i = self._rank(key)
        if i == NOT_FOUND:
            if hasattr(self, '__missing__'):
                return self.__missing__(key)
            raise KeyError(key)
        return self._values[i]

    def __setitem__(self, key, value):
        i = self._rank(key)
        if i != NOT_FOUND:
            self._values[i] = value
            return
        self._keys.add(key)
        self._values.insert(self._keys.rank(key), value)

    def __delitem__(self, key):
        i = self._rank(key)
        if i == NOT_FOUND:
            raise KeyError(key)
        self._keys.discard(key)
        del self._values[i]

    def __contains__(self, key):
        return self._rank(key) != NOT_FOUND

    def __iter__(self):
        return iter(self._keys)

    def __len__(self):
        return len(self._keys)

    def update(self, *args, **kw):
        # Batch the inserts while the keys are in sorted order
        self._keys.sort()
        try:
            collections.abc.MutableMapping.update(self, *args, **kw)
        finally:
            self._keys.shuffle()

    def copy(self):
        return self.__class__(self)

    @classmethod
    def fromkeys(cls, keys, value=None, key=None):
        if key is not None:
            rv = cls(key)
        else:
            rv = cls()
        for key in keys:
            rv[key] = value
        return rv

    def __repr__(self):
        return 'shuffleddict({%s})' % ', '.join(
            '%r: %r' % item for item in self.items())

    def __eq__(self, other):
        if not isinstance(other, shuffleddict):
            return False
        return (len(self) == len(other)
                and list(self.items()) == list(other.items()))

    def __ne__(self, other):
        return not self == other

    __hash__ = None
