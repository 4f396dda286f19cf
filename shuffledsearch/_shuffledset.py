import collections.abc

from shuffledsearch._shuffle import shuffle, unshuffle, _move
from shuffledsearch._search import search, deshuffle, reference_search, \
     NOT_FOUND
from shuffledsearch._mutate import insert, remove, _insertion_slot

__all__ = ['SORTED', 'SHUFFLED', 'shuffledset']

SORTED = 'sorted'
SHUFFLED = 'shuffled'

MIN_CAPACITY = 8

class shuffledset(collections.abc.MutableSet):
    """shuffledset(iterable=(), key=None, capacity=None) -> new shuffled set

    Keyword arguments:
    iterable -- items used to initially populate the set
    key -- a function to return the sort key of an item
    capacity -- number of slots to reserve in the backing storage

    A shuffledset keeps its members in a list arranged in the shuffled
    layout, so membership tests only read forward through the list.
    Iteration still yields the members in sorted order.  Adding and
    discarding cost O(n); call sort() before a batch of updates and
    shuffle() after it to pay that cost once.

    """

    def __init__(self, iterable=(), key=None, capacity=None):
        self._key = key
        if key is not None and not hasattr(key, '__call__'):
            raise TypeError("'%s' object is not callable" % str(type(key)))
        if isinstance(iterable, shuffledset) and iterable._key is key:
            self._storage = list(iterable._storage)
            self._count = iterable._count
            self.layout = iterable.layout
        else:
            self._storage = []
            for v in sorted(iterable, key=key):
                if (not self._storage
                    or self._i2key(self._storage[-1]) < self._i2key(v)):
                    self._storage.append(v)
            self._count = len(self._storage)
            self.layout = SORTED
            self.shuffle()
        if capacity is not None:
            self.reserve(capacity)

    def _from_iterable(self, iterable):
        return self.__class__(iterable, self._key)

    def _i2key(self, value):
        "Convert a stored object to the key"
        if self._key is None:
            return value
        else:
            return self._key(value)

    def _find(self, value):
        "Position of value in the current layout, or NOT_FOUND"
        if self.layout == SHUFFLED:
            return search(value, self._storage, self._count, self._key)
        return reference_search(value, self._storage, self._count, self._key)

    @property
    def capacity(self):
        return len(self._storage)

    def reserve(self, capacity):
        """Make room for at least capacity members."""
        if capacity > len(self._storage):
            self._storage.extend([None] * (capacity - len(self._storage)))

    def shuffle(self):
        """Switch the storage to the shuffled layout (the default)."""
        if self.layout != SHUFFLED:
            shuffle(self._storage, self._count, self._key)
            self.layout = SHUFFLED

    def sort(self):
        """Switch the storage to sorted order.

        Lookups keep working with an ordinary binary search, and add()
        and discard() skip the reshuffling, until shuffle() is called.
        """
        if self.layout != SORTED:
            unshuffle(self._storage, self._count, self._key)
            self.layout = SORTED

    def storage(self):
        """Return a copy of the members in storage order."""
        return self._storage[:self._count]

    def sorted(self):
        """Return a list of the members in sorted order."""
        return list(self)

    def add(self, value):
        """Add an element to the set.

        This has no effect if the element is already present.

        """
        # Will throw a TypeError when trying to add an object that
        # cannot be compared to objects already in the set.
        if self._find(value) != NOT_FOUND:
            return
        if self._count == len(self._storage):
            self.reserve(max(MIN_CAPACITY, 2 * len(self._storage)))
        if self.layout == SHUFFLED:
            self._count = insert(value, self._storage, self._count,
                                 key=self._key)
        else:
            i = _insertion_slot(self._i2key(value), self._storage,
                                self._count, self._key)
            _move(self._storage, i+1, i, self._count-i)
            self._storage[i] = value
            self._count += 1

    def discard(self, value):
        """Remove an element if it is a member.

        If the element is not a member, do nothing.

        """
        try:
            i = self._find(value)
        except TypeError:
            # Value cannot be compared with values already in the set.
            # Ergo, value isn't in the set.
            return
        if i == NOT_FOUND:
            return
        if self.layout == SHUFFLED:
            self._count = remove(value, self._storage, self._count,
                                 key=self._key)
        else:
            _move(self._storage, i, i+1, self._count-1-i)
            self._count -= 1
        self._storage[self._count] = None

    def remove(self, value):
        """Remove an element from the set.

        Raises KeyError if the element is not a member.

        """
        if value not in self:
            raise KeyError(value)
        self.discard(value)

    def pop(self):
        """Remove and return the largest element.

        Raises KeyError if the set is empty.

        """
        if not self._count:
            raise KeyError('pop from an empty shuffledset')
        value = next(reversed(self))
        self.discard(value)
        return value

    def __contains__(self, value):
        """x.__contains__(y) <==> y in x"""
        try:
            return self._find(value) != NOT_FOUND
        except TypeError:
            return False

    def index(self, value):
        """S.index(value) -> integer -- position of value in the storage.

        Raises ValueError if the value is not present.

        """
        try:
            i = self._find(value)
        except TypeError:
            raise ValueError('%r is not in shuffledset' % (value,))
        if i == NOT_FOUND:
            raise ValueError('%r is not in shuffledset' % (value,))
        return i

    def rank(self, value):
        """S.rank(value) -> integer -- position of value in sorted order.

        Raises ValueError if the value is not present.

        """
        i = self.index(value)
        if self.layout == SHUFFLED:
            return deshuffle(i, self._count)
        return i

    def __len__(self):
        """x.__len__() <==> len(x)"""
        return self._count

    def _walk(self, reverse):
        # In-order walk of the implicit tree:  a block (first, count) has
        # its median at first, the lower block right after it and the
        # upper block after that.
        storage = self._storage
        n = self._count
        stack = []
        first = 0
        count = n
        while stack or count:
            while count:
                stack.append((first, count))
                if reverse:
                    first, count = first + 1 + count//2, (count-1)//2
                else:
                    first, count = first + 1, count//2
            first, count = stack.pop()
            yield storage[first]
            if n != self._count:
                raise RuntimeError('Set changed size during iteration')
            if reverse:
                first, count = first + 1, count//2
            else:
                first, count = first + 1 + count//2, (count-1)//2

    def _linear(self, reverse):
        n = self._count
        indexes = range(n-1, -1, -1) if reverse else range(n)
        for i in indexes:
            yield self._storage[i]
            if n != self._count:
                raise RuntimeError('Set changed size during iteration')

    def __iter__(self):
        """x.__iter__() <==> iter(x)"""
        if self.layout == SHUFFLED:
            return self._walk(False)
        return self._linear(False)

    def __reversed__(self):
        """S.__reversed__() -- return a reverse iterator over the set"""
        if self.layout == SHUFFLED:
            return self._walk(True)
        return self._linear(True)

    __hash__ = None

    def _make_set(self, iterable):
        if isinstance(iterable, collections.abc.Set):
            return iterable
        return self._from_iterable(iterable)

    def update(self, *args):
        """Update the set, adding elements from all others."""
        batch = self.layout == SHUFFLED
        if batch:
            self.sort()
        try:
            for arg in args:
                for value in arg:
                    self.add(value)
        finally:
            if batch:
                self.shuffle()

    def union(self, *args):
        """Return the union of sets as a new set."""
        rv = self.copy()
        rv.update(*args)
        return rv

    def intersection(self, *args):
        """Return a new set with elements common to the set and all others."""
        rv = self.copy()
        for arg in args:
            rv &= self._make_set(arg)
        return rv

    def difference(self, *args):
        """Return a new set with elements in the set that are not in the others."""
        rv = self.copy()
        for arg in args:
            rv -= self._make_set(arg)
        return rv

    def issubset(self, other):
        """Test whether every element in the set is in *other*."""
        return self <= self._make_set(other)

    def issuperset(self, other):
        """Test whether every element in *other* is in the set."""
        return self >= self._make_set(other)

    def clear(self):
        """Remove all elements"""
        for i in range(self._count):
            self._storage[i] = None
        self._count = 0

    def copy(self):
        return self.__class__(self, self._key)

    def __repr__(self):
        """x.__repr__() <==> repr(x)"""
        if not self: return 'shuffledset()'
        return 'shuffledset(%s)' % repr(list(self))
