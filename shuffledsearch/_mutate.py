"""Insertion and removal on a shuffled sequence.

Both operations go back to sorted order, edit the sorted sequence and
shuffle it again, so they cost O(count).  Check the returned count:  it is
unchanged when inserting a value that is already present or removing one
that is not.
"""

from shuffledsearch._shuffle import shuffle, unshuffle, _check_region, _move
from shuffledsearch._search import search, deshuffle, NOT_FOUND

__all__ = ['CapacityError', 'insert', 'remove']

class CapacityError(IndexError):
    "Raised when the storage has no room for one more element"

def remove(value, seq, count, key=None):
    """Remove value from the shuffled elements seq[:count].

    Returns the new count.  seq[new count] is left holding a stale
    element; the storage itself is never resized.
    """

    count = _check_region(seq, count)
    index = search(value, seq, count, key)
    if index == NOT_FOUND:
        return count
    unshuffle(seq, count, key)
    i = deshuffle(index, count)
    _move(seq, i, i+1, count-1-i)
    count -= 1
    shuffle(seq, count, key)
    return count

def _insertion_slot(value, seq, count, key):
    "Find the first sorted position holding an element greater than value"
    first = 0
    end = count
    while end != first:
        index = (first+end)//2
        read = seq[index]
        if key is not None:
            read = key(read)
        if value < read:
            if not index:
                return index
            prev = seq[index-1]
            if key is not None:
                prev = key(prev)
            if prev < value:
                return index
            end = index
        else:
            first = index+1
    # Every element is smaller, value becomes the new maximum
    return count

def insert(value, seq, count, capacity=None, key=None):
    """Insert value into the shuffled elements seq[:count].

    capacity is the number of slots the caller has reserved and defaults
    to len(seq); CapacityError is raised when a new value would not fit.
    Inserting a value already present needs no room.  Returns
    the new count.
    """

    count = _check_region(seq, count)
    if capacity is None:
        capacity = len(seq)
    elif capacity > len(seq):
        raise IndexError('capacity %d exceeds the storage size %d'
                         % (capacity, len(seq)))
    if search(value, seq, count, key) != NOT_FOUND:
        return count
    if count + 1 > capacity:
        raise CapacityError('no room to insert into %d elements with '
                            'capacity %d' % (count, capacity))
    unshuffle(seq, count, key)
    k = key(value) if key is not None else value
    i = _insertion_slot(k, seq, count, key)
    _move(seq, i+1, i, count-i)
    seq[i] = value
    count += 1
    shuffle(seq, count, key)
    return count
