from shuffledsearch._shuffle import _check_region

__all__ = ['NOT_FOUND', 'search', 'deshuffle', 'reference_search']

NOT_FOUND = -1

def search(value, seq, count=None, key=None):
    """Return the shuffled position of value in seq[:count], or NOT_FOUND.

    seq must be in the shuffled layout.  Each element examined lies
    after every element examined before it.  Ordering uses only the <
    operator, applied to key(x) if a key function is given.
    """

    count = _check_region(seq, count)
    if key is not None:
        value = key(value)
    index = 0
    while count:
        read = seq[index]
        if key is not None:
            read = key(read)
        if value < read:
            index += 1
            count //= 2
        elif read < value:
            index += count//2 + 1
            count = (count-1)//2
        else:
            return index
    return NOT_FOUND

def deshuffle(index, count):
    """Convert a shuffled position into the matching sorted position.

    Pure arithmetic, the sequence itself is not needed.  Positions outside
    [0, count) give NOT_FOUND, so the result of search() can be passed in
    directly.
    """

    if index < 0 or index >= count:
        return NOT_FOUND

    m = count//2                # median of the current block
    d = m                       # sorted position of the current median
    while index:
        if index > m:           # upper block
            index -= m+1
            count = (count-1)//2
            d += 1
        else:                   # lower block
            index -= 1
            count = m
            d -= m
        m = count//2
        d += m
    return d

def reference_search(value, seq, count=None, key=None):
    """Plain binary search over the sorted elements seq[:count].

    Returns the sorted position of value or NOT_FOUND.
    """

    hi = _check_region(seq, count)
    if key is not None:
        value = key(value)
    lo = 0
    while lo < hi:
        mid = (lo+hi)//2
        read = seq[mid]
        if key is not None:
            read = key(read)
        if value < read: hi = mid
        elif read < value: lo = mid + 1
        else: return mid
    return NOT_FOUND
