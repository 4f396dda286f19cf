"""In-place transforms between the sorted and the shuffled layout.

A block of n elements is in the shuffled layout when its first element is
the median (sorted index n//2), followed by the shuffled layout of the n//2
smaller elements, followed by the shuffled layout of the (n-1)//2 larger
elements.  A binary search over that layout only ever moves forward in
memory (see _search.search).

For large blocks the forward step is:  rotate the lower half one slot to
the right so the median lands in front, then handle the lower half right
away and remember the upper half on the work list.  Small blocks are
finished with a few swaps:

    n   sorted        shuffled
    2   01         => 10
    3   012        => 102
    4   0123       => 2103
    5   01234      => 21043
    6   012345     => 310254
    7   0123456    => 3102546
    8   01234567   => 42103657
    9   012345678  => 421037658
   10   0123456789 => 5210438769

unshuffle() runs the same walk with every step reversed.
"""

NO_DEBUG = 0            # No checking
DEBUG    = 1            # Checks input order and the result of unshuffle()

debugging_level = NO_DEBUG

# Each general step pushes at most one descriptor and halves the current
# block, so the work list never holds more than log2(count) entries.
MAX_SHUFFLE_COUNT_LOG2 = 64

def _check_region(seq, count):
    "Validate count against the storage and return it"
    if count is None:
        return len(seq)
    if count < 0:
        raise ValueError('count must be non-negative, got %d' % count)
    if count > len(seq):
        raise IndexError('count %d exceeds the storage size %d'
                         % (count, len(seq)))
    return count

def _check_depth(count):
    if count >> MAX_SHUFFLE_COUNT_LOG2:
        raise OverflowError('count %d is too large to shuffle' % count)

def _move(seq, dst, src, n):
    "Copy seq[src:src+n] over seq[dst:dst+n]; the two ranges may overlap"
    if n <= 0:
        return
    if dst < 0 or src < 0 or max(dst, src) + n > len(seq):
        raise IndexError('move of %d elements from %d to %d out of range'
                         % (n, src, dst))
    seq[dst:dst+n] = seq[src:src+n]

def _check_sorted(seq, first, count, key):
    "Raise ValueError unless seq[first:first+count] is in ascending order"
    if key is None:
        key = lambda x: x
    prev = None
    for i in range(first, first+count):
        cur = key(seq[i])
        if i > first and cur < prev:
            raise ValueError('elements at %d and %d are not in ascending '
                             'order' % (i-1, i))
        prev = cur

def shuffle(seq, count=None, key=None):
    """Rearrange the sorted elements seq[:count] into the shuffled layout.

    count defaults to len(seq).  key is only consulted when
    debugging_level is DEBUG, to verify the input order.
    """

    count = _check_region(seq, count)
    _check_depth(count)
    if debugging_level >= DEBUG:
        _check_sorted(seq, 0, count, key)

    stack = []
    first = 0
    while count > 1 or stack:
        if count <= 1:
            first, count = stack.pop()

        if count == 2 or count == 3:
            seq[first], seq[first+1] = seq[first+1], seq[first]
            count = 0
        elif count == 4:
            seq[first], seq[first+2] = seq[first+2], seq[first]
            count = 0
        elif count == 5:
            seq[first], seq[first+2] = seq[first+2], seq[first]
            seq[first+3], seq[first+4] = seq[first+4], seq[first+3]
            count = 0
        elif count == 6 or count == 7:
            tmp = seq[first]
            seq[first] = seq[first+3]
            seq[first+3] = seq[first+2]
            seq[first+2] = tmp
            seq[first+4], seq[first+5] = seq[first+5], seq[first+4]
            count = 0
        elif count == 8 or count == 9:
            tmp = seq[first]
            seq[first] = seq[first+4]
            seq[first+4] = seq[first+3]
            seq[first+3] = tmp
            seq[first+1], seq[first+2] = seq[first+2], seq[first+1]
            last = first + count - 2
            seq[first+5], seq[last] = seq[last], seq[first+5]
            count = 0
        elif count == 10:
            tmp = seq[first]
            seq[first] = seq[first+5]
            seq[first+5] = seq[first+3]
            seq[first+3] = tmp
            seq[first+1], seq[first+2] = seq[first+2], seq[first+1]
            seq[first+6], seq[first+8] = seq[first+8], seq[first+6]
            count = 0
        else:
            half = count//2
            tmp = seq[first+half]
            _move(seq, first+1, first, half)
            seq[first] = tmp
            first += 1
            # (count-1)//2 >= 5 here, so the pushed block is never trivial
            stack.append((first+half, (count-1)//2))
            count = half

def unshuffle(seq, count=None, key=None):
    """Restore the shuffled elements seq[:count] to ascending order.

    This is the exact inverse of shuffle().  With debugging_level set to
    DEBUG the result is verified and ValueError is raised if the input
    was not a valid shuffled layout.
    """

    count = _check_region(seq, count)
    _check_depth(count)
    total = count

    stack = []
    first = 0
    while count > 1 or stack:
        if count <= 1:
            first, count = stack.pop()

        if count == 2 or count == 3:
            seq[first], seq[first+1] = seq[first+1], seq[first]
            count = 0
        elif count == 4:
            seq[first], seq[first+2] = seq[first+2], seq[first]
            count = 0
        elif count == 5:
            seq[first], seq[first+2] = seq[first+2], seq[first]
            seq[first+3], seq[first+4] = seq[first+4], seq[first+3]
            count = 0
        elif count == 6 or count == 7:
            tmp = seq[first]
            seq[first] = seq[first+2]
            seq[first+2] = seq[first+3]
            seq[first+3] = tmp
            seq[first+4], seq[first+5] = seq[first+5], seq[first+4]
            count = 0
        elif count == 8 or count == 9:
            tmp = seq[first]
            seq[first] = seq[first+3]
            seq[first+3] = seq[first+4]
            seq[first+4] = tmp
            seq[first+1], seq[first+2] = seq[first+2], seq[first+1]
            last = first + count - 2
            seq[first+5], seq[last] = seq[last], seq[first+5]
            count = 0
        elif count == 10:
            tmp = seq[first]
            seq[first] = seq[first+3]
            seq[first+3] = seq[first+5]
            seq[first+5] = tmp
            seq[first+1], seq[first+2] = seq[first+2], seq[first+1]
            seq[first+6], seq[first+8] = seq[first+8], seq[first+6]
            count = 0
        else:
            half = count//2
            tmp = seq[first]
            _move(seq, first, first+1, half)
            seq[first+half] = tmp
            stack.append((first+1+half, (count-1)//2))
            count = half

    if debugging_level >= DEBUG:
        _check_sorted(seq, 0, total, key)
