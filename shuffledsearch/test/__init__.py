# Helpers shared by the test modules.

def layout(items):
    "Build the shuffled layout of the sorted list items by recursion"
    if not items:
        return []
    m = len(items)//2
    return [items[m]] + layout(items[:m]) + layout(items[m+1:])

def unique_sorted(rng, n, lo=-2**31, hi=2**31-1):
    "Return n distinct random integers in ascending order"
    return sorted(rng.sample(range(lo, hi), n))

class RecordingList(list):
    "A list that remembers which positions were read"
    def __init__(self, *args):
        super(RecordingList, self).__init__(*args)
        self.reads = []

    def __getitem__(self, i):
        self.reads.append(i)
        return super(RecordingList, self).__getitem__(i)
