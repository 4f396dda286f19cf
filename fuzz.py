#!/usr/bin/env python

# Randomized differential check: a shuffledset and the free functions are
# driven with the same operations as a plain sorted list and compared
# after every step.  Usage: fuzz.py [seed] [iterations]

import bisect, pprint, random, sys

import shuffledsearch
from shuffledsearch import NOT_FOUND

if len(sys.argv) > 1:
    random.seed(int(sys.argv[1]))
else:
    random.seed(3)
iterations = int(sys.argv[2]) if len(sys.argv) > 2 else 100000

CAPACITY = 1024

model = []
sset = shuffledsearch.shuffledset()
raw = [None] * CAPACITY
count = 0

gen_int = lambda: random.randint(-2**10, 2**10)
gen_member = lambda: random.choice(model) if model else gen_int()

def save_obs(ob1, ob2):
    f = open('ob1', 'w')
    f.write(pprint.pformat(ob1))
    f.write('\n')
    f.close()
    f = open('ob2', 'w')
    f.write(pprint.pformat(ob2))
    f.write('\n')
    f.close()

def safe_print(s):
    s = str(s)
    print(s[:300])

def do_add(v):
    global count
    i = bisect.bisect_left(model, v)
    if i == len(model) or model[i] != v:
        model.insert(i, v)
    sset.add(v)
    count = shuffledsearch.insert(v, raw, count)

def do_discard(v):
    global count
    i = bisect.bisect_left(model, v)
    if i < len(model) and model[i] == v:
        del model[i]
    sset.discard(v)
    count = shuffledsearch.remove(v, raw, count)

def do_lookup(v):
    expected = shuffledsearch.reference_search(v, model)
    found = shuffledsearch.search(v, raw, count)
    rv = shuffledsearch.deshuffle(found, count)
    if rv != expected or (v in sset) != (expected != NOT_FOUND):
        return 'lookup of %d: expected %d, got %d' % (v, expected, rv)

def do_batch(v):
    sset.sort()
    for _ in range(random.randrange(20)):
        if random.random() < 0.5:
            do_add(gen_int())
        else:
            do_discard(gen_member())
    sset.shuffle()

methods = {
    'add': (do_add, gen_int),
    'discard': (do_discard, gen_member),
    'lookup': (do_lookup, gen_member),
    'batch': (do_batch, gen_int),
    }

last = None

for it in range(iterations):
    if len(model) >= CAPACITY - 32:
        # Stay within the fixed storage used by the free functions
        del model[:]
        sset.clear()
        count = 0
        print('(reset)')
    name = random.choice(list(methods))
    f, gen = methods[name]
    arg = gen()
    last = '%s(%d)' % (name, arg)
    problem = f(arg)
    if problem is None:
        if list(sset) != model or count != len(model):
            problem = 'mismatched contents'
        elif raw[:count] != sset.storage():
            problem = 'mismatched layouts'
    if problem:
        save_obs(model, sset.storage())
        print()
        safe_print(last)
        safe_print(problem)
        safe_print(model)
        print()
        safe_print(sset.storage())
        sys.exit(1)
    if it % 1000 == 0:
        print(it, len(model))
        sys.stdout.flush()
