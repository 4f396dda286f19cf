__version__ = '1.0.0'
from shuffledsearch._shuffle import shuffle, unshuffle, MAX_SHUFFLE_COUNT_LOG2
from shuffledsearch._search import search, deshuffle, reference_search, \
     NOT_FOUND
from shuffledsearch._mutate import insert, remove, CapacityError
from shuffledsearch._shuffledset import shuffledset, SORTED, SHUFFLED
from shuffledsearch._shuffleddict import shuffleddict

__all__ = ['shuffle', 'unshuffle', 'search', 'deshuffle', 'reference_search',
           'insert', 'remove', 'NOT_FOUND', 'CapacityError',
           'MAX_SHUFFLE_COUNT_LOG2', 'shuffledset', 'shuffleddict',
           'SORTED', 'SHUFFLED']
