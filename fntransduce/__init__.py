from fntransduce.reducer import ArityError, Reducer, reducer, ensure_reducer, identity, multi_arity
from fntransduce.reducers import conj_r, sum_r, max_r, min_r, joined_r, to_file_r
from fntransduce.transducers import \
    Transducer, \
    identity_t, \
    map_t,      \
    grep_t,     \
    take_t,     \
    cat_t,      \
    mapcat_t,   \
    progress_t
from fntransduce.compose import comp
from fntransduce.transduce import reduce_with, transduce, transduce_default

__all__ = [
    'ArityError', 'Reducer', 'reducer', 'ensure_reducer', 'identity', 'multi_arity',
    'conj_r', 'sum_r', 'max_r', 'min_r', 'joined_r', 'to_file_r',
    'Transducer', 'identity_t', 'map_t', 'grep_t', 'take_t', 'cat_t', 'mapcat_t', 'progress_t',
    'comp',
    'reduce_with', 'transduce', 'transduce_default',
]
