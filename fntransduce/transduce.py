# Worked out from https://raganwald.com/2017/04/30/transducers.html
# and the transducer talk at https://www.youtube.com/watch?v=6mTbuzafcII.
import logging
from fntransduce.reducer import Reducer, ensure_reducer

log = logging.getLogger(__name__)


def reduce_with(reducer, seed, iterable):
    """
    reduce_with takes reducer as first argument, computes a reduction over iterable.
    Think foldl from Haskell.
    reducer is (b -> a -> b)
    Seed is b
    iterable is [a]
    reduce_with is (b -> a -> b) -> b -> [a] -> b
    """
    step = reducer.step if isinstance(reducer, Reducer) else reducer
    accumulation = seed
    for value in iterable:
        accumulation = step(accumulation, value)
    return accumulation


def _fold(xrf, seed, iterable):
    accumulation = seed
    count = 0
    for value in iterable:
        accumulation = xrf.step(accumulation, value)
        count += 1
    log.debug("folded %d items", count)
    return xrf.finish(accumulation)


def transduce(transformer, reducer, seed, iterable):
    """
    transformer is (reducer -> reducer)
    reducer is (b -> a -> b)
    seed is b
    iterable is [a]

    The transformed reducer is finished exactly once, even if iterable is empty.
    """
    xrf = ensure_reducer(transformer(ensure_reducer(reducer)))
    log.debug("transduce %r into %r", transformer, reducer)
    return _fold(xrf, seed, iterable)


def transduce_default(transformer, reducer, iterable):
    """Like transduce, but the seed comes from the transformed reducer's initial()."""
    xrf = ensure_reducer(transformer(ensure_reducer(reducer)))
    seed = xrf.initial()
    log.debug("transduce %r into %r from its initial value", transformer, reducer)
    return _fold(xrf, seed, iterable)
