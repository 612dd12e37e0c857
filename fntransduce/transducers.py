from typing import TypeVar, Callable, Generic
from func_prototypes import typed
from tqdm import tqdm
from fntransduce.reducer import Reducer, ensure_reducer

T = TypeVar("T")
U = TypeVar("U")


class Transducer(Reducer[T, U]):
    """
    A reducing function which wraps a downstream reducing function rf.
    Every operation passes straight through to rf unless overridden.
    """

    def __init__(self, rf: Reducer[T, U]):
        self.rf = ensure_reducer(rf)

    def initial(self):
        return self.rf.initial()

    def step(self, result: T, input: U):
        return self.rf.step(result, input)

    def finish(self, result: T):
        return self.rf.finish(result)


def _ensure_callable(name, fn):
    if not callable(fn):
        raise TypeError("%s expects a callable, got %r" % (name, fn))


def identity_t(rf):
    """Leaves the downstream reducing function untouched."""
    return ensure_reducer(rf)


A = TypeVar("A")
B = TypeVar("B")

class Mapping(Transducer[T, A], Generic[T, A, B]):

    def __init__(self, f: Callable[[A], B], rf: Reducer[T, B]):
        super().__init__(rf)
        self.f = f

    def step(self, result: T, input: A):
        return self.rf.step(result, self.f(input))


def map_t(f: Callable[[A], B]):
    """map_t(f) is a transducer which passes f(item) downstream for every item."""
    _ensure_callable("map_t", f)
    def mapped(rf: Reducer[T, B]):
        return Mapping(f, rf)
    return mapped


class Filtering(Transducer):

    def __init__(self, pred, rf):
        super().__init__(rf)
        self.pred = pred

    def step(self, result, input):
        if self.pred(input):
            return self.rf.step(result, input)
        return result


def grep_t(pred: Callable[[U], bool]):
    """
    grep_t(pred) is a transducer which drops items for which pred is falsey.
    pred is (a -> Bool)
    """
    _ensure_callable("grep_t", pred)
    def filtered(rf: Reducer[T, U]):
        return Filtering(pred, rf)
    return filtered


class Taking(Transducer):

    def __init__(self, n, rf):
        super().__init__(rf)
        self.n = n
        self.seen = 0

    def step(self, result, input):
        self.seen += 1
        if self.seen <= self.n:
            return self.rf.step(result, input)
        # There is no early exit, the rest of the input is drained.
        return result


@typed(int)
def take_t(n: int):
    """
    Passes along the first n items. The count is kept per application,
    so the same take_t can drive any number of transductions.
    """
    if n < 0:
        raise ValueError("take_t count must not be negative: %d" % n)
    def taker(rf: Reducer[T, U]):
        return Taking(n, rf)
    return taker


class Concatenating(Transducer):
    """Each item is an iterable, whose values are stepped downstream in order."""

    def step(self, result, input):
        for value in input:
            result = self.rf.step(result, value)
        return result


def cat_t(rf):
    return Concatenating(rf)


def mapcat_t(f):
    """f maps an item to an iterable of items, which are all passed downstream."""
    _ensure_callable("mapcat_t", f)
    def mapcatted(rf):
        return Mapping(f, Concatenating(rf))
    return mapcatted


class Progress(Transducer):
    """
    Ticks a tqdm progress bar for every item stepped through.
    The bar is opened by the first step and closed on finish, or as soon as
    a downstream step raises.
    """

    def __init__(self, rf, tqdm_kwargs):
        super().__init__(rf)
        self.tqdm_kwargs = tqdm_kwargs
        self.bar = None

    def step(self, result, input):
        if self.bar is None:
            self.bar = tqdm(**self.tqdm_kwargs)
        try:
            result = self.rf.step(result, input)
        except BaseException:
            self.bar.close()
            raise
        self.bar.update(1)
        return result

    def finish(self, result):
        if self.bar is not None:
            self.bar.close()
        return self.rf.finish(result)


def progress_t(**tqdm_kwargs):
    def progressed(rf):
        return Progress(rf, tqdm_kwargs)
    return progressed
