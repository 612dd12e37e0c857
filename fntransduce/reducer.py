from abc import ABCMeta, abstractmethod
from typing import TypeVar, Callable, Generic

T = TypeVar("T")
U = TypeVar("U")


class ArityError(TypeError):
    """Raised when a reducing function is called with an unsupported shape."""


def identity(x):
    return x


class Reducer(Generic[T, U], metaclass=ABCMeta):
    """
    A reducing function.

    initial() -> T           seed for the accumulation
    finish(T) -> T           called once after the last step
    step(T, U) -> T          fold a single item into the accumulation

    Calling a reducer dispatches on the number of positional arguments,
    so rf(), rf(acc) and rf(acc, item) map onto the three operations.
    """

    def initial(self) -> T:
        raise ArityError("%s has no initial value" % type(self).__name__)

    def finish(self, result: T) -> T:
        return result

    @abstractmethod
    def step(self, result: T, input: U) -> T:
        raise NotImplementedError()

    def __call__(self, *args):
        if len(args) == 0:
            return self.initial()
        elif len(args) == 1:
            return self.finish(args[0])
        elif len(args) == 2:
            return self.step(args[0], args[1])
        else:
            raise ArityError("%s takes 0, 1 or 2 arguments, got %d" % (type(self).__name__, len(args)))


def multi_arity(*funcs):
    """
    Returns a function which dispatches to funcs by the number of positional
    arguments: funcs[0] for none, funcs[1] for one, and so on.
    None marks an arity which isn't supported.

    multi_arity(list, identity, lambda acc, x: acc.append(x) or acc)
    is a plain function reducer collecting into a list.
    """
    def dispatch(*args):
        try:
            func = funcs[len(args)]
        except IndexError:
            func = None
        if func is None:
            raise ArityError("wrong number of arguments, got %d" % len(args))
        return func(*args)
    return dispatch


_no_initial = object()


class FunctionReducer(Reducer[T, U]):

    def __init__(self, step: Callable[[T, U], T], initial=_no_initial, finish: Callable[[T], T] = identity):
        self._step = step
        self._initial = initial
        self._finish = finish

    def initial(self):
        if self._initial is _no_initial:
            raise ArityError("reducer %s has no initial value" % getattr(self._step, '__name__', self._step))
        return self._initial()

    def finish(self, result):
        return self._finish(result)

    def step(self, result, input):
        return self._step(result, input)


class CallableReducer(Reducer[T, U]):
    """
    Adapts a plain function which answers all three call shapes itself,
    fn(), fn(acc) and fn(acc, item), like the functions multi_arity builds.
    """

    def __init__(self, fn):
        self.fn = fn

    def initial(self):
        return self.fn()

    def finish(self, result):
        return self.fn(result)

    def step(self, result, input):
        return self.fn(result, input)


def reducer(step, initial=_no_initial, finish=identity):
    """
    Builds a Reducer out of plain functions. Use it for step only functions
    such as lambda acc, x: acc + x.
    step is (b -> a -> b)
    initial is (() -> b), optional
    finish is (b -> b)
    """
    for name, fn in (("step", step), ("finish", finish)):
        if not callable(fn):
            raise TypeError("%s must be callable, got %r" % (name, fn))
    if initial is not _no_initial and not callable(initial):
        raise TypeError("initial must be callable, got %r" % (initial,))
    return FunctionReducer(step, initial, finish)


def ensure_reducer(rf):
    """
    Plain functions are expected to answer rf(), rf(acc) and rf(acc, item).
    A function lacking one of them fails with TypeError when that shape is used.
    """
    if isinstance(rf, Reducer):
        return rf
    if not callable(rf):
        raise TypeError("Can't use %r as a reducer" % (rf,))
    return CallableReducer(rf)
