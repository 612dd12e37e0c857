import logging
from func_prototypes import typed
from fntransduce.reducer import Reducer

log = logging.getLogger(__name__)


class Conj(Reducer):
    """Collects items into a list, preserving order. The list is appended in place."""

    def initial(self):
        return []

    def step(self, result, input):
        result.append(input)
        return result


class Sum(Reducer):

    def initial(self):
        return 0

    def step(self, result, input):
        return result + input


class Max(Reducer):
    """None means no value yet, and loses to the first real item."""

    def initial(self):
        return None

    def step(self, result, input):
        if result is None or result < input:
            return input
        return result


class Min(Reducer):
    """None means no value yet, and loses to the first real item."""

    def initial(self):
        return None

    def step(self, result, input):
        if result is None or result > input:
            return input
        return result


conj_r = Conj()
sum_r = Sum()
max_r = Max()
min_r = Min()


class Joining(Reducer):
    """
    Accumulates the str() of each item, joining them with separator on finish.
    The accumulation is a list of parts until then.
    """

    def __init__(self, separator):
        self.separator = separator

    def initial(self):
        return []

    def step(self, result, input):
        result.append(str(input))
        return result

    def finish(self, result):
        return self.separator.join(result)


@typed(str)
def joined_r(separator):
    return Joining(separator)


class ToFile(Reducer):
    """
    Writes each item on its own line.
    The file is opened by initial() and closed by finish(), so run it with
    transduce_default.
    """

    def __init__(self, path, mode, encoding):
        self.path = path
        self.mode = mode
        self.encoding = encoding

    def initial(self):
        log.debug("opening %s", self.path)
        return open(self.path, self.mode, encoding=self.encoding)

    def step(self, result, input):
        result.write("%s\n" % (input,))
        return result

    def finish(self, result):
        result.close()
        log.debug("closed %s", self.path)
        return self.path


def to_file_r(path, mode='w', encoding='utf-8'):
    return ToFile(path, mode, encoding)
