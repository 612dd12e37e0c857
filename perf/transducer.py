import timeit
from functools import partial
from tabulate import tabulate
from fntransduce import transduce, comp, map_t, grep_t, conj_r, sum_r

def isEven(n):
    return n % 2 == 0

def inc(x):
    return x + 1

def square(x):
    return x * x

# args example: partial(inc_square_comprehension, hundredK)
# kwargs example number=1000
def performance_compare(*cases, case_args=None, timeit_kwargs=None):
    case_args = case_args or []
    timeit_kwargs = timeit_kwargs or {}
    results = {}
    for case in cases:
        name = case.__name__
        case = partial(case, *case_args)
        time = timeit.timeit(case, **timeit_kwargs)
        results[name] = time
    lowest = min([time for time in results.values()])
    table = [(name, time, "%.2f" % (time / lowest)) for (name, time) in results.items()]
    print(tabulate(table, headers=['case', 'time', 'scale']))

def sum_even_loop(ns):
    total = 0
    for n in ns:
        if isEven(n):
            total += n
    return total

def sum_even_filter(ns):
    return sum(filter(isEven, ns))

def sum_even_transduce(ns):
    return transduce(grep_t(isEven), sum_r, 0, ns)

def inc_square_comprehension(nums):
    return [(num + 1) * (num + 1) for num in nums]

def inc_square_loop(nums):
    out = []
    for n in nums:
        out.append((n + 1) * (n + 1))
    return out

def inc_square_map(nums):
    return list(map(square, map(inc, nums)))

incs = map_t(inc)
squares = map_t(square)

def inc_square_transduce_compose(nums):
    return transduce(comp(incs, squares), conj_r, [], nums)


hundredK = range(100000)

def test_sum_even():
    performance_compare(sum_even_loop,
                        sum_even_filter,
                        sum_even_transduce,
                        case_args=[hundredK],
                        timeit_kwargs={'number': 100})

def test_inc_square():
    performance_compare(inc_square_comprehension,
                        inc_square_loop,
                        inc_square_map,
                        inc_square_transduce_compose,
                        case_args=[hundredK],
                        timeit_kwargs={'number': 100})
