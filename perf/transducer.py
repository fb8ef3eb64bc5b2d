from xduce import tr, mapping, filtering, limiting, each, Box, collect, consume, reduce, summing
from functools import partial
from tabulate import tabulate
import timeit

def isPrime(n):
    if n < 2:
        return True
    for i in range(2, n):
        if n % i == 0:
            return False
    return True

def test_is_prime():
    assert isPrime(1) is True
    assert isPrime(2) is True
    assert isPrime(3) is True
    assert isPrime(4) is False
    assert isPrime(5) is True
    assert isPrime(6) is False
    assert isPrime(7) is True

def sum_primes_comprehension(ns):
    return sum([n for n in ns if isPrime(n)])

def sum_primes_loop(ns):
    total = 0
    for n in ns:
        if isPrime(n):
            total += n
    return total

def sum_primes_filter(ns):
    return sum(filter(isPrime, ns))

def sum_primes_transduce(ns):
    return reduce(Box(0), filtering(isPrime), summing, ns).value

# args example: partial(inc_square_comprehension, hundredK)
# kwargs example number=1000
def performance_compare(*cases, case_args=(), timeit_kwargs=None):
    if timeit_kwargs is None:
        timeit_kwargs = {}
    results = {}
    for case in cases:
        name = case.__name__
        case = partial(case, *case_args)
        time = timeit.timeit(case, **timeit_kwargs)
        results[name] = time
    lowest = min([time for time in results.values()])
    table = [(name, time, "%.2f" % (time / lowest)) for (name, time) in results.items()]
    print(tabulate(table, headers=['case', 'time', 'scale']))

def test_primes_sum():
    performance_compare(
        sum_primes_comprehension,
        sum_primes_loop,
        sum_primes_filter,
        sum_primes_transduce,
        case_args=[list(range(1000))],
        timeit_kwargs={'number': 100})

def inc_square_comprehension(nums):
    return [(num + 1) * (num + 1) for num in nums]

def inc_square_loop(nums):
    out = []
    for n in nums:
        out.append((n + 1) * (n + 1))
    return out

def inc_square_map(nums):
    return list(map(lambda x: (x + 1) * (x + 1), nums))

incs = mapping(lambda x: x + 1)
squares = mapping(lambda x: x * x)

def inc_square_collect(nums):
    return collect(incs | squares, nums)


hundredK = range(100000)

def test_inc_square():
    performance_compare(inc_square_comprehension,
                        inc_square_loop,
                        inc_square_map,
                        inc_square_collect,
                        case_args=[hundredK],
                        timeit_kwargs={'number': 10})

def pairwise_zip(xs, ys):
    return [x + y for (x, y) in zip(xs, ys)]

def pairwise_collect(xs, ys):
    return collect(tr | mapping(lambda x, y: x + y), xs, ys)

def test_pairwise():
    performance_compare(pairwise_zip,
                        pairwise_collect,
                        case_args=[hundredK, hundredK],
                        timeit_kwargs={'number': 10})

def take_slice(nums):
    return [x for x in nums if x % 3 == 0][:10]

def take_limit(nums):
    return collect(tr | filtering(lambda x: x % 3 == 0) | limiting(10), nums)

def test_short_circuit():
    performance_compare(take_slice,
                        take_limit,
                        case_args=[hundredK],
                        timeit_kwargs={'number': 10})

def consume_loop(nums):
    for n in nums:
        pass

def consume_each(nums):
    consume(tr | each(lambda n: None), nums)

def test_consume():
    performance_compare(consume_loop,
                        consume_each,
                        case_args=[hundredK],
                        timeit_kwargs={'number': 10})
