import functools as f
from timeit import timeit
from xduce import Box, run, summing
from xduce.transduce import _run_n

def plus(x, y):
    return x + y

def test_functools_reduce():
    f.reduce(plus, range(10000), 0)

def test_run():
    run(summing, Box(0), range(10000))

def test_run_generic():
    _run_n(summing, Box(0), range(10000))

def pair_summing(box, x, y):
    box.value += x + y
    return True

def test_run_pairs():
    run(pair_summing, Box(0), range(10000), range(10000))

def test_run_pairs_generic():
    _run_n(pair_summing, Box(0), range(10000), range(10000))


if __name__ == '__main__':
    for case in [test_functools_reduce, test_run, test_run_generic, test_run_pairs, test_run_pairs_generic]:
        print(case.__name__, timeit(case, number=1000))
