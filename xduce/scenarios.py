from collections import namedtuple
from xduce.chain import tr
from xduce.transducer import mapping, filtering, enumerating, limiting, each
from xduce.transduce import reduce, collect, consume, appending

Scenario = namedtuple('Scenario', ['name', 'description', 'run'])

def _doubled_window():
    pipe = tr | mapping(lambda x: 2 * x) | filtering(lambda x: 3 < x < 10) | limiting(2)
    return reduce([], pipe, appending, [1, 2, 3, 4, 5, 6])

def _triangles():
    pipe = tr | \
        mapping(lambda x: list(range(1, x + 1))) | \
        mapping(sum) | \
        filtering(lambda x: x > 4)
    return collect(pipe, [1, 2, 3, 4, 5, 6])

def _pairwise_sums():
    pipe = tr | mapping(lambda x, y: x + y) | filtering(lambda x: x > 5)
    return collect(pipe, [1, 2, 3, 4, 5, 6], [4, 5, 6, 7])

def _enumerated_strings():
    pipe = tr | \
        enumerating(1) | \
        limiting(3) | \
        mapping(lambda idx, s: "elements[%d]=%s" % (idx, s))
    return collect(pipe, ["a", "b", "c", "d"])

def _odd_positions():
    lines = []
    pipe = tr | \
        enumerating() | \
        filtering(lambda idx, n: idx % 2) | \
        limiting(3) | \
        each(lambda idx, n: lines.append("elements[%d]=%d" % (idx, n)))
    consume(pipe, [3, 4, 5, 6, 7, 8, 9])
    return lines


SCENARIOS = dict((s.name, s) for s in [
    Scenario('a', "double, keep 3 < x < 10, take 2", _doubled_window),
    Scenario('b', "triangle numbers above 4", _triangles),
    Scenario('c', "pairwise sums of two sources above 5", _pairwise_sums),
    Scenario('d', "enumerate from 1, take 3, format", _enumerated_strings),
    Scenario('e', "odd indexes, take 3, for each", _odd_positions),
])

def get_scenario(name):
    try:
        return SCENARIOS[name]
    except KeyError:
        raise ValueError("Unknown scenario: %s" % name)

def render(result):
    return [str(line) for line in result]
