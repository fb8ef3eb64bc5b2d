# Worked out from http://vitiy.info/cpp14-how-to-implement-transducers/
# Steps are (acc, *inputs) -> bool, the accumulator is mutated in place and
# returning False stops the reduction early.

def _run_0(step, acc):
    raise ValueError("Reduction over 0 sources is not supported.")


def _run_1(step, acc, a):
    for x in a:
        if not step(acc, x):
            break


def _run_2(step, acc, a, b):
    for x, y in zip(a, b):
        if not step(acc, x, y):
            break


def _run_3(step, acc, a, b, c):
    for x, y, z in zip(a, b, c):
        if not step(acc, x, y, z):
            break


def _run_4(step, acc, a, b, c, d):
    for w, x, y, z in zip(a, b, c, d):
        if not step(acc, w, x, y, z):
            break


def _run_n(step, acc, *sources):
    for inputs in zip(*sources):
        if not step(acc, *inputs):
            break


_run_fns = [
    _run_0,
    _run_1,
    _run_2,
    _run_3,
    _run_4,
]


def run(step, acc, *sources):
    """
    Drives step over sources in lock step, one input from each source per call.
    Stops when the shortest source is exhausted, or as soon as step returns False.
    acc is mutated in place by step.
    """
    n = len(sources)
    if n < len(_run_fns):
        _run_fns[n](step, acc, *sources)
    else:
        _run_n(step, acc, *sources)


def _bind(xform, step):
    if xform is None:
        return step
    return xform(step)


def reduce(init, xform, step, *sources):
    """
    xform is a Transducer or Chain (or None)
    step is (acc, *inputs) -> bool
    init is the accumulator, and is returned once sources are exhausted or the pipeline stops.
    """
    run(_bind(xform, step), init, *sources)
    return init


def collect(xform, *sources):
    """Runs the pipeline and returns a list of everything which reached the end of it."""
    return reduce([], xform, appending, *sources)


def consume(xform, *sources):
    """Runs the pipeline for its side effects, typically a chain ending in each()."""
    reduce(None, xform, noop, *sources)


def appending(acc, *inputs):
    """
    Step which appends to a list accumulator.
    Multiple inputs (zipped sources which were not mapped) are appended as a tuple.
    """
    if len(inputs) == 1:
        acc.append(inputs[0])
    else:
        acc.append(inputs)
    return True


def noop(acc, *inputs):
    return True


class Box:
    """Mutable holder for scalar accumulators."""
    def __init__(self, value=None):
        self.value = value

    def __eq__(self, other):
        if isinstance(other, Box):
            return self.value == other.value
        return NotImplemented

    def __repr__(self):
        return "Box(%r)" % (self.value,)


def summing(box, val):
    """Step which computes a sum"""
    box.value += val
    return True


def joining(seperator):
    """
    Step which joins str(val) onto box.value with seperator between values.
    A box holding None has nothing joined yet, any other value (even '') is a prefix.
    """
    def joint(box, val):
        if box.value is None:
            box.value = str(val)
        else:
            box.value = "%s%s%s" % (box.value, seperator, val)
        return True
    return joint
