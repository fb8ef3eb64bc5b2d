from typing import TypeVar, Callable, Generic
from collections.abc import Callable as CallableType
from func_prototypes import typed

T = TypeVar("T")
# A step takes the accumulator and one or more elements, returns whether to continue.
Step = Callable[..., bool]

class Stage(Generic[T]):
    """
    A step function wrapping a downstream step function rf.
    Stages are built by applying a Transducer to rf, and hold any state needed for a single run.
    """
    def __init__(self, rf: Step):
        self.rf = rf

    def __call__(self, result: T, *inputs) -> bool:
        return self.rf(result, *inputs)


A = TypeVar("A")
B = TypeVar("B")

class Mapping(Stage[T], Generic[T, A, B]):

    def __init__(self, rf: Step, f: Callable[..., B]):
        super().__init__(rf)
        self.f = f

    def __call__(self, result: T, *inputs: A) -> bool:
        return self.rf(result, self.f(*inputs))


class Filtering(Stage):

    def __init__(self, rf, pred):
        super().__init__(rf)
        self.pred = pred

    def __call__(self, result, *inputs):
        if self.pred(*inputs):
            return self.rf(result, *inputs)
        return True


class Enumerating(Stage):

    def __init__(self, rf, n):
        super().__init__(rf)
        self.n = n

    def __call__(self, result, *inputs):
        idx = self.n
        self.n += 1
        return self.rf(result, idx, *inputs)


class Limiting(Stage):

    def __init__(self, rf, limit):
        super().__init__(rf)
        self.limit = limit
        self.seen = 0

    def __call__(self, result, *inputs):
        self.seen += 1
        if self.seen > self.limit:
            return False
        return self.rf(result, *inputs)


class Each(Stage):
    """Terminates a pipeline with a side effect. rf is never called."""

    def __init__(self, rf, effect):
        super().__init__(rf)
        self.effect = effect

    def __call__(self, result, *inputs):
        self.effect(*inputs)
        return True


class Transducer:
    """
    Immutable description of one pipeline stage: a kind tag, the Stage class which implements it,
    and the parameters captured at construction.
    Calling a Transducer with a downstream step builds a fresh Stage, so state is never shared between runs.
    """
    __slots__ = ('kind', 'stage', 'params')

    def __init__(self, kind, stage, params):
        object.__setattr__(self, 'kind', kind)
        object.__setattr__(self, 'stage', stage)
        object.__setattr__(self, 'params', tuple(params))

    def __setattr__(self, name, value):
        raise AttributeError("Transducer is immutable")

    def __call__(self, rf: Step) -> Stage:
        return self.stage(rf, *self.params)

    def __or__(self, other):
        # Imported here, chain depends on this module.
        from xduce.chain import Chain
        return Chain(self).append(other)

    def __eq__(self, other):
        if not isinstance(other, Transducer):
            return NotImplemented
        return (self.kind, self.stage, self.params) == (other.kind, other.stage, other.params)

    def __hash__(self):
        return hash((self.kind, self.stage, self.params))

    def __repr__(self):
        return "%s(%s)" % (self.kind, ", ".join(map(repr, self.params)))


def _index(name, n):
    # bool is an int subclass, but True is not a count.
    if isinstance(n, bool):
        raise TypeError("Argument %s must be of %s, not %s" % (name, int, bool))


@typed(CallableType)
def mapping(f):
    """Forward f(*inputs) downstream."""
    return Transducer("map", Mapping, (f,))

@typed(CallableType)
def filtering(pred):
    """Forward inputs downstream only when pred(*inputs) holds. Rejected inputs never stop the pipeline."""
    return Transducer("filter", Filtering, (pred,))

@typed(int)
def enumerating(n=0):
    """Prepend a running index, starting at n, to the inputs."""
    _index("n", n)
    return Transducer("enumerate", Enumerating, (n,))

@typed(int)
def limiting(n):
    """Forward the first n inputs, then stop the pipeline."""
    _index("n", n)
    if n < 0:
        raise ValueError("limit must be non-negative, got %d" % n)
    return Transducer("limit", Limiting, (n,))

@typed(CallableType)
def each(effect):
    """Call effect(*inputs) for its side effect. Ends the pipeline, nothing is forwarded."""
    return Transducer("each", Each, (effect,))
