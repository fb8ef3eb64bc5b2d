from functools import reduce
from xduce.transducer import Transducer

class Chain:
    """
    An ordered, immutable composition of Transducers, in the order the pipeline reads left to right.

    Applying a chain of T1, T2, ..., Tn to a base step B builds T1(T2(...Tn(B)...)), so that inputs pass
    through T1 first and reach B last. Storage keeps append order, the right fold does the nesting.
    """
    __slots__ = ('_xforms',)

    def __init__(self, *xforms):
        self._xforms = _flatten(xforms)

    @property
    def xforms(self):
        return self._xforms

    def append(self, xform):
        """Returns a new chain with xform (a Transducer or a Chain) added to the end."""
        out = Chain()
        out._xforms = self._xforms + _flatten([xform])
        return out

    __or__ = append

    def __call__(self, rf):
        return reduce(lambda acc, xform: xform(acc), reversed(self._xforms), rf)

    def __len__(self):
        return len(self._xforms)

    def __iter__(self):
        return iter(self._xforms)

    def __eq__(self, other):
        if not isinstance(other, Chain):
            return NotImplemented
        return self._xforms == other._xforms

    def __hash__(self):
        return hash(self._xforms)

    def __repr__(self):
        return "tr" + "".join(" | " + repr(xform) for xform in self._xforms)


def _flatten(xforms):
    out = []
    for xform in xforms:
        if isinstance(xform, Transducer):
            out.append(xform)
        elif isinstance(xform, Chain):
            out.extend(xform.xforms)
        else:
            raise TypeError("Can't append %s to a chain, expected Transducer or Chain" % type(xform).__name__)
    return tuple(out)

def compose(*xforms):
    """Compose Transducers and Chains in reading order."""
    return Chain(*xforms)


tr = Chain()
