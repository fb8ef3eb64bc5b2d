from xduce.transducer import \
    Transducer,         \
    mapping,            \
    filtering,          \
    enumerating,        \
    limiting,           \
    each
from xduce.chain import Chain, compose, tr
from xduce.transduce import \
    Box,                \
    appending,          \
    collect,            \
    consume,            \
    joining,            \
    noop,               \
    reduce,             \
    run,                \
    summing
