"""Pure, curried operations over immutable sequences.

    from seqops import array as A
    from seqops.maybe import Just, NOTHING

    A.map(lambda x: x * 2)([1, 2, 3])      # (2, 4, 6)
    A.at(3)([1, 2, 3, 4])                  # Just(4)
    A.slice(1)(3)([1, 2, 3, 4])            # (2, 3)

The foundation layer beneath wrapper packages: nothing here mutates its
arguments, throws for a recoverable condition or returns ``None``.

Several sequence functions share their name with a Python builtin, so they
are only reachable through :mod:`seqops.array` and never star-exported here.
"""

from . import array
from . import constants as _constants
from . import declarations as _declarations
from . import maybe as _maybe
from .constants import *  # noqa: F401,F403
from .declarations import *  # noqa: F401,F403
from .maybe import *  # noqa: F401,F403

__all__ = ["array"]
for module in (_maybe, _declarations, _constants):
    __all__.extend(getattr(module, "__all__", []))
__all__ = list(dict.fromkeys(__all__))
