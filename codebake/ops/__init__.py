"""The operations that can be applied to dishes.

Each category lives in its own module (data_format.py, textual.py, ...).
An operation is a function `op(args, data)` that reads its parameters from
the OperationArguments bag (they are guaranteed present and typed) and
rewrites `data.value` in place. It raises DishError only when the input
cannot reasonably be transformed, for example when decoding data that is
not in the expected encoding.

To add an operation, write the function, describe it with an OperationInfo
(arguments are ordered, required, and have no defaults) and list it below.
"""

from codebake.ops.data_format import (
    OPINFO_FROMBASE64,
    OPINFO_TOBASE64,
    OPINFO_FROMDECIMAL,
    OPINFO_TODECIMAL,
    OPINFO_FROMOCTAL,
    OPINFO_TOOCTAL,
    OPINFO_FROMHEX,
    OPINFO_TOHEX,
    OPINFO_FROMBINARY,
    OPINFO_TOBINARY,
    OPINFO_FROMRADIX,
    OPINFO_TORADIX,
    OPINFO_REGEXMATCH,
    OPINFO_REGEXREPLACE,
)
from codebake.ops.textual import OPINFO_ROT13, OPINFO_REVERSE
from codebake.ops.utility import OPINFO_TAKE_BYTES, OPINFO_DROP_BYTES

OPERATIONS = (
    OPINFO_ROT13,       OPINFO_REVERSE,    OPINFO_FROMBASE64,  OPINFO_TOBASE64,
    OPINFO_FROMDECIMAL, OPINFO_TODECIMAL,  OPINFO_FROMOCTAL,   OPINFO_TOOCTAL,
    OPINFO_TOHEX,       OPINFO_FROMHEX,    OPINFO_FROMBINARY,  OPINFO_TOBINARY,
    OPINFO_FROMRADIX,   OPINFO_TORADIX,    OPINFO_REGEXMATCH,  OPINFO_REGEXREPLACE,
    OPINFO_TAKE_BYTES,  OPINFO_DROP_BYTES,
)
