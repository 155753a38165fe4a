from __future__ import annotations

import base64
import re

import numpy as np

from codebake.errors import DishError
from codebake.types.dish import DishData
from codebake.types.operation import (
    EMPTY_ARGS,
    ArgType,
    OperationArguments,
    OperationInfo,
)

CATEGORY = "Data Format"


def _text_of(data: DishData, what: str) -> str:
    if not data.is_text:
        raise DishError(f"cannot convert binary data from {what}")
    return data.value


def _encode_each(data: DishData, fmt: str) -> None:
    data.value = " ".join(format(b, fmt) for b in data.as_bytes())


# int() would otherwise accept 0x41, 0b1 and 0o7 in their own radix
_PREFIXES = {2: "0b", 8: "0o", 16: "0x"}


def _has_prefix(digits: str, radix: int) -> bool:
    prefix = _PREFIXES.get(radix)
    return prefix is not None and digits[:2].lower() == prefix


def from_radix_helper(radix: int, data: DishData) -> None:
    """Decode whitespace separated byte values written in `radix`.

    The result is text when the bytes are valid UTF-8, binary otherwise.
    """
    text = _text_of(data, f"radix {radix}")
    out = bytearray()
    for digits in text.split():
        if not (digits.isascii() and digits.isalnum()) or _has_prefix(digits, radix):
            raise DishError("invalid digit found in string")
        try:
            value = int(digits, radix)
        except ValueError:
            raise DishError("invalid digit found in string") from None
        if value > 255:
            raise DishError("number too large to fit in target type")
        out.append(value)
    raw = bytes(out)
    try:
        data.value = raw.decode("utf-8")
    except UnicodeDecodeError:
        data.value = raw


def from_base64(args: OperationArguments, data: DishData) -> None:
    text = _text_of(data, "base64")
    try:
        data.value = base64.b64decode(text, validate=True)
    except ValueError as e:
        raise DishError(f"base64 decode error: {e}") from None


OPINFO_FROMBASE64 = OperationInfo(
    name="from-base64",
    description="converts from base64",
    category=CATEGORY,
    arguments=(),
    op=from_base64,
)


def to_base64(args: OperationArguments, data: DishData) -> None:
    data.value = base64.b64encode(data.as_bytes()).decode("ascii")


OPINFO_TOBASE64 = OperationInfo(
    name="to-base64",
    description="converts to base64",
    category=CATEGORY,
    arguments=(),
    op=to_base64,
)


def from_decimal(args: OperationArguments, data: DishData) -> None:
    from_radix_helper(10, data)


OPINFO_FROMDECIMAL = OperationInfo(
    name="from-decimal",
    description="converts a decimal-encoded string to its raw form",
    category=CATEGORY,
    arguments=(),
    op=from_decimal,
)


def to_decimal(args: OperationArguments, data: DishData) -> None:
    _encode_each(data, "d")


OPINFO_TODECIMAL = OperationInfo(
    name="to-decimal",
    description="converts data to a decimal string",
    category=CATEGORY,
    arguments=(),
    op=to_decimal,
)


def from_octal(args: OperationArguments, data: DishData) -> None:
    from_radix_helper(8, data)


OPINFO_FROMOCTAL = OperationInfo(
    name="from-octal",
    description="converts an octal-encoded string to its raw form",
    category=CATEGORY,
    arguments=(),
    op=from_octal,
)


def to_octal(args: OperationArguments, data: DishData) -> None:
    _encode_each(data, "o")


OPINFO_TOOCTAL = OperationInfo(
    name="to-octal",
    description="converts data to an octal string",
    category=CATEGORY,
    arguments=(),
    op=to_octal,
)


def from_hex(args: OperationArguments, data: DishData) -> None:
    from_radix_helper(16, data)


OPINFO_FROMHEX = OperationInfo(
    name="from-hex",
    description="converts a hexadecimal encoded string into its raw form",
    category=CATEGORY,
    arguments=(),
    op=from_hex,
)


def to_hex(args: OperationArguments, data: DishData) -> None:
    _encode_each(data, "x")


OPINFO_TOHEX = OperationInfo(
    name="to-hex",
    description="converts data into a hexadecimal encoded string",
    category=CATEGORY,
    arguments=(),
    op=to_hex,
)


def from_binary(args: OperationArguments, data: DishData) -> None:
    from_radix_helper(2, data)


OPINFO_FROMBINARY = OperationInfo(
    name="from-binary",
    description="converts a binary encoded string into its raw form",
    category=CATEGORY,
    arguments=(),
    op=from_binary,
)


def to_binary(args: OperationArguments, data: DishData) -> None:
    _encode_each(data, "b")


OPINFO_TOBINARY = OperationInfo(
    name="to-binary",
    description="converts data into a binary-encoded string",
    category=CATEGORY,
    arguments=(),
    op=to_binary,
)


def from_radix(args: OperationArguments, data: DishData) -> None:
    radix = args.get_integer("radix")
    if not 2 <= radix <= 36:
        raise DishError(f"invalid radix. {radix} is not in the range 2..=36")
    from_radix_helper(radix, data)


OPINFO_FROMRADIX = OperationInfo(
    name="from-radix",
    description="converts data in a given radix back into its raw form",
    category=CATEGORY,
    arguments=(("radix", ArgType.INTEGER),),
    op=from_radix,
)

# radixes with a dedicated operation
_RADIX_SHORTCUTS = {2: to_binary, 8: to_octal, 10: to_decimal, 16: to_hex, 64: to_base64}


def to_radix(args: OperationArguments, data: DishData) -> None:
    radix = args.get_integer("radix")
    if radix in _RADIX_SHORTCUTS:
        _RADIX_SHORTCUTS[radix](EMPTY_ARGS, data)
        return
    if not 2 <= radix <= 36:
        raise DishError(f"unsupported radix `{radix}`")
    data.value = " ".join(np.base_repr(b, radix).lower() for b in data.as_bytes())


OPINFO_TORADIX = OperationInfo(
    name="to-radix",
    description="converts data into an encoded string of a given radix",
    category=CATEGORY,
    arguments=(("radix", ArgType.INTEGER),),
    op=to_radix,
)


def _compile(pattern: str) -> re.Pattern:
    try:
        return re.compile(pattern)
    except (re.error, OverflowError) as e:
        raise DishError(f"invalid regex: {e}") from None


def _text_for_regex(data: DishData) -> str:
    if not data.is_text:
        raise DishError("dish should be string, got binary")
    return data.value


def regex_match(args: OperationArguments, data: DishData) -> None:
    pattern = _compile(args.get_string("pattern"))
    text = _text_for_regex(data)
    data.value = "\n".join(m.group(0) for m in pattern.finditer(text))


OPINFO_REGEXMATCH = OperationInfo(
    name="regex-match",
    description="finds substrings that match regex",
    category=CATEGORY,
    arguments=(("pattern", ArgType.STRING),),
    op=regex_match,
)

# $1, $name, ${name} and $$ in replacement strings
GROUP_REF_RE = re.compile(r"\$(?:\$|\{(\w+)\}|(\w+))")


def expand_replacement(template: str, m: re.Match) -> str:
    """Expand group references; an unknown group expands to nothing."""
    def group(ref: re.Match) -> str:
        name = ref.group(1) or ref.group(2)
        if name is None:
            return "$"
        key = int(name) if name.isascii() and name.isdecimal() else name
        try:
            return m.group(key) or ""
        except (IndexError, ValueError):
            return ""

    return GROUP_REF_RE.sub(group, template)


def regex_replace(args: OperationArguments, data: DishData) -> None:
    pattern = _compile(args.get_string("pattern"))
    replacement = args.get_string("replacement")
    text = _text_for_regex(data)
    data.value = pattern.sub(lambda m: expand_replacement(replacement, m), text)


OPINFO_REGEXREPLACE = OperationInfo(
    name="regex-replace",
    description="replaces substrings using regex groups",
    category=CATEGORY,
    arguments=(
        ("pattern", ArgType.STRING),
        ("replacement", ArgType.STRING),
    ),
    op=regex_replace,
)
