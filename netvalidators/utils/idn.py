"""
Internationalized domain name (IDN) to ASCII conversion
Splits a name on the four RFC 3490 dot characters and punycode-encodes
every label that holds non-ASCII code points.
"""

from functools import lru_cache
from typing import NamedTuple, Optional

from netvalidators.rules.exceptions import IDNConversionError
from netvalidators.utils.logger import get_logger

logger = get_logger(__name__)

# Flag to turn on the check against STD-3 ASCII rules
USE_STD3_ASCII_RULES = 0x02

MAX_LABEL_LENGTH = 63
ACE_PREFIX = "xn--"

# RFC 3490 3.1 1): full stop, ideographic full stop,
# fullwidth full stop, halfwidth ideographic full stop
LABEL_SEPARATORS = frozenset((".", "。", "．", "｡"))


class IDNResult(NamedTuple):
    """Outcome of a conversion: exactly one of value / error is set"""
    value: Optional[str] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def is_ascii_only(text: Optional[str]) -> bool:
    """
    Check if input contains only ASCII.
    Treats None as all ASCII.
    """
    if text is None:
        return True
    return all(ord(ch) <= 0x7F for ch in text)


def is_label_separator(ch: str) -> bool:
    """Check if a character is a label separator, i.e. a dot character"""
    return ch in LABEL_SEPARATORS


def _is_root_label(text: str) -> bool:
    return len(text) == 1 and is_label_separator(text)


def _is_non_ldh_ascii(ch: str) -> bool:
    """
    LDH is letter/digit/hyphen. Non-LDH refers to the ASCII code points
    that are none of those:
    0..0x2C, 0x2E..0x2F, 0x3A..0x40, 0x5B..0x60, 0x7B..0x7F
    """
    cp = ord(ch)
    return (
        0x00 <= cp <= 0x2C
        or 0x2E <= cp <= 0x2F
        or 0x3A <= cp <= 0x40
        or 0x5B <= cp <= 0x60
        or 0x7B <= cp <= 0x7F
    )


def _starts_with_ace_prefix(label: str) -> bool:
    # ASCII-only lowering; other case mappings could fold into the prefix
    head = label[:len(ACE_PREFIX)]
    if len(head) < len(ACE_PREFIX):
        return False
    lowered = "".join(chr(ord(c) + 32) if "A" <= c <= "Z" else c for c in head)
    return lowered == ACE_PREFIX


def _encode_punycode(label: str) -> str:
    return ACE_PREFIX + label.lower().encode("punycode").decode("ascii")


def _convert_label(label: str, flags: int) -> IDNResult:
    """
    Convert a single label.

    Args:
        label: One label, without separators
        flags: Bit set of conversion flags (USE_STD3_ASCII_RULES)

    Returns:
        IDNResult with the ASCII label or the failure reason
    """
    if label == "":
        return IDNResult(error="Empty label is not a legal name")

    if flags & USE_STD3_ASCII_RULES:
        if any(_is_non_ldh_ascii(ch) for ch in label):
            return IDNResult(error="Contains non-LDH ASCII characters")
        if label.startswith("-") or label.endswith("-"):
            return IDNResult(error="Has leading or trailing hyphen")

    dest = label
    if not is_ascii_only(label):
        if _starts_with_ace_prefix(label):
            return IDNResult(error="The input starts with the ACE Prefix")
        try:
            dest = _encode_punycode(label)
        except UnicodeError as e:
            return IDNResult(error=f"Punycode encoding failed: {e}")

    if len(dest) > MAX_LABEL_LENGTH:
        return IDNResult(error="The label in the input is too long")

    return IDNResult(value=dest)


def convert(text: str, flags: int = 0) -> IDNResult:
    """
    Convert a domain name to its ASCII-compatible form.

    Every label is converted independently; the first failing label
    aborts the whole conversion. A separator at the very end of the
    input is kept as a trailing ".".

    Args:
        text: Domain name, possibly containing Unicode
        flags: Bit set of conversion flags (USE_STD3_ASCII_RULES)

    Returns:
        IDNResult holding the converted name or the failure reason
    """
    if _is_root_label(text):
        return IDNResult(value=".")

    labels = []
    start = 0
    length = len(text)

    while start < length:
        end = start
        while end < length and not is_label_separator(text[end]):
            end += 1

        result = _convert_label(text[start:end], flags)
        if not result.ok:
            return result
        labels.append(result.value)

        if end != length:
            # more labels follow, or this is the trailing dot
            labels.append(".")
        start = end + 1

    return IDNResult(value="".join(labels))


def to_ascii_strict(text: str, flags: int = 0) -> str:
    """
    Convert a domain name to ASCII, raising on failure.

    Raises:
        IDNConversionError: If any label cannot be converted
    """
    result = convert(text, flags)
    if not result.ok:
        raise IDNConversionError(result.error)
    return result.value


@lru_cache(maxsize=1)
def keeps_trailing_dot() -> bool:
    """Check whether conversion preserves the trailing dot of a name"""
    sentinel = "a."  # must be a valid name
    return convert(sentinel).value == sentinel


def to_ascii(text: str) -> str:
    """
    Convert potentially Unicode input to punycode.
    If conversion fails, returns the original input.

    Args:
        text: The string to convert, not None

    Returns:
        Converted input, or the original input if conversion fails
    """
    if is_ascii_only(text):  # skip possibly expensive processing
        return text

    result = convert(text)
    if not result.ok:
        logger.debug(f"IDN conversion failed for {text!r}: {result.error}")
        return text

    ascii_text = result.value
    if keeps_trailing_dot():
        return ascii_text

    if text and is_label_separator(text[-1]) and not ascii_text.endswith("."):
        return ascii_text + "."  # restore the missing stop
    return ascii_text
