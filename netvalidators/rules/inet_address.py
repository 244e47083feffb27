"""
IPv4 / IPv6 address validation
Checks the textual form of a candidate address; nothing is resolved.
"""

import re
from typing import List, Optional

from netvalidators.rules.base_rule import BaseRule

IPV4_MAX_OCTET_VALUE = 255

MAX_UNSIGNED_SHORT = 0xFFFF

IPV4_REGEX = re.compile(r"([0-9]{1,3})\.([0-9]{1,3})\.([0-9]{1,3})\.([0-9]{1,3})")

# Max number of hex groups (separated by :) in an IPv6 address
IPV6_MAX_HEX_GROUPS = 8

# Max hex digits in each IPv6 group
IPV6_MAX_HEX_DIGITS_PER_GROUP = 4

HEX_GROUP_REGEX = re.compile(r"[0-9a-fA-F]{1,4}")


def _split_hextets(address: str, compressed: bool) -> List[str]:
    """
    Split an IPv6 address into its colon-separated segments.

    Trailing empty segments are dropped, then the "::" marker is
    reconciled: a trailing "::" contributes one empty segment and a
    leading "::" leaves exactly one.
    """
    segments = address.split(":")
    while segments and segments[-1] == "":
        segments.pop()

    if compressed:
        if address.endswith("::"):
            segments.append("")
        elif address.startswith("::") and segments:
            del segments[0]

    return segments


class InetAddressRule(BaseRule):
    """
    Validator for IPv4 dotted quads and IPv6 colon-hex text (RFC 4291).

    IPv6 zone IDs ("%eth0") and prefix lengths are not part of the grammar
    and make an address invalid.
    """

    def is_valid(self, value: Optional[str]) -> bool:
        """Check if value is either a valid IPv4 or IPv6 address"""
        return self.is_valid_inet4_address(value) or self.is_valid_inet6_address(value)

    def is_valid_inet4_address(self, inet4_address: Optional[str]) -> bool:
        """
        Validate an IPv4 address.

        Args:
            inet4_address: Candidate dotted quad, e.g. "192.168.0.1"

        Returns:
            True if the argument contains a valid IPv4 address
        """
        if not inet4_address:
            return False

        match = IPV4_REGEX.fullmatch(inet4_address)
        if match is None:
            return False

        for octet in match.groups():
            if int(octet) > IPV4_MAX_OCTET_VALUE:
                return False

            if len(octet) > 1 and octet.startswith("0"):
                return False

        return True

    def is_valid_inet6_address(self, inet6_address: Optional[str]) -> bool:
        """
        Validate an IPv6 address.

        Accepts the full form, one "::" compression, and an IPv4 tail
        occupying the last two groups (e.g. "::ffff:192.168.1.1").

        Args:
            inet6_address: Candidate address, without brackets

        Returns:
            True if the argument contains a valid IPv6 address
        """
        if not inet6_address:
            return False

        compressed = "::" in inet6_address
        if compressed and inet6_address.find("::") != inet6_address.rfind("::"):
            return False

        if (inet6_address.startswith(":") and not inet6_address.startswith("::")) \
                or (inet6_address.endswith(":") and not inet6_address.endswith("::")):
            return False

        segments = _split_hextets(inet6_address, compressed)
        if len(segments) > IPV6_MAX_HEX_GROUPS:
            return False

        valid_units = 0
        empty_segments = 0
        last_index = len(segments) - 1

        for index, segment in enumerate(segments):
            if segment == "":
                empty_segments += 1
                if empty_segments > 1:
                    return False
                continue

            if index == last_index and "." in segment:
                if not self.is_valid_inet4_address(segment):
                    return False
                valid_units += 2  # an IPv4 tail fills two groups
                continue

            if len(segment) > IPV6_MAX_HEX_DIGITS_PER_GROUP:
                return False

            if HEX_GROUP_REGEX.fullmatch(segment) is None:
                return False

            if int(segment, 16) > MAX_UNSIGNED_SHORT:
                return False

            valid_units += 1

        if valid_units > IPV6_MAX_HEX_GROUPS:
            return False

        if compressed:
            # "::" must stand for at least one group
            return valid_units < IPV6_MAX_HEX_GROUPS

        return valid_units == IPV6_MAX_HEX_GROUPS
