"""
URL validation
Decomposes a URL with the RFC 2396 appendix B regex and checks every component
"""

import re
from enum import IntFlag
from typing import Iterable, Optional, Pattern, Union

from netvalidators.rules.base_rule import BaseRule
from netvalidators.rules.domain import DomainRule
from netvalidators.rules.exceptions import InvalidAuthorityPatternError
from netvalidators.rules.inet_address import InetAddressRule
from netvalidators.utils.config import get_settings
from netvalidators.utils.idn import to_ascii
from netvalidators.utils.logger import get_logger

logger = get_logger(__name__)

MAX_UNSIGNED_16_BIT_INT = 0xFFFF  # port max


class UrlOption(IntFlag):
    """Option bits for UrlRule; combine with |"""

    # Allow all validly formatted schemes to pass validation instead of
    # supplying a set of valid schemes
    ALLOW_ALL_SCHEMES = 1 << 0

    # Allow two slashes in the path component of the URL
    ALLOW_2_SLASHES = 1 << 1

    # Enabling this option disallows any URL fragments
    NO_FRAGMENTS = 1 << 2

    # Allow local URLs, such as http://localhost/ or http://machine/
    ALLOW_LOCAL_URLS = 1 << 3


URL_PATTERN = re.compile(r"(([^:/?#]+):)?(//([^/?#]*))?([^?#]*)(\?([^#]*))?(#(.*))?")
#                          12            3  4         5       6   7        8 9
PARSE_URL_SCHEME = 2
PARSE_URL_AUTHORITY = 4
PARSE_URL_PATH = 5
PARSE_URL_QUERY = 7
PARSE_URL_FRAGMENT = 9

SCHEME_PATTERN = re.compile(r"[a-zA-Z][a-zA-Z0-9+\-.]*")

# Allows for IPv4 but not IPv6; validation of the characters is done later
AUTHORITY_CHARS_REGEX = r"[a-zA-Z0-9\-.]"

# Matched separately because ':' is ambiguous with the port prefix
IPV6_REGEX = r"[0-9a-fA-F:]+"

# userinfo   = *( unreserved / pct-encoded / sub-delims / ":" )
# unreserved = ALPHA / DIGIT / "-" / "." / "_" / "~"
# sub-delims = "!" / "$" / "&" / "'" / "(" / ")" / "*" / "+" / "," / ";" / "="
# The password is assumed to use the same characters as the user name
USERINFO_CHARS_REGEX = r"[a-zA-Z0-9%-._~!$&'()*+,;=]"

# neither ':' nor '@' are userinfo chars, so no non-greedy matching needed
USERINFO_FIELD_REGEX = (
    rf"{USERINFO_CHARS_REGEX}+"  # at least one character for the name
    rf"(?::{USERINFO_CHARS_REGEX}*)?@"  # colon and password may be absent
)

AUTHORITY_PATTERN = re.compile(
    rf"(?:\[({IPV6_REGEX})\]|(?:(?:{USERINFO_FIELD_REGEX})?({AUTHORITY_CHARS_REGEX}*)))"
    r"(?::([0-9]*))?(.*)?"
)
PARSE_AUTHORITY_IPV6 = 1
PARSE_AUTHORITY_HOST_IP = 2  # excludes userinfo, if present
PARSE_AUTHORITY_PORT = 3  # excludes leading colon
PARSE_AUTHORITY_EXTRA = 4

PATH_PATTERN = re.compile(r"(/[-\w:@&?=+,.!/~*'%$_;()]*)?", re.ASCII)

QUERY_PATTERN = re.compile(r"\S*", re.ASCII)

FILE_SCHEME = "file"


class UrlRule(BaseRule):
    """
    Validator for URLs.

    By default the http, https and ftp schemes are accepted (configurable
    via NETVALIDATORS_DEFAULT_URL_SCHEMES). Behavior is tuned with
    UrlOption flags, and an extra authority pattern can whitelist hosts
    the domain check would reject.

    Example:
        rule = UrlRule(["http", "https"], UrlOption.NO_FRAGMENTS)
        rule.is_valid("https://www.example.org/index.html")
    """

    def __init__(
        self,
        schemes: Optional[Iterable[str]] = None,
        options: int = 0,
        authority_pattern: Optional[Union[str, Pattern]] = None
    ):
        """
        Initialize the URL rule.

        Args:
            schemes: Allowed schemes, case-insensitive. None or empty
                     selects the configured defaults.
            options: Bit set of UrlOption values
            authority_pattern: Regex accepting extra authorities; matched
                               with search semantics before the built-in checks

        Raises:
            InvalidAuthorityPatternError: If authority_pattern does not compile
        """
        self._options = UrlOption(options)

        if self._is_on(UrlOption.ALLOW_ALL_SCHEMES):
            self._allowed_schemes = frozenset()
        else:
            schemes = list(schemes or [])
            if not schemes:
                schemes = get_settings().default_url_schemes
            self._allowed_schemes = frozenset(s.lower() for s in schemes)

        self._authority_pattern = self._compile_authority_pattern(authority_pattern)

        self._domain_rule = DomainRule(self._is_on(UrlOption.ALLOW_LOCAL_URLS))
        self._inet_address_rule = InetAddressRule()

        logger.debug(
            f"UrlRule created (schemes={sorted(self._allowed_schemes)}, "
            f"options={self._options!r})"
        )

    @staticmethod
    def _compile_authority_pattern(
        authority_pattern: Optional[Union[str, Pattern]]
    ) -> Optional[Pattern]:
        if authority_pattern is None or isinstance(authority_pattern, re.Pattern):
            return authority_pattern

        try:
            return re.compile(authority_pattern)
        except re.error as e:
            logger.error(f"Invalid authority pattern {authority_pattern!r}: {e}")
            raise InvalidAuthorityPatternError(
                f"Invalid authority pattern {authority_pattern!r}: {e}"
            ) from e

    @property
    def allowed_schemes(self) -> frozenset:
        return self._allowed_schemes

    @property
    def options(self) -> UrlOption:
        return self._options

    def is_valid(self, value: Optional[str]) -> bool:
        """
        Check if value is a valid URL.

        Args:
            value: Candidate URL; None is invalid

        Returns:
            True if every component of the URL is valid
        """
        if value is None:
            return False

        match = URL_PATTERN.fullmatch(value)
        if match is None:
            return False

        scheme = match.group(PARSE_URL_SCHEME)
        if not self.is_valid_scheme(scheme):
            return False

        authority = match.group(PARSE_URL_AUTHORITY)
        if scheme.lower() == FILE_SCHEME:
            # file: allows an empty authority, but not a trailing ':'
            if authority and ":" in authority:
                return False
        elif not self.is_valid_authority(authority):
            return False

        if not self.is_valid_path(match.group(PARSE_URL_PATH)):
            return False

        if not self.is_valid_query(match.group(PARSE_URL_QUERY)):
            return False

        return self.is_valid_fragment(match.group(PARSE_URL_FRAGMENT))

    def is_valid_scheme(self, scheme: Optional[str]) -> bool:
        """
        Check the scheme against the scheme grammar and, unless all
        schemes are allowed, the configured scheme set.
        """
        if scheme is None:
            return False

        if SCHEME_PATTERN.fullmatch(scheme) is None:
            return False

        if self._is_off(UrlOption.ALLOW_ALL_SCHEMES) and scheme.lower() not in self._allowed_schemes:
            return False

        return True

    def is_valid_authority(self, authority: Optional[str]) -> bool:
        """
        Check the authority: optional userinfo, host (domain, IPv4 or
        bracketed IPv6) and optional port.
        """
        if authority is None:
            return False

        # manual authority validation, if specified
        if self._authority_pattern is not None and self._authority_pattern.search(authority):
            return True

        authority_ascii = to_ascii(authority)

        match = AUTHORITY_PATTERN.fullmatch(authority_ascii)
        if match is None:
            return False

        ipv6 = match.group(PARSE_AUTHORITY_IPV6)
        if ipv6 is not None:
            if not self._inet_address_rule.is_valid(ipv6):
                return False
        else:
            host_location = match.group(PARSE_AUTHORITY_HOST_IP)
            # a hostname is much more likely, so try it first
            if not self._domain_rule.is_valid(host_location) \
                    and not self._inet_address_rule.is_valid_inet4_address(host_location):
                return False

        port = match.group(PARSE_AUTHORITY_PORT)
        if port and int(port) > MAX_UNSIGNED_16_BIT_INT:
            return False

        extra = match.group(PARSE_AUTHORITY_EXTRA)
        return extra is None or extra.strip() == ""

    def is_valid_path(self, path: Optional[str]) -> bool:
        """Check the path characters, parent escapes and double slashes"""
        if path is None:
            return False

        if PATH_PATTERN.fullmatch(path) is None:
            return False

        # trying to go via the parent dir
        if path == "/.." or path.startswith("/../"):
            return False

        return self._is_on(UrlOption.ALLOW_2_SLASHES) or "//" not in path

    def is_valid_query(self, query: Optional[str]) -> bool:
        if query is None:
            return True

        return QUERY_PATTERN.fullmatch(query) is not None

    def is_valid_fragment(self, fragment: Optional[str]) -> bool:
        if fragment is None:
            return True

        return self._is_off(UrlOption.NO_FRAGMENTS)

    def _is_on(self, flag: UrlOption) -> bool:
        return bool(self._options & flag)

    def _is_off(self, flag: UrlOption) -> bool:
        return not self._options & flag
