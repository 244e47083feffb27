"""
Domain name validation
Label structure per RFC 2396 / RFC 1123 plus IANA top-level domain membership
"""

import re
from typing import Optional

from netvalidators.rules.base_rule import BaseRule
from netvalidators.utils import tld
from netvalidators.utils.idn import to_ascii
from netvalidators.utils.logger import get_logger

logger = get_logger(__name__)

MAX_DOMAIN_LENGTH = 253

# RFC2396: domainlabel = alphanum | alphanum *( alphanum | "-" ) alphanum
# Max 63 characters
DOMAIN_LABEL_REGEX = r"[a-zA-Z0-9](?:[a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?"

# RFC2396 toplabel = alpha | alpha *( alphanum | "-" ) alphanum
# Max 63 characters
TOP_LABEL_REGEX = r"[a-zA-Z](?:[a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?"

# RFC2396 hostname = *( domainlabel "." ) toplabel [ "." ]
# Requires at least one domain label before the top label, so that a match
# also locates the TLD; single labels are checked against DOMAIN_LABEL_PATTERN.
# RFC1123 sec 2.1 allows hostnames to start with a digit.
DOMAIN_NAME_PATTERN = re.compile(
    rf"(?:{DOMAIN_LABEL_REGEX}\.)+({TOP_LABEL_REGEX})\.?"
)
DOMAIN_LABEL_PATTERN = re.compile(DOMAIN_LABEL_REGEX)


def unicode_to_ascii(value: str) -> str:
    """
    Converts potentially Unicode input to punycode.
    If conversion fails, returns the original input, which the ASCII-only
    patterns of the callers will then reject.
    """
    return to_ascii(value)


def _chomp_leading_dot(value: str) -> str:
    if value.startswith("."):
        return value[1:]
    return value


class DomainRule(BaseRule):
    """
    Validator for domain names.

    A domain is valid when its labels are well formed and its last label
    is a recognized top-level domain. With allow_local, "localhost",
    "localdomain" and bare host names such as "machinename" pass too.
    """

    def __init__(self, allow_local: bool = False):
        """
        Initialize the domain rule.

        Args:
            allow_local: Accept local TLDs and single-label host names
        """
        self._allow_local = allow_local
        logger.debug(f"DomainRule created (allow_local={allow_local})")

    @property
    def allow_local(self) -> bool:
        return self._allow_local

    def is_valid(self, value: Optional[str]) -> bool:
        """
        Check if value parses as a domain name with a recognized
        top-level domain. The check is case-insensitive.

        Args:
            value: Domain name, may be in IDN form

        Returns:
            True if the value is a valid domain name
        """
        if value is None:
            return False

        # hosts must be equally reachable via punycode and Unicode;
        # Unicode is never shorter than punycode, so check punycode
        domain = unicode_to_ascii(value)
        if len(domain) > MAX_DOMAIN_LENGTH:
            return False

        match = DOMAIN_NAME_PATTERN.fullmatch(domain)
        if match is not None:
            return self.is_valid_tld(match.group(1))

        return self._allow_local and DOMAIN_LABEL_PATTERN.fullmatch(domain) is not None

    def is_valid_domain_syntax(self, value: Optional[str]) -> bool:
        """
        Check label structure and length only, without TLD membership.
        Single labels are accepted.
        """
        if value is None:
            return False

        domain = unicode_to_ascii(value)
        if len(domain) > MAX_DOMAIN_LENGTH:
            return False

        return (
            DOMAIN_NAME_PATTERN.fullmatch(domain) is not None
            or DOMAIN_LABEL_PATTERN.fullmatch(domain) is not None
        )

    def is_valid_tld(self, value: Optional[str]) -> bool:
        """
        Check if value matches any IANA-defined top-level domain.
        A leading dot is ignored; the search is case-insensitive.
        """
        if value is None:
            return False

        value = unicode_to_ascii(value)

        if self._allow_local and self.is_valid_local_tld(value):
            return True

        return (
            self.is_valid_infrastructure_tld(value)
            or self.is_valid_generic_tld(value)
            or self.is_valid_country_code_tld(value)
        )

    def is_valid_infrastructure_tld(self, value: Optional[str]) -> bool:
        """Check for an infrastructure TLD (arpa)"""
        return self._tld_key(value) in tld.INFRASTRUCTURE_TLD_SET

    def is_valid_generic_tld(self, value: Optional[str]) -> bool:
        """Check for a generic TLD (com, org, museum, ...)"""
        return self._tld_key(value) in tld.GENERIC_TLD_SET

    def is_valid_country_code_tld(self, value: Optional[str]) -> bool:
        """Check for a country code TLD, including IDN ccTLDs"""
        return self._tld_key(value) in tld.COUNTRY_CODE_TLD_SET

    def is_valid_local_tld(self, value: Optional[str]) -> bool:
        """Check for a local pseudo-TLD (localhost, localdomain)"""
        return self._tld_key(value) in tld.LOCAL_TLD_SET

    @staticmethod
    def _tld_key(value: Optional[str]) -> Optional[str]:
        if value is None:
            return None
        return _chomp_leading_dot(unicode_to_ascii(value)).lower()
