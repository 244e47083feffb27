"""
Email address validation
User part per the RFC 822 word grammar, domain part via DomainRule or an IP literal
"""

import re
from typing import Optional

from netvalidators.rules.base_rule import BaseRule
from netvalidators.rules.domain import DomainRule
from netvalidators.rules.inet_address import InetAddressRule
from netvalidators.utils.logger import get_logger

logger = get_logger(__name__)

MAX_USERNAME_LENGTH = 64

SPECIAL_CHARS = r"\x00-\x1f\x7f()<>@,;:'\\\".\[\]"
VALID_CHARS = rf"(\\.)|[^\s{SPECIAL_CHARS}]"
QUOTED_USER = r'("(\\"|[^"])*")'
WORD = rf"(({VALID_CHARS}|')+|{QUOTED_USER})"

EMAIL_PATTERN = re.compile(r"\s*?(.+)@(.+?)\s*", re.ASCII)
IP_DOMAIN_PATTERN = re.compile(r"\[(.*)\]")
USER_PATTERN = re.compile(rf"\s*{WORD}(\.{WORD})*", re.ASCII)


class EmailRule(BaseRule):
    """
    Validator for email addresses.

    This implementation is not guaranteed to catch all possible errors in
    an email address; it checks structure, not deliverability.
    """

    def __init__(self, allow_local: bool = False, allow_tld: bool = False):
        """
        Initialize the email rule.

        Args:
            allow_local: Accept local host names in the domain part
            allow_tld: Accept a bare top-level domain, e.g. "user@com"
        """
        self._allow_local = allow_local
        self._allow_tld = allow_tld
        self._domain_rule = DomainRule(allow_local)
        self._inet_address_rule = InetAddressRule()
        logger.debug(
            f"EmailRule created (allow_local={allow_local}, allow_tld={allow_tld})"
        )

    def is_valid(self, value: Optional[str]) -> bool:
        """
        Check if value is a valid email address.

        Args:
            value: Candidate address; None is invalid

        Returns:
            True if both the user and the domain part are valid
        """
        if value is None:
            return False

        # check this first, it's cheap
        if value.endswith("."):
            return False

        match = EMAIL_PATTERN.fullmatch(value)
        if match is None:
            return False

        if not self.is_valid_user(match.group(1)):
            return False

        return self.is_valid_domain(match.group(2))

    def is_valid_domain(self, domain: Optional[str]) -> bool:
        """
        Check the domain part, which may be in IDN form or an IP literal
        in brackets such as "[192.168.0.1]".
        """
        if domain is None:
            return False

        ip_match = IP_DOMAIN_PATTERN.fullmatch(domain)
        if ip_match is not None:
            return self._inet_address_rule.is_valid(ip_match.group(1))

        if self._allow_tld:
            return self._domain_rule.is_valid(domain) or (
                not domain.startswith(".") and self._domain_rule.is_valid_tld(domain)
            )

        return self._domain_rule.is_valid(domain)

    def is_valid_user(self, user: str) -> bool:
        """Check the user part against length and word grammar"""
        if user is None or len(user) > MAX_USERNAME_LENGTH:
            return False

        return USER_PATTERN.fullmatch(user) is not None
