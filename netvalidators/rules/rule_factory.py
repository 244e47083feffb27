"""
Rule Factory
Shared rule instances, one per option combination
"""

from functools import lru_cache
from typing import Tuple

from netvalidators.rules.domain import DomainRule
from netvalidators.rules.email import EmailRule
from netvalidators.rules.iban import IbanRule
from netvalidators.rules.inet_address import InetAddressRule
from netvalidators.rules.url import UrlRule
from netvalidators.utils.config import get_settings
from netvalidators.utils.logger import get_logger

logger = get_logger(__name__)


@lru_cache(maxsize=None)
def get_inet_address_rule() -> InetAddressRule:
    """Get the shared IPv4/IPv6 rule"""
    logger.debug("Creating shared rule: InetAddress")
    return InetAddressRule()


@lru_cache(maxsize=None)
def get_domain_rule(allow_local: bool = False) -> DomainRule:
    """
    Get the shared domain rule.

    Args:
        allow_local: Accept local TLDs and single-label host names

    Returns:
        DomainRule instance, identical for equal arguments
    """
    logger.debug(f"Creating shared rule: Domain (allow_local={allow_local})")
    return DomainRule(allow_local)


@lru_cache(maxsize=None)
def get_email_rule(allow_local: bool = False, allow_tld: bool = False) -> EmailRule:
    """
    Get the shared email rule.

    Args:
        allow_local: Accept local host names in the domain part
        allow_tld: Accept a bare top-level domain as the domain part

    Returns:
        EmailRule instance, identical for equal arguments
    """
    logger.debug(
        f"Creating shared rule: Email (allow_local={allow_local}, allow_tld={allow_tld})"
    )
    return EmailRule(allow_local, allow_tld)


def get_url_rule(schemes: Tuple[str, ...] = (), options: int = 0) -> UrlRule:
    """
    Get a shared URL rule.

    Args:
        schemes: Allowed schemes as a tuple (hashable); empty selects
                 Settings.default_url_schemes at call time
        options: Bit set of UrlOption values

    Returns:
        UrlRule instance, identical for equal resolved schemes and options

    Example:
        rule = get_url_rule(("http", "https"), UrlOption.NO_FRAGMENTS)
    """
    if not schemes:
        schemes = tuple(get_settings().default_url_schemes)
    return _shared_url_rule(schemes, int(options))


@lru_cache(maxsize=32)
def _shared_url_rule(schemes: Tuple[str, ...], options: int) -> UrlRule:
    logger.debug(f"Creating shared rule: Url (schemes={schemes}, options={options})")
    return UrlRule(schemes, options)


@lru_cache(maxsize=None)
def get_iban_rule() -> IbanRule:
    """Get the shared IBAN rule over the default country formats"""
    logger.debug("Creating shared rule: Iban")
    return IbanRule()
