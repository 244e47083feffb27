"""
netvalidators - syntactic validators for internet identifiers
Domains (with IDN), email addresses, IPv4/IPv6 addresses, URLs and IBANs
"""

from typing import Optional

# Rules first: utils modules import the exception hierarchy from rules
from netvalidators.rules import (
    BaseRule,
    InetAddressRule,
    DomainRule,
    EmailRule,
    UrlRule,
    UrlOption,
    IbanRule,
    get_inet_address_rule,
    get_domain_rule,
    get_email_rule,
    get_url_rule,
    get_iban_rule,
    ValidatorError,
    ConfigurationError,
    InvalidAuthorityPatternError,
    InvalidIbanFormatError,
    IDNConversionError,
    CheckDigitError
)
from netvalidators.utils.idn import is_ascii_only, to_ascii, to_ascii_strict

__version__ = "1.0.0"


def is_valid_ipv4(value: Optional[str]) -> bool:
    """Check if value is a valid IPv4 dotted quad"""
    return get_inet_address_rule().is_valid_inet4_address(value)


def is_valid_ipv6(value: Optional[str]) -> bool:
    """Check if value is a valid IPv6 address"""
    return get_inet_address_rule().is_valid_inet6_address(value)


def is_valid_ip(value: Optional[str]) -> bool:
    """Check if value is a valid IPv4 or IPv6 address"""
    return get_inet_address_rule().is_valid(value)


__all__ = [
    "is_valid_ipv4",
    "is_valid_ipv6",
    "is_valid_ip",
    "is_ascii_only",
    "to_ascii",
    "to_ascii_strict",
    "BaseRule",
    "InetAddressRule",
    "DomainRule",
    "EmailRule",
    "UrlRule",
    "UrlOption",
    "IbanRule",
    "get_inet_address_rule",
    "get_domain_rule",
    "get_email_rule",
    "get_url_rule",
    "get_iban_rule",
    "ValidatorError",
    "ConfigurationError",
    "InvalidAuthorityPatternError",
    "InvalidIbanFormatError",
    "IDNConversionError",
    "CheckDigitError",
]
