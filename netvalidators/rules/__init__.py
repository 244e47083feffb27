"""
Rules Layer - Validator Implementations
One rule class per identifier kind, all sharing the BaseRule interface
"""

# Exceptions (imported first; utils modules depend on them)
from netvalidators.rules.exceptions import (
    ValidatorError,
    ConfigurationError,
    InvalidAuthorityPatternError,
    InvalidIbanFormatError,
    IDNConversionError,
    CheckDigitError
)

# Base Rule
from netvalidators.rules.base_rule import BaseRule

# Rule Implementations
from netvalidators.rules.inet_address import InetAddressRule
from netvalidators.rules.domain import DomainRule
from netvalidators.rules.email import EmailRule
from netvalidators.rules.url import UrlRule, UrlOption
from netvalidators.rules.iban import IbanRule

# Rule Factory
from netvalidators.rules.rule_factory import (
    get_inet_address_rule,
    get_domain_rule,
    get_email_rule,
    get_url_rule,
    get_iban_rule
)

__all__ = [
    # Base
    "BaseRule",

    # Rules
    "InetAddressRule",
    "DomainRule",
    "EmailRule",
    "UrlRule",
    "UrlOption",
    "IbanRule",

    # Factory
    "get_inet_address_rule",
    "get_domain_rule",
    "get_email_rule",
    "get_url_rule",
    "get_iban_rule",

    # Exceptions
    "ValidatorError",
    "ConfigurationError",
    "InvalidAuthorityPatternError",
    "InvalidIbanFormatError",
    "IDNConversionError",
    "CheckDigitError"
]
