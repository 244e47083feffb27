"""
IBAN validation
Country lookup, length, BBAN format and check digits
"""

from typing import Mapping, Optional

from netvalidators.rules.base_rule import BaseRule
from netvalidators.utils.iban_check_digit import IbanCheckDigit
from netvalidators.utils.iban_format import DEFAULT_IBAN_FORMATS, IbanFormat
from netvalidators.utils.logger import get_logger

logger = get_logger(__name__)


class IbanRule(BaseRule):
    """
    Validator for International Bank Account Numbers.

    The code must be in electronic format: upper case, no spaces.
    """

    def __init__(self, formats: Mapping[str, IbanFormat] = DEFAULT_IBAN_FORMATS):
        """
        Initialize the IBAN rule.

        Args:
            formats: Country formats keyed by two-letter country code
        """
        self._formats = formats
        self._check_digit = IbanCheckDigit()
        logger.debug(f"IbanRule created ({len(formats)} country formats)")

    @property
    def formats(self) -> Mapping[str, IbanFormat]:
        return self._formats

    def is_valid(self, value: Optional[str]) -> bool:
        """
        Check if value is a valid IBAN.

        Args:
            value: Candidate IBAN; None is invalid

        Returns:
            True if the country is known and length, format and
            check digits are all valid
        """
        iban_format = self.get_validator(value)
        if iban_format is None:
            return False

        if not iban_format.is_valid_length(value) or not iban_format.is_valid_format(value):
            return False

        return self._check_digit.is_valid(value)

    def has_validator(self, code: Optional[str]) -> bool:
        """Check whether a format is registered for the code's country"""
        return self.get_validator(code) is not None

    def get_validator(self, code: Optional[str]) -> Optional[IbanFormat]:
        """
        Get the country format for an IBAN.

        Args:
            code: IBAN, or just its two-letter country code (case-sensitive)

        Returns:
            The matching IbanFormat, or None if the country is unknown
        """
        if code is None or len(code) < 2:
            return None

        return self._formats.get(code[:2])
