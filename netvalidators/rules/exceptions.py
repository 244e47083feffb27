"""
Custom exceptions for validator construction and conversion helpers
"""


class ValidatorError(Exception):
    """Base exception for all validator errors"""

    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)

    def __str__(self):
        return f"{self.__class__.__name__}: {self.message}"


class ConfigurationError(ValidatorError):
    """Raised when a rule or a static table is set up incorrectly"""
    pass


class InvalidAuthorityPatternError(ConfigurationError):
    """Raised when a custom URL authority pattern does not compile"""
    pass


class InvalidIbanFormatError(ConfigurationError):
    """Raised when an IBAN country format record is malformed"""
    pass


class IDNConversionError(ValidatorError):
    """Raised by the strict IDN conversion when a label cannot be converted"""
    pass


class CheckDigitError(ValidatorError):
    """Raised when a check digit cannot be calculated for a code"""
    pass
