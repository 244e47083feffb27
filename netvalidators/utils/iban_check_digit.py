"""
IBAN check digit
ISO 7064 Mod 97,10 calculation and validation
"""

from netvalidators.rules.exceptions import CheckDigitError

MIN_CODE_LENGTH = 5
MAX_ALPHANUMERIC_VALUE = 35  # numeric value of 'Z'
MAX = 999999999
MODULUS = 97

# check digits that can never be produced by calculate()
INVALID_CHECK_DIGITS = frozenset(("00", "01", "99"))


class IbanCheckDigit:
    """
    Check digit routine for International Bank Account Numbers.

    The IBAN is rearranged by moving the first four characters (country
    code and check digits) to the end, letters are converted to numbers
    (A=10 ... Z=35) and the result must be 1 modulo 97.

    Lower-case letters are accepted by the routine; format checks that
    reject them belong to IbanFormat.
    """

    def is_valid(self, code: str) -> bool:
        """
        Validate the check digits of an IBAN.

        Args:
            code: Complete IBAN including check digits

        Returns:
            True if the check digits are valid
        """
        if code is None or len(code) < MIN_CODE_LENGTH:
            return False

        if code[2:4] in INVALID_CHECK_DIGITS:
            return False

        try:
            return self._calculate_modulus(code) == 1
        except CheckDigitError:
            return False

    def calculate(self, code: str) -> str:
        """
        Calculate the check digits for an IBAN.

        The characters at positions 3-4 are ignored and treated as "00".

        Args:
            code: IBAN with or without check digits in place

        Returns:
            Two-digit check string, zero padded

        Raises:
            CheckDigitError: If the code is too short or holds invalid characters
        """
        if code is None or len(code) < MIN_CODE_LENGTH:
            raise CheckDigitError(f"Invalid Code length={0 if code is None else len(code)}")

        code = code[:2] + "00" + code[4:]
        modulus_result = self._calculate_modulus(code)
        return f"{98 - modulus_result:02d}"

    def _calculate_modulus(self, code: str) -> int:
        reformatted_code = code[4:] + code[:4]
        total = 0

        for i, ch in enumerate(reformatted_code):
            char_value = _numeric_value(ch)
            if char_value < 0 or char_value > MAX_ALPHANUMERIC_VALUE:
                raise CheckDigitError(f"Invalid Character[{i}] = '{ch}'")

            total = (total * 100 if char_value > 9 else total * 10) + char_value
            if total > MAX:
                total %= MODULUS

        return total % MODULUS


def _numeric_value(ch: str) -> int:
    if "0" <= ch <= "9":
        return ord(ch) - ord("0")
    if "A" <= ch <= "Z":
        return ord(ch) - ord("A") + 10
    if "a" <= ch <= "z":
        return ord(ch) - ord("a") + 10
    return -1
