"""
IBAN country formats
Per-country length and BBAN layout, from the SWIFT IBAN registry
"""

import re
from types import MappingProxyType
from typing import Mapping, Optional, Pattern

from pydantic import BaseModel, ConfigDict, PrivateAttr, ValidationError, field_validator, model_validator

from netvalidators.rules.exceptions import InvalidIbanFormatError

MIN_IBAN_LENGTH = 8
MAX_IBAN_LENGTH = 34  # ISO 13616


class IbanFormat(BaseModel):
    """
    Immutable description of one country's IBAN layout.

    Attributes:
        country_code: Two upper-case letters, e.g. "GB"
        length: Total IBAN length including country code and check digits
        pattern: Regex the whole IBAN must match; starts with country_code
    """

    model_config = ConfigDict(frozen=True)

    country_code: str
    length: int
    pattern: str

    _compiled: Pattern = PrivateAttr()

    def __init__(self, country_code: str, length: int, pattern: str):
        try:
            super().__init__(country_code=country_code, length=length, pattern=pattern)
        except ValidationError as e:
            raise InvalidIbanFormatError(
                f"Invalid IBAN format for {country_code!r}: {e.errors()[0]['msg']}"
            ) from e

    @field_validator("country_code")
    @classmethod
    def validate_country_code(cls, v: str) -> str:
        """Country code must be exactly two upper-case letters"""
        if re.fullmatch(r"[A-Z]{2}", v) is None:
            raise ValueError(f"Invalid country code {v}; must be exactly 2 upper-case characters")
        return v

    @field_validator("length")
    @classmethod
    def validate_length(cls, v: int) -> int:
        if v < MIN_IBAN_LENGTH or v > MAX_IBAN_LENGTH:
            raise ValueError(
                f"Invalid length parameter, must be in range "
                f"{MIN_IBAN_LENGTH} to {MAX_IBAN_LENGTH} inclusive: {v}"
            )
        return v

    @field_validator("pattern")
    @classmethod
    def validate_pattern(cls, v: str) -> str:
        try:
            re.compile(v)
        except re.error as e:
            raise ValueError(f"Pattern does not compile: {e}") from e
        return v

    @model_validator(mode="after")
    def validate_pattern_prefix(self) -> "IbanFormat":
        if not self.pattern.startswith(self.country_code):
            raise ValueError(
                f"country code '{self.country_code}' does not agree with format: {self.pattern}"
            )
        return self

    def model_post_init(self, __context) -> None:
        self._compiled = re.compile(self.pattern, re.ASCII)

    def is_valid_length(self, code: Optional[str]) -> bool:
        return code is not None and len(code) == self.length

    def is_valid_format(self, code: Optional[str]) -> bool:
        if code is None:
            return False
        return self._compiled.fullmatch(code) is not None


DEFAULT_IBAN_FORMATS: Mapping[str, IbanFormat] = MappingProxyType({
    fmt.country_code: fmt for fmt in (
        IbanFormat("AD", 24, r"AD\d{10}[A-Z0-9]{12}"),  # Andorra
        IbanFormat("AE", 23, r"AE\d{21}"),  # United Arab Emirates
        IbanFormat("AL", 28, r"AL\d{10}[A-Z0-9]{16}"),  # Albania
        IbanFormat("AT", 20, r"AT\d{18}"),  # Austria
        IbanFormat("AZ", 28, r"AZ\d{2}[A-Z]{4}[A-Z0-9]{20}"),  # Azerbaijan
        IbanFormat("BA", 20, r"BA\d{18}"),  # Bosnia and Herzegovina
        IbanFormat("BE", 16, r"BE\d{14}"),  # Belgium
        IbanFormat("BG", 22, r"BG\d{2}[A-Z]{4}\d{6}[A-Z0-9]{8}"),  # Bulgaria
        IbanFormat("BH", 22, r"BH\d{2}[A-Z]{4}[A-Z0-9]{14}"),  # Bahrain
        IbanFormat("BR", 29, r"BR\d{25}[A-Z]{1}[A-Z0-9]{1}"),  # Brazil
        IbanFormat("BY", 28, r"BY\d{2}[A-Z0-9]{4}\d{4}[A-Z0-9]{16}"),  # Belarus
        IbanFormat("CH", 21, r"CH\d{7}[A-Z0-9]{12}"),  # Switzerland
        IbanFormat("CR", 22, r"CR\d{20}"),  # Costa Rica
        IbanFormat("CY", 28, r"CY\d{10}[A-Z0-9]{16}"),  # Cyprus
        IbanFormat("CZ", 24, r"CZ\d{22}"),  # Czech Republic
        IbanFormat("DE", 22, r"DE\d{20}"),  # Germany
        IbanFormat("DK", 18, r"DK\d{16}"),  # Denmark
        IbanFormat("DO", 28, r"DO\d{2}[A-Z0-9]{4}\d{20}"),  # Dominican Republic
        IbanFormat("EE", 20, r"EE\d{18}"),  # Estonia
        IbanFormat("ES", 24, r"ES\d{22}"),  # Spain
        IbanFormat("FI", 18, r"FI\d{16}"),  # Finland
        IbanFormat("FO", 18, r"FO\d{16}"),  # Denmark (Faroes)
        IbanFormat("FR", 27, r"FR\d{12}[A-Z0-9]{11}\d{2}"),  # France
        IbanFormat("GB", 22, r"GB\d{2}[A-Z]{4}\d{14}"),  # United Kingdom
        IbanFormat("GE", 22, r"GE\d{2}[A-Z]{2}\d{16}"),  # Georgia
        IbanFormat("GI", 23, r"GI\d{2}[A-Z]{4}[A-Z0-9]{15}"),  # Gibraltar
        IbanFormat("GL", 18, r"GL\d{16}"),  # Denmark (Greenland)
        IbanFormat("GR", 27, r"GR\d{9}[A-Z0-9]{16}"),  # Greece
        IbanFormat("GT", 28, r"GT\d{2}[A-Z0-9]{24}"),  # Guatemala
        IbanFormat("HR", 21, r"HR\d{19}"),  # Croatia
        IbanFormat("HU", 28, r"HU\d{26}"),  # Hungary
        IbanFormat("IE", 22, r"IE\d{2}[A-Z]{4}\d{14}"),  # Ireland
        IbanFormat("IL", 23, r"IL\d{21}"),  # Israel
        IbanFormat("IQ", 23, r"IQ\d{2}[A-Z]{4}\d{15}"),  # Iraq
        IbanFormat("IS", 26, r"IS\d{24}"),  # Iceland
        IbanFormat("IT", 27, r"IT\d{2}[A-Z]{1}\d{10}[A-Z0-9]{12}"),  # Italy
        IbanFormat("JO", 30, r"JO\d{2}[A-Z]{4}\d{4}[A-Z0-9]{18}"),  # Jordan
        IbanFormat("KW", 30, r"KW\d{2}[A-Z]{4}[A-Z0-9]{22}"),  # Kuwait
        IbanFormat("KZ", 20, r"KZ\d{5}[A-Z0-9]{13}"),  # Kazakhstan
        IbanFormat("LB", 28, r"LB\d{6}[A-Z0-9]{20}"),  # Lebanon
        IbanFormat("LC", 32, r"LC\d{2}[A-Z]{4}[A-Z0-9]{24}"),  # Saint Lucia
        IbanFormat("LI", 21, r"LI\d{7}[A-Z0-9]{12}"),  # Liechtenstein
        IbanFormat("LT", 20, r"LT\d{18}"),  # Lithuania
        IbanFormat("LU", 20, r"LU\d{5}[A-Z0-9]{13}"),  # Luxembourg
        IbanFormat("LV", 21, r"LV\d{2}[A-Z]{4}[A-Z0-9]{13}"),  # Latvia
        IbanFormat("MC", 27, r"MC\d{12}[A-Z0-9]{11}\d{2}"),  # Monaco
        IbanFormat("MD", 24, r"MD\d{2}[A-Z0-9]{20}"),  # Moldova
        IbanFormat("ME", 22, r"ME\d{20}"),  # Montenegro
        IbanFormat("MK", 19, r"MK\d{5}[A-Z0-9]{10}\d{2}"),  # North Macedonia
        IbanFormat("MR", 27, r"MR\d{25}"),  # Mauritania
        IbanFormat("MT", 31, r"MT\d{2}[A-Z]{4}\d{5}[A-Z0-9]{18}"),  # Malta
        IbanFormat("MU", 30, r"MU\d{2}[A-Z]{4}\d{19}[A-Z]{3}"),  # Mauritius
        IbanFormat("NL", 18, r"NL\d{2}[A-Z]{4}\d{10}"),  # The Netherlands
        IbanFormat("NO", 15, r"NO\d{13}"),  # Norway
        IbanFormat("PK", 24, r"PK\d{2}[A-Z]{4}[A-Z0-9]{16}"),  # Pakistan
        IbanFormat("PL", 28, r"PL\d{26}"),  # Poland
        IbanFormat("PS", 29, r"PS\d{2}[A-Z]{4}[A-Z0-9]{21}"),  # Palestine
        IbanFormat("PT", 25, r"PT\d{23}"),  # Portugal
        IbanFormat("QA", 29, r"QA\d{2}[A-Z]{4}[A-Z0-9]{21}"),  # Qatar
        IbanFormat("RO", 24, r"RO\d{2}[A-Z]{4}[A-Z0-9]{16}"),  # Romania
        IbanFormat("RS", 22, r"RS\d{20}"),  # Serbia
        IbanFormat("SA", 24, r"SA\d{4}[A-Z0-9]{18}"),  # Saudi Arabia
        IbanFormat("SC", 31, r"SC\d{2}[A-Z]{4}\d{20}[A-Z]{3}"),  # Seychelles
        IbanFormat("SE", 24, r"SE\d{22}"),  # Sweden
        IbanFormat("SI", 19, r"SI\d{17}"),  # Slovenia
        IbanFormat("SK", 24, r"SK\d{22}"),  # Slovak Republic
        IbanFormat("SM", 27, r"SM\d{2}[A-Z]{1}\d{10}[A-Z0-9]{12}"),  # San Marino
        IbanFormat("ST", 25, r"ST\d{23}"),  # Sao Tome and Principe
        IbanFormat("SV", 28, r"SV\d{2}[A-Z]{4}\d{20}"),  # El Salvador
        IbanFormat("TL", 23, r"TL\d{21}"),  # Timor-Leste
        IbanFormat("TN", 24, r"TN\d{22}"),  # Tunisia
        IbanFormat("TR", 26, r"TR\d{8}[A-Z0-9]{16}"),  # Turkey
        IbanFormat("UA", 29, r"UA\d{8}[A-Z0-9]{19}"),  # Ukraine
        IbanFormat("VG", 24, r"VG\d{2}[A-Z]{4}\d{16}"),  # Virgin Islands, British
        IbanFormat("XK", 20, r"XK\d{18}"),  # Kosovo
    )
})
