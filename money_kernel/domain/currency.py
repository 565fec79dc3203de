"""Currency -- currency value object and the static ISO 4217 table."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from money_kernel.exceptions import InvalidCurrencyError


@dataclass(frozen=True, slots=True)
class Currency:
    """
    Currency metadata value object.

    Contract:
        ``code`` identifies the currency, ``base`` is the radix of its
        sub-units (10 for nearly every currency) and ``exponent`` the number
        of ``base`` digits after the radix point at its natural scale.
    Guarantees:
        - Immutable and hashable.
        - code is upper case and stripped; base >= 2; exponent >= 0.
    Non-goals:
        - Does NOT require an ISO 4217 code; non-ISO units (crypto, loyalty
          points) may be constructed directly.
    """

    code: str
    base: int = 10
    exponent: int = 2

    def __post_init__(self) -> None:
        if not isinstance(self.code, str) or not self.code.strip():
            raise InvalidCurrencyError(self.code, "Currency code is required")
        object.__setattr__(self, "code", self.code.upper().strip())
        if not isinstance(self.base, int) or isinstance(self.base, bool) or self.base < 2:
            raise InvalidCurrencyError(self.code, f"Currency base must be an integer >= 2, got {self.base!r}")
        if not isinstance(self.exponent, int) or isinstance(self.exponent, bool) or self.exponent < 0:
            raise InvalidCurrencyError(
                self.code, f"Currency exponent must be a non-negative integer, got {self.exponent!r}"
            )

    def to_dict(self) -> dict[str, int | str]:
        return {"code": self.code, "base": self.base, "exponent": self.exponent}

    @classmethod
    def from_dict(cls, data: dict) -> Currency:
        return cls(
            code=data["code"],
            base=data.get("base", 10),
            exponent=data.get("exponent", 2),
        )

    def __str__(self) -> str:
        return self.code


@dataclass(frozen=True)
class CurrencyInfo:
    """Information about a single ISO 4217 currency."""

    code: str
    exponent: int
    name: str
    base: int = 10

    @property
    def currency(self) -> Currency:
        return Currency(self.code, self.base, self.exponent)


# code -> (name, minor-unit exponent). Source: ISO 4217.
_ISO_4217: dict[str, tuple[str, int]] = {
    # Major currencies
    "USD": ("US Dollar", 2),
    "EUR": ("Euro", 2),
    "GBP": ("Pound Sterling", 2),
    "JPY": ("Japanese Yen", 0),
    "CHF": ("Swiss Franc", 2),
    "CAD": ("Canadian Dollar", 2),
    "AUD": ("Australian Dollar", 2),
    "NZD": ("New Zealand Dollar", 2),
    # Zero decimal currencies
    "BIF": ("Burundian Franc", 0),
    "CLP": ("Chilean Peso", 0),
    "DJF": ("Djiboutian Franc", 0),
    "GNF": ("Guinean Franc", 0),
    "ISK": ("Icelandic Krona", 0),
    "KMF": ("Comorian Franc", 0),
    "KRW": ("South Korean Won", 0),
    "PYG": ("Paraguayan Guarani", 0),
    "RWF": ("Rwandan Franc", 0),
    "UGX": ("Ugandan Shilling", 0),
    "VND": ("Vietnamese Dong", 0),
    "VUV": ("Vanuatu Vatu", 0),
    "XAF": ("Central African CFA Franc", 0),
    "XOF": ("West African CFA Franc", 0),
    "XPF": ("CFP Franc", 0),
    # Three decimal currencies
    "BHD": ("Bahraini Dinar", 3),
    "IQD": ("Iraqi Dinar", 3),
    "JOD": ("Jordanian Dinar", 3),
    "KWD": ("Kuwaiti Dinar", 3),
    "LYD": ("Libyan Dinar", 3),
    "OMR": ("Omani Rial", 3),
    "TND": ("Tunisian Dinar", 3),
    # Four decimal currencies (special)
    "CLF": ("Chilean Unidad de Fomento", 4),
    # Standard two decimal currencies (partial list - full set below)
    "AED": ("UAE Dirham", 2),
    "AFN": ("Afghan Afghani", 2),
    "ALL": ("Albanian Lek", 2),
    "AMD": ("Armenian Dram", 2),
    "ANG": ("Netherlands Antillean Guilder", 2),
    "AOA": ("Angolan Kwanza", 2),
    "ARS": ("Argentine Peso", 2),
    "AWG": ("Aruban Florin", 2),
    "AZN": ("Azerbaijan Manat", 2),
    "BAM": ("Bosnia and Herzegovina Convertible Mark", 2),
    "BBD": ("Barbadian Dollar", 2),
    "BDT": ("Bangladeshi Taka", 2),
    "BGN": ("Bulgarian Lev", 2),
    "BMD": ("Bermudian Dollar", 2),
    "BND": ("Brunei Dollar", 2),
    "BOB": ("Bolivian Boliviano", 2),
    "BOV": ("Bolivian Mvdol", 2),
    "BRL": ("Brazilian Real", 2),
    "BSD": ("Bahamian Dollar", 2),
    "BTN": ("Bhutanese Ngultrum", 2),
    "BWP": ("Botswana Pula", 2),
    "BYN": ("Belarusian Ruble", 2),
    "BZD": ("Belize Dollar", 2),
    "CDF": ("Congolese Franc", 2),
    "CHE": ("WIR Euro", 2),
    "CHW": ("WIR Franc", 2),
    "CNY": ("Chinese Yuan", 2),
    "COP": ("Colombian Peso", 2),
    "COU": ("Colombian Unidad de Valor Real", 2),
    "CRC": ("Costa Rican Colon", 2),
    "CUC": ("Cuban Convertible Peso", 2),
    "CUP": ("Cuban Peso", 2),
    "CVE": ("Cape Verdean Escudo", 2),
    "CZK": ("Czech Koruna", 2),
    "DKK": ("Danish Krone", 2),
    "DOP": ("Dominican Peso", 2),
    "DZD": ("Algerian Dinar", 2),
    "EGP": ("Egyptian Pound", 2),
    "ERN": ("Eritrean Nakfa", 2),
    "ETB": ("Ethiopian Birr", 2),
    "FJD": ("Fijian Dollar", 2),
    "FKP": ("Falkland Islands Pound", 2),
    "GEL": ("Georgian Lari", 2),
    "GHS": ("Ghanaian Cedi", 2),
    "GIP": ("Gibraltar Pound", 2),
    "GMD": ("Gambian Dalasi", 2),
    "GTQ": ("Guatemalan Quetzal", 2),
    "GYD": ("Guyanese Dollar", 2),
    "HKD": ("Hong Kong Dollar", 2),
    "HNL": ("Honduran Lempira", 2),
    "HRK": ("Croatian Kuna", 2),
    "HTG": ("Haitian Gourde", 2),
    "HUF": ("Hungarian Forint", 2),
    "IDR": ("Indonesian Rupiah", 2),
    "ILS": ("Israeli New Shekel", 2),
    "INR": ("Indian Rupee", 2),
    "IRR": ("Iranian Rial", 2),
    "JMD": ("Jamaican Dollar", 2),
    "KES": ("Kenyan Shilling", 2),
    "KGS": ("Kyrgyzstani Som", 2),
    "KHR": ("Cambodian Riel", 2),
    "KPW": ("North Korean Won", 2),
    "KYD": ("Cayman Islands Dollar", 2),
    "KZT": ("Kazakhstani Tenge", 2),
    "LAK": ("Lao Kip", 2),
    "LBP": ("Lebanese Pound", 2),
    "LKR": ("Sri Lankan Rupee", 2),
    "LRD": ("Liberian Dollar", 2),
    "LSL": ("Lesotho Loti", 2),
    "MAD": ("Moroccan Dirham", 2),
    "MDL": ("Moldovan Leu", 2),
    "MGA": ("Malagasy Ariary", 1),
    "MKD": ("Macedonian Denar", 2),
    "MMK": ("Myanmar Kyat", 2),
    "MNT": ("Mongolian Tugrik", 2),
    "MOP": ("Macanese Pataca", 2),
    "MRU": ("Mauritanian Ouguiya", 1),
    "MUR": ("Mauritian Rupee", 2),
    "MVR": ("Maldivian Rufiyaa", 2),
    "MWK": ("Malawian Kwacha", 2),
    "MXN": ("Mexican Peso", 2),
    "MXV": ("Mexican Unidad de Inversion", 2),
    "MYR": ("Malaysian Ringgit", 2),
    "MZN": ("Mozambican Metical", 2),
    "NAD": ("Namibian Dollar", 2),
    "NGN": ("Nigerian Naira", 2),
    "NIO": ("Nicaraguan Cordoba", 2),
    "NOK": ("Norwegian Krone", 2),
    "NPR": ("Nepalese Rupee", 2),
    "PAB": ("Panamanian Balboa", 2),
    "PEN": ("Peruvian Sol", 2),
    "PGK": ("Papua New Guinean Kina", 2),
    "PHP": ("Philippine Peso", 2),
    "PKR": ("Pakistani Rupee", 2),
    "PLN": ("Polish Zloty", 2),
    "QAR": ("Qatari Riyal", 2),
    "RON": ("Romanian Leu", 2),
    "RSD": ("Serbian Dinar", 2),
    "RUB": ("Russian Ruble", 2),
    "SAR": ("Saudi Riyal", 2),
    "SBD": ("Solomon Islands Dollar", 2),
    "SCR": ("Seychellois Rupee", 2),
    "SDG": ("Sudanese Pound", 2),
    "SEK": ("Swedish Krona", 2),
    "SGD": ("Singapore Dollar", 2),
    "SHP": ("Saint Helena Pound", 2),
    "SLE": ("Sierra Leonean Leone", 2),
    "SLL": ("Sierra Leonean Leone (old)", 2),
    "SOS": ("Somali Shilling", 2),
    "SRD": ("Surinamese Dollar", 2),
    "SSP": ("South Sudanese Pound", 2),
    "STN": ("Sao Tome and Principe Dobra", 2),
    "SVC": ("Salvadoran Colon", 2),
    "SYP": ("Syrian Pound", 2),
    "SZL": ("Swazi Lilangeni", 2),
    "THB": ("Thai Baht", 2),
    "TJS": ("Tajikistani Somoni", 2),
    "TMT": ("Turkmenistan Manat", 2),
    "TOP": ("Tongan Paanga", 2),
    "TRY": ("Turkish Lira", 2),
    "TTD": ("Trinidad and Tobago Dollar", 2),
    "TWD": ("New Taiwan Dollar", 2),
    "TZS": ("Tanzanian Shilling", 2),
    "UAH": ("Ukrainian Hryvnia", 2),
    "USN": ("US Dollar (Next day)", 2),
    "UYI": ("Uruguay Peso en Unidades Indexadas", 0),
    "UYU": ("Uruguayan Peso", 2),
    "UYW": ("Unidad Previsional", 4),
    "UZS": ("Uzbekistani Som", 2),
    "VED": ("Venezuelan Bolivar Digital", 2),
    "VES": ("Venezuelan Bolivar Soberano", 2),
    "WST": ("Samoan Tala", 2),
    "XCD": ("East Caribbean Dollar", 2),
    "XDR": ("Special Drawing Rights", 0),
    "YER": ("Yemeni Rial", 2),
    "ZAR": ("South African Rand", 2),
    "ZMW": ("Zambian Kwacha", 2),
    "ZWL": ("Zimbabwean Dollar", 2),
    # Precious metals and special codes
    "XAG": ("Silver (troy ounce)", 0),
    "XAU": ("Gold (troy ounce)", 0),
    "XBA": ("European Composite Unit", 0),
    "XBB": ("European Monetary Unit", 0),
    "XBC": ("European Unit of Account 9", 0),
    "XBD": ("European Unit of Account 17", 0),
    "XPD": ("Palladium (troy ounce)", 0),
    "XPT": ("Platinum (troy ounce)", 0),
    "XSU": ("Sucre", 0),
    "XTS": ("Testing Code", 0),
    "XUA": ("ADB Unit of Account", 0),
    "XXX": ("No currency", 0),
}

# Currencies whose minor unit is a fifth rather than a tenth
_BASE_FIVE = frozenset({"MGA", "MRU"})


class CurrencyRegistry:
    """Registry of ISO 4217 currencies with their base and exponent."""

    _CURRENCIES: ClassVar[dict[str, CurrencyInfo]] = {
        code: CurrencyInfo(code, exponent, name, 5 if code in _BASE_FIVE else 10)
        for code, (name, exponent) in _ISO_4217.items()
    }

    @classmethod
    def is_valid(cls, code: str) -> bool:
        """Check if a currency code is valid ISO 4217."""
        if not code or not isinstance(code, str):
            return False
        return code.upper().strip() in cls._CURRENCIES

    @classmethod
    def get_info(cls, code: str) -> CurrencyInfo | None:
        """Get currency information by code."""
        if not code or not isinstance(code, str):
            return None
        return cls._CURRENCIES.get(code.upper().strip())

    @classmethod
    def validate(cls, code: str) -> str:
        """Validate and normalize a currency code."""
        if not code or not isinstance(code, str):
            raise InvalidCurrencyError(code, "Invalid currency code")

        normalized = code.upper().strip()

        if len(normalized) != 3:
            raise InvalidCurrencyError(code, "Currency code must be 3 characters")

        if normalized not in cls._CURRENCIES:
            raise InvalidCurrencyError(code, "Invalid ISO 4217 currency code")

        return normalized

    @classmethod
    def get(cls, code: str) -> Currency:
        """Get the Currency for an ISO 4217 code."""
        return cls._CURRENCIES[cls.validate(code)].currency

    @classmethod
    def all_codes(cls) -> frozenset[str]:
        """Get all valid currency codes."""
        return frozenset(cls._CURRENCIES.keys())

    @classmethod
    def all_currencies(cls) -> dict[str, CurrencyInfo]:
        """Get all currency information."""
        return dict(cls._CURRENCIES)
