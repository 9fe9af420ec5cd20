"""
Field extraction from validated national identity numbers.

Each modeled country has a decoder that re-matches the number against the
country's registry patterns and interprets the captured groups:
- ZA: date of birth, century, age, gender, sequence, citizenship, parity
- CA: registration region and citizenship category
- UK: sequence digits
- US: serial number

Birth dates embedded as YYMMDD are resolved with a rolling 100 year window:
a two digit year below the current two digit year is read as 20xx, anything
else as 19xx. Birth years more than a century ago, or at or above the current
two digit year in the 2000s, are misread as 1900s.
"""

from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Callable, Dict, List, Optional, Tuple

from ident_engine.data.patterns import CountryCode, IdentifierType, get_patterns


class Citizenship(Enum):
    """Citizen status encoded in an identity number."""
    CITIZEN = "Citizen"
    PERMANENT_RESIDENT = "Permanent Resident"
    TEMPORARY_RESIDENT = "Temporary Resident"
    OTHER = "Other"


class Gender(Enum):
    MALE = "Male"
    FEMALE = "Female"
    UNKNOWN = "Unknown"


RACE_UNKNOWN = "Unknown"


@dataclass
class ParsedMetadata:
    """
    Information encoded in an identity number.

    Every field is optional, which ones are set depends on the country.
    """
    age: Optional[int] = None                # Current age when a birth date is encoded
    area: Optional[str] = None               # Region where the number was registered
    century: Optional[int] = None            # 1900 or 2000
    citizenship: Optional[Citizenship] = None
    date_of_birth: Optional[str] = None      # Extended ISO 8601, YYYY-MM-DD
    gender: Optional[Gender] = None
    parity: Optional[int] = None             # Check digit as printed in the number
    race: Optional[str] = None               # Retained for compatibility, always "Unknown"
    sequence: Optional[int] = None           # Disambiguates same day/region registrations

    def to_dict(self) -> Dict[str, object]:
        """Serialize the fields that are set, with camelCase keys."""
        fields = {
            "age": self.age,
            "area": self.area,
            "century": self.century,
            "citizenship": self.citizenship.value if self.citizenship else None,
            "dateOfBirth": self.date_of_birth,
            "gender": self.gender.value if self.gender else None,
            "parity": self.parity,
            "race": self.race,
            "sequence": self.sequence,
        }
        return {key: value for key, value in fields.items() if value is not None}


# =============================================================================
# DATE HELPERS
# =============================================================================

def parse_short_date(short_date: str, today: Optional[date] = None) -> str:
    """
    Convert a YYMMDD fragment to an Extended ISO 8601 date string.

    Args:
        short_date: Six digits, YYMMDD
        today: Reference date for the century window (default: today)

    Returns:
        Date string YYYY-MM-DD
    """
    today = today or date.today()
    decade_year = today.year % 100

    yy = int(short_date[0:2])
    mm = short_date[2:4]
    dd = short_date[4:6]

    full_year = (2000 if yy < decade_year else 1900) + yy
    return f"{full_year:04d}-{mm}-{dd}"


def get_age(date_of_birth: str, today: Optional[date] = None) -> int:
    """
    Age in whole years for a YYYY-MM-DD date of birth.

    Compares month and day numerically, so dates the patterns accept but
    the calendar does not (e.g. 02-31) still produce an age.
    """
    today = today or date.today()
    year, month, day = (int(part) for part in date_of_birth.split("-"))

    age = today.year - year
    # Birthday hasn't occurred yet this year
    if (today.month, today.day) < (month, day):
        age -= 1
    return age


# =============================================================================
# COUNTRY DECODERS
# =============================================================================

def _match(identity_number: str, country: CountryCode):
    for pattern in get_patterns(country, IdentifierType.NATIONAL_IDENTITY):
        match = pattern.fullmatch(identity_number)
        if match:
            return match
    return None


def parse_za(identity_number: str, today: Optional[date] = None) -> Optional[ParsedMetadata]:
    """
    Parse a South African identity number.

    Format: YYMMDD SSSS C A Z
    - SSSS below 5000 is female, 5000 and above male
    - C is 0 for citizens, anything else permanent residents
    - A was historically a race indicator and carries no meaning today
    - Z is the Luhn check digit
    """
    match = _match(identity_number, CountryCode.ZA)
    if not match:
        return None

    date_of_birth = parse_short_date(match.group("year") + match.group("month") + match.group("day"), today)
    sequence = int(match.group("sequence"))

    return ParsedMetadata(
        age=get_age(date_of_birth, today),
        century=1900 if date_of_birth.startswith("19") else 2000,
        citizenship=Citizenship.CITIZEN if int(match.group("citizenship")) == 0 else Citizenship.PERMANENT_RESIDENT,
        date_of_birth=date_of_birth,
        gender=Gender.FEMALE if sequence < 5000 else Gender.MALE,
        parity=int(match.group("checksum")),
        race=RACE_UNKNOWN,
        sequence=sequence,
    )


# First digit of a Canadian SIN -> (registration area, citizenship)
CA_REGIONS: Dict[int, Tuple[str, Citizenship]] = {
    1: ("NS, NB, PE, NL", Citizenship.CITIZEN),
    2: ("QC", Citizenship.CITIZEN),
    3: ("QC", Citizenship.CITIZEN),
    4: ("ON", Citizenship.CITIZEN),
    5: ("ON", Citizenship.CITIZEN),
    6: ("NW ON, MB, SK, AB, NT, NU", Citizenship.CITIZEN),
    7: ("BC, YT", Citizenship.CITIZEN),
    8: ("BN", Citizenship.OTHER),                                       # Business Number
    9: ("Temporary Resident", Citizenship.TEMPORARY_RESIDENT),
}

CA_DEFAULT_REGION = ("Tax Number", Citizenship.OTHER)


def parse_ca(identity_number: str, today: Optional[date] = None) -> Optional[ParsedMetadata]:
    """Parse a Canadian Social Insurance Number."""
    match = _match(identity_number, CountryCode.CA)
    if not match:
        return None

    area, citizenship = CA_REGIONS.get(int(match.group("region")), CA_DEFAULT_REGION)
    return ParsedMetadata(area=area, citizenship=citizenship)


def parse_uk(identity_number: str, today: Optional[date] = None) -> Optional[ParsedMetadata]:
    """Parse a UK National Insurance Number."""
    match = _match(identity_number, CountryCode.UK)
    if not match:
        return None
    return ParsedMetadata(sequence=int(match.group("first") + match.group("second") + match.group("third")))


def parse_us(identity_number: str, today: Optional[date] = None) -> Optional[ParsedMetadata]:
    """Parse a US Social Security Number."""
    match = _match(identity_number, CountryCode.US)
    if not match:
        return None
    return ParsedMetadata(sequence=int(match.group("serial")))


COUNTRY_PARSERS: Dict[CountryCode, Callable[..., Optional[ParsedMetadata]]] = {
    CountryCode.ZA: parse_za,
    CountryCode.UK: parse_uk,
    CountryCode.US: parse_us,
    CountryCode.CA: parse_ca,
}


def parse_identity_number_for_country(
    identity_number: str,
    country_codes: List[CountryCode],
    today: Optional[date] = None
) -> Optional[ParsedMetadata]:
    """
    Extract metadata for the first of the matched countries.

    Only the first entry is parsed; when a number is ambiguous across
    countries the other interpretations are not attempted.

    Args:
        identity_number: A number already validated for the countries
        country_codes: Matched countries, in sweep order
        today: Reference date for age and century (default: today)

    Returns:
        ParsedMetadata, or None if nothing could be parsed
    """
    if not identity_number or not country_codes:
        return None

    parser = COUNTRY_PARSERS.get(CountryCode.from_string(country_codes[0]))
    if parser is None:
        return None
    return parser(identity_number, today)
