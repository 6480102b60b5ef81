"""
Country Registry

Immutable table of supported countries: catalog name, identifier name,
human-readable format and the module implementing the rules, plus the
built-in country-code aliases.
"""

from dataclasses import dataclass
from types import MappingProxyType, ModuleType
from typing import Any, Callable, Mapping, Optional

from national_ids.countries import (
    alb, are, arg, aus, aut, bel, bgd, bgr, bhr, bih, bra, can, che, chl, chn, col,
    cyp, cze, deu, dnk, esp, est, fin, fra, gbr, geo, grc, hkg, hrv, hun, idn, ind,
    irl, irn, irq, isl, isr, ita, jpn, kaz, kor, kwt, lka, ltu, lux, lva, mac, mda,
    mex, mkd, mne, mys, nga, nld, nor, npl, nzl, pak, phl, png, pol, prt, rou, rus,
    sau, sgp, smr, srb, svk, svn, swe, tha, tur, twn, ukr, usa, ven, vnm, zaf, zwe,
)
from national_ids.models import IdMetadata


@dataclass(frozen=True)
class CountryHandler:
    """Everything the dispatch layer needs to know about one country."""

    code: str
    name: str
    id_type: str
    format: str
    module: ModuleType

    @property
    def metadata(self) -> IdMetadata:
        return self.module.METADATA

    @property
    def validate(self) -> Callable[[str], bool]:
        return self.module.validate

    @property
    def parse(self) -> Optional[Callable[[str], Optional[dict[str, Any]]]]:
        return getattr(self.module, "parse", None)

    @property
    def checksum(self) -> Optional[Callable[[str], Any]]:
        return getattr(self.module, "checksum", None)


_HANDLERS = (
    CountryHandler("USA", "United States", "Social Security Number", "XXX-XX-XXXX", usa),
    CountryHandler("AUS", "Australia", "Medicare Number", "XXXX XXXXX X X", aus),
    CountryHandler("ZAF", "South Africa", "National ID Number", "YYMMDDSSSSCAZ", zaf),
    CountryHandler("GBR", "United Kingdom", "National Insurance Number", "AA999999A", gbr),
    CountryHandler("CAN", "Canada", "Social Insurance Number", "XXX-XXX-XXX", can),
    CountryHandler("DEU", "Germany", "Tax Identification Number", "XXXXXXXXXXX", deu),
    CountryHandler("FRA", "France", "Social Security Number", "SYYMMDDDCCCKKK", fra),
    CountryHandler("NLD", "Netherlands", "Burgerservicenummer (BSN)", "XXXXXXXXX", nld),
    CountryHandler("ALB", "Albania", "Identity Number", "YYMMDDSSSC", alb),
    CountryHandler("AUT", "Austria", "Tax Identification Number", "XX-XXX/XXXX", aut),
    CountryHandler("BEL", "Belgium", "National Registration Number", "YY.MM.DD-SSS.CC", bel),
    CountryHandler("ITA", "Italy", "Fiscal Code", "AAAAAA99A99A999A", ita),
    CountryHandler("ESP", "Spain", "DNI", "99999999A", esp),
    CountryHandler("DNK", "Denmark", "Personal Identity Number", "DDMMYY-SSSS", dnk),
    CountryHandler("POL", "Poland", "PESEL", "YYMMDDSSSSC", pol),
    CountryHandler("CZE", "Czech Republic", "Birth Number", "YYMMDD/SSSC", cze),
    CountryHandler("FIN", "Finland", "Personal Identity Code", "DDMMYYCZZZQ", fin),
    CountryHandler("ISL", "Iceland", "kennitala", "DDMMYY-SSCD", isl),
    CountryHandler("LTU", "Lithuania", "Personal Code", "GYYMMDDSSSC", ltu),
    CountryHandler("LUX", "Luxembourg", "National Identification Number", "YYYYMMDDSSSCC", lux),
    CountryHandler("SVK", "Slovakia", "Birth Number", "YYMMDD/SSSC", svk),
    CountryHandler("ARE", "United Arab Emirates", "Emirates ID", "784-YYYY-XXXXXXX-C", are),
    CountryHandler("ARG", "Argentina", "DNI", "XX.XXX.XXX", arg),
    CountryHandler("BGR", "Bulgaria", "Uniform Civil Number", "YYMMDDSSSC", bgr),
    CountryHandler("BRA", "Brazil", "CPF Number", "XXX.XXX.XXX-XX or XX.XXX.XXX-X", bra),
    CountryHandler("CHE", "Switzerland", "Social Security Number", "756.XXXX.XXXX.XX", che),
    CountryHandler("CHL", "Chile", "RUN/RUT", "XX.XXX.XXX-X", chl),
    CountryHandler("CHN", "China", "Resident Identity Number", "RRRRRRYYYYMMDDSSSC", chn),
    CountryHandler("COL", "Colombia", "Unique Personal ID", "XX.XXX.XXX-X", col),
    CountryHandler("EST", "Estonia", "Personal ID Number", "GYYMMDDSSSC", est),
    CountryHandler("GRC", "Greece", "Tax Identity Number", "XXXXXXXXX or AA-999999", grc),
    CountryHandler("HUN", "Hungary", "Personal ID Number", "GYYMMDDSSSC", hun),
    CountryHandler("IRL", "Ireland", "Personal Public Service Number", "9999999A(A)", irl),
    CountryHandler("LVA", "Latvia", "Personal Code", "DDMMYY-CSSSS", lva),
    CountryHandler("BGD", "Bangladesh", "National ID", "13 or 17 digits", bgd),
    CountryHandler("BHR", "Bahrain", "Personal Number", "YYMMSSSSC", bhr),
    CountryHandler(
        "BIH", "Bosnia and Herzegovina", "Unique Master Citizen Number", "DDMMYYYRRSSSC", bih
    ),
    CountryHandler("CYP", "Cyprus", "Tax Number", "99999999L", cyp),
    CountryHandler("GEO", "Georgia", "Personal Number", "XXXXXXXXXXX", geo),
    CountryHandler("HKG", "Hong Kong", "National ID Number", "X999999(A)", hkg),
    CountryHandler("HRV", "Croatia", "Personal ID Number", "XXXXXXXXXXX", hrv),
    CountryHandler("IND", "India", "Aadhaar (UID)", "XXXX XXXX XXXX", ind),
    CountryHandler("JPN", "Japan", "My Number", "XXXXXXXXXXXX", jpn),
    CountryHandler(
        "KAZ", "Kazakhstan", "Individual Identification Number", "YYMMDDCSSSSK", kaz
    ),
    CountryHandler("KWT", "Kuwait", "Civil Number", "CYYMMDDSSSSK", kwt),
    CountryHandler("IDN", "Indonesia", "National ID Number", "DDMMYYPPPPSSSS", idn),
    CountryHandler("KOR", "South Korea", "Resident Registration Number", "YYMMDD-GSSSSSS", kor),
    CountryHandler("MEX", "Mexico", "CURP", "AAAANNNNNNAAAAAANN", mex),
    CountryHandler("LKA", "Sri Lanka", "National ID Number", "YYYYDDDSSSSC", lka),
    CountryHandler("NGA", "Nigeria", "National Identification Number", "XXXXXXXXXXX", nga),
    CountryHandler("MYS", "Malaysia", "NRIC", "YYMMDD-PB-###G", mys),
    CountryHandler("NOR", "Norway", "National Identity Number", "DDMMYYIIIKK", nor),
    CountryHandler("PAK", "Pakistan", "National Identity Card", "#####-#######-#", pak),
    CountryHandler(
        "THA", "Thailand", "National Identity Card Number", "#-####-#####-##-#", tha
    ),
    CountryHandler("VNM", "Vietnam", "Citizen Identity Card Number", "9 or 12 digits", vnm),
    CountryHandler("NZL", "New Zealand", "IRD Number", "XX-XXX-XXX", nzl),
    CountryHandler("PHL", "Philippines", "PhilSys Number", "XXXX-XXXXXXX-X", phl),
    CountryHandler("PRT", "Portugal", "Citizen Card", "99999999 9 AA9 or 999999999", prt),
    CountryHandler("ROU", "Romania", "Personal Numeric Code", "SYYMMDDJJNNNC", rou),
    CountryHandler("RUS", "Russia", "Internal Passport", "SSSS NNNNNN", rus),
    CountryHandler("SAU", "Saudi Arabia", "National ID", "XXXXXXXXXX", sau),
    CountryHandler("SGP", "Singapore", "NRIC/FIN", "A9999999A", sgp),
    CountryHandler("SWE", "Sweden", "Personal Identity Number", "YYMMDD-NNNC", swe),
    CountryHandler("TUR", "Turkey", "National ID Number", "XXXXXXXXXXX", tur),
    CountryHandler("UKR", "Ukraine", "Individual Tax Number", "XXXXXXXXXX or XXXXXXXX", ukr),
    CountryHandler("SVN", "Slovenia", "EMSO", "DDMMYYYRRSSSC", svn),
    CountryHandler("SRB", "Serbia", "JMBG", "DDMMYYYRRSSSC", srb),
    CountryHandler("TWN", "Taiwan", "National Identification Card", "X#########", twn),
    CountryHandler("VEN", "Venezuela", "Cedula de Identidad", "V-######## or E-########", ven),
    CountryHandler(
        "MKD", "North Macedonia", "Unique Master Citizen Number (JMBG)", "DDMMYYYRRSSSC", mkd
    ),
    CountryHandler(
        "MNE", "Montenegro", "Unique Master Citizen Number (JMBG)", "DDMMYYYRRSSSC", mne
    ),
    CountryHandler("ZWE", "Zimbabwe", "National ID Number", "99-999999-A-99", zwe),
    CountryHandler("IRN", "Iran", "National ID Number", "XXXXXXXXXX", irn),
    CountryHandler("IRQ", "Iraq", "National Card Number", "XXXXXXXXXXXX", irq),
    CountryHandler("ISR", "Israel", "Identity Number", "XXXXXXXXX", isr),
    CountryHandler("MAC", "Macau", "Resident Identity Card", "X999999(X)", mac),
    CountryHandler("MDA", "Moldova", "Personal Code (IDNP)", "XXXXXXXXXXXXX", mda),
    CountryHandler("NPL", "Nepal", "National ID Number", "XXXXXXXXXXX", npl),
    CountryHandler("PNG", "Papua New Guinea", "National ID Number", "XXXXXXXXXX", png),
    CountryHandler(
        "SMR",
        "San Marino",
        "Social Security Number / Tax Registration",
        "999999999 or SM99999",
        smr,
    ),
)

# Canonical alpha-3 code -> handler, in catalog order
COUNTRIES: Mapping[str, CountryHandler] = MappingProxyType(
    {handler.code: handler for handler in _HANDLERS}
)

# Alpha-2 codes of every supported country, plus common non-ISO spellings
ALIASES: Mapping[str, str] = MappingProxyType(
    {
        **{handler.metadata.iso3166_alpha2: handler.code for handler in _HANDLERS},
        "UK": "GBR",
    }
)


def get_handler(code: str) -> Optional[CountryHandler]:
    """Look up a handler by canonical code or built-in alias.

    Args:
        code: Country code, already upper-cased and stripped.

    Returns:
        The handler, or None if the code is not supported.
    """
    return COUNTRIES.get(ALIASES.get(code, code))
