"""Pytest fixtures and configuration."""

from pathlib import Path

import pytest

from national_ids.core.dispatch import NationalIdValidator


@pytest.fixture
def validator():
    """Validator with only the built-in aliases."""
    return NationalIdValidator()


@pytest.fixture
def write_yaml(tmp_path):
    """Write YAML content to a temporary file and return its path."""

    def _write(content: str, name: str = "aliases.yaml") -> Path:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def valid_ids():
    """One valid identifier per country, keyed by canonical code."""
    # Test numbers with valid checksums, not assigned to real people
    return {
        "ALB": "J50101001A",
        "ARE": "784-1980-1234567-8",
        "ARG": "12.345.678",
        "AUS": "2123456701",
        "AUT": "1237010180",
        "BEL": "93051822361",
        "BGD": "1592824588424",
        "BGR": "7523169263",
        "BHR": "800101001",
        "BIH": "0101990150002",
        "BRA": "111.444.777-35",
        "CAN": "123456782",
        "CHE": "7561234567897",
        "CHL": "12.345.678-5",
        "CHN": "11010219840406970X",
        "COL": "12.345.678-8",
        "CYP": "10259033P",
        "CZE": "7103192745",
        "DEU": "36574261809",
        "DNK": "070761-4285",
        "ESP": "12345678Z",
        "EST": "37605030299",
        "FIN": "131052-308T",
        "FRA": "255081416802538",
        "GBR": "AB123456C",
        "GEO": "12345678901",
        "GRC": "094259216",
        "HKG": "A123456(3)",
        "HRV": "69435151530",
        "HUN": "18001010016",
        "IDN": "3201011001900002",
        "IND": "234123412346",
        "IRL": "1234567T",
        "IRN": "0012345679",
        "IRQ": "123456789012",
        "ISL": "120174-3399",
        "ISR": "000000018",
        "ITA": "RSSMRA85T10A562S",
        "JPN": "123456789018",
        "KAZ": "900101300007",
        "KOR": "800101-1234567",
        "KWT": "280010100004",
        "LKA": "853400937V",
        "LTU": "38001011812",
        "LUX": "1893120105732",
        "LVA": "161175-19997",
        "MAC": "1234567(8)",
        "MDA": "2002000000008",
        "MEX": "HEGG560427MVZRRL04",
        "MKD": "0101990410004",
        "MNE": "0101990210005",
        "MYS": "800101-01-1234",
        "NGA": "12345678901",
        "NLD": "111222333",
        "NOR": "01018012371",
        "NPL": "12345678901",
        "NZL": "49091850",
        "PAK": "12345-1234567-1",
        "PHL": "123456789012",
        "PNG": "1234567890",
        "POL": "44051401458",
        "PRT": "000000000ZZ4",
        "ROU": "1800101123450",
        "RUS": "1234567890",
        "SAU": "1000000008",
        "SGP": "S1234567D",
        "SMR": "123456789",
        "SRB": "0101990710008",
        "SVK": "7103192745",
        "SVN": "0101006500006",
        "SWE": "811218-9876",
        "THA": "3100600123450",
        "TUR": "10000000146",
        "TWN": "A123456789",
        "UKR": "2922001236",
        "USA": "123-45-6789",
        "VEN": "V-12345678",
        "VNM": "001089000123",
        "ZAF": "8001015009087",
        "ZWE": "63123456B63",
    }
