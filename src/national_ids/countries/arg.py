"""Argentina national identity document number (DNI), format only."""

import re

from national_ids.models import IdMetadata


METADATA = IdMetadata(
    iso3166_alpha2="AR",
    min_length=7,
    max_length=10,
    parsable=False,
    checksum=False,
    regexp=re.compile(r"^\d{1,2}\.?\d{3}\.?\d{3}$", re.ASCII),
    names=("Documento Nacional de Identidad", "DNI"),
    links=("https://en.wikipedia.org/wiki/Documento_Nacional_de_Identidad_(Argentina)",),
)


def validate(id_number: str) -> bool:
    if not isinstance(id_number, str) or not id_number or not id_number.isascii():
        return False
    return bool(METADATA.regexp.fullmatch(id_number))
