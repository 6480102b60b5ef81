"""Country rule modules, one per supported country.

Each module is named after the ISO 3166-1 alpha-3 code of its country and
exposes ``METADATA``, ``validate`` and, where the format allows it, ``parse``
and ``checksum``. ``yugoslavia`` holds the JMBG rules shared by BIH, MKD,
MNE, SRB and SVN.

Example:
    >>> from national_ids.countries import chn
    >>> chn.validate("11010219840406970X")
    True
"""
