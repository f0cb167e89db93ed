"""ONIX 3.0 code lists used to annotate and validate generated messages.

Only the lists (and the codes within them) the section processors refer to
are carried here. The data is loaded once at import time and never mutated.
"""
import logging
from enum import Enum
from types import MappingProxyType
from typing import NamedTuple

logger = logging.getLogger(__name__)


class DictionaryEntry(NamedTuple):
    onix_code: str
    display_name: str


class CodeList(Enum):
    """Symbolic identifiers for the supported code lists.

    Values are the EDItEUR list numbers; vendor lists use a string key.
    """

    NOTIFICATION_TYPE = 1
    PRODUCT_COMPOSITION = 2
    PRODUCT_ID_TYPE = 5
    CONTRIBUTOR_ROLE = 17
    UNNAMED_PERSONS = 19
    LANGUAGE_ROLE = 22
    EXTENT_TYPE = 23
    EXTENT_UNIT = 24
    SUBJECT_SCHEME_IDENTIFIER = 26
    AUDIENCE_RANGE_QUALIFIER = 30
    MEASURE_TYPE = 48
    PRODUCT_RELATION_CODE = 51
    DATE_FORMAT = 55
    PRICE_TYPE = 58
    PUBLISHING_STATUS = 64
    PRODUCT_AVAILABILITY = 65
    SALES_RESTRICTION_TYPE = 71
    SUPPLIER_ROLE = 93
    EPUB_TECHNICAL_PROTECTION = 144
    EPUB_USAGE_STATUS = 146
    EPUB_USAGE_UNIT = 147
    PRODUCT_FORM = 150
    TEXT_TYPE = 153
    CONTENT_AUDIENCE = 154
    RESOURCE_CONTENT_TYPE = 158
    RESOURCE_MODE = 159
    PUBLISHING_DATE_ROLE = 163
    PRICE_PRINTED_ON_PRODUCT = 174
    PRODUCT_FORM_DETAIL = 175
    STOCK_PROXIMITY = 215
    COVER_TYPE = "elibri-cover-type"


CODELIST_1 = {
    '01': 'Early notification',
    '02': 'Advance notification (confirmed)',
    '03': 'Notification confirmed on publication',
    '04': 'Update (partial)',
    '05': 'Delete',
    '08': 'Notice of sale',
    '09': 'Notice of acquisition',
    '88': 'Test update (partial)',
    '89': 'Test record',
}

CODELIST_2 = {
    '00': 'Single-item retail product',
    '10': 'Multiple-item retail product',
    '20': 'Trade-only product',
    '30': 'Multiple-item trade pack',
}

CODELIST_5 = {
    '01': 'Proprietary',
    '02': 'ISBN-10',
    '03': 'GTIN-13',
    '04': 'UPC',
    '06': 'DOI',
    '13': 'LCCN',
    '14': 'GTIN-14',
    '15': 'ISBN-13',
    '17': 'Legal deposit number',
    '22': 'URN',
    '23': 'OCLC number',
}

CODELIST_17 = {
    'A01': 'By (author)',
    'A02': 'With',
    'A06': 'By (composer)',
    'A09': 'Created by',
    'A12': 'Illustrated by',
    'A13': 'Photographs by',
    'A19': 'Afterword by',
    'A23': 'Foreword by',
    'A24': 'Introduction by',
    'B01': 'Edited by',
    'B06': 'Translated by',
    'E07': 'Read by',
    'Z99': 'Other',
}

CODELIST_19 = {
    '01': 'Unknown',
    '02': 'Anonymous',
    '03': 'et al',
    '04': 'Various authors',
}

CODELIST_22 = {
    '01': 'Language of text',
    '02': 'Original language of a translated text',
    '03': 'Language of abstracts',
    '06': 'Original language in a multilingual edition',
    '07': 'Translated language in a multilingual edition',
    '08': 'Language of audio track',
    '09': 'Language of subtitles',
}

CODELIST_23 = {
    '00': 'Main content page count',
    '09': 'Duration',
    '22': 'Filesize',
}

CODELIST_24 = {
    '03': 'Pages',
    '05': 'Minutes',
    '19': 'Mbytes',
}

CODELIST_26 = {
    '20': 'Keywords',
    '24': 'Proprietary subject scheme',
    '93': 'Thema subject category',
    '94': 'Thema place qualifier',
    '95': 'Thema language qualifier',
    '96': 'Thema time period qualifier',
    '97': 'Thema educational purpose qualifier',
    '98': 'Thema interest age / special interest qualifier',
    '99': 'Thema style qualifier',
}

CODELIST_30 = {
    '17': 'Interest age, years',
    '18': 'Reading age, years',
}

CODELIST_48 = {
    '01': 'Height',
    '02': 'Width',
    '03': 'Thickness',
    '08': 'Unit weight',
}

CODELIST_51 = {
    '02': 'Is part of',
    '06': 'Alternative format',
    '13': 'Epublication based on (print product)',
    '24': 'Is facsimile of',
    '25': 'Is original of facsimile',
    '27': 'Electronic version available as',
}

CODELIST_55 = {
    '00': 'YYYYMMDD',
    '01': 'YYYYMM',
    '02': 'YYYYWW',
    '03': 'YYYYQ',
    '04': 'YYYYS',
    '05': 'YYYY',
}

CODELIST_58 = {
    '01': 'RRP excluding tax',
    '02': 'RRP including tax',
    '03': 'Fixed retail price excluding tax',
    '04': 'Fixed retail price including tax',
    '05': "Supplier's net price excluding tax",
    '07': "Supplier's net price including tax",
}

CODELIST_64 = {
    '00': 'Unspecified',
    '01': 'Cancelled',
    '02': 'Forthcoming',
    '03': 'Postponed indefinitely',
    '04': 'Active',
    '05': 'No longer our product',
    '06': 'Out of stock indefinitely',
    '07': 'Out of print',
    '08': 'Inactive',
    '09': 'Unknown',
    '10': 'Remaindered',
    '11': 'Withdrawn from sale',
    '12': 'Recalled',
}

CODELIST_65 = {
    '01': 'Cancelled',
    '10': 'Not yet available',
    '11': 'Awaiting stock',
    '20': 'Available',
    '21': 'In stock',
    '22': 'To order',
    '23': 'POD',
    '30': 'Temporarily unavailable',
    '31': 'Out of stock',
    '32': 'Reprinting',
    '40': 'Not available (reason unspecified)',
    '43': 'No longer supplied by us',
    '99': 'Contact supplier',
}

CODELIST_71 = {
    '00': 'Unspecified',
    '04': 'Retailer exclusive',
    '05': 'Retailer own brand',
}

CODELIST_93 = {
    '00': 'Unspecified',
    '01': 'Publisher to resellers',
    '02': "Publisher's exclusive distributor to resellers",
    '03': "Publisher's non-exclusive distributor to resellers",
    '04': 'Wholesaler',
    '05': 'Sales agent',
    '06': "Publisher's distributor to retailers",
    '07': 'POD supplier',
    '08': 'Retailer',
    '09': 'Publisher to end-customers',
}

CODELIST_144 = {
    '00': 'None',
    '01': 'DRM',
    '02': 'Digital watermarking',
    '03': 'Adobe DRM',
    '04': 'Apple DRM',
    '05': 'OMA DRM',
    '06': 'Readium LCP DRM',
}

CODELIST_146 = {
    '01': 'Permitted unlimited',
    '02': 'Permitted subject to limit',
    '03': 'Prohibited',
}

CODELIST_147 = {
    '01': 'Copies',
    '02': 'Characters',
    '03': 'Words',
    '04': 'Pages',
    '05': 'Percentage',
}

CODELIST_150 = {
    'AA': 'Audio',
    'AC': 'CD-Audio',
    'AJ': 'Downloadable audio file',
    'BA': 'Book',
    'BB': 'Hardback',
    'BC': 'Paperback / softback',
    'BE': 'Spiral bound',
    'BH': 'Board book',
    'BZ': 'Other book format',
    'CA': 'Sheet map',
    'CB': 'Sheet map, folded',
    'CZ': 'Other cartographic',
    'DG': 'Electronic book text',
    'DH': 'Online resource',
    'EA': 'Digital (delivered electronically)',
    'EB': 'Digital download and online',
    'EC': 'Digital online',
    'ED': 'Digital download',
    'PC': 'Calendar',
    'ZE': 'Game',
    'ZZ': 'Other',
}

CODELIST_153 = {
    '01': 'Sender-defined text',
    '02': 'Short description/annotation',
    '03': 'Description',
    '04': 'Table of contents',
    '05': 'Primary cover copy',
    '06': 'Review quote',
    '09': 'Endorsement',
    '12': 'Biographical note',
    '14': 'Excerpt',
}

CODELIST_154 = {
    '00': 'Unrestricted',
    '01': 'Restricted',
    '02': 'Booktrade',
    '03': 'End-customers',
}

CODELIST_158 = {
    '01': 'Front cover',
    '02': 'Back cover',
    '03': 'Cover / pack',
    '04': 'Contributor picture',
    '07': 'Product image / artwork',
    '15': 'Sample content',
    '17': 'Review',
    '26': 'Trailer',
}

CODELIST_159 = {
    '01': 'Application',
    '02': 'Audio',
    '03': 'Image',
    '04': 'Text',
    '05': 'Video',
    '06': 'Multi-mode',
}

CODELIST_163 = {
    '01': 'Publication date',
    '02': 'Sales embargo date',
    '11': 'Date of first publication',
    '13': 'Out-of-print / permanently withdrawn date',
    '27': 'Preorder embargo date',
}

CODELIST_174 = {
    '01': 'No',
    '02': 'Yes',
}

CODELIST_175 = {
    'A103': 'MP3 format',
    'E101': 'EPUB',
    'E107': 'PDF',
    'E116': 'Amazon Kindle',
    'E127': 'Mobipocket',
    'E200': 'Reflowable',
    'E201': 'Fixed format',
}

CODELIST_215 = {
    '01': 'Less than',
    '02': 'Not more than',
    '03': 'Exactly',
    '04': 'Approximately',
    '05': 'About',
    '06': 'Not less than',
    '07': 'More than',
}

# Vendor list: cover names are exported verbatim, codes are their own names
COVER_TYPES = (
    'foam',
    'cardboard',
    'laminated cardboard',
    'soft',
    'soft with flaps',
    'plastic',
    'leather',
    'hard',
    'hard with dust jacket',
    'hard lacquered',
)

_REGISTRY = {
    CodeList.NOTIFICATION_TYPE: CODELIST_1,
    CodeList.PRODUCT_COMPOSITION: CODELIST_2,
    CodeList.PRODUCT_ID_TYPE: CODELIST_5,
    CodeList.CONTRIBUTOR_ROLE: CODELIST_17,
    CodeList.UNNAMED_PERSONS: CODELIST_19,
    CodeList.LANGUAGE_ROLE: CODELIST_22,
    CodeList.EXTENT_TYPE: CODELIST_23,
    CodeList.EXTENT_UNIT: CODELIST_24,
    CodeList.SUBJECT_SCHEME_IDENTIFIER: CODELIST_26,
    CodeList.AUDIENCE_RANGE_QUALIFIER: CODELIST_30,
    CodeList.MEASURE_TYPE: CODELIST_48,
    CodeList.PRODUCT_RELATION_CODE: CODELIST_51,
    CodeList.DATE_FORMAT: CODELIST_55,
    CodeList.PRICE_TYPE: CODELIST_58,
    CodeList.PUBLISHING_STATUS: CODELIST_64,
    CodeList.PRODUCT_AVAILABILITY: CODELIST_65,
    CodeList.SALES_RESTRICTION_TYPE: CODELIST_71,
    CodeList.SUPPLIER_ROLE: CODELIST_93,
    CodeList.EPUB_TECHNICAL_PROTECTION: CODELIST_144,
    CodeList.EPUB_USAGE_STATUS: CODELIST_146,
    CodeList.EPUB_USAGE_UNIT: CODELIST_147,
    CodeList.PRODUCT_FORM: CODELIST_150,
    CodeList.TEXT_TYPE: CODELIST_153,
    CodeList.CONTENT_AUDIENCE: CODELIST_154,
    CodeList.RESOURCE_CONTENT_TYPE: CODELIST_158,
    CodeList.RESOURCE_MODE: CODELIST_159,
    CodeList.PUBLISHING_DATE_ROLE: CODELIST_163,
    CodeList.PRICE_PRINTED_ON_PRODUCT: CODELIST_174,
    CodeList.PRODUCT_FORM_DETAIL: CODELIST_175,
    CodeList.STOCK_PROXIMITY: CODELIST_215,
    CodeList.COVER_TYPE: {name: name for name in COVER_TYPES},
}

_ENTRIES = MappingProxyType({
    list_id: tuple(DictionaryEntry(code, name) for code, name in codes.items())
    for list_id, codes in _REGISTRY.items()
})

# Fail at import time, not at render time, if a list was left unregistered
_missing = [list_id.name for list_id in CodeList if list_id not in _ENTRIES]
if _missing:
    raise RuntimeError(f"Code lists without entries: {', '.join(_missing)}")


def lookup(list_id: CodeList) -> tuple[DictionaryEntry, ...]:
    """Return the ordered (code, name) entries of a code list"""
    return _ENTRIES[list_id]


def describe(list_id: CodeList, code) -> str | None:
    """Return the display name for a code, or None when it is unknown"""
    if code is None:
        return None
    return _REGISTRY[list_id].get(str(code))


def is_valid_code(list_id: CodeList, code) -> bool:
    return describe(list_id, code) is not None


def find_list(name: str) -> CodeList | None:
    """Resolve a list by symbolic name (``product_form``) or list number (``150``)"""
    key = str(name).strip()
    for list_id in CodeList:
        if list_id.name.lower() == key.lower() or str(list_id.value) == key:
            return list_id
    return None
