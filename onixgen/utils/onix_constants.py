"""ONIX 3.0 constants used across the section processors"""

# Namespaces
ONIX_30_NS = "http://ns.editeur.org/onix/3.0/reference"
ELIBRI_NS = "http://elibri.com.pl/ns/extensions"
ELIBRI_PREFIX = "elibri"
NSMAP = {None: ONIX_30_NS}
EXTENDED_NSMAP = {None: ONIX_30_NS, ELIBRI_PREFIX: ELIBRI_NS}

ONIX_RELEASE = "3.0"

# Dialects
DIALECT_301 = "3.0.1"
DIALECT_302 = "3.0.2"
SUPPORTED_DIALECTS = (DIALECT_301, DIALECT_302)
DEFAULT_DIALECT = DIALECT_301

# Header defaults
DEFAULT_SENDER_NAME = "ONIX Provider"
SENT_DATE_TIME_FORMAT = "%Y%m%dT%H%M%S"
DATESTAMP_FORMAT = "%Y%m%dT%H%M%S"

# Record level defaults
DEFAULT_NOTIFICATION_TYPE = "03"
DEFAULT_PRODUCT_COMPOSITION = "00"  # single-item retail product

# ProductIDType (list 5)
PRODUCT_ID_TYPE_PROPRIETARY = "01"
PRODUCT_ID_TYPE_EAN = "03"
PRODUCT_ID_TYPE_DOI = "06"
PRODUCT_ID_TYPE_ISBN13 = "15"
PROPRIETARY_ID_TYPE_NAME = "elibri"

# ProductForm (list 150): legacy codes still coming from the catalog that
# 3.0.1 consumers expect in their retained form
PRODUCT_FORM_301_TRANSLATIONS = {
    "DG": "EA",
    "DH": "EC",
}

# EpubUsageType / EpubUsageStatus / EpubUsageUnit (lists 145, 146, 147)
EPUB_USAGE_TYPE_PREVIEW = "01"
EPUB_USAGE_STATUS_LIMITED = "02"
EPUB_USAGE_UNIT_CHARACTERS = "02"
EPUB_USAGE_UNIT_PERCENTAGE = "05"

# MeasureType (list 48) and units (list 50)
MEASURE_TYPE_HEIGHT = "01"
MEASURE_TYPE_WIDTH = "02"
MEASURE_TYPE_THICKNESS = "03"
MEASURE_TYPE_WEIGHT = "08"
HEIGHT_UNIT = "mm"
WIDTH_UNIT = "mm"
THICKNESS_UNIT = "mm"
WEIGHT_UNIT = "gr"

# Collections and titles (lists 13, 15, 148, 149)
COLLECTION_TYPE_PUBLISHER = "10"
COLLECTION_ID_TYPE_ISSN = "02"
TITLE_TYPE_DISTINCTIVE = "01"
TITLE_TYPE_ORIGINAL = "03"
TITLE_TYPE_OTHER_LANGUAGE = "06"
TITLE_TYPE_DISTRIBUTORS = "10"
TITLE_ELEMENT_LEVEL_PRODUCT = "01"
TITLE_ELEMENT_LEVEL_COLLECTION = "02"
ENGLISH_LANGUAGE_CODE = "eng"

# Contributors (lists 17, 19)
CONTRIBUTOR_ROLE_AUTHOR = "A01"
UNNAMED_PERSONS_VARIOUS_AUTHORS = "04"

# Extent (lists 23, 24)
EXTENT_TYPE_PAGE_COUNT = "00"
EXTENT_TYPE_DURATION = "09"
EXTENT_TYPE_FILE_SIZE = "22"
EXTENT_UNIT_PAGES = "03"
EXTENT_UNIT_MINUTES = "05"
EXTENT_UNIT_MEGABYTES = "19"

# Subjects (list 26)
SUBJECT_SCHEME_KEYWORDS = "20"
SUBJECT_SCHEME_PROPRIETARY = "24"
SUBJECT_SCHEME_THEMA = "93"
# Thema qualifiers are keyed by the leading digit of the qualifier code
THEMA_QUALIFIER_SCHEMES = {
    "1": "94",  # place
    "2": "95",  # language
    "3": "96",  # time period
    "4": "97",  # educational purpose
    "5": "98",  # interest age / special interest
    "6": "99",  # style
}
KEYWORDS_SEPARATOR = "; "

# Audience (lists 30, 31)
AUDIENCE_RANGE_QUALIFIER_READING_AGE = "18"
AUDIENCE_RANGE_PRECISION_FROM = "03"
AUDIENCE_RANGE_PRECISION_TO = "04"

# Collateral (lists 154, 161)
CONTENT_AUDIENCE_UNRESTRICTED = "00"
RESOURCE_FORM_DOWNLOADABLE_FILE = "02"

# Publishing (lists 44, 45, 46, 55, 71, 163)
DEFAULT_PUBLISHER_ROLE = "01"
PUBLISHER_ID_TYPE_PROPRIETARY = "01"
PUBLISHER_ID_TYPE_NAME = "ElibriPublisherCode"
DATE_FORMAT_YYYYMMDD = "00"
DATE_FORMAT_YYYYMM = "01"
DATE_FORMAT_YYYY = "05"
PUBLISHING_DATE_ROLE_PUBLICATION = "01"
PUBLISHING_DATE_ROLE_OUT_OF_PRINT = "13"
PUBLISHING_DATE_ROLE_PREORDER_EMBARGO = "27"
SALES_RIGHTS_TYPE_EXCLUSIVE = "01"
SALES_RESTRICTION_TYPE_RETAILER_EXCLUSIVE = "04"
WORLD_REGION = "WORLD"

# Related products (list 51)
PRODUCT_RELATION_ORIGINAL_OF_FACSIMILE = "25"

# Supply (lists 58, 92, 142, 171, 173, 215)
DEFAULT_SUPPLIER_ROLE = "00"
SUPPLIER_ID_TYPE_PROPRIETARY = "02"
SUPPLIER_ID_TYPE_NAME = "NIP"
DEFAULT_PRICE_TYPE = "02"  # RRP including tax
TAX_TYPE_VAT = "01"
PRICE_DATE_ROLE_FROM = "14"
POSITION_ON_PRODUCT_UNKNOWN = "00"
DEFAULT_STOCK_PROXIMITY = "03"  # exactly

# Extension block
EXCERPT_URL_TEMPLATE = "https://www.elibri.com.pl/excerpt/{id}"
