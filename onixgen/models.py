"""Product records consumed by the ONIX generator.

Every field except ``record_reference`` is optional. Processors decide
whether a field is exportable with ``onix_utils.is_present`` (not None and,
for strings, not blank after trimming), so a product never needs to declare
which capabilities it supports.
"""

from datetime import date, datetime
from decimal import Decimal
from enum import Enum

from pydantic import BaseModel, ConfigDict, field_validator, model_validator


class _Record(BaseModel):
    model_config = ConfigDict(frozen=True)


class AuthorshipKind(str, Enum):
    USER_GIVEN = "user_given"
    COLLECTIVE = "collective"
    NO_CONTRIBUTOR = "no_contributor"


class ProductKind(str, Enum):
    BOOK = "book"
    EBOOK = "ebook"
    AUDIOBOOK = "audiobook"
    MAP = "map"
    BOARD_GAME = "board_game"
    OTHER = "other"


class Contributor(_Record):
    """A person credited on the product.

    Attributes:
        role_onix_code: ContributorRole (list 17)
        full_name: display name; generated from name parts when missing
        name: first name (NamesBeforeKey)
        last_name: KeyNames
        title: academic or honorific title (TitlesBeforeNames)
        last_name_prefix: "von", "van" (PrefixToKey)
        last_name_postfix: NamesAfterKey
        language_onix_code: source language, translators only
        biography: BiographicalNote
    """

    id: int | str | None = None
    role_onix_code: str | None = None
    full_name: str | None = None
    name: str | None = None
    last_name: str | None = None
    title: str | None = None
    last_name_prefix: str | None = None
    last_name_postfix: str | None = None
    language_onix_code: str | None = None
    biography: str | None = None
    updated_at: datetime | None = None

    @property
    def generated_full_name(self) -> str:
        if self.full_name and self.full_name.strip():
            return self.full_name.strip()
        return f"{self.name or ''} {self.last_name or ''}".strip()


class ExternalIdentifier(_Record):
    type_name: str
    value: str


class SeriesMembership(_Record):
    series_name: str
    number_within_series: str | None = None
    issn: str | None = None


class Language(_Record):
    role_onix_code: str
    language_onix_code: str


class ProductCategory(_Record):
    id: int | str
    name: str


class OtherText(_Record):
    id: int | str | None = None
    type_onix_code: str | None = None
    text: str | None = None
    exportable: bool = True
    is_review: bool = False
    resource_link: str | None = None
    text_author: str | None = None
    source_title: str | None = None
    updated_at: datetime | None = None


class Attachment(_Record):
    id: int | str | None = None
    attachment_type_code: str | None = None
    onix_resource_mode: str | None = None
    url: str
    updated_at: datetime | None = None


class StoredFile(_Record):
    """An excerpt or master file kept for a digital product"""

    id: int | str
    file_md5: str | None = None
    file_size: int | None = None
    file_type: str | None = None
    updated_at: datetime | None = None


class Supplier(_Record):
    name: str
    nip: str | None = None
    phone: str | None = None
    email: str | None = None
    websites: list[str] = []


class StockInfo(_Record):
    on_hand: int
    proximity_onix_code: str | None = None


class PriceInfo(_Record):
    amount: Decimal
    currency_code: str = "PLN"
    vat: Decimal | int | None = None
    price_type_onix_code: str | None = None
    minimum_order_quantity: int | None = None
    effective_from: date | None = None


class ProductAvailability(_Record):
    supplier: Supplier
    supplier_identifier: str | None = None
    supplier_role_onix_code: str | None = None
    product_availability_onix_code: str | None = None
    stock_info: StockInfo | None = None
    price_infos: list[PriceInfo] = []


class Product(_Record):
    """Read-only product record.

    Only ``record_reference`` is required. ``public`` marks records eligible
    for export; non-public products are skipped by the generator.
    """

    record_reference: str
    public: bool = True

    # Identifiers
    notification_type_onix_code: str | None = None
    deletion_text: str | None = None
    isbn_value: str | None = None
    hyphenated_isbn: str | None = None
    ean: str | None = None
    doi: str | None = None
    external_identifier: ExternalIdentifier | None = None

    # Form
    product_kind: ProductKind | None = None
    digital: bool = False
    product_form_onix_code: str | None = None
    product_form_detail_onix_codes: list[str] = []
    product_form_onix_code_302: str | None = None
    product_form_detail_onix_code_302: str | None = None

    # E-book details
    epub_technical_protection_onix_code: str | None = None
    epub_preview_usage_status_onix_code: str | None = None
    epub_preview_unit_onix_code: str | None = None
    epub_preview_percentage_limit: int | None = None
    epub_preview_characters_limit: int | None = None
    epub_sale_not_restricted: bool = False
    epub_sale_restricted_to: date | None = None

    # Measurements
    height: int | Decimal | None = None
    width: int | Decimal | None = None
    thickness: int | Decimal | None = None
    weight: int | Decimal | None = None
    map_scale: int | None = None

    # Titles and series
    title: str | None = None
    subtitle: str | None = None
    title_part: str | None = None
    collection_name: str | None = None
    collection_part: str | None = None
    english_title: str | None = None
    original_title: str | None = None
    trade_title: str | None = None
    series_memberships: list[SeriesMembership] = []

    # Contributors
    authorship_kind: AuthorshipKind
    contributors: list[Contributor] = []

    edition_statement: str | None = None
    languages: list[Language] = []

    # Extent
    file_size: int | Decimal | None = None
    duration: int | None = None
    number_of_pages: int | None = None
    number_of_illustrations: int | None = None

    # Subjects
    thema_codes: list[str] = []
    publisher_product_categories: list[ProductCategory] = []
    keywords: dict[str, list[str]] = {}

    audience_age_from: int | None = None
    audience_age_to: int | None = None

    # Collateral
    other_texts: list[OtherText] = []
    attachments: list[Attachment] = []

    # Publishing
    publisher_name: str | None = None
    publisher_id: int | str | None = None
    imprint_name: str | None = None
    city_of_publication: str | None = None
    publishing_status_onix_code: str | None = None
    publication_year: int | None = None
    publication_month: int | None = None
    publication_day: int | None = None
    distribution_start: date | None = None
    sales_rights_countries: list[str] | None = None
    sale_restricted: bool = False
    sale_restricted_for: str | None = None
    sale_restricted_to: date | None = None

    facsimiles: list[str] = []

    # Supply
    skip_product_supply: bool = False
    pack_quantity: int | None = None
    price_printed_on_product_onix_code: str | None = None
    product_availabilities: list[ProductAvailability] = []

    # Vendor extensions
    cover_type_name: str | None = None
    price_amount: Decimal | None = None
    vat: Decimal | int | None = None
    pkwiu: str | None = None
    pdw_exclusiveness: str | None = None
    preview_exists: bool = False
    excerpts: list[StoredFile] = []
    masters: list[StoredFile] = []

    @model_validator(mode="before")
    @classmethod
    def default_authorship_kind(cls, data):
        if isinstance(data, dict) and not data.get("authorship_kind"):
            kind = AuthorshipKind.USER_GIVEN if data.get("contributors") else AuthorshipKind.NO_CONTRIBUTOR
            data = {**data, "authorship_kind": kind}
        return data

    @field_validator("record_reference")
    @classmethod
    def record_reference_not_blank(cls, value: str) -> str:
        if not value or not value.strip():
            raise ValueError("record_reference must not be blank")
        return value.strip()

    @property
    def kind_of_book(self) -> bool:
        return self.product_kind == ProductKind.BOOK

    @property
    def kind_of_ebook(self) -> bool:
        return self.product_kind == ProductKind.EBOOK

    @property
    def kind_of_audio(self) -> bool:
        return self.product_kind == ProductKind.AUDIOBOOK

    @property
    def kind_of_map(self) -> bool:
        return self.product_kind == ProductKind.MAP
