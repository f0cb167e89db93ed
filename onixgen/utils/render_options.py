"""Render options controlling the shape of a generated ONIX message.

A single RenderOptions value is built per batch. The variant decides which
top-level containers are attempted, the dialect decides how ProductForm and
ProductFormDetail are placed, and the remaining flags only tune envelope and
annotations.
"""
from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict

from .exceptions import ConfigurationError
from .onix_constants import DEFAULT_DIALECT, DEFAULT_SENDER_NAME, DIALECT_302, SUPPORTED_DIALECTS


class XmlVariant(BaseModel):
    """Named subset of top-level containers requested for an export.

    Attributes:
        includes_basic_meta: render DescriptiveDetail
        includes_other_texts: render TextContent in CollateralDetail
        includes_media_files: render SupportingResource in CollateralDetail
        includes_stocks: render ProductSupply and supplier identifiers
    """

    model_config = ConfigDict(frozen=True)

    includes_basic_meta: bool = True
    includes_other_texts: bool = True
    includes_media_files: bool = True
    includes_stocks: bool = True

    @classmethod
    def full(cls) -> "XmlVariant":
        return cls()

    @classmethod
    def metadata_only(cls) -> "XmlVariant":
        return cls(includes_stocks=False)

    @classmethod
    def stocks_only(cls) -> "XmlVariant":
        return cls(
            includes_basic_meta=False,
            includes_other_texts=False,
            includes_media_files=False,
            includes_stocks=True,
        )


class CommentMode(str, Enum):
    NONE = "none"
    ALL = "all"
    SELECTIVE = "selective"


class RenderOptions(BaseModel):
    """Options for one ONIX batch.

    Attributes:
        dialect: "3.0.1" or "3.0.2"
        variant: requested containers; None is a configuration error
        pure_onix: drop the vendor namespace and extension block
        emit_headers: wrap products in ONIXMessage with a Header
        comment_mode: none, all, or selective (see comment_kinds)
        comment_kinds: section kinds whose comments are kept in selective mode
        sender_name: SenderName override, falls back to a fixed default
        contact_name: optional ContactName in the header
        email_address: optional EmailAddress in the header
        language_code: working language for free-text elements
        skip_volatile_metadata: drop sourcename/datestamp attributes
        asset_host: host prepended to relative attachment URLs
        sent_at: fixed SentDateTime, defaults to the current time
    """

    model_config = ConfigDict(frozen=True)

    dialect: str = DEFAULT_DIALECT
    variant: XmlVariant | None = XmlVariant()
    pure_onix: bool = False
    emit_headers: bool = True
    comment_mode: CommentMode = CommentMode.NONE
    comment_kinds: frozenset[str] = frozenset()
    sender_name: str | None = None
    contact_name: str | None = None
    email_address: str | None = None
    language_code: str | None = None
    skip_volatile_metadata: bool = False
    asset_host: str | None = None
    sent_at: datetime | None = None

    @property
    def effective_sender_name(self) -> str:
        if self.sender_name and self.sender_name.strip():
            return self.sender_name.strip()
        return DEFAULT_SENDER_NAME

    @property
    def declares_extension_namespace(self) -> bool:
        """Whether the message root carries xmlns:elibri"""
        return not self.pure_onix and self.dialect != DIALECT_302

    def wants_comment(self, kind=None) -> bool:
        if self.comment_mode == CommentMode.ALL:
            return True
        if self.comment_mode == CommentMode.SELECTIVE:
            kinds = kind if isinstance(kind, (list, tuple, set, frozenset)) else [kind]
            return any(k in self.comment_kinds for k in kinds if k)
        return False

    def validate_for_render(self) -> "RenderOptions":
        """Raise ConfigurationError for options that cannot be rendered"""
        if self.dialect not in SUPPORTED_DIALECTS:
            raise ConfigurationError(
                f"Unsupported ONIX dialect: {self.dialect!r} "
                f"(expected one of {', '.join(SUPPORTED_DIALECTS)})",
                option="dialect",
            )
        if self.variant is None:
            raise ConfigurationError("XML variant unspecified", option="variant")
        return self
