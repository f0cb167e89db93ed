"""Collateral detail processing module"""
import logging
from urllib.parse import quote

from ..codelists import CodeList, is_valid_code
from ..onix_constants import CONTENT_AUDIENCE_UNRESTRICTED, RESOURCE_FORM_DOWNLOADABLE_FILE
from ..onix_utils import clean_text, format_datestamp, is_present
from ..xml_builder import add_comment, add_dictionary_comment, add_element, cdata

logger = logging.getLogger(__name__)

# Characters left alone when escaping resource links
_URL_SAFE = ":/?#[]@!$&'()*+,;=%~"


def process_collateral_detail(new_product, product, options):
    """Process collateral detail section"""
    collateral_detail = add_element(new_product, 'CollateralDetail')

    if options.variant.includes_other_texts:
        process_text_content(collateral_detail, product, options)

    if options.variant.includes_media_files:
        process_supporting_resources(collateral_detail, product, options)

    return collateral_detail


def _source_attributes(prefix, record, options):
    if options.skip_volatile_metadata:
        return {}
    attributes = {}
    if record.id is not None:
        attributes['sourcename'] = f"{prefix}:{record.id}"
    if record.updated_at is not None:
        attributes['datestamp'] = format_datestamp(record.updated_at)
    return attributes


def process_text_content(collateral_detail, product, options):
    """Process descriptions, reviews and other texts"""
    if product.other_texts:
        add_dictionary_comment(collateral_detail, 'Text types', CodeList.TEXT_TYPE, options, kind='texts')

    for other_text in product.other_texts:
        # Untyped texts are contributor biographies
        if not other_text.exportable or not is_present(other_text.type_onix_code) or not is_present(other_text.text):
            continue

        text_content = add_element(collateral_detail, 'TextContent',
                                   attributes=_source_attributes('textid', other_text, options))
        add_element(text_content, 'TextType', other_text.type_onix_code)
        add_comment(text_content, f"Always {CONTENT_AUDIENCE_UNRESTRICTED} - unrestricted", options, kind='texts')
        add_element(text_content, 'ContentAudience', CONTENT_AUDIENCE_UNRESTRICTED)

        text_attributes = {}
        if is_present(options.language_code):
            text_attributes['language'] = options.language_code
        if other_text.is_review and is_present(other_text.resource_link):
            text_attributes['sourcename'] = other_text.resource_link.strip()
        add_element(text_content, 'Text', cdata(clean_text(other_text.text)), attributes=text_attributes)

        if is_present(other_text.text_author):
            add_element(text_content, 'TextAuthor', other_text.text_author.strip())
        if is_present(other_text.source_title):
            add_element(text_content, 'SourceTitle', other_text.source_title.strip())


def resource_link(url, asset_host=None):
    """Build an absolute, escaped link for an attachment URL"""
    url = url.strip()
    if not url.startswith(('http://', 'https://')):
        if is_present(asset_host):
            host = asset_host.strip().rstrip('/')
            if not host.startswith(('http://', 'https://')):
                host = f"http://{host}"
            url = f"{host}/{url.lstrip('/')}"
        else:
            logger.warning(f"Relative attachment URL without an asset host: {url}")
    return quote(url, safe=_URL_SAFE)


def process_supporting_resources(collateral_detail, product, options):
    """Process attachments such as covers and excerpts"""
    for attachment in product.attachments:
        if not is_valid_code(CodeList.RESOURCE_MODE, attachment.onix_resource_mode):
            logger.debug(f"Skipping attachment {attachment.id} with resource mode {attachment.onix_resource_mode!r}")
            continue

        resource = add_element(collateral_detail, 'SupportingResource',
                               attributes=_source_attributes('resourceid', attachment, options))
        add_dictionary_comment(resource, 'Resource content type', CodeList.RESOURCE_CONTENT_TYPE, options,
                               kind='supporting_resources', indent=6)
        if is_present(attachment.attachment_type_code):
            add_element(resource, 'ResourceContentType', attachment.attachment_type_code)
        add_comment(resource, f"Always {CONTENT_AUDIENCE_UNRESTRICTED} - unrestricted", options,
                    kind='supporting_resources')
        add_element(resource, 'ContentAudience', CONTENT_AUDIENCE_UNRESTRICTED)
        add_dictionary_comment(resource, 'Resource mode', CodeList.RESOURCE_MODE, options,
                               kind='supporting_resources', indent=6)
        add_element(resource, 'ResourceMode', attachment.onix_resource_mode)

        version = add_element(resource, 'ResourceVersion')
        add_comment(version, f"Always {RESOURCE_FORM_DOWNLOADABLE_FILE} - downloadable file", options,
                    kind='supporting_resources')
        add_element(version, 'ResourceForm', RESOURCE_FORM_DOWNLOADABLE_FILE)
        add_element(version, 'ResourceLink', resource_link(attachment.url, options.asset_host))
