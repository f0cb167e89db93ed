"""Contributor processing module"""
import logging

from ...models import AuthorshipKind
from ..codelists import CodeList
from ..onix_constants import CONTRIBUTOR_ROLE_AUTHOR, UNNAMED_PERSONS_VARIOUS_AUTHORS
from ..onix_utils import format_datestamp, is_present
from ..xml_builder import add_comment, add_dictionary_comment, add_element

logger = logging.getLogger(__name__)


def process_contributors(descriptive_detail, product, options):
    """Process contributors; exactly one authorship kind applies"""
    kind = product.authorship_kind

    if kind == AuthorshipKind.USER_GIVEN:
        if product.contributors:
            add_comment(descriptive_detail, 'Contributors listed by the publisher', options, kind='contributors')
        for sequence, contributor in enumerate(product.contributors, start=1):
            _add_contributor(descriptive_detail, contributor, sequence, options)

    elif kind == AuthorshipKind.COLLECTIVE:
        add_comment(descriptive_detail, 'Collective work', options, kind='contributors')
        contributor = add_element(descriptive_detail, 'Contributor')
        add_element(contributor, 'ContributorRole', CONTRIBUTOR_ROLE_AUTHOR)
        add_comment(contributor, f"Various authors - {UNNAMED_PERSONS_VARIOUS_AUTHORS}", options, kind='contributors')
        add_element(contributor, 'UnnamedPersons', UNNAMED_PERSONS_VARIOUS_AUTHORS)

    else:
        add_comment(descriptive_detail, 'No contributors', options, kind='contributors')
        add_element(descriptive_detail, 'NoContributor')


def _add_contributor(descriptive_detail, contributor, sequence, options):
    attributes = {}
    if not options.skip_volatile_metadata:
        if contributor.id is not None:
            attributes['sourcename'] = f"contributorid:{contributor.id}"
        if contributor.updated_at is not None:
            attributes['datestamp'] = format_datestamp(contributor.updated_at)

    element = add_element(descriptive_detail, 'Contributor', attributes=attributes)
    add_element(element, 'SequenceNumber', sequence)
    add_dictionary_comment(element, 'Contributor role', CodeList.CONTRIBUTOR_ROLE, options,
                           kind='contributors', indent=6)
    if is_present(contributor.role_onix_code):
        add_element(element, 'ContributorRole', contributor.role_onix_code)
    if is_present(contributor.language_onix_code):
        add_comment(element, 'Translators only', options, kind='contributors')
        add_element(element, 'FromLanguage', contributor.language_onix_code)

    full_name = contributor.generated_full_name
    if full_name:
        add_element(element, 'PersonName', full_name)

    # Structured parts are only reliable when the name was split by the publisher
    if is_present(contributor.name) and is_present(contributor.last_name):
        if is_present(contributor.title):
            add_element(element, 'TitlesBeforeNames', contributor.title.strip())
        add_element(element, 'NamesBeforeKey', contributor.name.strip())
        if is_present(contributor.last_name_prefix):
            add_element(element, 'PrefixToKey', contributor.last_name_prefix.strip())
        add_element(element, 'KeyNames', contributor.last_name.strip())
        if is_present(contributor.last_name_postfix):
            add_element(element, 'NamesAfterKey', contributor.last_name_postfix.strip())

    if is_present(contributor.biography):
        language = options.language_code if is_present(options.language_code) else None
        add_element(element, 'BiographicalNote', contributor.biography.strip(), attributes={'language': language})

    return element
