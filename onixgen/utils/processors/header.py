"""Header processing module"""
import logging
from datetime import datetime

from ..onix_constants import SENT_DATE_TIME_FORMAT
from ..onix_utils import is_present
from ..xml_builder import add_comment, add_element

logger = logging.getLogger(__name__)


def process_header(new_root, options):
    """Process header elements"""
    if not options.pure_onix:
        # Lets parsers know how to read the dialect-dependent tags
        add_element(new_root, 'elibri:Dialect', options.dialect)

    header = add_element(new_root, 'Header')

    # Sender info
    sender = add_element(header, 'Sender')
    add_element(sender, 'SenderName', options.effective_sender_name)

    if is_present(options.contact_name):
        add_element(sender, 'ContactName', options.contact_name.strip())

    if is_present(options.email_address):
        add_element(sender, 'EmailAddress', options.email_address.strip())

    sent_at = options.sent_at or datetime.now()
    add_element(header, 'SentDateTime', sent_at.strftime(SENT_DATE_TIME_FORMAT))

    if is_present(options.language_code):
        add_comment(header, 'Language of free-text elements unless tagged otherwise', options, kind='header')
        add_element(header, 'DefaultLanguageOfText', options.language_code)

    logger.debug(f"Header rendered for sender {options.effective_sender_name}")
    return header
