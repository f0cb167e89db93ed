"""XML building utilities for ONIX generation"""
import logging

from lxml import etree

from .codelists import lookup
from .onix_constants import (
    ELIBRI_NS,
    ELIBRI_PREFIX,
    EXTENDED_NSMAP,
    NSMAP,
    ONIX_30_NS,
    ONIX_RELEASE,
)
from .onix_utils import is_present, strip_control_chars

logger = logging.getLogger(__name__)

_EXTENSION_PREFIX = f"{ELIBRI_PREFIX}:"


def qualify(name):
    """Map ``Product`` / ``elibri:CoverType`` style names to Clark notation"""
    if name.startswith(_EXTENSION_PREFIX):
        return f"{{{ELIBRI_NS}}}{name[len(_EXTENSION_PREFIX):]}"
    return f"{{{ONIX_30_NS}}}{name}"


def create_onix_root(declare_extensions=True):
    """Create the root ONIX message element"""
    root = etree.Element(qualify('ONIXMessage'),
                         nsmap=EXTENDED_NSMAP if declare_extensions else NSMAP)
    root.set('release', ONIX_RELEASE)
    return root


def create_element(name, declare_extensions=False):
    """Create a detached element that declares the ONIX namespace itself"""
    return etree.Element(qualify(name),
                         nsmap=EXTENDED_NSMAP if declare_extensions else NSMAP)


def add_element(parent, name, text=None, attributes=None):
    """Add a child element with optional attributes and text content.

    Attributes keep the caller's order; absent or blank values are skipped.
    ``text`` may be an ``etree.CDATA`` instance. Control characters are
    dropped from plain text and attribute values.
    """
    nsmap = {ELIBRI_PREFIX: ELIBRI_NS} if name.startswith(_EXTENSION_PREFIX) else None
    element = etree.SubElement(parent, qualify(name), nsmap=nsmap)
    for key, value in (attributes or {}).items():
        if is_present(value):
            element.set(key, strip_control_chars(str(value)))
    if text is not None:
        element.text = text if isinstance(text, etree.CDATA) else strip_control_chars(str(text))
    return element


def add_identifier(parent, id_type, id_value, type_name=None):
    """Add a product identifier"""
    identifier = add_element(parent, 'ProductIdentifier')
    add_element(identifier, 'ProductIDType', id_type)
    if type_name is not None:
        add_element(identifier, 'IDTypeName', type_name)
    add_element(identifier, 'IDValue', id_value)
    return identifier


def cdata(text):
    """Wrap text in CDATA unless it contains the CDATA terminator"""
    if ']]>' in text:
        return text
    return etree.CDATA(text)


def add_comment(parent, text, options, kind=None):
    """Append an explanatory comment if the comment mode allows it"""
    if not options.wants_comment(kind):
        return None
    comment = etree.Comment(f" {_comment_safe(text)} ")
    parent.append(comment)
    return comment


def add_dictionary_comment(parent, description, list_id, options, kind=None, indent=4):
    """Append a comment listing every code of a code list"""
    if not options.wants_comment(kind):
        return None
    padding = "\n" + " " * indent
    entries = "".join(f"{padding}{entry.onix_code} - {entry.display_name}"
                      for entry in lookup(list_id))
    return add_comment(parent, description + entries, options, kind=kind)


def _comment_safe(text):
    # "--" is not allowed inside XML comments
    text = str(text)
    while '--' in text:
        text = text.replace('--', '-')
    return text


def is_empty(element):
    """An element is empty when it has no child elements, attributes or text.

    Comments do not count, so annotations never keep a container alive.
    """
    if element.attrib:
        return False
    if element.text and element.text.strip():
        return False
    return not any(isinstance(child.tag, str) for child in element)


def prune_if_empty(parent, tag_name):
    """Remove the most recently written ``tag_name`` child of ``parent`` if empty.

    Only the last same-named child of ``parent`` is examined; earlier siblings
    with the same name and deeper descendants are never touched.
    Returns True when an element was removed.
    """
    qualified = qualify(tag_name)
    candidates = [child for child in parent if child.tag == qualified]
    if not candidates:
        return False
    container = candidates[-1]
    if not is_empty(container):
        return False
    parent.remove(container)
    logger.debug(f"Pruned empty {tag_name}")
    return True


def serialize_xml(root):
    """Serialize XML to string with proper formatting"""
    return etree.tostring(
        root,
        pretty_print=True,
        xml_declaration=True,
        encoding='UTF-8'
    )


def serialize_fragments(elements):
    """Serialize standalone elements one after another, without a declaration"""
    return b''.join(
        etree.tostring(element, pretty_print=True, xml_declaration=False, encoding='UTF-8')
        for element in elements
    )
