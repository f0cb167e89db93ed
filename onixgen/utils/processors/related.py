"""Related material processing module"""
import logging

from ..codelists import CodeList
from ..onix_constants import (
    PRODUCT_ID_TYPE_PROPRIETARY,
    PRODUCT_RELATION_ORIGINAL_OF_FACSIMILE,
    PROPRIETARY_ID_TYPE_NAME,
)
from ..onix_utils import is_present
from ..xml_builder import add_comment, add_dictionary_comment, add_element, add_identifier

logger = logging.getLogger(__name__)


def process_related_material(new_product, product, options):
    """Process facsimiles as related products"""
    related_material = add_element(new_product, 'RelatedMaterial')
    add_dictionary_comment(related_material, 'Relation types', CodeList.PRODUCT_RELATION_CODE, options,
                           kind='related_products')

    for record_reference in product.facsimiles:
        if not is_present(record_reference):
            continue
        related_product = add_element(related_material, 'RelatedProduct')
        add_element(related_product, 'ProductRelationCode', PRODUCT_RELATION_ORIGINAL_OF_FACSIMILE)
        add_comment(related_product, 'Proprietary identifier - record reference', options,
                    kind='related_products')
        add_identifier(related_product, PRODUCT_ID_TYPE_PROPRIETARY, record_reference.strip(),
                       type_name=PROPRIETARY_ID_TYPE_NAME)

    return related_material
