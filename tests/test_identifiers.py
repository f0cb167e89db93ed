import pytest

from onixgen.models import Product
from onixgen.utils.render_options import XmlVariant


def identifiers(root):
    product = root.find('{*}Product')
    return [(pid.findtext('{*}ProductIDType'), pid.findtext('{*}IDTypeName'), pid.findtext('{*}IDValue'))
            for pid in product.findall('{*}ProductIdentifier')]


class TestRecordIdentifiers:
    """Tests for record reference, notification type and identifiers"""

    def test_minimal_product(self, render, minimal_product):
        product = render(minimal_product).find('{*}Product')
        assert product.findtext('{*}RecordReference') == 'minimal-1'
        assert product.findtext('{*}NotificationType') == '03'
        assert product.find('{*}DeletionText') is None
        assert product.findall('{*}ProductIdentifier') == []

    def test_deletion_text(self, render):
        product = Product(record_reference='gone', notification_type_onix_code='05', deletion_text=' Withdrawn ')
        element = render(product).find('{*}Product')
        assert element.findtext('{*}NotificationType') == '05'
        assert element.findtext('{*}DeletionText') == 'Withdrawn'

    def test_equal_ean_and_isbn_emit_one_identifier(self, render):
        product = Product(record_reference='r', isbn_value='9780000000002', ean='9780000000002')
        assert identifiers(render(product)) == [('15', None, '9780000000002')]

    def test_different_ean_emits_two_identifiers(self, render):
        product = Product(record_reference='r', isbn_value='9780000000002', ean='5901234123457')
        assert identifiers(render(product)) == [
            ('15', None, '9780000000002'),
            ('03', None, '5901234123457'),
        ]

    def test_ean_without_isbn(self, render):
        product = Product(record_reference='r', ean='5901234123457')
        assert identifiers(render(product)) == [('03', None, '5901234123457')]

    def test_doi_and_external_identifier(self, render):
        product = Product(record_reference='r', doi='10.1000/182',
                          external_identifier={'type_name': 'Legimi', 'value': 'L-42'})
        assert identifiers(render(product)) == [
            ('06', None, '10.1000/182'),
            ('01', 'Legimi', 'L-42'),
        ]

    def test_supplier_identifiers_follow_stock_variant(self, render, book_product):
        with_stocks = identifiers(render(book_product))
        assert ('01', 'Olesiejuk', 'OLE-123') in with_stocks

        without_stocks = identifiers(render(book_product, variant=XmlVariant.metadata_only()))
        assert ('01', 'Olesiejuk', 'OLE-123') not in without_stocks


class TestProductModel:
    """Tests for product record validation"""

    def test_blank_record_reference_is_rejected(self):
        with pytest.raises(ValueError):
            Product(record_reference='   ')

    def test_authorship_kind_defaults(self):
        assert Product(record_reference='a').authorship_kind.value == 'no_contributor'
        with_contributors = Product(record_reference='b', contributors=[{'full_name': 'Jan Nowak'}])
        assert with_contributors.authorship_kind.value == 'user_given'

    def test_products_are_immutable(self, minimal_product):
        with pytest.raises(ValueError):
            minimal_product.title = 'changed'
