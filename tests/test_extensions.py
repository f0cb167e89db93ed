from onixgen.models import Product
from onixgen.utils.onix_constants import ELIBRI_NS, ONIX_30_NS
from onixgen.utils.onix_processor import generate_onix
from onixgen.utils.render_options import RenderOptions


def extension(root, name):
    return root.find(f'{{*}}Product/{{{ELIBRI_NS}}}{name}')


class TestElibriExtensions:
    """Tests for the vendor extension block"""

    def test_extension_values(self, render, book_product):
        root = render(book_product)
        assert extension(root, 'CoverType').text == 'hard'
        assert extension(root, 'CoverPrice').text == '59.90'
        assert extension(root, 'Vat').text == '5'
        assert extension(root, 'PKWiU').text == '58.11.1'
        assert extension(root, 'preview_exists').text == 'false'
        assert extension(root, 'HyphenatedISBN').text == '978-83-247-9999-2'
        assert extension(root, 'SaleNotRestricted') is None

    def test_extensions_come_last(self, render, book_product):
        product = render(book_product).find('{*}Product')
        names = [child.tag for child in product]
        first_extension = next(i for i, tag in enumerate(names) if tag.startswith(f'{{{ELIBRI_NS}}}'))
        assert all(tag.startswith(f'{{{ELIBRI_NS}}}') for tag in names[first_extension:])
        assert names[first_extension - 1] == f'{{{ONIX_30_NS}}}ProductSupply'

    def test_digital_sale_restriction_and_files(self, render, ebook_product):
        root = render(ebook_product)
        assert extension(root, 'SaleRestrictedTo').text == '20301231'
        assert extension(root, 'SaleNotRestricted') is None
        assert extension(root, 'preview_exists').text == 'true'

        excerpt = extension(root, 'excerpts')[0]
        assert excerpt.text == 'https://www.elibri.com.pl/excerpt/77'
        assert excerpt.get('md5') == 'abc123'
        assert excerpt.get('file_size') == '2048'
        assert excerpt.get('updated_at') == '2024-02-01T10:00:00'

        master = extension(root, 'masters')[0]
        assert master.get('id') == '78'
        assert master.get('file_type') == 'mobi'
        assert master.get('updated_at') is None

    def test_unrestricted_digital_sale(self, render):
        product = Product(record_reference='r', digital=True)
        root = render(product)
        assert extension(root, 'SaleNotRestricted') is not None
        assert extension(root, 'excerpts') is None

    def test_pure_onix_has_no_vendor_namespace(self, book_product, ebook_product):
        output = generate_onix([book_product, ebook_product], RenderOptions(pure_onix=True))
        assert b'elibri:' not in output
        assert ELIBRI_NS.encode() not in output

    def test_302_declares_namespace_on_extension_elements(self, render, book_product):
        root = render(book_product, dialect='3.0.2')
        assert 'elibri' not in root.nsmap
        assert root.find(f'{{{ELIBRI_NS}}}Dialect').text == '3.0.2'
        assert extension(root, 'CoverType').nsmap['elibri'] == ELIBRI_NS

    def test_301_declares_namespace_on_root(self, render, book_product):
        root = render(book_product, dialect='3.0.1')
        assert root.nsmap['elibri'] == ELIBRI_NS
        assert root.find(f'{{{ELIBRI_NS}}}Dialect').text == '3.0.1'

    def test_excerpt_attribute_order(self, render, ebook_product):
        excerpt = extension(render(ebook_product), 'excerpts')[0]
        assert list(excerpt.attrib.keys()) == ['md5', 'file_size', 'file_type', 'updated_at', 'id']
        assert excerpt.get('id') == '77'
