from datetime import date, datetime
from decimal import Decimal

import pytest
from lxml import etree

from onixgen.main import create_app
from onixgen.models import Product
from onixgen.utils.onix_processor import generate_onix
from onixgen.utils.render_options import RenderOptions

SENT_AT = datetime(2024, 3, 1, 12, 30, 0)


@pytest.fixture
def app():
    """Create and configure a new app instance for each test."""
    app = create_app('testing')
    yield app


@pytest.fixture
def client(app):
    """A test client for the app."""
    return app.test_client()


@pytest.fixture
def render():
    """Render products and return the parsed ONIXMessage root"""
    def _render(products, **options):
        if isinstance(products, Product):
            products = [products]
        options.setdefault('sent_at', SENT_AT)
        output = generate_onix(products, RenderOptions(**options))
        return etree.fromstring(output)
    return _render


@pytest.fixture
def minimal_product():
    return Product(record_reference='minimal-1')


@pytest.fixture
def book_data():
    return {
        'record_reference': 'book-001',
        'notification_type_onix_code': '03',
        'isbn_value': '9788324799992',
        'hyphenated_isbn': '978-83-247-9999-2',
        'ean': '9788324799992',
        'product_kind': 'book',
        'product_form_onix_code': 'BB',
        'height': 210,
        'width': 148,
        'thickness': 25,
        'weight': 480,
        'title': ' Gra o tron ',
        'subtitle': 'Tom pierwszy',
        'collection_name': 'Pieśń Lodu i Ognia',
        'collection_part': '1',
        'original_title': 'A Game of Thrones',
        'english_title': 'A Game of Thrones',
        'trade_title': 'Gra o tron (twarda)',
        'series_memberships': [
            {'series_name': 'Fantastyka', 'number_within_series': '12'},
        ],
        'contributors': [
            {
                'id': 1,
                'role_onix_code': 'A01',
                'name': 'George',
                'last_name': 'Martin',
                'title': 'dr',
                'full_name': 'George R.R. Martin',
                'biography': 'American novelist.',
                'updated_at': datetime(2023, 5, 1, 8, 0, 0),
            },
            {
                'id': 2,
                'role_onix_code': 'B06',
                'full_name': 'Paweł Kruk',
                'language_onix_code': 'eng',
            },
        ],
        'edition_statement': 'Wydanie II',
        'languages': [{'role_onix_code': '01', 'language_onix_code': 'pol'}],
        'number_of_pages': 844,
        'number_of_illustrations': 12,
        'thema_codes': ['FMB', '1DDU', '5AN'],
        'publisher_name': 'Zysk i S-ka',
        'publisher_id': 7,
        'publisher_product_categories': [{'id': 21, 'name': 'Fantasy'}],
        'keywords': {'pol': ['smoki', 'tron'], 'eng': ['dragons']},
        'audience_age_from': 16,
        'other_texts': [
            {
                'id': 5,
                'type_onix_code': '03',
                'text': '<p>Zima nadchodzi.</p>',
                'updated_at': datetime(2023, 6, 1, 9, 0, 0),
            },
        ],
        'attachments': [
            {
                'id': 9,
                'attachment_type_code': '01',
                'onix_resource_mode': '03',
                'url': '/system/covers/game of thrones.jpg',
            },
        ],
        'imprint_name': 'Zysk Fantasy',
        'city_of_publication': 'Poznań',
        'publishing_status_onix_code': '04',
        'publication_year': 2011,
        'publication_month': 6,
        'publication_day': 15,
        'sales_rights_countries': [],
        'pack_quantity': 10,
        'price_printed_on_product_onix_code': '02',
        'product_availabilities': [
            {
                'supplier': {
                    'name': 'Olesiejuk',
                    'nip': '527-22-62-432',
                    'phone': '+48 22 721 70 00',
                    'email': 'hurt@olesiejuk.pl',
                    'websites': ['https://olesiejuk.pl'],
                },
                'supplier_identifier': 'OLE-123',
                'supplier_role_onix_code': '03',
                'product_availability_onix_code': '21',
                'stock_info': {'on_hand': 120},
                'price_infos': [
                    {
                        'amount': Decimal('49.9'),
                        'vat': 5,
                        'currency_code': 'PLN',
                        'minimum_order_quantity': 1,
                        'effective_from': date(2024, 1, 1),
                    },
                ],
            },
        ],
        'cover_type_name': 'hard',
        'price_amount': Decimal('59.9'),
        'vat': 5,
        'pkwiu': '58.11.1',
    }


@pytest.fixture
def book_product(book_data):
    return Product.model_validate(book_data)


@pytest.fixture
def ebook_product():
    return Product.model_validate({
        'record_reference': 'ebook-001',
        'isbn_value': '9788324700001',
        'product_kind': 'ebook',
        'digital': True,
        'product_form_onix_code': 'DG',
        'product_form_detail_onix_codes': ['E101', 'E127'],
        'product_form_onix_code_302': 'ED',
        'product_form_detail_onix_code_302': 'E101',
        'epub_technical_protection_onix_code': '02',
        'epub_preview_usage_status_onix_code': '02',
        'epub_preview_unit_onix_code': '05',
        'epub_preview_percentage_limit': 10,
        'epub_sale_restricted_to': date(2030, 12, 31),
        'file_size': Decimal('2.5'),
        'number_of_pages': 320,
        'title': 'Cyfrowa książka',
        'authorship_kind': 'collective',
        'publisher_name': 'Helion',
        'excerpts': [
            {'id': 77, 'file_md5': 'abc123', 'file_size': 2048, 'file_type': 'epub',
             'updated_at': datetime(2024, 2, 1, 10, 0, 0)},
        ],
        'masters': [
            {'id': 78, 'file_md5': 'def456', 'file_size': 4096, 'file_type': 'mobi'},
        ],
        'preview_exists': True,
    })
