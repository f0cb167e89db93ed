import pytest

from onixgen.models import Product
from onixgen.utils.exceptions import ConfigurationError
from onixgen.utils.render_options import RenderOptions, XmlVariant
from onixgen.utils.processors.descriptive import process_product_form
from onixgen.utils.xml_builder import create_element


def descriptive(root):
    return root.find('{*}Product/{*}DescriptiveDetail')


class TestProductForm:
    """Tests for ProductForm placement per dialect"""

    def test_legacy_codes_are_translated_for_301(self, render, ebook_product):
        detail = descriptive(render(ebook_product, dialect='3.0.1'))
        assert detail.findtext('{*}ProductComposition') == '00'
        assert detail.findtext('{*}ProductForm') == 'EA'
        assert [e.text for e in detail.findall('{*}ProductFormDetail')] == ['E101', 'E127']

    def test_other_codes_pass_through_for_301(self, render, book_product):
        assert descriptive(render(book_product)).findtext('{*}ProductForm') == 'BB'

    def test_302_uses_dialect_specific_pair(self, render, ebook_product):
        detail = descriptive(render(ebook_product, dialect='3.0.2'))
        assert detail.findtext('{*}ProductForm') == 'ED'
        assert [e.text for e in detail.findall('{*}ProductFormDetail')] == ['E101']

    def test_302_falls_back_to_plain_code(self, render, book_product):
        assert descriptive(render(book_product, dialect='3.0.2')).findtext('{*}ProductForm') == 'BB'

    def test_unknown_dialect_is_a_configuration_error(self, minimal_product):
        parent = create_element('DescriptiveDetail')
        with pytest.raises(ConfigurationError):
            process_product_form(parent, minimal_product, RenderOptions(dialect='2.1'))

    def test_absent_form_emits_composition_only(self, render, minimal_product):
        detail = descriptive(render(minimal_product))
        assert [child.tag.split('}')[1] for child in detail][:2] == ['ProductComposition', 'NoContributor']


class TestEpubDetails:
    """Tests for e-book protection and preview constraints"""

    def test_protection_and_preview_limit(self, render, ebook_product):
        detail = descriptive(render(ebook_product))
        assert detail.findtext('{*}EpubTechnicalProtection') == '02'
        constraint = detail.find('{*}EpubUsageConstraint')
        assert constraint.findtext('{*}EpubUsageType') == '01'
        assert constraint.findtext('{*}EpubUsageStatus') == '02'
        assert constraint.findtext('{*}EpubUsageLimit/{*}Quantity') == '10'
        assert constraint.findtext('{*}EpubUsageLimit/{*}EpubUsageUnit') == '05'

    def test_print_products_have_no_epub_details(self, render, book_product):
        detail = descriptive(render(book_product))
        assert detail.find('{*}EpubTechnicalProtection') is None
        assert detail.find('{*}EpubUsageConstraint') is None


class TestMeasurement:
    """Tests for dimensions"""

    def test_measures_in_fixed_order(self, render, book_product):
        measures = descriptive(render(book_product)).findall('{*}Measure')
        assert [(m.findtext('{*}MeasureType'), m.findtext('{*}Measurement'), m.findtext('{*}MeasureUnitCode'))
                for m in measures] == [('01', '210', 'mm'), ('02', '148', 'mm'), ('03', '25', 'mm'), ('08', '480', 'gr')]

    def test_only_present_measures(self, render):
        product = Product(record_reference='r', weight=300)
        measures = descriptive(render(product)).findall('{*}Measure')
        assert [m.findtext('{*}MeasureType') for m in measures] == ['08']

    def test_map_scale_only_for_maps(self, render):
        a_map = Product(record_reference='m', product_kind='map', map_scale=50000)
        not_a_map = Product(record_reference='b', product_kind='book', map_scale=50000)
        assert descriptive(render(a_map)).findtext('{*}MapScale') == '50000'
        assert descriptive(render(not_a_map)).find('{*}MapScale') is None


class TestTitles:
    """Tests for TitleDetail blocks and collections"""

    def test_title_details_in_order(self, render, book_product):
        details = descriptive(render(book_product, language_code='pol')).findall('{*}TitleDetail')
        assert [d.findtext('{*}TitleType') for d in details] == ['01', '06', '03', '10']

    def test_main_title_with_collection(self, render, book_product):
        main = descriptive(render(book_product, language_code='pol')).find('{*}TitleDetail')
        collection, product_level = main.findall('{*}TitleElement')
        assert collection.findtext('{*}TitleElementLevel') == '02'
        assert collection.findtext('{*}PartNumber') == '1'
        assert collection.findtext('{*}TitleText') == 'Pieśń Lodu i Ognia'
        assert product_level.findtext('{*}TitleElementLevel') == '01'
        title_text = product_level.find('{*}TitleText')
        assert title_text.text == 'Gra o tron'
        assert title_text.get('language') == 'pol'
        assert product_level.findtext('{*}Subtitle') == 'Tom pierwszy'

    def test_english_and_original_title_languages(self, render, book_product):
        details = descriptive(render(book_product, language_code='pol')).findall('{*}TitleDetail')
        assert details[1].find('{*}TitleElement/{*}TitleText').get('language') == 'eng'
        assert details[2].find('{*}TitleElement/{*}TitleText').get('language') is None
        assert details[3].find('{*}TitleElement/{*}TitleText').get('language') == 'pol'

    def test_blank_titles_are_omitted(self, render):
        product = Product(record_reference='r', title='  ', trade_title='Trade')
        details = descriptive(render(product)).findall('{*}TitleDetail')
        assert [d.findtext('{*}TitleType') for d in details] == ['10']

    def test_series_membership_collection(self, render, book_product):
        collection = descriptive(render(book_product)).find('{*}Collection')
        assert collection.findtext('{*}CollectionType') == '10'
        assert collection.find('{*}CollectionIdentifier') is None
        element = collection.find('{*}TitleDetail/{*}TitleElement')
        assert element.findtext('{*}TitleElementLevel') == '02'
        assert element.findtext('{*}PartNumber') == '12'
        assert element.findtext('{*}TitleText') == 'Fantastyka'

    def test_series_issn(self, render):
        product = Product(record_reference='r',
                          series_memberships=[{'series_name': 'Kwartalnik', 'issn': '1234-5678'}])
        identifier = descriptive(render(product)).find('{*}Collection/{*}CollectionIdentifier')
        assert identifier.findtext('{*}CollectionIDType') == '02'
        assert identifier.findtext('{*}IDValue') == '1234-5678'


class TestContributors:
    """Tests for the three authorship kinds"""

    def test_user_given_contributors(self, render, book_product):
        contributors = descriptive(render(book_product, language_code='pol')).findall('{*}Contributor')
        first, second = contributors
        assert first.findtext('{*}SequenceNumber') == '1'
        assert first.findtext('{*}ContributorRole') == 'A01'
        assert first.findtext('{*}PersonName') == 'George R.R. Martin'
        assert first.findtext('{*}TitlesBeforeNames') == 'dr'
        assert first.findtext('{*}NamesBeforeKey') == 'George'
        assert first.findtext('{*}KeyNames') == 'Martin'
        assert first.find('{*}BiographicalNote').get('language') == 'pol'
        assert first.get('sourcename') == 'contributorid:1'
        assert first.get('datestamp') == '20230501T080000'

        assert second.findtext('{*}SequenceNumber') == '2'
        assert second.findtext('{*}FromLanguage') == 'eng'
        assert second.findtext('{*}PersonName') == 'Paweł Kruk'
        assert second.find('{*}KeyNames') is None

    def test_volatile_metadata_can_be_skipped(self, render, book_product):
        contributor = descriptive(render(book_product, skip_volatile_metadata=True)).find('{*}Contributor')
        assert contributor.attrib == {}

    def test_collective_work(self, render, ebook_product):
        detail = descriptive(render(ebook_product))
        contributor = detail.find('{*}Contributor')
        assert contributor.findtext('{*}ContributorRole') == 'A01'
        assert contributor.findtext('{*}UnnamedPersons') == '04'
        assert detail.find('{*}NoContributor') is None

    def test_no_contributor(self, render, minimal_product):
        detail = descriptive(render(minimal_product))
        assert detail.find('{*}NoContributor') is not None
        assert detail.find('{*}Contributor') is None


class TestOtherDescriptiveSections:
    """Tests for edition, languages, extent, subjects and audience"""

    def test_edition_and_language(self, render, book_product):
        detail = descriptive(render(book_product))
        assert detail.findtext('{*}EditionStatement') == 'Wydanie II'
        assert detail.findtext('{*}Language/{*}LanguageRole') == '01'
        assert detail.findtext('{*}Language/{*}LanguageCode') == 'pol'

    def test_book_extent(self, render, book_product):
        detail = descriptive(render(book_product))
        extents = detail.findall('{*}Extent')
        assert [(e.findtext('{*}ExtentType'), e.findtext('{*}ExtentValue'), e.findtext('{*}ExtentUnit'))
                for e in extents] == [('00', '844', '03')]
        assert detail.findtext('{*}NumberOfIllustrations') == '12'

    def test_ebook_extent(self, render, ebook_product):
        extents = descriptive(render(ebook_product)).findall('{*}Extent')
        assert [(e.findtext('{*}ExtentType'), e.findtext('{*}ExtentValue')) for e in extents] == [
            ('22', '2.5'), ('00', '320'),
        ]

    def test_audio_duration(self, render):
        product = Product(record_reference='a', product_kind='audiobook', digital=True, duration=540)
        extent = descriptive(render(product)).find('{*}Extent')
        assert extent.findtext('{*}ExtentType') == '09'
        assert extent.findtext('{*}ExtentUnit') == '05'

    def test_subjects(self, render, book_product):
        subjects = descriptive(render(book_product)).findall('{*}Subject')
        schemes = [s.findtext('{*}SubjectSchemeIdentifier') for s in subjects]
        assert schemes == ['93', '94', '98', '24', '20', '20']

        thema, place, age = subjects[:3]
        assert thema.find('{*}MainSubject') is not None
        assert thema.findtext('{*}SubjectCode') == 'FMB'
        assert place.find('{*}MainSubject') is None
        assert age.findtext('{*}SubjectCode') == '5AN'

        publisher_category = subjects[3]
        assert publisher_category.findtext('{*}SubjectSchemeName') == 'Zysk i S-ka'
        assert publisher_category.findtext('{*}SubjectCode') == '21'
        assert publisher_category.findtext('{*}SubjectHeadingText') == 'Fantasy'

        english, polish = subjects[4:]
        assert english.find('{*}SubjectHeadingText').get('language') == 'eng'
        assert english.findtext('{*}SubjectHeadingText') == 'dragons'
        assert polish.findtext('{*}SubjectHeadingText') == 'smoki; tron'

    def test_audience_range(self, render, book_product):
        ranges = descriptive(render(book_product)).findall('{*}AudienceRange')
        assert len(ranges) == 1
        assert ranges[0].findtext('{*}AudienceRangeQualifier') == '18'
        assert ranges[0].findtext('{*}AudienceRangePrecision') == '03'
        assert ranges[0].findtext('{*}AudienceRangeValue') == '16'

    def test_section_order(self, render, book_product):
        detail = descriptive(render(book_product))
        order = []
        for child in detail:
            name = child.tag.split('}')[1]
            if not order or order[-1] != name:
                order.append(name)
        assert order == [
            'ProductComposition', 'ProductForm', 'Measure', 'Collection', 'TitleDetail', 'Contributor',
            'EditionStatement', 'Language', 'Extent', 'NumberOfIllustrations', 'Subject', 'AudienceRange',
        ]

    def test_descriptive_detail_follows_variant(self, render, book_product):
        root = render(book_product, variant=XmlVariant.stocks_only())
        assert descriptive(root) is None
