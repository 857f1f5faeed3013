import pytest
from bs4 import BeautifulSoup
from bs4.builder import ParserRejectedMarkup

import a11y_auditor.dom.builder as builder_module
from a11y_auditor.dom.builder import DOMBuilder, ensure_document
from a11y_auditor.dom.models import HTMLDocument
from a11y_auditor.errors import ParseError


def test_fragment_is_not_wrapped():
    """A fragment keeps its shape: no implied html or body."""
    doc = ensure_document('<p>Hello</p>')
    assert doc.soup.find('html') is None
    assert doc.soup.find('body') is None
    assert doc.has_doctype is False
    assert doc.root_tag_valid is False


def test_full_document_flags(valid_html):
    doc = ensure_document(valid_html)
    assert doc.has_doctype is True
    assert doc.root_tag_valid is True


def test_document_is_returned_unchanged():
    doc = ensure_document('<p>Hello</p>')
    assert ensure_document(doc) is doc


def test_soup_is_wrapped_without_reparse():
    soup = BeautifulSoup('<p>Hello</p>', 'html.parser')
    doc = ensure_document(soup)
    assert isinstance(doc, HTMLDocument)
    assert doc.soup is soup


def test_bytes_are_decoded():
    doc = ensure_document('<p>café</p>'.encode('utf-8'))
    assert doc.select_one('p').text_content == 'café'


def test_bom_is_removed():
    doc = ensure_document('\ufeff<p>x</p>')
    assert doc.soup.contents[0].name == 'p'


def test_unsupported_input_raises_type_error():
    with pytest.raises(TypeError):
        ensure_document(42)


def test_rejected_markup_raises_parse_error(monkeypatch):
    def reject(*args, **kwargs):
        raise ParserRejectedMarkup("boom")

    monkeypatch.setattr(builder_module, "BeautifulSoup", reject)
    with pytest.raises(ParseError, match="could not be parsed"):
        DOMBuilder().parse_doc('<p>x</p>')


def test_attribute_absence_differs_from_empty_value():
    doc = ensure_document('<img src="a.png" alt=""><img src="b.png">')
    first, second = doc.select('img')
    assert first.get_attribute('alt') == ''
    assert second.get_attribute('alt') is None
    assert first.has_attribute('alt') and not second.has_attribute('alt')


def test_class_keeps_raw_value():
    doc = ensure_document('<p class=" ">x</p><p class="a  b">y</p>')
    first, second = doc.select('p')
    assert first.get_attribute('class') == ' '
    assert second.get_attribute('class') == 'a  b'


def test_attribute_names_are_case_insensitive():
    doc = ensure_document('<DIV ID="main" Data-X="1"></DIV>')
    el = doc.select_one('div')
    assert el.tag_name == 'div'
    assert el.get_attribute('ID') == 'main'
    assert el.has_attribute('data-x')


def test_element_navigation():
    doc = ensure_document('<dl id="list"><dt>Term</dt><dd>Def <b>bold</b></dd></dl>')
    dt = doc.select_one('dt')
    dd = doc.select_one('dd')

    assert dt.parent.tag_name == 'dl'
    assert dt.parent.parent is None
    assert dt.next_element_sibling == dd
    assert dd.previous_element_sibling == dt
    assert dd.text_content == 'Def bold'
    assert [child.tag_name for child in doc.select_one('dl').children] == ['dt', 'dd']
    assert doc.select_one('b').closest('dl').identifier == ' id="list"'
    assert [a.tag_name for a in doc.select_one('b').ancestors()] == ['dd', 'dl']


def test_identifier_prefers_id_then_name():
    doc = ensure_document('<input id="a" name="b"><input name="c"><input>')
    assert [el.identifier for el in doc.select('input')] == [' id="a"', ' name="c"', '']


def test_outer_html_keeps_source_attribute_order():
    doc = ensure_document('<iframe src="/a" class="x" allow="fullscreen"></iframe><input type="text" name="q">')
    assert doc.select_one('iframe').outer_html() == '<iframe src="/a" class="x" allow="fullscreen"></iframe>'
    assert doc.select_one('input').outer_html() == '<input type="text" name="q"/>'


def test_outer_html_escapes_markup_characters():
    doc = ensure_document('<p title="a &amp; b">1 &lt; 2</p>')
    assert doc.select_one('p').outer_html() == '<p title="a &amp; b">1 &lt; 2</p>'


def test_is_empty_counts_whitespace_as_content():
    doc = ensure_document('<p></p><p> </p><p><!-- note --></p><p><br></p>')
    assert [el.is_empty for el in doc.select('p')] == [True, False, True, False]
