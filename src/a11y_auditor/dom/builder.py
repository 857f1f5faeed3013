import logging
from typing import Union

from bs4 import BeautifulSoup, Doctype
from bs4.builder import ParserRejectedMarkup

from a11y_auditor.errors import ParseError
from .models import HTMLDocument

logger = logging.getLogger(__name__)

DocumentInput = Union[str, bytes, BeautifulSoup, HTMLDocument]


class DOMBuilder:
    """
    Turns raw markup into an HTMLDocument.

    Uses the `html.parser` tree builder, which does not add implied
    <html>/<head>/<body> wrappers, so fragments keep their own shape.
    Multi-valued attribute splitting is disabled so `class=" "` keeps its
    raw value instead of becoming an empty list.
    """

    PARSER = 'html.parser'

    def parse_doc(self, html: Union[str, bytes]) -> HTMLDocument:
        if isinstance(html, bytes):
            html = html.decode('utf-8', errors='replace')

        clean_html = html.replace('\ufeff', '')
        try:
            soup = BeautifulSoup(clean_html, self.PARSER, multi_valued_attributes=None)
        except ParserRejectedMarkup as e:
            raise ParseError(f"Markup could not be parsed: {e}") from e

        return self.wrap(soup)

    def wrap(self, soup: BeautifulSoup) -> HTMLDocument:
        has_doctype = any(isinstance(item, Doctype) for item in soup.contents)
        root_tag_valid = soup.find('html', recursive=False) is not None
        logger.debug("Document built (doctype=%s, html root=%s).", has_doctype, root_tag_valid)
        return HTMLDocument(soup=soup, has_doctype=has_doctype, root_tag_valid=root_tag_valid)


_builder = DOMBuilder()


def ensure_document(html: DocumentInput) -> HTMLDocument:
    """
    Returns a parsed document for `html`.

    Strings and bytes are parsed, a BeautifulSoup tree is wrapped as is,
    and an HTMLDocument is handed back untouched.
    """
    if isinstance(html, HTMLDocument):
        return html
    if isinstance(html, BeautifulSoup):
        return _builder.wrap(html)
    if isinstance(html, (str, bytes)):
        return _builder.parse_doc(html)
    raise TypeError(f"Cannot build a document from {type(html).__name__}")
