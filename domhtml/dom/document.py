"""
HTML document wrapper: parsing with charset handling, head/body access,
serialization back to a target charset and tree iteration
"""

import logging
from typing import Optional, Union

from bs4 import BeautifulSoup, FeatureNotFound, ParserRejectedMarkup, Tag

from ..config import DocumentConfig
from ..errors import ParsingError
from ..utils.charset import lookup_charset, normalize_charset, same_charset
from .tree_iterator import DomTreeIterator

logger = logging.getLogger(__name__)


class HtmlDocument:
    """Parsed HTML document that remembers the charset it came in"""

    def __init__(self, text: Union[str, bytes], charset: Optional[str] = None,
                 config: DocumentConfig = None):
        """
        Parse an HTML document

        Args:
            text: The HTML text, decoded (str) or raw (bytes)
            charset: The charset of the text. Bytes are decoded with it;
                if omitted for bytes, the parser detects it.
            config: Parsing and serialization settings
        """
        self.config = config or DocumentConfig()

        if charset is not None:
            codec = lookup_charset(charset)
            self.orig_charset = normalize_charset(charset)
            if isinstance(text, bytes):
                text = text.decode(codec.name, errors=self.config.decode_errors)
        elif isinstance(text, str):
            self.orig_charset = 'utf-8'
        else:
            self.orig_charset = None

        if not text:
            if self.orig_charset is None:
                self.orig_charset = self.config.default_charset
            text = self.config.empty_document

        self.soup = self._load_html(text)

        if self.orig_charset is None:
            detected = self.soup.original_encoding
            self.orig_charset = normalize_charset(detected) if detected else self.config.default_charset
            logger.debug(f"Detected document charset: {self.orig_charset}")

        if self.soup.find('html') is None:
            self.soup.append(self.soup.new_tag('html'))

        self._remove_content_type_meta()

    def _load_html(self, text: Union[str, bytes]) -> BeautifulSoup:
        """Hand the text to the parser backend"""
        try:
            return BeautifulSoup(text, self.config.parser)
        except (FeatureNotFound, ParserRejectedMarkup) as e:
            raise ParsingError(f"Could not parse document with {self.config.parser}: {e}") from e

    def _remove_content_type_meta(self):
        """Drop old charset information from html/head"""
        html = self.soup.find('html')
        matches = []
        for head in html.find_all('head', recursive=False):
            matches.extend(
                meta for meta in head.find_all('meta', recursive=False)
                if str(meta.get('http-equiv', '')).lower() == 'content-type'
            )
        for meta in reversed(matches):
            meta.extract()
        if matches:
            logger.debug(f"Removed {len(matches)} content-type meta tags")

    @property
    def html(self) -> Tag:
        """The document element"""
        return self.soup.find('html')

    def get_head(self) -> Tag:
        """Return the HEAD element, creating it if it doesn't exist"""
        head = self.soup.find('head')
        if head is not None:
            return head

        head = self.soup.new_tag('head')
        self.html.insert(0, head)
        return head

    def get_body(self) -> Tag:
        """Return the BODY element, creating it if it doesn't exist"""
        body = self.soup.find('body')
        if body is not None:
            return body

        body = self.soup.new_tag('body')
        self.html.append(body)
        return body

    def get_charset(self) -> str:
        """Charset the parser decoded the document from, else the original charset"""
        if self.soup.original_encoding:
            return normalize_charset(self.soup.original_encoding)
        return self.orig_charset

    def return_html(self, charset: Optional[str] = None, metacharset: bool = False) -> bytes:
        """
        Return the full HTML text

        Args:
            charset: Encode using this charset. None means the original
                charset; an empty string means the current charset.
            metacharset: Add a META tag containing the charset information
        """
        if charset is None:
            charset = self.orig_charset
        elif not charset:
            charset = self.get_charset()
            if same_charset(charset, 'us-ascii'):
                charset = 'utf-8'
        codec = lookup_charset(charset)

        if not metacharset:
            text = str(self.soup)
        else:
            meta = self.soup.new_tag('meta')
            meta['http-equiv'] = 'content-type'
            meta['content'] = f"text/html; charset={charset}"
            self.get_head().insert(0, meta)
            try:
                text = str(self.soup)
            finally:
                meta.extract()

        return text.encode(codec.name, errors=self.config.encode_errors)

    def return_body(self) -> bytes:
        """Return the body contents in the original charset"""
        body = self.get_body()
        text = ''.join(str(child) for child in body.contents)
        return text.encode(lookup_charset(self.orig_charset).name,
                           errors=self.config.encode_errors)

    def iterator(self) -> DomTreeIterator:
        """A new, not yet started iterator over the whole document"""
        return DomTreeIterator(self.soup)

    def __iter__(self):
        return self.iterator()
