from dataclasses import dataclass


@dataclass
class DocumentConfig:
    """Configuration for parsing and serializing HTML documents"""
    parser: str = 'html.parser'
    default_charset: str = 'iso-8859-1'
    decode_errors: str = 'replace'
    encode_errors: str = 'xmlcharrefreplace'
    empty_document: str = '<html></html>'

    def __post_init__(self):
        self.default_charset = self.default_charset.strip().lower()
