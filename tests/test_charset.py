import logging

import pytest

from domhtml import CharsetError
from domhtml.utils import convert_charset, lookup_charset, normalize_charset, same_charset


class TestCharsetNames:
    def test_normalize(self):
        assert normalize_charset(' UTF-8 ') == 'utf-8'

    def test_lookup_unknown(self):
        with pytest.raises(CharsetError) as exc_info:
            lookup_charset('no-such-charset')
        assert exc_info.value.charset == 'no-such-charset'

    def test_same_charset_aliases(self):
        assert same_charset('latin-1', 'ISO-8859-1')
        assert not same_charset('utf-8', 'iso-8859-1')
        assert not same_charset('utf-8', 'no-such-charset')


class TestConvertCharset:
    def test_bytes_are_reencoded(self):
        assert convert_charset('é'.encode('utf-8'), 'UTF-8', 'iso-8859-1') == b'\xe9'

    def test_unencodable_characters_become_references(self):
        assert convert_charset('€'.encode('utf-8'), 'utf-8', 'iso-8859-1') == b'&#8364;'

    def test_same_charset_is_a_noop(self):
        data = b'\xff\xfe'
        assert convert_charset(data, 'UTF-8', 'utf-8') is data

    def test_numbers_and_text_unchanged(self):
        assert convert_charset(42, 'utf-8', 'iso-8859-1') == 42
        assert convert_charset('déjà', 'utf-8', 'iso-8859-1') == 'déjà'

    def test_containers_recurse(self):
        data = {'clé'.encode('utf-8'): ['é'.encode('utf-8'), 3], 'x': ('ü'.encode('utf-8'),)}
        assert convert_charset(data, 'utf-8', 'iso-8859-1') == {
            b'cl\xe9': [b'\xe9', 3],
            'x': (b'\xfc',),
        }

    def test_force_converts_identical_charsets(self):
        assert convert_charset(b'abc', 'utf-8', 'utf-8', force=True) == b'abc'

    def test_failed_conversion_returns_input(self, caplog):
        data = b'\xff\xfe\xfa'
        with caplog.at_level(logging.WARNING):
            assert convert_charset(data, 'utf-8', 'iso-8859-1') == data
        assert 'failed' in caplog.text

    def test_unknown_charset_raises(self):
        with pytest.raises(CharsetError):
            convert_charset(b'abc', 'utf-8', 'klingon')
