import pytest
from bs4 import BeautifulSoup, Tag


SCENARIO_HTML = (
    '<div id="root">'
    '<div id="A"><p id="A1"></p><p id="A2"></p></div>'
    '<span id="B"></span>'
    '</div>'
)

PAGE_HTML = (
    '<!DOCTYPE html>'
    '<html><head><title>Old page</title></head>'
    '<body bgcolor="white">'
    '<!-- navigation -->'
    '<p align="center">Hello <b>there</b></p>'
    '<marquee>Breaking <i>news</i></marquee>'
    '<ul><li>one</li><li>two</li><li>three</li></ul>'
    '</body></html>'
)


def label(node):
    """Short name for a node: Document, the id of a tag, or the tag name"""
    if isinstance(node, BeautifulSoup):
        return 'Document'
    if isinstance(node, Tag):
        return node.get('id') or node.name
    return repr(str(node))


@pytest.fixture
def scenario_soup():
    return BeautifulSoup(SCENARIO_HTML, 'html.parser')


@pytest.fixture
def page_soup():
    return BeautifulSoup(PAGE_HTML, 'html.parser')


@pytest.fixture
def page_html():
    return PAGE_HTML
