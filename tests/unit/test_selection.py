import pytest
from bs4 import BeautifulSoup

from htmlscraper.exceptions import InvalidSelectorError
from htmlscraper.extractors import extract_text
from htmlscraper.selection import Selection, is_text_node, node_attributes


def test_find_preserves_document_order():
    selection = Selection.from_html('<ul><li>one</li><li>two</li><li>three</li></ul>')

    items = selection.find('li')

    assert items.size() == 3
    assert [extract_text(node) for node in items.nodes] == ['one', 'two', 'three']


def test_find_removes_duplicates_from_nested_sources():
    selection = Selection.from_html('<div class="a"><div class="b"><p>x</p></div></div>')

    divs = selection.find('div')
    paragraphs = divs.find('p')

    assert len(divs) == 2
    assert len(paragraphs) == 1


def test_find_only_matches_descendants():
    selection = Selection.from_html('<div class="box"><p>inside</p></div>').find('.box')

    assert len(selection.find('.box')) == 0
    assert len(selection.find('p')) == 1


def test_find_skips_text_nodes():
    soup = BeautifulSoup('<p>text</p>', 'lxml')
    selection = Selection([soup.p.contents[0]])

    assert len(selection.find('p')) == 0


def test_find_invalid_selector():
    selection = Selection.from_html('<p>x</p>')

    with pytest.raises(InvalidSelectorError) as exc_info:
        selection.find('p[')

    assert exc_info.value.selector == 'p['
    assert str(exc_info.value).startswith("invalid selector 'p['")


def test_first_and_each():
    selection = Selection.from_html('<p>a</p><p>b</p>').find('p')

    first = selection.first()
    pairs = list(selection.each())

    assert len(first) == 1
    assert first.first_node is selection.nodes[0]
    assert [index for index, _ in pairs] == [0, 1]
    assert all(len(single) == 1 for _, single in pairs)
    assert pairs[1][1].first_node is selection.nodes[1]


def test_empty_selection():
    selection = Selection()

    assert len(selection) == 0
    assert selection.first_node is None
    assert len(selection.first()) == 0
    assert list(selection.each()) == []


def test_from_html_with_custom_parser():
    selection = Selection.from_html('<p class="x">y</p>', parser='html.parser')

    assert extract_text(selection.find('.x').first_node) == 'y'


def test_is_text_node():
    soup = BeautifulSoup('<p>text<!-- comment --></p>', 'lxml')
    text, comment = soup.p.contents

    assert is_text_node(text)
    assert not is_text_node(comment)
    assert not is_text_node(soup.p)


def test_node_attributes():
    soup = BeautifulSoup('<a class="btn primary" href="/home">Home</a>', 'lxml')

    assert node_attributes(soup.a) == {'class': 'btn primary', 'href': '/home'}
    assert node_attributes(soup.a.contents[0]) == {}
