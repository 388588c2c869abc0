import sys
import os
import pytest
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))
from bs4 import BeautifulSoup
from domdiff import AttributeComparator, DEFAULT_IGNORED_ATTRIBUTES, MalformedNodeError, NodeEquality, PayloadTypeError
from domdiff.node_equality import text_payload

def first_element(html):
    soup = BeautifulSoup(html, 'html.parser')
    return soup.find(True)

def make_equality(ignored=DEFAULT_IGNORED_ATTRIBUTES):
    return NodeEquality(AttributeComparator(ignored))

def test_attributes_equal_regardless_of_order():
    comp = AttributeComparator()
    a = first_element('<div id="a" lang="en"></div>')
    b = first_element('<div lang="en" id="a"></div>')
    assert comp.equals(a, b)

def test_attribute_values_are_case_sensitive():
    comp = AttributeComparator()
    a = first_element('<div title="Hello"></div>')
    b = first_element('<div title="hello"></div>')
    assert not comp.equals(a, b)

def test_attribute_count_mismatch():
    comp = AttributeComparator()
    a = first_element('<div id="a"></div>')
    b = first_element('<div id="a" title="t"></div>')
    assert not comp.equals(a, b)

def test_attribute_name_mismatch():
    comp = AttributeComparator()
    a = first_element('<div id="a"></div>')
    b = first_element('<div title="a"></div>')
    assert not comp.equals(a, b)

def test_ignored_attributes_are_dropped():
    comp = AttributeComparator(DEFAULT_IGNORED_ATTRIBUTES)
    a = first_element('<div id="a" about="#mwt1" data-parsoid-diff="x"></div>')
    b = first_element('<div id="a" data-ve-changed="y"></div>')
    assert comp.normalize(a) == {'id': 'a'}
    assert comp.equals(a, b)

def test_attribute_differences():
    comp = AttributeComparator()
    a = first_element('<div id="a" title="t"></div>')
    b = first_element('<div id="b" lang="en" title="t"></div>')
    assert comp.differences(a, b) == {'id': ('a', 'b'), 'lang': (None, 'en')}

def test_text_nodes_compare_by_value():
    equality = make_equality()
    a = first_element('<p>Hello</p>').contents[0]
    b = first_element('<p>Hello</p>').contents[0]
    c = first_element('<p>hello</p>').contents[0]
    assert equality.tree_equals(a, b)
    assert not equality.tree_equals(a, c)

def test_text_and_comment_are_different_kinds():
    equality = make_equality()
    text, comment = first_element('<p>x<!--x--></p>').contents
    assert not equality.tree_equals(text, comment)

def test_element_and_text_are_different_kinds():
    equality = make_equality()
    p = first_element('<div><p>x</p>x</div>').p
    assert not equality.tree_equals(p, p.next_sibling)

def test_shallow_equality_ignores_children():
    equality = make_equality()
    a = first_element('<div class="c"><p>A</p></div>')
    b = first_element('<div class="c"><span>B</span><p>C</p></div>')
    assert equality.tree_equals(a, b, False)
    assert not equality.tree_equals(a, b, True)

def test_deep_equality():
    equality = make_equality()
    a = first_element('<ul><li class="x">1</li><li>2<!-- note --></li></ul>')
    b = first_element('<ul><li class="x">1</li><li>2<!-- note --></li></ul>')
    c = first_element('<ul><li class="x">1</li><li>2<!-- other --></li></ul>')
    assert equality.tree_equals(a, b, True)
    assert not equality.tree_equals(a, c, True)

def test_deep_equality_child_count():
    equality = make_equality()
    a = first_element('<ul><li>1</li></ul>')
    b = first_element('<ul><li>1</li><li>2</li></ul>')
    assert not equality.tree_equals(a, b, True)

def test_tag_name_mismatch():
    equality = make_equality()
    assert not equality.tree_equals(first_element('<b>x</b>'), first_element('<i>x</i>'))

def test_unknown_node_kind_is_rejected():
    equality = make_equality()
    with pytest.raises(MalformedNodeError):
        equality.tree_equals(object(), first_element('<p>x</p>'))

def test_non_string_payload_is_rejected():
    with pytest.raises(PayloadTypeError):
        text_payload(42)
    assert text_payload(first_element('<p>x</p>').contents[0]) == 'x'
