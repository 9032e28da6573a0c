import dataclasses

import pytest

from kodama.node import Element, Node, Text, make_element, make_text


@pytest.mark.ci
def test_make_text():
    node = make_text("Hello")
    assert isinstance(node, Text)
    assert node.text == "Hello"
    assert node.children == ()


@pytest.mark.ci
def test_make_text_allows_empty_data():
    assert make_text("").text == ""


@pytest.mark.ci
def test_make_element():
    child = make_text("Link")
    node = make_element("a", {"href": "http://example.com"}, [child])
    assert isinstance(node, Element)
    assert node.tag == "a"
    assert node.attributes == {"href": "http://example.com"}
    assert node.children == (child,)


@pytest.mark.ci
def test_make_element_does_not_validate():
    node = make_element("", {"": "?"}, [])
    assert node.tag == ""
    assert node.attributes == {"": "?"}
    assert node.children == ()


@pytest.mark.ci
def test_make_element_copies_attributes():
    attributes = {"id": "main"}
    node = make_element("div", attributes, [])
    attributes["id"] = "changed"
    assert node.attributes == {"id": "main"}


@pytest.mark.ci
def test_nodes_are_immutable():
    node = make_element("p", {}, [make_text("x")])
    with pytest.raises(dataclasses.FrozenInstanceError):
        node.tag = "div"  # type: ignore[misc]


@pytest.mark.ci
def test_attributes_are_read_only():
    node = make_element("a", {"href": "x"}, [])
    with pytest.raises(TypeError):
        node.attributes["href"] = "changed"  # type: ignore[index]
    assert node.attributes == {"href": "x"}


@pytest.mark.ci
def test_direct_construction_copies_attributes():
    attributes = {"href": "x"}
    node = Element(tag="a", attributes=attributes)
    attributes["href"] = "changed"
    assert node.attributes == {"href": "x"}
    with pytest.raises(TypeError):
        node.attributes["href"] = "changed"  # type: ignore[index]


@pytest.mark.ci
def test_base_node_is_abstract():
    with pytest.raises(TypeError):
        Node()


@pytest.mark.ci
def test_structural_equality():
    a = make_element("p", {"class": "c"}, [make_text("x")])
    b = make_element("p", {"class": "c"}, [make_text("x")])
    assert a == b
    assert a != make_element("p", {"class": "c"}, [make_text("y")])
    assert a != make_element("p", {"class": "d"}, [make_text("x")])


@pytest.mark.ci
def test_nodes_are_hashable():
    a = make_element("p", {"class": "c", "id": "i"}, [make_text("x")])
    b = make_element("p", {"id": "i", "class": "c"}, [make_text("x")])
    assert hash(a) == hash(b)
    assert hash(make_text("x")) == hash(make_text("x"))
    assert len({a, b}) == 1


@pytest.mark.ci
def test_repr():
    assert repr(make_text("Hi")) == "'Hi'"
    assert repr(make_element("br", {}, [])) == "<br>"
    node = make_element("div", {"class": "btn", "id": "submit"}, [])
    assert repr(node) == '<div class="btn" id="submit">'
