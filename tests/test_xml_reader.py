"""Tests for the XML -> Node reader."""

import io

import pytest
from xmltree2json._internal.xml_reader import XMLReadError, read_xml
from xmltree2json.kernel.node import Node

OSM_XML = b"""<?xml version="1.0" encoding="UTF-8"?>
<osm version="0.6" generator="CGImap 0.0.2">
 <bounds minlat="54.0889580" minlon="12.2487570" maxlat="54.0913900" maxlon="12.2524800"/>
 <foo>bar</foo>
</osm>
"""


def test_root_is_synthetic_container():
    root = read_xml("<hello>world</hello>")
    assert root.data == ""
    assert list(root.children) == ["hello"]
    assert root.children["hello"] == [Node(data="world")]


def test_attributes_become_prefixed_leaves():
    root = read_xml(OSM_XML)
    osm = root.children["osm"][0]
    assert osm.children["-version"] == [Node(data="0.6")]
    assert osm.children["-generator"] == [Node(data="CGImap 0.0.2")]
    bounds = osm.children["bounds"][0]
    assert sorted(bounds.children) == ["-maxlat", "-maxlon", "-minlat", "-minlon"]
    assert bounds.data == ""


def test_custom_attribute_prefix():
    root = read_xml('<a id="1"/>', attribute_prefix="@")
    assert root.children["a"][0].children["@id"] == [Node(data="1")]


def test_whitespace_between_elements_is_dropped():
    root = read_xml(OSM_XML)
    assert root.children["osm"][0].data == ""


def test_text_is_stripped():
    root = read_xml("<a>\n   padded  \n</a>")
    assert root.children["a"][0].data == "padded"


def test_repeated_elements_keep_document_order():
    root = read_xml("<list><i>3</i><i>1</i><i>2</i></list>")
    items = root.children["list"][0].children["i"]
    assert [item.data for item in items] == ["3", "1", "2"]


def test_mixed_content_collects_text_and_tails():
    root = read_xml("<p>Hello <b>world</b> again</p>")
    p = root.children["p"][0]
    assert p.data == "Hello again"
    assert p.children["b"] == [Node(data="world")]


def test_namespaces_are_stripped():
    root = read_xml('<a:doc xmlns:a="urn:x" a:lang="en"><a:item>v</a:item></a:doc>')
    doc = root.children["doc"][0]
    assert doc.children["-lang"] == [Node(data="en")]
    assert doc.children["item"] == [Node(data="v")]


def test_default_namespace_is_stripped():
    root = read_xml('<feed xmlns="http://www.w3.org/2005/Atom"><title>t</title></feed>')
    assert root.children["feed"][0].children["title"] == [Node(data="t")]


def test_entities_are_decoded():
    root = read_xml("<a>x &lt; y &amp; z</a>")
    assert root.children["a"][0].data == "x < y & z"


def test_path_source(tmp_path):
    path = tmp_path / "doc.xml"
    path.write_bytes(OSM_XML)
    assert read_xml(path) == read_xml(OSM_XML)


def test_file_object_source():
    assert read_xml(io.BytesIO(OSM_XML)) == read_xml(OSM_XML)


def test_missing_path(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_xml(tmp_path / "missing.xml")


def test_malformed_xml():
    with pytest.raises(XMLReadError) as excinfo:
        read_xml("<a><b></a>")
    assert isinstance(excinfo.value, ValueError)
    assert "Malformed XML" in str(excinfo.value)


def test_empty_element_is_empty_leaf():
    root = read_xml("<a><empty/></a>")
    assert root.children["a"][0].children["empty"] == [Node()]


def test_text_runs_are_stripped_and_joined():
    root = read_xml("<p>\n  one\n  <b/>\n  two  <i/>  <u/> three\n</p>")
    assert root.children["p"][0].data == "one two three"


def test_deeply_nested_document():
    depth = 1500
    root = read_xml("<a>" * depth + "x" + "</a>" * depth)
    node = root
    for _ in range(depth):
        assert list(node.children) == ["a"]
        node = node.children["a"][0]
    assert node == Node(data="x")
