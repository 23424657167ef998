"""
Tests for prompts/parser.py - XML escaping and value serialization.
"""

import unittest
from dataclasses import dataclass
from decimal import Decimal

from xmlprompt.core.errors import SerializationDepthError
from xmlprompt.prompts.parser import escape_xml, object_to_xml, simple_xml_tag


class TestEscapeXml(unittest.TestCase):
    """Test cases for escape_xml."""

    def test_escapes_ampersand(self):
        self.assertEqual(escape_xml("Tom & Jerry"), "Tom &amp; Jerry")

    def test_escapes_angle_brackets(self):
        self.assertEqual(escape_xml("5 < 10"), "5 &lt; 10")
        self.assertEqual(escape_xml("10 > 5"), "10 &gt; 5")

    def test_escapes_quotes(self):
        self.assertEqual(escape_xml('He said "hello"'), "He said &quot;hello&quot;")
        self.assertEqual(escape_xml("It's working"), "It&apos;s working")

    def test_escapes_every_occurrence(self):
        result = escape_xml("""<tag attr="value">5 < 10 & 'test'</tag>""")
        self.assertEqual(
            result,
            "&lt;tag attr=&quot;value&quot;&gt;5 &lt; 10 &amp; &apos;test&apos;&lt;/tag&gt;",
        )

    def test_plain_text_unchanged(self):
        self.assertEqual(escape_xml("Hello World"), "Hello World")
        self.assertEqual(escape_xml(""), "")

    def test_entities_are_not_double_escaped_within_one_pass(self):
        self.assertEqual(escape_xml("<"), "&lt;")

    def test_escaping_is_not_idempotent(self):
        once = escape_xml("a & b")
        self.assertEqual(escape_xml(once), "a &amp;amp; b")
        self.assertNotEqual(escape_xml(once), once)


class TestSimpleXmlTag(unittest.TestCase):
    """Test cases for simple_xml_tag."""

    def test_without_index(self):
        self.assertEqual(simple_xml_tag("name", "Alice"), "<name>Alice</name>")

    def test_with_index(self):
        self.assertEqual(simple_xml_tag("name", "Alice", 0), '<name index="0">Alice</name>')


class TestObjectToXmlPrimitives(unittest.TestCase):
    """Test cases for scalar values."""

    def test_string_is_escaped(self):
        self.assertEqual(object_to_xml("hello"), "hello")
        self.assertEqual(object_to_xml("a < b"), "a &lt; b")

    def test_numbers(self):
        self.assertEqual(object_to_xml(42), "42")
        self.assertEqual(object_to_xml(2.5), "2.5")

    def test_booleans(self):
        self.assertEqual(object_to_xml(True), "true")
        self.assertEqual(object_to_xml(False), "false")

    def test_none_is_empty(self):
        self.assertEqual(object_to_xml(None), "")

    def test_index_does_not_affect_scalars(self):
        self.assertEqual(object_to_xml("x", 3), "x")


class TestObjectToXmlContainers(unittest.TestCase):
    """Test cases for lists and mappings."""

    def test_list_of_primitives(self):
        self.assertEqual(object_to_xml([1, 2, 3]), "123")
        self.assertEqual(object_to_xml(("a", "b"), 0), "ab")

    def test_empty_containers(self):
        self.assertEqual(object_to_xml([]), "")
        self.assertEqual(object_to_xml({}), "")

    def test_simple_mapping(self):
        self.assertEqual(
            object_to_xml({"name": "Alice", "age": 30}),
            "<name>Alice</name><age>30</age>",
        )

    def test_mapping_values_are_escaped(self):
        self.assertEqual(
            object_to_xml({"message": "Hello <world> & 'test'"}),
            "<message>Hello &lt;world&gt; &amp; &apos;test&apos;</message>",
        )

    def test_nested_mapping(self):
        self.assertEqual(
            object_to_xml({"user": {"name": "Bob", "age": 25}}),
            "<user><name>Bob</name><age>25</age></user>",
        )

    def test_mapping_with_list_value(self):
        self.assertEqual(object_to_xml({"items": [1, 2, 3]}), "<items>123</items>")

    def test_none_value_renders_empty_element(self):
        self.assertEqual(object_to_xml({"note": None}), "<note></note>")

    def test_index_applies_to_mapping_fields(self):
        self.assertEqual(object_to_xml({"name": "Test"}, 5), '<name index="5">Test</name>')

    def test_index_is_not_forwarded_to_descendants(self):
        self.assertEqual(
            object_to_xml({"user": {"name": "Bob"}}, 1),
            '<user index="1"><name>Bob</name></user>',
        )

    def test_mixed_nested_structure(self):
        result = object_to_xml(
            {"user": {"name": "Charlie", "tags": ["admin", "user"], "active": True}}
        )
        self.assertEqual(
            result,
            "<user><name>Charlie</name><tags>adminuser</tags><active>true</active></user>",
        )

    def test_list_of_mappings_stamps_index_on_each_field(self):
        result = object_to_xml([{"id": 1, "name": "First"}, {"id": 2, "name": "Second"}])
        self.assertEqual(
            result,
            '<id index="0">1</id><name index="0">First</name>'
            '<id index="1">2</id><name index="1">Second</name>',
        )

    def test_list_of_k_mappings_yields_k_indexed_fields_in_order(self):
        records = [{"f": i * 10} for i in range(4)]
        result = object_to_xml(records)
        expected = "".join(f'<f index="{i}">{i * 10}</f>' for i in range(4))
        self.assertEqual(result, expected)

    def test_mapping_keeps_insertion_order(self):
        self.assertEqual(object_to_xml({"b": 1, "a": 2}), "<b>1</b><a>2</a>")

    def test_dataclass_is_serialized_like_mapping(self):
        @dataclass
        class Point:
            x: int
            y: int

        self.assertEqual(object_to_xml(Point(1, 2)), "<x>1</x><y>2</y>")
        self.assertEqual(object_to_xml([Point(3, 4)]), '<x index="0">3</x><y index="0">4</y>')

    def test_other_objects_use_escaped_str(self):
        class Thing:
            def __str__(self):
                return "<thing>"

        self.assertEqual(object_to_xml(Thing()), "&lt;thing&gt;")


class TestObjectToXmlDepth(unittest.TestCase):
    """Test cases for the nesting limit."""

    def test_cyclic_value_raises(self):
        value = {"name": "loop"}
        value["self"] = value
        with self.assertRaises(SerializationDepthError):
            object_to_xml(value)

    def test_cyclic_list_raises(self):
        value = []
        value.append(value)
        with self.assertRaises(SerializationDepthError):
            object_to_xml(value)

    def test_depth_within_limit(self):
        value = {"a": {"b": {"c": 1}}}
        self.assertEqual(object_to_xml(value, max_depth=3), "<a><b><c>1</c></b></a>")

    def test_leaf_values_do_not_count_as_nesting(self):
        self.assertEqual(
            object_to_xml({"a": Decimal("1.5")}, max_depth=1),
            "<a>1.5</a>",
        )
        self.assertEqual(object_to_xml(Decimal("2"), max_depth=1), "2")

    def test_depth_over_limit(self):
        value = {"a": {"b": {"c": {"d": 1}}}}
        with self.assertRaises(SerializationDepthError) as context:
            object_to_xml(value, max_depth=3)
        self.assertEqual(context.exception.max_depth, 3)
        self.assertIsInstance(context.exception, ValueError)


if __name__ == "__main__":
    unittest.main()
