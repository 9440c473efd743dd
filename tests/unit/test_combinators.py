"""
Unit tests for primitive and structural combinators.
"""

import pytest
from static_schema.schema import (
    array,
    boolean,
    intersection,
    literals,
    literals_or,
    make,
    number,
    partial,
    record,
    string,
    sum_,
    tuple_,
    type_,
    union,
    unknown_array,
    unknown_record,
)


def probe(name, calls):
    """Build a node that records when it is rendered."""
    def render():
        calls.append(name)
        return name
    return make(render)


class TestPrimitives:
    """Test constant primitive nodes."""

    def test_primitive_renders(self):
        """Test every primitive renders its fixed signature."""
        assert string() == "string"
        assert number() == "number"
        assert boolean() == "boolean"
        assert unknown_array() == "Array<unknown>"
        assert unknown_record() == "Record<string, unknown>"

    def test_render_method_matches_call(self):
        """Test render() and calling the node are equivalent."""
        assert string.render() == string()


class TestLiterals:
    """Test literal-set constructors."""

    def test_literals_mixed_values(self):
        """Test strings are quoted and numbers/booleans are bare."""
        assert literals(["a", 1, True, 2.5])() == '("a" | 1 | true | 2.5)'

    def test_literals_single_value(self):
        """Test a single literal is still parenthesized."""
        assert literals(["circle"])() == '("circle")'

    def test_literals_preserve_order(self):
        """Test literal order is preserved."""
        assert literals(["z", "a", "m"])() == '("z" | "a" | "m")'

    def test_literals_escape_strings(self):
        """Test strings use their JSON encoding."""
        assert literals(['say "hi"'])() == '("say \\"hi\\"")'

    def test_literals_keep_non_ascii(self):
        """Test non-ASCII strings are written as-is, not escaped."""
        assert literals(["café", "日本"])() == '("café" | "日本")'

    def test_literals_empty_raises(self):
        """Test empty input fails at construction time."""
        with pytest.raises(ValueError, match="at least one value"):
            literals([])

    def test_literals_unsupported_value(self):
        """Test non-literal values are rejected."""
        with pytest.raises(TypeError, match="Unsupported literal"):
            literals([{"a": 1}])

    def test_literals_or(self):
        """Test literals unioned with a fallback."""
        assert literals_or(["auto"], number)() == '(("auto") | number)'

    def test_literals_or_empty_raises(self):
        """Test literals_or shares the non-empty precondition."""
        with pytest.raises(ValueError):
            literals_or([], string)


class TestStructural:
    """Test structural combinators."""

    def test_type(self):
        """Test record rendering in insertion order."""
        assert type_({"a": string, "b": number})() == "{ a: string; b: number; }"

    def test_type_empty(self):
        """Test an empty record."""
        assert type_({})() == "{  }"

    def test_partial(self):
        """Test partial wraps the record rendering."""
        assert partial({"a": string})() == "Partial<{ a: string; }>"

    def test_record(self):
        """Test string-keyed map."""
        assert record(number)() == "Record<string, number>"

    def test_array(self):
        """Test array."""
        assert array(string)() == "Array<string>"

    def test_nesting_composes(self):
        """Test nested combinators compose textually."""
        assert array(record(boolean))() == "Array<Record<string, boolean>>"

    def test_tuple(self):
        """Test tuple."""
        assert tuple_([string, number])() == "[string, number]"
        assert tuple_([boolean])() == "[boolean]"

    def test_tuple_arity(self):
        """Test tuple supports 1 to 5 members."""
        assert tuple_([string] * 5)() == "[string, string, string, string, string]"
        with pytest.raises(ValueError, match="1 to 5"):
            tuple_([])
        with pytest.raises(ValueError, match="1 to 5"):
            tuple_([string] * 6)

    def test_intersection(self):
        """Test intersection of two records."""
        node = intersection([type_({"a": string}), type_({"b": number})])
        assert node() == "({ a: string; } & { b: number; })"

    def test_intersection_arity(self):
        """Test intersection supports 2 to 5 members."""
        with pytest.raises(ValueError, match="2 to 5"):
            intersection([string])
        with pytest.raises(ValueError, match="2 to 5"):
            intersection([string] * 6)

    def test_union(self):
        """Test union."""
        assert union([string, boolean])() == "(string | boolean)"

    def test_union_nesting_adds_parentheses(self):
        """Test nested unions keep their own parentheses."""
        assert union([union([string, number]), boolean])() == "((string | number) | boolean)"

    def test_union_empty_raises(self):
        """Test empty union fails at construction time."""
        with pytest.raises(ValueError, match="at least one member"):
            union([])

    def test_non_node_member_raises(self):
        """Test members must be signature nodes."""
        with pytest.raises(TypeError, match="not a signature node"):
            array("string")
        with pytest.raises(TypeError, match="field 'a'"):
            type_({"a": 1})


class TestSum:
    """Test discriminated sum combinator."""

    def test_sum(self):
        """Test sum renders one disjunct per member in order."""
        shape = sum_("kind")({
            "circle": type_({"kind": literals(["circle"]), "radius": number}),
            "square": type_({"kind": literals(["square"]), "side": number}),
        })

        assert shape() == (
            '({ kind: ("circle"); radius: number; } | '
            '{ kind: ("square"); side: number; })'
        )

    def test_sum_empty_raises(self):
        """Test sum requires at least one member."""
        with pytest.raises(ValueError, match="sum\\('kind'\\)"):
            sum_("kind")({})


class TestDeferredEvaluation:
    """Test that construction never renders children."""

    def test_construction_does_not_render(self):
        """Test building a tree evaluates nothing."""
        calls = []
        node = array(type_({"a": probe("x", calls)}))
        partial({"b": probe("y", calls)})
        union([probe("z", calls)])

        assert calls == []
        node()
        assert calls == ["x"]

    def test_children_render_in_sequence_order(self):
        """Test children render in sequence order at render time."""
        calls = []
        node = union([probe("a", calls), probe("b", calls), probe("c", calls)])

        assert node() == "(a | b | c)"
        assert calls == ["a", "b", "c"]

    def test_each_render_reevaluates(self):
        """Test a node renders its children once per render call."""
        calls = []
        node = record(probe("a", calls))

        node()
        node()
        assert calls == ["a", "a"]

    def test_idempotent_rendering(self):
        """Test rendering the same non-lazy node twice gives identical output."""
        node = type_({
            "id": number,
            "tags": array(string),
            "meta": record(union([string, number])),
            "pair": tuple_([string, boolean]),
        })

        assert node() == node()
