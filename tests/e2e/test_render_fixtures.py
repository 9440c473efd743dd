"""
End-to-end test: render the schema fixtures through the full pipeline.

Each fixture is loaded from disk, checked, parsed and rendered, the same way the
``render`` command does it.
"""

import json
from pathlib import Path

import pytest

from static_schema.schema import RefNamer, parse_schema, render
from static_schema.validation import check_schema


FIXTURES_DIR = Path(__file__).parent.parent / "fixtures" / "schemas"


def load_fixture(name):
    with open(FIXTURES_DIR / name) as f:
        return json.load(f)


@pytest.mark.e2e
class TestRenderFixtures:
    """Render every fixture schema."""

    @pytest.mark.parametrize("name", ["person.json", "jsonrpc.json", "filesystem.json"])
    def test_fixture_passes_check(self, name):
        """Test every fixture is a valid, supported schema."""
        result = check_schema(load_fixture(name))
        assert result.is_valid, result.errors

    def test_person_record(self):
        """Test nested objects with required and optional fields."""
        namer = RefNamer()
        signature = render(parse_schema(load_fixture("person.json"), namer=namer), namer=namer)

        assert signature == (
            "({ name: string; age: number; } & "
            "Partial<{ email: string; "
            "address: ({ street: string; city: string; } & Partial<{ zipcode: string; }>); "
            "tags: Array<string>; }>)"
        )
        assert namer.count == 0

    def test_jsonrpc_request(self):
        """Test const values and type arrays."""
        signature = render(parse_schema(load_fixture("jsonrpc.json")))

        assert signature == (
            '({ jsonrpc: ("2.0"); method: string; id: (number | string | null); } & '
            "Partial<{ params: Record<string, unknown>; }>)"
        )

    def test_recursive_filesystem(self):
        """Test a recursive discriminated union and its declaration table."""
        namer = RefNamer()
        node = parse_schema(load_fixture("filesystem.json"), namer=namer)

        file_ = '{ kind: ("file"); name: string; size: number; }'
        directory = '{ kind: ("directory"); name: string; entries: Array<$Ref1>; }'

        assert render(node) == f"({file_} | {directory})"
        assert render(node) == "$Ref1"
        assert namer.declarations == {
            "$Ref1": f"({file_} | {directory})",
            "$Ref2": file_,
            "$Ref3": directory,
        }
