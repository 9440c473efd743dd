"""
Unit tests for reference naming.
"""

import threading

import pytest
from static_schema.schema.naming import (
    RefCell,
    RefNamer,
    current_namer,
    default_namer,
    use_namer,
)


class TestRefNamer:
    """Test name minting."""

    def test_names_increase(self):
        """Test names use a strictly increasing counter."""
        namer = RefNamer()
        assert namer.next_name() == "$Ref1"
        assert namer.next_name() == "$Ref2"
        assert namer.count == 2

    def test_custom_prefix_and_start(self):
        """Test prefix and start are configurable."""
        namer = RefNamer(prefix="T", start=41)
        assert namer.next_name() == "T42"

    def test_negative_start_raises(self):
        """Test the counter cannot start below zero."""
        with pytest.raises(ValueError, match="non-negative"):
            RefNamer(start=-1)

    def test_declare_keeps_first(self):
        """Test a name keeps its first declared expansion."""
        namer = RefNamer()
        namer.declare("$Ref1", "string")
        namer.declare("$Ref1", "number")
        assert namer.declarations == {"$Ref1": "string"}

    def test_declarations_is_a_copy(self):
        """Test mutating the returned table does not affect the namer."""
        namer = RefNamer()
        namer.declarations["$Ref1"] = "string"
        assert namer.declarations == {}

    def test_concurrent_minting_is_unique(self):
        """Test names minted from many threads are all distinct."""
        namer = RefNamer()
        names = []
        lock = threading.Lock()

        def worker():
            for _ in range(100):
                name = namer.next_name()
                with lock:
                    names.append(name)

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert len(set(names)) == 800
        assert namer.count == 800


class TestActiveNamer:
    """Test namer activation."""

    def test_default_is_active(self):
        """Test the default namer is active outside any block."""
        assert current_namer() is default_namer()

    def test_use_namer_scopes_activation(self):
        """Test use_namer activates a namer only inside the block."""
        namer = RefNamer()
        with use_namer(namer) as active:
            assert active is namer
            assert current_namer() is namer
        assert current_namer() is default_namer()

    def test_use_namer_nests(self):
        """Test nested activation restores the outer namer."""
        outer, inner = RefNamer(), RefNamer()
        with use_namer(outer):
            with use_namer(inner):
                assert current_namer() is inner
            assert current_namer() is outer


class TestRefCell:
    """Test the write-once cell."""

    def test_first_claim_resolves(self):
        """Test the first claim mints a name and reports first=True."""
        cell = RefCell()
        namer = RefNamer()

        assert not cell.resolved
        assert cell.claim(namer) == ("$Ref1", True)
        assert cell.resolved
        assert cell.name == "$Ref1"

    def test_later_claims_reuse_name(self):
        """Test later claims never mint again."""
        cell = RefCell()
        namer = RefNamer()

        cell.claim(namer)
        assert cell.claim(namer) == ("$Ref1", False)
        assert cell.claim(RefNamer(prefix="$Other")) == ("$Ref1", False)
        assert namer.count == 1
