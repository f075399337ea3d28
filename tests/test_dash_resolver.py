"""Tests for the dash disambiguation pass."""

import logging

from npmreq.versioning.dash import has_spaced_dash, resolve_dash
from npmreq.versioning.models import OperatorClauseNode
from npmreq.versioning.parser import parse_requirement


def first_clause(raw):
    return parse_requirement(raw).intersections[0].operator_clauses[0]


class TestHasSpacedDash:
    """Tests for the raw-text search."""

    def test_spacing_variants(self):
        """Whitespace on either or both sides counts."""
        for raw in ("1.1.1 - 2.2.2", "1.1.1 -2.2.2", "1.1.1- 2.2.2", " 1.1.1  -  2.2.2 "):
            clause = first_clause(raw.strip())
            assert has_spaced_dash(clause.version, raw), raw

    def test_tight_dash(self):
        """No whitespace around the dash means a pre-release."""
        clause = first_clause("1.1.1-2.2.2")
        assert not has_spaced_dash(clause.version, "1.1.1-2.2.2")

    def test_pre_release_dots_are_literal(self):
        """Dots in the pre-release are not regex wildcards."""
        clause = first_clause("1.1.1 - 2.2.2")
        assert not has_spaced_dash(clause.version, "1.1.1 - 2x2x2")


class TestResolveDash:
    """Tests for resolve_dash."""

    def test_spaced_range(self):
        """1.1.1 - 2.2.2 becomes a dash node."""
        node = resolve_dash(first_clause("1.1.1 - 2.2.2"), "1.1.1 - 2.2.2")
        assert node is not None
        assert node.lower.pre_release == ()
        assert (node.lower.major, node.lower.minor, node.lower.patch) == ("1", "1", "1")
        assert node.upper.text == "2.2.2"

    def test_upper_keeps_its_own_pre_release(self):
        """A hyphenated upper bound keeps its pre-release."""
        raw = "1.1.1 - 2.2.2-SNAPSHOT"
        node = resolve_dash(first_clause(raw), raw)
        assert node.upper.pre_release == ("SNAPSHOT",)

    def test_partial_upper(self):
        """A partial upper version is accepted."""
        raw = "1.0.0 - 2.0"
        node = resolve_dash(first_clause(raw), raw)
        assert (node.upper.major, node.upper.minor, node.upper.patch) == ("2", "0", None)

    def test_operator_is_dropped(self):
        """An operator in front of a disguised range does not stop the rewrite."""
        raw = ">=1.0.0 - 2.0.0"
        clause = first_clause(raw)
        assert clause.operator == ">="
        assert resolve_dash(clause, raw) is not None

    def test_tight_dash_stays_a_version(self):
        """1.1.1-2.2.2 stays a version with pre-release 2.2.2."""
        assert resolve_dash(first_clause("1.1.1-2.2.2"), "1.1.1-2.2.2") is None

    def test_build_blocks_rewrite(self):
        """A build segment keeps the literal a single version."""
        raw = "1.0.0 - 2.0.0+b"
        assert resolve_dash(first_clause(raw), raw) is None

    def test_non_version_pre_release(self):
        """Ordinary pre-release identifiers are left alone."""
        for raw in ("1.2.3-beta.2", "1.2.3 - beta", "1.2.3-SNASHOT1.2.3"):
            assert resolve_dash(first_clause(raw), raw) is None, raw

    def test_no_pre_release(self):
        """Plain versions are left alone."""
        clause = first_clause("1.2.3")
        assert isinstance(clause, OperatorClauseNode)
        assert resolve_dash(clause, "1.2.3") is None

    def test_debug_log(self, caplog):
        """A rewrite is traced at DEBUG with structured fields."""
        caplog.set_level(logging.DEBUG, logger="npmreq.versioning.dash")
        resolve_dash(first_clause("1.1.1 - 2.2.2"), "1.1.1 - 2.2.2")
        records = [r for r in caplog.records if getattr(r, "event", None) == "dash_resolved"]
        assert len(records) == 1
        assert records[0].upper == "2.2.2"
