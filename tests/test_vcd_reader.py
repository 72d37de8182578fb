"""Tests for the VCD reader (bytes -> VcdTree)."""

import pytest

from vcd2svg.data_model import TimeUnit, Timescale, ValueChange, VarDeclaration
from vcd2svg.errors import VcdParseError
from vcd2svg.vcd_reader import read_vcd
from .test_utils import TestFiles, read_test_input


class TestDeclarations:
    """Scopes, names and header sections."""

    def test_simple_declarations(self, simple_tree):
        """Leaf names are prefixed with the scope path."""
        assert simple_tree.declarations == [
            VarDeclaration(id_code="!", name="test clk", size=1, var_type="wire"),
            VarDeclaration(id_code='"', name="test rst", size=1, var_type="wire"),
        ]

    def test_header_sections(self, simple_tree):
        assert simple_tree.date == "Date text"
        assert simple_tree.version == "test"
        assert simple_tree.timescale == Timescale(1, TimeUnit.NANOSECONDS)

    def test_nested_scopes(self):
        """Scopes nest and unwind with $upscope."""
        tree = read_vcd(read_test_input(TestFiles.BLINKY_VCD))
        names = [d.name for d in tree.declarations]
        assert names == ["top clk", "top blink", "top counter clk", "top counter count"]
        assert tree.timescale == Timescale(1, TimeUnit.MICROSECONDS)
        assert tree.comments == ["Generated by a CXXRTL testbench"]

    def test_bit_index_kept_in_name(self):
        data = (
            b"$scope module top $end\n"
            b"$var wire 8 ! data [7:0] $end\n"
            b"$var wire 1 \" flag [3] $end\n"
            b"$upscope $end\n"
            b"$enddefinitions $end\n"
        )
        names = [d.name for d in read_vcd(data).declarations]
        assert names == ["top data[7:0]", "top flag[3]"]

    def test_duplicate_declarations_are_kept(self):
        """Rejecting a reused code is the timeline builder's job."""
        data = (
            b"$var wire 1 ! a $end\n"
            b"$var wire 1 ! b $end\n"
            b"$enddefinitions $end\n"
        )
        tree = read_vcd(data)
        assert [d.id_code for d in tree.declarations] == ["!", "!"]

    def test_default_timescale(self):
        tree = read_vcd(b"$enddefinitions $end\n")
        assert tree.timescale == Timescale()
        assert str(tree.timescale) == "1 ps"


class TestValueChanges:
    """Literals are carried the way they appear in the trace."""

    def test_scalar_changes(self, simple_tree):
        assert simple_tree.changes == [
            ValueChange(0, "!", "0"), ValueChange(0, '"', "1"),
            ValueChange(1, "!", "1"), ValueChange(1, '"', "0"),
            ValueChange(2, "!", "0"), ValueChange(2, '"', "1"),
        ]

    def test_vector_changes(self, bus_vcd):
        tree = read_vcd(bus_vcd)
        data_changes = [c.value for c in tree.changes if c.id_code == '"']
        assert data_changes == ["b1010", "b1111", "b0000"]
        addr_changes = [c.value for c in tree.changes if c.id_code == "#"]
        assert addr_changes == ["bx", "b00000011"]

    def test_vector_literals_kept_as_written(self):
        """Short, over-long and upper-case vectors are neither padded, trimmed nor lower-cased."""
        tree = read_vcd(read_test_input(TestFiles.LITERALS_VCD))
        nibble = [c.value for c in tree.changes if c.id_code == "!"]
        addr = [c.value for c in tree.changes if c.id_code == '"']
        assert nibble == ["b1", "b1X"]
        assert addr == ["b11", "b0000000101", "b0110"]

    def test_several_vectors_on_one_line(self):
        data = (
            b"$var wire 4 ! a $end\n"
            b"$var wire 4 \" b $end\n"
            b"$enddefinitions $end\n"
            b"#0 b01 ! b1 \"\n"
        )
        assert [c.value for c in read_vcd(data).changes] == ["b01", "b1"]

    def test_dumpvars_changes_belong_to_current_time(self, bus_vcd):
        tree = read_vcd(bus_vcd)
        at_zero = [c for c in tree.changes if c.time == 0]
        assert {c.id_code for c in at_zero} == {"!", '"', "#"}

    def test_changes_before_first_time_marker(self):
        data = (
            b"$var wire 1 ! a $end\n"
            b"$enddefinitions $end\n"
            b"1!\n"
            b"#5\n"
            b"0!\n"
        )
        assert read_vcd(data).changes == [ValueChange(0, "!", "1"), ValueChange(5, "!", "0")]


class TestParseErrors:
    """Malformed input surfaces as VcdParseError."""

    def test_not_a_vcd(self):
        """'$This is not a VCD$' is rejected."""
        with pytest.raises(VcdParseError):
            read_vcd(read_test_input(TestFiles.NOT_A_VCD))

    def test_empty_input(self):
        with pytest.raises(VcdParseError, match="enddefinitions"):
            read_vcd(b"")

    def test_missing_enddefinitions(self):
        with pytest.raises(VcdParseError):
            read_vcd(b"$scope module top $end\n$var wire 1 ! a $end\n")

    def test_parse_error_is_value_error(self):
        with pytest.raises(ValueError):
            read_vcd(b"$This is not a VCD$")


class TestTimescale:

    def test_magnitude_other_than_one(self):
        tree = read_vcd(read_test_input(TestFiles.LITERALS_VCD))
        assert tree.timescale == Timescale(10, TimeUnit.NANOSECONDS)

    @pytest.mark.parametrize("declaration, expected", [
        (b"$timescale 100 us $end", Timescale(100, TimeUnit.MICROSECONDS)),
        (b"$timescale 1fs $end", Timescale(1, TimeUnit.FEMTOSECONDS)),
        (b"$timescale 10 s $end", Timescale(10, TimeUnit.SECONDS)),
    ])
    def test_timescale_declarations(self, declaration, expected):
        tree = read_vcd(declaration + b"\n$enddefinitions $end\n")
        assert tree.timescale == expected

    @pytest.mark.parametrize("text, unit", [
        ("fs", TimeUnit.FEMTOSECONDS),
        (" NS ", TimeUnit.NANOSECONDS),
        ("us", TimeUnit.MICROSECONDS),
        ("s", TimeUnit.SECONDS),
    ])
    def test_unit_from_string(self, text, unit):
        assert TimeUnit.from_string(text) is unit

    def test_unknown_unit(self):
        assert TimeUnit.from_string("hours") is None

