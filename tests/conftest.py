"""Common test fixtures and utilities for vcd2svg tests."""

import pytest

from vcd2svg import read_vcd, table_from_bytes
from .test_utils import TestFiles, get_test_input_path, read_test_input


@pytest.fixture
def simple_vcd():
    """Raw bytes of the two-signal reference trace."""
    return read_test_input(TestFiles.SIMPLE_VCD)


@pytest.fixture
def bus_vcd():
    return read_test_input(TestFiles.BUS_VCD)


@pytest.fixture
def blinky_vcd_path():
    """Path to the nested-scope trace."""
    return get_test_input_path(TestFiles.BLINKY_VCD)


@pytest.fixture
def simple_tree(simple_vcd):
    return read_vcd(simple_vcd)


@pytest.fixture
def simple_table(simple_vcd):
    """Normalized Table of simple.vcd."""
    return table_from_bytes(simple_vcd)


@pytest.fixture
def bus_table(bus_vcd):
    return table_from_bytes(bus_vcd)
