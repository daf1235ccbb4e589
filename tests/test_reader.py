#!/usr/bin/env python3
"""
NODECONF STRING READER SUITE
----------------------------
Verifies the string -> NodeConfiguration transformation:
1. One entry per whitespace-delimited token
2. Token order preserved, duplicates kept
3. Empty / blank sources
4. Idempotent reads
5. Insertion errors propagate unchanged

Author: NodeConf Team
Date: 2026-10-18
"""

import os
import sys

import pytest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '../src')))

from nodeconf.core.models import InvalidDescriptorError, NodeConfiguration
from nodeconf.reading.string_reader import ConfigStringReader

SCENARIOS = [
    ("node1 node2 node3", ["node1", "node2", "node3"]),
    ("", []),
    ("  nodeA   nodeB  ", ["nodeA", "nodeB"]),
    ("nodeX", ["nodeX"]),
    ("nodeA nodeA", ["nodeA", "nodeA"]),
    ("\tnode1\n\nnode2\r\nnode3 ", ["node1", "node2", "node3"]),
    ("   \t\n  ", []),
]


@pytest.mark.parametrize("source, expected", SCENARIOS)
def test_read_scenarios(source, expected):
    conf = ConfigStringReader(source).read()

    assert isinstance(conf, NodeConfiguration)
    assert conf.descriptors() == expected
    assert len(conf) == len(expected)


def test_entry_indexes_follow_token_order():
    conf = ConfigStringReader("10.0.0.1:22222 10.0.0.2:22222 host-c").read()

    assert [e.index for e in conf] == [0, 1, 2]
    assert conf[2].descriptor == "host-c"


def test_duplicates_are_not_merged():
    """Duplicate descriptors must stay separate entries."""
    conf = ConfigStringReader("nodeA nodeB nodeA").read()

    assert conf.descriptors() == ["nodeA", "nodeB", "nodeA"]
    assert conf[0] != conf[2]  # different index


def test_read_is_idempotent():
    """
    IDEMPOTENCY TEST: two reads give equal but independent configurations.
    """
    reader = ConfigStringReader("node1  node2 node3")

    first = reader.read()
    second = reader.read()

    assert first == second
    assert first is not second

    first.add_entry("node4")
    assert len(second) == 3


def test_source_is_kept_verbatim_and_read_only():
    reader = ConfigStringReader("  node1 ")

    reader.read()
    assert reader.source == "  node1 "

    with pytest.raises(AttributeError):
        reader.source = "other"


def test_insertion_error_propagates(monkeypatch):
    """
    FAIL-FAST TEST: whatever add_entry raises reaches the caller untouched.
    """
    class Boom(Exception):
        pass

    def failing_add_entry(self, descriptor):
        if descriptor == "bad":
            raise Boom(descriptor)
        return original_add_entry(self, descriptor)

    original_add_entry = NodeConfiguration.add_entry
    monkeypatch.setattr(NodeConfiguration, "add_entry", failing_add_entry)

    with pytest.raises(Boom) as exc_info:
        ConfigStringReader("good bad good").read()

    assert exc_info.value.args == ("bad",)


def test_token_count_matches_split():
    source = "a  b\tc\n d   e  f g"
    conf = ConfigStringReader(source).read()

    assert len(conf) == 7
    assert conf.descriptors() == ["a", "b", "c", "d", "e", "f", "g"]


def test_invalid_descriptor_error_is_value_error():
    assert issubclass(InvalidDescriptorError, ValueError)
