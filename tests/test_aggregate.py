"""Tests for the global and the tree aggregation of the allocation records"""
from __future__ import annotations

# Standard Imports

# Third-Party Imports

# Alloctop Imports
from alloctop.allocinfo import aggregate, parsing
from alloctop.allocinfo.structs import AllocationRecord, GlobalSummary, TreeEntry


def test_aggregate_global(allocinfo_basic, allocinfo_malformed):
    """Test that totals correspond to the sum over exactly the parsed records"""
    summary = aggregate.aggregate_global(parsing.parse_allocinfo(allocinfo_basic))
    assert summary == GlobalSummary(size=1466368, calls=358)

    # Comments and short lines do not contribute at all
    summary = aggregate.aggregate_global(parsing.parse_allocinfo(allocinfo_malformed))
    assert summary == GlobalSummary(size=64, calls=19)

    assert aggregate.aggregate_global([]) == GlobalSummary(size=0, calls=0)


def test_tag_prefixes():
    """Test generating of the prefixes of the tags"""
    assert aggregate.tag_prefixes("a/b/c") == ["a", "a/b", "a/b/c"]
    assert aggregate.tag_prefixes("mm/memory.c:4413 func:__pte_alloc") == [
        "mm",
        "mm/memory.c:4413 func:__pte_alloc",
    ]
    assert aggregate.tag_prefixes("single") == ["single"]
    # Leading and repeated separators create empty components, but are still aligned
    assert aggregate.tag_prefixes("/a//b") == ["", "/a", "/a/", "/a//b"]


def test_aggregate_tree_is_prefix_additive():
    """Test that each record contributes to all the prefixes of its tag"""
    records = [
        AllocationRecord(size=100, calls=1, tag="a/b/c"),
        AllocationRecord(size=10, calls=2, tag="a/b/d"),
        AllocationRecord(size=1, calls=3, tag="a/b"),
        AllocationRecord(size=7, calls=4, tag="x/y"),
    ]
    tree = aggregate.aggregate_tree(records)
    assert tree == {
        "a": TreeEntry(111, 6),
        "a/b": TreeEntry(111, 6),
        "a/b/c": TreeEntry(100, 1),
        "a/b/d": TreeEntry(10, 2),
        "x": TreeEntry(7, 4),
        "x/y": TreeEntry(7, 4),
    }

    # Records with the same tag are accumulated
    tree = aggregate.aggregate_tree(records + [AllocationRecord(size=5, calls=5, tag="x/y")])
    assert tree["x"] == TreeEntry(12, 9)
    assert tree["x/y"] == TreeEntry(12, 9)

    assert aggregate.aggregate_tree([]) == {}


def test_aggregate_tree_report(allocinfo_basic):
    """Test that roots of the tree sum all records starting with the component"""
    records = parsing.parse_allocinfo(allocinfo_basic)
    tree = aggregate.aggregate_tree(records)

    assert tree["mm"] == TreeEntry(1064960, 260)
    assert tree["fs"] == TreeEntry(270336, 66)
    assert tree["fs/ext4"] == TreeEntry(270336, 66)
    assert tree["kernel"] == TreeEntry(131072, 32)
    assert tree["version: 1.0"] == TreeEntry(0, 0)

    roots = [entry for prefix, entry in tree.items() if "/" not in prefix]
    assert sum(entry.size for entry in roots) == aggregate.aggregate_global(records).size


def test_sorted_tree_entries():
    """Test sorting and filtering of the aggregated tree"""
    records = [
        AllocationRecord(size=5, calls=1, tag="b/small"),
        AllocationRecord(size=8, calls=1, tag="b/other"),
        AllocationRecord(size=3, calls=1, tag="a"),
    ]
    tree = aggregate.aggregate_tree(records)

    entries = aggregate.sorted_tree_entries(tree)
    assert [prefix for prefix, _ in entries] == ["a", "b", "b/other", "b/small"]

    # The ancestor is kept, although both of its leaves are below the threshold
    entries = aggregate.sorted_tree_entries(tree, min_size=10)
    assert entries == [("b", TreeEntry(13, 2))]

    # The threshold is inclusive
    entries = aggregate.sorted_tree_entries(tree, min_size=8)
    assert [prefix for prefix, _ in entries] == ["b", "b/other"]

    assert aggregate.sorted_tree_entries(tree, min_size=100) == []
