#!/usr/bin/env python3
"""Basic test script to verify the fuzzy search functionality."""

import sys

from fuzzyfind import Searcher, fuzzy, search


def test_basic_functionality():
    """Test basic fuzzy search functionality."""
    print("🚀 Testing fuzzyfind")
    print("=" * 50)

    candidates = [
        "Amsterdam", "Barcelona", "Berlin", "Buenos Aires", "Copenhagen",
        "Lisbon", "London", "Los Angeles", "New York", "San Francisco",
    ]

    print("📊 Building searcher...")
    searcher = Searcher(candidates, return_match_data=True)
    print(f"✅ Cached {len(searcher)} candidates")

    # Test cases
    test_cases = [
        ("london", "Exact match"),
        ("lond", "Prefix while typing"),
        ("barcelna", "Single typo - missing 'o'"),
        ("cpenhagn", "Multiple typos"),
        ("xyz123", "No match"),
        ("LISBON", "Case insensitive"),
        ("lodnon", "Transposition"),
        ("san fran", "Multi-word prefix"),
    ]

    print("\n🔍 Running test cases...")
    print("-" * 50)

    for query, description in test_cases:
        print(f"\nQuery: '{query}' ({description})")
        results = searcher.search(query)
        print(f"  📊 Total results: {len(results)}")

        if results:
            for i, res in enumerate(results, 1):
                print(f"  📋 Result {i}:")
                print(f"     Item: {res.item}")
                print(f"     Score: {res.score:.2f}")
                print(f"     Match: {res.original[res.match.index:res.match.index + res.match.length]!r}")
        else:
            print("  ❌ No results found")

    # Test single scoring
    print("\n🎯 Testing single scores...")
    print("-" * 50)

    for query, candidate in [("hello", "hello there"), ("help", "hello"), ("abcd", "acbd")]:
        print(f"fuzzy({query!r}, {candidate!r}) = {fuzzy(query, candidate):.2f}")

    # Uncached search agrees with the searcher
    print("\n🔄 Comparing with uncached search...")
    print("-" * 50)

    uncached = search("lon", candidates)
    cached = [res.item for res in searcher.search("lon")]
    print(f"search: {uncached}")
    print(f"Searcher: {cached}")
    assert uncached == cached

    print("\n✅ All tests completed successfully!")


if __name__ == "__main__":
    try:
        test_basic_functionality()
    except Exception as e:
        print(f"\n❌ Test failed with error: {e}")
        import traceback
        traceback.print_exc()
        sys.exit(1)
