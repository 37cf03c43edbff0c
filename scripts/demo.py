#!/usr/bin/env python3
"""
Demo script for the AI cache.

This script walks through caching, expiry, eviction, stats and
similar-content lookup with a simulated AI call.
"""

import time

from ai_cache import AICacheService


def print_section(title: str) -> None:
    """Print a section header."""
    print("\n" + "=" * 70)
    print(f"  {title}")
    print("=" * 70)


def fake_polish(text: str) -> dict:
    """Stand-in for a slow AI completion call."""
    time.sleep(0.2)
    return {"success": True, "polished_text": text.strip().capitalize() + "."}


def demo_basic_cache(cache: AICacheService) -> None:
    """Demonstrate get/set through get_or_compute."""
    print_section("Basic Cache Operations")

    texts = ["um so the meeting is at three", "then we ship the release", "um so the meeting is at three"]

    for text in texts:
        start = time.time()
        result = cache.get_or_compute("polish_text", text, lambda t=text: fake_polish(t))
        duration = (time.time() - start) * 1000
        print(f"  '{text}' -> {result['polished_text']} ({duration:.1f}ms)")


def demo_expiry(cache: AICacheService) -> None:
    """Demonstrate per-entry TTL."""
    print_section("TTL Expiry")

    cache.set("generate_questions", "weekly review", ["What went well?"], ttl_ms=100)
    print(f"  Immediately: {cache.get('generate_questions', 'weekly review')}")
    time.sleep(0.15)
    print(f"  After 150ms: {cache.get('generate_questions', 'weekly review')}")


def demo_eviction() -> None:
    """Demonstrate oldest-write eviction on a tiny cache."""
    print_section("Oldest-Write Eviction")

    small = AICacheService.create(max_entries=3)
    for i in range(4):
        small.set("polish_text", f"note {i}", f"result {i}")
        time.sleep(0.002)

    for i in range(4):
        print(f"  note {i}: {small.get('polish_text', f'note {i}')}")


def demo_similar(cache: AICacheService) -> None:
    """Demonstrate digest-based similar content lookup."""
    print_section("Similar Content")

    for match in cache.get_similar_content("um so the meeting is at three", threshold=0.5):
        print(f"  {match.similarity:.2f}  {match.content}")


def main() -> None:
    cache = AICacheService.create()

    demo_basic_cache(cache)
    demo_expiry(cache)
    demo_eviction()
    demo_similar(cache)

    print_section("Stats")
    for name, value in cache.get_stats().to_dict().items():
        print(f"  {name}: {value}")


if __name__ == "__main__":
    main()
