"""Quickstart for cistring.

Demonstrates case-insensitive header keys that keep their original spelling.

Run this example:
    python examples/quickstart.py

Python 3.13+.
"""

from __future__ import annotations

from cistring import CaseInsensitiveDict, CIString, ci, ci_arguments

# ==============================================================================
# Example 1: Equality, hashing and display
# ==============================================================================


def example_1_equality() -> None:
    """Three spellings, one key, three displays."""
    print("=" * 70)
    print("Example 1: Equality, hashing and display")
    print("=" * 70)

    spellings = [ci("Accept"), ci("accept"), ci("ACCEPT")]
    print(f"all equal:      {spellings[0] == spellings[1] == spellings[2]}")
    print(f"one hash:       {len({hash(s) for s in spellings}) == 1}")
    print(f"displays:       {[str(s) for s in spellings]}")
    print(f"Straße==STRAẞE: {ci('Straße') == ci('STRAẞE')}")
    print()


# ==============================================================================
# Example 2: Header map preserving the last-written spelling
# ==============================================================================


def example_2_headers() -> None:
    """CaseInsensitiveDict as an HTTP header map."""
    print("=" * 70)
    print("Example 2: Header map")
    print("=" * 70)

    headers = CaseInsensitiveDict({"content-type": "text/plain", "Host": "example.org"})
    headers["Content-Type"] = "application/json"
    for name, value in headers.items():
        print(f"{name}: {value}")
    print()


# ==============================================================================
# Example 3: Accepting plain strings at an API boundary
# ==============================================================================


@ci_arguments("name")
def is_hop_by_hop(name: CIString) -> bool:
    """Return True for hop-by-hop header names."""
    return name in {ci("Connection"), ci("Keep-Alive"), ci("Transfer-Encoding"), ci("Upgrade")}


def example_3_conversion() -> None:
    """ci_arguments converts str arguments to CIString."""
    print("=" * 70)
    print("Example 3: ci_arguments")
    print("=" * 70)

    for name in ["connection", "KEEP-ALIVE", "Content-Length"]:
        print(f"{name!r:20} hop-by-hop={is_hop_by_hop(name)}")
    print()


if __name__ == "__main__":
    example_1_equality()
    example_2_headers()
    example_3_conversion()
