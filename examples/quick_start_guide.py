#!/usr/bin/env python3
"""
Quick Start Guide for HyperXML.

Builds a small tree by hand, serializes it, parses it back and edits it by
path.
"""

import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from lxml import etree

from hyperxml import HyperXML, XMLNode


def quick_start_example():
    """Quick start example showing basic usage."""

    print("QUICK START - HyperXML")
    print("=" * 30)

    # Step 1: Build a tree by hand
    print("\nStep 1: Building a tree")
    print("-" * 30)

    book = XMLNode("book", prefix="lib")
    book.add_attribute("xmlns:lib", "urn:library")
    book.add_attribute("id", "123")
    book.append_child(XMLNode("title", value="My Book"))
    book.append_child(XMLNode("author", value="John Doe"))
    price = XMLNode("price", value="19.99")
    price.add_attribute("currency", "USD")
    book.append_child(price)

    print(f"Created {book!r}")

    # Step 2: Marshall to text
    print("\nStep 2: Marshalling")
    print("-" * 30)

    codec = HyperXML()
    text = codec.marshall(book)
    print(text)

    # Step 3: Unmarshall and edit by path
    print("Step 3: Unmarshalling and editing by path")
    print("-" * 30)

    parsed = codec.unmarshall(text)
    print(f"title: {parsed.get_value_at_path('title')}")
    print(f"currency: {parsed.get_attribute_at_path('price', 'currency')}")

    parsed.set_value_at_path("price", "24.99")
    parsed.add_node_at_path("author", XMLNode("email", value="john@example.com"))
    print(codec.marshall(parsed))

    # Step 4: Malformed input
    print("Step 4: Malformed input")
    print("-" * 30)

    try:
        codec.unmarshall("<book><title></book>")
    except etree.XMLSyntaxError as e:
        print(f"Rejected: {e}")


if __name__ == "__main__":
    quick_start_example()
