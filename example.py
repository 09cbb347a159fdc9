#!/usr/bin/env python3
"""
Example usage of the JSON Normalizer.

This script normalizes a small order document and prints the records
and any warnings produced along the way.
"""

import json
from json_normalizer import JSONNormalizer


def main():
    """Main example function."""
    print("JSON Normalizer Example")
    print("=" * 50)

    # Create sample data
    sample_data = {
        " order_id ": "  A-1001  ",
        "placed_at": "2024-01-01T10:00:00Z",
        "quantities": ["001", "12", "2024-01-02T00:00:00+01:00", " note "],
        "customer": {
            "name": " Alice Johnson ",
            "email": "alice@example.com",
            "vip": True,
            "addresses": [
                {"city": " Oslo ", "zip": "0150"},
                {},
            ],
        },
        "total": 99.5,
    }

    normalizer = JSONNormalizer()
    output = normalizer.normalize_json(json.dumps(sample_data))

    print("📄 Normalized records:")
    print(output.json_string, end="")

    if output.warnings:
        print(f"⚠️  {len(output.warnings)} warnings:")
        for warning in output.warnings:
            print(f"   • {warning}")


if __name__ == "__main__":
    main()
