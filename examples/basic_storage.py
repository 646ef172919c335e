#!/usr/bin/env python3
"""
Basic PasswordTreeLib usage.

This example demonstrates:
- Building storages ordered by different attributes
- Best/worst queries and lookups by probe
- Removing a record with two children
- Bulk loading with an error policy
"""

import sys
from pathlib import Path

# Add parent directory to path for development
sys.path.insert(0, str(Path(__file__).parent.parent))

from passwordtreelib import (
    Attribute,
    ContinueOnErrorsPolicy,
    Password,
    PasswordStorage,
    build_storage,
    get_storage_stats,
)


LEAKED = [
    Password("123456", occurrence=23_174_662, strength_rating=0.1),
    Password("password", occurrence=3_645_804, strength_rating=0.2),
    Password("qwerty", occurrence=3_810_555, strength_rating=0.4),
    Password("iloveyou", occurrence=1_296_186, strength_rating=1.1),
    Password("correct horse battery staple", occurrence=12, strength_rating=4.5),
]


def main():
    by_occurrence = build_storage(LEAKED, criterion=Attribute.OCCURRENCE)
    print("Ordered by occurrence:")
    print(by_occurrence, end="")
    print(f"Most common: {by_occurrence.get_best_password().password}")
    print(f"Least common: {by_occurrence.get_worst_password().password}")

    key = Password.probe(Attribute.OCCURRENCE, 3_645_804)
    print(f"Seen 3,645,804 times: {by_occurrence.lookup(key).password}")

    root = by_occurrence.remove_password(LEAKED[0])
    print(f"Removed {root.password}; still valid: {by_occurrence.is_valid_bst()}")

    by_strength = PasswordStorage(Attribute.STRENGTH_RATING)
    policy = ContinueOnErrorsPolicy(verbose=True)
    inserted = by_strength.add_passwords(LEAKED + [Password("again", strength_rating=0.4)],
                                         policy=policy)
    print(f"\nInserted {inserted} by strength, skipped {len(policy.skipped_records)}")
    print(f"Strongest: {by_strength.get_best_password().password}")

    stats = get_storage_stats(by_strength)
    print(f"Height {stats['height']}, leaves {stats['leaf_nodes']}")


if __name__ == "__main__":
    main()
