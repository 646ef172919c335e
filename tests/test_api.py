"""Tests for the high-level API functions."""

import pytest

from passwordtreelib import (
    Attribute,
    CollectErrorsPolicy,
    DuplicateEntryError,
    Password,
    StorageConfig,
    build_storage,
    find_passwords,
    get_storage_stats,
    traverse_storage,
)
from passwordtreelib.testing import make_passwords


class TestBuildStorage:
    """Test build_storage."""

    def test_build_by_occurrence(self):
        storage = build_storage(make_passwords([5, 2, 8, 1, 9]), criterion=Attribute.OCCURRENCE)

        assert storage.size() == 5
        assert storage.get_best_password().occurrence == 9
        assert storage.is_valid_bst()

    def test_build_with_config(self):
        config = StorageConfig.strict(Attribute.STRENGTH_RATING)
        storage = build_storage(
            make_passwords([1.5, 0.5, 3.0], Attribute.STRENGTH_RATING),
            config=config,
        )

        assert storage.get_comparison_criteria() is Attribute.STRENGTH_RATING
        assert storage.get_worst_password().strength_rating == 0.5

    def test_build_fails_fast_by_default(self):
        with pytest.raises(DuplicateEntryError):
            build_storage(make_passwords([1, 2, 1]))

    def test_build_with_policy(self):
        policy = CollectErrorsPolicy()
        storage = build_storage(make_passwords([1, 2, 1]), policy=policy)

        assert storage.size() == 2
        assert len(policy.errors) == 1


class TestTraverseAndFind:
    """Test traverse_storage and find_passwords."""

    def test_traverse_storage_default_is_in_order(self, scenario_storage):
        assert [(p.occurrence, d) for p, d in traverse_storage(scenario_storage)] == [
            (1, 2), (2, 1), (5, 0), (8, 1), (9, 2)
        ]

    def test_traverse_storage_by_name(self, scenario_storage):
        order = [p.occurrence for p, _ in traverse_storage(scenario_storage, "pre_order")]
        assert order == [5, 2, 1, 8, 9]

    def test_find_passwords(self):
        storage = build_storage([
            Password("weak", occurrence=50, strength_rating=0.5),
            Password("okay", occurrence=20, strength_rating=2.0),
            Password("meh", occurrence=10, strength_rating=1.0),
        ])

        weak = find_passwords(storage, lambda p: p.strength_rating < 1.5)
        assert [p.password for p in weak] == ["meh", "weak"]


class TestStorageStats:
    """Test get_storage_stats."""

    def test_scenario_stats(self, scenario_storage):
        stats = get_storage_stats(scenario_storage)

        assert stats['total_nodes'] == 5
        assert stats['leaf_nodes'] == 2
        assert stats['internal_nodes'] == 3
        assert stats['height'] == 3
        assert stats['depths'] == {0: 1, 1: 2, 2: 2}
        assert stats['is_valid']

    def test_empty_stats(self, storage):
        stats = get_storage_stats(storage)

        assert stats['total_nodes'] == 0
        assert stats['height'] == 0
        assert stats['depths'] == {}
        assert stats['is_valid']

    def test_height_matches_storage(self):
        storage = build_storage(make_passwords(range(6)))
        assert get_storage_stats(storage)['height'] == storage.height() == 6
