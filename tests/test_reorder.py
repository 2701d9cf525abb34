"""Tests for the reorder engine."""

import pytest

from pdfshuffler.services.reorder import (
    DEFAULT_POLICY,
    InterleavePolicy,
    inverse_plan,
    reorder,
    reorder_plan,
    restore_order,
)
from pdfshuffler.utils.exceptions import EmptyDocumentError, OddPageCountError

POLICIES = list(InterleavePolicy)


class TestConcreteOrders:
    def test_reversed_back_four_pages(self):
        assert reorder(["A", "B", "C", "D"], InterleavePolicy.REVERSED_BACK) == [
            "A",
            "D",
            "B",
            "C",
        ]

    def test_sequential_back_four_pages(self):
        assert reorder(["A", "B", "C", "D"], InterleavePolicy.SEQUENTIAL_BACK) == [
            "A",
            "C",
            "B",
            "D",
        ]

    def test_default_policy_is_reversed_back(self):
        assert DEFAULT_POLICY is InterleavePolicy.REVERSED_BACK
        assert reorder(["A", "B", "C", "D"]) == ["A", "D", "B", "C"]

    def test_two_pages_unchanged(self):
        for policy in POLICIES:
            assert reorder(["front", "back"], policy) == ["front", "back"]

    def test_six_page_plans(self):
        assert reorder_plan(6, InterleavePolicy.REVERSED_BACK) == [0, 5, 1, 4, 2, 3]
        assert reorder_plan(6, InterleavePolicy.SEQUENTIAL_BACK) == [0, 3, 1, 4, 2, 5]


class TestMappingProperties:
    @pytest.mark.parametrize("policy", POLICIES)
    def test_permutation_and_index_mapping(self, policy):
        for n in range(2, 42, 2):
            pages = [f"p{i}" for i in range(n)]
            result = reorder(pages, policy)
            half = n // 2

            assert len(result) == n
            assert sorted(result) == sorted(pages)
            for i in range(half):
                assert result[2 * i] == pages[i]
                if policy is InterleavePolicy.REVERSED_BACK:
                    assert result[2 * i + 1] == pages[n - 1 - i]
                else:
                    assert result[2 * i + 1] == pages[half + i]

    @pytest.mark.parametrize("policy", POLICIES)
    def test_inverse_composes_to_identity(self, policy):
        for n in range(2, 30, 2):
            pages = list(range(n))
            assert restore_order(reorder(pages, policy), policy) == pages
            assert reorder(restore_order(pages, policy), policy) == pages

    def test_inverse_plan_values(self):
        assert inverse_plan(4, InterleavePolicy.REVERSED_BACK) == [0, 2, 3, 1]

    def test_reversed_back_is_not_idempotent(self):
        for n in range(4, 30, 2):
            pages = list(range(n))
            twice = reorder(reorder(pages))
            assert twice != pages

    def test_input_not_mutated(self):
        pages = ["A", "B", "C", "D"]
        reorder(pages)
        assert pages == ["A", "B", "C", "D"]

    def test_accepts_tuples(self):
        assert reorder(("A", "B", "C", "D")) == ["A", "D", "B", "C"]


class TestRejections:
    @pytest.mark.parametrize("policy", POLICIES)
    def test_empty_sequence(self, policy):
        with pytest.raises(EmptyDocumentError):
            reorder([], policy)

    @pytest.mark.parametrize("n", [1, 3, 5, 7, 21])
    def test_odd_count(self, n):
        with pytest.raises(OddPageCountError) as exc_info:
            reorder(list(range(n)))
        assert exc_info.value.page_count == n
        assert f"({n})" in str(exc_info.value)

    def test_plan_rejects_odd_count(self):
        with pytest.raises(OddPageCountError):
            reorder_plan(9, InterleavePolicy.SEQUENTIAL_BACK)


class TestInterleavePolicyNames:
    def test_from_name(self):
        assert InterleavePolicy.from_name("reversed-back") is InterleavePolicy.REVERSED_BACK
        assert InterleavePolicy.from_name("SEQUENTIAL_BACK") is InterleavePolicy.SEQUENTIAL_BACK

    def test_unknown_name_raises(self):
        with pytest.raises(ValueError, match="Unknown interleave policy"):
            InterleavePolicy.from_name("zigzag")
