"""
Tests for the prontuário service helpers.
"""
from medvibe.records.service import normalize_requested_exams


def test_list_of_names_is_kept_in_order():
    assert normalize_requested_exams(["Hemograma", "PCR", "Raio-X"]) == ["Hemograma", "PCR", "Raio-X"]


def test_list_of_strings_is_kept_exactly():
    assert normalize_requested_exams(["Hemograma", " PCR ", ""]) == ["Hemograma", " PCR ", ""]


def test_lists_with_non_string_items_become_empty():
    assert normalize_requested_exams([1, 2.5]) == []
    assert normalize_requested_exams(["Hemograma", None]) == []


def test_non_list_values_become_empty():
    for value in (None, "Hemograma", {"a": 1}, 7, ("PCR",)):
        assert normalize_requested_exams(value) == []
