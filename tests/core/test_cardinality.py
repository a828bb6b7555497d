import pytest

from flattable.cardinality import rows_for_record, rows_for_sequence


class TestRowsForRecord:

    @pytest.mark.parametrize("record", [
        {},
        {"id": 1, "name": "test"},
        {"user": {"name": "John", "address": {"city": "Paris"}}},
        {"level1": {"level2": {"level3": {"value": "deep"}}}},
    ])
    def test_record_without_sequences_is_one_row(self, record):
        assert rows_for_record(record) == 1

    def test_scalar_sequence_keeps_one_row(self):
        assert rows_for_record({"tags": ["python", "ruby"], "scores": []}) == 1

    def test_sequence_of_records_adds_rows(self):
        record = {"id": 1, "items": [{"sku": "a"}, {"sku": "b"}, {"sku": "c"}]}
        assert rows_for_record(record) == 3

    def test_sibling_sequences_are_summed(self):
        record = {"a": [{"p": 1}, {"p": 2}], "b": [{"q": 1}]}
        assert rows_for_record(record) == 3

    def test_bare_nested_record_does_not_contribute(self):
        record = {"meta": {"tags": [{"t": "a"}, {"t": "b"}]}}
        assert rows_for_record(record) == 1


class TestRowsForSequence:

    def test_empty_sequence(self):
        assert rows_for_sequence([]) == 0

    def test_all_scalar_sequence(self):
        assert rows_for_sequence([1, "two", None, True, [3, 4]]) == 0

    def test_flat_records_are_one_row_each(self):
        records = [{"id": n} for n in range(5)]
        assert rows_for_sequence(records) == 5

    def test_nested_sequences_of_records(self):
        value = [{"x": [{"y": [{"z": 1}]}, {"y": [{"z": 2}]}]}]
        assert rows_for_sequence(value) == 2

    def test_deep_expansion(self):
        value = [
            {"x": [{"a": 1, "ys": [{"z": 1}, {"z": 2}]}, {"a": 2, "ys": [{"z": 3}]}]},
            {"x": []},
        ]
        assert rows_for_sequence(value) == 4

    def test_scalars_mixed_with_records(self):
        assert rows_for_sequence([1, {"a": 1}, "b", {"a": 2}]) == 2
