import csv
import io

import pandas as pd
import pytest

from flattable.converter import convert_to_csv, convert_to_dataframe
from flattable.decode import DecodeType
from flattable.errors import DecodeError


class TestConvertToCSV:

    def test_alphabetized_record(self):
        result = convert_to_csv(b'{"id": 1, "name": "test", "age": null}', alphabetize_headers=True)

        assert result == "age,id,name\r\n,1.000000,test\r\n"

    def test_inlined_list_is_quoted(self):
        result = convert_to_csv(b'{"id": 1, "tags": ["a", "b"]}')

        assert result == 'id,tags\r\n1.000000,"[a,b]"\r\n'

    def test_jsonl_events(self, test_assets_dir):
        with open(test_assets_dir / "test_events.jsonl", "rb") as f:
            result = convert_to_csv(f.read(), decode_type=DecodeType.JSONL)

        rows = list(csv.reader(io.StringIO(result)))

        assert rows[0] == ["event", "user.id", "user.name", "tags", "items.sku", "items.qty"]
        assert rows[1:] == [
            ["login", "1.000000", "Alice", "[web]", "", ""],
            ["purchase", "1.000000", "Alice", "", "book", "1.000000"],
            ["", "", "", "", "pen", "3.000000"],
            ["logout", "2.000000", "Bob", "", "", ""],
        ]

    def test_long_integer_literal(self):
        result = convert_to_csv(b'{"id": 1' + b"0" * 400 + b"}")

        assert result == "id\r\n1" + "0" * 400 + ".000000\r\n"

    def test_empty_input(self):
        assert convert_to_csv(b"[]") == ""

    def test_invalid_json(self):
        with pytest.raises(DecodeError):
            convert_to_csv(b"invalid json")


class TestConvertToDataFrame:

    def test_orders(self, test_assets_dir):
        with open(test_assets_dir / "test_orders.json", "rb") as f:
            df = convert_to_dataframe(f.read())

        assert isinstance(df, pd.DataFrame)
        assert list(df.columns) == ["order", "customer.name", "customer.vip", "lines.sku", "lines.qty", "notes"]
        assert df.shape == (3, 6)
        assert df.loc[0, "customer.vip"] == "true"
        assert df.loc[1, "lines.sku"] == "y"
        assert df.loc[1, "order"] == ""
        assert df.loc[2, "notes"] == "gift"

    def test_orders_alphabetized(self, test_assets_dir):
        with open(test_assets_dir / "test_orders.json", "rb") as f:
            df = convert_to_dataframe(f.read(), alphabetize_headers=True)

        assert list(df.columns) == ["customer.name", "customer.vip", "lines.qty", "lines.sku", "notes", "order"]

    def test_empty_input(self):
        assert convert_to_dataframe(b"").empty
