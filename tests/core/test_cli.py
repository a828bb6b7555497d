import io
import sys

from flattable.cli import main


class TestCLI:

    def test_writes_output_file(self, test_assets_dir, tmp_path):
        output = tmp_path / "orders.csv"

        exit_code = main([str(test_assets_dir / "test_orders.json"), "-o", str(output), "--alphabetize"])

        assert exit_code == 0
        lines = output.read_text(encoding="utf-8").splitlines()
        assert lines[0] == "customer.name,customer.vip,lines.qty,lines.sku,notes,order"
        assert lines[1] == "Ann,true,2.000000,x,,A1"
        assert len(lines) == 4

    def test_writes_stdout(self, test_assets_dir, capsys):
        exit_code = main([str(test_assets_dir / "test_simple.jsonl"), "--format", "jsonl"])

        assert exit_code == 0
        out = capsys.readouterr().out
        assert out.splitlines() == [
            "id,name,age",
            "1.000000,Alice,30.000000",
            "2.000000,Bob,25.000000",
            "3.000000,Charlie,35.000000",
        ]

    def test_reads_stdin(self, monkeypatch, capsys):
        monkeypatch.setattr(sys, "stdin", io.TextIOWrapper(io.BytesIO(b'{"foo": {"bar": "baz"}}')))

        exit_code = main(["-"])

        assert exit_code == 0
        assert capsys.readouterr().out.splitlines() == ["foo.bar", "baz"]

    def test_invalid_input(self, tmp_path, caplog):
        path = tmp_path / "broken.json"
        path.write_bytes(b"{not json")

        exit_code = main([str(path)])

        assert exit_code == 1
        assert "Failed to convert" in caplog.text

    def test_missing_file(self, tmp_path):
        assert main([str(tmp_path / "missing.json")]) == 1
