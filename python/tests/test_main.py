"""Tests for the termkit CLI."""

import pytest

from termkit.main import main


class TestCli:
    """Tests for main()."""

    def test_parse(self, capsys):
        """Test parsing qualified terms."""
        assert main(["parse", "earth@en", "mer"]) == 0
        out = capsys.readouterr().out
        assert "earth@en" in out
        assert "en (English)" in out
        assert "string:   mer" in out
        assert "language: -" in out

    def test_compare(self, capsys):
        """Test comparing strings against the threshold."""
        assert main(["compare", "ab", "ab"]) == 0
        assert "1.0000 MATCH" in capsys.readouterr().out

        assert main(["compare", "night", "nacht", "--threshold", "0.5"]) == 0
        assert "0.2500 NO MATCH" in capsys.readouterr().out

    def test_languages(self, capsys):
        """Test listing the catalog."""
        assert main(["languages"]) == 0
        out = capsys.readouterr().out
        assert "en  English" in out
        assert "ga  Irish" in out

    def test_date_utc(self, capsys):
        """Test re-rendering a date in UTC."""
        assert main(["date", "2015-06-01T14:30:00+0100", "--utc"]) == 0
        assert capsys.readouterr().out.strip() == "2015-06-01T13:30:00+0000"

    def test_date_invalid(self, capsys):
        """Test an invalid date fails with status 1."""
        assert main(["date", "not-a-date"]) == 1
        assert "ERROR" in capsys.readouterr().out

    def test_index(self, tmp_path, capsys, sample_term_list_content):
        """Test indexing a term list."""
        path = tmp_path / "terms.txt"
        path.write_text(sample_term_list_content, encoding="utf-8")

        assert main(["index", str(path)]) == 0
        out = capsys.readouterr().out
        assert "Lines read: 5" in out
        assert "Key terms: 4" in out
        assert "Duplicates: 1" in out
        assert "en: 1" in out

    def test_index_verbose(self, tmp_path, capsys, sample_term_list_content):
        """Test verbose indexing lists terms with line numbers."""
        path = tmp_path / "terms.txt"
        path.write_text(sample_term_list_content, encoding="utf-8")

        assert main(["--verbose", "index", str(path), "-l", "en"]) == 0
        out = capsys.readouterr().out
        assert "earth@en: 2, 7" in out
        assert "identifier@en: 6" in out

    def test_index_missing_file(self, tmp_path, capsys):
        """Test a missing term list fails with status 1."""
        assert main(["index", str(tmp_path / "missing.txt")]) == 1
        assert "ERROR" in capsys.readouterr().out

    def test_delete(self, tmp_path, capsys):
        """Test deleting a directory."""
        target = tmp_path / "out"
        (target / "sub").mkdir(parents=True)
        (target / "sub" / "file.txt").write_text("x")

        assert main(["delete", str(target)]) == 0
        assert not target.exists()
        assert "OK" in capsys.readouterr().out

    def test_no_command(self):
        """Test a command is required."""
        with pytest.raises(SystemExit):
            main([])
