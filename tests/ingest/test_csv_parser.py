import pytest

from roster_browser.ingest.csv_parser import CsvFormatError, parse_csv


class TestParseCsv:
    def test_header_names_fields(self) -> None:
        parsed = parse_csv(b"Name,Team\nKim,Heroes\nLee,Heroes\n")

        assert parsed.header == ("Name", "Team")
        assert [row.values for row in parsed.rows] == [
            {"Name": "Kim", "Team": "Heroes"},
            {"Name": "Lee", "Team": "Heroes"},
        ]

    def test_blank_lines_are_skipped(self) -> None:
        parsed = parse_csv("\nName,Team\n\nKim,Heroes\n   \nLee,Heroes\n\n")

        assert [row.values["Name"] for row in parsed.rows] == ["Kim", "Lee"]
        assert [row.line for row in parsed.rows] == [4, 6]

    def test_values_are_kept_verbatim(self) -> None:
        parsed = parse_csv("Name,Team\n Kim , Heroes \n")
        assert parsed.rows[0].values == {"Name": " Kim ", "Team": " Heroes "}

    def test_quoted_fields(self) -> None:
        parsed = parse_csv('Name,Note\n"Choo, Shin-soo","said ""hi"""\n')
        assert parsed.rows[0].values == {"Name": "Choo, Shin-soo", "Note": 'said "hi"'}

    def test_crlf_line_endings(self) -> None:
        parsed = parse_csv(b"Name,Team\r\nKim,Heroes\r\n")
        assert parsed.rows[0].values == {"Name": "Kim", "Team": "Heroes"}

    def test_utf8_bom_is_stripped(self) -> None:
        parsed = parse_csv("\ufeffName,Team\nKim,Heroes\n".encode())
        assert parsed.header == ("Name", "Team")

    def test_bom_in_text_input_is_stripped(self) -> None:
        parsed = parse_csv("\ufeffName\nKim\n")
        assert parsed.header == ("Name",)

    def test_non_ascii_values(self) -> None:
        parsed = parse_csv("이름,팀\n김하성,히어로즈\n".encode())
        assert parsed.rows[0].values == {"이름": "김하성", "팀": "히어로즈"}

    def test_short_row_omits_trailing_fields(self) -> None:
        parsed = parse_csv("Name,Team,Bats\nKim,Heroes\n")
        assert parsed.rows[0].values == {"Name": "Kim", "Team": "Heroes"}

    def test_header_only_yields_no_rows(self) -> None:
        parsed = parse_csv("Name,Team\n")
        assert parsed.header == ("Name", "Team")
        assert parsed.rows == ()

    def test_header_names_are_trimmed(self) -> None:
        parsed = parse_csv("Name , Team\nKim,Heroes\n")
        assert parsed.header == ("Name", "Team")


class TestParseCsvErrors:
    def test_empty_text(self) -> None:
        with pytest.raises(CsvFormatError, match="no header row"):
            parse_csv(b"")

    def test_only_blank_lines(self) -> None:
        with pytest.raises(CsvFormatError, match="no header row"):
            parse_csv("\n\n  \n")

    def test_invalid_utf8(self) -> None:
        with pytest.raises(CsvFormatError, match="not valid UTF-8"):
            parse_csv(b"Name\n\xff\xfe\xfa\n")

    def test_row_longer_than_header(self) -> None:
        with pytest.raises(CsvFormatError) as exc_info:
            parse_csv("Name,Team\nKim,Heroes\nLee,Heroes,extra\n")
        assert exc_info.value.line == 3

    def test_duplicate_header(self) -> None:
        with pytest.raises(CsvFormatError, match="repeats column"):
            parse_csv("Name,Name\nKim,Lee\n")

    def test_blank_header_name(self) -> None:
        with pytest.raises(CsvFormatError, match="blank column name"):
            parse_csv("Name,,Team\nKim,x,Heroes\n")

    def test_unterminated_quote(self) -> None:
        with pytest.raises(CsvFormatError):
            parse_csv('Name,Team\n"Kim,Heroes\n')
