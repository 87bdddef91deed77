def strip_bom(text: str) -> str:
    """Strip a UTF-8 BOM from the start of text (spreadsheet exports often include it)."""
    return text.removeprefix("\ufeff")


def is_blank_row(row: list[str]) -> bool:
    return not row or (len(row) == 1 and not row[0].strip())
