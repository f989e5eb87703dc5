import logging
import os
import re
from html.parser import HTMLParser

logger = logging.getLogger(__name__)


class ChartCellParser(HTMLParser):
    """
    Collects the text of every table cell (td) that sits
    inside a table row, which is where Phonology Assistant
    puts the phones of its consonant and vowel charts.
    """

    def __init__(self):
        super().__init__()
        self.cells = list()
        self._table_depth = 0
        self._row_depth = 0
        self._cell_text = None

    def handle_starttag(self, tag, attrs):
        if tag == "table":
            self._table_depth += 1
        elif tag == "tr" and self._table_depth > 0:
            self._row_depth += 1
        elif tag == "td" and self._row_depth > 0:
            self._close_cell()
            self._cell_text = list()

    def handle_endtag(self, tag):
        if tag == "td":
            self._close_cell()
        elif tag == "tr" and self._row_depth > 0:
            self._close_cell()
            self._row_depth -= 1
        elif tag == "table" and self._table_depth > 0:
            self._close_cell()
            self._table_depth -= 1

    def handle_data(self, data):
        if self._cell_text is not None:
            self._cell_text.append(data)

    def close(self):
        super().close()
        self._close_cell()

    def _close_cell(self):
        if self._cell_text is not None:
            self.cells.append("".join(self._cell_text))
            self._cell_text = None


def _unique(symbols):
    return list(dict.fromkeys(symbols))


def extract_phones_from_html(html):
    parser = ChartCellParser()
    parser.feed(html)
    parser.close()
    return _unique(cell.strip() for cell in parser.cells if cell.strip())


def extract_phones_from_text(text):
    return _unique(symbol for symbol in re.split(r"[\s,]+", text) if symbol)


def read_inventory_file(path):
    with open(path, "r", encoding="utf8") as f:
        try:
            content = f.read()
        except UnicodeDecodeError as e:
            raise ValueError(f"{path} is not a UTF-8 encoded inventory: {e}")
    if os.path.splitext(path)[1].lower() in (".html", ".htm"):
        phones = extract_phones_from_html(content)
    else:
        phones = extract_phones_from_text(content)
    logger.debug(f"read {len(phones)} symbols from {path}")
    return phones


def filter_to_matrix(symbols, matrix):
    """
    Turns imported symbols into a universe: order is kept,
    duplicates and symbols without an entry in the feature
    matrix are dropped.
    """
    symbols = list(symbols)
    universe = [symbol for symbol in _unique(symbols) if symbol in matrix]
    dropped = len(set(symbols)) - len(universe)
    if dropped > 0:
        logger.info(f"dropped {dropped} imported symbols that have no feature values")
    return universe


if __name__ == '__main__':
    from Preprocessing.feature_matrix import get_reference_matrix

    example_chart = "<table><tr><td>p</td><td>b</td></tr><tr><td>m</td><td>ʘ</td></tr></table>"
    print(filter_to_matrix(extract_phones_from_html(example_chart), get_reference_matrix()))
