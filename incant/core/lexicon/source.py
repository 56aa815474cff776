# incant/core/lexicon/source.py
"""
Tabular lexicon input.

Source tables are laid out with one row per vowel and one column per
consonant, each cell holding a primitive label or nothing:

        |   | K      | L         | M   | ...
        |---|--------|-----------|-----|
        | A | I      | Slider    | Add | ...
        | E | Gravity| Elevation |     | ...

Row and column order are presentation only; the table is flattened into
(consonant + vowel) -> primitive pairs before it reaches `LexiconTable.build`.
"""

from __future__ import annotations

from typing import List, Optional, Sequence, Tuple

from incant.core.domain.alphabet import Consonant, Vowel, is_consonant, is_vowel
from incant.core.domain.exceptions import LexiconSourceError, MalformedSyllableError
from incant.core.lexicon.table import LexiconTable

Row = Tuple[str, Sequence[Optional[str]]]


def flatten_rows(columns: Sequence[str], rows: Sequence[Row]) -> List[Tuple[str, Optional[str]]]:
    """
    Turns vowel rows x consonant columns into (spelling, primitive) pairs.
    Blank cells are kept as None so the table builder sees them as gaps.
    """
    columns = [c.strip().upper() for c in columns]
    if len(set(columns)) != len(columns):
        raise LexiconSourceError(f"Repeated consonant column in {columns}.")
    for consonant in columns:
        if not is_consonant(consonant):
            raise MalformedSyllableError(consonant)

    pairs: List[Tuple[str, Optional[str]]] = []
    seen_vowels = set()
    for vowel, cells in rows:
        vowel = vowel.strip().upper()
        if not is_vowel(vowel):
            raise MalformedSyllableError(vowel)
        if vowel in seen_vowels:
            raise LexiconSourceError(f"Vowel row '{vowel}' appears twice.")
        seen_vowels.add(vowel)

        if len(cells) != len(columns):
            raise LexiconSourceError(
                f"Row '{vowel}' has {len(cells)} cells but the table has {len(columns)} columns."
            )
        for consonant, cell in zip(columns, cells):
            label = cell.strip() if isinstance(cell, str) else None
            pairs.append((consonant + vowel, label or None))
    return pairs


def table_from_rows(dialect_id: str, columns: Sequence[str], rows: Sequence[Row]) -> LexiconTable:
    return LexiconTable.build(dialect_id, flatten_rows(columns, rows))


def _split_pipe_row(line: str) -> List[str]:
    line = line.strip()
    if line.startswith("|"):
        line = line[1:]
    if line.endswith("|"):
        line = line[:-1]
    return [cell.strip() for cell in line.split("|")]


def _is_alignment_row(cells: Sequence[str]) -> bool:
    return all(cell and set(cell) <= set("-: ") for cell in cells)


def parse_markdown_table(text: str) -> Tuple[List[str], List[Row]]:
    """
    Reads a markdown pipe table into (columns, rows).

    The header's first cell is a corner label and is ignored; the remaining
    header cells are consonants. Each body row starts with its vowel.
    """
    lines = [line for line in text.splitlines() if line.strip().startswith("|")]
    if not lines:
        raise LexiconSourceError("No pipe table found in lexicon source.")

    header = _split_pipe_row(lines[0])
    columns = header[1:]
    if not columns:
        raise LexiconSourceError("Lexicon table header has no consonant columns.")

    rows: List[Row] = []
    for line in lines[1:]:
        cells = _split_pipe_row(line)
        if _is_alignment_row(cells):
            continue
        rows.append((cells[0], cells[1:]))
    return columns, rows


def render_markdown_table(
    table: LexiconTable,
    vowels: Optional[Sequence[str]] = None,
    consonants: Optional[Sequence[str]] = None,
    corner: str = "",
) -> str:
    """
    Lays a table out as a markdown grid in any row/column order.
    Gaps render as empty cells.
    """
    vowels = list(vowels or [v.value for v in Vowel])
    consonants = list(consonants or [c.value for c in Consonant])

    lines = [
        "| " + " | ".join([corner] + consonants) + " |",
        "|" + "|".join(["---"] * (len(consonants) + 1)) + "|",
    ]
    for vowel in vowels:
        cells = [table.get(consonant + vowel) or "" for consonant in consonants]
        lines.append("| " + " | ".join([vowel] + cells) + " |")
    return "\n".join(lines) + "\n"
