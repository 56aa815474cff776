# incant/adapters/persistence/filesystem_repo.py
"""
Filesystem lexicon source.

Layout, one folder per dialect:

    <base_path>/
        v1/
            table.json | table.md   # vowel rows x consonant columns
            words.json              # authored words
            instructions.json       # meaning -> engine instructions
        v2/
            ...

Error behaviour
---------------
- A missing file raises `FileNotFoundError`.
- Invalid JSON or an unexpected shape raises `LexiconSourceError`.
"""

import json
import os
from pathlib import Path
from typing import Any, Dict, List, Union

import structlog
from pydantic import ValidationError

from incant.core.domain.exceptions import LexiconSourceError
from incant.core.domain.models import Instruction, WordEntry
from incant.core.lexicon.source import parse_markdown_table, table_from_rows
from incant.core.lexicon.table import LexiconTable
from incant.core.ports.lexicon_repository import ILexiconRepository

logger = structlog.get_logger()


class FileSystemLexiconRepository(ILexiconRepository):
    """
    Concrete implementation of the Lexicon Repository using local JSON and
    markdown files. Read-only: dialects are configuration, not user data.
    """

    TABLE_JSON = "table.json"
    TABLE_MARKDOWN = "table.md"
    WORDS = "words.json"
    INSTRUCTIONS = "instructions.json"

    def __init__(self, base_path: Union[str, Path]):
        self.base_path = Path(base_path)

    def _dialect_dir(self, dialect_id: str) -> Path:
        return self.base_path / dialect_id

    def _load_json(self, path: Path) -> Dict[str, Any]:
        """
        Load a JSON file and return the top-level object.

        Raises:
            FileNotFoundError: if the file does not exist.
            LexiconSourceError: if the contents are not valid JSON or not a dict.
        """
        if not path.is_file():
            raise FileNotFoundError(f"Lexicon file not found at: {path}")

        try:
            with path.open("r", encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise LexiconSourceError(f"Failed to parse lexicon JSON at {path}: {e}") from e

        if not isinstance(data, dict):
            raise LexiconSourceError(
                f"Lexicon JSON at {path} must be a top-level object, got {type(data).__name__!r}."
            )
        return data

    # --- Interface Implementation ---

    def list_dialects(self) -> List[str]:
        if not self.base_path.is_dir():
            return []
        return sorted(
            p.name for p in self.base_path.iterdir()
            if p.is_dir() and ((p / self.TABLE_JSON).exists() or (p / self.TABLE_MARKDOWN).exists())
        )

    def load_table(self, dialect_id: str) -> LexiconTable:
        folder = self._dialect_dir(dialect_id)
        json_path = folder / self.TABLE_JSON
        markdown_path = folder / self.TABLE_MARKDOWN

        if json_path.is_file():
            raw = self._load_json(json_path)
            columns = raw.get("columns")
            rows = raw.get("rows")
            if not isinstance(columns, list) or not isinstance(rows, list):
                raise LexiconSourceError(f"{json_path} needs 'columns' and 'rows' lists.")
            try:
                parsed_rows = [(row["vowel"], row["cells"]) for row in rows]
            except (KeyError, TypeError) as e:
                raise LexiconSourceError(f"{json_path}: every row needs 'vowel' and 'cells'.") from e
            source = json_path
        elif markdown_path.is_file():
            columns, parsed_rows = parse_markdown_table(markdown_path.read_text(encoding="utf-8"))
            source = markdown_path
        else:
            raise FileNotFoundError(f"No lexicon table for dialect '{dialect_id}' in {folder}")

        logger.debug("lexicon_table_read", dialect=dialect_id, source=str(source))
        return table_from_rows(dialect_id, columns, parsed_rows)

    def load_words(self, dialect_id: str) -> List[WordEntry]:
        path = self._dialect_dir(dialect_id) / self.WORDS
        raw = self._load_json(path)
        words = raw.get("words")
        if not isinstance(words, list):
            raise LexiconSourceError(f"{path} needs a 'words' list.")
        try:
            return [WordEntry.model_validate(w) for w in words]
        except ValidationError as e:
            raise LexiconSourceError(f"Invalid word entry in {path}: {e}") from e

    def load_instructions(self, dialect_id: str) -> Dict[str, List[Instruction]]:
        path = self._dialect_dir(dialect_id) / self.INSTRUCTIONS
        raw = self._load_json(path)
        table = raw.get("instructions")
        if not isinstance(table, dict):
            raise LexiconSourceError(f"{path} needs an 'instructions' object.")

        result: Dict[str, List[Instruction]] = {}
        try:
            for meaning, specs in table.items():
                if isinstance(specs, dict):
                    specs = [specs]
                result[meaning] = [Instruction.model_validate(s) for s in specs]
        except ValidationError as e:
            raise LexiconSourceError(f"Invalid instruction in {path}: {e}") from e
        return result

    def health_check(self) -> bool:
        """Checks if the data directory is accessible."""
        return self.base_path.is_dir() and os.access(self.base_path, os.R_OK)
