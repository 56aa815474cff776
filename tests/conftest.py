# tests/conftest.py
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from incant.adapters.persistence.filesystem_repo import FileSystemLexiconRepository
from incant.core.domain.models import Instruction, WordEntry
from incant.core.lexicon.dictionary import WordDictionary, single_syllable_dictionary
from incant.core.lexicon.table import LexiconTable
from incant.core.lexicon.validator import validate
from incant.core.ports.lexicon_repository import ILexiconRepository

DATA_DIR = Path(__file__).resolve().parent.parent / "data" / "lexicon"


@pytest.fixture
def data_dir() -> Path:
    """The dialect data shipped with the project."""
    return DATA_DIR


@pytest.fixture
def lexicon() -> LexiconTable:
    """A small v1-style table with a few deliberate gaps (W row, LI, NE...)."""
    return LexiconTable.build("v1", {
        "MA": "Add",
        "SA": "Multiply",
        "NA": "Negate",
        "TI": "One",
        "TU": "Two",
        "SE": "Scalar",
        "VA": "X",
        "VI": "Y",
        "LA": "Slider",
        "ME": "Filter",
        "SI": "Side",
        "MO": "Duplicate",
    })


@pytest.fixture
def single_syllable(lexicon):
    """Every populated syllable of `lexicon` as its own validated word."""
    return validate(single_syllable_dictionary(lexicon))


@pytest.fixture
def spell_dictionary(lexicon):
    """Mixed one- and two-syllable words that are prefix-free."""
    dictionary = WordDictionary(lexicon)
    for spelling in ("MA", "SA", "NA", "TI", "TU"):
        dictionary.register(spelling)
    dictionary.register("SEVA", "X")
    dictionary.register("SEVI", "Y")
    dictionary.register("VALA", "X slider")
    return validate(dictionary)


@pytest.fixture
def instruction_table():
    return {
        "Add": Instruction(kind="binary_op", operand="add"),
        "Multiply": Instruction(kind="binary_op", operand="mul"),
        "Negate": Instruction(kind="unary_op", operand="neg"),
        "One": Instruction(kind="constant", operand="1"),
        "Two": Instruction(kind="constant", operand="2", cost=2.0),
        "X": Instruction(kind="constant", operand="x"),
        "Y": Instruction(kind="constant", operand="y"),
        "X slider": Instruction(kind="control", operand="x_slider", cost=2.0),
    }


@pytest.fixture
def fs_repo(data_dir) -> FileSystemLexiconRepository:
    return FileSystemLexiconRepository(data_dir)


@pytest.fixture(scope="function")
def mock_repo(lexicon, instruction_table):
    """Returns a mock Lexicon Repository serving the small `lexicon` fixture as dialect 'v1'."""
    repo = MagicMock(spec=ILexiconRepository)
    repo.list_dialects.return_value = ["v1"]
    repo.load_table.return_value = lexicon
    repo.load_words.return_value = [
        WordEntry(spelling="MA"),
        WordEntry(spelling="SA"),
        WordEntry(spelling="SEVA", meaning="X"),
    ]
    repo.load_instructions.return_value = {k: [v] for k, v in instruction_table.items()}
    repo.health_check.return_value = True
    return repo
