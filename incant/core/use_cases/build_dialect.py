# incant/core/use_cases/build_dialect.py
import structlog

from incant.core.dialect import Dialect
from incant.core.decoding.emitter import ProgramEmitter
from incant.core.domain.exceptions import DomainError
from incant.core.lexicon.dictionary import WordDictionary
from incant.core.lexicon.validator import validate
from incant.core.ports.lexicon_repository import ILexiconRepository
from incant.shared.observability import get_tracer

logger = structlog.get_logger()
tracer = get_tracer(__name__)


class BuildDialect:
    """
    Use Case: Builds one dialect from its lexicon source.

    Responsibilities:
    1. Builds the Lexicon Table (duplicate / malformed syllable checks).
    2. Registers the authored words into a Word Dictionary.
    3. Runs the ambiguity gate; a failing dictionary is rejected wholesale.
    4. Binds the emission table, checking every meaning is covered.
    """

    def __init__(self, repo: ILexiconRepository):
        self.repo = repo

    def execute(self, dialect_id: str) -> Dialect:
        with tracer.start_as_current_span("use_case.build_dialect") as span:
            span.set_attribute("incant.dialect", dialect_id)
            log = logger.bind(dialect=dialect_id)
            log.info("dialect_build_started")

            try:
                # 1. Table
                table = self.repo.load_table(dialect_id)
                log.info("lexicon_table_loaded", entries=len(table), gaps=len(table.gaps()))

                # 2. Words
                dictionary = WordDictionary(table)
                for entry in self.repo.load_words(dialect_id):
                    dictionary.register(entry.spelling, entry.meaning)

                # 3. Ambiguity gate
                validated = validate(dictionary)

                # 4. Emission table
                emitter = ProgramEmitter(dialect_id, self.repo.load_instructions(dialect_id), validated)

            except DomainError as e:
                log.error("dialect_build_failed", error=e.message, error_type=type(e).__name__)
                raise

            span.set_attribute("incant.words", len(validated))
            log.info("dialect_built", words=len(validated))
            return Dialect(id=dialect_id, lexicon=table, dictionary=validated, emitter=emitter)
