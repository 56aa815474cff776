# incant/core/use_cases/__init__.py
from .build_dialect import BuildDialect
from .decode_spell import DecodeSpell

__all__ = ["BuildDialect", "DecodeSpell"]
