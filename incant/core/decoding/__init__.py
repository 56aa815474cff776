# incant/core/decoding/__init__.py
"""
Runtime side: stream decoding and program emission.
"""

from .decoder import StreamDecoder, decode
from .emitter import ProgramEmitter

__all__ = ["ProgramEmitter", "StreamDecoder", "decode"]
