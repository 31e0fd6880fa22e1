"""argline: lossless command-line tokenizer and argument extractor."""

from argline.arguments import ArgumentLine, get_flag, get_named, get_positional
from argline.config import DEFAULT_CONFIG, EQUALS_SEPARATED, TokenizerConfig
from argline.event_log import ExtractionEvent, ExtractionLog
from argline.formatter import format_result, format_tokens, suggest, unknown_message
from argline.ops import OpResult, execute_op, execute_ops, run_query
from argline.parsed_op import ParseError, ParsedOp, parse_op
from argline.quoting import trim_quotes, unescape_quotes, unquote
from argline.scanner import Word, scan
from argline.server import create_argline_server
from argline.session import LineSession
from argline.tokenizer import Token, collapse, reparse, tokenize, tokenize_with_meta
from argline.verb_registry import ARGLINE_VERBS, VerbRegistry, VerbSpec

__all__ = [
    # Config
    "TokenizerConfig",
    "DEFAULT_CONFIG",
    "EQUALS_SEPARATED",
    # Scanner
    "Word",
    "scan",
    # Tokenizer
    "Token",
    "tokenize",
    "tokenize_with_meta",
    "collapse",
    "reparse",
    # Extractors
    "get_positional",
    "get_flag",
    "get_named",
    "ArgumentLine",
    # Quoting
    "unquote",
    "trim_quotes",
    "unescape_quotes",
    # Parsed Op
    "ParsedOp",
    "ParseError",
    "parse_op",
    # Extraction Log
    "ExtractionEvent",
    "ExtractionLog",
    # Verb Registry
    "VerbSpec",
    "VerbRegistry",
    "ARGLINE_VERBS",
    # Session
    "LineSession",
    # Ops
    "OpResult",
    "execute_op",
    "execute_ops",
    "run_query",
    # Server
    "create_argline_server",
    # Formatter
    "format_result",
    "format_tokens",
    "suggest",
    "unknown_message",
]
