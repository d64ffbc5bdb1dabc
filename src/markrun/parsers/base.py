#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/markrun/parsers/base.py
"""Base class for parsers that build the markrun AST."""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import IO, Union

from markrun.ast.nodes import Document
from markrun.exceptions import InvalidOptionsError, ParsingError
from markrun.options.base import BaseParserOptions


class BaseParser(ABC):
    """Abstract base class for source-to-AST parsers.

    Parameters
    ----------
    options : BaseParserOptions or None, default = None
        Format-specific parsing options

    """

    def __init__(self, options: BaseParserOptions | None = None):
        """Initialize the parser with optional configuration."""
        self.options = options or BaseParserOptions()

    @abstractmethod
    def parse(self, input_data: Union[str, Path, IO[bytes], IO[str], bytes]) -> Document:
        """Parse the input into an AST Document.

        Raises
        ------
        ParsingError
            If the input cannot be read or decoded

        """
        pass

    @staticmethod
    def _validate_options_type(options: BaseParserOptions | None, expected_type: type, parser_name: str) -> None:
        """Validate that options are of the correct type for this parser.

        Raises
        ------
        InvalidOptionsError
            If options are not None and not an instance of expected_type

        """
        if options is not None and not isinstance(options, expected_type):
            raise InvalidOptionsError(
                converter_name=parser_name,
                expected_type=expected_type,
                received_type=type(options),
            )

    def _load_text_content(self, input_data: Union[str, Path, IO[bytes], IO[str], bytes]) -> str:
        """Load text from a string, path, bytes or stream.

        A ``str`` is always treated as the content itself; pass a
        :class:`~pathlib.Path` to read a file.

        """
        if isinstance(input_data, str):
            return input_data
        try:
            if isinstance(input_data, Path):
                raw: Union[str, bytes] = input_data.read_bytes()
            elif isinstance(input_data, bytes):
                raw = input_data
            else:
                raw = input_data.read()
            if isinstance(raw, bytes):
                return raw.decode(self.options.encoding)
            return raw
        except OSError as exc:
            raise ParsingError(f"Could not read input: {exc}", parsing_stage="input", original_error=exc) from exc
        except (UnicodeDecodeError, LookupError) as exc:
            raise ParsingError(
                f"Could not decode input as {self.options.encoding}: {exc}",
                parsing_stage="decoding",
                original_error=exc,
            ) from exc
