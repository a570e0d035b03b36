"""JSON parser that keeps monetary values exact.

DRF's stock ``JSONParser`` turns ``699.99`` into a binary float; this one
decodes every JSON number with a fraction or exponent as ``Decimal``.
"""

from __future__ import annotations

import codecs
import json
from decimal import Decimal

from django.conf import settings
from rest_framework.exceptions import ParseError
from rest_framework.parsers import JSONParser


def _reject_constant(value: str) -> None:
    raise ValueError(f"Invalid JSON number: {value}")


class DecimalJSONParser(JSONParser):
    """Parses JSON-serialized data, decoding non-integer numbers as ``Decimal``."""

    def parse(self, stream, media_type=None, parser_context=None):
        parser_context = parser_context or {}
        encoding = parser_context.get("encoding", settings.DEFAULT_CHARSET)

        try:
            decoded_stream = codecs.getreader(encoding)(stream)
            return json.load(
                decoded_stream,
                parse_float=Decimal,
                parse_constant=_reject_constant,
            )
        except ValueError as exc:
            raise ParseError(f"JSON parse error - {exc}")
