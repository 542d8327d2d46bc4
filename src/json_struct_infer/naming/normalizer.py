"""Identifier normalization: raw JSON keys to valid, run-wide unique identifiers.

Two layers:

- KeyNormalizer formats one key, statelessly apart from its transliteration
  cache: "user_id" -> "UserID", "HTTPServer" -> "HTTPServer",
  "2fa_code" -> "TwofaCode", "名字" -> "MingZi".
- IdentifierTable is the state of one generation run. It memoizes
  raw key -> identifier so a key formats identically everywhere it recurs,
  and appends numeric suffixes when two different raw keys format to the same
  text ("Name" -> "Name", then "name" -> "Name1").
"""

from __future__ import annotations

import logging
import re

from json_struct_infer.backends import UnidecodeBackend
from json_struct_infer.cache import TransliterationCache
from json_struct_infer.protocols import TransliterationBackend
from json_struct_infer.schema.assembler import flatten
from json_struct_infer.schema.types import Descriptor

__all__ = [
    "COMMON_INITIALISMS",
    "FALLBACK_IDENTIFIER",
    "IdentifierTable",
    "KeyNormalizer",
    "assign_identifiers",
]

logger = logging.getLogger(__name__)

# Initialisms kept fully upper-cased, after golang/lint's list
COMMON_INITIALISMS = frozenset(
    {
        "ACL", "API", "ASCII", "CPU", "CSS", "DNS", "EOF", "GUID", "HTML",
        "HTTP", "HTTPS", "ID", "IP", "JSON", "LHS", "QPS", "RAM", "RHS",
        "RPC", "SLA", "SMTP", "SQL", "SSH", "TCP", "TLS", "TTL", "UDP", "UI",
        "UID", "UUID", "URI", "URL", "UTF8", "VM", "XML", "XMPP", "XSRF",
        "XSS",
    }
)  # fmt: skip

_DIGIT_WORDS = {
    "0": "Zero",
    "1": "One",
    "2": "Two",
    "3": "Three",
    "4": "Four",
    "5": "Five",
    "6": "Six",
    "7": "Seven",
    "8": "Eight",
    "9": "Nine",
}

FALLBACK_IDENTIFIER = "Field"

# Anything that is not a letter or digit (underscore included) separates chunks
_DELIMITERS = re.compile(r"[\W_]+")


def _mark_case_boundaries(key: str) -> str:
    """Insert "_" before an uppercase letter that starts a capitalised word.

    "HTTPServer" -> "HTTP_Server", "userName" -> "user_Name". The first
    character never gets a boundary.
    """
    out: list[str] = []
    last = len(key) - 1
    for i, ch in enumerate(key):
        if 0 < i < last and ch.isupper() and key[i + 1].islower():
            out.append("_")
        out.append(ch)
    return "".join(out)


def _initialism(text: str) -> str:
    upper = text.upper()
    return upper if upper in COMMON_INITIALISMS else text


class KeyNormalizer:
    """Formats raw JSON keys as exported identifiers.

    Processing pipeline (applied in order):
    1. Mark case-transition boundaries (uppercase followed by lowercase).
    2. Split into chunks on the boundaries and on every non-alphanumeric
       character.
    3. Per chunk keep ASCII letters and digits; non-ASCII characters are
       transliterated and only the letters/digits of the result are kept.
    4. Upper-case each chunk's first kept character.
    5. Spell out a leading digit of the identifier ("3d" -> "Threed").
    6. Replace chunks, then the whole identifier, that match a known
       initialism by its upper-cased form.

    Args:
        backend: Transliteration backend for non-ASCII characters. Defaults
            to ``UnidecodeBackend()``.
        max_cache_size: Size of the per-instance transliteration LRU cache.
    """

    def __init__(
        self,
        backend: TransliterationBackend | None = None,
        max_cache_size: int = 1024,
    ) -> None:
        raw_backend = backend if backend is not None else UnidecodeBackend()
        self._transliterator = TransliterationCache(raw_backend, max_size=max_cache_size)

    def _render_chunk(self, chunk: str) -> str:
        parts: list[str] = []
        for ch in chunk:
            if ch.isascii():
                text = ch
            else:
                text = "".join(
                    c
                    for c in self._transliterator.transliterate(ch)
                    if c.isascii() and c.isalnum()
                )
            if not text:
                continue
            if not parts:
                text = text[0].upper() + text[1:]
            parts.append(text)
        return "".join(parts)

    def normalize(self, key: str) -> str:
        """Format ``key`` as an identifier; "" when nothing usable remains.

        Args:
            key: The raw JSON object key.

        Returns:
            The identifier, without any run-level collision suffix.
        """
        marked = _mark_case_boundaries(key)
        chunks = [self._render_chunk(chunk) for chunk in _DELIMITERS.split(marked)]
        chunks = [chunk for chunk in chunks if chunk]
        if not chunks:
            return ""

        head = chunks[0]
        if head[0].isdigit():
            chunks[0] = _DIGIT_WORDS[head[0]] + head[1:]

        return _initialism("".join(_initialism(chunk) for chunk in chunks))


class IdentifierTable:
    """Naming state of one generation run.

    Holds the raw key -> identifier map and the identifier -> collision
    count map. Create one per run; never share an instance between
    concurrent runs.

    Example::

        table = IdentifierTable()
        table.normalize("Name")     # "Name"
        table.normalize("name")     # "Name1"
        table.normalize("Name")     # "Name" (memoized)
    """

    def __init__(self, normalizer: KeyNormalizer | None = None) -> None:
        self._normalizer = normalizer if normalizer is not None else KeyNormalizer()
        self._names: dict[str, str] = {}
        self._counts: dict[str, int] = {}

    def __len__(self) -> int:
        return len(self._names)

    def __contains__(self, raw_key: object) -> bool:
        return raw_key in self._names

    def normalize(self, raw_key: str) -> str:
        """Return the run-wide identifier for ``raw_key``.

        The first raw key producing a given text keeps it; later raw keys
        producing the same text get the next free numeric suffix for it.
        """
        if raw_key in self._names:
            return self._names[raw_key]

        identifier = self._normalizer.normalize(raw_key) or FALLBACK_IDENTIFIER

        if identifier in self._counts:
            count = self._counts[identifier]
            candidate = identifier
            while candidate in self._counts:
                count += 1
                candidate = f"{identifier}{count}"
            self._counts[identifier] = count
            logger.debug(
                "Identifier %r for key %r already taken, using %r",
                identifier,
                raw_key,
                candidate,
            )
            identifier = candidate

        self._counts[identifier] = 0
        self._names[raw_key] = identifier
        return identifier


def assign_identifiers(root: Descriptor, table: IdentifierTable) -> list[Descriptor]:
    """Give every record and field of a merged tree its identifier.

    Records are visited in ``flatten`` order; each record is named before its
    fields. This is the only place identifiers are written.

    Returns:
        The flattened record list.
    """
    records = flatten(root)
    for record in records:
        record.set_identifier(table.normalize(record.key))
        for child in record.children:
            child.set_identifier(table.normalize(child.key))
    return records
