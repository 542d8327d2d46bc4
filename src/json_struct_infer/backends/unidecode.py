"""UnidecodeBackend: Latin approximations of non-ASCII characters via Unidecode.

Han characters come back as capitalised pinyin syllables ("中" -> "Zhong "),
Cyrillic, Greek and accented Latin letters as their closest ASCII letters.
Characters Unidecode has no table entry for map to "".

This backend satisfies the TransliterationBackend Protocol structurally
without inheriting from it.
"""

from __future__ import annotations

from unidecode import unidecode


class UnidecodeBackend:
    """Transliteration backend built on the ``Unidecode`` tables.

    Example::

        from json_struct_infer.backends import UnidecodeBackend

        backend = UnidecodeBackend()
        backend.transliterate("中")   # "Zhong "
        backend.transliterate("д")    # "d"
    """

    def transliterate(self, char: str) -> str:
        """Return the ASCII approximation of ``char`` ("" when unknown)."""
        return unidecode(char, errors="ignore")
