"""TransliterationBackend Protocol for the identifier-normalizer extension point.

Defines the structural interface all transliteration backends must satisfy.
Users can plug in custom backends (for example a dedicated pinyin library)
without inheriting from any base class: any class with a conformant
``transliterate`` method passes ``isinstance`` checks.

Example::

    from json_struct_infer.protocols import TransliterationBackend

    class GreekNames:
        def transliterate(self, char: str) -> str:
            return {"α": "alpha", "β": "beta"}.get(char, "")

    assert isinstance(GreekNames(), TransliterationBackend)  # True
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class TransliterationBackend(Protocol):
    """Structural protocol for transliteration backends.

    The ``transliterate`` method must:
    - Accept a single non-ASCII character.
    - Return a Latin phonetic approximation (possibly with spaces or
      punctuation, which the normalizer discards), or "" when the character
      has no sensible rendering.
    """

    def transliterate(self, char: str) -> str: ...
