# qif_dom/data_model/interfaces/i_parser_emitter.py
"""
Runtime-checkable protocol for bidirectional text <-> document converters.

An implementation pairs a **parser**, turning the complete text of a file
into one document object, with an **emitter**, turning such a document back
into text.

### Expectations for implementers

- **Determinism:** the same text parses to equal documents, and the same
  document emits identical text.
- **Round trip:** ``parse(emit(doc)) == doc`` whenever both sides use the same
  configuration.
- **No global state:** formatting choices come from the instance's own
  configuration, never from the process locale.
- **Errors:** malformed input raises ``ValueError`` (or a documented subclass)
  carrying the line number where one is known.

Note: this is a **structural** type (``typing.Protocol``). Any class with
matching attributes/methods is compatible without inheriting from it.
"""

from __future__ import annotations

from typing import TypeVar

from typing_extensions import Protocol, runtime_checkable

T = TypeVar("T")


@runtime_checkable
class IParserEmitter(Protocol[T]):
    """
    Paired parser/emitter for one file format.

    Attributes
    ----------
    file_format : str
        Identifier of the concrete format (e.g. ``"QIF"``), constant per class.
    """

    file_format: str

    def parse(self, unparsed_string: str) -> T:
        """
        Parse the full contents of a file.

        Parameters
        ----------
        unparsed_string : str
            Complete file text. ``\\n``, ``\\r\\n`` and ``\\r`` line endings are
            equivalent.

        Raises
        ------
        ValueError
            If the text is malformed.
        """
        ...

    def emit(self, item: T) -> str:
        """
        Serialize ``item`` to canonical text terminated by a line break.

        Implementations must not mutate ``item``.
        """
        ...
