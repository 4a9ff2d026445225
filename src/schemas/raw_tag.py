"""RawTag domain object."""

from dataclasses import dataclass


@dataclass(frozen=True)
class RawTag:
    """An ``<img>`` element reduced to the two attributes the pipeline reads.

    Both values are taken verbatim from the source HTML; no entity decoding
    is performed. A tag missing either attribute never becomes a RawTag.

    Attributes:
        alt_text: Value of the ``alt`` attribute (the label)
        src: Value of the ``src`` attribute (URL or path, opaque)
    """

    alt_text: str
    src: str
