"""src/divan/http/docid.py

Document id encoding for URL paths.
"""

import urllib.parse
from typing import Union

__all__ = ["ENCODE_DOCID", "DESIGN_PREFIX", "encode_docid"]

ENCODE_DOCID = True
DESIGN_PREFIX = "_design/"


def encode_docid(doc_id: Union[str, bytes], encode: bool = ENCODE_DOCID) -> str:
    """
    Percent-encode a document id.

    The ``_design/`` prefix of design documents stays as is and only the
    rest of the id is encoded. Every other character outside letters,
    digits and ``-_.~`` is escaped, ``/`` included.

    Args:
        doc_id: Document id as text or UTF-8 bytes.
        encode: When False, the id is returned without escaping.

    Returns:
        The encoded id.
    """
    if isinstance(doc_id, bytes):
        doc_id = doc_id.decode("utf-8")
    if not encode:
        return doc_id
    if doc_id.startswith(DESIGN_PREFIX):
        return DESIGN_PREFIX + encode_docid(doc_id[len(DESIGN_PREFIX) :], encode)
    return urllib.parse.quote(doc_id, safe="")
