"""
Content source: normalizes a content specification into the ordered
sequence of strings an instance cycles through.
"""

from typing import Any, Optional, Tuple

from prompter.models.errors import InvalidContentError

ContentSequence = Tuple[str, ...]


def parse_content(
    spec: Any,
    ambient_text: Optional[str] = None,
    delimiter: Optional[str] = None
) -> ContentSequence:
    """
    Resolve a content specification.

    Args:
        spec: Sequence of strings, a string, or None/empty to use ambient text
        ambient_text: Text the surface displayed when the instance was created
        delimiter: Optional separator splitting the effective text

    Returns:
        Tuple of strings (at least one element)

    Raises:
        InvalidContentError: spec or ambient text can't be resolved to text
    """
    if isinstance(spec, (list, tuple)):
        if not spec:
            raise InvalidContentError("content sequence is empty", spec)
        for item in spec:
            if not isinstance(item, str):
                raise InvalidContentError(
                    f"content sequence item is not text: {type(item).__name__}", spec
                )
        return tuple(spec)

    text = spec if spec else ambient_text
    if not isinstance(text, str):
        raise InvalidContentError(
            f"content is not text: {type(text).__name__}", text
        )

    if delimiter:
        segments = text.split(delimiter)
        return tuple(segments) if segments else (text,)

    return (text,)
