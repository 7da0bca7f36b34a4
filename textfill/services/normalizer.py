class InvalidTermError(ValueError):
    """Raised when a term or query is missing or blank after trimming."""


def normalize(term: str | None) -> str:
    """Canonicalize a raw term for storage or lookup.

    Leading/trailing whitespace is trimmed and the result is case-folded.
    Internal whitespace is kept as-is so multi-word phrases are stored
    as single terms.
    """
    if term is None:
        raise InvalidTermError("term is required")
    if not isinstance(term, str):
        raise InvalidTermError(f"term must be a string, got {type(term).__name__}")

    cleaned = term.strip()
    if not cleaned:
        raise InvalidTermError("term must not be blank")
    return cleaned.casefold()
