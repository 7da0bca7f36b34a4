from fastapi import HTTPException, Request, status

from textfill.config import settings
from textfill.services.ternary_tree import TernaryTreeTextFiller


def get_filler(request: Request) -> TernaryTreeTextFiller:
    """The application's text filler, created at startup."""
    return request.app.state.filler


def check_term_length(term: str, field: str = "term") -> None:
    if len(term) > settings.max_term_length:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"{field} exceeds {settings.max_term_length} characters",
        )
