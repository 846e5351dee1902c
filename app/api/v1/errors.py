"""Traduction des erreurs de validation en réponses HTTP"""
from typing import List

from fastapi import HTTPException, status

from app.models import FieldError, ValidationFailure


def prefixed(prefix: str, errors: List[FieldError]) -> List[FieldError]:
    """Préfixe les chemins de champ (ex: "price" -> "listing.price")"""
    return [
        FieldError(
            field=prefix if error.field == "__root__" else f"{prefix}.{error.field}",
            reason=error.reason,
        )
        for error in errors
    ]


def unprocessable(failure: ValidationFailure) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        detail=failure.model_dump()
    )
