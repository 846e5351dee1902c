# app/models/validation.py
"""
Erreurs de validation renvoyées comme valeurs

Les validateurs ne lèvent pas d'exception : ils retournent soit le modèle
normalisé, soit un ValidationFailure listant TOUS les champs invalides
(affichage des erreurs au niveau du formulaire).
"""
from typing import Any, List, Type, TypeVar, Union

from pydantic import BaseModel, ValidationError

ModelT = TypeVar("ModelT", bound=BaseModel)


class FieldError(BaseModel):
    """Un champ invalide et la raison du rejet"""
    field: str
    reason: str


class ValidationFailure(BaseModel):
    """Ensemble des erreurs d'une validation"""
    errors: List[FieldError]

    @property
    def fields(self) -> List[str]:
        return [error.field for error in self.errors]

    @classmethod
    def from_pydantic(cls, exc: ValidationError) -> "ValidationFailure":
        errors = []
        for error in exc.errors():
            loc = error.get("loc") or ("__root__",)
            errors.append(FieldError(
                field=".".join(str(part) for part in loc),
                reason=error.get("msg", "Invalid value"),
            ))
        return cls(errors=errors)


def validate_model(model_cls: Type[ModelT], raw: Any) -> Union[ModelT, ValidationFailure]:
    """Valide `raw` contre `model_cls` et retourne le modèle ou les erreurs"""
    if isinstance(raw, model_cls):
        raw = raw.model_dump(by_alias=True)
    if not isinstance(raw, dict):
        return ValidationFailure(errors=[
            FieldError(field="__root__", reason="Expected an object")
        ])
    try:
        return model_cls.model_validate(raw)
    except ValidationError as e:
        return ValidationFailure.from_pydantic(e)
