from typing import Type, TypeVar

from graphql import GraphQLError
from pydantic import BaseModel, ValidationError

ModelT = TypeVar("ModelT", bound=BaseModel)


def validate_input(model: Type[ModelT], **values) -> ModelT:
    """GraphQL argümanlarını REST ile aynı pydantic şemasından geçirir."""
    try:
        return model(**values)
    except ValidationError as e:
        errors = [
            {"field": ".".join(str(part) for part in error["loc"]), "message": error["msg"]}
            for error in e.errors()
        ]
        raise GraphQLError(
            "Validation failed",
            extensions={"code": "VALIDATION_ERROR", "status_code": 422, "errors": errors},
        ) from e
