from http import HTTPStatus

from pydantic import ValidationError

from domain.repository import RecipeConflict, RecipeNotFound
from domain.services import InvalidRecipeName


HOME_PAGE = "This is my home page"


class InvalidContentLength(ValueError):
    def __init__(self, value: str) -> None:
        super().__init__(f"Invalid Content-Length: {value!r}")
        self.value = value


DOMAIN_ERRORS = (
    RecipeNotFound,
    RecipeConflict,
    InvalidRecipeName,
    InvalidContentLength,
    ValidationError,
)


def error_status(exc: Exception) -> HTTPStatus:
    match exc:
        case RecipeNotFound():
            return HTTPStatus.NOT_FOUND
        case RecipeConflict():
            return HTTPStatus.CONFLICT
        case InvalidRecipeName() | InvalidContentLength() | ValidationError():
            return HTTPStatus.BAD_REQUEST
        case _:
            return HTTPStatus.INTERNAL_SERVER_ERROR


def error_message(exc: Exception) -> str:
    if isinstance(exc, ValidationError):
        return "; ".join(
            f"{'.'.join(str(loc) for loc in err['loc']) or 'body'}: {err['msg']}"
            for err in exc.errors()
        )
    if isinstance(exc, DOMAIN_ERRORS):
        return str(exc)
    return HTTPStatus.INTERNAL_SERVER_ERROR.phrase


def error_body(exc: Exception) -> dict[str, str]:
    return {"error": error_message(exc)}
