from pathlib import Path
from typing import Union
from pydantic import ValidationError
from .domain.models import Credentials
from .exceptions import CredentialsMalformed, CredentialsUnreadable


def _describe(error: ValidationError) -> str:
    parts = []
    for err in error.errors(include_input=False):
        location = ".".join(str(part) for part in err["loc"]) or "document"
        parts.append(f"{location}: {err['msg']}")
    return "; ".join(parts)


def load_credentials(path: Union[str, Path]) -> Credentials:
    """
    Read the credentials file in full and parse it as a JSON object with
    string fields `Username` and `Password`. Nothing is cached.
    """
    try:
        raw = Path(path).read_bytes()
    except (OSError, ValueError) as e:
        raise CredentialsUnreadable(f"Cannot read credentials file {path}: {e}") from e

    try:
        return Credentials.model_validate_json(raw)
    except ValidationError as e:
        # Validation errors echo input values, which may hold the password
        raise CredentialsMalformed(f"Invalid credentials file {path}: {_describe(e)}") from None
