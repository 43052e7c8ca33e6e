"""
Environment Validator
=====================

Validates a raw environment mapping against a declarative schema and returns
a read-only, fully typed view of it.

Coercion is delegated to pydantic: the schema table is turned into a frozen
model once per schema, so every variable is checked in a single pass and
every failure is reported together.
"""

import sys
from collections.abc import Iterable, Iterator, Mapping
from enum import Enum
from functools import lru_cache
from types import MappingProxyType
from typing import Annotated, Any

from pydantic import AfterValidator, BaseModel, ConfigDict, Field, ValidationError, create_model

from euphoria.config.schema import ENV_SCHEMA, EnvKind, EnvVar, LogLevel
from euphoria.core.exceptions import EnvIssue, EnvValidationError, IssueKind
from euphoria.core.structured_logger import get_logger

logger = get_logger("EnvValidator")


class ValidationMode(str, Enum):
    """What happens when validation fails."""

    THROWING = "throwing"        # raise EnvValidationError
    TERMINATING = "terminating"  # print diagnostics and exit(1)


def _check_log_level(value: int) -> LogLevel:
    try:
        return LogLevel(value)
    except ValueError:
        raise ValueError("Expected a log level between 0 and 3") from None


def _check_int_list(value: str) -> str:
    if not value.strip():
        return value
    for position, item in enumerate(value.split(","), start=1):
        try:
            int(item.strip())
        except ValueError:
            raise ValueError(
                f"Expected comma-separated integers (item {position} is not an integer)"
            ) from None
    return value


_KIND_TYPES: dict[EnvKind, Any] = {
    EnvKind.STRING: str,
    EnvKind.INTEGER: int,
    EnvKind.PORT: Annotated[int, Field(ge=1, le=65535)],
    EnvKind.LOG_LEVEL: Annotated[int, AfterValidator(_check_log_level)],
    EnvKind.INT_LIST: Annotated[str, AfterValidator(_check_int_list)],
}


@lru_cache(maxsize=8)
def _model_for(schema: tuple[EnvVar, ...]) -> type[BaseModel]:
    """Build (once per schema) the pydantic model that validates it."""
    fields: dict[str, Any] = {}
    for entry in schema:
        if entry.name in fields:
            raise ValueError(f"Duplicate schema entry: {entry.name}")
        fields[entry.name] = (_KIND_TYPES[entry.kind], entry.default)

    return create_model(
        "EnvModel",
        __config__=ConfigDict(frozen=True, extra="ignore"),
        **fields,
    )


class ValidatedEnv(Mapping[str, Any]):
    """
    Immutable mapping of schema names to typed values.

    Values can be read as items (`env["MONGODB_PORT"]`) or attributes
    (`env.MONGODB_PORT`).
    """

    __slots__ = ("_values",)

    def __init__(self, values: Mapping[str, Any]):
        object.__setattr__(self, "_values", MappingProxyType(dict(values)))

    def __getitem__(self, name: str) -> Any:
        return self._values[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __getattr__(self, name: str) -> Any:
        if name.startswith("_"):
            raise AttributeError(name)
        try:
            return self._values[name]
        except KeyError:
            raise AttributeError(name) from None

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError("ValidatedEnv is read-only")

    def __repr__(self) -> str:
        return f"ValidatedEnv({sorted(self._values)})"


def _issues_from(exc: ValidationError) -> list[EnvIssue]:
    issues: list[EnvIssue] = []
    seen: set[str] = set()
    for error in exc.errors():
        name = str(error["loc"][0])
        if name in seen:
            continue
        seen.add(name)
        if error["type"] == "missing":
            issues.append(EnvIssue(name, IssueKind.MISSING_REQUIRED, "Required variable is not set"))
        else:
            issues.append(EnvIssue(name, IssueKind.INVALID_VALUE, error["msg"]))
    return issues


def validate_env(
    raw_env: Mapping[str, str],
    schema: Iterable[EnvVar] = ENV_SCHEMA,
    mode: ValidationMode = ValidationMode.THROWING,
) -> ValidatedEnv:
    """
    Validate raw environment strings against a schema.

    Args:
        raw_env: Raw variables, usually os.environ
        schema: Schema entries to enforce (unknown variables are ignored)
        mode: THROWING raises EnvValidationError, TERMINATING prints the
              report to stderr and exits with status 1

    Returns:
        ValidatedEnv with every schema key set to its typed value

    Raises:
        EnvValidationError: Listing every missing or invalid variable
    """
    mode = ValidationMode(mode)
    schema = tuple(schema)
    model = _model_for(schema)

    # An empty string counts as unset, so defaults apply and required
    # variables are reported as missing.
    data = {
        entry.name: raw_env[entry.name]
        for entry in schema
        if raw_env.get(entry.name) not in (None, "")
    }

    try:
        validated = model(**data)
    except ValidationError as exc:
        error = EnvValidationError(_issues_from(exc))
        logger.error(
            "Environment validation failed",
            variables=error.names,
            missing=error.missing,
            invalid=error.invalid,
        )
        if mode is ValidationMode.TERMINATING:
            print(error.report(), file=sys.stderr)
            raise SystemExit(1) from error
        raise error from None

    return ValidatedEnv({entry.name: getattr(validated, entry.name) for entry in schema})
