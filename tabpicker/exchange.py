import json
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError


class ExchangeError(Exception):
    """base error for exchange file operations"""


class LoadError(ExchangeError):
    """the exchange file could not be read or parsed"""


class SaveError(ExchangeError):
    """the selection could not be written back"""


class ExchangeRequest(BaseModel):
    """the record written by the calling application"""

    model_config = ConfigDict(populate_by_name=True)

    current_input: str | None = Field(default="", alias="CurrentInput")
    custom_suggestions: dict[str, str | None] | None = Field(
        default_factory=dict, alias="CustomSuggestions"
    )


class ExchangeResponse(BaseModel):
    """the record handed back to the calling application"""

    model_config = ConfigDict(populate_by_name=True)

    selected_suggestion: str = Field(alias="SelectedSuggestion")


def load(path: Path) -> tuple[str, dict[str, str]]:
    """reads the current input and the raw suggestions from the exchange file"""
    try:
        # utf-8-sig tolerates a leading bom written by some callers
        text = Path(path).read_text(encoding="utf-8-sig")
        request = ExchangeRequest.model_validate(json.loads(text))
    except OSError as e:
        raise LoadError(f"cannot read '{path}': {e.strerror or e}") from e
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        raise LoadError(f"'{path}' is not valid json: {e}") from e
    except ValidationError as e:
        raise LoadError(
            f"'{path}' has an unexpected layout ({e.error_count()} error(s))"
        ) from e

    suggestions = request.custom_suggestions or {}
    return request.current_input or "", {
        label: value or "" for label, value in suggestions.items()
    }


def save(path: Path, selected_value: str) -> None:
    """overwrites the exchange file with the selected suggestion"""
    response = ExchangeResponse(selected_suggestion=selected_value)
    try:
        Path(path).write_text(
            response.model_dump_json(by_alias=True), encoding="utf-8"
        )
    except OSError as e:
        raise SaveError(f"cannot write '{path}': {e.strerror or e}") from e
