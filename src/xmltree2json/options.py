"""Encoder configuration model."""

from pathlib import Path
from typing import Union

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator


class EncoderOptions(BaseModel):
    """Settings shared by the XML reader and the JSON encoder."""
    content_prefix: str = ""  # Mixed-content key is content_prefix + "content"
    attribute_prefix: str = "-"  # Applied by the reader to attribute labels
    indent: bool = False
    indent_text: str = "  "  # Repeated once per nesting level when indent is on

    model_config = ConfigDict(extra="forbid")

    @field_validator("indent_text")
    @classmethod
    def validate_indent_text(cls, v: str) -> str:
        """Indent units must be spaces or tabs, otherwise the output is not JSON."""
        if v.strip(" \t"):
            raise ValueError(f"indent_text may only contain spaces and tabs, got {v!r}")
        return v


def load_options(path: Union[str, Path]) -> EncoderOptions:
    """Load encoder options from a JSON file.

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the file is not a valid options document
    """
    options_path = Path(path)
    data = options_path.read_text(encoding="utf-8")
    try:
        return EncoderOptions.model_validate_json(data)
    except ValidationError as e:
        raise ValueError(f"Invalid options file {options_path}: {e}") from e
