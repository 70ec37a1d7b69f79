"""
Run configuration for xmlimg.

One ExtractConfig is built by the CLI (or by a library caller) and passed
explicitly through the pipeline; there is no module-level state.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, ValidationError, field_validator

from xmlimg.extract.decode import DEFAULT_DUMP_ROWS, DEFAULT_DUMP_WIDTH
from xmlimg.storage.schema import ConfigError


class ExtractConfig(BaseModel):
    """
    Configuration for one extraction run.

    Attributes:
        input_files: Explicit XML files; empty means auto-discover in the cwd
        xpath: Path expression selecting candidate nodes
        data_attr: Attribute holding the base64 payload
        name_attr: Attribute holding the output filename
        output_root: Directory under which per-file output directories go
        dump_width: Bytes per row in the decode failure dump
        dump_rows: Rows in the decode failure dump
        verbose: Print progress lines
    """

    input_files: list[str] = Field(default_factory=list)
    xpath: str = ".//img"
    data_attr: str = "bin"
    name_attr: str = "filename"
    output_root: str = "."

    dump_width: int = Field(default=DEFAULT_DUMP_WIDTH, ge=1)
    dump_rows: int = Field(default=DEFAULT_DUMP_ROWS, ge=0)

    verbose: bool = True

    @field_validator("xpath", "data_attr", "name_attr")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("must not be empty")
        return value


def get_extract_config(**overrides: object) -> ExtractConfig:
    """
    Create a configuration from defaults plus non-None overrides.

    Raises:
        ConfigError: If a value fails validation
    """
    values = {key: value for key, value in overrides.items() if value is not None}
    try:
        return ExtractConfig(**values)
    except ValidationError as e:
        problems = "; ".join(
            f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in e.errors()
        )
        raise ConfigError(f"Invalid configuration: {problems}") from e
