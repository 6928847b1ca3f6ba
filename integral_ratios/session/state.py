"""
Compact, reversible encoding of session state for shareable links.

The state is JSON, deflated with zlib and base64 encoded with the URL-safe
alphabet. Only fields that differ from the defaults are stored, and a
session at its defaults encodes to the empty string.
"""

import base64
import binascii
import json
import zlib
from pydantic import BaseModel, ValidationError, field_validator, model_validator
from typing import Any, Dict, List, Optional

from ..config import ModelInput, Settings
from ..errors import StateDecodeError
from ..parsing import is_number_string


class StatePayload(BaseModel):
    """Decoded state. Malformed fields are dropped and read as defaults."""
    version: Optional[str] = None
    values: Optional[List[str]] = None
    mask: Optional[List[bool]] = None
    settings: Optional[Settings] = None

    @field_validator("values", mode="before")
    @classmethod
    def _check_values(cls, v: Any) -> Optional[List[str]]:
        if isinstance(v, list) and all(isinstance(s, str) and is_number_string(s) for s in v):
            return v
        return None

    @field_validator("mask", mode="before")
    @classmethod
    def _check_mask(cls, v: Any) -> Optional[List[bool]]:
        if isinstance(v, list) and all(isinstance(b, bool) for b in v):
            return v
        return None

    @field_validator("settings", mode="before")
    @classmethod
    def _check_settings(cls, v: Any) -> Optional[Dict[str, Any]]:
        if not isinstance(v, dict):
            return None
        defaults = Settings()
        output_precision = v.get("output_precision")
        show_pivot = v.get("show_pivot")
        valid_precision = (
            isinstance(output_precision, int)
            and not isinstance(output_precision, bool)
            and output_precision >= 1
        )
        return {
            "output_precision": output_precision if valid_precision else defaults.output_precision,
            "show_pivot": show_pivot if isinstance(show_pivot, bool) else defaults.show_pivot,
        }

    @model_validator(mode="after")
    def _check_shape(self) -> "StatePayload":
        if self.values is not None:
            non_positive = [s for s in self.values if float(s) <= 0.0]
            if non_positive:
                raise ValueError(f"Values must be positive, got {non_positive}")
        if self.values is not None and self.mask is not None and len(self.values) != len(self.mask):
            raise ValueError(
                f"values and mask differ in length: {len(self.values)} != {len(self.mask)}"
            )
        return self

    def to_model_input(self, default: ModelInput) -> ModelInput:
        """
        Model input with missing fields taken from the default.

        Args:
            default: Input supplying the fields the payload lacks

        Returns:
            Complete model input

        Raises:
            StateDecodeError: If the merged values and mask do not describe
                one input of at least 2 dimensions
        """
        value_strings = list(self.values) if self.values is not None else list(default.value_strings)
        mask = list(self.mask) if self.mask is not None else list(default.mask)
        if len(value_strings) != len(mask):
            raise StateDecodeError(
                f"State has {len(value_strings)} values but {len(mask)} mask entries"
            )
        if len(value_strings) < 2:
            raise StateDecodeError(f"State needs at least 2 values, got {len(value_strings)}")
        return ModelInput(value_strings=value_strings, mask=mask)


def encode_state(
    model_input: ModelInput,
    settings: Settings,
    version: str,
    default_input: Optional[ModelInput] = None,
    default_settings: Optional[Settings] = None
) -> str:
    """
    Encode the non-default parts of a session.

    Args:
        model_input: Current typed values and mask
        settings: Current display settings
        version: State format version
        default_input: Reference input (ModelInput() if None)
        default_settings: Reference settings (Settings() if None)

    Returns:
        Encoded state, or "" when everything is at its default
    """
    default_input = default_input if default_input is not None else ModelInput()
    default_settings = default_settings if default_settings is not None else Settings()

    payload: Dict[str, Any] = {"version": version}
    if model_input.value_strings != default_input.value_strings:
        payload["values"] = list(model_input.value_strings)
    if model_input.mask != default_input.mask:
        payload["mask"] = list(model_input.mask)
    if settings != default_settings:
        payload["settings"] = settings.model_dump()

    if len(payload) == 1:
        return ""

    stringified = json.dumps(payload, separators=(",", ":"))
    zipped = zlib.compress(stringified.encode("utf-8"))
    return base64.urlsafe_b64encode(zipped).decode("ascii")


def decode_state(encoded: str) -> StatePayload:
    """
    Decode a string produced by encode_state.

    Args:
        encoded: Encoded state

    Returns:
        Validated payload

    Raises:
        StateDecodeError: If the string is not a valid encoded state, or its
            values are not positive or disagree in length with its mask
    """
    try:
        zipped = base64.urlsafe_b64decode(encoded.encode("ascii"))
        stringified = zlib.decompress(zipped).decode("utf-8")
        parsed = json.loads(stringified)
    except (binascii.Error, zlib.error, UnicodeError, ValueError) as exc:
        raise StateDecodeError(f"Cannot decode state {encoded!r}: {exc}") from exc

    if not isinstance(parsed, dict):
        raise StateDecodeError(f"State must be a JSON object, got {type(parsed).__name__}")

    try:
        return StatePayload.model_validate(parsed)
    except ValidationError as exc:
        raise StateDecodeError(f"Malformed state: {exc}") from exc
