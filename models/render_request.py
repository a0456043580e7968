"""Render request model"""
import math
from dataclasses import dataclass, field
from typing import Any, Dict

# Scalar leaves the service accepts in template data
SCALAR_TYPES = (str, int, float, bool, type(None))


def validate_template_value(value: Any, path: str = "data") -> None:
    """Check that a value is a JSON-compatible template data tree.

    Leaves are strings, numbers, booleans or null. Containers are lists
    (repeated sections) or mappings with string keys (nested fields).
    Raises ValueError naming the first offending path.
    """
    if isinstance(value, float) and not math.isfinite(value):
        raise ValueError(f"{path}: non-finite number {value!r} is not valid JSON")
    if isinstance(value, SCALAR_TYPES):
        return
    if isinstance(value, (list, tuple)):
        for index, item in enumerate(value):
            validate_template_value(item, f"{path}[{index}]")
        return
    if isinstance(value, dict):
        for key, item in value.items():
            if not isinstance(key, str):
                raise ValueError(f"{path}: keys must be strings, got {type(key).__name__}")
            validate_template_value(item, f"{path}.{key}")
        return
    raise ValueError(f"{path}: unsupported value type {type(value).__name__}")


@dataclass(frozen=True)
class RenderRequest:
    """Template plus the data used to fill its placeholders"""
    template: str
    data: Dict[str, Any] = field(default_factory=dict)

    def validate(self) -> bool:
        """Validate request integrity"""
        if not self.template:
            raise ValueError("Template cannot be empty")
        if not isinstance(self.data, dict):
            raise ValueError("Data must be a mapping of field names to values")
        validate_template_value(self.data)
        return True

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the JSON body sent to the API"""
        return {
            'template': self.template,
            'data': self.data
        }

    def __str__(self) -> str:
        return f"RenderRequest(template={len(self.template)} chars, fields={len(self.data)})"
