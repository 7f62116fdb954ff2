"""
Request-model helpers shared by the route modules.

PatchRequest backs every partial-update body: only keys present in the JSON
are applied, a body with no updatable keys is rejected, and explicit nulls
are rejected (absent means "leave unchanged", never "clear").
"""

from typing import Any, Dict

from pydantic import BaseModel, model_validator


class PatchRequest(BaseModel):
    @model_validator(mode="after")
    def validate_patch(self):
        present = self.model_fields_set
        if not present:
            raise ValueError("At least one field must be provided to update.")

        null_fields = sorted(name for name in present if getattr(self, name) is None)
        if null_fields:
            raise ValueError(f"Fields may not be null: {', '.join(null_fields)}")
        return self

    def changes(self) -> Dict[str, Any]:
        """Field name -> new value, for the fields supplied in the request."""
        return self.model_dump(exclude_unset=True)


def apply_changes(row: Any, changes: Dict[str, Any]) -> None:
    for field, value in changes.items():
        setattr(row, field, value)
