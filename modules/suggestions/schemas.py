from typing import Annotated, Optional

from pydantic import BaseModel, ConfigDict, StrictBool, StringConstraints

Text = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]
Category = Annotated[str, StringConstraints(strip_whitespace=True, max_length=255)]


class SuggestionCreate(BaseModel):
    text: Text
    category: Optional[Category] = None
    active: StrictBool = True


class SuggestionUpdate(BaseModel):
    model_config = ConfigDict(extra="forbid")

    text: Optional[Text] = None
    category: Optional[Category] = None
    active: Optional[StrictBool] = None

    def changes(self) -> dict:
        """Fields the client sent; only ``category`` may be cleared with null."""
        return {
            key: value
            for key, value in self.model_dump(exclude_unset=True).items()
            if value is not None or key == "category"
        }
