from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictInt

MIN_QUESTION_LENGTH = 3


class AskQuestionRequest(BaseModel):
    question: str = Field(min_length=MIN_QUESTION_LENGTH)


class FeedbackRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    question_id: StrictInt = Field(alias="questionId")
    is_helpful: StrictBool = Field(alias="isHelpful")
    comment: Optional[str] = None
