"""Conversation message model sent by the client with each question."""

from pydantic import BaseModel, Field

USER_ROLE = "user"
MODEL_ROLE = "model"


class ConversationMessage(BaseModel):
    """A single turn of the conversation history.

    Only turns with the "user" or "model" role are forwarded to the model,
    anything else is accepted and dropped. Extra keys are ignored.
    """

    role: str = Field(..., description="Author of the turn (user or model)")
    text: str = Field("", description="Text of the turn")

    def is_forwardable(self) -> bool:
        """Check whether this turn can be sent upstream.

        Returns:
            bool: True for user and model turns
        """
        return self.role in (USER_ROLE, MODEL_ROLE)
