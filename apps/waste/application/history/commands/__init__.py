"""History Commands."""

from waste.application.history.commands.submit_feedback import (
    SubmitFeedbackCommand,
    SubmitFeedbackRequest,
)

__all__ = ["SubmitFeedbackCommand", "SubmitFeedbackRequest"]
