"""Interviewer framework for interactive scan prompts."""

from stylesweep.interviewer.auto_approve import AutoApproveInterviewer
from stylesweep.interviewer.base import Interviewer
from stylesweep.interviewer.console import ConsoleInterviewer
from stylesweep.interviewer.queue_interviewer import QueueInterviewer
from stylesweep.interviewer.recording import QAPair, RecordingInterviewer

__all__ = [
    "Interviewer",
    "AutoApproveInterviewer",
    "ConsoleInterviewer",
    "QueueInterviewer",
    "RecordingInterviewer",
    "QAPair",
]
