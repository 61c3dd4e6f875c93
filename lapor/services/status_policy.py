"""
Status transition policy

Optional rule set for complaint status changes. The complaint store itself
accepts any status; routes consult this policy only when
ENFORCE_STATUS_TRANSITIONS is enabled.
"""

from lapor.errors import InvalidTransition
from lapor.models.complaint import ComplaintStatus

DEFAULT_TRANSITIONS = {
    ComplaintStatus.PENDING: {
        ComplaintStatus.IN_PROGRESS,
        ComplaintStatus.REJECTED,
        ComplaintStatus.COMPLETED,
    },
    ComplaintStatus.IN_PROGRESS: {
        ComplaintStatus.COMPLETED,
        ComplaintStatus.REJECTED,
    },
    ComplaintStatus.COMPLETED: set(),
    ComplaintStatus.REJECTED: set(),
}


class StatusTransitionPolicy:

    def __init__(self, transitions=None):
        self.transitions = transitions if transitions is not None else DEFAULT_TRANSITIONS

    def allows(self, current, new):
        # Re-setting the same status (e.g. to add a response) is always allowed
        if current == new:
            return True
        return new in self.transitions.get(current, set())

    def check(self, current, new):
        if not self.allows(current, new):
            raise InvalidTransition(current.value, new.value)
