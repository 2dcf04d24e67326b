from trinexa.conversation.classifier import ResponseClassifier
from trinexa.conversation.dialogue import DialogueStepper
from trinexa.conversation.fields import FIELD_SPECS, FieldKind, FieldSpec, validate
from trinexa.conversation.slot_matcher import AVAILABILITY, match_day, match_time

__all__ = [
    "DialogueStepper",
    "ResponseClassifier",
    "FIELD_SPECS",
    "FieldKind",
    "FieldSpec",
    "validate",
    "AVAILABILITY",
    "match_day",
    "match_time",
]
