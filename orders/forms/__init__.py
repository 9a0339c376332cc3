from .base import ContactForm
from .regular import RegularOrderForm
from .wedding_tasting import WeddingTastingForm
from .christmas import ChristmasSweetsForm, ChristmasTastingForm, quantity_field_name
from .blocked_date import BlockedDateForm, RemoveBlockedDateForm

__all__ = [
    "ContactForm",
    "RegularOrderForm",
    "WeddingTastingForm",
    "ChristmasSweetsForm",
    "ChristmasTastingForm",
    "quantity_field_name",
    "BlockedDateForm",
    "RemoveBlockedDateForm",
]
