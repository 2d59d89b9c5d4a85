from dataclasses import dataclass

from models.transaction import Transaction
from utils.constants import OTHER_CATEGORY, SUBMIT_LABEL_CREATE, SUBMIT_LABEL_EDIT
from utils.date_helpers import today_str

CREATE = "create"
EDIT = "edit"


@dataclass
class FormValues:
    text: str = ""
    magnitude: str = ""
    category: str | None = None     # None = keep whatever is selected
    date: str = ""

    @classmethod
    def blank(cls) -> "FormValues":
        return cls(date=today_str())

    @classmethod
    def from_transaction(cls, tx: Transaction) -> "FormValues":
        return cls(
            text=tx.text,
            magnitude=f"{tx.magnitude:f}",
            category=tx.category or OTHER_CATEGORY,
            date=tx.date,
        )


class EditSession:
    """Whether the form creates a new record or edits an existing one.

    Create --edit(R)--> Editing(R.id) --edit(R2)--> Editing(R2.id)
    Editing --submit succeeds / cancel--> Create
    """

    def __init__(self):
        self.mode = CREATE
        self.target_id: int | None = None

    @property
    def is_editing(self) -> bool:
        return self.mode == EDIT

    @property
    def submit_label(self) -> str:
        return SUBMIT_LABEL_EDIT if self.is_editing else SUBMIT_LABEL_CREATE

    def begin(self, tx: Transaction) -> FormValues:
        self.mode = EDIT
        self.target_id = tx.id
        return FormValues.from_transaction(tx)

    def targets(self, tx_id: int) -> bool:
        return self.is_editing and self.target_id == tx_id

    def reset(self) -> FormValues:
        self.mode = CREATE
        self.target_id = None
        return FormValues.blank()
