from .state import BlockEditor, load_editor, local_saver
from .forms import DerivedField, PageFormState, SiteFormState, derive_label

__all__ = [
    "BlockEditor",
    "load_editor",
    "local_saver",
    "DerivedField",
    "PageFormState",
    "SiteFormState",
    "derive_label",
]
