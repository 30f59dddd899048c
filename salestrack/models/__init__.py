import importlib

from salestrack.models.sale import Sale
from salestrack.models.user import User


def import_all_models() -> None:
    for module_name in (
        "salestrack.models.sale",
        "salestrack.models.user",
    ):
        importlib.import_module(module_name)


__all__ = [
    "Sale",
    "User",
    "import_all_models",
]
