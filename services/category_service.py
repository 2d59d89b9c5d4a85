import logging

from api.category_api import CategoryAPI
from models.category import Category
from utils.constants import (
    CATEGORY_TYPES,
    DEFAULT_CATEGORIES,
    FALLBACK_CATEGORY_COLOR,
    FALLBACK_CATEGORY_TYPE,
    OTHER_CATEGORY,
)
from utils.errors import TransportError, ValidationError

logger = logging.getLogger(__name__)


def default_categories() -> list[Category]:
    return [
        Category(id=None, name=c["name"], type=c["type"], color_hex=c["color_hex"])
        for c in DEFAULT_CATEGORIES
    ]


class CategoryRegistry:
    """The categories visible to the current user, in server order.

    Lookups are a linear scan by name: category counts are small and list
    order doubles as the selection order in the form.
    """

    def __init__(self, category_api: CategoryAPI):
        self._api = category_api
        self._categories: list[Category] = []
        self.using_defaults = False

    @property
    def categories(self) -> list[Category]:
        return list(self._categories)

    def names(self) -> list[str]:
        return [c.name for c in self._categories]

    def user_categories(self) -> list[Category]:
        return [c for c in self._categories if not c.is_system]

    def load(self) -> list[Category]:
        """Replace the set from the server; fall back to built-in defaults."""
        try:
            self._categories = list(self._api.get_all())
            self.using_defaults = False
        except TransportError as e:
            logger.warning("Error fetching categories, using defaults: %s", e)
            self._categories = default_categories()
            self.using_defaults = True
        logger.debug("Loaded %d categories", len(self._categories))
        return self.categories

    def find(self, name: str) -> Category | None:
        return next((c for c in self._categories if c.name == name), None)

    def resolve(self, name: str | None) -> Category:
        """First category with this name, or a neutral gray expense stand-in."""
        found = self.find(name) if name else None
        if found:
            return found
        return Category(
            id=None,
            name=name or OTHER_CATEGORY,
            type=FALLBACK_CATEGORY_TYPE,
            color_hex=FALLBACK_CATEGORY_COLOR,
        )

    def resolve_selection(self, current: str | None) -> str | None:
        """Keep the current form selection if it survived a reload."""
        if current and self.find(current):
            return current
        return self._categories[0].name if self._categories else None

    def add(self, name: str, type_: str) -> Category:
        name = (name or "").strip()
        if not name:
            raise ValidationError("Category name cannot be empty.")
        if type_ not in CATEGORY_TYPES:
            raise ValidationError(f"Invalid category type: {type_}")
        if self.find(name):
            raise ValidationError(f"A category named '{name}' already exists.")
        try:
            category = self._api.create(name, type_)
        except TransportError as e:
            logger.warning("Adding category %r failed: %s", name, e)
            raise TransportError(
                "Failed to add category. It might already exist.", status=e.status
            ) from e
        self._categories.append(category)
        logger.info("Added %s category %r", category.type, category.name)
        return category

    def remove(self, category_id: int) -> Category | None:
        """Delete a user-owned category. Transactions keep its name as a label."""
        category = next((c for c in self._categories if c.id == category_id), None)
        if category is not None and category.is_system:
            raise ValidationError("System categories cannot be deleted.")
        self._api.delete(category_id)
        self._categories = [c for c in self._categories if c.id != category_id]
        logger.info("Removed category %s", category.name if category else category_id)
        return category
