import pytest

from fakes import FakeCategoryAPI
from services.category_service import CategoryRegistry
from utils.errors import NotFoundOrUnauthorized, TransportError, ValidationError


class TestLoad:
    def test_loads_visible_categories(self, registry):
        assert registry.names() == ["Food", "Income", "Gym"]
        assert registry.using_defaults is False

    def test_hides_other_users_categories(self, categories):
        from models.category import Category
        categories.append(Category(id=9, name="Secret", type="expense", user_id=2))
        reg = CategoryRegistry(FakeCategoryAPI(categories, user_id=1))
        reg.load()
        assert "Secret" not in reg.names()

    def test_transport_failure_falls_back_to_defaults(self, category_api):
        category_api.fail = TransportError("down")
        reg = CategoryRegistry(category_api)
        loaded = reg.load()
        assert len(loaded) == 13
        assert reg.using_defaults is True
        assert {c.type for c in loaded} == {"income", "expense"}
        assert reg.resolve("Income").type == "income"
        assert all(c.id is None and c.is_system for c in loaded)

    def test_reload_replaces_set(self, registry, category_api):
        category_api.rows.pop()
        registry.load()
        assert registry.names() == ["Food", "Income"]


class TestResolve:
    def test_known_name(self, registry):
        cat = registry.resolve("Income")
        assert (cat.type, cat.color_hex) == ("income", "#27ae60")

    def test_unknown_name_is_gray_expense(self, registry):
        cat = registry.resolve("Nope")
        assert (cat.type, cat.color_hex) == ("expense", "#95a5a6")

    def test_empty_name(self, registry):
        assert registry.resolve("").type == "expense"
        assert registry.resolve(None).name == "Other"

    def test_selection_preserved_when_still_present(self, registry):
        assert registry.resolve_selection("Income") == "Income"

    def test_selection_falls_back_to_first(self, registry):
        assert registry.resolve_selection("Gone") == "Food"
        assert registry.resolve_selection(None) == "Food"

    def test_selection_on_empty_registry(self):
        assert CategoryRegistry(FakeCategoryAPI([])).resolve_selection("x") is None


class TestAdd:
    def test_add_appends_server_record(self, registry, category_api):
        cat = registry.add("  Books  ", "expense")
        assert cat.name == "Books"
        assert cat.id is not None
        assert cat.color_hex.startswith("#")
        assert registry.names()[-1] == "Books"
        assert category_api.calls[-1] == ("create", "Books", "expense")

    @pytest.mark.parametrize("name", ["", "   ", None])
    def test_blank_name_rejected_without_remote_call(self, registry, category_api, name):
        calls = len(category_api.calls)
        with pytest.raises(ValidationError):
            registry.add(name, "expense")
        assert len(category_api.calls) == calls

    def test_bad_type_rejected(self, registry):
        with pytest.raises(ValidationError):
            registry.add("Books", "transfer")

    def test_known_duplicate_rejected_locally(self, registry):
        with pytest.raises(ValidationError):
            registry.add("Food", "expense")

    def test_server_duplicate_surfaces_as_transport_error(self, registry, category_api):
        category_api.fail = TransportError("Server Error", status=500)
        with pytest.raises(TransportError, match="might already exist"):
            registry.add("Books", "expense")
        assert "Books" not in registry.names()


class TestRemove:
    def test_removes_user_category(self, registry):
        removed = registry.remove(3)
        assert removed.name == "Gym"
        assert "Gym" not in registry.names()

    def test_system_category_refused_locally(self, registry, category_api):
        with pytest.raises(ValidationError):
            registry.remove(1)
        assert ("delete", 1) not in category_api.calls

    def test_server_refusal_keeps_set(self, registry, category_api):
        category_api.fail = NotFoundOrUnauthorized("no", status=404)
        with pytest.raises(NotFoundOrUnauthorized):
            registry.remove(3)
        assert "Gym" in registry.names()

    def test_user_categories(self, registry):
        assert [c.name for c in registry.user_categories()] == ["Gym"]
