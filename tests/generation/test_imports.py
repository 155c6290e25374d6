from __future__ import annotations

import pytest

from soapify.generation.class_model import ClassModel
from soapify.generation.imports import local_reference, resolve_reference, split_qualified_name


class TestSplitQualifiedName:
    def test_strips_leading_dots(self) -> None:
        assert split_qualified_name(".app.types.User") == ["app", "types", "User"]

    @pytest.mark.parametrize(
        "name",
        [
            pytest.param("", id="empty"),
            pytest.param("app..User", id="empty-segment"),
            pytest.param("app.types.User[]", id="illegal-character"),
            pytest.param("app.1User", id="leading-digit"),
        ],
    )
    def test_rejects_malformed_names(self, name: str) -> None:
        with pytest.raises(ValueError):
            split_qualified_name(name)


class TestResolveReference:
    def test_returns_leaf_and_registers_import(self, class_model: ClassModel) -> None:
        assert resolve_reference("soapify.types.ResultInterface", class_model) == "ResultInterface"
        assert list(class_model.imports) == ["soapify.types.ResultInterface"]

    def test_registers_same_name_once(self, class_model: ClassModel) -> None:
        resolve_reference("soapify.types.ResultInterface", class_model)
        resolve_reference("soapify.types.ResultInterface", class_model)
        assert len(class_model.imports) == 1

    def test_prefixed_registers_parent(self) -> None:
        model = ClassModel(name="Client", namespace="app.client")
        assert resolve_reference("NS.Wrapper.Leaf", model, prefixed=True) == "Wrapper.Leaf"
        assert "NS.Wrapper" in model.imports
        assert "NS.Wrapper.Leaf" not in model.imports
        assert len(model.imports) == 1

    def test_prefixed_top_level_parent_is_imported_as_module(self, class_model: ClassModel) -> None:
        assert resolve_reference("Wrapper.Leaf", class_model, prefixed=True) == "Wrapper.Leaf"
        assert list(class_model.imports) == ["Wrapper"]

    def test_prefixed_top_level_parent_is_imported_without_namespace(self) -> None:
        model = ClassModel(name="C")
        assert resolve_reference("types.UserResult", model, prefixed=True) == "types.UserResult"
        assert list(model.imports) == ["types"]
        assert local_reference("types.UserResult", model) == "types.UserResult"

    def test_prefixed_single_segment_falls_back_to_plain(self, class_model: ClassModel) -> None:
        assert resolve_reference("UserResult", class_model, prefixed=True) == "UserResult"
        assert len(class_model.imports) == 0

    def test_builtins_are_not_imported(self, class_model: ClassModel) -> None:
        assert resolve_reference("int", class_model) == "int"
        assert len(class_model.imports) == 0

    def test_same_namespace_is_not_imported(self, class_model: ClassModel) -> None:
        assert resolve_reference("app.client.Helper", class_model) == "Helper"
        assert resolve_reference("app.client.Helper", class_model, prefixed=True) == "Helper"
        assert len(class_model.imports) == 0

    def test_prefixed_parent_in_same_namespace_is_not_imported(self) -> None:
        model = ClassModel(name="Client", namespace="app")
        assert resolve_reference("app.types.User", model, prefixed=True) == "types.User"
        assert len(model.imports) == 0

    def test_malformed_name_raises(self, class_model: ClassModel) -> None:
        with pytest.raises(ValueError):
            resolve_reference("app..User", class_model)
        assert len(class_model.imports) == 0


class TestLocalReference:
    def test_uses_leaf_when_imported(self, class_model: ClassModel) -> None:
        class_model.imports.add("app.types.User")
        assert local_reference("app.types.User", class_model) == "User"

    def test_uses_parent_when_parent_imported(self, class_model: ClassModel) -> None:
        class_model.imports.add("app.types")
        assert local_reference("app.types.User", class_model) == "types.User"

    def test_uses_leaf_in_own_namespace(self, class_model: ClassModel) -> None:
        assert local_reference("app.client.Helper", class_model) == "Helper"

    def test_keeps_full_name_otherwise(self, class_model: ClassModel) -> None:
        assert local_reference("other.types.User", class_model) == "other.types.User"
        assert local_reference("int", class_model) == "int"

    def test_does_not_register_imports(self, class_model: ClassModel) -> None:
        local_reference("other.types.User", class_model)
        assert len(class_model.imports) == 0
