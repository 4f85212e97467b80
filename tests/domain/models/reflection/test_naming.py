"""Tests for diagnostic naming helpers."""

from typing import Optional

import pytest

from typed_reflection.domain.models.reflection import (
    MemberDescriptor,
    MemberKind,
    mangle_private_name,
    member_display_name,
    qualified_type_name,
    type_display_name,
)

from tests.sample_types import Account, SavingsAccount


class _Hidden:
    pass


@pytest.mark.unit
class TestNaming:
    """Test display names and private-name mangling."""

    def test_qualified_type_name_includes_module(self):
        assert qualified_type_name(Account) == "tests.sample_types.Account"

    def test_qualified_type_name_omits_builtins_module(self):
        assert qualified_type_name(int) == "int"
        assert qualified_type_name(dict) == "dict"

    def test_member_display_name(self):
        assert member_display_name(Account, "_balance") == "tests.sample_types.Account::_balance"

    def test_type_display_name_for_typing_constructs(self):
        assert type_display_name(int) == "int"
        assert type_display_name(None) == "None"
        assert type_display_name(list[int]) == "list[int]"
        optional_name = type_display_name(Optional[str])
        assert "str" in optional_name
        assert "typing." not in optional_name

    def test_mangle_private_name(self):
        assert mangle_private_name(Account, "__balance") == "_Account__balance"
        assert mangle_private_name(SavingsAccount, "__balance") == "_SavingsAccount__balance"

    def test_mangle_leaves_other_names_alone(self):
        assert mangle_private_name(Account, "_balance") == "_balance"
        assert mangle_private_name(Account, "__init__") == "__init__"

    def test_mangle_strips_leading_underscores_from_class_name(self):
        assert mangle_private_name(_Hidden, "__secret") == "_Hidden__secret"


@pytest.mark.unit
class TestMemberDescriptor:
    """Test the member descriptor model."""

    def test_attribute_name_defaults_to_name(self):
        descriptor = MemberDescriptor(Account, "_owner", MemberKind.FIELD, str)
        assert descriptor.attribute_name == "_owner"

    def test_display_name(self):
        descriptor = MemberDescriptor(
            Account, "__balance", MemberKind.FIELD, int, attribute_name="_Account__balance"
        )
        assert descriptor.display_name == "tests.sample_types.Account::__balance"

    def test_descriptor_is_immutable(self):
        descriptor = MemberDescriptor(Account, "_owner", MemberKind.FIELD, str)
        with pytest.raises(AttributeError):
            descriptor.name = "_other"  # type: ignore[misc]
