"""Tests for the Reflector facade."""

import pytest

from typed_reflection.domain.models.reflection import InvalidArgument, MemberNotFound, TypeMismatch
from typed_reflection.domain.services.reflection import (
    AccessorResolver,
    FieldAccessor,
    MemberIntrospector,
    PropertyAccessor,
    Reflector,
)

from tests.sample_types import Account, Tracked, Widget


@pytest.mark.unit
class TestLookup:
    """Test finding members by name."""

    def test_get_field(self, reflector: Reflector, account: Account):
        balance = reflector.get_field(account, "__balance", int)

        assert isinstance(balance, FieldAccessor)
        assert balance.get() == 50

    def test_get_property(self, reflector: Reflector, account: Account):
        assert isinstance(reflector.get_property(account, "_balance", int), PropertyAccessor)

    def test_kind_mismatch_is_not_found(self, reflector: Reflector, account: Account):
        with pytest.raises(MemberNotFound) as exc_info:
            reflector.get_field(account, "_balance")

        assert str(exc_info.value) == (
            "The tests.sample_types.Account type has no instance field named '_balance'."
        )
        assert exc_info.value.display_name == "tests.sample_types.Account::_balance"

    def test_static_member_through_instance(self, reflector: Reflector, account: Account):
        with pytest.raises(MemberNotFound, match="no instance field"):
            reflector.get_field(account, "_currency")

    def test_instance_member_through_type(self, reflector: Reflector):
        with pytest.raises(MemberNotFound, match="no static field"):
            reflector.get_field(Account, "__balance")

    def test_missing_member(self, reflector: Reflector, account: Account):
        with pytest.raises(MemberNotFound, match="no instance method named '_nope'"):
            reflector.get_method(account, "_nope")

    def test_not_required(self, reflector: Reflector, account: Account):
        assert reflector.get_field(account, "_nope", required=False) is None
        assert reflector.get_method(account, "_balance", required=False) is None
        assert reflector.get_property(Tracked, "_nope", int, required=False) is None

    def test_member_not_found_is_invalid_argument(self, reflector: Reflector, account: Account):
        with pytest.raises(InvalidArgument):
            reflector.get_field(account, "_nope")

    def test_none_target(self, reflector: Reflector):
        with pytest.raises(InvalidArgument, match="None target"):
            reflector.get_field(None, "__balance")

    def test_empty_name(self, reflector: Reflector, account: Account):
        with pytest.raises(InvalidArgument, match="name can't be empty"):
            reflector.get_property(account, "")


@pytest.mark.unit
class TestValueShortcuts:
    """Test get_value and set_value."""

    def test_get_value_of_property(self, reflector: Reflector, account: Account):
        assert reflector.get_value(account, "_balance", int) == 50

    def test_get_value_of_static_field(self, reflector: Reflector):
        assert reflector.get_value(Account, "_currency") == "gold"

    def test_set_value_of_field(self, reflector: Reflector, account: Account):
        reflector.set_value(account, "__balance", 10, int)
        assert account._balance == 10

    def test_set_value_type_mismatch(self, reflector: Reflector, account: Account):
        with pytest.raises(TypeMismatch):
            reflector.set_value(account, "_balance", "10", str)

    def test_get_value_of_method_is_not_found(self, reflector: Reflector, account: Account):
        with pytest.raises(MemberNotFound):
            reflector.get_value(account, "_explode")


@pytest.mark.unit
class TestLookupCache:
    """Test caching of member lookups."""

    def test_repeated_lookups_hit_the_cache(self, reflector: Reflector, account: Account):
        reflector.get_field(account, "__balance", int)
        reflector.get_field(Account("bob"), "__balance", int)

        assert reflector.lookup_cache.hits == 1
        assert reflector.lookup_cache.misses == 1
        assert (Account, "__balance") in reflector.lookup_cache

    def test_missing_members_are_cached(self, reflector: Reflector, account: Account):
        reflector.get_field(account, "_nope", required=False)
        reflector.get_field(account, "_nope", required=False)

        assert reflector.lookup_cache.hits == 1

    def test_instance_attributes_are_found_after_cached_miss(self, reflector: Reflector):
        first = Account("ann")
        assert reflector.get_field(first, "_audit_log").get() == []

        second = Account("bob")
        second._audit_log.append("x")
        assert reflector.get_field(second, "_audit_log").get() == ["x"]

    def test_clear_cache(self, reflector: Reflector, account: Account):
        reflector.get_field(account, "__balance")
        reflector.clear_cache()

        assert len(reflector.lookup_cache) == 0

    def test_explicit_cache_size(self):
        assert Reflector(cache_size=4).lookup_cache.max_size == 4


@pytest.mark.unit
class TestConfiguration:
    """Test environment-driven defaults."""

    def test_defaults(self, reflector: Reflector):
        assert reflector.resolver.eager_type_check is False
        assert reflector.introspector.search_metaclass is True
        assert reflector.lookup_cache.max_size == 1024

    def test_eager_type_check_from_env(self, monkeypatch: pytest.MonkeyPatch, account: Account):
        monkeypatch.setenv("REFLECTION_EAGER_TYPE_CHECK", "true")
        reflector = Reflector()

        with pytest.raises(TypeMismatch):
            reflector.get_field(account, "__balance", str)

    def test_cache_size_from_env(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("REFLECTION_LOOKUP_CACHE_SIZE", "8")
        assert Reflector().lookup_cache.max_size == 8

    def test_metaclass_search_disabled_from_env(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("REFLECTION_SEARCH_METACLASS", "off")
        reflector = Reflector()

        assert reflector.get_property(Tracked, "_instance_count", required=False) is None

    def test_explicit_resolver(self):
        resolver = AccessorResolver(MemberIntrospector(), eager_type_check=True)
        reflector = Reflector(resolver)

        assert reflector.resolver is resolver
        assert reflector.introspector is resolver.introspector


@pytest.mark.unit
class TestShadowedClassDefaults:
    """Test lookups of class defaults that instances overwrite."""

    def test_instance_field_found_after_cached_static_lookup(self, reflector: Reflector):
        assert reflector.get_field(Widget, "_cache") is not None

        widget = Widget()
        assert reflector.get_field(widget, "_cache", dict).get() == {"a": 1}

    def test_instance_without_override_is_not_found(self, reflector: Reflector):
        widget = Widget.__new__(Widget)

        with pytest.raises(MemberNotFound, match="no instance field"):
            reflector.get_field(widget, "_cache")
