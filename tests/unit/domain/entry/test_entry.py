import pytest
from pydantic import TypeAdapter, ValidationError

from dhtcore.domain.entry.model.entry import (
    AppEntry,
    DeletionEntry,
    Entry,
    LinkAddEntry,
    LinkRemoveEntry,
)
from dhtcore.domain.shared.model.address import Address


class TestEntryAddress:
    def test_address_is_hash_of_canonical_json(self, make_app_entry):
        entry = make_app_entry()
        assert entry.address() == Address.of(entry.model_dump_json())

    def test_different_values_have_different_addresses(self, make_app_entry):
        assert make_app_entry(value='"a"').address() != make_app_entry(value='"b"').address()

    def test_link_add_and_link_remove_of_same_data_differ(self, make_link_data):
        link_data = make_link_data()
        assert LinkAddEntry(link_data=link_data).address() != LinkRemoveEntry(
            link_data=link_data
        ).address()


class TestEntryType:
    def test_app_entry_uses_app_type(self, make_app_entry):
        assert make_app_entry(app_type="comment").entry_type() == "comment"

    def test_system_entry_types(self, make_link_data):
        link_data = make_link_data()
        assert LinkAddEntry(link_data=link_data).entry_type() == "%link_add"
        assert LinkRemoveEntry(link_data=link_data).entry_type() == "%link_remove"
        assert DeletionEntry(deleted_entry_address=Address("x")).entry_type() == "%deletion"


class TestEntryUnion:
    def test_discriminated_by_type(self):
        adapter = TypeAdapter(Entry)
        entry = adapter.validate_python(
            {"type": "deletion", "deleted_entry_address": "gone"}
        )
        assert entry == DeletionEntry(deleted_entry_address=Address("gone"))

    def test_unknown_type_rejected(self):
        with pytest.raises(ValidationError):
            TypeAdapter(Entry).validate_python({"type": "dna"})

    def test_extra_fields_rejected(self):
        with pytest.raises(ValidationError):
            AppEntry(app_type="post", value="{}", extra="nope")
