import pytest
from pydantic import ValidationError

from dhtcore.domain.shared.model.address import Address


class TestChainHeader:
    def test_supersede_reference_absent_by_default(self, make_header):
        assert make_header().supersede_reference() is None

    def test_supersede_reference_is_link_update_delete(self, make_header):
        header = make_header(link_update_delete="old-entry")
        assert header.supersede_reference() == Address("old-entry")

    def test_address_is_content_hash_of_header(self, make_header):
        header = make_header()
        assert header.address() == Address.of(header.model_dump_json())

    def test_address_differs_from_entry_address(self, make_header):
        header = make_header(entry_address="entry-addr")
        assert header.address() != header.entry_address

    def test_address_changes_with_any_field(self, make_header):
        assert make_header(timestamp="t1").address() != make_header(timestamp="t2").address()

    def test_summary_without_reference(self, make_header):
        assert make_header(entry_type="post").summary() == "Header[type: post, crud_link: None]"

    def test_summary_with_reference(self, make_header):
        header = make_header(entry_type="post", link_update_delete="old-entry")
        assert header.summary() == "Header[type: post, crud_link: old-entry]"

    def test_is_frozen(self, make_header):
        header = make_header()
        with pytest.raises(ValidationError):
            header.entry_type = "other"

    def test_hashable(self, make_header):
        assert hash(make_header()) == hash(make_header())
