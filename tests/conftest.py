"""Global test fixtures: builders for headers, links and entries."""

from collections.abc import Callable

import pytest

from dhtcore.domain.chain.model.header import ChainHeader, Provenance
from dhtcore.domain.entry.model.entry import AppEntry
from dhtcore.domain.link.model.link import Link, LinkAction, LinkData
from dhtcore.domain.shared.model.address import Address

AGENT = Address("agent-key-1")


@pytest.fixture
def make_header() -> Callable[..., ChainHeader]:
    def _make(
        *,
        entry_type: str = "post",
        entry_address: str = "entry-addr",
        link_update_delete: str | None = None,
        timestamp: str = "2024-01-01T00:00:00Z",
    ) -> ChainHeader:
        return ChainHeader(
            entry_type=entry_type,
            entry_address=Address(entry_address),
            provenances=(Provenance(source=AGENT, signature="sig"),),
            link=Address("prev-header"),
            link_update_delete=Address(link_update_delete) if link_update_delete else None,
            timestamp=timestamp,
        )

    return _make


@pytest.fixture
def make_link_data(make_header) -> Callable[..., LinkData]:
    def _make(
        *,
        base: str = "base-addr",
        target: str = "target-addr",
        link_type: str = "comments",
        tag: str = "first",
        action: LinkAction = LinkAction.ADD,
    ) -> LinkData:
        return LinkData(
            action=action,
            link=Link(
                base=Address(base),
                target=Address(target),
                link_type=link_type,
                tag=tag,
            ),
            timestamp="2024-01-01T00:00:00Z",
            agent_id=AGENT,
            top_chain_header=make_header(entry_type="%agent_id", entry_address="top-entry"),
        )

    return _make


@pytest.fixture
def make_app_entry() -> Callable[..., AppEntry]:
    def _make(*, app_type: str = "post", value: str = '{"body":"hello"}') -> AppEntry:
        return AppEntry(app_type=app_type, value=value)

    return _make
