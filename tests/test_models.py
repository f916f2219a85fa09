from hostsmerge.models import HostEntry


def test_disabled_entry_with_comment():
    entry = HostEntry(address="1.2.3.4", hostname="x", comment="c", enabled=False)
    assert entry.to_hosts_line() == "#1.2.3.4 x # c"


def test_enabled_entry_without_comment():
    entry = HostEntry(address="1.2.3.4", hostname="x")
    assert entry.to_hosts_line() == "1.2.3.4 x"


def test_enabled_entry_with_comment():
    entry = HostEntry(address="::1", hostname="localhost", comment="loopback")
    assert entry.to_hosts_line() == "::1 localhost # loopback"


def test_sort_key_orders_by_address_then_hostname():
    entries = [
        HostEntry("10.0.0.1", "b"),
        HostEntry("10.0.0.1", "a"),
        HostEntry("0.0.0.0", "z"),
    ]
    ordered = sorted(entries, key=HostEntry.sort_key)
    assert [(e.address, e.hostname) for e in ordered] == [
        ("0.0.0.0", "z"),
        ("10.0.0.1", "a"),
        ("10.0.0.1", "b"),
    ]


def test_missing_address_sorts_last():
    entries = [HostEntry(None, "a"), HostEntry("9.9.9.9", "b"), HostEntry(None, "0")]
    ordered = sorted(entries, key=HostEntry.sort_key)
    assert [e.hostname for e in ordered] == ["b", "0", "a"]
