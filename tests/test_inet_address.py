"""
Tests for IPv4 / IPv6 address validation
Run: python -m pytest tests/test_inet_address.py -v
"""

import pytest


class TestInet4Address:
    """Dotted-quad IPv4 addresses"""

    @pytest.mark.parametrize("address", [
        "140.211.11.130",
        "72.14.253.103",
        "199.232.41.5",
        "216.35.123.87",
        "24.25.231.12",
        "135.14.44.12",
        "213.25.224.32",
        "229.35.159.6",
        "248.85.24.92",
        "127.0.0.1",
        "255.255.255.255",
        "0.0.0.0",
    ])
    def test_valid_addresses(self, inet_rule, address):
        """Addresses from the wild, by class and reserved ones"""
        assert inet_rule.is_valid(address)
        assert inet_rule.is_valid_inet4_address(address)

    @pytest.mark.parametrize("address", [
        "2.41.32.324",
        "154.123.441.123",
        "201.543.23.11",
        "231.54.11.987",
        "250.21.323.48",
        "124.14.32.abc",
        "23.64.12",
        "26.34.23.77.234",
        "256.256.256.256",
        "1.2.3.4.",
        ".1.2.3.4",
        "1.2.3.4 ",
        "",
    ])
    def test_invalid_addresses(self, inet_rule, address):
        assert not inet_rule.is_valid(address)

    def test_leading_zeros_rejected(self, inet_rule):
        """Octets with a leading zero are ambiguous (octal) and rejected"""
        assert not inet_rule.is_valid_inet4_address("124.14.32.01")
        assert not inet_rule.is_valid_inet4_address("010.0.0.1")
        assert inet_rule.is_valid_inet4_address("10.0.0.1")

    def test_non_ascii_digits_rejected(self, inet_rule):
        """Only ASCII digits form an octet"""
        assert not inet_rule.is_valid_inet4_address("1.2.3.٤")

    def test_none_is_invalid(self, inet_rule):
        assert not inet_rule.is_valid(None)
        assert not inet_rule.is_valid_inet4_address(None)


class TestInet6Address:
    """IPv6 text forms, including compression and IPv4 tails"""

    @pytest.mark.parametrize("address", [
        "::1",
        "::",
        "0:0:0:0:0:0:0:1",
        "0:0:0:0:0:0:0:0",
        "2001:DB8:0:0:8:800:200C:417A",
        "FF01:0:0:0:0:0:0:101",
        "2001:DB8::8:800:200C:417A",
        "FF01::101",
        "fe80::217:f2ff:fe07:ed62",
        "2001:0000:1234:0000:0000:C1C0:ABCD:0876",
        "3ffe:0b00:0000:0000:0001:0000:0000:000a",
        "2001:0438:FFFE:0000:0000:0000:0000:0A35",
        "2::10",
        "fe80::",
        "2001:0db8:1234::",
        "::ffff:0:0",
        "1:2:3:4:5:6::8",
        "1::2:3:4:5:6:7",
        "::2:3:4:5:6:7:8",
        "1111:2222:3333:4444:5555:6666:7777::",
        "0:0:0:0:0:0::",
        "1::",
        "::8",
        "::0:0:0:0:0",
        "::ffff:0c22:384e",
        "2001:0db8:0000:0000:0000::1428:57ab",
    ])
    def test_valid_addresses(self, inet_rule, address):
        assert inet_rule.is_valid_inet6_address(address)

    @pytest.mark.parametrize("address", [
        "0:0:0:0:0:0:13.1.68.3",
        "0:0:0:0:0:FFFF:129.144.52.38",
        "::13.1.68.3",
        "::FFFF:129.144.52.38",
        "1111:2222:3333:4444:5555:6666:123.123.123.123",
        "1111:2222:3333:4444::6666:123.123.123.123",
        "1:2:3::5:1.2.3.4",
        "1::5:11.22.33.44",
        "::123.123.123.123",
        "::ffff:192.168.1.1",
        "fe80::204:61ff:254.157.241.86",
    ])
    def test_valid_ipv4_tails(self, inet_rule, address):
        """A dotted quad may replace the last two groups"""
        assert inet_rule.is_valid_inet6_address(address)

    @pytest.mark.parametrize("address", [
        "",
        "2001:DB8:0:0:8:800:200C:417A:221",
        "FF01::101::2",
        "02001:0000:1234:0000:0000:C1C0:ABCD:0876",
        "2001:0000:1234:0000:00001:C1C0:ABCD:0876",
        "2001:0000:1234:0000:0000:C1C0:ABCD:0876 0",
        "2001:0000:1234: 0000:0000:C1C0:ABCD:0876",
        "3ffe:0b00:0000:0001:0000:0000:000a",
        "FF02:0000:0000:0000:0000:0000:0000:0000:0001",
        "3ffe:b00::1::a",
        "::1111:2222:3333:4444:5555:6666::",
        "1:2:3::4:5:6:7:8:9",
        "1111:2222:3333:4444:5555:6666:7777:8888:",
        "1111:2222:3333:4444:5555:6666:7777:8888::",
        ":1111:2222:3333:4444::5555",
        ":8888",
        ":::",
        ":::5555",
        "1.2.3.4::",
        "123",
        "ldkfj",
        "2001:db8:85a3::8a2e:370k:7334",
        "2001:1:1:1:1:1:255Z255X255Y255",
        "1111:2222:3333:4444:5555:6666:77778888",
        "1::+1",
        "1:_:2::",
    ])
    def test_invalid_addresses(self, inet_rule, address):
        assert not inet_rule.is_valid_inet6_address(address)

    @pytest.mark.parametrize("address", [
        "::ffff:192.168.1.1:192.168.1.1",
        "::192.168.1.1:192.168.1.1",
        "::ffff:192x168.1.26",
        "::ffff:2.3.4",
        "1111:2222:3333:4444:5555:6666:1.2.3.4.5",
        "1111:2222:3333:4444:5555:6666:00.00.00.00",
        "fe80:0000:0000:0000:0204:61ff:254.157.241.086",
        "1::1.2.3.256",
        "::..3.4",
        "1111:1.2.3.4",
    ])
    def test_invalid_ipv4_tails(self, inet_rule, address):
        assert not inet_rule.is_valid_inet6_address(address)

    @pytest.mark.parametrize("address", [
        "::2222:3333:4444:5555:6666:7777:1.2.3.4",
        "1111:2222:3333:4444:5555:6666::1.2.3.4",
        "::2222:3333:4444:5555:6666:7777:8888:9999",
    ])
    def test_compression_must_replace_a_group(self, inet_rule, address):
        """'::' with eight explicit groups around it is rejected"""
        assert not inet_rule.is_valid_inet6_address(address)

    def test_zone_ids_unsupported(self, inet_rule):
        assert not inet_rule.is_valid_inet6_address("fe80::1%eth0")

    def test_is_valid_accepts_either_family(self, inet_rule):
        assert inet_rule.is_valid("192.168.0.1")
        assert inet_rule.is_valid("::1")
        assert not inet_rule.is_valid("1.2.3")
        assert not inet_rule("2001:db8::g")

    def test_none_is_invalid(self, inet_rule):
        assert not inet_rule.is_valid_inet6_address(None)


class TestConveniencePredicates:
    """Package-level shortcuts backed by the shared rule"""

    def test_predicates(self):
        from netvalidators import is_valid_ip, is_valid_ipv4, is_valid_ipv6

        assert is_valid_ipv4("127.0.0.1")
        assert not is_valid_ipv4("::1")
        assert is_valid_ipv6("::1")
        assert not is_valid_ipv6("127.0.0.1")
        assert is_valid_ip("127.0.0.1")
        assert is_valid_ip("::1")
        assert not is_valid_ip(None)
