"""
Tests for domain name and TLD validation
Run: python -m pytest tests/test_domain.py -v
"""

import pytest

from netvalidators.rules.domain import DomainRule, unicode_to_ascii
from netvalidators.utils import tld

LONG_LABEL = "abcdefghijklmnopqrstuvwxyzabcdefghijklmnopqrstuvwxyz0123456789A"


@pytest.fixture
def domain_rule():
    return DomainRule()


@pytest.fixture
def local_domain_rule():
    return DomainRule(allow_local=True)


class TestValidDomains:

    @pytest.mark.parametrize("domain", [
        "apache.org",
        "www.google.com",
        "test-domain.com",
        "test---domain.com",
        "test-d-o-m-ain.com",
        "as.uk",
        "ApAchE.Org",
        "z.com",
        "i.have.an-example.domain.name",
        "www.cnn.com.",
        "example.rocks",
        "hello.tokyo",
        "abc.school",
    ])
    def test_valid(self, domain_rule, domain):
        assert domain_rule.is_valid(domain)

    @pytest.mark.parametrize("domain", [
        ".org",
        " apache.org ",
        "apa che.org",
        "-testdomain.name",
        "testdomain-.name",
        "---c.com",
        "c--.com",
        "apache.rog",
        "http://www.apache.org",
        " ",
        "",
        ".nope",
        "www.cnn.com..",
        "apache",
    ])
    def test_invalid(self, domain_rule, domain):
        assert not domain_rule.is_valid(domain)

    def test_none_is_invalid(self, domain_rule):
        assert not domain_rule.is_valid(None)
        assert not domain_rule.is_valid_domain_syntax(None)


class TestTopLevelDomains:

    def test_infrastructure(self, domain_rule):
        assert domain_rule.is_valid_infrastructure_tld(".arpa")
        assert not domain_rule.is_valid_infrastructure_tld(".com")

    def test_generic(self, domain_rule):
        assert domain_rule.is_valid_generic_tld(".name")
        assert not domain_rule.is_valid_generic_tld(".us")

    def test_country_code(self, domain_rule):
        assert domain_rule.is_valid_country_code_tld(".uk")
        assert not domain_rule.is_valid_country_code_tld(".org")

    def test_case_insensitive(self, domain_rule):
        assert domain_rule.is_valid_tld(".COM")
        assert domain_rule.is_valid_tld(".BiZ")
        assert domain_rule.is_valid_tld("com")

    def test_unicode_tld(self, domain_rule):
        assert domain_rule.is_valid_tld("рф")
        assert domain_rule.is_valid_country_code_tld(".xn--p1ai")

    def test_local_tlds_need_allow_local(self, domain_rule, local_domain_rule):
        assert not domain_rule.is_valid_tld("localhost")
        assert local_domain_rule.is_valid_tld("localhost")
        assert local_domain_rule.is_valid_tld(".localdomain")
        # the per-table check ignores the option
        assert domain_rule.is_valid_local_tld("localdomain")

    def test_none_is_not_a_tld(self, domain_rule, local_domain_rule):
        assert not domain_rule.is_valid_tld(None)
        assert not local_domain_rule.is_valid_tld(None)
        assert not domain_rule.is_valid_infrastructure_tld(None)
        assert not domain_rule.is_valid_generic_tld(None)
        assert not domain_rule.is_valid_country_code_tld(None)
        assert not domain_rule.is_valid_local_tld(None)


class TestAllowLocal:

    def test_default_rejects_local(self, domain_rule):
        assert not domain_rule.allow_local
        assert not domain_rule.is_valid("localhost.localdomain")
        assert not domain_rule.is_valid("localhost")

    @pytest.mark.parametrize("domain", [
        "localhost.localdomain",
        "localhost",
        "hostname",
        "machinename",
        "apache.org",
    ])
    def test_allow_local_accepts(self, local_domain_rule, domain):
        assert local_domain_rule.is_valid(domain)

    def test_allow_local_still_checks_syntax(self, local_domain_rule):
        assert not local_domain_rule.is_valid(" apache.org ")
        assert not local_domain_rule.is_valid("broke.hostname")
        assert not local_domain_rule.is_valid("-host")


class TestIDN:

    @pytest.mark.parametrize("domain", [
        "www.xn--bcher-kva.ch",
        "www.bücher.ch",
        "xn--d1abbgf6aiiy.xn--p1ai",
        "президент.рф",
        "президент.рф.",
    ])
    def test_idn_domains(self, domain_rule, domain):
        assert domain_rule.is_valid(domain)

    def test_idn_with_empty_label(self, domain_rule):
        assert not domain_rule.is_valid("президент.рф..")

    def test_unicode_to_ascii(self):
        assert unicode_to_ascii("a..b") == "a..b"
        assert unicode_to_ascii("b｡") == "b."
        assert unicode_to_ascii("．") == "."


class TestDomainSyntax:
    """Label structure without TLD membership"""

    @pytest.mark.parametrize("domain", ["a.ch", "9.ch", "az.ch", "09.ch", "9-1.ch"])
    def test_rfc2396_domainlabel_valid(self, domain_rule, domain):
        assert domain_rule.is_valid(domain)

    @pytest.mark.parametrize("domain", ["91-.ch", "-.ch"])
    def test_rfc2396_domainlabel_invalid(self, domain_rule, domain):
        assert not domain_rule.is_valid(domain)

    @pytest.mark.parametrize("domain,expected", [
        ("a.c", True),
        ("a.cc", True),
        ("a.c9", True),
        ("a.c-9", True),
        ("a.c-z", True),
        ("a.9c", False),
        ("a.c-", False),
        ("a.-", False),
        ("a.-9", False),
    ])
    def test_rfc2396_toplabel(self, domain_rule, domain, expected):
        assert domain_rule.is_valid_domain_syntax(domain) is expected

    @pytest.mark.parametrize("domain,expected", [
        ("a", True),
        ("9", True),
        ("c-z", True),
        ("c-", False),
        ("-c", False),
        ("-", False),
    ])
    def test_no_dots(self, domain_rule, domain, expected):
        assert domain_rule.is_valid_domain_syntax(domain) is expected

    def test_label_length(self, domain_rule):
        """Labels are at most 63 characters"""
        assert len(LONG_LABEL) == 63
        assert domain_rule.is_valid_domain_syntax(LONG_LABEL + ".com")
        assert not domain_rule.is_valid_domain_syntax(LONG_LABEL + "x.com")
        assert domain_rule.is_valid_domain_syntax("test." + LONG_LABEL)
        assert not domain_rule.is_valid_domain_syntax("test.x" + LONG_LABEL)

    def test_domain_length(self, domain_rule):
        """Domains are at most 253 characters"""
        long_domain = ".".join([LONG_LABEL, LONG_LABEL, LONG_LABEL, LONG_LABEL[:61]])
        assert len(long_domain) == 253
        assert domain_rule.is_valid_domain_syntax(long_domain)
        assert not domain_rule.is_valid_domain_syntax(long_domain + "x")


class TestTldTables:
    """Tables must stay sorted, unique and lower-case"""

    @pytest.mark.parametrize("table", [
        tld.INFRASTRUCTURE_TLDS,
        tld.GENERIC_TLDS,
        tld.COUNTRY_CODE_TLDS,
        tld.LOCAL_TLDS,
    ])
    def test_sorted_and_lower_case(self, table):
        assert list(table) == sorted(set(table))
        assert all(entry == entry.lower() for entry in table)

    def test_tables_do_not_overlap(self):
        assert not tld.GENERIC_TLD_SET & tld.COUNTRY_CODE_TLD_SET
        assert not tld.GENERIC_TLD_SET & tld.INFRASTRUCTURE_TLD_SET
        assert not tld.LOCAL_TLD_SET & (tld.GENERIC_TLD_SET | tld.COUNTRY_CODE_TLD_SET)

    def test_entries_are_ascii(self):
        for table in (tld.GENERIC_TLDS, tld.COUNTRY_CODE_TLDS):
            assert all(entry.isascii() for entry in table)
