"""
Tests for email address validation
Run: python -m pytest tests/test_email.py -v
"""

import pytest

from netvalidators.rules.email import EmailRule


@pytest.fixture
def email_rule():
    return EmailRule()


class TestEmailStructure:

    @pytest.mark.parametrize("email", [
        "jsmith@apache.org",
        "jsmith@apache.com",
        "jsmith@apache.net",
        "jsmith@apache.info",
        "someone@yahoo.museum",
        "someone@yahoo.com",
        "andy.noble@data-workshop.com",
        "foo+bar@i.am.not.in.us.example.com",
        "me@att.net",
        "abc@school.school",
        "abc-@abc.com",
        "abc_def@abc.com",
    ])
    def test_valid(self, email_rule, email):
        assert email_rule.is_valid(email)

    @pytest.mark.parametrize("email", [
        "jsmith@apache.",
        "jsmith@apache.c",
        "someone@yahoo.mu-seum",
        "andy-noble@data-workshop.-com",
        "andy-noble@data-workshop.c-om",
        "andy-noble@data-workshop.co-m",
        "andy.noble@data-workshop.com.",
        "andy@o'reilly.data-workshop.com",
        "foo+bar@example+3.com",
        "test@%*.com",
        "test@^&#.com",
        "me@at&t.net",
        "someone@-test.com",
        "someone@test-.com",
        "abc@abc_def.com",
        "joeblow@apa,che.org",
        "joeblow@apache.o,rg",
        "joeblow@apache,org",
        "joe@ap/ache.org",
        "joe@apac!he.org",
        "Abc@def@example.com",
        "abigail@",
        "@example.com",
        "string",
    ])
    def test_invalid(self, email_rule, email):
        assert not email_rule.is_valid(email)

    def test_none_is_invalid(self, email_rule):
        assert not email_rule.is_valid(None)
        assert not email_rule.is_valid_domain(None)
        assert not EmailRule(allow_tld=True).is_valid_domain(None)
        assert not email_rule.is_valid_user(None)


class TestEmailDomain:

    def test_ip_literal(self, email_rule):
        assert email_rule.is_valid("someone@[216.109.118.76]")
        assert email_rule.is_valid("someone@[::1]")
        assert not email_rule.is_valid("someone@[216.109.118.276]")
        assert not email_rule.is_valid("abigail@[example.com]")

    @pytest.mark.parametrize("email", [
        "someone@xn--d1abbgf6aiiy.xn--p1ai",
        "someone@президент.рф",
        "someone@www.bücher.ch",
    ])
    def test_idn_domains(self, email_rule, email):
        assert email_rule.is_valid(email)

    def test_localhost(self, email_rule):
        allow_local = EmailRule(allow_local=True)

        assert allow_local.is_valid("joe@localhost.localdomain")
        assert allow_local.is_valid("joe@localhost")
        assert not email_rule.is_valid("joe@localhost.localdomain")
        assert not email_rule.is_valid("joe@localhost")

    def test_bare_tld(self, email_rule):
        """A single TLD is a domain only when explicitly allowed"""
        allow_tld = EmailRule(allow_tld=True)

        assert allow_tld.is_valid("test@com")
        assert not allow_tld.is_valid("test@.com")
        assert not email_rule.is_valid("test@com")


class TestEmailUser:

    @pytest.mark.parametrize("email", [
        "andy.o'reilly@data-workshop.com",
        "joe!/blow@apache.org",
        "joe1blow@apache.org",
        "joe$blow@apache.org",
        "joe-@apache.org",
        "joe_@apache.org",
        "joe+@apache.org",
        "joe!@apache.org",
        "joe*@apache.org",
        "joe'@apache.org",
        "joe%45@apache.org",
        "joe?@apache.org",
        "joe&@apache.org",
        "joe=@apache.org",
        "+joe@apache.org",
        "'joe@apache.org",
        "=joe@apache.org",
        "+@apache.org",
        "*@apache.org",
        "=@apache.org",
        "joe.ok@apache.org",
    ])
    def test_unquoted_specials_valid(self, email_rule, email):
        assert email_rule.is_valid(email)

    @pytest.mark.parametrize("email", [
        "joe.@apache.org",
        ".joe@apache.org",
        ".@apache.org",
        "joe..ok@apache.org",
        "..@apache.org",
        "joe(@apache.org",
        "joe)@apache.org",
        "joe,@apache.org",
        "joe;@apache.org",
    ])
    def test_unquoted_specials_invalid(self, email_rule, email):
        assert not email_rule.is_valid(email)

    @pytest.mark.parametrize("email", [
        '"joe."@apache.org',
        '".joe"@apache.org',
        '"joe+"@apache.org',
        '"joe("@apache.org',
        '"joe,"@apache.org',
        '"joe;"@apache.org',
        '".."@apache.org',
        '"john\\"doe"@apache.org',
    ])
    def test_quoted_specials_valid(self, email_rule, email):
        assert email_rule.is_valid(email)

    def test_escaped_characters(self, email_rule):
        assert email_rule.is_valid("\\>escape\\\\special\\^characters\\<@example.com")
        assert email_rule.is_valid("Abc\\@def@example.com")
        assert email_rule.is_valid("space\\ monkey@example.com")

    def test_user_length(self, email_rule):
        """The user part is at most 64 characters"""
        user = "john56789.john56789.john56789.john56789.john56789.john56789.john"
        assert len(user) == 64
        assert email_rule.is_valid(user + "@example.com")
        assert not email_rule.is_valid(user + "5@example.com")

    def test_spaces(self, email_rule):
        assert not email_rule.is_valid("joeblow @apache.org")
        assert not email_rule.is_valid("joeblow@ apache.org")
        assert email_rule.is_valid(" joeblow@apache.org")
        assert email_rule.is_valid("joeblow@apache.org ")
        assert not email_rule.is_valid("joe blow@apache.org ")
        assert not email_rule.is_valid("joeblow@apa che.org ")

    @pytest.mark.parametrize("code", list(range(32)) + [127])
    def test_control_characters(self, email_rule, code):
        assert not email_rule.is_valid(f"foo{chr(code)}bar@domain.com")
