import pytest

from a11y_auditor.assertions import check_rule
from a11y_auditor.utils.validators import is_valid_email, is_valid_phone, mailto_addresses, phone_number


def messages(html, rule_id):
    return [violation.message for violation in check_rule(html, rule_id)]


# --- Phone links ---

def test_short_tel_number_is_invalid():
    assert messages('<a href="tel:123">Call</a>', "tel-links-valid-phone") == [
        '<a href="tel:123"> contains invalid phone number'
    ]


@pytest.mark.parametrize("href", ["tel:+14155551234", "tel:+1 (415) 555-1234", "tel:0612345678;ext=12"])
def test_valid_tel_numbers_pass(href):
    assert check_rule(f'<a href="{href}">Call</a>', "tel-links-valid-phone") == []


def test_fax_and_modem_use_their_scheme():
    html = '<a id="f" href="fax:12">Fax</a><a href="modem:+31201234567">Modem</a>'
    assert messages(html, "fax-links-valid-phone") == ['<a id="f" href="fax:12"> contains invalid phone number']
    assert check_rule(html, "modem-links-valid-phone") == []


@pytest.mark.parametrize("number, valid", [
    ("+14155551234", True),
    ("020-123 45 67", True),
    ("123", False),
    ("+123456789", False),
    ("call-me", False),
])
def test_is_valid_phone(number, valid):
    assert is_valid_phone(number) is valid


def test_phone_number_drops_parameters():
    assert phone_number("tel:+1555;ext=2", "tel") == "+1555"


# --- Mail links ---

def test_mailto_with_valid_address_passes():
    assert check_rule('<a href="mailto:john@example.com?subject=Hi">Mail</a>', "mailto-links-valid-email") == []


def test_mailto_reports_each_invalid_address():
    html = '<a href="mailto:john@example.com, bad,also@bad">Mail</a>'
    assert messages(html, "mailto-links-valid-email") == [
        '<a href="mailto:john@example.com, bad,also@bad"> contains invalid email address: "bad"',
        '<a href="mailto:john@example.com, bad,also@bad"> contains invalid email address: "also@bad"',
    ]


def test_mailto_addresses():
    assert mailto_addresses("mailto:a@b.nl, c@d.org?cc=e@f.com") == ["a@b.nl", "c@d.org"]


@pytest.mark.parametrize("address, valid", [
    ("john.doe@example.com", True),
    ("j+tag@mail.example.org", True),
    ("john@localhost", False),
    (".john@example.com", False),
    ("john..doe@example.com", False),
    ("", False),
])
def test_is_valid_email(address, valid):
    assert is_valid_email(address) is valid


# --- Landmarks and roles ---

def test_second_visible_main_is_reported_once():
    violations = check_rule('<main>a</main><main>b</main>', "only-one-visible-main")
    assert [v.message for v in violations] == ['<main> is a second visible main element']


def test_hidden_main_does_not_count():
    assert check_rule('<main>a</main><main hidden>b</main>', "only-one-visible-main") == []


def test_duplicate_unique_role():
    html = '<div role="banner">a</div><div role="search">s</div><div role="banner">b</div>'
    assert messages(html, "no-duplicated-unique-roles") == [
        '<div role="banner"> is a duplicate - role="banner" should be unique'
    ]


def test_link_with_button_role():
    assert len(check_rule('<a href="#" role="button">Open</a>', "no-button-role-on-links")) == 1


# --- Attributes ---

def test_required_select_without_empty_first_option():
    html = '<select id="c" required><option value="nl">NL</option></select>'
    assert messages(html, "required-select-starts-with-empty-option") == [
        '<select id="c" required> should start with an empty <option> (current first value: "nl")'
    ]


def test_required_select_with_placeholder_option_passes():
    html = '<select required><option value="">Choose</option><option value="nl">NL</option></select>'
    assert check_rule(html, "required-select-starts-with-empty-option") == []


def test_multiple_select_is_exempt():
    html = '<select required multiple><option value="nl">NL</option></select>'
    assert check_rule(html, "required-select-starts-with-empty-option") == []


@pytest.mark.parametrize("value", ["", " "])
def test_blank_class(value):
    assert messages(f'<p class="{value}">x</p>', "class-attribute-not-empty") == [
        f'<p class="{value}"> has an empty class attribute'
    ]


def test_blank_id():
    assert messages('<input name="q" id="">', "id-attribute-not-empty") == [
        '<input name="q" id=""> has an empty id attribute'
    ]


def test_placeholder_used_as_label():
    assert messages('<input type="text" placeholder="Name">', "placeholder-not-used-as-label") == [
        '<input placeholder="Name"> uses placeholder as label '
        '- add proper label, title, aria-label, or aria-labelledby'
    ]


def test_placeholder_with_label_passes():
    html = '<label for="n">Name</label><input id="n" placeholder="Jane"><label>City <input placeholder="Paris"></label>'
    assert check_rule(html, "placeholder-not-used-as-label") == []


def test_th_scope():
    html = '<table><tr><th scope="column">a</th><th scope=" Col ">b</th><th scope="row">c</th></tr></table>'
    assert messages(html, "table-header-scope-valid") == [
        '<th scope="column"> has invalid scope - must be "col" or "row"'
    ]


def test_insecure_urls():
    html = '<a href="http://example.com">x</a><img src="http://example.com/a.png" alt=""><a href="https://ok">y</a>'
    assert messages(html, "no-insecure-urls") == [
        '<a href="http://example.com"> uses insecure HTTP protocol - use HTTPS instead',
        '<img src="http://example.com/a.png"> uses insecure HTTP protocol - use HTTPS instead',
    ]


# --- Figures ---

def test_second_figcaption():
    html = '<figure><figcaption>a</figcaption><img src="x" alt=""><figcaption>b</figcaption></figure>'
    assert messages(html, "only-one-figcaption") == ['<figcaption> is a second figcaption within <figure>']
    assert check_rule(html, "figcaption-first-or-last-child") == []


def test_figcaption_in_the_middle():
    html = '<figure><img src="x" alt=""><figcaption>a</figcaption><p>b</p></figure>'
    assert len(check_rule(html, "figcaption-first-or-last-child")) == 1
