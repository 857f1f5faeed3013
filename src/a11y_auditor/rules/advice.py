from typing import List, Optional

from a11y_auditor.dom.core import Category, CategoryDefinition, Element, MatchContext, rule_spec
from a11y_auditor.utils.validators import is_valid_email, is_valid_phone, mailto_addresses, phone_number

UNIQUE_ROLES = ('main', 'search', 'banner', 'contentinfo')


def _parent_name(el: Element) -> str:
    parent = el.parent
    return parent.tag_name if parent is not None else '#document'


# --- RULES ---

@rule_spec(
    "required-select-starts-with-empty-option",
    header="Found required select elements without an empty first option",
    selector='select[required]:not([multiple])[size="1"], select[required]:not([multiple]):not([size])',
    references=["https://html.spec.whatwg.org/multipage/form-elements.html#placeholder-label-option"],
)
def check_required_select(el: Element, ctx: MatchContext) -> Optional[str]:
    options = el.select('option')
    if not options:
        return None
    first = options[0]
    value = first.get_attribute('value')
    if value is None:
        value = first.text_content
    if value == '':
        return None
    return (
        f'<select{el.identifier} required> should start with an empty <option> '
        f'(current first value: "{value.strip()[:50]}")'
    )


@rule_spec(
    "class-attribute-not-empty",
    header="Found elements with empty class attributes",
    selector='[class=""], [class=" "]',
)
def check_class_not_empty(el: Element, ctx: MatchContext) -> str:
    return f'<{el.tag_name}{el.identifier} class="{el.get_attribute("class")}"> has an empty class attribute'


@rule_spec(
    "id-attribute-not-empty",
    header="Found elements with empty id attributes",
    selector='[id=""], [id=" "]',
)
def check_id_not_empty(el: Element, ctx: MatchContext) -> str:
    return f'<{el.tag_name}{el.attr_fragment("name")} id="{el.get_attribute("id")}"> has an empty id attribute'


@rule_spec(
    "only-one-visible-main",
    header="Found multiple visible <main> elements (only one should be visible at a time)",
    selector='main:not([hidden])',
    references=["https://html.spec.whatwg.org/multipage/grouping-content.html#elementdef-main"],
)
def check_only_one_visible_main(el: Element, ctx: MatchContext) -> Optional[str]:
    if ctx.index == 0:
        return None
    return f'<main{el.identifier}> is a second visible main element'


@rule_spec(
    "only-one-figcaption",
    header="Found multiple <figcaption> elements within the same parent",
    selector='figcaption:not(:first-of-type)',
    references=["https://html.spec.whatwg.org/multipage/grouping-content.html#the-figure-element"],
)
def check_only_one_figcaption(el: Element, ctx: MatchContext) -> str:
    return f'<figcaption{el.identifier}> is a second figcaption within <{_parent_name(el)}>'


@rule_spec(
    "figcaption-first-or-last-child",
    header="Found <figcaption> elements that are not first or last child",
    selector='figcaption:not(:first-child):not(:last-child)',
    references=["https://html.spec.whatwg.org/multipage/grouping-content.html#the-figure-element"],
)
def check_figcaption_position(el: Element, ctx: MatchContext) -> str:
    return f'<figcaption{el.identifier}> is neither first nor last child within <{_parent_name(el)}>'


@rule_spec(
    "mailto-links-valid-email",
    header="Found mailto links with invalid email addresses",
    selector='[href^="mailto"]',
)
def check_mailto_links(el: Element, ctx: MatchContext) -> List[str]:
    href = el.get_attribute('href')
    target = href[len("mailto:"):].split('?', 1)[0]
    return [
        f'<a{el.identifier} href="mailto:{target}"> contains invalid email address: "{address}"'
        for address in mailto_addresses(href)
        if not is_valid_email(address)
    ]


def _phone_check(scheme: str):
    """Predicate validating the number of a `scheme:` link."""
    def check(el: Element, ctx: MatchContext) -> Optional[str]:
        number = phone_number(el.get_attribute('href'), scheme)
        if is_valid_phone(number):
            return None
        return f'<a{el.identifier} href="{scheme}:{number}"> contains invalid phone number'
    return check


check_tel_links = rule_spec(
    "tel-links-valid-phone",
    header="Found tel: links with invalid phone numbers",
    selector='[href^="tel"]',
)(_phone_check('tel'))

check_fax_links = rule_spec(
    "fax-links-valid-phone",
    header="Found fax: links with invalid phone numbers",
    selector='[href^="fax"]',
)(_phone_check('fax'))

check_modem_links = rule_spec(
    "modem-links-valid-phone",
    header="Found modem: links with invalid phone numbers",
    selector='[href^="modem"]',
)(_phone_check('modem'))


@rule_spec(
    "no-button-role-on-links",
    header='Found links with role="button" that should be <button> elements',
    selector='a[role="button"]',
)
def check_no_button_role_on_links(el: Element, ctx: MatchContext) -> str:
    return f'<a{el.identifier} role="button"> should be a <button> element'


@rule_spec(
    "no-duplicated-unique-roles",
    header="Found duplicate unique ARIA roles",
    selector=', '.join(f'[role="{role}"]' for role in UNIQUE_ROLES),
    references=["https://accessibilite.numerique.gouv.fr/methode/criteres-et-tests/#12.6"],
)
def check_unique_roles(el: Element, ctx: MatchContext) -> Optional[str]:
    role = el.get_attribute('role')
    if not any(previous.get_attribute('role') == role for previous in ctx.previous_matches):
        return None
    return f'<{el.tag_name}{el.identifier} role="{role}"> is a duplicate - role="{role}" should be unique'


@rule_spec(
    "placeholder-not-used-as-label",
    header="Found elements using placeholder as label",
    selector='[placeholder]:not([title]):not([aria-label]):not([aria-labelledby])',
)
def check_placeholder_not_label(el: Element, ctx: MatchContext) -> Optional[str]:
    element_id = el.get_attribute('id')
    if element_id and any(label.get_attribute('for') == element_id for label in ctx.document.select('label[for]')):
        return None
    if any(ancestor.tag_name == 'label' for ancestor in el.ancestors()):
        return None
    return (
        f'<{el.tag_name}{el.identifier} placeholder="{el.get_attribute("placeholder")}"> uses placeholder as label '
        f'- add proper label, title, aria-label, or aria-labelledby'
    )


@rule_spec(
    "table-header-scope-valid",
    header="Found <th> elements with invalid scope attributes",
    selector='th[scope]',
    references=["https://accessibilite.numerique.gouv.fr/methode/criteres-et-tests/#5.7"],
)
def check_th_scope(el: Element, ctx: MatchContext) -> Optional[str]:
    scope = el.get_attribute('scope')
    if scope.strip().lower() in ('col', 'row'):
        return None
    return f'<th{el.identifier} scope="{scope}"> has invalid scope - must be "col" or "row"'


@rule_spec(
    "no-insecure-urls",
    header="Found elements with insecure HTTP URLs",
    selector='[src^="http:"], [href^="http:"]',
    references=["https://transparencyreport.google.com/https/overview?hl=en"],
)
def check_no_insecure_urls(el: Element, ctx: MatchContext) -> str:
    attr = 'href' if el.has_attribute('href') else 'src'
    return (
        f'<{el.tag_name}{el.identifier} {attr}="{el.get_attribute(attr)}"> '
        f'uses insecure HTTP protocol - use HTTPS instead'
    )


# --- DEFINITION ---
DEFINITION = CategoryDefinition(
    category=Category.ADVICE,
    rules=[
        check_required_select,
        check_class_not_empty,
        check_id_not_empty,
        check_only_one_visible_main,
        check_only_one_figcaption,
        check_figcaption_position,
        check_mailto_links,
        check_tel_links,
        check_fax_links,
        check_modem_links,
        check_no_button_role_on_links,
        check_unique_roles,
        check_placeholder_not_label,
        check_th_scope,
        check_no_insecure_urls,
    ],
)
