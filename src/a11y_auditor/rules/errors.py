from typing import List, Optional

from a11y_auditor.dom.core import Category, CategoryDefinition, Element, MatchContext, Rule, rule_spec
from a11y_auditor.utils.validators import is_invalid_css_identifier, parse_scale, scale_value, truncate

INVALID_SOURCES = ('', ' ', '#', '/')

FORM_OVERRIDE_ATTRIBUTES = ('formmethod', 'formaction', 'formtarget', 'formenctype', 'formnovalidate')

PRESENTATION_TABLE_SEMANTIC_TAGS = ('th', 'thead', 'tfoot', 'caption', 'colgroup')
PRESENTATION_TABLE_SEMANTIC_ATTRIBUTES = ('axis', 'scope', 'headers')

EVENT_ATTRIBUTES = (
    'onafterprint', 'onbeforeprint', 'onbeforeunload', 'onerror', 'onhaschange', 'onload', 'onmessage',
    'onoffline', 'ononline', 'onpagehide', 'onpageshow', 'onpopstate', 'onredo', 'onresize', 'onstorage',
    'onundo', 'onunload',
    'onblur', 'onchange', 'oncontextmenu', 'onfocus', 'onformchange', 'onforminput', 'oninput', 'oninvalid',
    'onreset', 'onselect', 'onsubmit',
    'onkeydown', 'onkeypress', 'onkeyup',
    'onclick', 'ondblclick', 'ondrag', 'ondragend', 'ondragenter', 'ondragleave', 'ondragover',
    'ondragstart', 'ondrop', 'onmousedown', 'onmousemove', 'onmouseout', 'onmouseover', 'onmouseup',
    'onmousewheel', 'onscroll',
    'onabort', 'oncanplay', 'oncanplaythrough', 'ondurationchange', 'onemptied', 'onended',
    'onloadeddata', 'onloadedmetadata', 'onloadstart', 'onpause', 'onplay', 'onplaying', 'onprogress',
    'onratechange', 'onreadystatechange', 'onseeked', 'onseeking', 'onstalled', 'onsuspend',
    'ontimeupdate', 'onvolumechange', 'onwaiting',
)

NESTED_INTERACTIVE_TARGETS = (
    'a[href]', 'audio[controls]', 'video[controls]', 'button', 'details', 'embed', 'iframe',
    'img[usemap]', 'label', 'select', 'textarea', 'input[type]:not([type="hidden"])',
)
INTERACTIVE_CONTAINERS = ('a', 'button', 'form', 'label', 'meter', 'progress')


def _text_or_ellipsis(el: Element) -> str:
    return el.text_content.strip() or '...'


def _html(el: Element) -> str:
    return el.outer_html().strip()


def _truthy_identifier(el: Element, *names: str, wrap: bool = False) -> str:
    """First non-empty attribute among `names`, as ` name="value"` or ` (name="value")`."""
    for name in names:
        value = el.get_attribute(name)
        if value:
            return f' ({name}="{value}")' if wrap else f' {name}="{value}"'
    return ''


# --- RULES ---

@rule_spec(
    "attributes-without-whitespace",
    header="Found attributes containing whitespace",
    selector='[id*=" "], [lang*=" "], map[name*=" "]',
    references=["https://html.spec.whatwg.org/#the-id-attribute"],
)
def check_attributes_without_whitespace(el: Element, ctx: MatchContext) -> Optional[str]:
    names = ['id', 'lang'] + (['name'] if el.tag_name == 'map' else [])
    attribute = next((name for name in names if ' ' in (el.get_attribute(name) or '')), None)
    if attribute is None:
        return None
    return f'<{el.tag_name} {attribute}="{el.get_attribute(attribute)}"> contains whitespace in the {attribute} attribute'


@rule_spec(
    "tabindex-not-positive",
    header="Found elements with tabindex > 0",
    selector='[tabindex]:not([tabindex="0"], [tabindex^="-"])',
    references=["https://github.com/Heydon/REVENGE.CSS/blob/master/revenge.css#L337"],
)
def check_tabindex_not_positive(el: Element, ctx: MatchContext) -> Optional[str]:
    value = el.get_attribute('tabindex')
    try:
        positive = int(float(value)) > 0
    except (ValueError, OverflowError):
        return None
    if positive:
        return f'<{el.tag_name} tabindex="{value}"> has a positive tabindex value'
    return None


@rule_spec(
    "href-not-empty",
    header="Found links with empty href attributes",
    selector='a[href=""], a[href=" "]',
    references=["https://html.spec.whatwg.org/multipage/links.html#links-created-by-a-and-area-elements"],
)
def check_href_not_empty(el: Element, ctx: MatchContext) -> str:
    return f'<a href="{el.get_attribute("href")}">{_text_or_ellipsis(el)}</a> has an empty href attribute'


@rule_spec(
    "empty-links-have-label",
    header="Found empty links without proper labels",
    selector=(
        'a:not(:has(*))[title=""], a:not(:has(*))[aria-label=""], a:not(:has(*))[aria-labelledby=""], '
        'a:not(:has(*)):not([title], [aria-label], [aria-labelledby])'
    ),
    references=["https://accessibilite.numerique.gouv.fr/methode/criteres-et-tests/#6.2"],
)
def check_empty_links_have_label(el: Element, ctx: MatchContext) -> Optional[str]:
    if not el.is_empty:
        return None
    href = el.get_attribute('href') or ''
    return (
        f'<a{el.attr_fragment("id")}{el.attr_fragment("class")} href="{href}"> '
        f'is empty and has no accessible label'
    )


@rule_spec(
    "images-have-alt",
    header="Found images without proper alt attributes",
    selector=(
        'img[alt=" "], area[alt=" "], input[type="image"][alt=" "], '
        'img:not([alt]), area:not([alt]), input[type="image"]:not([alt])'
    ),
    references=[
        "https://accessibilite.numerique.gouv.fr/methode/criteres-et-tests/#1.1",
        "https://www.w3.org/WAI/tutorials/images/decision-tree/",
    ],
)
def check_images_have_alt(el: Element, ctx: MatchContext) -> str:
    if not el.has_attribute('alt'):
        issue = 'is missing the alt attribute'
    else:
        issue = 'has an alt attribute with only whitespace'
    src = el.get_attribute('src') or ''
    return f'<{el.tag_name}{el.attr_fragment("type")} src="{src}"> {issue}'


@rule_spec(
    "role-img-has-label",
    header='Found elements with role="img" without proper labels',
    selector='[role="img"]:not([aria-hidden="true"], [aria-label], [aria-labelledby])',
    references=["https://www.w3.org/TR/wai-aria-1.3/#img"],
)
def check_role_img_has_label(el: Element, ctx: MatchContext) -> str:
    return (
        f'<{el.tag_name}{el.attr_fragment("id")}{el.attr_fragment("class")} role="img"> '
        f'is missing aria-label or aria-labelledby'
    )


def _source_issue(el: Element) -> Optional[str]:
    src, srcset = el.get_attribute('src'), el.get_attribute('srcset')
    if src is None and srcset is None:
        return 'is missing both src and srcset attributes'
    if src in INVALID_SOURCES:
        return f'has invalid src="{src}"'
    if srcset in INVALID_SOURCES:
        return f'has invalid srcset="{srcset}"'
    return None


@rule_spec(
    "images-have-valid-source",
    header="Found images without valid source attributes",
    selector='img, input[type="image"]',
    references=["https://html.spec.whatwg.org/multipage/embedded-content.html#attr-img-src"],
)
def check_images_have_valid_source(el: Element, ctx: MatchContext) -> Optional[str]:
    issue = _source_issue(el)
    if issue is None:
        return None
    alt = el.get_attribute('alt') or ''
    return f'<{el.tag_name}{el.attr_fragment("type")} alt="{alt}"> {issue}'


@rule_spec(
    "label-for-not-empty",
    header="Found labels with empty or invalid for attributes",
    selector='label[for=""], label[for=" "]',
    references=["https://accessibilite.numerique.gouv.fr/methode/criteres-et-tests/#11.1.2"],
)
def check_label_for_not_empty(el: Element, ctx: MatchContext) -> str:
    return (
        f'<label for="{el.get_attribute("for")}">{_text_or_ellipsis(el)}</label> '
        f'has an empty or whitespace-only for attribute'
    )


@rule_spec(
    "form-fields-have-label",
    header="Found form fields without proper labels",
    selector=(
        'input:not([type="button"], [type="submit"], [type="hidden"], [type="reset"], [type="image"], '
        '[id], [aria-label], [title], [aria-labelledby]), '
        'textarea:not([id], [aria-label], [aria-labelledby]), '
        'select:not([id], [aria-label], [aria-labelledby])'
    ),
    references=["https://accessibilite.numerique.gouv.fr/methode/criteres-et-tests/#11.1"],
)
def check_form_fields_have_label(el: Element, ctx: MatchContext) -> str:
    return (
        f'<{el.tag_name}{el.attr_fragment("type")}{el.attr_fragment("name")}{el.attr_fragment("class")}> '
        f'is missing a label (id, aria-label, title, or aria-labelledby)'
    )


@rule_spec(
    "button-inputs-have-value",
    header="Found button-type inputs without proper labels",
    selector=', '.join(
        f'input[type="{kind}"]:not([value], [title], [aria-label], [aria-labelledby])'
        for kind in ('reset', 'submit', 'button')
    ),
    references=["https://accessibilite.numerique.gouv.fr/methode/criteres-et-tests/#11.9"],
)
def check_button_inputs_have_value(el: Element, ctx: MatchContext) -> str:
    return (
        f'<input type="{el.get_attribute("type")}"{el.attr_fragment("name")}{el.attr_fragment("class")}> '
        f'is missing a label (value, title, aria-label, or aria-labelledby)'
    )


@rule_spec(
    "button-elements-not-empty",
    header="Found empty buttons without proper labels",
    selector='button:not(:has(*)):not([aria-label], [aria-labelledby], [title])',
    references=["https://accessibilite.numerique.gouv.fr/methode/criteres-et-tests/#11.9"],
)
def check_button_elements_not_empty(el: Element, ctx: MatchContext) -> Optional[str]:
    if not el.is_empty:
        return None
    return (
        f'<button{el.attr_fragment("type")}{el.attr_fragment("name")}{el.attr_fragment("class")}> '
        f'is empty and has no accessible label'
    )


@rule_spec(
    "button-attributes-not-empty",
    header="Found buttons with empty label attributes",
    selector='button[title=""], button[aria-label=""], button[aria-labelledby=""]',
    references=["https://accessibilite.numerique.gouv.fr/methode/criteres-et-tests/#11.9"],
)
def check_button_attributes_not_empty(el: Element, ctx: MatchContext) -> str:
    empty = next(name for name in ('title', 'aria-label', 'aria-labelledby') if el.get_attribute(name) == '')
    return f'<button{el.attr_fragment("type")}>{_text_or_ellipsis(el)}</button> has an empty {empty} attribute'


@rule_spec(
    "buttons-have-type",
    header="Found buttons without type attributes",
    selector='button:not([type], [form], [formaction], [formtarget])',
    references=["https://html.spec.whatwg.org/multipage/forms.html#the-button-element"],
)
def check_buttons_have_type(el: Element, ctx: MatchContext) -> str:
    return (
        f'<button{el.attr_fragment("name")}{el.attr_fragment("class")}>{_text_or_ellipsis(el)}</button> '
        f'is missing a type attribute'
    )


@rule_spec(
    "non-submit-buttons-without-form-attributes",
    header='Found buttons with type="reset" or type="button" using invalid form attributes',
    selector=', '.join(
        f'button[type="{kind}"][{attr}]' for kind in ('reset', 'button') for attr in FORM_OVERRIDE_ATTRIBUTES
    ),
    references=["https://html.spec.whatwg.org/multipage/forms.html#the-button-element"],
)
def check_non_submit_button_form_attributes(el: Element, ctx: MatchContext) -> str:
    invalid = [attr for attr in FORM_OVERRIDE_ATTRIBUTES if el.has_attribute(attr)]
    return (
        f'Button with type="{el.get_attribute("type")}" has invalid form attributes '
        f'[{", ".join(invalid)}]: {_html(el)}'
    )


@rule_spec(
    "disabled-buttons-are-disabled",
    header="Found buttons styled as disabled without proper disabled or readonly attributes",
    selector='button[class*="disabled"]:not([disabled], [readonly])',
    references=["https://github.com/Heydon/REVENGE.CSS/blob/master/revenge.css#L122"],
)
def check_disabled_buttons(el: Element, ctx: MatchContext) -> str:
    return (
        f'Button with class="{el.get_attribute("class")}" is styled as disabled '
        f'but is not actually disabled: {_html(el)}'
    )


@rule_spec(
    "inputs-have-type",
    header="Found inputs without a valid type attribute",
    selector='input:not([type]), input[type=" "], input[type=""]',
    references=["https://accessibilite.numerique.gouv.fr/methode/criteres-et-tests/#11.11"],
)
def check_inputs_have_type(el: Element, ctx: MatchContext) -> str:
    identifier = _truthy_identifier(el, 'id', 'name', wrap=True)
    return f'Input{identifier} is missing a valid type attribute: {_html(el)}'


@rule_spec(
    "optgroups-have-label",
    header="Found optgroups without a label attribute",
    selector='optgroup:not([label])',
    references=["https://accessibilite.numerique.gouv.fr/methode/criteres-et-tests/#11.8"],
)
def check_optgroups_have_label(el: Element, ctx: MatchContext) -> str:
    return f'Optgroup is missing a label attribute: {_html(el)}'


@rule_spec(
    "iframes-have-title",
    header="Found iframes without a valid title attribute",
    selector='iframe:not([title]), iframe[title=" "], iframe[title=""]',
    references=["https://accessibilite.numerique.gouv.fr/methode/criteres-et-tests/#2.1"],
)
def check_iframes_have_title(el: Element, ctx: MatchContext) -> str:
    src, srcdoc = el.get_attribute('src'), el.get_attribute('srcdoc')
    identifier = ''
    if src:
        identifier = f' (src="{src}")'
    elif srcdoc:
        identifier = f' (srcdoc="{truncate(srcdoc)}")'
    return f'Iframe{identifier} is missing a valid title attribute: {_html(el)}'


@rule_spec(
    "forms-have-action",
    header="Found forms without a valid action attribute",
    selector='form:not([action]), form[action=" "], form[action=""]',
    references=["https://github.com/Heydon/REVENGE.CSS/blob/master/revenge.css#L214"],
)
def check_forms_have_action(el: Element, ctx: MatchContext) -> str:
    identifier = _truthy_identifier(el, 'id', 'name', wrap=True)
    return f'Form{identifier} is missing a valid action attribute: {_html(el)}'


@rule_spec(
    "html-has-valid-language",
    header="HTML element must have a valid language defined",
    selector='html:not([lang]), html[lang*=" "], html[lang=""]',
    references=["https://accessibilite.numerique.gouv.fr/methode/criteres-et-tests/#8.3"],
)
def check_html_has_valid_language(el: Element, ctx: MatchContext) -> str:
    lang = el.get_attribute('lang')
    if lang is None:
        return 'HTML element is missing a lang attribute'
    if lang == '':
        return 'HTML element has an empty lang attribute'
    return f'HTML element has a lang attribute containing whitespace: lang="{lang}"'


@rule_spec(
    "presentation-tables-without-semantics",
    header="Found semantic elements in presentation tables",
    selector=', '.join(
        f'table[role="presentation"] {target}'
        for target in PRESENTATION_TABLE_SEMANTIC_TAGS + tuple(f'[{a}]' for a in PRESENTATION_TABLE_SEMANTIC_ATTRIBUTES)
    ),
    references=["https://accessibilite.numerique.gouv.fr/methode/criteres-et-tests/#5.8"],
)
def check_presentation_tables(el: Element, ctx: MatchContext) -> str:
    if el.tag_name in PRESENTATION_TABLE_SEMANTIC_TAGS:
        return f'Presentation table contains semantic element <{el.tag_name}>: {_html(el)}'
    attrs = [attr for attr in PRESENTATION_TABLE_SEMANTIC_ATTRIBUTES if el.has_attribute(attr)]
    return f'Presentation table contains element with semantic attribute(s) [{", ".join(attrs)}]: {_html(el)}'


@rule_spec(
    "width-height-on-appropriate-elements",
    header="Found elements with inappropriate width or height attributes (use CSS instead)",
    selector=':not(img, object, embed, svg, canvas, iframe, picture > source):is([width], [height])',
    references=["https://accessibilite.numerique.gouv.fr/methode/criteres-et-tests/#10"],
)
def check_width_height(el: Element, ctx: MatchContext) -> str:
    attr = 'width' if el.has_attribute('width') else 'height'
    return f'Element <{el.tag_name}> has inappropriate {attr} attribute: {_html(el)}'


@rule_spec(
    "no-javascript-event-attributes",
    header="Found elements with JavaScript event attributes (use CSS pseudo-classes or addEventListener instead)",
    selector=', '.join(f'[{attr}]' for attr in EVENT_ATTRIBUTES),
    references=["https://developer.mozilla.org/en-US/docs/Web/CSS/Pseudo-classes"],
)
def check_no_javascript_events(el: Element, ctx: MatchContext) -> str:
    handlers = [name for name in el.attrs if name.startswith('on')]
    return f'Element <{el.tag_name}> has JavaScript event attribute(s) [{", ".join(handlers)}]: {_html(el)}'


@rule_spec(
    "valid-css-namespaces",
    header="Found elements with invalid CSS identifiers (must not start with digit, --, or -digit)",
    selector='[id], [class]',
    references=["https://www.w3.org/TR/2011/REC-css3-selectors-20110929/#w3cselgrammar"],
)
def check_valid_css_namespaces(el: Element, ctx: MatchContext) -> Optional[str]:
    invalid = []
    element_id = el.get_attribute('id')
    if element_id and is_invalid_css_identifier(element_id):
        invalid.append(f'id="{element_id}"')
    for class_name in (el.get_attribute('class') or '').split():
        if is_invalid_css_identifier(class_name):
            invalid.append(f'class="{class_name}"')
    if not invalid:
        return None
    return f'Element <{el.tag_name}> has invalid CSS identifier(s) [{", ".join(invalid)}]: {_html(el)}'


def _missing_title(document) -> Optional[str]:
    if document.select_one('title') is None:
        return 'Document is missing a <title> tag'
    return None


@rule_spec(
    "title-not-empty",
    header="Found empty title tags",
    selector='title',
    document_check=_missing_title,
    references=["https://accessibilite.numerique.gouv.fr/methode/criteres-et-tests/#8.5"],
)
def check_title_not_empty(el: Element, ctx: MatchContext) -> Optional[str]:
    if el.text_content.strip():
        return None
    return f'Title tag is empty or contains only whitespace: {_html(el)}'


@rule_spec(
    "viewport-allows-zoom",
    header="Found viewport meta tags that restrict zoom (users should be able to zoom for readability)",
    selector=(
        'meta[name="viewport"][content*="maximum-scale"], '
        'meta[name="viewport"][content*="minimum-scale"], '
        'meta[name="viewport"][content*="user-scalable=no"]'
    ),
    references=["https://dequeuniversity.com/rules/axe/2.1/meta-viewport"],
)
def check_viewport_allows_zoom(el: Element, ctx: MatchContext) -> Optional[str]:
    content = el.get_attribute('content') or ''
    issues = []
    if 'user-scalable=no' in content:
        issues.append('user-scalable=no')

    for kind, restrictive in (('maximum', lambda scale: scale <= 2.0), ('minimum', lambda scale: scale >= 1.0)):
        raw = parse_scale(content, kind)
        scale = scale_value(raw) if raw is not None else None
        if scale is None:
            continue
        if restrictive(scale):
            issues.append(f'{kind}-scale={raw}')

    if not issues:
        return None
    return f'Viewport meta tag restricts zoom [{", ".join(issues)}]: {_html(el)}'


@rule_spec(
    "charset-is-utf8",
    header="Found meta tags with incorrect charset (use UTF-8 for maximum compatibility and security)",
    selector='meta[charset]:not([charset="utf-8"], [charset="UTF-8"])',
    references=["https://html.spec.whatwg.org/multipage/semantics.html#attr-meta-charset"],
)
def check_charset_is_utf8(el: Element, ctx: MatchContext) -> str:
    return f'Meta charset is not UTF-8 [charset="{el.get_attribute("charset")}"]: {_html(el)}'


@rule_spec(
    "charset-comes-first",
    header="Found <head> elements where charset is not declared first",
    selector='head :first-child:not([charset])',
    references=["https://developer.mozilla.org/en-US/docs/Web/HTML/Element/meta"],
)
def check_charset_comes_first(el: Element, ctx: MatchContext) -> str:
    return f'First child of <head> is <{el.tag_name}> instead of charset meta tag: {_html(el)}'


@rule_spec(
    "dir-attribute-is-valid",
    header="Found elements with invalid [dir] attribute (must be rtl, ltr, or auto)",
    selector='[dir]:not([dir="rtl"], [dir="ltr"], [dir="auto"])',
    references=["https://github.com/karlgroves/diagnostic.css/blob/39ede15ff46bd59af9f8f30efb04cbb45b6c1ba5/diagnostic.css#L113"],
)
def check_dir_attribute(el: Element, ctx: MatchContext) -> str:
    return f'<{el.tag_name}> has invalid dir="{el.get_attribute("dir")}" (must be "rtl", "ltr", or "auto")'


@rule_spec(
    "accesskey-not-used",
    header="Found elements using [accesskey] attribute (creates conflicts with browser and OS shortcuts)",
    selector='[accesskey]',
    references=["https://github.com/karlgroves/diagnostic.css/blob/39ede15ff46bd59af9f8f30efb04cbb45b6c1ba5/diagnostic.css#L159"],
)
def check_accesskey_not_used(el: Element, ctx: MatchContext) -> str:
    return f'<{el.tag_name}> has accesskey="{el.get_attribute("accesskey")}" (may conflict with browser/OS shortcuts)'


@rule_spec(
    "radio-checkbox-have-name",
    header="Found radio/checkbox elements without [name] attribute (required for proper grouping)",
    selector='[type="radio"]:not([name]), [type="checkbox"]:not([name])',
    references=["https://www.w3.org/WAI/tutorials/forms/grouping/"],
)
def check_radio_checkbox_have_name(el: Element, ctx: MatchContext) -> Optional[str]:
    identifier = _truthy_identifier(el, 'id')
    if el.get_attribute('type') == 'radio':
        return f'<input type="radio"{identifier}> lacks [name] attribute (required for grouping)'
    # A lone checkbox does not need a group name.
    if ctx.document.count('[type="checkbox"]') > 1:
        return f'<input type="checkbox"{identifier}> lacks [name] attribute (required when multiple checkboxes exist)'
    return None


@rule_spec(
    "radio-buttons-inside-fieldset",
    header="Found radio buttons outside <fieldset> (strongly recommended for accessibility)",
    selector='[type="radio"]',
    references=["https://www.w3.org/WAI/tutorials/forms/grouping/#radio-buttons"],
)
def check_radio_inside_fieldset(el: Element, ctx: MatchContext) -> Optional[str]:
    if any(ancestor.tag_name == 'fieldset' for ancestor in el.ancestors()):
        return None
    identifier = _truthy_identifier(el, 'id', 'name')
    return f'<input type="radio"{identifier}> is not inside a <fieldset> (recommended for grouping)'


def _required_aria(role: str, required: List[str]):
    """Predicate reporting the `required` attributes an element with `role` lacks."""
    def check(el: Element, ctx: MatchContext) -> Optional[str]:
        missing = [attr for attr in required if not el.has_attribute(attr)]
        if not missing:
            return None
        listed = ', '.join(f'[{attr}]' for attr in missing)
        noun = 'attribute' if len(required) == 1 else 'attributes'
        return f'<{el.tag_name}{_truthy_identifier(el, "id")} role="{role}"> missing required {noun}: {listed}'
    return check


def _role_rule(rule_id: str, role: str, required: List[str], reference: str) -> Rule:
    header = f'Found elements with role="{role}" missing required ARIA attributes'
    return Rule(
        id=rule_id,
        category=Category.ERRORS,
        header=header,
        selector=f'[role="{role}"]',
        predicate=_required_aria(role, required),
        references=(reference,),
    )


@rule_spec(
    "no-nested-interactive-elements",
    header="Found interactive elements nested inside other interactive elements",
    selector=', '.join(
        [f'{outer} {target}' for target in NESTED_INTERACTIVE_TARGETS for outer in ('a', 'button')]
        + ['form form', 'label label', 'meter meter', 'progress progress']
    ),
    references=["https://accessibilite.numerique.gouv.fr/methode/criteres-et-tests/#8.2"],
)
def check_no_nested_interactive(el: Element, ctx: MatchContext) -> Optional[str]:
    container = next((a for a in el.ancestors() if a.tag_name in INTERACTIVE_CONTAINERS), None)
    if container is None:
        return None
    return (
        f'<{el.tag_name}{_truthy_identifier(el, "id")}> nested inside '
        f'<{container.tag_name}{_truthy_identifier(container, "id")}>'
    )


# --- DEFINITION ---
DEFINITION = CategoryDefinition(
    category=Category.ERRORS,
    rules=[
        check_attributes_without_whitespace,
        check_tabindex_not_positive,
        check_href_not_empty,
        check_empty_links_have_label,
        check_images_have_alt,
        check_role_img_has_label,
        check_images_have_valid_source,
        check_label_for_not_empty,
        check_form_fields_have_label,
        check_button_inputs_have_value,
        check_button_elements_not_empty,
        check_button_attributes_not_empty,
        check_buttons_have_type,
        check_non_submit_button_form_attributes,
        check_disabled_buttons,
        check_inputs_have_type,
        check_optgroups_have_label,
        check_iframes_have_title,
        check_forms_have_action,
        check_html_has_valid_language,
        check_presentation_tables,
        check_width_height,
        check_no_javascript_events,
        check_valid_css_namespaces,
        check_title_not_empty,
        check_viewport_allows_zoom,
        check_charset_is_utf8,
        check_charset_comes_first,
        check_dir_attribute,
        check_accesskey_not_used,
        check_radio_checkbox_have_name,
        check_radio_inside_fieldset,
        _role_rule("slider-role-attributes", "slider",
                   ['aria-valuemin', 'aria-valuemax', 'aria-valuenow'],
                   "https://github.com/imbrianj/debugCSS/blob/master/debugCSS.css#L378"),
        _role_rule("spinbutton-role-attributes", "spinbutton",
                   ['aria-valuemin', 'aria-valuemax', 'aria-valuenow'],
                   "https://www.w3.org/TR/wai-aria-1.3/#spinbutton"),
        _role_rule("checkbox-role-aria-checked", "checkbox", ['aria-checked'],
                   "https://www.w3.org/TR/wai-aria-1.3/#checkbox"),
        _role_rule("combobox-role-aria-expanded", "combobox", ['aria-expanded'],
                   "https://www.w3.org/TR/wai-aria-1.3/#combobox"),
        _role_rule("scrollbar-role-attributes", "scrollbar",
                   ['aria-controls', 'aria-valuemin', 'aria-valuemax', 'aria-valuenow', 'aria-orientation'],
                   "https://www.w3.org/TR/wai-aria-1.3/#scrollbar"),
        check_no_nested_interactive,
    ],
)
