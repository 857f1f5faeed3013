from typing import List, Optional

from a11y_auditor.dom.core import Category, CategoryDefinition, Element, MatchContext, rule_spec

FILE_EXTENSIONS = (
    'pdf', 'doc', 'docx', 'png', 'jpg', 'jpeg', 'gif', 'webp', 'svg', 'svgz', 'apng',
    'mp3', 'mp4', 'mov', 'ogg', 'xls', 'xlsx', 'txt', 'zip', 'rar',
)
IMAGE_ELEMENTS = ('img', 'area', 'input[type="image"]', 'embed[type="image"]', 'object[type="image"]')
NAMING_ATTRIBUTES = ('title', 'aria-label', 'aria-labelledby', 'aria-describedby')

INLINE_ELEMENTS = ('b', 'i', 'q', 'em', 'abbr', 'cite', 'code', 'span', 'small', 'label', 'strong')
MAIN_FORBIDDEN_ANCESTORS = ('nav', 'aside', 'footer', 'header', 'article')
ADDRESS_FORBIDDEN = (
    'h1', 'h2', 'h3', 'h4', 'h5', 'h6', 'nav', 'aside', 'header', 'footer', 'address', 'article', 'section',
)
SECTIONING_WRAPPERS = (
    'aside > aside:first-child',
    'article > aside:first-child',
    'aside > article:first-child',
    'aside > section:first-child',
    'section > section:first-child',
    'article > section:first-child',
    'article > article:first-child',
)

LABELABLE_CONTROLS = 'button, input:not([type="hidden"]), meter, output, progress, select, textarea'
RTL_LANGUAGES = ('ar', 'he')

TABLE_ORDER = (
    ('tfoot', 'thead'),
    ('tbody', 'tfoot'),
    ('tbody', 'thead'),
    ('tfoot', 'colgroup'),
    ('tbody', 'colgroup'),
    ('thead', 'colgroup'),
)


def _parent_name(el: Element) -> str:
    parent = el.parent
    return parent.tag_name if parent is not None else '#document'


def _is_dl_child(el: Element) -> bool:
    return el.parent is not None and el.parent.tag_name == 'dl'


# --- RULES ---

@rule_spec(
    "list-items-correct-parent",
    header="Found list items with incorrect parent elements",
    selector='ul > :not(li), ol > :not(li), li',
    references=["https://accessibilite.numerique.gouv.fr/methode/criteres-et-tests/#8.2"],
)
def check_list_items_parent(el: Element, ctx: MatchContext) -> Optional[str]:
    parent = _parent_name(el)
    if el.tag_name != 'li':
        return (
            f'<{el.tag_name}{el.identifier}> is not allowed as a child of <{parent}> '
            f'- only <li> elements are allowed'
        )
    if parent not in ('ul', 'ol'):
        return f'<li{el.identifier}> must be a child of <ul> or <ol>, found within <{parent}>'
    return None


@rule_spec(
    "definition-list-structure",
    header="Found definition lists with invalid structure",
    selector='dt, dd, dl > *',
    references=["https://accessibilite.numerique.gouv.fr/methode/criteres-et-tests/#8.2"],
)
def check_definition_list_structure(el: Element, ctx: MatchContext) -> List[str]:
    problems = []
    if el.tag_name == 'dt':
        following = el.next_element_sibling
        if following is not None and following.tag_name != 'dd':
            problems.append(f'<dt> must be followed by <dd>, found <{following.tag_name}{following.identifier}> instead')
    elif el.tag_name == 'dd':
        preceding = el.previous_element_sibling
        if preceding is not None and preceding.tag_name not in ('dt', 'dd'):
            problems.append(f'<dd{el.identifier}> must be preceded by <dt> or <dd>, found <{preceding.tag_name}> instead')
    elif _is_dl_child(el) and el.tag_name != 'div':
        problems.append(
            f'<{el.tag_name}{el.identifier}> is not allowed as a child of <dl> '
            f'- only <dt>, <dd>, or <div> elements are allowed'
        )
    return problems


@rule_spec(
    "definition-list-children",
    header="Found definition lists with invalid nesting",
    selector='dt, dd, dl > *',
    references=["https://accessibilite.numerique.gouv.fr/methode/criteres-et-tests/#8.2"],
)
def check_definition_list_children(el: Element, ctx: MatchContext) -> Optional[str]:
    if el.tag_name in ('dt', 'dd'):
        parent = el.parent
        if parent is not None and parent.tag_name == 'dl':
            return None
        if parent is not None and parent.tag_name == 'div' and _is_dl_child(parent):
            return None
        return (
            f'<{el.tag_name}{el.identifier}> must be a child of <dl> or <div> within <dl>, '
            f'found within <{_parent_name(el)}>'
        )
    if _is_dl_child(el) and el.tag_name != 'div':
        return (
            f'<{el.tag_name}{el.identifier}> is not allowed as a direct child of <dl> '
            f'- only <dt>, <dd>, or <div> elements are allowed'
        )
    return None


@rule_spec(
    "figcaption-inside-figure",
    header="Found <figcaption> elements outside <figure>",
    selector='figcaption',
    references=["https://accessibilite.numerique.gouv.fr/methode/criteres-et-tests/#8.2"],
)
def check_figcaption_inside_figure(el: Element, ctx: MatchContext) -> Optional[str]:
    parent = _parent_name(el)
    if parent == 'figure':
        return None
    return f'<figcaption{el.identifier}> must be inside a <figure> element, found within <{parent}>'


@rule_spec(
    "no-invalid-nesting",
    header="Found invalid HTML element nesting",
    selector=', '.join(
        [f'{ancestor} main' for ancestor in MAIN_FORBIDDEN_ANCESTORS]
        + ['optgroup', 'legend', 'option']
        + [f'address {tag}' for tag in ADDRESS_FORBIDDEN]
    ),
    references=["https://accessibilite.numerique.gouv.fr/methode/criteres-et-tests/#8.2"],
)
def check_no_invalid_nesting(el: Element, ctx: MatchContext) -> List[str]:
    parent = _parent_name(el)
    problems = []
    if el.tag_name == 'main':
        problems.append(f'<main{el.identifier}> must not be contained within <{parent}>')
    elif el.tag_name == 'optgroup' and parent != 'select':
        problems.append(f'<optgroup{el.identifier}> must be inside a <select> element, found within <{parent}>')
    elif el.tag_name == 'legend' and parent != 'fieldset':
        problems.append(f'<legend{el.identifier}> must be inside a <fieldset> element, found within <{parent}>')
    elif el.tag_name == 'option' and parent not in ('select', 'optgroup'):
        problems.append(
            f'<option{el.identifier}> must be inside a <select> or <optgroup> element, found within <{parent}>'
        )

    if el.tag_name in ADDRESS_FORBIDDEN and any(a.tag_name == 'address' for a in el.ancestors()):
        problems.append(f'<{el.tag_name}{el.identifier}> is not allowed inside <address> element')
    return problems


@rule_spec(
    "no-misplaced-div",
    header="Found <div> elements inside inline elements",
    selector=', '.join(f'{tag} div' for tag in INLINE_ELEMENTS),
    references=["https://github.com/Heydon/REVENGE.CSS/blob/master/revenge.css#L326"],
)
def check_no_misplaced_div(el: Element, ctx: MatchContext) -> str:
    return (
        f'<div{el.identifier}> should not be inside <{_parent_name(el)}> '
        f'- use <span> instead for inline containers'
    )


@rule_spec(
    "no-misused-sectioning-tags",
    header="Found sectioning tags misused as wrappers",
    selector=', '.join(SECTIONING_WRAPPERS),
    references=["https://github.com/Heydon/REVENGE.CSS/blob/master/revenge.css#L252"],
)
def check_no_misused_sectioning(el: Element, ctx: MatchContext) -> str:
    return (
        f'<{el.tag_name}{el.identifier}> should not be used as a wrapper '
        f'- <{el.tag_name}> as first child of <{_parent_name(el)}> indicates misuse'
    )


def _first_child_check(container: str, expected: str):
    """Predicate for `<container>` whose first element child must be `<expected>`."""
    def check(el: Element, ctx: MatchContext) -> str:
        if el.tag_name == expected:
            return f'<{expected}{el.identifier}> is not the first child of <{container}>'
        return (
            f'<{container}> has <{el.tag_name}{el.identifier}> as first child '
            f'- <{expected}> must be the first child'
        )
    return check


check_legend_first_child = rule_spec(
    "legend-first-child-of-fieldset",
    header="Found <legend> elements that are not the first child of <fieldset>",
    selector='fieldset > *:not(legend):first-child, fieldset > legend:not(:first-child)',
    references=["https://accessibilite.numerique.gouv.fr/methode/criteres-et-tests/#11.6"],
)(_first_child_check('fieldset', 'legend'))

check_summary_first_child = rule_spec(
    "summary-first-child-of-details",
    header="Found <summary> elements that are not the first child of <details>",
    selector='details > *:not(summary):first-child, details > summary:not(:first-child)',
    references=["https://accessibilite.numerique.gouv.fr/methode/criteres-et-tests/#11.6"],
)(_first_child_check('details', 'summary'))


@rule_spec(
    "abbr-has-title",
    header="Found <abbr> elements without a proper title attribute",
    selector='abbr',
    references=["https://checklists.opquast.com/en/web-quality-assurance/each-abbreviation-has-a-definition-available"],
)
def check_abbr_has_title(el: Element, ctx: MatchContext) -> Optional[str]:
    title = el.get_attribute('title')
    if title is None:
        issue = 'is missing a title attribute'
    elif title == '':
        issue = 'has an empty title attribute'
    elif not title.strip():
        issue = 'has a whitespace-only title attribute'
    else:
        return None
    return f'<abbr{el.identifier}> {issue} (content: "{el.text_content}")'


@rule_spec(
    "alt-without-file-name",
    header="Found elements with file names in alt attributes",
    selector=', '.join(f'{tag}[alt$=".{ext}"]' for tag in IMAGE_ELEMENTS for ext in FILE_EXTENSIONS),
    references=["https://accessibilite.numerique.gouv.fr/methode/criteres-et-tests/#1.2"],
)
def check_alt_without_file_name(el: Element, ctx: MatchContext) -> str:
    return (
        f'<{el.tag_name}{el.attr_fragment("type")}{el.identifier} alt="{el.get_attribute("alt")}"> '
        f'contains a file name in the alt attribute'
    )


def _decorative_selectors() -> List[str]:
    selectors = [f'img[alt=""][{attr}]' for attr in NAMING_ATTRIBUTES]
    selectors.append('area:not([href])[alt]:not([alt=""])')
    selectors.extend(f'area:not([href])[alt=""][{attr}]' for attr in NAMING_ATTRIBUTES)
    for tag in ('svg', 'canvas', 'embed[type="image"]', 'object[type="image"]'):
        selectors.extend(f'{tag}[aria-hidden="true"][{attr}]' for attr in NAMING_ATTRIBUTES)
    return selectors


@rule_spec(
    "decorative-images-without-accessible-name",
    header="Found decorative images with accessible names",
    selector=', '.join(_decorative_selectors()),
    references=["https://checklists.opquast.com/en/web-quality-assurance/each-decorative-image-has-a-relevant-text-alternative"],
)
def check_decorative_images(el: Element, ctx: MatchContext) -> str:
    naming = next((attr for attr in NAMING_ATTRIBUTES if el.has_attribute(attr)), 'accessible name')
    if el.get_attribute('alt') == '':
        indicator = 'empty alt'
    elif el.get_attribute('aria-hidden') == 'true':
        indicator = 'aria-hidden="true"'
    else:
        indicator = 'no href'
    return (
        f'<{el.tag_name}{el.attr_fragment("type")}{el.identifier}> is decorative ({indicator}) '
        f'but has [{naming}] attribute'
    )


@rule_spec(
    "role-presentation-not-on-images",
    header='Found images using role="presentation"',
    selector=', '.join(
        f'{tag}[role="presentation"]' for tag in ('img', 'svg', 'area', 'embed', 'canvas', 'object')
    ),
    references=["https://accessibilite.numerique.gouv.fr/methode/criteres-et-tests/#1.2"],
)
def check_role_presentation_on_images(el: Element, ctx: MatchContext) -> str:
    alternative = ' or an empty alt attribute' if el.tag_name == 'img' else ''
    return (
        f'The <{el.tag_name}>{el.identifier} element uses role="presentation", which has poor browser support. '
        f'Use aria-hidden="true" instead{alternative} to mark decorative images.'
    )


@rule_spec(
    "svg-has-role",
    header='Found <svg> elements without aria-hidden="true" or role="img"',
    selector='svg:not([aria-hidden="true"], [role="img"])',
    references=["https://accessibilite.numerique.gouv.fr/methode/criteres-et-tests/#1.2"],
)
def check_svg_has_role(el: Element, ctx: MatchContext) -> str:
    return (
        f'The <svg>{el.identifier} element must have either aria-hidden="true" (if decorative) '
        f'or role="img" (if informative).'
    )


@rule_spec(
    "autoplay-not-used",
    header="Found media elements with autoplay",
    selector='video[autoplay], audio[autoplay]',
    references=["https://www.w3.org/TR/WCAG22/#audio-control"],
)
def check_autoplay_not_used(el: Element, ctx: MatchContext) -> str:
    return (
        f'The <{el.tag_name}>{el.identifier} element has the autoplay attribute, which can be disruptive for users. '
        f'Remove the autoplay attribute to give users control over media playback.'
    )


@rule_spec(
    "media-has-controls",
    header="Found media elements without controls",
    selector='video:not([controls]), audio:not([controls])',
    references=["https://www.w3.org/TR/WCAG22/#keyboard"],
)
def check_media_has_controls(el: Element, ctx: MatchContext) -> str:
    return (
        f'The <{el.tag_name}>{el.identifier} element is missing the controls attribute. '
        f'Add controls to give users the ability to play, pause, and control the media.'
    )


@rule_spec(
    "no-empty-nodes",
    header="Found empty elements",
    # Hidden, sourced, void and separately checked elements are allowed to be empty.
    selector=(
        'body *:not(:has(*)):not([hidden], [aria-hidden], [src], button, a, iframe, textarea, '
        'area, base, br, col, command, embed, hr, img, input, keygen, link, meta, param, source, track, wbr, title)'
    ),
    references=["https://github.com/Heydon/REVENGE.CSS/blob/master/revenge.css#L243"],
)
def check_no_empty_nodes(el: Element, ctx: MatchContext) -> Optional[str]:
    if not el.is_empty:
        return None
    return (
        f'The <{el.tag_name}>{el.identifier} element is empty and serves no purpose. '
        f'Remove this element or add content to it.'
    )


@rule_spec(
    "no-nested-tables",
    header="Found nested tables",
    selector='table table',
    references=["https://www.w3.org/WAI/tutorials/tables/tips/"],
)
def check_no_nested_tables(el: Element, ctx: MatchContext) -> str:
    return (
        f'Found a nested <table>{el.identifier} element inside another table. '
        f'Tables should not be nested as they are likely being used for layout purposes. '
        f'Use CSS for layout instead.'
    )


@rule_spec(
    "table-has-caption",
    header="Found data tables without a leading <caption>",
    selector='table:not([role="presentation"])',
    references=["https://www.w3.org/WAI/WCAG22/Techniques/html/H39"],
)
def check_table_has_caption(el: Element, ctx: MatchContext) -> List[str]:
    children = el.children
    if not children or children[0].tag_name == 'caption':
        return []
    problems = []
    if any(child.tag_name == 'caption' for child in children):
        problems.append(
            f'The <table>{el.identifier} element has a <caption> but it is not the first child. '
            f'The <caption> must be the first child of the <table> element.'
        )
    problems.append(
        f'The <table>{el.identifier} element is missing a <caption> as its first child. '
        f'Data tables must have a <caption> element to provide a title or explanation.'
    )
    return problems


@rule_spec(
    "table-structure-valid",
    header="Found tables with invalid structure",
    selector='table',
    references=["https://www.w3.org/TR/WCAG22/#parsing"],
)
def check_table_structure(el: Element, ctx: MatchContext) -> List[str]:
    problems = []
    for earlier, later in TABLE_ORDER:
        for _ in el.select(f':scope > {earlier} ~ {later}'):
            problems.append(
                f'The <table>{el.identifier} element has invalid structure: {earlier} cannot come before {later}. '
                f'Table elements must be in this order: caption, colgroup, thead, tfoot, tbody.'
            )
    return problems


@rule_spec(
    "table-has-thead",
    header="Found data tables with a <tbody> but no <thead>",
    selector='table:not([role="presentation"])',
    references=["https://www.w3.org/WAI/tutorials/tables/tips/"],
)
def check_table_has_thead(el: Element, ctx: MatchContext) -> List[str]:
    bodies = el.select(':scope > caption + tbody, :scope > tbody:first-child')
    return [
        f'The <table>{el.identifier} element has a <tbody> but is missing a <thead>. '
        f'Data tables with a <tbody> must have a <thead> to provide column headers.'
        for _ in bodies
    ]


@rule_spec(
    "no-javascript-href-without-role",
    header='Found javascript: links without role="button"',
    selector='a[href^="javascript"]:not([role="button"])',
    references=["https://github.com/Heydon/REVENGE.CSS/blob/master/revenge.css#L165"],
)
def check_javascript_href(el: Element, ctx: MatchContext) -> str:
    return (
        f'The <a>{el.identifier} element uses href="javascript:..." without role="button". '
        f'Links with javascript: protocol should be replaced with <button> elements or have role="button".'
    )


@rule_spec(
    "no-hash-only-href-without-role",
    header='Found href="#" links without role="button"',
    selector='a[href="#"]:not([role="button"])',
    references=["https://github.com/Heydon/REVENGE.CSS/blob/master/revenge.css#L165"],
)
def check_hash_only_href(el: Element, ctx: MatchContext) -> str:
    return (
        f'The <a>{el.identifier} element uses href="#" without role="button". '
        f'Links with href="#" should be replaced with <button> elements or have role="button".'
    )


@rule_spec(
    "heading-role-has-aria-level",
    header='Found role="heading" elements without aria-level',
    selector='[role="heading"]:not([aria-level])',
    references=["https://www.w3.org/TR/wai-aria-1.3/#aria-level"],
)
def check_heading_role_level(el: Element, ctx: MatchContext) -> str:
    return (
        f'The <{el.tag_name}>{el.identifier} element has role="heading" but is missing the aria-level attribute. '
        f'Elements with role="heading" should specify aria-level to indicate their hierarchical level.'
    )


@rule_spec(
    "label-has-for-or-control",
    header="Found labels without an associated form control",
    selector='label',
    references=["https://www.w3.org/WAI/WCAG22/Techniques/html/H44"],
)
def check_label_has_for_or_control(el: Element, ctx: MatchContext) -> List[str]:
    controls = el.select(LABELABLE_CONTROLS)
    problems = []
    if not el.has_attribute('for') and not controls:
        problems.append(
            f'The <label>{el.identifier} element is missing the for attribute and does not contain a form control. '
            f'Labels should either have a for attribute referencing a form control, or contain a labelable '
            f'element (button, input, meter, output, progress, select, or textarea).'
        )
    if len(controls) > 1:
        problems.append(
            f'The <label>{el.identifier} element contains multiple form controls. '
            f'A label should only contain one form control element.'
        )
    return problems


@rule_spec(
    "dir-matches-lang",
    header="Found elements whose dir does not match their language",
    selector=(
        '[lang="ar"]:not([dir="rtl"]), [lang="he"]:not([dir="rtl"]), '
        '[lang="ar"] [lang]:not([dir]), [lang="he"] [lang]:not([dir]), '
        '[dir="rtl"]:not([lang="ar"], [lang="he"])'
    ),
    references=["https://www.w3.org/International/questions/qa-html-dir"],
)
def check_dir_matches_lang(el: Element, ctx: MatchContext) -> List[str]:
    lang, direction = el.get_attribute('lang'), el.get_attribute('dir')
    problems = []
    if lang in RTL_LANGUAGES and direction != 'rtl':
        problems.append(
            f'The <{el.tag_name}>{el.identifier} element has lang="{lang}" but is missing dir="rtl". '
            f'Right-to-left languages like Arabic and Hebrew require the dir="rtl" attribute.'
        )
    if el.matches('[lang="ar"] [lang]:not([dir]), [lang="he"] [lang]:not([dir])'):
        problems.append(
            f'The <{el.tag_name}>{el.identifier} element has lang="{lang}" within RTL content but is missing a dir attribute. '
            f'Language changes within right-to-left content should define dir="ltr" or dir="rtl" as appropriate.'
        )
    if direction == 'rtl' and lang not in RTL_LANGUAGES:
        problems.append(
            f'The <{el.tag_name}>{el.identifier} element has dir="rtl" but lang="{lang or "not set"}". '
            f'The dir="rtl" attribute should be used with right-to-left languages like Arabic (ar) or Hebrew (he).'
        )
    return problems


# --- DEFINITION ---
DEFINITION = CategoryDefinition(
    category=Category.WARNINGS,
    rules=[
        check_list_items_parent,
        check_definition_list_structure,
        check_definition_list_children,
        check_figcaption_inside_figure,
        check_no_invalid_nesting,
        check_no_misplaced_div,
        check_no_misused_sectioning,
        check_legend_first_child,
        check_summary_first_child,
        check_abbr_has_title,
        check_alt_without_file_name,
        check_decorative_images,
        check_role_presentation_on_images,
        check_svg_has_role,
        check_autoplay_not_used,
        check_media_has_controls,
        check_no_empty_nodes,
        check_no_nested_tables,
        check_table_has_caption,
        check_table_structure,
        check_table_has_thead,
        check_javascript_href,
        check_hash_only_href,
        check_heading_role_level,
        check_label_has_for_or_control,
        check_dir_matches_lang,
    ],
)
