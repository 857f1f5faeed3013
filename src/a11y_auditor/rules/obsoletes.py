from typing import Dict, List, Optional, Tuple

from a11y_auditor.dom.core import Category, CategoryDefinition, Element, MatchContext, Rule, rule_spec

OBSOLETE_REFERENCE = "https://html.spec.whatwg.org/multipage/obsolete.html#obsolete"

OBSOLETE_TAGS = (
    'applet', 'acronym', 'bgsound', 'dir', 'frame', 'frameset', 'noframes', 'isindex', 'keygen',
    'menuitem', 'listing', 'nextid', 'noembed', 'param', 'plaintext', 'rb', 'rtc', 'strike', 'xmp',
    'basefont', 'big', 'blink', 'center', 'font', 'marquee', 'multicol', 'nobr', 'spacer', 'tt',
)

_TABLE_SECTION = ('char', 'charoff', 'valign', 'align', 'background')
_DATA_BINDING = ('datasrc', 'datafld', 'dataformatas')

# Keyed by tag name, '*' applies to every element.
OBSOLETE_ATTRIBUTES: Dict[str, Tuple[str, ...]] = {
    '*': ('dropzone', 'contextmenu', 'onshow'),
    'a': ('charset', 'coords', 'shape', 'methods', 'name', 'rev', 'urn', 'datasrc', 'datafld'),
    'link': ('charset', 'methods', 'rev', 'urn', 'target'),
    'option': ('name', 'datasrc', 'dataformatas'),
    'embed': ('name', 'hspace', 'vspace', 'align'),
    'img': ('name', 'lowsrc', 'longdesc', 'datasrc', 'datafld', 'hspace', 'vspace', 'align', 'border'),
    'form': ('accept',),
    'head': ('profile',),
    'html': ('version',),
    'menu': ('type', 'label'),
    'param': ('type', 'valuetype', 'datafld'),
    'script': ('language', 'event', 'for'),
    'table': (
        'datapagesize', 'summary', 'bgcolor', 'datasrc', 'dataformatas', 'width', 'align',
        'cellpadding', 'cellspacing', 'frame', 'rules', 'background',
    ),
    'td': (
        'axis', 'scope', 'abbr', 'bgcolor', 'char', 'charoff', 'valign', 'width', 'align',
        'height', 'nowrap', 'background',
    ),
    'th': ('axis', 'bgcolor', 'char', 'charoff', 'valign', 'width', 'align', 'height', 'nowrap', 'background'),
    'applet': ('datasrc', 'datafld'),
    'button': _DATA_BINDING,
    'div': _DATA_BINDING + ('align',),
    'frame': ('datasrc', 'datafld'),
    'label': _DATA_BINDING,
    'legend': _DATA_BINDING + ('align',),
    'marquee': _DATA_BINDING,
    'span': _DATA_BINDING,
    'fieldset': ('datafld',),
    'body': (
        'alink', 'bgcolor', 'link', 'bottommargin', 'leftmargin', 'rightmargin', 'topmargin',
        'marginheight', 'marginwidth', 'text', 'vlink', 'background',
    ),
    'col': ('char', 'charoff', 'valign', 'width', 'align'),
    'tbody': _TABLE_SECTION,
    'thead': _TABLE_SECTION,
    'tfoot': _TABLE_SECTION,
    'tr': ('char', 'charoff', 'valign', 'bgcolor', 'align', 'background'),
    'pre': ('width',),
    'dl': ('compact',),
    'ol': ('compact',),
    'ul': ('compact', 'type'),
    'h1': ('align',),
    'h2': ('align',),
    'h3': ('align',),
    'h4': ('align',),
    'h5': ('align',),
    'h6': ('align',),
    'caption': ('align',),
    'p': ('align',),
    'li': ('type',),
    'area': ('nohref', 'type', 'hreflang'),
    'input': ('ismap', 'usemap', 'datasrc', 'datafld', 'dataformatas', 'hspace', 'vspace', 'align'),
    'iframe': (
        'longdesc', 'datasrc', 'datafld', 'marginheight', 'marginwidth', 'hspace', 'vspace', 'align',
        'allowtransparency', 'frameborder', 'framespacing', 'scrolling',
    ),
    'object': (
        'archive', 'classid', 'code', 'codebase', 'codetype', 'declare', 'standby', 'typemustmatch',
        'datasrc', 'datafld', 'dataformatas', 'hspace', 'vspace', 'align', 'border',
    ),
    'select': _DATA_BINDING,
    'textarea': ('datasrc', 'datafld'),
    'br': ('clear',),
    'hr': ('width', 'color', 'noshade', 'size', 'align'),
    'meta': ('scheme',),
}


def is_obsolete_attribute(tag_name: str, attr_name: str) -> bool:
    return attr_name in OBSOLETE_ATTRIBUTES['*'] or attr_name in OBSOLETE_ATTRIBUTES.get(tag_name, ())


def _obsolete_attribute_selectors() -> List[str]:
    selectors = []
    for tag, attributes in OBSOLETE_ATTRIBUTES.items():
        prefix = '' if tag == '*' else tag
        selectors.extend(f'{prefix}[{attr}]' for attr in attributes)
    return selectors


# --- RULES ---

no_obsolete_tags = Rule(
    id="no-obsolete-tags",
    category=Category.OBSOLETES,
    header="Found obsolete HTML tags",
    selector=', '.join(OBSOLETE_TAGS),
    message=lambda el: f'<{el.tag_name}> is an obsolete HTML tag and should not be used',
    references=(OBSOLETE_REFERENCE,),
)


@rule_spec(
    "no-obsolete-attributes",
    header="Found obsolete HTML attributes",
    selector=', '.join(_obsolete_attribute_selectors()),
    references=[OBSOLETE_REFERENCE],
)
def check_no_obsolete_attributes(el: Element, ctx: MatchContext) -> Optional[str]:
    obsolete = [(name, value) for name, value in el.attrs.items() if is_obsolete_attribute(el.tag_name, name)]
    if not obsolete:
        return None
    rendered = ' '.join(f'{name}="{value}"' for name, value in obsolete)
    names = ', '.join(name for name, _ in obsolete)
    return f'<{el.tag_name} {rendered}> contains obsolete attribute(s): {names}'


# --- DEFINITION ---
DEFINITION = CategoryDefinition(
    category=Category.OBSOLETES,
    rules=[
        no_obsolete_tags,
        check_no_obsolete_attributes,
    ],
)
