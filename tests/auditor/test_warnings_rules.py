import pytest

from a11y_auditor.assertions import check_rule


def messages(html, rule_id):
    return [violation.message for violation in check_rule(html, rule_id)]


# --- Lists and definition lists ---

def test_list_child_must_be_li():
    assert messages('<ul><div>x</div></ul>', "list-items-correct-parent") == [
        '<div> is not allowed as a child of <ul> - only <li> elements are allowed'
    ]


def test_orphan_li_names_document_root():
    assert messages('<li>x</li>', "list-items-correct-parent") == [
        '<li> must be a child of <ul> or <ol>, found within <#document>'
    ]


def test_well_formed_list_passes():
    assert check_rule('<ol><li>a</li><li>b</li></ol>', "list-items-correct-parent") == []


def test_definition_list_structure():
    assert messages('<dl><dt>Term</dt><p>x</p></dl>', "definition-list-structure") == [
        '<dt> must be followed by <dd>, found <p> instead',
        '<p> is not allowed as a child of <dl> - only <dt>, <dd>, or <div> elements are allowed',
    ]


def test_definition_list_with_div_groups_passes():
    html = '<dl><div><dt>a</dt><dd>b</dd></div><dt>c</dt><dd>d</dd><dd>e</dd></dl>'
    assert check_rule(html, "definition-list-structure") == []
    assert check_rule(html, "definition-list-children") == []


def test_dd_outside_dl():
    assert messages('<div><dd>x</dd></div>', "definition-list-children") == [
        '<dd> must be a child of <dl> or <div> within <dl>, found within <div>'
    ]


# --- Nesting ---

def test_figcaption_outside_figure():
    assert messages('<div><figcaption>x</figcaption></div>', "figcaption-inside-figure") == [
        '<figcaption> must be inside a <figure> element, found within <div>'
    ]


def test_main_inside_nav():
    assert messages('<nav><main>x</main></nav>', "no-invalid-nesting") == ['<main> must not be contained within <nav>']


def test_option_outside_select():
    assert messages('<p><option>x</option></p>', "no-invalid-nesting") == [
        '<option> must be inside a <select> or <optgroup> element, found within <p>'
    ]


def test_heading_inside_address():
    assert messages('<address><h2>Contact</h2></address>', "no-invalid-nesting") == [
        '<h2> is not allowed inside <address> element'
    ]


def test_options_in_select_pass():
    html = '<select id="s"><optgroup label="g"><option>a</option></optgroup><option>b</option></select>'
    assert check_rule(html, "no-invalid-nesting") == []


def test_div_inside_inline_element():
    assert messages('<span><div id="box">x</div></span>', "no-misplaced-div") == [
        '<div id="box"> should not be inside <span> - use <span> instead for inline containers'
    ]


def test_section_used_as_wrapper():
    assert messages('<section><section>x</section></section>', "no-misused-sectioning-tags") == [
        '<section> should not be used as a wrapper - <section> as first child of <section> indicates misuse'
    ]


def test_legend_not_first():
    assert messages('<fieldset><p>x</p><legend>L</legend></fieldset>', "legend-first-child-of-fieldset") == [
        '<fieldset> has <p> as first child - <legend> must be the first child',
        '<legend> is not the first child of <fieldset>',
    ]


def test_summary_first_passes():
    assert check_rule('<details><summary>More</summary><p>x</p></details>', "summary-first-child-of-details") == []


# --- Text alternatives ---

@pytest.mark.parametrize("attrs, issue", [
    ('', 'is missing a title attribute'),
    (' title=""', 'has an empty title attribute'),
    (' title="  "', 'has a whitespace-only title attribute'),
])
def test_abbr_title_yields_one_violation(attrs, issue):
    assert messages(f'<abbr{attrs}>WHO</abbr>', "abbr-has-title") == [f'<abbr> {issue} (content: "WHO")']


def test_abbr_with_title_passes():
    assert check_rule('<abbr title="World Health Organization">WHO</abbr>', "abbr-has-title") == []


def test_alt_with_file_name():
    assert messages('<img src="a.png" alt="photo.jpg">', "alt-without-file-name") == [
        '<img alt="photo.jpg"> contains a file name in the alt attribute'
    ]


def test_decorative_image_with_title():
    assert messages('<img src="a.png" alt="" title="Cat">', "decorative-images-without-accessible-name") == [
        '<img> is decorative (empty alt) but has [title] attribute'
    ]


def test_svg_needs_role_or_hidden():
    html = '<svg></svg><svg aria-hidden="true"></svg><svg role="img" aria-label="Logo"></svg>'
    assert len(check_rule(html, "svg-has-role")) == 1


def test_media_controls_and_autoplay():
    html = '<video src="a.mp4" autoplay></video><audio src="b.mp3" controls></audio>'
    assert len(check_rule(html, "autoplay-not-used")) == 1
    assert len(check_rule(html, "media-has-controls")) == 1


# --- Empty nodes and links ---

def test_empty_nodes_inside_body():
    html = '<body><p></p><p>text</p><br><span hidden></span></body>'
    assert messages(html, "no-empty-nodes") == [
        'The <p> element is empty and serves no purpose. Remove this element or add content to it.'
    ]


def test_pseudo_links_need_button_role():
    html = '<a href="#">Top</a><a href="javascript:void(0)">Run</a><a href="#" role="button">Ok</a>'
    assert len(check_rule(html, "no-hash-only-href-without-role")) == 1
    assert len(check_rule(html, "no-javascript-href-without-role")) == 1


def test_heading_role_needs_level():
    assert len(check_rule('<div role="heading">T</div><div role="heading" aria-level="2">U</div>',
                          "heading-role-has-aria-level")) == 1


# --- Tables ---

def test_nested_table():
    html = '<table><tr><td><table><tr><td>x</td></tr></table></td></tr></table>'
    assert len(check_rule(html, "no-nested-tables")) == 1


def test_table_without_caption():
    [message] = messages('<table><tr><td>x</td></tr></table>', "table-has-caption")
    assert message.startswith('The <table> element is missing a <caption> as its first child.')


def test_table_with_late_caption_reports_both_problems():
    html = '<table><thead><tr><th>h</th></tr></thead><caption>c</caption></table>'
    found = messages(html, "table-has-caption")
    assert len(found) == 2
    assert found[0].startswith('The <table> element has a <caption> but it is not the first child.')


def test_presentation_table_needs_no_caption():
    assert check_rule('<table role="presentation"><tr><td>x</td></tr></table>', "table-has-caption") == []


def test_table_sections_out_of_order():
    html = (
        '<table><caption>c</caption>'
        '<tbody><tr><td>x</td></tr></tbody>'
        '<thead><tr><th>h</th></tr></thead></table>'
    )
    [message] = messages(html, "table-structure-valid")
    assert 'tbody cannot come before thead' in message


def test_table_with_body_but_no_head():
    html = '<table><caption>c</caption><tbody><tr><td>x</td></tr></tbody></table>'
    assert len(check_rule(html, "table-has-thead")) == 1
    html = '<table><caption>c</caption><thead><tr><th>h</th></tr></thead><tbody><tr><td>x</td></tr></tbody></table>'
    assert check_rule(html, "table-has-thead") == []


# --- Labels and direction ---

def test_label_without_control():
    [message] = messages('<label>Name</label>', "label-has-for-or-control")
    assert message.startswith('The <label> element is missing the for attribute and does not contain a form control.')


def test_label_with_several_controls():
    [message] = messages('<label>A <input type="text"><input type="text"></label>', "label-has-for-or-control")
    assert 'contains multiple form controls' in message


def test_label_wrapping_control_passes():
    assert check_rule('<label>A <input type="text"></label>', "label-has-for-or-control") == []


def test_rtl_language_without_dir():
    [message] = messages('<p lang="ar">x</p>', "dir-matches-lang")
    assert message.startswith('The <p> element has lang="ar" but is missing dir="rtl".')


def test_rtl_dir_without_language():
    [message] = messages('<p dir="rtl">x</p>', "dir-matches-lang")
    assert 'lang="not set"' in message


def test_rtl_content_with_matching_dir_passes():
    assert check_rule('<div lang="he" dir="rtl"><span lang="en" dir="ltr">x</span></div>', "dir-matches-lang") == []


def test_whitespace_only_nodes_are_not_empty():
    html = '<body><p> </p><table><tr><td>\n</td></tr></table><div><!-- placeholder --></div></body>'
    assert messages(html, "no-empty-nodes") == [
        'The <div> element is empty and serves no purpose. Remove this element or add content to it.'
    ]
