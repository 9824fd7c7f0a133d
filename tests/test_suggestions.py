from textlens.models import Issue, IssueType, Severity
from textlens.stats import analyze_text
from textlens.suggestions import (
    apply_fix,
    apply_fixes,
    apply_suggestion,
    check_filler_words,
    check_long_sentences,
    check_passive_voice,
    check_repeated_words,
    check_spacing,
    check_weak_words,
    generate_local_suggestions,
    locate_issue,
)
from textlens.suggestions.fixes import splice

RUN_ON = (
    "The team worked late into the night on the new release plan for the product "
    "launch because the client asked for many changes to the final visual design "
    "last week."
)

MESSY = (
    "This is very  good.It was decided that things were bad. "
    "Basically the report was really big, and the report got made quickly; "
    "the report literally helped the report team.   Really."
)


def _issue(start: int, end: int, original: str, suggested: str) -> Issue:
    return Issue(
        id=f"test-{start}",
        type=IssueType.STYLE,
        severity=Severity.LOW,
        title="test",
        description="test",
        original=original,
        suggested=suggested,
        start=start,
        end=end,
    )


def test_long_sentence_splits_at_because():
    issues = check_long_sentences(RUN_ON)
    assert len(issues) == 1
    issue = issues[0]
    assert issue.suggested == (
        "The team worked late into the night on the new release plan for the product "
        "launch. Because the client asked for many changes to the final visual design "
        "last week."
    )
    assert RUN_ON[issue.start : issue.end] == issue.original
    assert issue.id == f"long-{issue.start}"


def test_long_sentence_offsets_skip_leading_whitespace():
    text = "Short one.   " + RUN_ON
    issue = check_long_sentences(text)[0]
    assert issue.start == text.index("The team")
    assert text[issue.start : issue.end] == issue.original == RUN_ON


def test_long_sentence_threshold_is_configurable():
    assert check_long_sentences("One two three four five.", max_words=4)
    assert not check_long_sentences("One two three four five.", max_words=5)


def test_passive_voice_is_advisory():
    issues = check_passive_voice("The cake was baked by Sam.")
    assert len(issues) == 1
    issue = issues[0]
    assert issue.original == "was baked"
    assert issue.start == 9
    assert not issue.fixable
    assert apply_fixes("The cake was baked by Sam.", issues) == "The cake was baked by Sam."


def test_filler_and_weak_words():
    filler = check_filler_words("This is very nice.")
    assert [(i.original, i.suggested, i.start) for i in filler] == [("very", "extremely", 8)]
    weak = check_weak_words("Good work, good team.")
    assert [(i.original, i.suggested) for i in weak] == [
        ("Good", "Excellent"),
        ("good", "excellent"),
    ]


def test_filler_fix_replaces_in_place():
    issues = check_filler_words("It just works.")
    assert issues[0].suggested == "simply"
    assert issues[0].fixable
    assert apply_fix("It just works.", issues[0]) == "It simply works."


def test_repeated_words_reports_first_close_recurrence():
    text = "Those things matter. Other things too. More things here."
    issues = check_repeated_words(text)
    assert len(issues) == 1
    issue = issues[0]
    second = text.index("things", text.index("things") + 1)
    assert (issue.start, issue.original, issue.suggested) == (second, "things", "items")


def test_spacing_issues():
    issues = check_spacing("Hello  world.This")
    assert [(i.original, i.suggested, i.start, i.end) for i in issues] == [
        ("  ", " ", 5, 7),
        (".T", ". T", 12, 14),
    ]


def test_every_positioned_issue_matches_its_slice():
    issues = generate_local_suggestions(MESSY + " " + RUN_ON, limit=100)
    text = MESSY + " " + RUN_ON
    assert issues
    for issue in issues:
        if issue.start is not None:
            assert text[issue.start : issue.end] == issue.original


def test_generate_local_suggestions_caps_and_orders_by_position():
    text = " ".join(["very"] * 40)
    issues = generate_local_suggestions(text)
    assert len(issues) == 20
    starts = [issue.start for issue in issues]
    assert starts == sorted(starts)
    assert generate_local_suggestions("") == []
    assert generate_local_suggestions("   ") == []


def test_apply_single_fix_changes_length_by_delta():
    text = "This is very nice."
    issue = check_filler_words(text)[0]
    fixed = apply_fix(text, issue)
    delta = len(issue.suggested) - len(issue.original)
    assert analyze_text(fixed).total_chars == analyze_text(text).total_chars + delta


def test_apply_fixes_descending_matches_one_at_a_time():
    text = "This is very  good."
    issues = [i for i in generate_local_suggestions(text) if i.fixable]
    assert len(issues) == 3

    expected = text
    for issue in sorted(issues, key=lambda i: i.start, reverse=True):
        expected = apply_fix(expected, issue)

    assert apply_fixes(text, issues) == expected == "This is extremely excellent."


def test_apply_fixes_ascending_order_corrupts_offsets():
    text = "This is very  good."
    issues = sorted(
        (i for i in generate_local_suggestions(text) if i.fixable), key=lambda i: i.start
    )
    corrupted = text
    for issue in issues:
        corrupted = splice(corrupted, issue.start, issue.end, issue.suggested)
    assert corrupted != apply_fixes(text, issues)
    assert "extremely excellent" not in corrupted


def test_apply_fixes_skips_overlapping_spans():
    text = "abcdef"
    issues = [_issue(1, 4, "bcd", "X"), _issue(3, 5, "de", "Y")]
    assert apply_fixes(text, issues) == "abcYf"


def test_apply_suggestion_first_occurrence_only():
    assert apply_suggestion("a b a", "a", "x") == "x b a"
    assert apply_suggestion("a b a", "z", "x") == "a b a"
    assert apply_suggestion("a b a", "", "x") == "a b a"


def test_locate_issue_fills_offsets():
    issue = Issue(
        id="ai-0",
        type=IssueType.GRAMMAR,
        severity=Severity.HIGH,
        title="Spelling",
        description="Typo",
        original="teh",
        suggested="the",
    )
    located = locate_issue("I saw teh cat.", issue)
    assert (located.start, located.end) == (6, 9)
    assert located.fixable
    assert locate_issue("no match", issue) is issue
