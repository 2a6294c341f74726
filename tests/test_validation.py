import pytest

import convy as cv


def test_simple_subject(default_config):
    commit = cv.validate_commit_message("feat: fix bug", default_config)
    assert isinstance(commit, cv.CommitMessage)
    assert commit.commit_type == "feat"
    assert commit.scope is None
    assert commit.breaking is False
    assert commit.description == ("fix", "bug")
    assert commit.body is None
    assert commit.footers == ()


def test_breaking_change_with_footer(default_config):
    commit = cv.validate_commit_message(
        "feat(core)!: drop API\n\nBREAKING CHANGE: removed foo", default_config
    )
    assert isinstance(commit, cv.CommitMessage)
    assert commit.scope == "core"
    assert commit.breaking is True
    assert commit.body is None
    assert commit.footers == (cv.Footer("BREAKING CHANGE", "removed foo"),)


def test_breaking_change_without_footer_is_rejected(default_config):
    raw = "feat(core)!: drop API"
    error = cv.validate_commit_message(raw, default_config)
    assert isinstance(error, cv.ParseError)
    assert error.rule is cv.Rule.MISSING_BREAKING_CHANGE_FOOTER
    assert error.position == len(raw)


def test_breaking_change_footer_not_required_when_disabled():
    config = cv.Config(require_breaking_change_footer=False)
    commit = cv.validate_commit_message("feat(core)!: drop API", config)
    assert isinstance(commit, cv.CommitMessage)
    assert commit.breaking is True


@pytest.mark.parametrize(
    "footer",
    [
        "BREAKING CHANGE: gone",
        "BREAKING-CHANGE: gone",
        "breaking change: gone",
        "Breaking-Change: gone",
    ],
)
def test_breaking_change_footer_spellings(default_config, footer):
    commit = cv.validate_commit_message(f"refactor!: rework\n\n{footer}", default_config)
    assert isinstance(commit, cv.CommitMessage)


def test_footer_never_required_without_bang(default_config):
    commit = cv.validate_commit_message("fix: patch things\n\nSome body.", default_config)
    assert isinstance(commit, cv.CommitMessage)
    assert commit.body == "Some body."


@pytest.mark.parametrize(
    "raw, rule, position",
    [
        ("", cv.Rule.MISSING_TYPE, 0),
        (": nothing", cv.Rule.MISSING_TYPE, 0),
        ("wip: stuff", cv.Rule.UNKNOWN_TYPE, 0),
        ("Feat: upper case", cv.Rule.UNKNOWN_TYPE, 0),
        ("feat(): empty scope", cv.Rule.MALFORMED_SCOPE, 4),
        ("feat(a b): two words", cv.Rule.MALFORMED_SCOPE, 4),
        ("feat((a)): nested", cv.Rule.MALFORMED_SCOPE, 4),
        ("feat(core: unclosed", cv.Rule.MALFORMED_SCOPE, 4),
        ("fix:bug", cv.Rule.MISSING_COLON_SPACE, 4),
        ("fix bug", cv.Rule.MISSING_COLON_SPACE, 3),
        ("fix : bug", cv.Rule.MISSING_COLON_SPACE, 3),
        ("fix:  bug", cv.Rule.MISSING_COLON_SPACE, 4),
        ("fix:\tbug", cv.Rule.MISSING_COLON_SPACE, 4),
        ("fix:", cv.Rule.MISSING_COLON_SPACE, 4),
        ("feat!!: double bang", cv.Rule.MISSING_COLON_SPACE, 5),
        ("fix: ", cv.Rule.EMPTY_DESCRIPTION, 5),
        ("fix: \n\nbody", cv.Rule.EMPTY_DESCRIPTION, 5),
        ("fix: 123abc problem", cv.Rule.DESCRIPTION_STARTS_WITH_DIGIT, 5),
        ("fix: 42", cv.Rule.DESCRIPTION_STARTS_WITH_DIGIT, 5),
    ],
)
def test_rejections(default_config, raw, rule, position):
    error = cv.validate_commit_message(raw, default_config)
    assert isinstance(error, cv.ParseError)
    assert error.rule is rule
    assert error.position == position
    assert error.expected


def test_additional_types():
    assert isinstance(cv.validate_commit_message("wip: stuff"), cv.ParseError)
    config = cv.Config(additional_types=["wip"])
    commit = cv.validate_commit_message("wip: stuff", config)
    assert isinstance(commit, cv.CommitMessage)
    assert commit.commit_type == "wip"


@pytest.mark.parametrize("commit_type", sorted(cv.BASE_TYPES))
def test_every_base_type_is_accepted(default_config, commit_type):
    commit = cv.validate_commit_message(f"{commit_type}(parser): handle input", default_config)
    assert isinstance(commit, cv.CommitMessage)
    assert commit.commit_type == commit_type


def test_unknown_type_lists_vocabulary(default_config):
    error = cv.validate_commit_message("oops: bad", default_config)
    assert "feat" in error.expected
    assert str(error).startswith("UnknownType at 0: expected one of:")


def test_hyphenated_scope(default_config):
    commit = cv.validate_commit_message("fix(api-gateway): retry on timeout", default_config)
    assert commit.scope == "api-gateway"


def test_description_keeps_punctuation_and_numbers(default_config):
    commit = cv.validate_commit_message("fix: bump v2 to 3 (again)!", default_config)
    assert commit.description == ("bump", "v2", "to", "3", "(again)!")


def test_body_and_footers():
    raw = (
        "feat: add new API endpoint\n\n"
        "This introduces a new endpoint.\n\n"
        "Signed-off-by: Jane Doe <jane@example.com>\n"
        "Co-authored-by: John Smith <john@example.com>"
    )
    commit = cv.validate_commit_message(raw)
    assert commit.description == ("add", "new", "API", "endpoint")
    assert commit.body == "This introduces a new endpoint."
    assert commit.footers == (
        cv.Footer("Signed-off-by", "Jane Doe <jane@example.com>"),
        cv.Footer("Co-authored-by", "John Smith <john@example.com>"),
    )


def test_text_without_blank_line_is_not_body():
    commit = cv.validate_commit_message("feat: x\nsome body")
    assert isinstance(commit, cv.CommitMessage)
    assert commit.description == ("x",)
    assert commit.body is None
    assert commit.footers == ()


def test_breaking_footer_without_blank_line_is_rejected():
    raw = "feat!: x\nBREAKING CHANGE: y"
    error = cv.validate_commit_message(raw)
    assert isinstance(error, cv.ParseError)
    assert error.rule is cv.Rule.MISSING_BREAKING_CHANGE_FOOTER
    assert error.position == len(raw)


def test_whitespace_only_line_separates_body():
    commit = cv.validate_commit_message("fix: patch\n  \nThe body.\n\nRefs #7")
    assert commit.body == "The body."
    assert commit.footers == (cv.Footer("Refs", "7"),)


def test_body_after_blank_line():
    raw = (
        "feat!: remove deprecated API\n\n"
        "This commit removes the deprecated API.\n\n"
        "BREAKING-CHANGE: The 'oldFunction' has been removed."
    )
    commit = cv.validate_commit_message(raw)
    assert commit.body == "This commit removes the deprecated API."
    assert commit.footers[0].key == "BREAKING-CHANGE"
    assert commit.footers[0].value == "The 'oldFunction' has been removed."


def test_multi_paragraph_body_preserves_newlines():
    raw = "fix: correct typo\n\nFirst paragraph\nstill first.\n\nSecond one.\n\nRefs #123"
    commit = cv.validate_commit_message(raw)
    assert commit.body == "First paragraph\nstill first.\n\nSecond one."
    assert commit.footers == (cv.Footer("Refs", "123"),)


def test_non_footer_last_paragraph_stays_in_body():
    commit = cv.validate_commit_message("fix: correct typo\n\nSmall fix.\n\nInvalidFooterLine")
    assert commit.body == "Small fix.\n\nInvalidFooterLine"
    assert commit.footers == ()


def test_trailing_newlines_mean_no_body():
    commit = cv.validate_commit_message("docs: improve documentation\n\n\n")
    assert commit.body is None
    assert commit.footers == ()


def test_validation_is_repeatable(default_config):
    raw = "feat(ui)!: swap theme\n\nBody text\n\nBREAKING CHANGE: colors"
    assert cv.validate_commit_message(raw, default_config) == cv.validate_commit_message(
        raw, default_config
    )
    bad = "nope: x"
    assert cv.validate_commit_message(bad, default_config) == cv.validate_commit_message(
        bad, default_config
    )


@pytest.mark.parametrize(
    "raw",
    [
        "feat: fix bug",
        "fix(parser): handle empty input",
        "perf(db)!: drop index v2",
        "chore!: release 1.0 now",
    ],
)
def test_header_round_trip(raw):
    config = cv.Config(require_breaking_change_footer=False)
    first = cv.validate_commit_message(raw, config)
    assert first.header() == raw
    second = cv.validate_commit_message(first.header(), config)
    assert (second.commit_type, second.scope, second.breaking, second.description) == (
        first.commit_type,
        first.scope,
        first.breaking,
        first.description,
    )


def test_validate_is_a_gate(default_config):
    draft = cv.match_commit(cv.tokenize("feat: add thing"), default_config)
    assert cv.validate(draft, default_config) is draft


def test_lint_commit_message_raises_value_error():
    assert cv.lint_commit_message("feat: ok subject").subject == "ok subject"
    with pytest.raises(ValueError) as excinfo:
        cv.lint_commit_message("bad subject")
    assert excinfo.value.error.rule is cv.Rule.UNKNOWN_TYPE


@pytest.mark.parametrize(
    "key, expected",
    [
        ("BREAKING CHANGE", True),
        ("BREAKING-CHANGE", True),
        ("breaking  change", True),
        ("Breaking-change", True),
        ("BREAKING", False),
        ("Signed-off-by", False),
    ],
)
def test_is_breaking_change_key(key, expected):
    assert cv.is_breaking_change_key(key) is expected
