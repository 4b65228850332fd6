"""Unit tests for `github`."""

from __future__ import annotations

import pytest

from tassist.commands.handlers import github
from tassist.commands.handlers.github import GithubCommand
from tassist.commands.messages import format_person, invalid_format
from tassist.commands.parser import CommandParseError, ParseErrorCode
from tassist.commands.targets import ByIndex, ByStudentId, Index
from tassist.commands.types import CommandExecutionError, ExecutionErrorCode
from tassist.model.roster import NameContainsKeywordsPredicate, Roster
from tassist.model.values import Github, StudentId
from tests.unit.helpers import ALICE, BENSON, CARL, PersonBuilder

_FIRST = ByIndex(index=Index(zero_based=0))


@pytest.mark.unit
def test_parse_github_by_index() -> None:
    command = github.parse(" 2 g/https://github.com/tammzz")

    assert command.target == ByIndex(index=Index(zero_based=1))
    assert command.github == Github("https://github.com/tammzz")


@pytest.mark.unit
def test_parse_github_by_student_id_with_empty_value() -> None:
    command = github.parse(" A0000000B g/")

    assert command.target == ByStudentId(student_id=StudentId("A0000000B"))
    assert command.github.is_empty


@pytest.mark.unit
@pytest.mark.parametrize(
    "arguments",
    [" 1", " g/https://github.com/tammzz", "", " x g/https://github.com/tammzz"],
)
def test_parse_github_requires_target_and_prefix(arguments: str) -> None:
    with pytest.raises(CommandParseError) as exc_info:
        github.parse(arguments)

    assert exc_info.value.code == ParseErrorCode.INVALID_FORMAT
    assert str(exc_info.value) == invalid_format(github.USAGE)


@pytest.mark.unit
def test_parse_github_rejects_non_github_url() -> None:
    with pytest.raises(CommandParseError) as exc_info:
        github.parse(" 1 g/https://gitlab.com/tammzz")

    assert str(exc_info.value) == github.MESSAGE_INVALID_GITHUB


@pytest.mark.unit
def test_parse_github_rejects_repeated_prefix() -> None:
    with pytest.raises(CommandParseError) as exc_info:
        github.parse(" 1 g/https://github.com/a g/https://github.com/b")

    assert exc_info.value.code == ParseErrorCode.DUPLICATE_FIELD


@pytest.mark.unit
def test_parse_github_reports_bad_url_before_bad_target() -> None:
    with pytest.raises(CommandParseError) as exc_info:
        github.parse(" x g/https://gitlab.com/tammzz")

    assert str(exc_info.value) == github.MESSAGE_INVALID_GITHUB


@pytest.mark.unit
def test_parse_github_reports_repeated_prefix_before_bad_target() -> None:
    with pytest.raises(CommandParseError) as exc_info:
        github.parse(" x g/https://github.com/a g/https://github.com/b")

    assert exc_info.value.code == ParseErrorCode.DUPLICATE_FIELD


@pytest.mark.unit
def test_github_command_adds_url_and_keeps_other_fields(roster: Roster) -> None:
    # Arrange - Carl starts with no GitHub
    command = GithubCommand(
        target=ByIndex(index=Index(zero_based=2)),
        github=Github("https://github.com/carlk"),
    )
    expected = PersonBuilder(CARL).with_github("https://github.com/carlk").build()

    # Act
    result = command.execute(roster)

    # Assert - only GitHub changed, added message
    assert roster.persons() == (ALICE, BENSON, expected)
    assert result.code == "github_added"
    assert result.message == f"Added github to Person: {format_person(expected)}"


@pytest.mark.unit
def test_github_command_empty_value_removes_url(roster: Roster) -> None:
    # Act
    result = GithubCommand(target=_FIRST, github=Github("")).execute(roster)

    # Assert - Alice's GitHub cleared, removed message
    expected = PersonBuilder(ALICE).with_github("").build()
    assert roster.persons()[0] == expected
    assert result.code == "github_removed"
    assert result.message == (
        f"Removed github from Person: {format_person(expected)}"
    )


@pytest.mark.unit
def test_github_command_index_addresses_filtered_view(roster: Roster) -> None:
    # Arrange - only Benson visible
    roster.update_filtered_person_list(
        NameContainsKeywordsPredicate(keywords=("benson",))
    )

    # Act
    GithubCommand(target=_FIRST, github=Github("https://github.com/bm")).execute(
        roster
    )

    # Assert - Benson edited, filter reset
    assert roster.persons()[1].github.value == "https://github.com/bm"
    assert roster.persons()[0] == ALICE
    assert len(roster.filtered_persons()) == 3


@pytest.mark.unit
def test_github_command_rejects_index_past_filtered_view(roster: Roster) -> None:
    roster.update_filtered_person_list(
        NameContainsKeywordsPredicate(keywords=("benson",))
    )
    command = GithubCommand(
        target=ByIndex(index=Index(zero_based=1)),
        github=Github(""),
    )

    with pytest.raises(CommandExecutionError) as exc_info:
        command.execute(roster)

    assert exc_info.value.code == ExecutionErrorCode.INVALID_INDEX
    assert str(exc_info.value) == "The person index provided is invalid"
    assert exc_info.value.data == {"index": 2, "shown": 1}


@pytest.mark.unit
def test_github_command_reports_unknown_student_id(roster: Roster) -> None:
    command = GithubCommand(
        target=ByStudentId(student_id=StudentId("A9999999Z")),
        github=Github(""),
    )

    with pytest.raises(CommandExecutionError) as exc_info:
        command.execute(roster)

    assert exc_info.value.code == ExecutionErrorCode.PERSON_NOT_FOUND
    assert str(exc_info.value) == "Person not found: A9999999Z"
    assert roster.persons() == (ALICE, BENSON, CARL)
