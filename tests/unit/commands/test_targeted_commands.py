"""Unit tests for `class`, `repo`, `progress`, `delete` and `open`."""

from __future__ import annotations

import pytest

from tassist.commands.handlers import (
    class_number,
    delete,
    open_repository,
    progress,
    repo,
)
from tassist.commands.messages import format_person, invalid_format
from tassist.commands.parser import CommandParseError, ParseErrorCode
from tassist.commands.targets import ByIndex, ByStudentId, Index
from tassist.commands.types import CommandExecutionError, ExecutionErrorCode
from tassist.model.roster import NameContainsKeywordsPredicate, Roster
from tassist.model.values import ClassNumber, Progress, Repository, StudentId
from tests.unit.helpers import ALICE, BENSON, CARL, PersonBuilder


@pytest.mark.unit
def test_parse_class_by_student_id() -> None:
    command = class_number.parse(" A1111111A c/T05")

    assert command.target == ByStudentId(student_id=StudentId("A1111111A"))
    assert command.class_number == ClassNumber("T05")


@pytest.mark.unit
def test_parse_class_rejects_missing_target_or_class() -> None:
    for arguments in (" c/T05", " 1"):
        with pytest.raises(CommandParseError) as exc_info:
            class_number.parse(arguments)
        assert str(exc_info.value) == invalid_format(class_number.USAGE)


@pytest.mark.unit
def test_parse_class_rejects_malformed_class() -> None:
    with pytest.raises(CommandParseError) as exc_info:
        class_number.parse(" 1 c/t5")

    assert str(exc_info.value) == class_number.MESSAGE_INVALID_CLASS


@pytest.mark.unit
def test_class_command_moves_person(roster: Roster) -> None:
    result = class_number.parse(" 3 c/T09").execute(roster)

    expected = PersonBuilder(CARL).with_class("T09").build()
    assert roster.persons()[2] == expected
    assert result.code == "class_set"
    assert result.message == f"Updated class of Person: {format_person(expected)}"


@pytest.mark.unit
def test_parse_repo_builds_repository_url() -> None:
    command = repo.parse(" 1 u/tammzz r/ip")

    assert command.target == ByIndex(index=Index(zero_based=0))
    assert command.repository == Repository("https://github.com/tammzz/ip")


@pytest.mark.unit
def test_parse_repo_requires_index_before_prefixes() -> None:
    with pytest.raises(CommandParseError) as exc_info:
        repo.parse(" u/tammzz r/ip")

    assert str(exc_info.value) == repo.MESSAGE_NO_INDEX_STUDENTID


@pytest.mark.unit
@pytest.mark.parametrize(
    ("arguments", "expected"),
    [
        (" 1 u/tammzz", invalid_format(repo.USAGE)),
        (" 1 u/-tammzz r/ip", invalid_format(repo.MESSAGE_INVALID_USERNAME)),
        (
            " 1 u/tammzz r/bad name",
            invalid_format(repo.MESSAGE_INVALID_REPOSITORY_NAME),
        ),
    ],
)
def test_parse_repo_rejects_invalid_parts(arguments: str, expected: str) -> None:
    with pytest.raises(CommandParseError) as exc_info:
        repo.parse(arguments)

    assert exc_info.value.code == ParseErrorCode.INVALID_FORMAT
    assert str(exc_info.value) == expected


@pytest.mark.unit
def test_parse_repo_rejects_repeated_username() -> None:
    with pytest.raises(CommandParseError) as exc_info:
        repo.parse(" 1 u/a u/b r/ip")

    assert exc_info.value.code == ParseErrorCode.DUPLICATE_FIELD


@pytest.mark.unit
def test_repo_command_records_repository(roster: Roster) -> None:
    result = repo.parse(" A1111111A u/alice r/tp").execute(roster)

    assert roster.persons()[0].repository.value == "https://github.com/alice/tp"
    assert result.code == "repository_set"
    assert result.message.startswith(
        "Added repository https://github.com/alice/tp to Person: Alice Pauline"
    )


@pytest.mark.unit
def test_progress_command_sets_progress(roster: Roster) -> None:
    command = progress.parse(" 2 pr/75")

    result = command.execute(roster)

    assert command.progress == Progress("75")
    assert roster.persons()[1].progress.value == "75"
    assert result.code == "progress_set"


@pytest.mark.unit
def test_parse_progress_rejects_out_of_range() -> None:
    with pytest.raises(CommandParseError) as exc_info:
        progress.parse(" 2 pr/101")

    assert str(exc_info.value) == Progress.MESSAGE_CONSTRAINTS


@pytest.mark.unit
@pytest.mark.parametrize(
    ("arguments", "code", "message"),
    [
        (" x pr/1 pr/2", ParseErrorCode.DUPLICATE_FIELD, "Multiple values"),
        (" x pr/101", ParseErrorCode.INVALID_FORMAT, Progress.MESSAGE_CONSTRAINTS),
    ],
)
def test_parse_progress_checks_value_before_target(
    arguments: str, code: ParseErrorCode, message: str
) -> None:
    with pytest.raises(CommandParseError) as exc_info:
        progress.parse(arguments)

    assert exc_info.value.code == code
    assert str(exc_info.value).startswith(message)


@pytest.mark.unit
def test_delete_command_by_index(roster: Roster) -> None:
    result = delete.parse(" 2").execute(roster)

    assert roster.persons() == (ALICE, CARL)
    assert result.code == "person_deleted"
    assert result.message == f"Deleted Person: {format_person(BENSON)}"


@pytest.mark.unit
def test_delete_command_by_student_id_resets_filter(roster: Roster) -> None:
    # Arrange - view narrowed to Carl
    roster.update_filtered_person_list(
        NameContainsKeywordsPredicate(keywords=("carl",))
    )

    # Act
    delete.parse(" A3333333C").execute(roster)

    # Assert
    assert roster.persons() == (ALICE, BENSON)
    assert roster.filtered_persons() == (ALICE, BENSON)


@pytest.mark.unit
def test_delete_command_by_student_id_ignores_hidden_person(roster: Roster) -> None:
    # Arrange - Alice filtered out of view
    roster.update_filtered_person_list(
        NameContainsKeywordsPredicate(keywords=("carl",))
    )

    # Act
    with pytest.raises(CommandExecutionError) as exc_info:
        delete.parse(" A1111111A").execute(roster)

    # Assert
    assert exc_info.value.code == ExecutionErrorCode.PERSON_NOT_FOUND
    assert roster.persons() == (ALICE, BENSON, CARL)


@pytest.mark.unit
def test_delete_command_rejects_index_past_view(roster: Roster) -> None:
    with pytest.raises(CommandExecutionError) as exc_info:
        delete.parse(" 4").execute(roster)

    assert exc_info.value.code == ExecutionErrorCode.INVALID_INDEX
    assert len(roster.persons()) == 3


@pytest.mark.unit
def test_parse_delete_rejects_zero_index() -> None:
    with pytest.raises(CommandParseError) as exc_info:
        delete.parse(" 0")

    assert str(exc_info.value) == invalid_format(delete.USAGE)


@pytest.mark.unit
def test_open_command_returns_repository_url(roster: Roster) -> None:
    result = open_repository.parse(" 2").execute(roster)

    assert result.code == "repository_opened"
    assert result.open_url == "https://github.com/benson/ip"
    assert roster.persons() == (ALICE, BENSON, CARL)


@pytest.mark.unit
def test_open_command_requires_recorded_repository(roster: Roster) -> None:
    with pytest.raises(CommandExecutionError) as exc_info:
        open_repository.OpenCommand(
            target=ByStudentId(student_id=ALICE.student_id)
        ).execute(roster)

    assert exc_info.value.code == ExecutionErrorCode.NO_REPOSITORY
    assert "Alice Pauline" in str(exc_info.value)
