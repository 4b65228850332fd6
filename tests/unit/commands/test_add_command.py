"""Unit tests for `add`."""

from __future__ import annotations

import pytest

from tassist.commands.handlers import add
from tassist.commands.handlers.add import AddCommand
from tassist.commands.messages import format_person, invalid_format
from tassist.commands.parser import CommandParseError, ParseErrorCode
from tassist.commands.types import CommandExecutionError, ExecutionErrorCode
from tassist.model.roster import NameContainsKeywordsPredicate, Roster
from tassist.model.values import Email, StudentId, Tag
from tests.unit.helpers import ALICE, PersonBuilder


@pytest.mark.unit
def test_parse_add_with_every_field() -> None:
    # Act - full argument set, as passed on by the registry
    command = add.parse(
        " n/John Doe p/98765432 e/johnd@example.com s/A0123456B c/T01 "
        "g/https://github.com/johnd t/friends t/owesMoney pr/20"
    )

    # Assert - person carries parsed values
    person = command.person
    assert person.name.value == "John Doe"
    assert person.phone.value == "98765432"
    assert person.email.value == "johnd@example.com"
    assert person.student_id.value == "A0123456B"
    assert person.class_number.value == "T01"
    assert person.github.value == "https://github.com/johnd"
    assert person.tags == frozenset({Tag("friends"), Tag("owesMoney")})
    assert person.progress.value == "20"


@pytest.mark.unit
def test_parse_add_applies_defaults_for_optional_fields() -> None:
    command = add.parse(" n/Amy Bee p/85355255 e/amy@gmail.com s/A0000000B")

    assert command.person.class_number.value == "T00"
    assert command.person.github.is_empty
    assert command.person.tags == frozenset()
    assert command.person.progress.value == "0"


@pytest.mark.unit
def test_parse_add_accepts_fields_in_any_order() -> None:
    command = add.parse(" s/A0000000B e/amy@gmail.com p/85355255 n/Amy Bee")

    assert command.person.name.value == "Amy Bee"


@pytest.mark.unit
@pytest.mark.parametrize(
    "arguments",
    [
        " n/Amy Bee p/85355255 e/amy@gmail.com",
        " p/85355255 e/amy@gmail.com s/A0000000B",
        " n/Amy Bee p/85355255 s/A0000000B",
        " junk n/Amy Bee p/85355255 e/amy@gmail.com s/A0000000B",
        "",
    ],
)
def test_parse_add_requires_fields_and_empty_preamble(arguments: str) -> None:
    with pytest.raises(CommandParseError) as exc_info:
        add.parse(arguments)

    assert exc_info.value.code == ParseErrorCode.INVALID_FORMAT
    assert str(exc_info.value) == invalid_format(add.USAGE)


@pytest.mark.unit
def test_parse_add_rejects_repeated_single_valued_fields() -> None:
    with pytest.raises(CommandParseError) as exc_info:
        add.parse(
            " n/Amy n/Bee p/85355255 e/amy@gmail.com s/A0000000B s/A0000000C"
        )

    assert exc_info.value.code == ParseErrorCode.DUPLICATE_FIELD
    assert str(exc_info.value).endswith("n/ s/")


@pytest.mark.unit
def test_parse_add_reports_first_invalid_value() -> None:
    with pytest.raises(CommandParseError) as exc_info:
        add.parse(" n/Amy Bee p/85355255 e/not-an-email s/A0000000B")

    assert str(exc_info.value) == Email.MESSAGE_CONSTRAINTS


@pytest.mark.unit
def test_parse_add_rejects_non_ascii_student_id_digits() -> None:
    student_id = "A\u0661\u0662\u0663\u0664\u0665\u0666\u0667B"

    with pytest.raises(CommandParseError) as exc_info:
        add.parse(f" n/Amy Bee p/85355255 e/amy@gmail.com s/{student_id}")

    assert str(exc_info.value) == StudentId.MESSAGE_CONSTRAINTS


@pytest.mark.unit
def test_add_command_appends_and_shows_full_roster(roster: Roster) -> None:
    # Arrange - filtered view and a new person
    roster.update_filtered_person_list(
        NameContainsKeywordsPredicate(keywords=("alice",))
    )
    person = PersonBuilder().with_student_id("A7777777G").build()

    # Act
    result = AddCommand(person=person).execute(roster)

    # Assert - appended, filter reset, formatted message
    assert roster.persons()[-1] == person
    assert len(roster.filtered_persons()) == 4
    assert result.code == "person_added"
    assert result.message == f"New person added: {format_person(person)}"
    assert result.data == {"person": person.model_dump(mode="json")}


@pytest.mark.unit
def test_add_command_rejects_existing_student_id(roster: Roster) -> None:
    # Arrange - Alice's id behind a hidden filter
    roster.update_filtered_person_list(
        NameContainsKeywordsPredicate(keywords=("carl",))
    )
    clash = PersonBuilder().with_student_id(ALICE.student_id.value).build()

    # Act / Assert - full roster checked, size unchanged
    with pytest.raises(CommandExecutionError) as exc_info:
        AddCommand(person=clash).execute(roster)
    assert exc_info.value.code == ExecutionErrorCode.DUPLICATE_PERSON
    assert str(exc_info.value) == "This person already exists in the address book."
    assert len(roster.persons()) == 3
