"""Result code groupings used by CLI rendering policy."""

from __future__ import annotations

PERSON_LIST_CODES = frozenset({"persons_listed", "persons_found"})

PERSON_DETAIL_CODES = frozenset(
    {
        "person_added",
        "person_edited",
        "person_deleted",
        "github_added",
        "github_removed",
        "repository_set",
        "class_set",
        "progress_set",
    }
)

HIDE_DATA_CODES = frozenset(
    {
        *PERSON_LIST_CODES,
        *PERSON_DETAIL_CODES,
        "repository_opened",
        "roster_cleared",
        "help_shown",
        "exit_requested",
    }
)

ADDRESSING_ERROR_CODES = frozenset({"invalid_index", "person_not_found"})
