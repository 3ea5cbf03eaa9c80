"""Tests for command classification and parameter extraction."""

import pytest

from chatterbox.core.errors import ArgumentOrderError, InvalidInputError, MissingParameterError
from chatterbox.core.grammar import (
    CommandKind,
    classify,
    extract_deadline,
    extract_event,
    extract_find_keywords,
    extract_find_tag_name,
    extract_index,
    extract_remove_tag_association,
    extract_tag_association,
    extract_todo_description,
)


class TestClassify:
    @pytest.mark.parametrize(
        "line, kind",
        [
            ("bye", CommandKind.BYE),
            ("list", CommandKind.LIST),
            ("mark 1", CommandKind.MARK),
            ("unmark 1", CommandKind.UNMARK),
            ("todo read book", CommandKind.TODO),
            ("deadline x /by 1/1/2024", CommandKind.DEADLINE),
            ("event x /from a /to b", CommandKind.EVENT),
            ("delete 2", CommandKind.DELETE),
            ("findtag urgent", CommandKind.FINDTAG),
            ("find book", CommandKind.FIND),
            ("tag /i 1 /t urgent", CommandKind.TAG),
            ("alltags", CommandKind.ALLTAGS),
            ("removetag /i 1 /t urgent", CommandKind.REMOVETAG),
        ],
    )
    def test_keywords(self, line, kind):
        assert classify(line) == kind

    def test_case_insensitive_and_trimmed(self):
        assert classify("  LIST  ") == CommandKind.LIST
        assert classify("Todo Read") == CommandKind.TODO

    def test_findtag_wins_over_find(self):
        assert classify("findtag school") == CommandKind.FINDTAG
        assert classify("findtagged") == CommandKind.FINDTAG
        assert classify("finder") == CommandKind.FIND

    def test_prefix_match(self):
        assert classify("marker 2") == CommandKind.MARK
        assert classify("tags") == CommandKind.TAG

    @pytest.mark.parametrize("line", ["", "hello", "remove 1", "   "])
    def test_invalid(self, line):
        assert classify(line) == CommandKind.INVALID


class TestExtractIndex:
    def test_simple(self):
        assert extract_index("mark 3") == 3
        assert extract_index("unmark 12") == 12
        assert extract_index("delete 007") == 7

    def test_no_number(self):
        with pytest.raises(InvalidInputError, match="No number found"):
            extract_index("mark abc")

    def test_negative(self):
        with pytest.raises(InvalidInputError, match="Negative number found"):
            extract_index("mark -1")

    def test_scans_from_end(self):
        """Only the trailing digit run counts, wherever the keyword ends."""
        assert extract_index("mark3") == 3
        assert extract_index("mark 1 2") == 2
        with pytest.raises(InvalidInputError, match="Negative"):
            extract_index("mark3a-2")
        with pytest.raises(InvalidInputError, match="No number"):
            extract_index("mark 3a")


class TestExtractTodo:
    def test_description(self):
        assert extract_todo_description("todo read book") == "read book"

    def test_empty_is_not_rejected_here(self):
        assert extract_todo_description("todo") == ""
        assert extract_todo_description("todo    ") == ""


class TestExtractDeadline:
    def test_split(self):
        assert extract_deadline("deadline return book /by 2-12-2019 1800") == (
            "return book",
            "2-12-2019 1800",
        )

    def test_raw_date_text(self):
        assert extract_deadline("deadline essay /by sunday") == ("essay", "sunday")

    def test_later_slashes_stay_in_date(self):
        assert extract_deadline("deadline essay /by 2/12/2019") == ("essay", "2/12/2019")

    def test_missing_marker(self):
        with pytest.raises(MissingParameterError, match="Deadline date") as exc:
            extract_deadline("deadline return book")
        assert exc.value.parameter == "Deadline date"

    def test_empty_date(self):
        assert extract_deadline("deadline essay /by") == ("essay", "")


class TestExtractEvent:
    def test_split(self):
        assert extract_event("event meeting /from 2/2/2024 1400 /to 2/2/2024 1600") == (
            "meeting",
            "2/2/2024 1400",
            "2/2/2024 1600",
        )

    def test_missing_from(self):
        with pytest.raises(MissingParameterError, match="Event Start Date"):
            extract_event("event meeting /to 2pm")

    def test_missing_to(self):
        with pytest.raises(MissingParameterError, match="Event End Date"):
            extract_event("event meeting /from 2pm")

    def test_wrong_order(self):
        with pytest.raises(ArgumentOrderError):
            extract_event("event meeting /to 4pm /from 2pm")

    def test_wrong_order_is_a_missing_parameter(self):
        with pytest.raises(MissingParameterError, match="Wrong argument order"):
            extract_event("event meeting /to 4pm /from 2pm")

    def test_adjacent_markers(self):
        assert extract_event("event party /from/to") == ("party", "", "")


class TestExtractFind:
    def test_find_keywords_untrimmed(self):
        assert extract_find_keywords("find book") == " book"

    def test_find_tag_name_trimmed(self):
        assert extract_find_tag_name("findtag  school ") == "school"


class TestExtractTagAssociation:
    def test_parse(self):
        assert extract_tag_association("tag /i 2 /t school") == (2, "school")

    def test_tag_name_keeps_inner_spaces(self):
        assert extract_tag_association("tag /i 1 /t  home work ") == (1, "home work")

    @pytest.mark.parametrize(
        "line, parameter",
        [
            ("tag /t school", "Tag index"),
            ("tag /i 2", "Tag name"),
            ("tag /i /t school", "Tag index"),
            ("tag /i two /t school", "Tag index"),
            ("tag /i -2 /t school", "Tag index"),
            ("tag /i 2 /t", "Tag name"),
            ("tag /t school /i 2", "Tag index"),
        ],
    )
    def test_missing_pieces(self, line, parameter):
        with pytest.raises(MissingParameterError) as exc:
            extract_tag_association(line)
        assert exc.value.parameter == parameter


class TestExtractRemoveTagAssociation:
    def test_parse(self):
        assert extract_remove_tag_association("removetag /i 3 /t school") == (3, "school")

    def test_wrong_order(self):
        with pytest.raises(ArgumentOrderError):
            extract_remove_tag_association("removetag /t school /i 3")

    def test_missing_index(self):
        with pytest.raises(MissingParameterError, match="Tag index"):
            extract_remove_tag_association("removetag /i /t school")
