"""Tests for dispatcher module."""

import pytest

from task_cli import dispatcher
from task_cli.errors import NotFoundError, UsageError, ValidationError


class TestParseTaskId:
    """Test id text conversion."""

    def test_parse_numeric(self):
        """Test that numeric text converts to int."""
        assert dispatcher.parse_task_id("12") == 12
        assert dispatcher.parse_task_id(" 3 ") == 3

    @pytest.mark.parametrize("raw", [None, "", "  "])
    def test_parse_missing(self, raw):
        """Test that a missing id is a validation error."""
        with pytest.raises(ValidationError, match="id required"):
            dispatcher.parse_task_id(raw)

    @pytest.mark.parametrize("raw", ["abc", "1.5", "0", "-4"])
    def test_parse_invalid(self, raw):
        """Test that non-numeric and non-positive ids are rejected."""
        with pytest.raises(ValidationError, match="invalid id"):
            dispatcher.parse_task_id(raw)


class TestExecuteCommand:
    """Test command routing onto the store."""

    def test_add_joins_args(self, empty_store):
        """Test that add joins all remaining args with spaces."""
        result = dispatcher.execute_command("add", ["buy", "milk"], empty_store)

        assert result == "Task added successfully (ID: 1)"
        assert empty_store.list()[0].description == "buy milk"

    def test_add_without_args(self, empty_store):
        """Test that add with no description fails validation."""
        with pytest.raises(ValidationError, match="description required"):
            dispatcher.execute_command("add", [], empty_store)

    def test_update(self, sample_store):
        """Test that update joins the description after the id."""
        result = dispatcher.execute_command("update", ["1", "new", "text"], sample_store)

        assert result == "Task 1 updated successfully"
        assert sample_store.list()[0].description == "new text"

    def test_update_without_description(self, sample_store):
        """Test that update needs a description."""
        with pytest.raises(ValidationError, match="description required"):
            dispatcher.execute_command("update", ["1"], sample_store)

    def test_update_without_args(self, sample_store):
        """Test that update needs an id."""
        with pytest.raises(ValidationError, match="id required"):
            dispatcher.execute_command("update", [], sample_store)

    def test_update_non_numeric_id(self, sample_store):
        """Test that a non-numeric id is rejected before lookup."""
        with pytest.raises(ValidationError, match="invalid id: one"):
            dispatcher.execute_command("update", ["one", "text"], sample_store)

    def test_delete(self, sample_store):
        """Test deleting by id."""
        result = dispatcher.execute_command("delete", ["2"], sample_store)

        assert result == "Task 2 deleted successfully"
        assert [t.id for t in sample_store.list()] == [1, 4]

    def test_delete_unknown_id(self, sample_store):
        """Test that an unknown id propagates NotFoundError."""
        with pytest.raises(NotFoundError):
            dispatcher.execute_command("delete", ["3"], sample_store)

    def test_delete_extra_args(self, sample_store):
        """Test that extra args are a usage error."""
        with pytest.raises(UsageError, match="Usage: delete <id>"):
            dispatcher.execute_command("delete", ["1", "2"], sample_store)

    @pytest.mark.parametrize(
        "command, status",
        [
            ("mark-in-progress", "in-progress"),
            ("mark-done", "done"),
            ("mark-todo", "todo"),
        ],
    )
    def test_mark_commands(self, sample_store, command, status):
        """Test that each mark command sets its status."""
        result = dispatcher.execute_command(command, ["2"], sample_store)

        assert result == f"Task 2 marked as {status}"
        assert sample_store.list()[1].status == status

    def test_mark_without_id(self, sample_store):
        """Test that mark needs an id."""
        with pytest.raises(ValidationError, match="id required"):
            dispatcher.execute_command("mark-done", [], sample_store)

    def test_list_all(self, sample_store):
        """Test that list renders every task."""
        result = dispatcher.execute_command("list", [], sample_store)

        assert result.count("ID: ") == 3
        assert result.index("ID: 1") < result.index("ID: 2") < result.index("ID: 4")

    def test_list_filtered(self, sample_store):
        """Test that list renders only matching tasks."""
        result = dispatcher.execute_command("list", ["done"], sample_store)

        assert "ID: 2" in result
        assert "ID: 1" not in result

    def test_list_empty_messages(self, empty_store):
        """Test empty results render a message instead of failing."""
        assert dispatcher.execute_command("list", [], empty_store) == "No tasks found"
        assert dispatcher.execute_command("list", ["done"], empty_store) == "No done tasks found"

    def test_list_invalid_filter(self, sample_store):
        """Test that an invalid filter propagates ValidationError."""
        with pytest.raises(ValidationError, match="invalid filter"):
            dispatcher.execute_command("list", ["later"], sample_store)

    @pytest.mark.parametrize("command", [None, "", "frobnicate", "help"])
    def test_unknown_command_shows_help(self, empty_store, command):
        """Test that help/unknown commands print usage without storage access."""
        result = dispatcher.execute_command(command, [], empty_store)

        assert "Available commands:" in result
        assert not empty_store.path.exists()


class TestHelpText:
    """Test help rendering."""

    def test_help_lists_every_command(self):
        """Test that every registered command appears in help."""
        text = dispatcher.render_help_text()

        for handler in dispatcher.COMMAND_REGISTRY.values():
            assert handler.usage in text
            assert handler.summary in text

    def test_help_lists_statuses(self):
        """Test that valid statuses are listed."""
        assert "Statuses: todo, in-progress, done" in dispatcher.render_help_text()
