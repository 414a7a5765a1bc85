from typer.testing import CliRunner
from todo.api.cli import app, run_command, parse_task_id, color_status
from todo.domain.todo_list import TodoList
from todo.domain.errors import TaskValidationError
import pytest

runner = CliRunner()


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("TODO_LOG_LEVEL", "TODO_LOG_FILE", "TODO_DATE_FORMAT"):
        monkeypatch.delenv(name, raising=False)


def test_demo_runs_to_the_end():
    result = runner.invoke(app, ["demo"])

    assert result.exit_code == 0
    assert "Demo start" in result.output
    assert "Completed tasks" in result.output
    assert "Not found" in result.output
    assert "Demo finished" in result.output


def test_shell_add_complete_and_views():
    # Arrange
    script = "add buy milk\nadd walk dog\ndone 1\ncomplete\nincomplete\nquit\n"

    # Act
    result = runner.invoke(app, ["shell"], input=script)

    # Assert
    assert result.exit_code == 0
    assert "Completed #1" in result.output
    assert "buy milk" in result.output
    assert "walk dog" in result.output
    assert "Bye. 2 task(s) discarded." in result.output


def test_shell_reports_out_of_range_id_and_continues():
    result = runner.invoke(app, ["shell"], input="add A\ndone 5\nrm 0\nlist\n")

    assert result.exit_code == 0
    assert result.output.count("Not found") == 2
    assert "All tasks" in result.output
    assert "Bye. 1 task(s) discarded." in result.output


def test_shell_reports_non_numeric_id():
    result = runner.invoke(app, ["shell"], input="add A\ndone first\n")

    assert result.exit_code == 0
    assert "Validation error" in result.output


def test_shell_survives_markup_in_task_id():
    result = runner.invoke(app, ["shell"], input="add A\ndone [/]\nlist\nquit\n")

    assert result.exit_code == 0
    assert "Validation error" in result.output
    assert "[/]" in result.output
    assert "All tasks" in result.output


def test_shell_survives_markup_in_unknown_command():
    result = runner.invoke(app, ["shell"], input="[/]\nlist\nquit\n")

    assert result.exit_code == 0
    assert "Unknown command" in result.output
    assert "All tasks" in result.output


def test_shell_unknown_command():
    result = runner.invoke(app, ["shell"], input="frobnicate\nquit\n")

    assert result.exit_code == 0
    assert "Unknown command" in result.output


def test_invalid_log_level_is_rejected():
    result = runner.invoke(app, ["--log-level", "loud", "demo"])
    assert result.exit_code != 0


def test_log_file_receives_debug_logs(tmp_path):
    log_file = tmp_path / "logs" / "todo.log"

    result = runner.invoke(app, ["--log-file", str(log_file), "shell"], input="add A\ndone 1\n")

    assert result.exit_code == 0
    content = log_file.read_text(encoding="utf-8")
    assert "Appended task 1" in content
    assert "Completed task 1" in content


def test_run_command_prepend_and_remove():
    todo = TodoList()

    assert run_command(todo, "add A")
    assert run_command(todo, "prepend B")
    assert run_command(todo, "rm 2")

    assert [t.description for t in todo.tasks] == ["B"]


def test_run_command_quit_and_blank_lines():
    todo = TodoList()

    assert run_command(todo, "   ")
    assert not run_command(todo, "quit")
    assert not run_command(todo, "EXIT")


def test_run_command_add_without_text_adds_nothing():
    todo = TodoList()

    assert run_command(todo, "add")

    assert todo.tasks == ()


def test_parse_task_id():
    assert parse_task_id(" 3 ") == 3
    with pytest.raises(TaskValidationError):
        parse_task_id("three")
    with pytest.raises(TaskValidationError):
        parse_task_id("")


def test_color_status_follows_completion():
    todo = TodoList()
    task = todo.append("A")

    assert color_status(task) == "[red]Open[/]"
    todo.complete(1)
    assert color_status(task) == "[green]Done[/]"
