import subprocess

from fexplorer.handlers import HandlerMsg, handle_cmd


def test_empty_command_does_nothing():
    result = handle_cmd("   ")
    assert result == HandlerMsg(input="", msg="", err=None)


def test_output_is_captured():
    result = handle_cmd("echo hello")
    assert result.err is None
    assert result.msg == "hello\n"
    assert result.input == "echo hello"


def test_input_is_trimmed():
    result = handle_cmd("  echo hi  ")
    assert result.input == "echo hi"
    assert result.msg.strip() == "hi"


def test_failing_command_reports_error():
    result = handle_cmd("exit 3")
    assert isinstance(result.err, subprocess.CalledProcessError)
    assert result.err.returncode == 3
    assert result.msg == ""


def test_stderr_is_not_in_output():
    result = handle_cmd("echo oops 1>&2")
    assert result.err is None
    assert result.msg == ""


def test_shell_features_work():
    result = handle_cmd("printf 'a\\nb\\n' | wc -l")
    assert result.err is None
    assert result.msg.strip() == "2"