import os

import pytest

from pipexpy.pipeline import PipexError, main, run_pipeline


@pytest.fixture
def env():
    return {"PATH": os.environ.get("PATH", "/usr/bin:/bin")}


@pytest.fixture
def infile(tmp_path):
    path = tmp_path / "in.txt"
    path.write_text("hello world\n")
    return path


def test_two_commands_transform_input(tmp_path, infile, env):
    outfile = tmp_path / "out.txt"
    status = run_pipeline(str(infile), ["cat", "tr a-z A-Z"], str(outfile), env)
    assert status == 0
    assert outfile.read_text() == "HELLO WORLD\n"


def test_status_of_last_command(tmp_path, infile, env):
    outfile = tmp_path / "out.txt"
    status = run_pipeline(str(infile), ["cat", "sh -c 'exit 3'"], str(outfile), env)
    assert status == 3


def test_missing_last_command_is_127(tmp_path, infile, env, capsys):
    outfile = tmp_path / "out.txt"
    status = run_pipeline(str(infile), ["cat", "no-such-tool-here"], str(outfile), env)
    assert status == 127
    err = capsys.readouterr().err
    assert "pipex: " in err
    assert "no-such-tool-here" in err


def test_missing_first_command_keeps_last_status(tmp_path, infile, env):
    outfile = tmp_path / "out.txt"
    status = run_pipeline(str(infile), ["no-such-tool-here", "cat"], str(outfile), env)
    assert status == 0
    assert outfile.read_text() == ""


def test_missing_infile_skips_first_command(tmp_path, env, capsys):
    missing = tmp_path / "missing.txt"
    outfile = tmp_path / "out.txt"
    status = run_pipeline(str(missing), ["cat", "cat"], str(outfile), env)
    assert status == 0
    assert outfile.exists()
    assert outfile.read_text() == ""
    assert str(missing) in capsys.readouterr().err


def test_outfile_is_truncated(tmp_path, infile, env):
    outfile = tmp_path / "out.txt"
    outfile.write_text("old content that is much longer than the new one\n")
    run_pipeline(str(infile), ["cat", "cat"], str(outfile), env)
    assert outfile.read_text() == infile.read_text()


def test_single_command_writes_output_and_returns_failure(tmp_path, infile, env):
    outfile = tmp_path / "out.txt"
    status = run_pipeline(str(infile), ["tr a-z A-Z"], str(outfile), env)
    assert status == 1
    assert outfile.read_text() == "HELLO WORLD\n"


def test_single_command_missing_infile_reads_nothing(tmp_path, env):
    outfile = tmp_path / "out.txt"
    status = run_pipeline(str(tmp_path / "missing"), ["cat"], str(outfile), env)
    assert status == 1
    assert outfile.read_text() == ""


def test_unwritable_outfile_raises(tmp_path, infile, env):
    with pytest.raises(PipexError) as info:
        run_pipeline(str(infile), ["cat", "cat"], str(tmp_path), env)
    assert info.value.status == 1
    assert str(tmp_path) in str(info.value)


def test_empty_environment_fails_commands(tmp_path, infile):
    outfile = tmp_path / "out.txt"
    status = run_pipeline(str(infile), ["cat", "cat"], str(outfile), {})
    assert status == 127


def test_last_command_naming_outfile_keeps_stdout(tmp_path, infile, env, capfd):
    outfile = tmp_path / "out.txt"
    status = run_pipeline(str(infile), ["cat", f"tee {outfile}"], str(outfile), env)
    assert status == 0
    assert outfile.read_text() == infile.read_text()
    assert infile.read_text() in capfd.readouterr().out


@pytest.mark.parametrize("specs", [[], ["cat", "cat", "cat"]])
def test_command_count_is_checked(tmp_path, infile, env, specs):
    with pytest.raises(ValueError):
        run_pipeline(str(infile), specs, str(tmp_path / "out.txt"), env)


@pytest.mark.parametrize("argv", [[], ["a"], ["a", "b"], ["a", "b", "c", "d", "e"]])
def test_main_rejects_wrong_argument_count(argv):
    assert main(argv) == 1


def test_main_runs_pipeline(tmp_path, infile):
    outfile = tmp_path / "out.txt"
    assert main([str(infile), "cat", "tr a-z A-Z", str(outfile)]) == 0
    assert outfile.read_text() == "HELLO WORLD\n"


def test_main_reports_unwritable_outfile(tmp_path, infile, capsys):
    assert main([str(infile), "cat", "cat", str(tmp_path)]) == 1
    err = capsys.readouterr().err
    assert err.startswith("pipex: ")
    assert str(tmp_path) in err