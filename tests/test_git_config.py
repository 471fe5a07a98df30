import pytest

from gitconfig_reader.git_config import main


def test_get_prints_value(repo, write_config, capsys):
    write_config(repo / ".git" / "config", "[user]\nname = Local User\n")
    main(["get", "-C", str(repo), "user.name"])
    assert capsys.readouterr().out == "Local User\n"


def test_get_show_scope_and_origin(repo, home, write_config, capsys):
    path = write_config(home / ".gitconfig", "[user]\nname = Global User\n")
    main(["get", "-C", str(repo), "--show-scope", "--show-origin", "user.name"])
    assert capsys.readouterr().out == f"global\tfile:{path}\tGlobal User\n"


def test_get_missing_key_exits(repo, capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(["get", "-C", str(repo), "user.name"])
    assert excinfo.value.code == 1
    assert capsys.readouterr().err.startswith("error: key not found")


def test_get_local_outside_repository(outside, home, capsys):
    with pytest.raises(SystemExit):
        main(["get", "--local", "-C", str(outside), "user.name"])
    assert "not a git repository" in capsys.readouterr().err


def test_files_lists_levels(repo, home, write_config, capsys):
    local = write_config(repo / ".git" / "config", "[core]\n")
    main(["files", "-C", str(repo)])
    out = capsys.readouterr().out.splitlines()
    assert out == [f"local\t{local}", "global\t-", "system\t-"]


def test_verbose_adds_one_handler(repo, write_config, capsys):
    from gitconfig_reader.util import get_logger

    write_config(repo / ".git" / "config", "[user]\nname = Local User\n")
    logger = get_logger()
    saved_handlers, saved_level = logger.handlers[:], logger.level
    logger.handlers = []
    try:
        main(["-v", "get", "-C", str(repo), "user.name"])
        main(["-v", "get", "-C", str(repo), "user.name"])
        assert len(logger.handlers) == 1
    finally:
        logger.handlers = saved_handlers
        logger.setLevel(saved_level)
    assert capsys.readouterr().out == "Local User\nLocal User\n"
