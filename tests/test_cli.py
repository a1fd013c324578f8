import pytest

from emlbox import __version__
from emlbox.cli import main, resolve_output

from tests.helpers import split_archive, write_eml


def test_single_file(inbox, outdir, capsys):
    eml = write_eml(
        inbox,
        "test.eml",
        "From: sender@example.com\r\nTo: recipient@example.com\r\n"
        "Subject: Test Email\r\n\r\nThis is a test email.\n",
    )

    main([str(eml), str(outdir)])

    out = capsys.readouterr().out
    assert "Successfully converted 1 email to mbox format" in out
    content = (outdir / "output.mbox").read_text()
    assert content.startswith("From MAILER-DAEMON")
    assert "From: sender@example.com" in content
    assert "This is a test email." in content


def test_directory(inbox, outdir, capsys):
    for i in range(1, 4):
        write_eml(inbox, f"test{i}.eml", f"Subject: Test Email {i}\r\n\r\nThis is test email number {i}.")

    main([str(inbox), str(outdir), "--no-banner", "--workers", "2"])

    data = (outdir / "output.mbox").read_bytes()
    assert len(split_archive(data)) == 3
    for i in range(1, 4):
        assert f"This is test email number {i}.".encode() in data
    out = capsys.readouterr().out
    assert "Successfully converted 3 email(s) to mbox format" in out
    assert "Convert your eml files" not in out


def test_banner_is_shown_by_default(inbox, outdir, capsys):
    main([str(write_eml(inbox, "a.eml", "a")), str(outdir)])
    assert "Convert your eml files into an mbox archive." in capsys.readouterr().out


def test_empty_directory_reports_marker(inbox, outdir, capsys):
    with pytest.raises(SystemExit) as exc:
        main([str(inbox), str(outdir), "--no-banner"])

    assert exc.value.code == 1
    captured = capsys.readouterr()
    assert "NoEmlFiles" in captured.err
    assert "NoEmlFiles" not in captured.out
    assert not (outdir / "output.mbox").exists()


def test_invalid_input(tmp_path, capsys):
    with pytest.raises(SystemExit) as exc:
        main([str(tmp_path / "does" / "not" / "exist"), str(tmp_path), "--no-banner"])

    assert exc.value.code == 1
    assert "InvalidPathError: Provide a folder or an eml file" in capsys.readouterr().err


def test_defaults_read_input_folder_into_cwd(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "input").mkdir()
    write_eml(tmp_path / "input", "a.eml", "a")

    main(["--no-banner"])

    assert (tmp_path / "output.mbox").exists()


def test_invalid_workers(capsys):
    with pytest.raises(SystemExit) as exc:
        main(["--workers", "0"])
    assert exc.value.code == 2


def test_version(capsys):
    with pytest.raises(SystemExit):
        main(["--version"])
    assert __version__ in capsys.readouterr().out


@pytest.mark.parametrize(
    "input_arg, output_arg, expected",
    [("input", "input", "."), ("input", ".", "."), ("mails", "input", "input"), ("a", "b", "b")],
)
def test_resolve_output(input_arg, output_arg, expected):
    assert resolve_output(input_arg, output_arg) == expected
