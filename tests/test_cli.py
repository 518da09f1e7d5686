import hashlib

from puresha.cli import NOT_FOUND, file_digest, main


def test_file_digest_matches_reference(tmp_path):
    path = tmp_path / "data.bin"
    content = b"some file content\n" * 40
    path.write_bytes(content)
    assert file_digest(str(path)) == hashlib.sha256(content).hexdigest()


def test_file_digest_missing_file(tmp_path):
    assert file_digest(str(tmp_path / "absent.txt")) == "file not found!"
    assert NOT_FOUND == "file not found!"


def test_main_prints_each_file(tmp_path, capsys):
    first = tmp_path / "one.txt"
    second = tmp_path / "two.txt"
    first.write_bytes(b"abc")
    second.write_bytes(b"")
    missing = tmp_path / "nope"
    code = main([str(first), str(missing), str(second)])
    assert code == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines == [
        f"{first}: {hashlib.sha256(b'abc').hexdigest()}",
        f"{missing}: file not found!",
        f"{second}: {hashlib.sha256(b'').hexdigest()}",
    ]


def test_main_requires_a_file(capsys):
    assert main([]) == 1
    captured = capsys.readouterr()
    assert captured.err.strip() == "Atleast one file is required"
    assert captured.out == ""


def test_main_reads_sys_argv(tmp_path, capsys, monkeypatch):
    path = tmp_path / "f.txt"
    path.write_bytes(b"payload")
    monkeypatch.setattr("sys.argv", ["puresha", str(path)])
    assert main() == 0
    out = capsys.readouterr().out
    assert out == f"{path}: {hashlib.sha256(b'payload').hexdigest()}\n"