from sermon_ai_core.cli import main


def _write_sermon(tmp_path, text="Do not be anxious about anything."):
    path = tmp_path / "sermon.txt"
    path.write_text(text, encoding="utf-8")
    return path


def test_generates_selected_content(tmp_path, fake_client):
    sermon = _write_sermon(tmp_path)
    out = tmp_path / "out"

    code = main([str(sermon), "--critique", "--kids-follow-along", "-o", str(out)])

    assert code == 0
    assert (out / "transcript.txt").read_text(encoding="utf-8") == "Do not be anxious about anything."
    assert (out / "critique.md").read_text(encoding="utf-8") == "critique output"
    assert (out / "kidsFollowAlong.md").exists()
    assert not (out / "bibleStudyGuide.md").exists()
    assert fake_client.chat_types() == ["critique", "kidsFollowAlong"]


def test_all_with_parallel_policy(tmp_path, fake_client, sleeps):
    sermon = _write_sermon(tmp_path)
    out = tmp_path / "out"

    assert main([str(sermon), "--all", "--policy", "parallel", "-o", str(out)]) == 0
    assert len(list(out.glob("*.md"))) == 4
    assert sleeps == []


def test_nothing_selected_exits_2(tmp_path, fake_client):
    sermon = _write_sermon(tmp_path)
    assert main([str(sermon), "-o", str(tmp_path / "out")]) == 2
    assert fake_client.chat_calls == []


def test_transcript_only(tmp_path, fake_client):
    sermon = _write_sermon(tmp_path)
    out = tmp_path / "out"

    assert main([str(sermon), "--transcript-only", "-o", str(out)]) == 0
    assert (out / "transcript.txt").exists()
    assert fake_client.chat_calls == []


def test_missing_file_exits_1(tmp_path, capsys):
    assert main([str(tmp_path / "missing.txt"), "--all"]) == 1
    assert "No se encontró el archivo" in capsys.readouterr().out


def test_unsupported_file_exits_1(tmp_path, capsys):
    path = tmp_path / "clip.mp4"
    path.write_bytes(b"\x00")
    assert main([str(path), "--all", "-o", str(tmp_path / "out")]) == 1
    assert "Unsupported file type" in capsys.readouterr().out


def test_batch_error_exits_1(tmp_path, no_api_key, capsys):
    sermon = _write_sermon(tmp_path)
    assert main([str(sermon), "--critique", "-o", str(tmp_path / "out")]) == 1
    assert "Content generation failed" in capsys.readouterr().out
