from ibm_models.cli import main


def write_toy(tmp_path):
    prefix = tmp_path / "toy"
    (tmp_path / "toy.f").write_text("le chat\nle chien\nun chat\n", encoding="utf-8")
    (tmp_path / "toy.e").write_text("the cat\nthe dog\na cat\n", encoding="utf-8")
    return str(prefix)


def test_model_one(tmp_path, capsys):
    prefix = write_toy(tmp_path)
    lexicon = tmp_path / "lexicon.tsv"
    assert main(["-d", prefix, "-m", "one", "--lexicon", str(lexicon)]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 3
    assert lines[0] == "0-0 1-1"
    assert lexicon.read_text(encoding="utf-8").startswith("NULL\t")


def test_model_two_with_saved_warm_start(tmp_path, capsys):
    prefix = write_toy(tmp_path)
    saved = tmp_path / "model1.pkl"
    assert main(["-d", prefix, "-m", "one", "--save-lexicon", str(saved)]) == 0
    assert saved.exists()
    capsys.readouterr()

    gold = tmp_path / "toy.a"
    gold.write_text("0-0 1-1\n0-0 1-1\n0-0 1-1\n", encoding="utf-8")
    assert main(["-d", prefix, "-m", "two", "--warm-start", str(saved), "--gold", str(gold)]) == 0
    captured = capsys.readouterr()
    assert len(captured.out.splitlines()) == 3
    assert "AER = " in captured.err


def test_pmi(tmp_path, capsys):
    prefix = write_toy(tmp_path)
    assert main(["-d", prefix, "-m", "pmi", "-n", "2"]) == 0
    assert capsys.readouterr().out.splitlines() == ["0-0 1-1", "0-0 1-1"]


def test_missing_warm_start(tmp_path):
    prefix = write_toy(tmp_path)
    assert main(["-d", prefix, "--warm-start", str(tmp_path / "nope.pkl")]) == 1


def test_missing_data(tmp_path, capsys):
    assert main(["-d", str(tmp_path / "missing")]) == 1
    assert "ibm-align" in capsys.readouterr().err
