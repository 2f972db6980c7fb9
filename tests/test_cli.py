import pytest

from chimielab.balance import solve_reaction
from chimielab.cli import main
from chimielab.elements import element_details
from chimielab.problems import percent_concentration, solution_volume
from chimielab.quiz import MAX_GRADE, get_quiz


def test_balance_prints_report(capsys):
    rc = main(["balance", "H2 + O2 -> H2O"])
    out = capsys.readouterr().out
    assert rc == 0
    assert out.rstrip("\n") == solve_reaction("H2 + O2 -> H2O").report().rstrip("\n")
    assert "2H2 + O2 = 2H2O" in out


def test_balance_without_arrow_fails(capsys):
    rc = main(["balance", "H2 + O2 = H2O"])
    err = capsys.readouterr().err
    assert rc == 1
    assert "Lipseste '->'" in err


def test_balance_unknown_element_fails(capsys):
    rc = main(["balance", "Xq -> Xq"])
    assert rc == 1
    assert "Element necunoscut" in capsys.readouterr().err


def test_percent_prints_solution(capsys):
    rc = main(["percent", "10", "200"])
    out = capsys.readouterr().out
    assert rc == 0
    assert out == percent_concentration("10", "200").text


def test_percent_rejects_zero_solution(capsys):
    rc = main(["percent", "10", "0"])
    assert rc == 1
    assert "diferite de zero" in capsys.readouterr().err


def test_volume_prints_solution(capsys):
    rc = main(["volume", "0.5", "2"])
    out = capsys.readouterr().out
    assert rc == 0
    assert out == solution_volume("0.5", "2").text


def test_volume_rejects_text(capsys):
    rc = main(["volume", "abc", "2"])
    assert rc == 1
    assert "valori numerice valide" in capsys.readouterr().err


def test_element_known(capsys):
    rc = main(["element", "He"])
    out = capsys.readouterr().out
    assert rc == 0
    assert out.rstrip("\n") == element_details("He")


def test_element_unknown(capsys):
    rc = main(["element", "Zz"])
    assert rc == 1
    assert "Zz" in capsys.readouterr().err


def test_quiz_records_grade_and_catalog_lists_it(tmp_path, capsys):
    db = tmp_path / "results.db"
    quiz = get_quiz("Test1")
    answers = ",".join(str(q.correct + 1) for q in quiz.questions)
    rc = main(["quiz", "Test1", "--user", "ana", "--answers", answers, "--db", str(db)])
    out = capsys.readouterr().out
    assert rc == 0
    assert quiz.title in out
    assert f"Ai obținut nota: {MAX_GRADE}" in out

    rc = main(["catalog", "--user", "ana", "--db", str(db)])
    lines = capsys.readouterr().out.splitlines()
    assert rc == 0
    assert len(lines) == 1
    assert lines[0].endswith(f"ana\tTest1\tnota {MAX_GRADE}")


def test_quiz_wrong_answer_count(tmp_path, capsys):
    rc = main(["quiz", "Test1", "--user", "ana", "--answers", "1,2", "--db", str(tmp_path / "r.db")])
    assert rc == 1
    assert "Eroare" in capsys.readouterr().err


def test_quiz_answer_out_of_range(tmp_path, capsys):
    rc = main(
        ["quiz", "Test1", "--user", "ana", "--answers", "9,1,1,1,1", "--db", str(tmp_path / "r.db")]
    )
    assert rc == 1


def test_quiz_unknown_name_rejected():
    with pytest.raises(SystemExit) as excinfo:
        main(["quiz", "Test9", "--user", "ana"])
    assert excinfo.value.code == 2


def test_quiz_interactive(tmp_path, capsys, monkeypatch):
    quiz = get_quiz("Test2")
    replies = iter(str(q.correct + 1) for q in quiz.questions)
    monkeypatch.setattr("builtins.input", lambda prompt="": next(replies))
    rc = main(["quiz", "Test2", "--user", "ion", "--db", str(tmp_path / "r.db")])
    out = capsys.readouterr().out
    assert rc == 0
    assert quiz.questions[0].text in out
    assert f"Ai obținut nota: {MAX_GRADE}" in out


def test_catalog_empty(tmp_path, capsys):
    rc = main(["catalog", "--db", str(tmp_path / "empty.db")])
    assert rc == 0
    assert capsys.readouterr().out.strip() == "Nu există rezultate."


def test_catalog_filters_by_user(tmp_path, capsys):
    db = str(tmp_path / "r.db")
    main(["quiz", "Test1", "--user", "ana", "--answers", "1,2,3,2,1", "--db", db])
    main(["quiz", "Test2", "--user", "ion", "--answers", "1,1,2,1,1", "--db", db])
    capsys.readouterr()
    main(["catalog", "--db", db])
    all_lines = capsys.readouterr().out.splitlines()
    main(["catalog", "--user", "ion", "--db", db])
    ion_lines = capsys.readouterr().out.splitlines()
    assert len(all_lines) == 2
    assert len(ion_lines) == 1
    assert "\tion\tTest2\t" in ion_lines[0]


def test_missing_command_exits():
    with pytest.raises(SystemExit) as excinfo:
        main([])
    assert excinfo.value.code == 2