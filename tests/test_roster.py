import io

import pytest

from coursekit.roster import Roster, format_table, load_students, main
from coursekit.student import Student

RECORDS = (
    "7844\nAardvark, Anthony A\nSpringfield, Ohio\nn/a M 2 40 2.79 ENGR\n"
    "3930\nLeibniz, Gottfried W\nLeipzig, Saxony\nn/a M 4 120 1.95 MATH\n"
    "30655\nAngelo, Mike L\nFlorence, Tuscany\nn/a M 3 90 3.74 ART\n"
)

NEW_STUDENT = "Pitt, Stew\nAnytown, Iowa\nn/a\nM\n1\n10\n0.21\nGNED\n"


def _students():
    return [
        Student(id=7844, name="Aardvark, Anthony A", major="ENGR", gpa=2.79),
        Student(id=3930, name="Leibniz, Gottfried W", major="MATH", gpa=1.95),
        Student(id=30655, name="Angelo, Mike L", major="ART", gpa=3.74),
    ]


def _run(commands, students=None):
    out, err = io.StringIO(), io.StringIO()
    roster = Roster(
        _students() if students is None else students, io.StringIO(commands), out, err
    )
    roster.run()
    return roster, out.getvalue(), err.getvalue()


def _ids(roster):
    return [student.id for student in roster.students]


def test_format_table_title_alignment():
    text = format_table("STUDENT LIST", 32, [])
    lines = text.split("\n")
    assert lines[2] == " " * 19 + "STUDENT LIST"
    assert lines[3] == "=" * 50
    assert lines[4].startswith("ID         NAME")
    assert text.endswith("=" * 50 + "\n\n")


def test_format_table_contains_rows_in_order():
    students = _students()
    text = format_table("STUDENT LIST", 32, students)
    rows = [student.row() for student in students]
    positions = [text.index(row) for row in rows]
    assert positions == sorted(positions)


def test_roster_keeps_students_sorted():
    roster, _, _ = _run("q\n")
    assert _ids(roster) == sorted(_ids(roster))
    assert len(roster.students) == 3


def test_count():
    _, out, _ = _run("c\nq\n")
    assert "Number of students: 3\n" in out


def test_display_and_reverse_display():
    _, out, _ = _run("d\nv\nq\n")
    forward = out.index("STUDENT LIST\n")
    reverse = out.index("REVERSE STUDENT LIST\n")
    forward_part = out[forward:reverse]
    reverse_part = out[reverse:]
    assert forward_part.index("3930") < forward_part.index("30655")
    assert reverse_part.index("30655") < reverse_part.index("3930")


def test_add_student_inserts_in_order():
    roster, out, _ = _run("a\n5000\n" + NEW_STUDENT + "q\n")
    assert _ids(roster) == [3930, 5000, 7844, 30655]
    assert "STUDENT ADDED" in out
    added = roster.students.retrieve(5000)
    assert added.name == "Pitt, Stew"
    assert added.major == "GNED"
    assert added.credits == 10


def test_insert_front_and_rear():
    roster, _, _ = _run("i\n99999\n" + NEW_STUDENT + "b\n1\n" + NEW_STUDENT + "q\n")
    ids = _ids(roster)
    assert ids[0] == 99999
    assert ids[-1] == 1


def test_insert_after_and_before():
    roster, _, _ = _run(
        "o\n3930\n11\n" + NEW_STUDENT + "u\n30655\n22\n" + NEW_STUDENT + "q\n"
    )
    assert _ids(roster) == [3930, 11, 7844, 22, 30655]


def test_insert_after_missing_anchor_reports():
    roster, _, err = _run("o\n1234\n11\n" + NEW_STUDENT + "q\n")
    assert "Student not found" in err
    assert 11 not in _ids(roster)


def test_find_student():
    _, out, err = _run("f\n7844\nf\n1\nq\n")
    assert "STUDENT FOUND" in out
    assert "Aardvark, Anthony A" in out
    assert "Student not found" in err


def test_remove_student():
    roster, out, err = _run("r\n7844\nr\n7844\nq\n")
    assert _ids(roster) == [3930, 30655]
    assert "STUDENT REMOVED" in out
    assert "Student not found" in err


def test_remove_front_and_rear():
    roster, _, _ = _run("e\nz\nq\n")
    assert _ids(roster) == [7844]


def test_remove_from_empty_list():
    roster, _, err = _run("e\nz\nq\n", students=[])
    assert err.count("List is empty") == 2
    assert roster.students.is_empty()


def test_invalid_choice_is_reported():
    _, out, err = _run("x\nc\nq\n")
    assert "Invalid choice" in err
    assert "Number of students: 3" in out


def test_invalid_number_is_reported():
    roster, _, err = _run("a\nabc\nc\nq\n")
    assert "Invalid input" in err
    assert len(roster.students) == 3


def test_end_of_input_stops_run():
    roster, out, _ = _run("c\n")
    assert out.count("Enter your choice: ") == 2
    assert len(roster.students) == 3


def test_load_students(tmp_path):
    path = tmp_path / "studentFile.txt"
    path.write_text(RECORDS, encoding="utf-8")
    students = load_students(str(path))
    assert [student.id for student in students] == [7844, 3930, 30655]
    assert students[1].name == "Leibniz, Gottfried W"


def test_load_students_missing_file(tmp_path):
    with pytest.raises(OSError):
        load_students(str(tmp_path / "absent.txt"))


def test_main_with_file(tmp_path, monkeypatch, capsys):
    path = tmp_path / "studentFile.txt"
    path.write_text(RECORDS, encoding="utf-8")
    monkeypatch.setattr("sys.stdin", io.StringIO("c\nq\n"))
    assert main([str(path)]) == 0
    assert "Number of students: 3" in capsys.readouterr().out


def test_main_missing_file(tmp_path, monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("c\nq\n"))
    assert main([str(tmp_path / "absent.txt")]) == 0
    captured = capsys.readouterr()
    assert "Error opening file" in captured.err
    assert "Number of students: 0" in captured.out