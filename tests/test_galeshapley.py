import pytest

from algolab.matching.galeshapley import (
    generate_pool,
    main,
    populate,
    read_pool_file,
    run_gale_shapley,
    try_upgrade,
)
from algolab.matching.pool import Role


def _write_rotating(path, prefix, own_seed, other_seed, size):
    lines = []
    for i in range(size):
        prefs = " ".join(str(other_seed + (i + k) % size) for k in range(size))
        lines.append(f"{prefix}{i} {own_seed + i} {prefs}")
    path.write_text("\n".join(lines) + "\n")


def test_generate_pool_assigns_sequential_ids():
    pool = generate_pool(Role.TEACHER, 10, 3)
    assert [member.ident for member in pool] == [10, 11, 12]
    assert all(member.role is Role.TEACHER for member in pool)


def test_populate_links_preferences():
    teachers = generate_pool(Role.TEACHER, 10, 2)
    students = generate_pool(Role.STUDENT, 0, 1)
    populate(students[0], "Ann", 0, [11, 10], teachers)
    assert students[0].name == "Ann"
    assert students[0].preferences == [teachers[1], teachers[0]]
    with pytest.raises(KeyError):
        populate(students[0], "Ann", 0, [42], teachers)


def test_read_pool_file(tmp_path):
    teachers = generate_pool(Role.TEACHER, 10, 2)
    students = generate_pool(Role.STUDENT, 0, 2)
    data = tmp_path / "students.txt"
    data.write_text("Ann 0 11 10\r\nBob 1 10 11\r\n")
    read_pool_file(data, students, teachers)
    assert [s.name for s in students] == ["Ann", "Bob"]
    assert students[0].preferences[0] is teachers[1]
    assert students[1].preferences[0] is teachers[0]


def test_read_pool_file_too_many_entries(tmp_path):
    teachers = generate_pool(Role.TEACHER, 10, 1)
    students = generate_pool(Role.STUDENT, 0, 1)
    data = tmp_path / "students.txt"
    data.write_text("Ann 0 10\nBob 1 10\n")
    with pytest.raises(ValueError):
        read_pool_file(data, students, teachers)


def test_try_upgrade():
    teachers = generate_pool(Role.TEACHER, 10, 1)
    students = generate_pool(Role.STUDENT, 0, 2)
    teacher = teachers[0]
    teacher.preferences = [students[1], students[0]]
    students[0].matched = teacher
    teacher.matched = students[0]
    assert try_upgrade(students[1], teacher)
    assert teacher.matched is students[1]
    assert students[0].matched is None
    assert not try_upgrade(students[0], teacher)
    assert teacher.matched is students[1]


def test_identical_preferences_pair_in_order(tmp_path):
    size = 3
    students = generate_pool(Role.STUDENT, 0, size)
    teachers = generate_pool(Role.TEACHER, 10, size)
    (tmp_path / "s.txt").write_text("".join(f"S{i} {i} 10 11 12\n" for i in range(size)))
    (tmp_path / "t.txt").write_text("".join(f"T{i} {10 + i} 0 1 2\n" for i in range(size)))
    read_pool_file(tmp_path / "s.txt", students, teachers)
    read_pool_file(tmp_path / "t.txt", teachers, students)
    run_gale_shapley(teachers, students)
    assert [s.matched.ident for s in students] == [10, 11, 12]


def test_result_is_stable_and_reciprocal(tmp_path):
    size = 5
    students = generate_pool(Role.STUDENT, 0, size)
    teachers = generate_pool(Role.TEACHER, 10, size)
    _write_rotating(tmp_path / "s.txt", "S", 0, 10, size)
    _write_rotating(tmp_path / "t.txt", "T", 10, 0, size)
    read_pool_file(tmp_path / "s.txt", students, teachers)
    read_pool_file(tmp_path / "t.txt", teachers, students)
    run_gale_shapley(teachers, students)
    assert students.all_matched() and teachers.all_matched()
    assert all(s.matched.matched is s for s in students)
    assert students.stable_count() == size
    assert len({id(s.matched) for s in students}) == size


def test_main_reports_all_stable(tmp_path, capsys):
    _write_rotating(tmp_path / "s.txt", "S", 0, 10, 10)
    _write_rotating(tmp_path / "t.txt", "T", 10, 0, 10)
    code = main(["-s", str(tmp_path / "s.txt"), "-t", str(tmp_path / "t.txt")])
    out = capsys.readouterr().out
    assert code == 0
    assert "10 of 10 matches verified as stable." in out
    assert "\tMatches:" in out


def test_main_usage_errors(capsys):
    assert main(["-s", "only"]) == 1
    assert "Usage:" in capsys.readouterr().out
    assert main(["-h"]) == 0
    assert "Usage:" in capsys.readouterr().out