"""Stable matching of students to teachers with the Gale-Shapley algorithm."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Iterable

from algolab.matching.pool import Participant, Pool, Role

POOL_SIZE = 10
PROG = "galeshapley"


def _usage(prog: str = PROG) -> str:
    return (
        "Usage:\n"
        "-h\t help\n"
        "-s\t specify student data file\n"
        "-t\t specify teacher data file\n"
        f"Example usage: {prog} -s [StudentData] -t [TeacherData]\n\n"
        "Usage Notes:\n"
        "Both StudentData and TeacherData must be spefied, but their order is irrelevant.\n"
        "Each file should contain 10 entries. Each entry should conist of a name, an ID, \n"
        "and an ordered listing of the IDs of the opposite group listed highest preference\n"
        "to lowest. Entries should contain space delimited elements and be newline terminated.\n"
        "Each entry should list preferences for all 10 members of the opposite group.\n"
        "Valid student IDs are in the range 0-9 and valid teacher IDs are in the range 10-19."
    )


def generate_pool(role: Role, id_seed: int, size: int = POOL_SIZE) -> Pool:
    """Create ``size`` participants numbered from ``id_seed``."""
    return Pool(Participant(role, id_seed + offset) for offset in range(size))


def populate(
    member: Participant, name: str, ident: int, preferences: Iterable[int], opposite: Pool
) -> None:
    """Fill in a participant's name, id and ranking of the opposite pool's ids."""
    member.name = name
    member.ident = ident
    member.preferences = [opposite.by_id(pref) for pref in preferences]


def _leading_ints(text: str) -> list[int]:
    values = []
    for token in text.split():
        try:
            values.append(int(token))
        except ValueError:
            break
    return values


def read_pool_file(path: str | Path, pool: Pool, opposite: Pool) -> None:
    """Populate ``pool`` from lines of "name id pref pref ..."."""
    position = 0
    for raw in Path(path).read_text().splitlines():
        line = raw.rstrip("\r")
        if not line.strip():
            continue
        if position >= len(pool):
            raise ValueError(f"{path} holds more entries than the pool has members")
        parts = line.split(" ", 2)
        if len(parts) < 2:
            raise ValueError(f"malformed entry: {line!r}")
        name, id_text = parts[0], parts[1]
        rest = parts[2] if len(parts) > 2 else ""
        populate(pool[position], name, int(id_text), _leading_ints(rest), opposite)
        position += 1


def try_upgrade(student: Participant, teacher: Participant) -> bool:
    """Move ``teacher`` to ``student`` if the teacher prefers them to the current match."""
    old = teacher.matched
    if old is not None and teacher.preference_of(old) <= teacher.preference_of(student):
        return False
    student.matched = teacher
    teacher.matched = student
    if old is not None:
        old.matched = None
    return True


def run_gale_shapley(teachers: Pool, students: Pool) -> None:
    """Match every student, students proposing in order of preference."""
    while not students.all_matched():
        for student in students:
            if student.is_matched:
                continue
            teacher = student.next_preference()
            if teacher.is_matched:
                try_upgrade(student, teacher)
            else:
                student.matched = teacher
                teacher.matched = student


class _UsageError(Exception):
    pass


class _Parser(argparse.ArgumentParser):
    def error(self, message):
        raise _UsageError(message)


def main(argv=None) -> int:
    args = sys.argv[1:] if argv is None else list(argv)
    parser = _Parser(prog=PROG, add_help=False)
    parser.add_argument("-h", dest="help", action="store_true")
    parser.add_argument("-s", dest="students")
    parser.add_argument("-t", dest="teachers")
    try:
        options = parser.parse_args(args)
    except _UsageError:
        print(_usage())
        return 1
    if options.help:
        print(_usage())
        return 0
    if len(args) != 4 or options.students is None or options.teachers is None:
        print(_usage())
        return 1

    students = generate_pool(Role.STUDENT, 0)
    teachers = generate_pool(Role.TEACHER, 10)
    try:
        read_pool_file(options.students, students, teachers)
        read_pool_file(options.teachers, teachers, students)
        run_gale_shapley(teachers, students)
        print(students.format_matches(), end="")
        stable = students.stable_count()
    except (OSError, ValueError, KeyError, LookupError) as error:
        print(f"Error: {error}", file=sys.stderr)
        return 1
    print("Check results:")
    print(f"{stable} of {len(students)} matches verified as stable.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())