from __future__ import annotations


def test_class_filter_returns_only_that_level_ordered_by_name(container, make_teacher):
    teacher_id = make_teacher()
    for name, level in [("Zahra", 8), ("Bayu", 8), ("Andi", 7), ("Maya", 8), ("Cici", 9)]:
        container.student_service.add_student(teacher_id, name=name, class_level=level)

    roster = container.student_service.list_roster(teacher_id, class_level=8)

    assert [s.name for s in roster] == ["Bayu", "Maya", "Zahra"]
    assert {s.class_level for s in roster} == {8}


def test_roster_is_scoped_to_owning_teacher(container, make_teacher):
    mine = make_teacher("guru1")
    other = make_teacher("guru2", name="Pak Budi")
    container.student_service.add_student(mine, name="Andi", class_level=7)
    container.student_service.add_student(other, name="Budi", class_level=7)

    assert [s.name for s in container.student_service.list_roster(mine)] == ["Andi"]


def test_active_only_hides_deactivated_students(container, make_teacher):
    teacher_id = make_teacher()
    keep = container.student_service.add_student(teacher_id, name="Andi", class_level=7)
    gone = container.student_service.add_student(teacher_id, name="Budi", class_level=7)

    assert container.student_service.toggle_active(teacher_id, gone) is False

    active = container.student_service.list_roster(teacher_id, active_only=True)
    assert [s.student_id for s in active] == [keep]
    assert len(container.student_service.list_roster(teacher_id)) == 2
