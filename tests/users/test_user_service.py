from __future__ import annotations

import pytest

from attendance_tracker.core.enums import Role, UserType
from attendance_tracker.core.exceptions import ValidationError
from attendance_tracker.users.model import User


def test_default_roster_until_first_write(store):
    users = store.get_users()

    assert [u.id for u in users] == ["1", "2", "3", "4", "5", "6"]
    assert users[0].name == "John Smith"
    assert users[0].role == Role.ADMIN
    assert users[3].type == UserType.STUDENT


def test_add_user_ignores_duplicate_id(store):
    assert store.add_user(User(id="7", name="Nina Park", type=UserType.EMPLOYEE, department="Finance")) is True
    assert store.add_user(User(id="7", name="Someone Else", type=UserType.STUDENT, department="HR")) is False

    added = store.get_user("7")
    assert added.name == "Nina Park"
    assert len(store.get_users()) == 7


def test_create_user_validates_and_assigns_id(store):
    user = store.create_user(name="  Omar Diaz ", user_type="Student", department="Business", email=" ")

    assert user.id == "id1"
    assert user.name == "Omar Diaz"
    assert user.type == UserType.STUDENT
    assert user.role == Role.USER
    assert user.email is None
    assert store.get_user("id1") == user


@pytest.mark.parametrize(
    "fields, message",
    [
        ({"name": "", "user_type": "employee", "department": "HR"}, "Name is required"),
        ({"name": "A", "user_type": "robot", "department": "HR"}, "Type must be one of"),
        ({"name": "A", "user_type": "employee", "department": " "}, "Department is required"),
        ({"name": "A", "user_type": "employee", "department": "HR", "role": "owner"}, "Role must be one of"),
    ],
)
def test_create_user_rejects_bad_input_without_writing(store, storage, fields, message):
    with pytest.raises(ValidationError, match=message):
        store.create_user(**fields)

    assert storage.get("attendance_users") is None


def test_bulk_import_skips_invalid_lines(store):
    text = "\n".join(
        [
            "Ana Lima,employee,Sales,manager",
            "broken line",
            "",
            "Ben Cho,student,Computer Science",
            "Cara Ng,alien,HR",
        ]
    )

    created = store.bulk_import(text)

    assert [u.name for u in created] == ["Ana Lima", "Ben Cho"]
    assert created[0].role == Role.MANAGER
    assert created[1].role == Role.USER
    assert len(store.get_users()) == 8


def test_delete_user_keeps_their_records(store, fixed_now):
    store.check_in(store.get_user("2"), now=fixed_now)

    assert store.delete_user("2") is True
    assert store.delete_user("2") is False
    assert store.get_user("2") is None
    assert [r.user_id for r in store.get_records()] == ["2"]
    assert [a.user_id for a in store.get_alerts()] == ["2"]


def test_clear_all_restores_default_roster(store, fixed_now):
    store.create_user(name="Temp", user_type="employee", department="HR")
    store.delete_user("1")
    store.check_in(store.get_user("3"), now=fixed_now)

    store.clear_all()

    assert [u.id for u in store.get_users()] == ["1", "2", "3", "4", "5", "6"]
    assert store.get_records() == []
    assert store.get_alerts() == []


def test_departments_are_sorted_and_distinct(store):
    assert store.users.departments() == [
        "Business",
        "Computer Science",
        "Engineering",
        "HR",
        "Marketing",
        "Sales",
    ]


def test_user_round_trips_through_dict():
    user = User(id="9", name="Zoe", type=UserType.STUDENT, department="Business", phone="555-0101")

    data = user.to_dict()

    assert data == {
        "id": "9",
        "name": "Zoe",
        "type": "student",
        "department": "Business",
        "role": "user",
        "phone": "555-0101",
    }
    assert User.from_dict(data) == user
