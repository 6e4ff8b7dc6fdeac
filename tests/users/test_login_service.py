import pytest

from src.smart_qr_check.smart_qr_check.core.enums import Role
from src.smart_qr_check.smart_qr_check.core.exceptions import ValidationError
from src.smart_qr_check.smart_qr_check.users.service import LoginService


def test_any_name_and_role_accepted():
    user = LoginService().login("Jane Smith", "Teacher")

    assert user.role == Role.TEACHER
    assert user.roll_no is None


def test_student_gets_default_roll_no():
    assert LoginService().login("John Doe", "student").roll_no == "CS2024001"
    assert LoginService().login("Amy", "student", roll_no="CS2024010").roll_no == "CS2024010"


def test_unknown_role_or_empty_name():
    with pytest.raises(ValidationError):
        LoginService().login("John", "principal")
    with pytest.raises(ValidationError):
        LoginService().login("", "student")
