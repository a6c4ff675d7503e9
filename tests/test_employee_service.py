import pytest
from datetime import date

from app.core.exceptions import BusinessRuleError, InvalidPayloadError, NotFoundError
from app.models.enums import LeaveStatus
from app.schemas.employee import EmployeeCreate
from app.services.employee_service import EmployeeService
from app.services.leave_request_service import LeaveRequestService


def _payload(**overrides):
    data = {"name": "John Smith", "email": "john@example.com", "phone_number": "+447911123456"}
    data.update(overrides)
    return EmployeeCreate(**data)


def test_new_employee_has_default_balances(db_session):
    employee = EmployeeService(db_session).create(_payload())
    assert employee.id
    assert employee.created_at is not None
    assert employee.leave_balances == {
        "Annual": 20, "Sick": 20, "Maternity": 20, "Paternity": 20, "Unpaid": 20,
    }


@pytest.mark.parametrize("field", ["name", "email", "phone_number"])
def test_empty_field_is_rejected(db_session, field):
    with pytest.raises(InvalidPayloadError):
        EmployeeService(db_session).create(_payload(**{field: ""}))


@pytest.mark.parametrize("email", [
    "plainaddress",
    "a@b",
    "a b@example.com",
    "@example.com",
    "jo@@example.com",
    "a@b.co\n",
    "\na@b.co",
    "a\u00a0b@example.com",
])
def test_invalid_email_is_rejected(db_session, email):
    with pytest.raises(InvalidPayloadError, match="email"):
        EmployeeService(db_session).create(_payload(email=email))


@pytest.mark.parametrize("phone", [
    "0123456",
    "+0123",
    "1",
    "phone",
    "+1234567890123456",
    "555-1234",
    "+14155552671\n",
    "+1\u0663\u0664\u0665",
    "\u0661\u0662\u0663\u0664",
])
def test_invalid_phone_is_rejected(db_session, phone):
    with pytest.raises(InvalidPayloadError, match="phone"):
        EmployeeService(db_session).create(_payload(phone_number=phone))


def test_duplicate_email_is_rejected(db_session):
    service = EmployeeService(db_session)
    service.create(_payload())
    with pytest.raises(InvalidPayloadError, match="already exists"):
        service.create(_payload(name="Other John", phone_number="15551234567"))
    assert len(service.list()) == 1


def test_duplicate_email_is_checked_before_phone(db_session):
    service = EmployeeService(db_session)
    service.create(_payload())
    with pytest.raises(InvalidPayloadError, match="already exists"):
        service.create(_payload(phone_number="bad"))


def test_list_employees_empty_is_not_found(db_session):
    with pytest.raises(NotFoundError):
        EmployeeService(db_session).list()


def test_get_missing_employee(db_session):
    with pytest.raises(NotFoundError):
        EmployeeService(db_session).get("does-not-exist")


def test_delete_missing_employee(db_session):
    with pytest.raises(NotFoundError):
        EmployeeService(db_session).delete("does-not-exist")


def test_delete_blocked_by_pending_request(db_session, employee, annual_leave, make_request):
    make_request(employee, annual_leave, date(2026, 3, 1), date(2026, 3, 3))

    with pytest.raises(BusinessRuleError, match="pending"):
        EmployeeService(db_session).delete(employee.id)

    assert EmployeeService(db_session).get(employee.id).email == "jane@example.com"
    assert len(LeaveRequestService(db_session).list_for_employee(employee.id)) == 1


def test_delete_cascades_to_non_pending_requests(db_session, employee, annual_leave, make_request):
    leave_request = make_request(employee, annual_leave, date(2026, 3, 1), date(2026, 3, 3))
    LeaveRequestService(db_session).approve(leave_request.id)
    employee_id = employee.id

    message = EmployeeService(db_session).delete(employee_id)

    assert "deleted" in message
    with pytest.raises(NotFoundError):
        EmployeeService(db_session).get(employee_id)
    with pytest.raises(NotFoundError):
        LeaveRequestService(db_session).list_for_employee(employee_id)


def test_delete_employee_without_requests(db_session, employee):
    EmployeeService(db_session).delete(employee.id)
    with pytest.raises(NotFoundError):
        EmployeeService(db_session).list()


def test_delete_keeps_other_employees_requests(db_session, employee, annual_leave, make_request):
    other = EmployeeService(db_session).create(_payload())
    kept = make_request(other, annual_leave, date(2026, 3, 1), date(2026, 3, 3))

    EmployeeService(db_session).delete(employee.id)

    remaining = LeaveRequestService(db_session).list()
    assert [r.id for r in remaining] == [kept.id]
    assert remaining[0].status == LeaveStatus.PENDING


def test_duplicate_email_with_trailing_newline_is_rejected(db_session):
    service = EmployeeService(db_session)
    service.create(_payload())
    with pytest.raises(InvalidPayloadError):
        service.create(_payload(email="john@example.com\n", phone_number="15551234567"))
    assert [e.email for e in service.list()] == ["john@example.com"]
