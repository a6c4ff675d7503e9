import pytest
from datetime import date

from sqlalchemy import text, update

from app.core.exceptions import NotFoundError
from app.models.leave_request import LeaveRequest
from app.services.leave_request_service import LeaveRequestService
from app.services.report_service import LeaveReportService


def test_report_lists_each_request(db_session, employee, annual_leave, make_request):
    first = make_request(employee, annual_leave, date(2026, 1, 1), date(2026, 1, 3), reason="Wedding")
    second = make_request(employee, annual_leave, date(2026, 4, 1), date(2026, 4, 2), reason="Move")
    LeaveRequestService(db_session).approve(first.id)

    report = LeaveReportService(db_session).generate(employee.id)

    assert report.startswith(f"Leave report for Jane Doe (Employee ID: {employee.id})\n\n")
    assert f"Leave Request ID: {first.id}\n" in report
    assert f"Leave Request ID: {second.id}\n" in report
    assert "Leave Type: Annual\nQuota: 5\nRemaining Leaves: 15\n" in report
    assert "Start Date: 2026-01-01\nEnd Date: 2026-01-03\nStatus: Approved\nReason: Wedding\n\n" in report
    assert "Status: Pending\nReason: Move\n\n" in report


def test_report_follows_store_order(db_session, employee, annual_leave, make_request):
    ids = [
        make_request(employee, annual_leave, date(2026, m, 1), date(2026, m, 2)).id
        for m in (1, 2, 3)
    ]
    report = LeaveReportService(db_session).generate(employee.id)
    positions = [report.index(i) for i in sorted(ids)]
    assert positions == sorted(positions)


def test_report_without_requests_is_not_found(db_session, employee):
    with pytest.raises(NotFoundError, match="No leave requests"):
        LeaveReportService(db_session).generate(employee.id)


def test_report_for_unknown_employee_is_not_found(db_session):
    with pytest.raises(NotFoundError):
        LeaveReportService(db_session).generate("nobody")


def test_report_names_request_with_missing_leave_type(db_session, employee, annual_leave, make_request):
    leave_request = make_request(employee, annual_leave, date(2026, 1, 1), date(2026, 1, 3))
    request_id = leave_request.id
    # Point the request at a leave type that does not exist
    db_session.execute(text("PRAGMA foreign_keys=OFF"))
    db_session.execute(update(LeaveRequest).values(leave_type_id="gone"))
    db_session.commit()
    db_session.expire_all()

    with pytest.raises(NotFoundError, match=request_id):
        LeaveReportService(db_session).generate(employee.id)
