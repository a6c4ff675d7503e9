import pytest
import os
from datetime import date
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

# Set env before importing app components
os.environ["APP_ENV"] = "testing"
os.environ["DATABASE_URL"] = "sqlite:///:memory:"
os.environ["RATE_LIMIT_ENABLED"] = "false"

from app.database import Base, get_db, enable_sqlite_foreign_keys
from app.main import app
from app.models.enums import LeaveCategory
from app.schemas.employee import EmployeeCreate
from app.schemas.leave import LeaveRequestCreate, LeaveTypeCreate
from app.services.employee_service import EmployeeService
from app.services.leave_request_service import LeaveRequestService
from app.services.leave_type_service import LeaveTypeService
from fastapi.testclient import TestClient

# SQLite in-memory database configuration
SQLALCHEMY_DATABASE_URL = "sqlite://"

@pytest.fixture(scope="function")
def db_session():
    """A fresh in-memory database per test, so service commits and rollbacks stay isolated."""
    engine = create_engine(
        SQLALCHEMY_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    enable_sqlite_foreign_keys(engine)
    Base.metadata.create_all(bind=engine)
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = TestingSessionLocal()

    yield session

    session.close()
    Base.metadata.drop_all(bind=engine)
    engine.dispose()

@pytest.fixture(scope="function")
def client(db_session):
    """Get a TestClient that uses the test database session via dependency override."""
    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()

@pytest.fixture(scope="function")
def employee(db_session):
    """A registered employee with default balances."""
    return EmployeeService(db_session).create(
        EmployeeCreate(name="Jane Doe", email="jane@example.com", phone_number="+14155552671")
    )

@pytest.fixture(scope="function")
def annual_leave(db_session):
    """Annual leave type consuming 5 days per request."""
    return LeaveTypeService(db_session).create(
        LeaveTypeCreate(name=LeaveCategory.ANNUAL, quota=5, carryover_allowed=True)
    )

@pytest.fixture(scope="function")
def make_request(db_session):
    """Helper fixture to submit leave requests through the service."""
    def _make_request(employee, leave_type, start: date, end: date, reason: str = "Family trip"):
        return LeaveRequestService(db_session).create(LeaveRequestCreate(
            employee_id=employee.id,
            leave_type_id=leave_type.id,
            start_date=start,
            end_date=end,
            reason=reason,
        ))
    return _make_request
