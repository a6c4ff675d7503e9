from app.database import SessionLocal, init_db
from app.models.enums import LeaveCategory
from app.models.leave_type import LeaveType
from app.schemas.leave import LeaveTypeCreate
from app.services.leave_type_service import LeaveTypeService

# Days consumed per approved request, by category
DEFAULT_QUOTAS = {
    LeaveCategory.ANNUAL: 5,
    LeaveCategory.SICK: 2,
    LeaveCategory.MATERNITY: 10,
    LeaveCategory.PATERNITY: 5,
    LeaveCategory.UNPAID: 3,
}

def seed():
    init_db()
    db = SessionLocal()
    try:
        service = LeaveTypeService(db)
        for category, quota in DEFAULT_QUOTAS.items():
            existing = db.query(LeaveType).filter(LeaveType.name == category).first()
            if existing:
                print(f"Leave type {category.value} already exists (quota {existing.quota})")
                continue
            leave_type = service.create(LeaveTypeCreate(
                name=category,
                quota=quota,
                carryover_allowed=category == LeaveCategory.ANNUAL,
            ))
            print(f"Created leave type {category.value} with quota {quota}: {leave_type.id}")
    finally:
        db.close()

if __name__ == "__main__":
    seed()
