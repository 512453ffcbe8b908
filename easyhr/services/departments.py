from sqlalchemy.orm import Session
from sqlalchemy import select
from easyhr.models.departments.department import Department
from easyhr.schemas.departments.department import DepartmentCreate, DepartmentUpdate


def list_departments(db: Session, company_pk: int) -> list[Department]:
  return list(db.scalars(
    select(Department).where(Department.company_id == company_pk).order_by(Department.id)
  ))


def get_department(db: Session, department_id: int) -> Department | None:
  return db.get(Department, department_id)


def create_department(db: Session, company_pk: int, payload: DepartmentCreate) -> Department:
  department = Department(
    name=payload.name,
    email=str(payload.email) if payload.email else None,
    lead=payload.lead,
    company_id=company_pk,
  )
  db.add(department)
  db.commit()
  db.refresh(department)
  return department


def update_department(db: Session, department: Department, payload: DepartmentUpdate) -> Department:
  for field, value in payload.model_dump(exclude_unset=True).items():
    if field == "name" and value is None:
      continue
    setattr(department, field, str(value) if field == "email" and value else value)
  db.commit()
  db.refresh(department)
  return department


def delete_department(db: Session, department: Department) -> None:
  db.delete(department)
  db.commit()
