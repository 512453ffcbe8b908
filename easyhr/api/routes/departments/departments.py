from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from easyhr.api.deps import AuthContext, get_auth_context
from easyhr.core.errors import DepartmentNotFound, Forbidden
from easyhr.db.session import get_db
from easyhr.models.departments.department import Department
from easyhr.schemas.base import DataResponse, EmptyDataResponse, ListResponse
from easyhr.schemas.departments.department import DepartmentCreate, DepartmentOut, DepartmentUpdate
from easyhr.services.departments import (
  create_department,
  delete_department,
  get_department,
  list_departments,
  update_department,
)


router = APIRouter(prefix="/departments")


def _owned_department(db: Session, department_id: int, ctx: AuthContext) -> Department:
  department = get_department(db, department_id)
  if not department:
    raise DepartmentNotFound()
  if department.company_id != ctx.company_id:
    raise Forbidden("Not authorized to modify this department")
  return department


@router.get("", response_model=ListResponse[DepartmentOut])
@router.get("/", response_model=ListResponse[DepartmentOut], include_in_schema=False)
def list_(ctx: AuthContext = Depends(get_auth_context), db: Session = Depends(get_db)):
  departments = [DepartmentOut.model_validate(d) for d in list_departments(db, ctx.company_id)]
  return ListResponse[DepartmentOut](count=len(departments), data=departments)


@router.post("", response_model=DataResponse[DepartmentOut], status_code=status.HTTP_201_CREATED)
@router.post("/", response_model=DataResponse[DepartmentOut], status_code=status.HTTP_201_CREATED, include_in_schema=False)
def create(payload: DepartmentCreate, ctx: AuthContext = Depends(get_auth_context), db: Session = Depends(get_db)):
  department = create_department(db, ctx.company_id, payload)
  return DataResponse[DepartmentOut](data=DepartmentOut.model_validate(department))


@router.put("/{department_id}", response_model=DataResponse[DepartmentOut])
def update(
  department_id: int,
  payload: DepartmentUpdate,
  ctx: AuthContext = Depends(get_auth_context),
  db: Session = Depends(get_db),
):
  department = _owned_department(db, department_id, ctx)
  department = update_department(db, department, payload)
  return DataResponse[DepartmentOut](data=DepartmentOut.model_validate(department))


@router.delete("/{department_id}", response_model=EmptyDataResponse)
def delete(department_id: int, ctx: AuthContext = Depends(get_auth_context), db: Session = Depends(get_db)):
  department = _owned_department(db, department_id, ctx)
  delete_department(db, department)
  return EmptyDataResponse()
