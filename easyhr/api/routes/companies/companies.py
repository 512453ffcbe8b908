from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from easyhr.api.deps import AuthContext, get_auth_context, require_roles
from easyhr.core.errors import CompanyNotFound, Forbidden
from easyhr.db.session import get_db
from easyhr.models.users.user import Role
from easyhr.schemas.base import DataResponse, ListResponse
from easyhr.schemas.companies.company import CompanyOut, CompanyUpdate
from easyhr.services.companies import get_company, list_companies, update_company


router = APIRouter(prefix="/companies")


def _same_tenant_or_admin(ctx: AuthContext, company_pk: int) -> None:
  if ctx.company_id != company_pk and not ctx.is_admin:
    raise Forbidden("Not authorized to access this company")


@router.get("", response_model=ListResponse[CompanyOut])
@router.get("/", response_model=ListResponse[CompanyOut], include_in_schema=False)
def list_(ctx: AuthContext = Depends(require_roles(Role.ADMIN)), db: Session = Depends(get_db)):
  companies = [CompanyOut.model_validate(c) for c in list_companies(db)]
  return ListResponse[CompanyOut](count=len(companies), data=companies)


@router.get("/{company_id}", response_model=DataResponse[CompanyOut])
def get(company_id: int, ctx: AuthContext = Depends(get_auth_context), db: Session = Depends(get_db)):
  company = get_company(db, company_id)
  if not company:
    raise CompanyNotFound()
  _same_tenant_or_admin(ctx, company.id)
  return DataResponse[CompanyOut](data=CompanyOut.model_validate(company))


@router.put("/{company_id}", response_model=DataResponse[CompanyOut])
def update(
  company_id: int,
  payload: CompanyUpdate,
  ctx: AuthContext = Depends(get_auth_context),
  db: Session = Depends(get_db),
):
  company = get_company(db, company_id)
  if not company:
    raise CompanyNotFound()
  _same_tenant_or_admin(ctx, company.id)
  company = update_company(db, company_id, payload)
  return DataResponse[CompanyOut](data=CompanyOut.model_validate(company))
