import logging
from sqlalchemy.orm import Session
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from easyhr.core.errors import DuplicateCompany
from easyhr.models.companies.company import Company
from easyhr.schemas.companies.company import CompanyDescriptor, CompanyUpdate

logger = logging.getLogger(__name__)


def list_companies(db: Session) -> list[Company]:
  return list(db.scalars(select(Company).order_by(Company.created_at.desc(), Company.id.desc())))


def get_company(db: Session, company_pk: int) -> Company | None:
  return db.get(Company, company_pk)


def get_company_by_company_id(db: Session, company_id: str) -> Company | None:
  return db.scalar(select(Company).where(Company.company_id == company_id))


def create_company(db: Session, *, name: str, company_id: str, employees_count: str) -> Company:
  company = Company(name=name, company_id=company_id, employees_count=employees_count)
  db.add(company)
  try:
    db.commit()
  except IntegrityError:
    db.rollback()
    raise DuplicateCompany()
  db.refresh(company)
  logger.info("Created company %s (%s)", company.id, company.company_id)
  return company


def get_or_create_company(db: Session, descriptor: CompanyDescriptor, default_name: str) -> tuple[Company, bool]:
  """Look a company up by its external id, creating it on first sight.

  Never updates an existing company. When a concurrent registration wins
  the insert, the unique constraint fails ours and we reuse theirs.
  """
  company = get_company_by_company_id(db, descriptor.company_id)
  if company:
    return company, False

  try:
    company = create_company(
      db,
      name=descriptor.name or default_name,
      company_id=descriptor.company_id,
      employees_count=descriptor.employees_count.value,
    )
    return company, True
  except DuplicateCompany:
    existing = get_company_by_company_id(db, descriptor.company_id)
    if existing:
      logger.info("Company %s created concurrently; reusing it", descriptor.company_id)
      return existing, False
    raise


def update_company(db: Session, company_pk: int, payload: CompanyUpdate) -> Company | None:
  company = db.get(Company, company_pk)
  if not company:
    return None
  for field, value in payload.model_dump(exclude_unset=True).items():
    if value is None:
      continue
    setattr(company, field, value.value if hasattr(value, "value") else value)
  try:
    db.commit()
  except IntegrityError:
    db.rollback()
    raise DuplicateCompany()
  db.refresh(company)
  return company
