"""
Consultation requests: created by visitors from the contact and program
pages, moved between statuses by admins.

Status changes are single-step overwrites. Any status can be set from any
other; there is no transition table.
"""
from typing import Optional
import logging

from sqlalchemy.orm import Session

from app.models import Application, ApplicationStatus, Program
from app.schemas.applications import ContactRequest, ProgramApplicationRequest
from app.services.crud_service import CrudService
from app.services.resources import APPLICATIONS

logger = logging.getLogger(__name__)


class ApplicationService:
    def __init__(self, db: Session):
        self.db = db
        self.crud = CrudService(db, APPLICATIONS)

    def submit_contact(self, form: ContactRequest) -> Application:
        application = self.crud.create({
            "full_name": form.full_name,
            "email": form.email,
            "phone": form.phone,
            "message": form.message,
            "status": ApplicationStatus.PENDING.value,
        })
        logger.info(f"Contact request received from {form.email}")
        return application

    def submit_for_program(self, program: Program, form: ProgramApplicationRequest) -> Application:
        application = self.crud.create({
            "full_name": form.full_name,
            "email": form.email,
            "phone": form.phone,
            "nationality": form.nationality,
            "education_level": form.education_level,
            "message": compose_program_message(program, form),
            "program_id": program.id,
            "status": ApplicationStatus.PENDING.value,
        })
        logger.info(f"Program application received for {program.id} from {form.email}")
        return application

    def list(self, status: Optional[ApplicationStatus] = None, limit: Optional[int] = None):
        criteria = [Application.status == status.value] if status else []
        return self.crud.list(*criteria, order_by=APPLICATIONS.admin_order, limit=limit)

    def set_status(self, application_id: str, status: ApplicationStatus) -> Application:
        application = self.crud.update(application_id, {"status": status.value})
        logger.info(f"Application {application_id} status set to {status.value}")
        return application

    def delete(self, application_id: str) -> None:
        self.crud.delete(application_id)


def compose_program_message(program: Program, form: ProgramApplicationRequest) -> str:
    return (
        f"طلب استشارة للبرنامج: {program.name_ar}\n\n"
        f"المستوى التعليمي: {form.education_level or ''}\n"
        f"الجنسية: {form.nationality or ''}\n\n"
        f"الرسالة: {form.message or ''}"
    )
