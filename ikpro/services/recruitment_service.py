# -*- coding: utf-8 -*-

from __future__ import annotations

from typing import List, Optional

from ..utils import is_valid_email, parse_number_strict
from .base import (
    BaseService,
    clean_text,
    optional_number,
    require_choice,
    require_text,
    rows_to_dicts,
)

EMPLOYMENT_TYPES = ("full-time", "part-time", "contract", "intern")
JOB_STATUSES = ("draft", "active", "paused", "closed")
APPLICATION_STATUSES = ("submitted", "screening", "interview", "offer", "hired", "rejected")
TERMINAL_APPLICATION_STATUSES = ("hired", "rejected")
INTERVIEW_STATUSES = ("scheduled", "completed", "cancelled")

_JOB_FIELDS = (
    "title", "department_id", "description", "requirements", "location",
    "employment_type", "salary_min", "salary_max", "status",
)
_INTERVIEW_FIELDS = ("interviewer_id", "scheduled_at", "interview_type", "status", "feedback", "rating")


class RecruitmentService(BaseService):
    logger_name = "ikpro.recruitment"

    # -----------------
    # İlanlar
    # -----------------
    def list_jobs(self, company_id: Optional[int] = None, status: Optional[str] = None) -> List[dict]:
        return rows_to_dicts(self.db.jobs.list(company_id, status))

    def list_active_jobs(self, company_id: Optional[int] = None) -> List[dict]:
        return self.list_jobs(company_id, "active")

    def get_job(self, job_id: int) -> dict:
        return self._found(self.db.jobs.get(job_id), "İş ilanı bulunamadı.")

    def _validate_job(self, company_id: int, data: dict) -> dict:
        salary_min = optional_number(data.get("salary_min"), "Geçersiz minimum maaş.", minimum=0)
        salary_max = optional_number(data.get("salary_max"), "Geçersiz maksimum maaş.", minimum=0)
        if salary_min is not None and salary_max is not None and salary_min > salary_max:
            raise ValueError("Minimum maaş maksimum maaştan büyük olamaz.")
        department_id = data.get("department_id")
        if department_id is not None:
            dept = self.db.departments.get(department_id)
            if dept is None or int(dept["company_id"]) != int(company_id):
                raise ValueError("Departman bulunamadı.")
            department_id = int(department_id)
        return {
            "title": require_text(data, "title", "İlan başlığı zorunludur."),
            "department_id": department_id,
            "description": clean_text(data.get("description")),
            "requirements": clean_text(data.get("requirements")),
            "location": clean_text(data.get("location")),
            "employment_type": require_choice(
                data.get("employment_type") or "full-time", EMPLOYMENT_TYPES, "Geçersiz çalışma şekli."
            ),
            "salary_min": salary_min,
            "salary_max": salary_max,
            "status": require_choice(data.get("status") or "draft", JOB_STATUSES, "Geçersiz ilan durumu."),
        }

    def create_job(self, data: dict, actor: Optional[str] = None) -> dict:
        if data.get("company_id") is None:
            raise ValueError("Şirket seçimi zorunludur.")
        company_id = int(data["company_id"])
        self._found(self.db.companies.get(company_id), "Şirket bulunamadı.")
        clean = self._validate_job(company_id, data)
        job_id = self.db.jobs.create(company_id, clean)
        self.audit(actor, "create", "job", job_id, clean["title"], company_id)
        return self.get_job(job_id)

    def update_job(self, job_id: int, data: dict, actor: Optional[str] = None) -> dict:
        current = self.get_job(job_id)
        merged = {k: data[k] if k in data else current.get(k) for k in _JOB_FIELDS}
        clean = self._validate_job(int(current["company_id"]), merged)
        self.db.jobs.update(job_id, clean)
        self.audit(actor, "update", "job", job_id, sorted(k for k in data if k in _JOB_FIELDS), current["company_id"])
        return self.get_job(job_id)

    def delete_job(self, job_id: int, actor: Optional[str] = None) -> None:
        current = self.get_job(job_id)
        self.db.jobs.delete(job_id)
        self.audit(actor, "delete", "job", job_id, current["title"], current["company_id"])

    # -----------------
    # Başvurular
    # -----------------
    def list_applications(
        self,
        job_id: Optional[int] = None,
        status: Optional[str] = None,
        company_id: Optional[int] = None,
    ) -> List[dict]:
        return rows_to_dicts(self.db.jobs.application_list(job_id, status, company_id))

    def get_application(self, app_id: int) -> dict:
        return self._found(self.db.jobs.application_get(app_id), "Başvuru bulunamadı.")

    def create_application(self, data: dict, actor: Optional[str] = None) -> dict:
        if data.get("job_id") is None:
            raise ValueError("İlan seçimi zorunludur.")
        job = self.get_job(data["job_id"])
        if job["status"] != "active":
            raise ValueError("Bu ilan başvuruya kapalı.")
        clean = {
            "job_id": int(job["id"]),
            "candidate_name": require_text(data, "candidate_name", "Aday adı zorunludur."),
            "candidate_email": require_text(data, "candidate_email", "Aday e-postası zorunludur."),
            "candidate_phone": clean_text(data.get("candidate_phone")),
            "resume_url": clean_text(data.get("resume_url")),
            "cover_letter": clean_text(data.get("cover_letter")),
            "notes": clean_text(data.get("notes")),
        }
        if not is_valid_email(clean["candidate_email"]):
            raise ValueError("Geçersiz e-posta formatı.")
        app_id = self.db.jobs.application_create(clean)
        self.audit(actor, "create", "job_application", app_id, {"job_id": job["id"]}, job["company_id"])
        self.activity("application_received", f"{clean['candidate_name']} {job['title']} ilanına başvurdu", app_id, actor)
        return self.get_application(app_id)

    def update_application_status(
        self,
        app_id: int,
        status: str,
        notes: Optional[str] = None,
        actor: Optional[str] = None,
    ) -> dict:
        current = self.get_application(app_id)
        status = require_choice(status, APPLICATION_STATUSES, "Geçersiz başvuru durumu.")
        if current["status"] in TERMINAL_APPLICATION_STATUSES and status != current["status"]:
            raise ValueError("Sonuçlanmış başvurunun durumu değiştirilemez.")
        self.db.jobs.application_set_status(app_id, status, notes)
        self.audit(actor, "set_status", "job_application", app_id, {"from": current["status"], "to": status}, current["company_id"])
        return self.get_application(app_id)

    def delete_application(self, app_id: int, actor: Optional[str] = None) -> None:
        current = self.get_application(app_id)
        self.db.jobs.application_delete(app_id)
        self.audit(actor, "delete", "job_application", app_id, None, current["company_id"])

    def pending_applications(self, company_id: Optional[int] = None) -> int:
        return self.db.jobs.application_count("submitted", company_id)

    # -----------------
    # Mülakatlar
    # -----------------
    def list_interviews(self, application_id: Optional[int] = None) -> List[dict]:
        return rows_to_dicts(self.db.jobs.interview_list(application_id))

    def get_interview(self, interview_id: int) -> dict:
        return self._found(self.db.jobs.interview_get(interview_id), "Mülakat bulunamadı.")

    def _validate_interview(self, data: dict) -> dict:
        rating = data.get("rating")
        if rating is not None:
            n = parse_number_strict(rating)
            if n is None or n != int(n) or not 1 <= n <= 5:
                raise ValueError("Mülakat puanı 1 ile 5 arasında olmalıdır.")
            rating = int(n)
        interviewer_id = data.get("interviewer_id")
        if interviewer_id is not None:
            self._found(self.db.users.get(interviewer_id), "Mülakatçı bulunamadı.")
        return {
            "interviewer_id": interviewer_id,
            "scheduled_at": require_text(data, "scheduled_at", "Mülakat zamanı zorunludur."),
            "interview_type": clean_text(data.get("interview_type")),
            "status": require_choice(data.get("status") or "scheduled", INTERVIEW_STATUSES, "Geçersiz mülakat durumu."),
            "feedback": clean_text(data.get("feedback")),
            "rating": rating,
        }

    def create_interview(self, data: dict, actor: Optional[str] = None) -> dict:
        if data.get("application_id") is None:
            raise ValueError("Başvuru seçimi zorunludur.")
        application = self.get_application(data["application_id"])
        if application["status"] in TERMINAL_APPLICATION_STATUSES:
            raise ValueError("Sonuçlanmış başvuru için mülakat planlanamaz.")
        clean = self._validate_interview(data)
        clean["application_id"] = int(application["id"])
        interview_id = self.db.jobs.interview_create(clean)
        if application["status"] in ("submitted", "screening"):
            self.db.jobs.application_set_status(application["id"], "interview")
        self.audit(actor, "create", "interview", interview_id, {"application_id": application["id"]}, application["company_id"])
        return self.get_interview(interview_id)

    def update_interview(self, interview_id: int, data: dict, actor: Optional[str] = None) -> dict:
        current = self.get_interview(interview_id)
        merged = {k: data[k] if k in data else current.get(k) for k in _INTERVIEW_FIELDS}
        clean = self._validate_interview(merged)
        self.db.jobs.interview_update(interview_id, clean)
        self.audit(actor, "update", "interview", interview_id, sorted(k for k in data if k in _INTERVIEW_FIELDS))
        return self.get_interview(interview_id)

    def delete_interview(self, interview_id: int, actor: Optional[str] = None) -> None:
        self.get_interview(interview_id)
        self.db.jobs.interview_delete(interview_id)
        self.audit(actor, "delete", "interview", interview_id)
