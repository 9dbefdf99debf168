# -*- coding: utf-8 -*-
"""İstek gövdeleri (pydantic v2).

Alanların çoğu opsiyonel: zorunluluk ve format kontrolleri servis katmanında
yapılır, böylece hata mesajları tek tip ve Türkçe kalır.
"""

from __future__ import annotations

from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict

Number = Union[float, int, str]


class _In(BaseModel):
    model_config = ConfigDict(extra="ignore")

    def data(self) -> dict:
        return self.model_dump(exclude_unset=True)


# -----------------
# Şirket / Kullanıcı
# -----------------
class CompanyIn(_In):
    name: Optional[str] = None
    industry: Optional[str] = None
    address: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    website: Optional[str] = None
    tax_number: Optional[str] = None
    description: Optional[str] = None


class UserIn(_In):
    email: Optional[str] = None
    password: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    phone: Optional[str] = None
    company_id: Optional[int] = None
    role: Optional[str] = None
    is_active: Optional[bool] = None


# -----------------
# Organizasyon / Personel
# -----------------
class DepartmentIn(_In):
    company_id: Optional[int] = None
    name: Optional[str] = None
    description: Optional[str] = None
    manager_id: Optional[int] = None
    budget: Optional[Number] = None


class EmployeeIn(_In):
    company_id: Optional[int] = None
    user_id: Optional[int] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    department_id: Optional[int] = None
    position: Optional[str] = None
    start_date: Optional[str] = None
    salary: Optional[Number] = None
    status: Optional[str] = None
    address: Optional[str] = None
    emergency_contact: Optional[str] = None
    notes: Optional[str] = None


class StatusIn(_In):
    status: str
    notes: Optional[str] = None


# -----------------
# İzin / Performans / Bordro
# -----------------
class LeaveIn(_In):
    employee_id: Optional[int] = None
    leave_type: Optional[str] = None
    start_date: Optional[str] = None
    end_date: Optional[str] = None
    reason: Optional[str] = None


class LeaveRejectIn(_In):
    reason: Optional[str] = None


class PerformanceIn(_In):
    employee_id: Optional[int] = None
    review_period: Optional[str] = None
    score: Optional[Number] = None
    goals: Optional[str] = None
    achievements: Optional[str] = None
    feedback: Optional[str] = None
    reviewed_by: Optional[int] = None
    review_date: Optional[str] = None


class PayrollIn(_In):
    employee_id: Optional[int] = None
    month: Optional[str] = None
    base_salary: Optional[Number] = None
    bonuses: Optional[Number] = None
    deductions: Optional[Number] = None
    payment_date: Optional[str] = None


class PayrollPayIn(_In):
    payment_date: Optional[str] = None


class PayrollGenerateIn(_In):
    company_id: int
    month: Optional[str] = None


# -----------------
# Eğitim / İşe alım
# -----------------
class TrainingIn(_In):
    company_id: Optional[int] = None
    title: Optional[str] = None
    description: Optional[str] = None
    instructor: Optional[str] = None
    category: Optional[str] = None
    start_date: Optional[str] = None
    end_date: Optional[str] = None
    capacity: Optional[Number] = None
    status: Optional[str] = None


class EnrollIn(_In):
    employee_id: int


class EnrollmentCompleteIn(_In):
    score: Optional[Number] = None


class JobIn(_In):
    company_id: Optional[int] = None
    title: Optional[str] = None
    department_id: Optional[int] = None
    description: Optional[str] = None
    requirements: Optional[str] = None
    location: Optional[str] = None
    employment_type: Optional[str] = None
    salary_min: Optional[Number] = None
    salary_max: Optional[Number] = None
    status: Optional[str] = None


class ApplicationIn(_In):
    job_id: Optional[int] = None
    candidate_name: Optional[str] = None
    candidate_email: Optional[str] = None
    candidate_phone: Optional[str] = None
    resume_url: Optional[str] = None
    cover_letter: Optional[str] = None
    notes: Optional[str] = None


class InterviewIn(_In):
    application_id: Optional[int] = None
    interviewer_id: Optional[int] = None
    scheduled_at: Optional[str] = None
    interview_type: Optional[str] = None
    status: Optional[str] = None
    feedback: Optional[str] = None
    rating: Optional[int] = None


# -----------------
# Bildirim / Mesaj / Ayar
# -----------------
class NotificationIn(_In):
    user_id: Optional[str] = None
    title: Optional[str] = None
    message: Optional[str] = None
    type: Optional[str] = None
    action_url: Optional[str] = None


class MessageIn(_In):
    to_user_id: Optional[str] = None
    subject: Optional[str] = None
    content: Optional[str] = None


class SettingIn(_In):
    category: Optional[str] = None
    key: Optional[str] = None
    value: Any = None
